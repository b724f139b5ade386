"""Port deciding whether the remote content API should be used at all."""

from abc import ABC, abstractmethod


class ReachabilityProbe(ABC):
    @abstractmethod
    async def is_reachable(self) -> bool:
        """Return True when service calls should try the remote API first."""
        ...

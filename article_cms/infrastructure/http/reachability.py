"""Reachability probes deciding between the remote API and the local store."""

from article_cms.application.interfaces import ReachabilityProbe


class StaticReachabilityProbe(ReachabilityProbe):
    """Answers with a fixed, configured value.

    The default deployment runs with ``reachable=False`` so every call is
    served by the local store; flip ``REMOTE_API_ENABLED`` to use the backend.
    """

    def __init__(self, reachable: bool = False):
        self._reachable = reachable

    async def is_reachable(self) -> bool:
        return self._reachable

from .reachability_probe import ReachabilityProbe
from .record_store import RecordStore
from .remote_content_api import RemoteContentApi

__all__ = [
    "ReachabilityProbe",
    "RecordStore",
    "RemoteContentApi",
]

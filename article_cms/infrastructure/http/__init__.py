"""Outbound HTTP package for the remote content API."""

from .reachability import StaticReachabilityProbe
from .remote_content_api import HttpContentApi
from .timeout_client import DEFAULT_TIMEOUT_MS, TimeoutHttpClient

__all__ = [
    "DEFAULT_TIMEOUT_MS",
    "HttpContentApi",
    "StaticReachabilityProbe",
    "TimeoutHttpClient",
]

"""
Requesters for the Toss Payments API.
"""
from .base import Requester, AbstractRequester
from .builder import RequesterBuilder
from .headers import build_default_headers, mask_headers_for_logging
from .httpx_requester import HttpxRequester, is_success_status

__all__ = [
    "Requester",
    "AbstractRequester",
    "RequesterBuilder",
    "HttpxRequester",
    "build_default_headers",
    "mask_headers_for_logging",
    "is_success_status",
]

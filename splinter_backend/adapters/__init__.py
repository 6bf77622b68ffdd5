"""Adapter layer package for ledger backend integration boundaries."""

from .errors import BackendClientError, BadRequestError, InternalError
from .interfaces import BackendClientPort
from .service_address import ServiceAddress, adapter_parse_service_address
from .splinter_client import SplinterBackendClient

__all__ = [
    "BackendClientError",
    "BackendClientPort",
    "BadRequestError",
    "InternalError",
    "ServiceAddress",
    "SplinterBackendClient",
    "adapter_parse_service_address",
]

from .client import AsyncWhatsOnChainClient, WhatsOnChainClient
from .config_types import ClientConfig, normalize_network
from .errors import NetworkError, RequestSetupError, ServerError, WocClientError
from .result import Err, Ok, acapture, capture

__all__ = [
    "WhatsOnChainClient",
    "AsyncWhatsOnChainClient",
    "ClientConfig",
    "normalize_network",
    "WocClientError",
    "ServerError",
    "NetworkError",
    "RequestSetupError",
    "Ok",
    "Err",
    "capture",
    "acapture",
]

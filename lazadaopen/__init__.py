from .client import LazadaClient
from .config import REGIONS, LazadaSettings, load_settings
from .exceptions import ApiError, ConfigurationError, LazadaError, TransportError
from .request import LazadaRequest, LazadaResponse
from .signature import build_url, generate_signature

__all__ = [
    "ApiError",
    "ConfigurationError",
    "LazadaClient",
    "LazadaError",
    "LazadaRequest",
    "LazadaResponse",
    "LazadaSettings",
    "REGIONS",
    "TransportError",
    "build_url",
    "generate_signature",
    "load_settings",
]

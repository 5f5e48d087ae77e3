from .client import ActionResult, FourPlayerChessClient
from .config_types import ClientConfig
from .errors import ApiError, AuthError, FourPcClientError, NetworkError
from .stream import LineStream

__all__ = [
    "FourPlayerChessClient",
    "ActionResult",
    "ClientConfig",
    "LineStream",
    "FourPcClientError",
    "ApiError",
    "AuthError",
    "NetworkError",
]

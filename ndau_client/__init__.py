"""Client for the ndau node HTTP API."""

from .client import Ndau, build_request, new
from .config import NdauConfig, load_config
from .errors import NdauError, NdauStatusError, RequestBuildError, UnsupportedMethodError
from .transport import HttpClient, SessionTransport

__all__ = [
    "HttpClient",
    "Ndau",
    "NdauConfig",
    "NdauError",
    "NdauStatusError",
    "RequestBuildError",
    "SessionTransport",
    "UnsupportedMethodError",
    "build_request",
    "load_config",
    "new",
]

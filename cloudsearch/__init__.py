from . import document, domain_config, ql, search
from .client import CloudSearch, PreparedRequest
from .core import (
    Config,
    HTTPMethod,
    JSONCodec,
    JSONParam,
    Operation,
    RequestType,
    Response,
    setup_logging,
)
from .core.exceptions import (
    BadRequestError,
    BaseError,
    ConfigError,
    DecodeError,
    NotSupportedError,
)
from .transport import HTTPXTransport, TransportResponse

__all__ = [
    "BadRequestError",
    "BaseError",
    "CloudSearch",
    "Config",
    "ConfigError",
    "DecodeError",
    "HTTPMethod",
    "HTTPXTransport",
    "JSONCodec",
    "JSONParam",
    "NotSupportedError",
    "Operation",
    "PreparedRequest",
    "RequestType",
    "Response",
    "TransportResponse",
    "document",
    "domain_config",
    "ql",
    "search",
    "setup_logging",
]

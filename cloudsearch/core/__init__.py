from ._codec import Codec, JSONCodec
from ._log_helper import get_logger, setup_logging, warn
from ._operation import (
    API_VERSION,
    HTTPMethod,
    JSONParam,
    Operation,
    RequestType,
)
from ._operation_parser import OperationParser
from ._response import Response
from .config import Config
from .data_model import DataModel, DataModelField

__all__ = [
    "API_VERSION",
    "Codec",
    "Config",
    "DataModel",
    "DataModelField",
    "HTTPMethod",
    "JSONCodec",
    "JSONParam",
    "Operation",
    "OperationParser",
    "RequestType",
    "Response",
    "get_logger",
    "setup_logging",
    "warn",
]

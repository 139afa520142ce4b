from __future__ import annotations

import json
from enum import Enum
from typing import Any, Callable

from .data_model import DataModel

API_VERSION = "2013-01-01"


class RequestType(str, Enum):
    """CloudSearch API surface targeted by an operation.

    Attributes:
        SEARCH: Search and suggest requests.
        DOCUMENT: Document batch uploads.
        CONFIG: Configuration (administrative) requests.
    """

    SEARCH = "search"
    DOCUMENT = "doc"
    CONFIG = "config"


class HTTPMethod(str, Enum):
    GET = "get"
    POST = "post"


class JSONParam(DataModel):
    """Parameter value rendered as JSON when the request is encoded.

    Attributes:
        value: Value to render.
    """

    value: Any

    def __init__(self, value: Any = None, **kwargs):
        super().__init__(value=value, **kwargs)


class Operation(DataModel):
    """Operation on AWS CloudSearch.

    Attributes:
        request_type: API surface, fixed at creation.
        http_method: HTTP method.
        path: Request path, before the API version prefix is applied.
        params: Flat wire parameters.
        data: Raw body payload (document batches).
        headers: Extra request headers.
        before_request: Callback invoked with the operation and the
            config before host resolution. It returns the operation
            to dispatch.
        api_version: CloudSearch API version.
    """

    request_type: RequestType = RequestType.SEARCH
    http_method: HTTPMethod = HTTPMethod.POST
    path: str = "/"
    params: dict[str, Any] = dict()
    data: Any = None
    headers: list[tuple[str, str]] = []
    before_request: Callable[[Operation, Any], Operation] | None = None
    api_version: str = API_VERSION

    def __str__(self) -> str:
        str = f"{self.http_method.value.upper()} {self.request_type.value}"
        str = f"{str} {self.path}"
        if self.params:
            str = f"{str} {json.dumps(self.params, default=self._str_value)}"
        return str

    def _str_value(self, value: Any) -> Any:
        if isinstance(value, JSONParam):
            return value.value
        return repr(value)

from __future__ import annotations

from typing import Any

from ._operation import HTTPMethod, Operation, RequestType


class OperationParser:
    operation: Operation

    def __init__(self, operation: Operation):
        self.operation = operation

    def type_equals(self, request_type: RequestType | str) -> bool:
        return self.operation.request_type == RequestType(request_type)

    def method_equals(self, http_method: HTTPMethod | str) -> bool:
        if isinstance(http_method, str):
            http_method = HTTPMethod(http_method.lower())
        return self.operation.http_method == http_method

    def get_params(self) -> dict[str, Any]:
        return self.operation.params

    def get_param(self, name: str) -> Any:
        return self.operation.params.get(name)

    def put_param(self, name: str, value: Any) -> None:
        if value is None:
            return
        self.operation.params[name] = value

    def get_data(self) -> Any:
        return self.operation.data

    def get_headers(self) -> list[tuple[str, str]]:
        return list(self.operation.headers)

    def get_path(self) -> str:
        return self.operation.path

    def get_api_version(self) -> str:
        return self.operation.api_version

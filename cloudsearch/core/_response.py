from typing import Any, Generic, TypeVar

from .data_model import DataModel

T = TypeVar("T")


class Response(DataModel, Generic[T]):
    result: T
    """Decoded response body."""

    native: dict[str, Any] | None = None
    """Native transport response (status code, headers)."""

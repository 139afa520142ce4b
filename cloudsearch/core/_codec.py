__all__ = ["Codec", "JSONCodec"]

import json
from decimal import Decimal
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Codec(Protocol):
    def encode(self, value: Any) -> str: ...

    def decode(self, value: str) -> Any: ...


class JSONCodec:
    """JSON codec backed by the standard json module.

    Decimals are encoded as JSON numbers.
    """

    def encode(self, value: Any) -> str:
        return json.dumps(value, separators=(",", ":"), default=_default)

    def decode(self, value: str) -> Any:
        return json.loads(value)


def _default(value: Any) -> Any:
    if isinstance(value, Decimal):
        if value == value.to_integral_value():
            return int(value)
        return float(value)
    raise TypeError(
        f"Object of type {type(value).__qualname__} is not JSON serializable"
    )

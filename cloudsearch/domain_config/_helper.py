from __future__ import annotations

import re
from collections.abc import Mapping
from enum import Enum
from typing import Any

from cloudsearch.core import DataModel, JSONParam
from cloudsearch.core.exceptions import BadRequestError

from ._models import IndexField


def camelize(name: str) -> str:
    return "".join(p[:1].upper() + p[1:] for p in re.split(r"_+", name))


def is_empty(value: Any) -> bool:
    return value is None or value == [] or value == ""


def names(base: str, values: Any) -> dict[str, Any]:
    """Render names as 1-indexed "Base.member.N" parameters."""
    if values is None:
        return dict()
    if isinstance(values, (str, bytes)) or not isinstance(
        values, (list, tuple)
    ):
        values = [values]
    return {
        f"{base}.member.{index}": name
        for index, name in enumerate(values, 1)
    }


def flatten(params: Mapping[str, Any]) -> dict[str, Any]:
    """Flatten nested parameters into AWS query parameters.

    Mappings and data models nest with ".", lists use ".member.N",
    booleans render as "true" or "false". JSON parameters are
    kept for the codec.
    """
    flat: dict[str, Any] = dict()
    for key, value in params.items():
        _flatten(value, key, flat)
    return flat


def _flatten(value: Any, prefix: str, flat: dict[str, Any]) -> None:
    if value is None:
        return
    if isinstance(value, JSONParam):
        flat[prefix] = value
    elif isinstance(value, IndexField):
        _flatten(value.to_native(), prefix, flat)
    elif isinstance(value, DataModel):
        _flatten(value.to_dict(exclude_none=True, by_alias=True), prefix, flat)
    elif isinstance(value, Mapping):
        for k, v in value.items():
            _flatten(v, f"{prefix}.{k}", flat)
    elif isinstance(value, (list, tuple)):
        for index, v in enumerate(value, 1):
            _flatten(v, f"{prefix}.member.{index}", flat)
    elif isinstance(value, bool):
        flat[prefix] = "true" if value else "false"
    elif isinstance(value, Enum):
        flat[prefix] = value.value
    else:
        flat[prefix] = value


def to_bool(value: Any) -> bool:
    return bool(value)


def to_policies(value: Any) -> Any:
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        return JSONParam(dict(value))
    raise BadRequestError(f"Invalid access policies {value!r}.")


def to_index_field(value: Any) -> Any:
    if isinstance(value, Mapping) and "type" in value and "name" in value:
        return IndexField.from_dict(dict(value))
    return value

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any, Callable

from cloudsearch.core import DataModel, JSONParam, get_logger
from cloudsearch.core.exceptions import BadRequestError

from ._models import SortDirection, to_config_dict

logger = get_logger(__name__)

MAX_SORT_FIELDS = 10
EMPTY_CONFIG = "{}"
ID_FIELDS = ("id", "_id")

_INTEGER = re.compile(r"^[+-]?\d+$")


class OptionNormalizer:
    """Turns search options into flat wire parameters.

    Each option is handled by the method registered for its name.
    Unknown options are ignored. Later options overwrite parameters
    produced by earlier ones.
    """

    _handlers: dict[str, Callable[[Any, dict[str, Any]], None]]

    def __init__(self) -> None:
        self._handlers = {
            "cursor": self._normalize_cursor,
            "expr": self._normalize_expr,
            "facet": self._normalize_facet,
            "fq": self._normalize_fq,
            "highlight": self._normalize_highlight,
            "options": self._normalize_qoptions,
            "qoptions": self._normalize_qoptions,
            "parser": self._normalize_qparser,
            "qparser": self._normalize_qparser,
            "partial": self._normalize_partial,
            "return": self._normalize_return,
            "size": self._normalize_size,
            "sort": self._normalize_sort,
            "start": self._normalize_start,
            "page": self._normalize_page,
        }

    def supports(self, name: str) -> bool:
        return name in self._handlers

    def normalize(
        self,
        name: str,
        value: Any,
        params: dict[str, Any],
    ) -> dict[str, Any]:
        """Normalize one option into the accumulated parameters.

        Args:
            name:
                Option name.
            value:
                Option value.
            params:
                Accumulated wire parameters, updated in place.

        Returns:
            The accumulated parameters.

        Raises:
            BadRequestError:
                The option value is malformed.
        """
        handler = self._handlers.get(name)
        if handler is None:
            logger.debug("Ignoring unknown search option", option=name)
            return params
        handler(value, params)
        return params

    def _normalize_cursor(self, value: Any, params: dict[str, Any]) -> None:
        _put(params, "cursor", _enum_value(value))

    def _normalize_expr(self, value: Any, params: dict[str, Any]) -> None:
        for name, expr in _pairs(value):
            _put(params, f"expr.{name}", expr)

    def _normalize_facet(self, value: Any, params: dict[str, Any]) -> None:
        for name, config in _named_entries(value):
            _put(params, f"facet.{name}", _named_config(config))

    def _normalize_fq(self, value: Any, params: dict[str, Any]) -> None:
        _put(params, "fq", value)

    def _normalize_highlight(
        self, value: Any, params: dict[str, Any]
    ) -> None:
        for name, config in _named_entries(value):
            _put(params, f"highlight.{name}", _named_config(config))

    def _normalize_qoptions(self, value: Any, params: dict[str, Any]) -> None:
        if value is None:
            qoptions: Any = EMPTY_CONFIG
        elif isinstance(value, str):
            qoptions = value
        elif isinstance(value, DataModel):
            qoptions = JSONParam(to_config_dict(value))
        elif isinstance(value, Mapping):
            qoptions = JSONParam(dict(value))
        elif isinstance(value, (list, tuple)):
            qoptions = JSONParam(dict(_pairs(value)))
        else:
            raise BadRequestError(
                f"Invalid query parser options {value!r}."
            )
        _put(params, "q.options", qoptions)

    def _normalize_qparser(self, value: Any, params: dict[str, Any]) -> None:
        _put(params, "q.parser", _enum_value(value))

    def _normalize_partial(self, value: Any, params: dict[str, Any]) -> None:
        _put(params, "partial", bool(value))

    def _normalize_return(self, value: Any, params: dict[str, Any]) -> None:
        fields = [str(f) for f in _wrap(value) if f not in ID_FIELDS]
        _put(params, "return", ",".join(fields))

    def _normalize_size(self, value: Any, params: dict[str, Any]) -> None:
        _put(params, "size", to_integer(value))

    def _normalize_sort(self, value: Any, params: dict[str, Any]) -> None:
        if isinstance(value, Mapping):
            value = list(value.items())
        elif isinstance(value, tuple):
            value = [value]
        sort = _wrap(value)[:MAX_SORT_FIELDS]
        sort = [_normalize_sort_entry(s) for s in sort]
        _put(params, "sort", ",".join(sort))

    def _normalize_start(self, value: Any, params: dict[str, Any]) -> None:
        _put(params, "start", to_integer(value))

    def _normalize_page(self, value: Any, params: dict[str, Any]) -> None:
        _put(params, "page", to_integer(value))


def to_integer(value: Any) -> int:
    """Coerce an option value to an integer.

    Numbers are rounded half away from zero. Strings must hold a
    base-10 integer. Other values are converted to strings first.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if isinstance(value, int):
            return value
        if not math.isfinite(value):
            raise BadRequestError(f"Cannot convert {value!r} to an integer.")
        rounded = Decimal(value).to_integral_value(rounding=ROUND_HALF_UP)
        return int(rounded)
    if not isinstance(value, str):
        value = str(value)
    if not _INTEGER.match(value):
        raise BadRequestError(f"Cannot convert {value!r} to an integer.")
    return int(value)


def _put(params: dict[str, Any], key: str, value: Any) -> None:
    # re-inserting moves the key last
    params.pop(key, None)
    params[key] = value


def _wrap(value: Any) -> list:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _enum_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


def _pairs(value: Any) -> list[tuple[Any, Any]]:
    if isinstance(value, Mapping):
        return list(value.items())
    pairs = []
    for entry in _wrap(value):
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            raise BadRequestError(f"Expected a name and value, {entry!r}.")
        pairs.append((entry[0], entry[1]))
    return pairs


def _named_entries(value: Any) -> list[tuple[Any, Any]]:
    if isinstance(value, Mapping):
        return list(value.items())
    entries = []
    for entry in _wrap(value):
        if isinstance(entry, (list, tuple)) and len(entry) == 2:
            entries.append((entry[0], entry[1]))
        else:
            entries.append((entry, None))
    return entries


def _named_config(config: Any) -> Any:
    if config is None:
        return EMPTY_CONFIG
    if isinstance(config, str):
        return config
    if isinstance(config, DataModel):
        return JSONParam(to_config_dict(config))
    if isinstance(config, Mapping):
        return JSONParam(dict(config))
    if isinstance(config, (list, tuple)):
        try:
            return JSONParam(dict(config))
        except (TypeError, ValueError):
            return EMPTY_CONFIG
    return EMPTY_CONFIG


def _normalize_sort_entry(entry: Any) -> str:
    if isinstance(entry, str):
        if entry.startswith("-"):
            return _normalize_sort_entry((entry[1:], SortDirection.DESC))
        return _normalize_sort_entry((entry, SortDirection.ASC))
    if isinstance(entry, (list, tuple)) and len(entry) == 2:
        field, direction = entry
        try:
            direction = SortDirection(_enum_value(direction))
        except ValueError:
            raise BadRequestError(
                f"Invalid sort direction {direction!r} for {field}."
            )
        return f"{field} {direction.value}"
    raise BadRequestError(f"Invalid sort {entry!r}.")

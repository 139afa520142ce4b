from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable

from cloudsearch.core.exceptions import BadRequestError

from ._options import OptionNormalizer

DEFAULT_SIZE = 10

_normalizer = OptionNormalizer()


def build_search_params(
    term: Any,
    options: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None,
) -> dict[str, Any]:
    """Compile a search term and options into wire parameters.

    Options are applied in order; a later option overwrites the
    parameters of an earlier one. None and empty values are dropped.
    When both start and page are given, page is discarded. Otherwise
    page is converted into start using size (default 10).

    Args:
        term:
            Search term, a string or a registered query value.
        options:
            Search options as a mapping or a sequence of pairs.

    Returns:
        Wire parameters.
    """
    params: dict[str, Any] = {"q": term}
    for name, value in option_items(options):
        _normalizer.normalize(name, value, params)
    params = {k: v for k, v in params.items() if not _is_empty(v)}
    if "page" in params:
        page = params.pop("page")
        if "start" not in params:
            size = params.get("size", DEFAULT_SIZE)
            params["start"] = (page - 1) * size
    return params


def option_items(
    options: Mapping[str, Any] | Iterable[tuple[str, Any]] | None,
) -> list[tuple[str, Any]]:
    if options is None:
        return []
    if isinstance(options, Mapping):
        items = list(options.items())
    else:
        items = []
        for option in options:
            if not isinstance(option, (list, tuple)) or len(option) != 2:
                raise BadRequestError(f"Invalid search option {option!r}.")
            items.append((option[0], option[1]))
    return [(_option_name(name), value) for name, value in items]


def _option_name(name: Any) -> str:
    name = str(name)
    # return_ stands in for the reserved word
    if name.endswith("_"):
        return name[:-1]
    return name


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable

from cloudsearch.core import HTTPMethod, Operation, RequestType

from ._compiler import build_search_params, option_items
from ._options import to_integer


def search(
    term: Any,
    options: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None,
    http_method: HTTPMethod | str = HTTPMethod.POST,
    **kwargs: Any,
) -> Operation:
    """Create a search operation.

    Options may be given as a mapping or a sequence of pairs, as
    keyword arguments, or both (keyword arguments are applied last).
    Use "return_" as the keyword for the return option.

    Args:
        term:
            Search term. A string, or a query value such as a
            cloudsearch.ql expression, which also selects the
            structured query parser.
        options:
            Search options: cursor, expr, facet, fq, highlight,
            partial, options/qoptions, parser/qparser, return, size,
            sort, start and page. Unknown options are ignored.
        http_method:
            HTTP method, post sends parameters as a form body.

    Returns:
        Search operation.

    Raises:
        BadRequestError:
            An option value is malformed.
    """
    items = option_items(options) + option_items(kwargs)
    return Operation(
        request_type=RequestType.SEARCH,
        http_method=HTTPMethod(http_method.lower()),
        path="/search",
        params=build_search_params(term, items),
    )


def suggest(
    term: str,
    suggester: str,
    size: int | str | None = None,
    http_method: HTTPMethod | str = HTTPMethod.GET,
) -> Operation:
    """Create a suggest operation.

    Args:
        term:
            Prefix to get suggestions for.
        suggester:
            Name of the suggester.
        size:
            Maximum number of suggestions.
        http_method:
            HTTP method.

    Returns:
        Suggest operation.
    """
    params: dict[str, Any] = {"q": term, "suggester": suggester}
    if size is not None:
        params["size"] = to_integer(size)
    return Operation(
        request_type=RequestType.SEARCH,
        http_method=HTTPMethod(http_method.lower()),
        path="/suggest",
        params=params,
    )

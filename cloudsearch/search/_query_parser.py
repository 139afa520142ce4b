from __future__ import annotations

from typing import Any, Callable

from cloudsearch.core.exceptions import NotSupportedError
from cloudsearch.ql import (
    And,
    MatchAll,
    Near,
    Not,
    Or,
    Phrase,
    Prefix,
    Range,
    Term,
)

from ._models import QueryParserMode


class QueryAdapter:
    to_query: Callable[[Any], str]
    mode: QueryParserMode | None

    def __init__(
        self,
        to_query: Callable[[Any], str],
        mode: QueryParserMode | None = QueryParserMode.STRUCTURED,
    ):
        self.to_query = to_query
        self.mode = mode


class QueryParser:
    """Translates query values into query strings.

    A string passes through unchanged and leaves the parser mode
    undetermined. Other query types must be registered with an
    adapter that renders them; the adapter's mode is then forced
    on the request.
    """

    _adapters: dict[type, QueryAdapter] = dict()

    @classmethod
    def register(
        cls,
        type: type,
        to_query: Callable[[Any], str],
        mode: QueryParserMode | None = QueryParserMode.STRUCTURED,
    ) -> None:
        """Register a query adapter.

        Args:
            type:
                Query value type. Subclasses are matched too.
            to_query:
                Function rendering a value into a query string.
            mode:
                Query parser mode forced when the adapter is used.
        """
        cls._adapters[type] = QueryAdapter(to_query=to_query, mode=mode)

    @classmethod
    def unregister(cls, type: type) -> None:
        cls._adapters.pop(type, None)

    @classmethod
    def parse(cls, query: Any) -> tuple[str | None, QueryParserMode | None]:
        """Parse a query value.

        Args:
            query:
                None, a query string or a registered query value.

        Returns:
            Query string and the parser mode, if the adapter sets one.

        Raises:
            NotSupportedError:
                No adapter is registered for the query type.
        """
        if query is None:
            return None, None
        if isinstance(query, str):
            return query, None
        adapter = cls._get_adapter(query)
        if adapter is None:
            raise NotSupportedError(
                f"Missing CloudSearch query parser for type "
                f"{type(query).__qualname__}."
            )
        return adapter.to_query(query), adapter.mode

    @classmethod
    def _get_adapter(cls, query: Any) -> QueryAdapter | None:
        for base in type(query).__mro__:
            if base in cls._adapters:
                return cls._adapters[base]
        return None


for _type in (And, MatchAll, Near, Not, Or, Phrase, Prefix, Range, Term):
    QueryParser.register(_type, lambda expr: expr.to_query())

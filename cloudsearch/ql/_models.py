from __future__ import annotations

from typing import Any, Union

from cloudsearch.core.data_model import DataModel


def _str_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace("'", "\\'")
        return f"'{escaped}'"
    return str(value)


def _str_options(**options: Any) -> str:
    str = ""
    for key, value in options.items():
        if value is not None:
            str = f"{str} {key}={value}"
    return str


class Term(DataModel):
    """Term expression.

    Attributes:
        value: Term to match.
        field: Field to search, all text fields when None.
        boost: Relevance boost.
    """

    value: Any
    field: str | None = None
    boost: float | None = None

    def to_query(self) -> str:
        options = _str_options(field=self.field, boost=self.boost)
        return f"(term{options} {_str_value(self.value)})"

    def __str__(self) -> str:
        return self.to_query()


class Phrase(DataModel):
    """Phrase expression.

    Attributes:
        value: Phrase to match.
        field: Field to search.
        boost: Relevance boost.
    """

    value: str
    field: str | None = None
    boost: float | None = None

    def to_query(self) -> str:
        options = _str_options(field=self.field, boost=self.boost)
        return f"(phrase{options} {_str_value(self.value)})"

    def __str__(self) -> str:
        return self.to_query()


class Prefix(DataModel):
    """Prefix expression.

    Attributes:
        value: Prefix to match.
        field: Field to search.
        boost: Relevance boost.
    """

    value: str
    field: str | None = None
    boost: float | None = None

    def to_query(self) -> str:
        options = _str_options(field=self.field, boost=self.boost)
        return f"(prefix{options} {_str_value(self.value)})"

    def __str__(self) -> str:
        return self.to_query()


class Near(DataModel):
    """Sloppy phrase expression.

    Attributes:
        value: Phrase to match.
        distance: Maximum distance between terms.
        field: Field to search.
        boost: Relevance boost.
    """

    value: str
    distance: int | None = None
    field: str | None = None
    boost: float | None = None

    def to_query(self) -> str:
        options = _str_options(
            field=self.field,
            distance=self.distance,
            boost=self.boost,
        )
        return f"(near{options} {_str_value(self.value)})"

    def __str__(self) -> str:
        return self.to_query()


class Range(DataModel):
    """Range expression.

    Open bounds are None. Inclusive bounds render with square
    brackets, exclusive or open bounds with braces.

    Attributes:
        field: Field to search.
        lower: Lower bound.
        upper: Upper bound.
        include_lower: Whether the lower bound is included.
        include_upper: Whether the upper bound is included.
        boost: Relevance boost.
    """

    field: str
    lower: Any = None
    upper: Any = None
    include_lower: bool = True
    include_upper: bool = False
    boost: float | None = None

    def to_query(self) -> str:
        options = _str_options(field=self.field, boost=self.boost)
        return f"(range{options} {self.to_range()})"

    def to_range(self) -> str:
        if self.lower is None:
            lower = "{"
        else:
            lower = "[" if self.include_lower else "{"
            lower = f"{lower}{_str_value(self.lower)}"
        if self.upper is None:
            upper = "}"
        else:
            upper = "]" if self.include_upper else "}"
            upper = f"{_str_value(self.upper)}{upper}"
        return f"{lower},{upper}"

    def __str__(self) -> str:
        return self.to_query()


class MatchAll(DataModel):
    """Expression matching all documents."""

    def to_query(self) -> str:
        return "matchall"

    def __str__(self) -> str:
        return self.to_query()


class And(DataModel):
    """And expression.

    Attributes:
        exprs: Expressions that must all match.
        boost: Relevance boost.
    """

    exprs: list[Expression]
    boost: float | None = None

    def __init__(self, *exprs: Expression, **kwargs: Any):
        if exprs:
            kwargs["exprs"] = list(exprs)
        super().__init__(**kwargs)

    def to_query(self) -> str:
        options = _str_options(boost=self.boost)
        return f"(and{options} {' '.join(_to_query(e) for e in self.exprs)})"

    def __str__(self) -> str:
        return self.to_query()


class Or(DataModel):
    """Or expression.

    Attributes:
        exprs: Expressions of which at least one must match.
        boost: Relevance boost.
    """

    exprs: list[Expression]
    boost: float | None = None

    def __init__(self, *exprs: Expression, **kwargs: Any):
        if exprs:
            kwargs["exprs"] = list(exprs)
        super().__init__(**kwargs)

    def to_query(self) -> str:
        options = _str_options(boost=self.boost)
        return f"(or{options} {' '.join(_to_query(e) for e in self.exprs)})"

    def __str__(self) -> str:
        return self.to_query()


class Not(DataModel):
    """Not expression.

    Attributes:
        expr: Expression that must not match.
        boost: Relevance boost.
    """

    expr: Expression
    boost: float | None = None

    def to_query(self) -> str:
        options = _str_options(boost=self.boost)
        return f"(not{options} {_to_query(self.expr)})"

    def __str__(self) -> str:
        return self.to_query()


def _to_query(expr: Expression | str) -> str:
    if isinstance(expr, str):
        return _str_value(expr)
    return expr.to_query()


Expression = Union[
    Term,
    Phrase,
    Prefix,
    Near,
    Range,
    MatchAll,
    And,
    Or,
    Not,
    str,
]

And.model_rebuild()
Or.model_rebuild()
Not.model_rebuild()

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import field_serializer

from cloudsearch.core import DataModel, DataModelField
from cloudsearch.ql import Range


class QueryParserMode(str, Enum):
    """Query parser used to interpret the search term."""

    SIMPLE = "simple"
    STRUCTURED = "structured"
    LUCENE = "lucene"
    DISMAX = "dismax"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class FacetSort(str, Enum):
    BUCKET = "bucket"
    COUNT = "count"


class HighlightFormat(str, Enum):
    TEXT = "text"
    HTML = "html"


class FacetConfig(DataModel):
    """Facet configuration for a field.

    Attributes:
        sort: Sort facets by bucket value or by count.
        buckets: Facet values or ranges to count. Ranges may be given
            as strings (e.g. "[1970,1979]") or as Range expressions.
        size: Maximum number of facets to return.
    """

    sort: FacetSort | None = None
    buckets: list[str | Range] | None = None
    size: int | None = None

    @field_serializer("buckets")
    def _serialize_buckets(
        self, buckets: list[str | Range] | None
    ) -> list[str] | None:
        if buckets is None:
            return None
        return [b.to_range() if isinstance(b, Range) else b for b in buckets]


class HighlightConfig(DataModel):
    """Highlight configuration for a text field.

    Attributes:
        format: Format of the field data, text or html.
        max_phrases: Maximum number of occurrences to highlight.
        pre_tag: String prepended to each occurrence.
        post_tag: String appended to each occurrence.
    """

    format: HighlightFormat | None = None
    max_phrases: int | None = None
    pre_tag: str | None = None
    post_tag: str | None = None


class QueryOptions(DataModel):
    """Options for the query parser (q.options).

    Attributes:
        default_operator: Default operator, or a percentage for dismax.
        fields: Fields to search, optionally weighted ("title^5").
        operators: Operators disabled for the simple parser.
        phrase_fields: Fields used for phrase boosting (dismax).
        phrase_slop: Phrase deviation allowed for boosting (dismax).
        explicit_phrase_slop: Deviation allowed for quoted phrases.
        tie_breaker: Contribution of lower-scoring fields (dismax).
    """

    default_operator: str | None = DataModelField(
        default=None, alias="defaultOperator"
    )
    fields: list[str] | None = None
    operators: list[str] | None = None
    phrase_fields: list[str] | None = DataModelField(
        default=None, alias="phraseFields"
    )
    phrase_slop: int | None = DataModelField(default=None, alias="phraseSlop")
    explicit_phrase_slop: int | None = DataModelField(
        default=None, alias="explicitPhraseSlop"
    )
    tie_breaker: float | None = DataModelField(
        default=None, alias="tieBreaker"
    )


def to_config_dict(value: DataModel) -> dict[str, Any]:
    return value.to_dict(exclude_none=True, by_alias=True)

from __future__ import annotations

from enum import Enum
from typing import Any

from cloudsearch.core import DataModel, DataModelField


class IndexFieldType(str, Enum):
    """Permitted CloudSearch index field types."""

    DATE = "date"
    DOUBLE = "double"
    INT = "int"
    LATLON = "latlon"
    LITERAL = "literal"
    TEXT = "text"
    DATE_ARRAY = "date-array"
    DOUBLE_ARRAY = "double-array"
    INT_ARRAY = "int-array"
    LITERAL_ARRAY = "literal-array"
    TEXT_ARRAY = "text-array"


class IndexFieldOptions(DataModel):
    """Options for a CloudSearch index field.

    Options that do not apply to the field type are left out
    when the field is defined.

    Attributes:
        scheme: Analysis scheme name (text and text-array only).
        default: Value used when the document does not set one.
        facet: Facet information can be returned from the field.
        highlight: Highlights can be returned from the field.
        return_: Contents may be returned in search results.
        search: Contents are searchable.
        sort: Contents are usable for sort.
        source: Source field name, or list of names for arrays.
    """

    scheme: str | None = None
    default: str | None = None
    facet: bool = True
    highlight: bool = True
    return_: bool = DataModelField(default=True, alias="return")
    search: bool = True
    sort: bool = True
    source: str | list[str] | None = None


_SCALAR_OPTIONS = (
    "DefaultValue",
    "SourceField",
    "FacetEnabled",
    "SearchEnabled",
    "ReturnEnabled",
    "SortEnabled",
)
_ARRAY_OPTIONS = (
    "DefaultValue",
    "SourceFields",
    "FacetEnabled",
    "SearchEnabled",
    "ReturnEnabled",
)
_TEXT_OPTIONS = (
    "DefaultValue",
    "SourceField",
    "ReturnEnabled",
    "SortEnabled",
    "HighlightEnabled",
    "AnalysisScheme",
)
_TEXT_ARRAY_OPTIONS = (
    "DefaultValue",
    "SourceFields",
    "ReturnEnabled",
    "HighlightEnabled",
    "AnalysisScheme",
)

_TYPE_OPTIONS: dict[IndexFieldType, tuple[str, tuple[str, ...]]] = {
    IndexFieldType.DATE: ("DateOptions", _SCALAR_OPTIONS),
    IndexFieldType.DOUBLE: ("DoubleOptions", _SCALAR_OPTIONS),
    IndexFieldType.INT: ("IntOptions", _SCALAR_OPTIONS),
    IndexFieldType.LATLON: ("LatLonOptions", _SCALAR_OPTIONS),
    IndexFieldType.LITERAL: ("LiteralOptions", _SCALAR_OPTIONS),
    IndexFieldType.TEXT: ("TextOptions", _TEXT_OPTIONS),
    IndexFieldType.DATE_ARRAY: ("DateArrayOptions", _ARRAY_OPTIONS),
    IndexFieldType.DOUBLE_ARRAY: ("DoubleArrayOptions", _ARRAY_OPTIONS),
    IndexFieldType.INT_ARRAY: ("IntArrayOptions", _ARRAY_OPTIONS),
    IndexFieldType.LITERAL_ARRAY: ("LiteralArrayOptions", _ARRAY_OPTIONS),
    IndexFieldType.TEXT_ARRAY: ("TextArrayOptions", _TEXT_ARRAY_OPTIONS),
}


class IndexField(DataModel):
    """Index field definition.

    Attributes:
        name: Field name.
        type: Field type.
        options: Field options, service defaults when None.
    """

    name: str
    type: IndexFieldType
    options: IndexFieldOptions | None = None

    def to_native(self) -> dict[str, Any]:
        native: dict[str, Any] = {
            "IndexFieldName": self.name,
            "IndexFieldType": self.type.value,
        }
        if self.options is None:
            return native
        key, allowed = _TYPE_OPTIONS[self.type]
        source = self.options.source
        if isinstance(source, list):
            source = ",".join(source)
        values = {
            "DefaultValue": self.options.default,
            "SourceField": source,
            "SourceFields": source,
            "FacetEnabled": self.options.facet,
            "SearchEnabled": self.options.search,
            "ReturnEnabled": self.options.return_,
            "SortEnabled": self.options.sort,
            "HighlightEnabled": self.options.highlight,
            "AnalysisScheme": self.options.scheme,
        }
        native[key] = {
            k: values[k] for k in allowed if values[k] is not None
        }
        return native

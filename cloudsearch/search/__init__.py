from ..core.exceptions import BadRequestError, NotSupportedError
from ._compiler import build_search_params
from ._models import (
    FacetConfig,
    FacetSort,
    HighlightConfig,
    HighlightFormat,
    QueryOptions,
    QueryParserMode,
    SortDirection,
)
from ._options import OptionNormalizer
from ._query_parser import QueryParser
from .operations import search, suggest

__all__ = [
    "BadRequestError",
    "FacetConfig",
    "FacetSort",
    "HighlightConfig",
    "HighlightFormat",
    "NotSupportedError",
    "OptionNormalizer",
    "QueryOptions",
    "QueryParser",
    "QueryParserMode",
    "SortDirection",
    "build_search_params",
    "search",
    "suggest",
]

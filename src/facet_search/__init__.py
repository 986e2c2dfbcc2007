"""facet-search: in-memory faceted search over a color/size item catalog."""

from facet_search.domain import (
    ALL_COLORS,
    ALL_SIZES,
    Color,
    ColorCount,
    InvalidArgumentError,
    Item,
    SearchError,
    SearchOptions,
    SearchResults,
    Size,
    SizeCount,
)
from facet_search.search import FacetSearchEngine


__all__ = [
    "ALL_COLORS",
    "ALL_SIZES",
    "Color",
    "ColorCount",
    "FacetSearchEngine",
    "InvalidArgumentError",
    "Item",
    "SearchError",
    "SearchOptions",
    "SearchResults",
    "Size",
    "SizeCount",
]

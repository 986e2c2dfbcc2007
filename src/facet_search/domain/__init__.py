"""Domain layer - pure business logic with no infrastructure dependencies.

This layer contains:
- Value Objects: attribute values (Color, Size) and catalog items
- Registries: every known value per attribute axis
- Query and result models for faceted search
"""

from facet_search.domain.model import (
    ALL_COLORS,
    ALL_SIZES,
    BLACK,
    BLUE,
    LARGE,
    MEDIUM,
    RED,
    SMALL,
    WHITE,
    YELLOW,
    Color,
    Item,
    Size,
)
from facet_search.domain.search import (
    ColorCount,
    InvalidArgumentError,
    SearchError,
    SearchOptions,
    SearchResults,
    SizeCount,
)


__all__ = [
    "ALL_COLORS",
    "ALL_SIZES",
    "BLACK",
    "BLUE",
    "LARGE",
    "MEDIUM",
    "RED",
    "SMALL",
    "WHITE",
    "YELLOW",
    "Color",
    "ColorCount",
    "InvalidArgumentError",
    "Item",
    "SearchError",
    "SearchOptions",
    "SearchResults",
    "Size",
    "SizeCount",
]

"""Domain models for faceted search queries and their results.

- Value Objects are immutable (frozen=True)
- No infrastructure dependencies

An empty selection on an axis means the axis does not restrict the query.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from facet_search.domain.model import Color, Item, Size


class SearchError(Exception):
    """Base exception for the search engine."""


class InvalidArgumentError(SearchError, ValueError):
    """Raised when a required argument is absent or malformed."""

    def __init__(self, argument: str, message: str) -> None:
        self.argument = argument
        super().__init__(f"{argument}: {message}")


class SearchOptions(BaseModel):
    """Value object holding the allowed values per axis.

    ``None`` for either axis is accepted and stored as an empty list, so
    "absent" and "empty" both mean "no filter on this axis".
    """

    model_config = ConfigDict(frozen=True)

    colors: list[Color] = Field(default_factory=list)
    sizes: list[Size] = Field(default_factory=list)

    @field_validator("colors", "sizes", mode="before")
    @classmethod
    def _absent_means_empty(cls, value: object) -> object:
        return [] if value is None else value


class ColorCount(BaseModel):
    """Number of result items holding one color."""

    model_config = ConfigDict(frozen=True)

    color: Color
    count: int = Field(ge=0)


class SizeCount(BaseModel):
    """Number of result items holding one size."""

    model_config = ConfigDict(frozen=True)

    size: Size
    count: int = Field(ge=0)


class SearchResults(BaseModel):
    """Value object for a complete search response.

    Facet lists cover every registered value, in registry order, including
    values with a zero count.
    """

    model_config = ConfigDict(frozen=True)

    items: list[Item]
    color_counts: list[ColorCount]
    size_counts: list[SizeCount]

    @property
    def total(self) -> int:
        return len(self.items)

    def counts_by_color(self) -> dict[Color, int]:
        return {entry.color: entry.count for entry in self.color_counts}

    def counts_by_size(self) -> dict[Size, int]:
        return {entry.size: entry.count for entry in self.size_counts}

"""Domain model - catalog items and the attribute values they carry.

Value objects are immutable pydantic dataclasses. Attribute values (colors and
sizes) form small closed registries with fixed ids, so facet results built in
different calls (or processes) refer to the same identities.
"""

from typing import Self
from uuid import UUID, uuid4

from pydantic import Field
from pydantic.dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """Value object for the color axis.

    Identity is the id; the name is only a display label.
    """

    id: UUID
    name: str = Field(min_length=1)

    def __str__(self) -> str:
        return self.name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(frozen=True)
class Size:
    """Value object for the size axis."""

    id: UUID
    name: str = Field(min_length=1)

    def __str__(self) -> str:
        return self.name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Size):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


RED = Color(id=UUID("ffb7a1c0-3f0f-4b3e-8a6f-3a7cd5a0e101"), name="Red")
BLUE = Color(id=UUID("ffb7a1c0-3f0f-4b3e-8a6f-3a7cd5a0e102"), name="Blue")
YELLOW = Color(id=UUID("ffb7a1c0-3f0f-4b3e-8a6f-3a7cd5a0e103"), name="Yellow")
WHITE = Color(id=UUID("ffb7a1c0-3f0f-4b3e-8a6f-3a7cd5a0e104"), name="White")
BLACK = Color(id=UUID("ffb7a1c0-3f0f-4b3e-8a6f-3a7cd5a0e105"), name="Black")

SMALL = Size(id=UUID("5e1f2c3d-7a8b-4c9d-8e0f-112233445501"), name="Small")
MEDIUM = Size(id=UUID("5e1f2c3d-7a8b-4c9d-8e0f-112233445502"), name="Medium")
LARGE = Size(id=UUID("5e1f2c3d-7a8b-4c9d-8e0f-112233445503"), name="Large")

# Registries: every known value per axis, in facet reporting order
ALL_COLORS: tuple[Color, ...] = (RED, BLUE, YELLOW, WHITE, BLACK)
ALL_SIZES: tuple[Size, ...] = (SMALL, MEDIUM, LARGE)


@dataclass(frozen=True)
class Item:
    """Catalog entry with one value on each attribute axis.

    Items are equal when they share an id, whatever their labels say.
    """

    id: UUID
    name: str
    size: Size
    color: Color

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("Item must have a non-empty name")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @classmethod
    def create(cls, name: str, size: Size, color: Color) -> Self:
        """Build an item with a freshly generated id."""
        return cls(id=uuid4(), name=name, size=size, color=color)

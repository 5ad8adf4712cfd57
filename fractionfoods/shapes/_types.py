"""Shared dataclasses for the shapes package (avoids circular imports)."""

from dataclasses import dataclass
from typing import Tuple, Union

from fractionfoods.config import ShapeKind


@dataclass(frozen=True)
class FractionSpec:
    numerator: int
    denominator: int

    def __str__(self):
        return f"{self.numerator}/{self.denominator}"


@dataclass(frozen=True)
class BackgroundShape:
    """Body of the food item."""
    kind: str              # "circle", "ring" or "rect"
    x: float               # bounding box top-left
    y: float
    width: float
    height: float
    inset: float           # distance from outer edge to the inner fill
    color: str             # outer (crust / dough / wrapper)
    fill_color: str        # inner (cheese / icing / chocolate)
    hole_radius: float = 0.0
    corner_radius: float = 0.0


@dataclass(frozen=True)
class DividerSegment:
    x1: float
    y1: float
    x2: float
    y2: float
    width: float
    color: str
    opacity: float = 1.0
    rotation_deg: float = 0.0   # radial only, in the divider convention


@dataclass(frozen=True)
class Decoration:
    """One topping; (x, y) is its centre."""
    x: float
    y: float
    width: float
    height: float
    rotation_deg: float
    color: str


@dataclass(frozen=True)
class Sector:
    """A filled slice of a radial shape, angles clockwise from the top."""
    index: int
    start_deg: float
    end_deg: float
    inner_radius: float
    outer_radius: float


@dataclass(frozen=True)
class Cell:
    """A filled segment of a grid shape."""
    index: int
    row: int
    col: int
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class LayoutResult:
    """Renderer-agnostic geometry for one shape + fraction + scale."""
    kind: ShapeKind
    fraction: FractionSpec               # coerced fraction actually drawn
    width: float
    height: float
    background: BackgroundShape
    dividers: Tuple[DividerSegment, ...]
    filled_regions: Tuple[Union[Sector, Cell], ...]
    decorations: Tuple[Decoration, ...]

"""
Global configuration: shape registry, timing, guess bounds, viewport thresholds.

Geometry constants (insets, decoration sizes, hole ratio, palettes) are
empirically tuned to look right at the default 180 px size.  They are kept
here as named presets so layouts stay reproducible; none of them is derived
from anything else.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


# ---------------------------------------------------------------------------
# Shape registry
# ---------------------------------------------------------------------------

class ShapeKind(Enum):
    PIZZA = "pizza"
    BROWNIE = "brownie"
    PANCAKE = "pancake"
    PIE = "pie"
    CHOCOLATE_BAR = "chocolate_bar"
    DONUT = "donut"


RADIAL = "radial"
GRID = "grid"

# Denominator domains per placement family
RADIAL_DENOMINATORS = tuple(range(2, 13))          # 2..12 inclusive
GRID_DENOMINATORS = (2, 4, 6, 8, 10, 12)


@dataclass(frozen=True)
class ShapeColors:
    base: str       # outer body: crust, dough, wrapper
    fill: str       # inner body: cheese, icing, chocolate


@dataclass(frozen=True)
class ShapeDescriptor:
    kind: ShapeKind
    name: str
    family: str                              # RADIAL or GRID
    aspect_ratio: float                      # width / height
    inset_ratio: float                       # inner body inset, fraction of size
    decoration_size: Tuple[float, float]     # (width, height) at scale 1
    decorations_per_unit: int                # per filled slice / segment
    default_colors: ShapeColors
    palette: Tuple[str, ...]                 # decoration colours
    denominators: Tuple[int, ...]
    topping: str                             # noun used in the question
    grid_lookup: Tuple[Tuple[int, Tuple[int, int]], ...] = ()
    hole_ratio: float = 0.0                  # donut only, fraction of outer radius
    corner_ratio: float = 0.0                # grid only, rounded-corner radius

    @property
    def question(self) -> str:
        return f"What fraction of the {self.name} has {self.topping}?"

    def grid_dims(self, segments: int) -> Tuple[int, int]:
        """(cols, rows) for *segments*; unknown counts fall back to one row."""
        for n, dims in self.grid_lookup:
            if n == segments:
                return dims
        return segments, 1


PIZZA = ShapeDescriptor(
    kind=ShapeKind.PIZZA,
    name="pizza",
    family=RADIAL,
    aspect_ratio=1.0,
    inset_ratio=0.08,
    decoration_size=(24.0, 24.0),
    decorations_per_unit=1,
    default_colors=ShapeColors(base="#b45309", fill="#fcd34d"),
    palette=("#dc2626",),
    denominators=RADIAL_DENOMINATORS,
    topping="pepperoni",
)

PANCAKE = ShapeDescriptor(
    kind=ShapeKind.PANCAKE,
    name="pancake",
    family=RADIAL,
    aspect_ratio=1.0,
    inset_ratio=0.06,
    decoration_size=(20.0, 20.0),
    decorations_per_unit=1,
    default_colors=ShapeColors(base="#d97706", fill="#fbbf24"),
    palette=("#4338ca",),
    denominators=RADIAL_DENOMINATORS,
    topping="blueberries",
)

PIE = ShapeDescriptor(
    kind=ShapeKind.PIE,
    name="pie",
    family=RADIAL,
    aspect_ratio=1.0,
    inset_ratio=0.10,
    decoration_size=(22.0, 22.0),
    decorations_per_unit=1,
    default_colors=ShapeColors(base="#c2410c", fill="#fde68a"),
    palette=("#9f1239",),
    denominators=RADIAL_DENOMINATORS,
    topping="cherries",
)

DONUT = ShapeDescriptor(
    kind=ShapeKind.DONUT,
    name="donut",
    family=RADIAL,
    aspect_ratio=1.0,
    inset_ratio=0.05,
    decoration_size=(3.0, 10.0),
    decorations_per_unit=12,
    default_colors=ShapeColors(base="#d4a373", fill="#f9a8d4"),
    palette=("#ef4444", "#3b82f6", "#22c55e", "#facc15", "#ffffff", "#a855f7"),
    denominators=RADIAL_DENOMINATORS,
    topping="sprinkles",
    hole_ratio=0.32,
)

BROWNIE = ShapeDescriptor(
    kind=ShapeKind.BROWNIE,
    name="brownie",
    family=GRID,
    aspect_ratio=1.5,
    inset_ratio=0.04,
    decoration_size=(3.0, 8.0),
    decorations_per_unit=18,
    default_colors=ShapeColors(base="#3f2a1d", fill="#5b3a29"),
    palette=("#f472b6", "#60a5fa", "#facc15", "#4ade80", "#ffffff"),
    denominators=GRID_DENOMINATORS,
    topping="sprinkles",
    grid_lookup=(
        (2, (2, 1)),
        (4, (2, 2)),
        (6, (3, 2)),
        (8, (4, 2)),
        (10, (5, 2)),
        (12, (4, 3)),
    ),
    corner_ratio=0.04,
)

CHOCOLATE_BAR = ShapeDescriptor(
    kind=ShapeKind.CHOCOLATE_BAR,
    name="chocolate bar",
    family=GRID,
    aspect_ratio=2.0,
    inset_ratio=0.03,
    decoration_size=(9.0, 6.0),
    decorations_per_unit=8,
    default_colors=ShapeColors(base="#2b1a12", fill="#4a2c1d"),
    palette=("#e7c9a0", "#d6b489", "#f1dcc0"),
    denominators=GRID_DENOMINATORS,
    topping="almonds",
    grid_lookup=(
        (2, (2, 1)),
        (4, (4, 1)),
        (6, (6, 1)),
        (8, (4, 2)),
        (10, (5, 2)),
        (12, (6, 2)),
    ),
    corner_ratio=0.02,
)

SHAPES = [PIZZA, BROWNIE, PANCAKE, PIE, CHOCOLATE_BAR, DONUT]
SHAPE_MAP = {s.kind: s for s in SHAPES}
SHAPE_NAMES = {s.kind.value: s for s in SHAPES}

# ---------------------------------------------------------------------------
# Layout defaults
# ---------------------------------------------------------------------------

DEFAULT_SIZE = 180          # base size hint in px at scale 1.0
MAX_SEGMENTS = 120         # larger denominators are clamped to this many slices / cells
DIVIDER_WIDTH = 2.0         # px at scale 1.0
DIVIDER_COLOR = "#ffffff"
DIVIDER_OPACITY = 0.4

# ---------------------------------------------------------------------------
# Session timing (milliseconds) and guess bounds
# ---------------------------------------------------------------------------

CELEBRATE_DELAY_MS = 3000
SHAKE_DELAY_MS = 500

NUMERATOR_BOUNDS = (1, 12)
DENOMINATOR_BOUNDS = (2, 12)
INITIAL_GUESS = (1, 1)

# ---------------------------------------------------------------------------
# Viewport thresholds (width in px -> scale factor)
# ---------------------------------------------------------------------------

RADIAL_SCALE_STEPS = ((351, 0.75),)
GRID_SCALE_STEPS = ((356, 0.5), (411, 0.75))
FULL_SCALE = 1.0

# ---------------------------------------------------------------------------
# Celebration
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CelebrationConfig:
    particle_count: int = 150
    spread: float = 70.0
    origin: Tuple[float, float] = (0.5, 0.6)    # (x, y) as viewport fractions


CELEBRATION = CelebrationConfig()

INTRO_TEXT = (
    "The following food items are cut into equal parts. Use your knowledge "
    "of fractions to figure out what fraction is being represented!"
)

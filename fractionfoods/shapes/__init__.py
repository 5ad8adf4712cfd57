"""
Layout engine package for Fraction Foods.

Each sub-module exposes one layout function per food shape.  Every layout
function returns a ``LayoutResult`` -- renderer-agnostic geometry (body,
divider segments, filled regions and decorations) in pixels at the given size
and scale.

Usage::

    from fractionfoods.config import PIZZA
    from fractionfoods.shapes import compute_layout
    layout = compute_layout(PIZZA, (3, 8), size_hint=180, scale_factor=1.0)
"""

from fractionfoods.config import DEFAULT_SIZE, ShapeDescriptor, ShapeKind
from fractionfoods.geometry import coerce_counts, coerce_scale, coerce_size
from fractionfoods.shapes._types import (  # noqa: F401
    BackgroundShape, Cell, Decoration, DividerSegment, FractionSpec,
    LayoutResult, Sector,
)
from fractionfoods.shapes.grid import layout_brownie, layout_chocolate_bar
from fractionfoods.shapes.radial import (
    layout_donut, layout_pancake, layout_pie, layout_pizza,
)


LAYOUTS = {
    ShapeKind.PIZZA: layout_pizza,
    ShapeKind.BROWNIE: layout_brownie,
    ShapeKind.PANCAKE: layout_pancake,
    ShapeKind.PIE: layout_pie,
    ShapeKind.CHOCOLATE_BAR: layout_chocolate_bar,
    ShapeKind.DONUT: layout_donut,
}

_missing = set(ShapeKind) - set(LAYOUTS)
if _missing:
    raise ImportError(f"no layout function for shape kinds: {sorted(k.value for k in _missing)}")


def _as_counts(fraction):
    if isinstance(fraction, FractionSpec):
        return fraction.numerator, fraction.denominator
    try:
        numerator, denominator = fraction
    except (TypeError, ValueError):
        return 0, 1
    return numerator, denominator


def compute_layout(shape: ShapeDescriptor, fraction, size_hint=DEFAULT_SIZE,
                   scale_factor=1.0, colors=None, show_dividers=True) -> LayoutResult:
    """Lay out *shape* showing *fraction*.

    *fraction* is a ``FractionSpec`` or a ``(numerator, denominator)`` pair.
    Malformed numbers are coerced, never rejected: a bad denominator gives a
    single segment, a bad numerator is floored and clamped, a bad size or
    scale falls back to the defaults.
    """
    if not isinstance(shape, ShapeDescriptor):
        raise TypeError(f"expected a ShapeDescriptor, got {type(shape).__name__}")
    total, filled = coerce_counts(*_as_counts(fraction))
    spec = FractionSpec(filled, total)
    size = coerce_size(size_hint)
    scale = coerce_scale(scale_factor)
    return LAYOUTS[shape.kind](
        shape, spec, size, scale, colors or shape.default_colors, show_dividers,
    )

"""
Radial layouts: pizza, pancake, pie (one topping per slice) and donut
(sprinkles scattered across each slice).

Angles are measured clockwise from 12 o'clock and the first divider always
sits at the top.  Every absolute length is multiplied by the scale factor, so
a layout at scale 0.75 is the scale-1 layout shrunk uniformly.
"""

from fractionfoods.config import DIVIDER_COLOR, DIVIDER_OPACITY, DIVIDER_WIDTH
from fractionfoods.geometry import (
    angular_fit_radius, divider_rotation, polar_point, slice_angles,
)
from fractionfoods.scatter import (
    SALT_ANGLE, SALT_COLOR, SALT_RADIUS, SALT_ROTATION,
    mark_seed, scatter, scatter_choice, scatter_range,
)
from fractionfoods.shapes._types import (
    BackgroundShape, Decoration, DividerSegment, FractionSpec, LayoutResult, Sector,
)


TARGET_RADIUS_RATIO = 0.6    # preferred topping distance, fraction of inner radius
SAFETY_MARGIN = 4.0          # px between a topping and the slice edges
EDGE_GAP = 1.0               # px between a topping and the centre / outer edge
SPRINKLE_MARGIN = 4.0        # px between sprinkles and the hole / icing edge


# ---------------------------------------------------------------------------
# Shared frame
# ---------------------------------------------------------------------------

def _frame(shape, size, scale):
    """Return (diameter, centre, inset, inner radius) in scaled px."""
    diameter = size * scale
    center = diameter / 2.0
    inset = diameter * shape.inset_ratio
    return diameter, center, inset, center - inset


def _dividers(total, center, r_start, r_end, scale):
    segs = []
    for angle in slice_angles(total):
        x1, y1 = polar_point(center, center, r_start, angle)
        x2, y2 = polar_point(center, center, r_end, angle)
        segs.append(DividerSegment(
            x1, y1, x2, y2,
            width=DIVIDER_WIDTH * scale,
            color=DIVIDER_COLOR,
            opacity=DIVIDER_OPACITY,
            rotation_deg=divider_rotation(angle),
        ))
    return tuple(segs)


def _sectors(total, filled, r_inner, r_outer):
    width = 360.0 / total
    return tuple(
        Sector(s, s * width, (s + 1) * width, r_inner, r_outer)
        for s in range(filled)
    )


# ---------------------------------------------------------------------------
# One topping per slice
# ---------------------------------------------------------------------------

def placement_radius(shape, total, size, scale):
    """Centre distance of a slice's topping.

    Aim for 60% of the inner radius; if the wedge is too narrow for the
    topping to clear both dividers, push it outward to the angular-fit radius.
    The result is clamped to [min_r, max_r] so the topping never crosses the
    centre or the outer edge.

    Returns (r, min_r, max_r).
    """
    _, _, _, inner_r = _frame(shape, size, scale)
    diameter = max(shape.decoration_size) * scale
    deco_r = diameter / 2.0
    gap = EDGE_GAP * scale
    min_r = deco_r + gap
    max_r = max(0.0, inner_r - deco_r - gap)
    target = TARGET_RADIUS_RATIO * inner_r
    if total == 1:
        required = min_r
    else:
        required = angular_fit_radius(diameter, SAFETY_MARGIN * scale, 360.0 / total)
    r = min(max(target, required, min_r), max_r)
    return r, min_r, max_r


def _layout_centered(shape, fraction, size, scale, colors, show_dividers):
    total, filled = fraction.denominator, fraction.numerator
    diameter, center, inset, inner_r = _frame(shape, size, scale)
    w = 360.0 / total
    r, _, _ = placement_radius(shape, total, size, scale)
    dw, dh = (d * scale for d in shape.decoration_size)
    color = shape.palette[0]

    decorations = []
    for s in range(filled):
        mid = (s + 0.5) * w
        x, y = polar_point(center, center, r, mid)
        decorations.append(Decoration(x, y, dw, dh, divider_rotation(mid), color))

    background = BackgroundShape(
        "circle", 0.0, 0.0, diameter, diameter, inset,
        colors.base, colors.fill,
    )
    return LayoutResult(
        kind=shape.kind,
        fraction=fraction,
        width=diameter,
        height=diameter,
        background=background,
        dividers=_dividers(total, center, 0.0, inner_r, scale) if show_dividers else (),
        filled_regions=_sectors(total, filled, 0.0, inner_r),
        decorations=tuple(decorations),
    )


def layout_pizza(shape, fraction: FractionSpec, size, scale, colors, show_dividers=True):
    return _layout_centered(shape, fraction, size, scale, colors, show_dividers)


def layout_pancake(shape, fraction: FractionSpec, size, scale, colors, show_dividers=True):
    return _layout_centered(shape, fraction, size, scale, colors, show_dividers)


def layout_pie(shape, fraction: FractionSpec, size, scale, colors, show_dividers=True):
    return _layout_centered(shape, fraction, size, scale, colors, show_dividers)


# ---------------------------------------------------------------------------
# Donut: scattered sprinkles
# ---------------------------------------------------------------------------

def sprinkle_band(shape, size, scale):
    """Radial band (r_lo, r_hi) that sprinkle centres are drawn from."""
    _, center, _, inner_r = _frame(shape, size, scale)
    hole_r = center * shape.hole_ratio
    half_len = max(shape.decoration_size) * scale / 2.0
    margin = SPRINKLE_MARGIN * scale
    r_lo = hole_r + margin
    r_hi = max(r_lo, inner_r - half_len - EDGE_GAP * scale)
    return r_lo, r_hi


def layout_donut(shape, fraction: FractionSpec, size, scale, colors, show_dividers=True):
    total, filled = fraction.denominator, fraction.numerator
    diameter, center, inset, inner_r = _frame(shape, size, scale)
    hole_r = center * shape.hole_ratio
    w = 360.0 / total
    r_lo, r_hi = sprinkle_band(shape, size, scale)
    dw, dh = (d * scale for d in shape.decoration_size)

    decorations = []
    for s in range(filled):
        for k in range(shape.decorations_per_unit):
            angle = s * w + w * scatter(mark_seed(s, k, SALT_ANGLE))
            r = scatter_range(mark_seed(s, k, SALT_RADIUS), r_lo, r_hi)
            x, y = polar_point(center, center, r, angle)
            rotation = 360.0 * scatter(mark_seed(s, k, SALT_ROTATION))
            color = scatter_choice(mark_seed(s, k, SALT_COLOR), shape.palette)
            decorations.append(Decoration(x, y, dw, dh, rotation, color))

    background = BackgroundShape(
        "ring", 0.0, 0.0, diameter, diameter, inset,
        colors.base, colors.fill, hole_radius=hole_r,
    )
    return LayoutResult(
        kind=shape.kind,
        fraction=fraction,
        width=diameter,
        height=diameter,
        background=background,
        dividers=_dividers(total, center, hole_r, inner_r, scale) if show_dividers else (),
        filled_regions=_sectors(total, filled, hole_r, inner_r),
        decorations=tuple(decorations),
    )

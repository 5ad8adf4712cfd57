"""
Grid layouts: brownie and chocolate bar.

The body is cut into ``cols x rows`` equal cells from a per-shape lookup and
the first *numerator* cells in row-major order are decorated with small
seeded marks.  Mark positions depend only on (segment index, mark index), so
every re-render shows the identical pattern.
"""

from fractionfoods.config import DIVIDER_COLOR, DIVIDER_OPACITY, DIVIDER_WIDTH
from fractionfoods.scatter import (
    SALT_COLOR, SALT_ROTATION, SALT_X, SALT_Y,
    mark_seed, scatter, scatter_choice,
)
from fractionfoods.shapes._types import (
    BackgroundShape, Cell, Decoration, DividerSegment, FractionSpec, LayoutResult,
)


MARK_PADDING = 1.0    # px kept between a mark and its cell edges


def cell_position(index: int, cols: int):
    """Row-major (row, col) of segment *index*."""
    return index // cols, index % cols


def _frame(shape, size, scale):
    """Return (width, height, inset) of the body in scaled px."""
    width = size * scale
    height = width / shape.aspect_ratio
    inset = min(width, height) * shape.inset_ratio
    return width, height, inset


def _dividers(x0, y0, inner_w, inner_h, cols, rows, scale):
    cw, ch = inner_w / cols, inner_h / rows
    lw = DIVIDER_WIDTH * scale
    segs = []
    for c in range(1, cols):
        x = x0 + c * cw
        segs.append(DividerSegment(x, y0, x, y0 + inner_h, lw, DIVIDER_COLOR, DIVIDER_OPACITY))
    for r in range(1, rows):
        y = y0 + r * ch
        segs.append(DividerSegment(x0, y, x0 + inner_w, y, lw, DIVIDER_COLOR, DIVIDER_OPACITY))
    return tuple(segs)


def _marks(shape, cell, scale):
    dw, dh = (d * scale for d in shape.decoration_size)
    # keep a mark inside its cell whatever its rotation
    pad = max(dw, dh) / 2.0 + MARK_PADDING * scale
    span_x = max(0.0, cell.width - 2 * pad)
    span_y = max(0.0, cell.height - 2 * pad)
    left = cell.x + (pad if span_x > 0 else cell.width / 2.0)
    top = cell.y + (pad if span_y > 0 else cell.height / 2.0)

    marks = []
    for k in range(shape.decorations_per_unit):
        x = left + span_x * scatter(mark_seed(cell.index, k, SALT_X))
        y = top + span_y * scatter(mark_seed(cell.index, k, SALT_Y))
        rotation = 360.0 * scatter(mark_seed(cell.index, k, SALT_ROTATION))
        color = scatter_choice(mark_seed(cell.index, k, SALT_COLOR), shape.palette)
        marks.append(Decoration(x, y, dw, dh, rotation, color))
    return marks


def _layout_grid(shape, fraction, size, scale, colors, show_dividers):
    total, filled = fraction.denominator, fraction.numerator
    cols, rows = shape.grid_dims(total)
    width, height, inset = _frame(shape, size, scale)
    x0, y0 = inset, inset
    inner_w, inner_h = width - 2 * inset, height - 2 * inset
    cw, ch = inner_w / cols, inner_h / rows

    cells = []
    decorations = []
    for i in range(filled):
        row, col = cell_position(i, cols)
        cell = Cell(i, row, col, x0 + col * cw, y0 + row * ch, cw, ch)
        cells.append(cell)
        decorations.extend(_marks(shape, cell, scale))

    background = BackgroundShape(
        "rect", 0.0, 0.0, width, height, inset,
        colors.base, colors.fill,
        corner_radius=min(width, height) * shape.corner_ratio,
    )
    return LayoutResult(
        kind=shape.kind,
        fraction=fraction,
        width=width,
        height=height,
        background=background,
        dividers=_dividers(x0, y0, inner_w, inner_h, cols, rows, scale) if show_dividers else (),
        filled_regions=tuple(cells),
        decorations=tuple(decorations),
    )


def layout_brownie(shape, fraction: FractionSpec, size, scale, colors, show_dividers=True):
    return _layout_grid(shape, fraction, size, scale, colors, show_dividers)


def layout_chocolate_bar(shape, fraction: FractionSpec, size, scale, colors, show_dividers=True):
    return _layout_grid(shape, fraction, size, scale, colors, show_dividers)

"""Tests for the radial layouts (pizza, pancake, pie, donut)."""

import math

import pytest

from fractionfoods.config import (
    DEFAULT_SIZE, DONUT, MAX_SEGMENTS, PANCAKE, PIE, PIZZA, ShapeColors,
)
from fractionfoods.geometry import clockwise_angle
from fractionfoods.shapes import FractionSpec, Sector, compute_layout
from fractionfoods.shapes.radial import placement_radius, sprinkle_band


CENTERED = [PIZZA, PANCAKE, PIE]


def _center(layout):
    return layout.width / 2.0


def _angles(layout):
    c = _center(layout)
    return [clockwise_angle(c, c, d.x, d.y) for d in layout.decorations]


def _distances(layout):
    c = _center(layout)
    return [math.hypot(d.x - c, d.y - c) for d in layout.decorations]


class TestThreeEighths:
    @pytest.fixture
    def layout(self):
        return compute_layout(PIZZA, FractionSpec(3, 8), DEFAULT_SIZE, 1.0)

    def test_counts(self, layout):
        assert len(layout.decorations) == 3
        assert len(layout.dividers) == 8

    def test_mid_angles(self, layout):
        assert _angles(layout) == pytest.approx([22.5, 67.5, 112.5])

    def test_rotation_convention(self, layout):
        assert [d.rotation_deg for d in layout.decorations] == pytest.approx([202.5, 247.5, 292.5])
        assert [s.rotation_deg for s in layout.dividers] == pytest.approx(
            [180.0 + 45.0 * i for i in range(8)])

    def test_first_divider_points_up(self, layout):
        first = layout.dividers[0]
        c = _center(layout)
        assert first.x1 == pytest.approx(c)
        assert first.y1 == pytest.approx(c)
        assert first.x2 == pytest.approx(c)
        assert first.y2 < c

    def test_dividers_reach_inner_edge(self, layout):
        c = _center(layout)
        inner = c - layout.background.inset
        for seg in layout.dividers:
            assert math.hypot(seg.x2 - c, seg.y2 - c) == pytest.approx(inner)

    def test_filled_sectors(self, layout):
        assert [(s.start_deg, s.end_deg) for s in layout.filled_regions] == [
            (0.0, 45.0), (45.0, 90.0), (90.0, 135.0)]
        assert all(isinstance(s, Sector) for s in layout.filled_regions)

    def test_fraction_recorded(self, layout):
        assert layout.fraction == FractionSpec(3, 8)

    def test_tuple_input_matches(self, layout):
        assert compute_layout(PIZZA, (3, 8), DEFAULT_SIZE, 1.0) == layout


class TestCenteredToppings:
    @pytest.mark.parametrize("shape", CENTERED, ids=lambda s: s.name)
    def test_one_per_filled_slice(self, shape):
        for d in range(1, 13):
            for n in range(0, d + 1):
                layout = compute_layout(shape, (n, d))
                assert len(layout.decorations) == n
                assert len(layout.dividers) == d

    @pytest.mark.parametrize("shape", CENTERED, ids=lambda s: s.name)
    @pytest.mark.parametrize("scale", [0.5, 0.75, 1.0])
    def test_radius_within_bounds(self, shape, scale):
        for total in range(1, 13):
            r, min_r, max_r = placement_radius(shape, total, DEFAULT_SIZE, scale)
            assert min_r <= r <= max_r
            layout = compute_layout(shape, (total, total), DEFAULT_SIZE, scale)
            assert _distances(layout) == pytest.approx([r] * total)

    @pytest.mark.parametrize("shape", CENTERED, ids=lambda s: s.name)
    def test_radius_non_decreasing(self, shape):
        radii = [placement_radius(shape, t, DEFAULT_SIZE, 1.0)[0] for t in range(1, 25)]
        assert all(b >= a for a, b in zip(radii, radii[1:]))

    def test_narrow_slices_push_outward(self):
        wide = placement_radius(PIZZA, 2, DEFAULT_SIZE, 1.0)[0]
        narrow = placement_radius(PIZZA, 12, DEFAULT_SIZE, 1.0)[0]
        assert narrow > wide

    @pytest.mark.parametrize("shape", CENTERED, ids=lambda s: s.name)
    def test_toppings_clear_dividers(self, shape):
        deco_r = max(shape.decoration_size) / 2.0
        for total in range(2, 13):
            r, _, _ = placement_radius(shape, total, DEFAULT_SIZE, 1.0)
            half = math.radians(180.0 / total)
            assert r * math.sin(half) >= deco_r

    def test_single_slice_uses_target(self):
        layout = compute_layout(PIZZA, (1, 1))
        c = _center(layout)
        inner = c - layout.background.inset
        d = layout.decorations[0]
        assert d.x == pytest.approx(c)
        assert d.y == pytest.approx(c + 0.6 * inner)

    def test_scales_uniformly(self):
        full = compute_layout(PIE, (5, 7), DEFAULT_SIZE, 1.0)
        small = compute_layout(PIE, (5, 7), DEFAULT_SIZE, 0.75)
        assert small.width == pytest.approx(full.width * 0.75)
        for a, b in zip(full.decorations, small.decorations):
            assert b.x == pytest.approx(a.x * 0.75)
            assert b.y == pytest.approx(a.y * 0.75)
            assert b.width == pytest.approx(a.width * 0.75)
        for a, b in zip(full.dividers, small.dividers):
            assert b.width == pytest.approx(a.width * 0.75)

    def test_topping_color_from_palette(self):
        layout = compute_layout(PANCAKE, (2, 3))
        assert {d.color for d in layout.decorations} == {PANCAKE.palette[0]}

    def test_custom_colors(self):
        colors = ShapeColors(base="#000000", fill="#111111")
        layout = compute_layout(PIZZA, (1, 2), colors=colors)
        assert layout.background.color == "#000000"
        assert layout.background.fill_color == "#111111"

    def test_default_colors(self):
        layout = compute_layout(PIZZA, (1, 2))
        assert layout.background.color == PIZZA.default_colors.base
        assert layout.background.kind == "circle"


class TestDonut:
    @pytest.fixture
    def layout(self):
        return compute_layout(DONUT, (3, 5), DEFAULT_SIZE, 1.0)

    def test_sprinkle_count(self, layout):
        assert len(layout.decorations) == 3 * DONUT.decorations_per_unit

    def test_sprinkles_stay_in_their_slice(self, layout):
        w = 360.0 / 5
        per = DONUT.decorations_per_unit
        for j, angle in enumerate(_angles(layout)):
            s = j // per
            assert s * w - 1e-6 <= angle <= (s + 1) * w + 1e-6

    def test_sprinkles_in_band(self, layout):
        r_lo, r_hi = sprinkle_band(DONUT, DEFAULT_SIZE, 1.0)
        for r in _distances(layout):
            assert r_lo - 1e-6 <= r <= r_hi + 1e-6

    def test_band_outside_hole(self):
        r_lo, r_hi = sprinkle_band(DONUT, DEFAULT_SIZE, 1.0)
        hole = DEFAULT_SIZE / 2.0 * DONUT.hole_ratio
        assert hole < r_lo < r_hi

    def test_palette_colors(self, layout):
        assert {d.color for d in layout.decorations} <= set(DONUT.palette)

    def test_dividers_skip_hole(self, layout):
        c = _center(layout)
        hole = layout.background.hole_radius
        assert layout.background.kind == "ring"
        for seg in layout.dividers:
            assert math.hypot(seg.x1 - c, seg.y1 - c) == pytest.approx(hole)

    def test_deterministic(self, layout):
        assert compute_layout(DONUT, (3, 5), DEFAULT_SIZE, 1.0) == layout

    def test_pattern_survives_rescale(self, layout):
        half = compute_layout(DONUT, (3, 5), DEFAULT_SIZE, 0.5)
        for a, b in zip(layout.decorations, half.decorations):
            assert b.x == pytest.approx(a.x * 0.5)
            assert b.y == pytest.approx(a.y * 0.5)
            assert b.rotation_deg == pytest.approx(a.rotation_deg)
            assert b.color == a.color

    def test_existing_slices_unchanged_when_more_filled(self, layout):
        more = compute_layout(DONUT, (4, 5), DEFAULT_SIZE, 1.0)
        assert more.decorations[:len(layout.decorations)] == layout.decorations

    def test_sector_radii(self, layout):
        sector = layout.filled_regions[0]
        assert sector.inner_radius == pytest.approx(layout.background.hole_radius)


class TestMalformedInput:
    def test_zero_denominator(self):
        layout = compute_layout(PIZZA, (5, 0))
        assert layout.fraction == FractionSpec(1, 1)
        assert len(layout.dividers) == 1

    def test_nan_everything(self):
        layout = compute_layout(DONUT, (float("nan"), float("nan")), float("nan"), float("nan"))
        assert layout.fraction == FractionSpec(0, 1)
        assert layout.decorations == ()
        assert layout.width == pytest.approx(DEFAULT_SIZE)

    @pytest.mark.parametrize("fraction", [None, (1,), ("a", "b"), 7])
    def test_garbage_fraction(self, fraction):
        layout = compute_layout(PIZZA, fraction)
        assert layout.fraction.denominator >= 1
        assert 0 <= layout.fraction.numerator <= layout.fraction.denominator

    def test_negative_size_and_scale(self):
        layout = compute_layout(PIE, (1, 4), -20, -1)
        assert layout.width == pytest.approx(DEFAULT_SIZE)

    def test_zero_numerator(self):
        layout = compute_layout(PANCAKE, (0, 6))
        assert layout.decorations == ()
        assert layout.filled_regions == ()
        assert len(layout.dividers) == 6

    def test_hide_dividers(self):
        shown = compute_layout(PIZZA, (2, 5))
        hidden = compute_layout(PIZZA, (2, 5), show_dividers=False)
        assert hidden.dividers == ()
        assert hidden.decorations == shown.decorations

    def test_huge_denominator_capped(self):
        layout = compute_layout(PIZZA, (1, 1e12))
        assert layout.fraction == FractionSpec(1, MAX_SEGMENTS)
        assert len(layout.dividers) == MAX_SEGMENTS
        assert len(layout.decorations) == 1

    def test_not_a_shape(self):
        with pytest.raises(TypeError):
            compute_layout("pizza", (1, 2))

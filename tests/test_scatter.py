"""Tests for the deterministic scatter function."""

import math

import pytest

from fractionfoods.scatter import (
    SALT_ANGLE, SALT_COLOR, SALT_RADIUS, SALT_ROTATION, SALT_X, SALT_Y,
    MARK_STRIDE, mark_seed, scatter, scatter_choice, scatter_range,
)


class TestScatter:
    def test_deterministic(self):
        assert scatter(123) == scatter(123)
        assert scatter(4021.0) == scatter(4021)

    def test_known_values(self):
        # fract(sin(1) * 10000) and fract(sin(-1) * 10000)
        assert scatter(1) == pytest.approx(0.709848078965, abs=1e-6)
        assert scatter(-1) == pytest.approx(0.290151921035, abs=1e-6)

    def test_zero_seed(self):
        assert scatter(0) == 0.0

    def test_range(self):
        for s in range(-500, 5000):
            v = scatter(s)
            assert 0.0 <= v < 1.0

    def test_non_finite_seed(self):
        assert scatter(float("nan")) == 0.0
        assert scatter(float("inf")) == 0.0

    def test_roughly_uniform(self):
        vals = [scatter(s) for s in range(1, 4001)]
        mean = sum(vals) / len(vals)
        assert 0.45 < mean < 0.55
        assert min(vals) < 0.05
        assert max(vals) > 0.95


class TestSeeds:
    def test_mark_seed_layout(self):
        assert mark_seed(2, 3, 4) == 2034
        assert mark_seed(0, 0, SALT_X) == SALT_X

    def test_salts_fit_in_stride(self):
        salts = [SALT_X, SALT_Y, SALT_ROTATION, SALT_COLOR, SALT_ANGLE, SALT_RADIUS]
        assert len(set(salts)) == len(salts)
        assert all(0 < s < MARK_STRIDE for s in salts)

    def test_distinct_streams(self):
        salts = [SALT_X, SALT_Y, SALT_ROTATION, SALT_COLOR, SALT_ANGLE, SALT_RADIUS]
        vals = [scatter(mark_seed(i, k, salt))
                for i in range(12) for k in range(18) for salt in salts]
        assert len(set(vals)) == len(vals)


class TestHelpers:
    def test_scatter_range(self):
        for s in range(1, 200):
            v = scatter_range(s, 10.0, 20.0)
            assert 10.0 <= v < 20.0

    def test_scatter_range_matches_scatter(self):
        assert scatter_range(77, 0.0, 1.0) == pytest.approx(scatter(77))

    def test_scatter_choice(self):
        options = ("a", "b", "c")
        picks = {scatter_choice(s, options) for s in range(1, 300)}
        assert picks == set(options)

    def test_scatter_choice_single(self):
        assert scatter_choice(99, ("only",)) == "only"

    def test_no_nan_leak(self):
        assert not math.isnan(scatter(1e300))

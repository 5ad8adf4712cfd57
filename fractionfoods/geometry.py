"""Shared geometry helpers for the layout engines (numeric coercion, polar math)."""

import numpy as np

from fractionfoods.config import DEFAULT_SIZE, MAX_SEGMENTS


# ---------------------------------------------------------------------------
# Coercion
# ---------------------------------------------------------------------------

def finite_or(value, default: float) -> float:
    """Return *value* as a finite float, or *default* if it is not one."""
    try:
        v = float(value)
    except (TypeError, ValueError):
        return default
    return v if np.isfinite(v) else default


def clamp(value, lo, hi):
    return max(lo, min(value, hi))


def coerce_counts(numerator, denominator):
    """Return (total, filled) for a fraction, coercing malformed input.

    Non-positive or non-finite denominators become one segment and counts
    above MAX_SEGMENTS are capped; numerators are floored then clamped into
    [0, total].
    """
    d = finite_or(denominator, 1.0)
    total = int(clamp(np.floor(d), 1, MAX_SEGMENTS))
    n = finite_or(numerator, 0.0)
    filled = clamp(int(np.floor(n)), 0, total)
    return total, filled


def coerce_size(size_hint) -> float:
    s = finite_or(size_hint, DEFAULT_SIZE)
    return s if s > 0 else float(DEFAULT_SIZE)


def coerce_scale(scale_factor) -> float:
    s = finite_or(scale_factor, 1.0)
    return s if s > 0 else 1.0


# ---------------------------------------------------------------------------
# Polar helpers (angles in degrees, clockwise from 12 o'clock, y down)
# ---------------------------------------------------------------------------

def polar_point(cx, cy, radius, angle_deg):
    """Screen coordinates of a point at *angle_deg* clockwise from the top."""
    a = np.radians(angle_deg)
    return float(cx + radius * np.sin(a)), float(cy - radius * np.cos(a))


def clockwise_angle(cx, cy, x, y) -> float:
    """Inverse of :func:`polar_point`; returns degrees in [0, 360)."""
    deg = float(np.degrees(np.arctan2(x - cx, cy - y)))
    return deg % 360.0


def slice_angles(total: int):
    """Divider angles (clockwise from top) for *total* equal slices."""
    width = 360.0 / total
    return [i * width for i in range(total)]


def divider_rotation(angle_deg: float) -> float:
    """Rotation of a divider whose unrotated direction points straight down.

    A downward ray needs a fixed 180 degree turn to point at 12 o'clock, so a
    divider at clockwise angle ``a`` is rotated by ``180 + a``.
    """
    return 180.0 + angle_deg


def angular_fit_radius(diameter: float, margin: float, slice_deg: float) -> float:
    """Smallest centre distance at which a disc of *diameter* (+ *margin*)
    fits between the two edges of a *slice_deg* wedge."""
    half = np.radians(slice_deg) / 2.0
    s = np.sin(half)
    if s <= 0:
        return float("inf")
    return float((diameter + margin) / (2.0 * s))

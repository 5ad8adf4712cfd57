"""
Deterministic scatter function for stable decoration jitter.

``scatter(seed)`` is the fractional part of ``sin(seed) * 10000``.  It is the
canonical jitter source for every layout: the same seed always gives the same
value, so re-rendering a shape (at any scale) reproduces the exact same
sprinkle pattern.  Not suitable for anything security related.

Seeds are built from entity and attribute indices with :func:`mark_seed` so
that each attribute of each mark draws from its own stream.
"""

import numpy as np


SEGMENT_STRIDE = 1000     # one block of seeds per slice / grid segment
MARK_STRIDE = 10          # one block per mark inside a segment

# Attribute salts (must stay below MARK_STRIDE)
SALT_X = 1
SALT_Y = 2
SALT_ROTATION = 3
SALT_COLOR = 4
SALT_ANGLE = 5
SALT_RADIUS = 6


def scatter(seed) -> float:
    """Map *seed* to a float in [0, 1)."""
    s = float(seed)
    if not np.isfinite(s):
        return 0.0
    x = np.sin(s) * 10000.0
    frac = float(x - np.floor(x))
    # x - floor(x) can round up to exactly 1.0 for tiny negative x
    return 0.0 if frac >= 1.0 else frac


def mark_seed(index: int, mark: int, salt: int) -> int:
    return index * SEGMENT_STRIDE + mark * MARK_STRIDE + salt


def scatter_range(seed, lo: float, hi: float) -> float:
    """Scatter uniformly into [lo, hi)."""
    return lo + (hi - lo) * scatter(seed)


def scatter_choice(seed, options):
    """Pick one of *options* by seeded index."""
    idx = int(np.floor(scatter(seed) * len(options)))
    return options[min(idx, len(options) - 1)]

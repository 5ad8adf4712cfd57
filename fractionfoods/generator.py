"""
Random proper fractions for a round.

The denominator is drawn uniformly from the shape's domain (2..12 for radial
shapes, the even numbers 2..12 for grid shapes) and the numerator uniformly
from 1..denominator.
"""

import numpy as np

from fractionfoods.geometry import coerce_counts, finite_or
from fractionfoods.shapes._types import FractionSpec


def coerce_fraction(numerator, denominator) -> FractionSpec:
    """Layout coercion: denominator >= 1, numerator floored into [0, denominator]."""
    total, filled = coerce_counts(numerator, denominator)
    return FractionSpec(filled, total)


def _clean_domain(domain):
    values = []
    for d in domain:
        v = finite_or(d, 0.0)
        if v >= 1:
            values.append(int(np.floor(v)))
    return values


def generate(domain, rng=None) -> FractionSpec:
    """Draw a proper fraction whose denominator lies in *domain*.

    *rng* is anything with the ``np.random`` interface (the module itself or a
    ``RandomState``); defaults to the global numpy state.
    """
    rng = rng or np.random
    values = _clean_domain(domain)
    if not values:
        return FractionSpec(1, 1)
    denominator = values[rng.randint(len(values))]
    numerator = int(rng.randint(1, denominator + 1))
    return FractionSpec(numerator, denominator)


def generate_for(shape, rng=None) -> FractionSpec:
    return generate(shape.denominators, rng)


def is_valid_for(fraction: FractionSpec, shape) -> bool:
    return (fraction.denominator in shape.denominators
            and 1 <= fraction.numerator <= fraction.denominator)

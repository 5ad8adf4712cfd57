"""
Viewport width to scale factor policies, and the viewport capability.

The session only needs a scalar scale factor.  How the width is observed is
up to the host: anything exposing ``width``, ``subscribe(callback)`` and
``unsubscribe(token)`` works; ``StaticViewport`` is the in-memory version
used by the CLIs and tests.
"""

import logging
from typing import Callable, Dict

from fractionfoods.config import FULL_SCALE, GRID, GRID_SCALE_STEPS, RADIAL_SCALE_STEPS
from fractionfoods.geometry import finite_or

logger = logging.getLogger(__name__)


def _step_scale(width, steps):
    w = finite_or(width, float("inf"))
    for limit, scale in steps:
        if w <= limit:
            return scale
    return FULL_SCALE


def radial_scale(width) -> float:
    return _step_scale(width, RADIAL_SCALE_STEPS)


def grid_scale(width) -> float:
    return _step_scale(width, GRID_SCALE_STEPS)


def scale_for(shape, width) -> float:
    """Default scale policy: thresholds depend on the shape's family."""
    if shape.family == GRID:
        return grid_scale(width)
    return radial_scale(width)


class StaticViewport:
    """In-memory viewport; call :meth:`resize` to simulate a window change."""

    def __init__(self, width=1024):
        self.width = width
        self._listeners: Dict[int, Callable] = {}
        self._next_token = 1

    def subscribe(self, callback) -> int:
        token = self._next_token
        self._next_token += 1
        self._listeners[token] = callback
        return token

    def unsubscribe(self, token):
        self._listeners.pop(token, None)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def resize(self, width):
        self.width = width
        logger.debug("viewport resized to %s", width)
        for callback in list(self._listeners.values()):
            callback(width)

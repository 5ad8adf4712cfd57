"""
Guessing-game session: explicit state, pure transitions, and the controller
that runs them.

``step(state, event)`` is a pure function returning the next state and a list
of effects (timers to schedule, a celebration to fire).  ``SessionController``
owns one state, feeds it events, and carries out the effects against an
injected scheduler, celebration callable and viewport.

Every scheduled timer gets a fresh token and the state remembers only the
latest one, so a timer that fires after the session has moved on is a no-op.
"""

import functools
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Tuple

import numpy as np

from fractionfoods.config import (
    CELEBRATE_DELAY_MS, CELEBRATION, DEFAULT_SIZE, DENOMINATOR_BOUNDS,
    INITIAL_GUESS, NUMERATOR_BOUNDS, SHAKE_DELAY_MS, SHAPES,
    CelebrationConfig, ShapeDescriptor,
)
from fractionfoods.generator import generate_for
from fractionfoods.geometry import clamp
from fractionfoods.shapes import compute_layout
from fractionfoods.shapes._types import FractionSpec, LayoutResult
from fractionfoods.viewport import scale_for

logger = logging.getLogger(__name__)


class Phase(Enum):
    PROMPT = "prompt"
    CELEBRATE = "celebrate"
    SHAKE_FEEDBACK = "shake_feedback"   # still accepts guesses, like PROMPT


@dataclass(frozen=True)
class SessionState:
    shape_sequence: Tuple[ShapeDescriptor, ...]
    sequence_index: int
    active_fraction: FractionSpec
    user_guess: FractionSpec = FractionSpec(*INITIAL_GUESS)
    phase: Phase = Phase.PROMPT
    timer_token: int = 0    # token of the live timer, 0 when none is pending
    last_token: int = 0     # last token handed out
    round: int = 1

    @property
    def active_shape(self) -> ShapeDescriptor:
        return self.shape_sequence[self.sequence_index]

    @property
    def accepts_guesses(self) -> bool:
        return self.phase is not Phase.CELEBRATE


# ---------------------------------------------------------------------------
# Events & effects
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Submit:
    numerator: int
    denominator: int


@dataclass(frozen=True)
class AdjustGuess:
    field: str      # "numerator" or "denominator"
    delta: int


@dataclass(frozen=True)
class TimerFired:
    token: int


@dataclass(frozen=True)
class ScheduleTimer:
    token: int
    delay_ms: float


@dataclass(frozen=True)
class Celebrate:
    config: CelebrationConfig


# ---------------------------------------------------------------------------
# Pure transitions
# ---------------------------------------------------------------------------

def shuffled(shapes, rng=None) -> Tuple[ShapeDescriptor, ...]:
    """Uniform random permutation of *shapes*."""
    rng = rng or np.random
    order = rng.permutation(len(shapes))
    return tuple(shapes[i] for i in order)


def new_session(shapes=None, rng=None) -> SessionState:
    sequence = shuffled(list(shapes or SHAPES), rng)
    return SessionState(
        shape_sequence=sequence,
        sequence_index=0,
        active_fraction=generate_for(sequence[0], rng),
    )


def _schedule(state, delay_ms, **changes):
    token = state.last_token + 1
    new = replace(state, timer_token=token, last_token=token, **changes)
    return new, [ScheduleTimer(token, delay_ms)]


def _advance(state, rng):
    """Move to the next shape (reshuffling when the sequence runs out)."""
    index = state.sequence_index + 1
    sequence = state.shape_sequence
    if index >= len(sequence):
        sequence = shuffled(list(sequence), rng)
        index = 0
    return replace(
        state,
        shape_sequence=sequence,
        sequence_index=index,
        active_fraction=generate_for(sequence[index], rng),
        user_guess=FractionSpec(*INITIAL_GUESS),
        phase=Phase.PROMPT,
        timer_token=0,
        round=state.round + 1,
    )


def _bounded(numerator, denominator):
    """Guess as shown in the editors: each part clamped into its bounds."""
    return FractionSpec(clamp(int(numerator), *NUMERATOR_BOUNDS),
                        clamp(int(denominator), *DENOMINATOR_BOUNDS))


def _adjust(guess, field, delta):
    if field == "numerator":
        lo, hi = NUMERATOR_BOUNDS
        value = guess.numerator + delta
        return replace(guess, numerator=value) if lo <= value <= hi else guess
    if field == "denominator":
        lo, hi = DENOMINATOR_BOUNDS
        value = guess.denominator + delta
        return replace(guess, denominator=value) if lo <= value <= hi else guess
    return guess


def step(state: SessionState, event, rng=None) -> Tuple[SessionState, List]:
    """Apply *event* to *state*.  Returns (new_state, effects)."""
    if isinstance(event, Submit):
        if not state.accepts_guesses:
            return state, []
        target = state.active_fraction
        guess = _bounded(event.numerator, event.denominator)
        if (event.numerator == target.numerator
                and event.denominator == target.denominator):
            new, effects = _schedule(state, CELEBRATE_DELAY_MS,
                                     phase=Phase.CELEBRATE, user_guess=guess)
            return new, [Celebrate(CELEBRATION)] + effects
        return _schedule(state, SHAKE_DELAY_MS,
                         phase=Phase.SHAKE_FEEDBACK, user_guess=guess)

    if isinstance(event, AdjustGuess):
        if not state.accepts_guesses:
            return state, []
        guess = _adjust(state.user_guess, event.field, event.delta)
        if guess == state.user_guess:
            return state, []
        return replace(state, user_guess=guess), []

    if isinstance(event, TimerFired):
        if event.token == 0 or event.token != state.timer_token:
            return state, []
        if state.phase is Phase.CELEBRATE:
            return _advance(state, rng), []
        return replace(state, phase=Phase.PROMPT, timer_token=0), []

    raise TypeError(f"unknown session event: {event!r}")


# ---------------------------------------------------------------------------
# Controller
# ---------------------------------------------------------------------------

class SessionController:
    """Runs a session against a scheduler, a celebration hook and a viewport.

    Use as a context manager (or call :meth:`close`) so the pending timer is
    cancelled and the viewport subscription released.
    """

    def __init__(self, scheduler, viewport=None, celebrate=None, rng=None,
                 shapes=None, size_hint=DEFAULT_SIZE, scale_policy=scale_for,
                 on_change=None):
        self.scheduler = scheduler
        self.viewport = viewport
        self.celebrate = celebrate
        self.rng = rng
        self.size_hint = size_hint
        self.scale_policy = scale_policy
        self.on_change = on_change
        self.state = new_session(shapes, rng)
        self._handle = None
        self._closed = False
        self._subscription = viewport.subscribe(self._on_resize) if viewport is not None else None
        logger.info("session started: round %d, %s showing %s",
                    self.state.round, self.active_shape.name, self.state.active_fraction)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def active_shape(self) -> ShapeDescriptor:
        return self.state.active_shape

    @property
    def question(self) -> str:
        return self.active_shape.question

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def scale_factor(self) -> float:
        if self.viewport is None:
            return 1.0
        return self.scale_policy(self.active_shape, self.viewport.width)

    def layout(self, show_dividers=True) -> LayoutResult:
        return compute_layout(
            self.active_shape, self.state.active_fraction,
            self.size_hint, self.scale_factor, show_dividers=show_dividers,
        )

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def dispatch(self, event) -> SessionState:
        if self._closed:
            return self.state
        previous = self.state
        self.state, effects = step(previous, event, self.rng)
        self._run(effects)
        if self.state is not previous:
            logger.debug("%s: %s -> %s", type(event).__name__,
                         previous.phase.value, self.state.phase.value)
            if self.state.round != previous.round:
                logger.info("round %d: %s showing %s", self.state.round,
                            self.active_shape.name, self.state.active_fraction)
            self._notify()
        return self.state

    def submit(self, numerator, denominator=None) -> SessionState:
        """Submit a guess, either as a ``FractionSpec`` or two integers."""
        if denominator is None:
            numerator, denominator = numerator.numerator, numerator.denominator
        return self.dispatch(Submit(numerator, denominator))

    def submit_current(self) -> SessionState:
        guess = self.state.user_guess
        return self.dispatch(Submit(guess.numerator, guess.denominator))

    def adjust_guess(self, field, delta) -> SessionState:
        return self.dispatch(AdjustGuess(field, delta))

    # ------------------------------------------------------------------
    # Effects
    # ------------------------------------------------------------------

    def _run(self, effects):
        for effect in effects:
            if isinstance(effect, ScheduleTimer):
                self._cancel_pending()
                self._handle = self.scheduler.call_later(
                    effect.delay_ms, functools.partial(self._on_timer, effect.token))
            elif isinstance(effect, Celebrate):
                self._fire_celebration(effect.config)

    def _fire_celebration(self, config):
        if self.celebrate is None:
            return
        try:
            self.celebrate(config)
        except Exception:
            logger.exception("celebration hook failed")

    def _on_timer(self, token):
        if self._closed:
            return
        self.dispatch(TimerFired(token))

    def _on_resize(self, width):
        if self._closed:
            return
        logger.debug("viewport width %s -> scale %.2f", width, self.scale_factor)
        self._notify()

    def _notify(self):
        if self.on_change is not None:
            self.on_change(self.state)

    def _cancel_pending(self):
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    # ------------------------------------------------------------------
    # Teardown
    # ------------------------------------------------------------------

    def close(self):
        if self._closed:
            return
        self._closed = True
        self._cancel_pending()
        if self._subscription is not None:
            self.viewport.unsubscribe(self._subscription)
            self._subscription = None
        logger.debug("session closed after %d round(s)", self.state.round)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

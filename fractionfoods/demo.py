"""
Interactive console game.

Plays the guessing game in a terminal.  Time is simulated: after each
submission the scheduler is advanced past the feedback delay, so the next
prompt appears immediately.

Usage (CLI):
    python -m fractionfoods.demo [--width 1024] [--seed 0] [--preview-dir outputs/rounds]

Commands at the prompt:
    3/8      submit 3/8
    n+ n-    adjust the numerator guess
    d+ d-    adjust the denominator guess
    s        submit the current guess
    q        quit

Or from a notebook:
    from fractionfoods.demo import play
    play(commands=["n+", "d+", "s", "q"])
"""

import argparse
import logging
import os

import numpy as np

from fractionfoods.config import CELEBRATE_DELAY_MS, INTRO_TEXT, SHAKE_DELAY_MS
from fractionfoods.logging_config import setup_logging
from fractionfoods.raster import render_layout, save_png
from fractionfoods.scheduler import ManualScheduler
from fractionfoods.session import Phase, SessionController
from fractionfoods.viewport import StaticViewport

ADJUSTMENTS = {
    "n+": ("numerator", 1),
    "n-": ("numerator", -1),
    "d+": ("denominator", 1),
    "d-": ("denominator", -1),
}


def _describe(layout):
    """Text stand-in for the picture: which slices / cells are decorated."""
    total, filled = layout.fraction.denominator, layout.fraction.numerator
    bar = "#" * filled + "." * (total - filled)
    return f"[{bar}]  ({len(layout.decorations)} toppings)"


def _parse_fraction(text):
    try:
        n, d = text.split("/")
        return int(n), int(d)
    except ValueError:
        return None


def play(commands=None, width=1024, seed=None, preview_dir=None, out=print):
    """Run the game loop.  *commands* replaces ``input()`` when given.

    Returns the number of rounds answered correctly.
    """
    rng = np.random.RandomState(seed) if seed is not None else None
    scheduler = ManualScheduler()
    celebrations = []
    feed = iter(commands) if commands is not None else None

    out(INTRO_TEXT)
    with SessionController(scheduler, viewport=StaticViewport(width), rng=rng,
                           celebrate=celebrations.append) as controller:
        shown_round = 0
        while True:
            state = controller.state
            if state.round != shown_round:
                shown_round = state.round
                layout = controller.layout()
                out(f"\nRound {state.round}: {controller.question}")
                out(_describe(layout))
                if preview_dir:
                    path = os.path.join(preview_dir, f"round_{state.round:03d}.png")
                    save_png(render_layout(layout), path)
                    out(f"(preview saved to {path})")

            guess = state.user_guess
            prompt = f"guess {guess.numerator}/{guess.denominator} > "
            if feed is None:
                try:
                    cmd = input(prompt).strip()
                except EOFError:
                    break
            else:
                cmd = next(feed, "q").strip()

            if cmd == "q":
                break
            if cmd in ADJUSTMENTS:
                controller.adjust_guess(*ADJUSTMENTS[cmd])
                continue
            if cmd == "s":
                controller.submit_current()
            else:
                parsed = _parse_fraction(cmd)
                if parsed is None:
                    out("Type a fraction like 3/8, n+/n-/d+/d-, s or q.")
                    continue
                controller.submit(*parsed)

            if controller.state.phase is Phase.CELEBRATE:
                out(f"Correct! It was {controller.state.active_fraction}.")
                scheduler.advance(CELEBRATE_DELAY_MS)
            elif controller.state.phase is Phase.SHAKE_FEEDBACK:
                out("Not quite, try again.")
                scheduler.advance(SHAKE_DELAY_MS)

    out(f"\nThanks for playing: {len(celebrations)} correct.")
    return len(celebrations)


def main():
    p = argparse.ArgumentParser(description="Fraction Foods console game")
    p.add_argument("--width", type=int, default=1024,
                   help="Simulated viewport width (drives the scale factor)")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--preview-dir", default=None,
                   help="Save a PNG preview of every round here")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = p.parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
    play(width=args.width, seed=args.seed, preview_dir=args.preview_dir)


if __name__ == "__main__":
    main()

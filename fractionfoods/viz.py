"""
Visualization and diagnostics toolkit.

Provides functions for inspecting layouts across shapes and denominators,
watching a simulated session play out, and checking the distribution of
generated fractions.

Usage (CLI):
    python -m fractionfoods.viz gallery  [--numerator 3 --denominator 8] [--save-path ...]
    python -m fractionfoods.viz sweep    --shape donut [--save-path ...]
    python -m fractionfoods.viz session  [--rounds 8] [--seed 0] [--save-path ...]
    python -m fractionfoods.viz stats    [--num-samples 5000] [--save-path ...]

Or from a notebook:
    from fractionfoods.viz import visualize_gallery
    visualize_gallery(numerator=3, denominator=8)
"""

import argparse
import logging
import os

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
from PIL import Image, ImageDraw
from tqdm import tqdm

from fractionfoods.config import (
    CELEBRATE_DELAY_MS, DEFAULT_SIZE, GRID, RADIAL, SHAKE_DELAY_MS, SHAPE_NAMES, SHAPES,
)
from fractionfoods.generator import generate_for
from fractionfoods.logging_config import setup_logging
from fractionfoods.raster import render_layout, to_uint8
from fractionfoods.scheduler import ManualScheduler
from fractionfoods.session import Phase, SessionController
from fractionfoods.shapes import compute_layout
from fractionfoods.viewport import StaticViewport

logger = logging.getLogger(__name__)


def _axes_grid(n, cols, tile=3.5):
    cols = min(n, cols)
    rows = (n + cols - 1) // cols
    fig, axes = plt.subplots(rows, cols, figsize=(tile * cols, tile * rows))
    axes = np.atleast_1d(axes).ravel().tolist()
    return fig, axes


def _save(fig, save_path):
    plt.tight_layout()
    os.makedirs(os.path.dirname(save_path) or ".", exist_ok=True)
    fig.savefig(save_path, dpi=120, bbox_inches="tight")
    plt.close(fig)


# -----------------------------------------------------------------------
# 1. Gallery: every shape at one fraction
# -----------------------------------------------------------------------

def visualize_gallery(numerator=3, denominator=8, scale=1.0,
                      save_path="outputs/gallery.png"):
    """Render all six shapes showing the same fraction.

    Grid shapes only support their lookup table cleanly, so an odd
    denominator shows their single-row fallback.
    """
    fig, axes = _axes_grid(len(SHAPES), 3)
    for ax, shape in zip(axes, SHAPES):
        layout = compute_layout(shape, (numerator, denominator), DEFAULT_SIZE, scale)
        ax.imshow(render_layout(layout))
        ax.set_title(f"{shape.name}  {layout.fraction}\n"
                     f"{len(layout.decorations)} decorations, "
                     f"{len(layout.dividers)} dividers", fontsize=9)
        ax.axis("off")
    for ax in axes[len(SHAPES):]:
        ax.axis("off")
    _save(fig, save_path)
    print(f"Gallery saved to {save_path}")


# -----------------------------------------------------------------------
# 2. Sweep: one shape across denominators 1..12
# -----------------------------------------------------------------------

def visualize_sweep(shape_name="pizza", scale=1.0, save_path="outputs/sweep.png"):
    """Show *shape_name* at n/n for every denominator 1..12 (fully decorated)."""
    shape = SHAPE_NAMES[shape_name]
    fig, axes = _axes_grid(12, 4, tile=3.0)
    for d, ax in zip(range(1, 13), axes):
        layout = compute_layout(shape, (d, d), DEFAULT_SIZE, scale)
        ax.imshow(render_layout(layout))
        ax.set_title(f"{shape.name} {layout.fraction}", fontsize=9)
        ax.axis("off")
    _save(fig, save_path)
    print(f"Sweep saved to {save_path}")


# -----------------------------------------------------------------------
# 3. Session GIF (auto-played rounds)
# -----------------------------------------------------------------------

def _session_frame(controller, caption, size=DEFAULT_SIZE):
    """Fixed-size frame: the rendered layout centred under a caption bar."""
    S = int(size * 1.6)
    canvas = np.ones((S, S, 3), dtype=np.float32)
    img = render_layout(controller.layout())
    h, w = min(img.shape[0], S - 40), min(img.shape[1], S)
    top, left = 40 + (S - 40 - h) // 2, (S - w) // 2
    canvas[top:top + h, left:left + w] = img[:h, :w]
    if controller.state.phase is Phase.CELEBRATE:
        canvas[:6] = (0.2, 0.8, 0.3)
    elif controller.state.phase is Phase.SHAKE_FEEDBACK:
        canvas[:6] = (0.9, 0.2, 0.2)
    frame = Image.fromarray(to_uint8(canvas))
    ImageDraw.Draw(frame).text((8, 12), caption, fill=(40, 40, 40))
    return frame


def create_session_gif(rounds=8, seed=0, wrong_first=True,
                       save_path="outputs/session.gif"):
    """Simulate a session (a wrong guess, then the right one, each round)
    and save it as an animated GIF."""
    rng = np.random.RandomState(seed)
    scheduler = ManualScheduler()
    celebrations = []
    frames = []

    with SessionController(scheduler, viewport=StaticViewport(1024), rng=rng,
                           celebrate=celebrations.append) as controller:
        for _ in tqdm(range(rounds), desc="Session", leave=False):
            state = controller.state
            target = state.active_fraction
            caption = f"round {state.round}: {controller.question}"
            frames.append(_session_frame(controller, caption))
            if wrong_first:
                # denominators start at 2, so this always differs from the target
                wrong_n = target.numerator % target.denominator + 1
                wrong_d = target.denominator
                controller.submit(wrong_n, wrong_d)
                frames.append(_session_frame(controller, f"guess {wrong_n}/{wrong_d}: try again"))
                scheduler.advance(SHAKE_DELAY_MS)
            controller.submit(target)
            frames.append(_session_frame(controller, f"guess {target}: correct!"))
            scheduler.advance(CELEBRATE_DELAY_MS)

    os.makedirs(os.path.dirname(save_path) or ".", exist_ok=True)
    if frames:
        frames[0].save(save_path, save_all=True, append_images=frames[1:],
                       duration=700, loop=0)
    print(f"Session GIF saved to {save_path} ({len(frames)} frames, "
          f"{len(celebrations)} celebrations)")
    return frames


# -----------------------------------------------------------------------
# 4. Generated fraction statistics
# -----------------------------------------------------------------------

def fraction_statistics(num_samples=5000, seed=0, save_path="outputs/fraction_stats.png"):
    """Histogram denominators and numerator/denominator ratios per family."""
    rng = np.random.RandomState(seed)
    families = {RADIAL: [], GRID: []}
    for _ in range(num_samples):
        shape = SHAPES[rng.randint(len(SHAPES))]
        families[shape.family].append(generate_for(shape, rng))

    fig, axes = plt.subplots(2, 2, figsize=(10, 7))
    for row, (family, fracs) in enumerate(families.items()):
        dens = [f.denominator for f in fracs]
        ratios = [f.numerator / f.denominator for f in fracs]
        ax = axes[row, 0]
        ax.hist(dens, bins=np.arange(0.5, 13.5, 1.0), color="steelblue", alpha=0.8)
        ax.set_title(f"{family}: denominators (n={len(fracs)})")
        ax = axes[row, 1]
        ax.hist(ratios, bins=24, range=(0, 1), color="coral", alpha=0.8)
        ax.set_title(f"{family}: numerator / denominator")
    for ax in axes.ravel():
        ax.grid(True, alpha=0.3)
    _save(fig, save_path)
    print(f"Fraction statistics saved to {save_path}")


# -----------------------------------------------------------------------
# CLI
# -----------------------------------------------------------------------

def main():
    p = argparse.ArgumentParser(description="Fraction Foods visualization toolkit")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = p.add_subparsers(dest="command")

    ga = sub.add_parser("gallery", help="All shapes at one fraction")
    ga.add_argument("--numerator", type=int, default=3)
    ga.add_argument("--denominator", type=int, default=8)
    ga.add_argument("--scale", type=float, default=1.0)
    ga.add_argument("--save-path", default="outputs/gallery.png")

    sw = sub.add_parser("sweep", help="One shape across denominators 1..12")
    sw.add_argument("--shape", choices=sorted(SHAPE_NAMES), default="pizza")
    sw.add_argument("--scale", type=float, default=1.0)
    sw.add_argument("--save-path", default="outputs/sweep.png")

    se = sub.add_parser("session", help="Auto-played session as a GIF")
    se.add_argument("--rounds", type=int, default=8)
    se.add_argument("--seed", type=int, default=0)
    se.add_argument("--no-wrong", action="store_true",
                    help="Skip the deliberate wrong guess each round")
    se.add_argument("--save-path", default="outputs/session.gif")

    st = sub.add_parser("stats", help="Generated fraction statistics")
    st.add_argument("--num-samples", type=int, default=5000)
    st.add_argument("--seed", type=int, default=0)
    st.add_argument("--save-path", default="outputs/fraction_stats.png")

    args = p.parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if args.command == "gallery":
        visualize_gallery(args.numerator, args.denominator, args.scale, save_path=args.save_path)

    elif args.command == "sweep":
        visualize_sweep(args.shape, args.scale, save_path=args.save_path)

    elif args.command == "session":
        create_session_gif(args.rounds, args.seed, wrong_first=not args.no_wrong,
                           save_path=args.save_path)

    elif args.command == "stats":
        fraction_statistics(args.num_samples, args.seed, save_path=args.save_path)

    else:
        p.print_help()


if __name__ == "__main__":
    main()

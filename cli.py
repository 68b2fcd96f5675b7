"""
cli.py — Terminal Playground
=============================
Runs the playground without a browser: one text frame per step, with
the same per-step pauses the page uses.

    python cli.py linear_search --target 42
    python cli.py bubble_sort binary_search --target 42 --size 12 --seed 7
    python cli.py binary_search --values 4,1,3 --target 3     # refused: unsorted

Several algorithm keys run one after another on the same array, which
is how the classroom walk-through goes (search, sort, search again).
"""

import argparse
import logging
import sys
import time
from typing import List, Optional

from algorithms import REGISTRY
from algorithms.step import Step
from engine import PlaygroundController, SPEED_PRESETS
from settings import PlaygroundSettings
from store import ArrayStore, parse_int
from ui import render_text

logger = logging.getLogger(__name__)


def parse_values(raw: str) -> List[int]:
    values = []
    for part in raw.split(","):
        n = parse_int(part)
        if n is None:
            raise argparse.ArgumentTypeError(f"not an integer: {part!r}")
        values.append(n)
    return values


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Linear search, bubble sort and binary search, step by step")
    parser.add_argument("algorithms", nargs="+", choices=list(REGISTRY), help="Algorithm(s) to run, in order")
    parser.add_argument("--target", help="Value to search for")
    parser.add_argument("--size", help="Number of elements (5-50)")
    parser.add_argument("--max", dest="max_value", help="Largest value (10-999)")
    parser.add_argument("--seed", type=int, help="Seed for a reproducible array")
    parser.add_argument("--values", type=parse_values, help="Comma-separated array instead of a random one")
    parser.add_argument("--speed", default=None, choices=list(SPEED_PRESETS), help="Playback speed")
    parser.add_argument("--no-delay", action="store_true", help="Skip the pauses between steps")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None, out=None) -> int:
    args = parse_args(argv)
    out = out or sys.stdout
    settings = PlaygroundSettings.from_env()

    logging.basicConfig(
        level=logging.DEBUG if (args.debug or settings.debug) else logging.WARNING,
        format="%(levelname)-7s %(name)s: %(message)s",
    )

    def draw(step: Step) -> None:
        line = render_text(step.values, step.marker)
        note = step.log_line or step.status
        print(f"{line}    {note}", file=out)

    ctrl = PlaygroundController(store=ArrayStore(args.values), settings=settings, on_render=draw)
    if args.speed:
        ctrl.set_speed(args.speed)
    if args.values is None:
        ctrl.generate(args.size, args.max_value, seed=args.seed)
        print(ctrl.status, file=out)
    print(render_text(ctrl.store.values), file=out)

    sleep = (lambda _seconds: None) if args.no_delay else time.sleep
    refused = False
    for key in args.algorithms:
        print(f"\n== {REGISTRY[key].label} ==", file=out)
        if ctrl.run(key, args.target) is None:
            refused = True
        else:
            ctrl.play(sleep)
        print(ctrl.status, file=out)

    return 1 if refused else 0


if __name__ == "__main__":
    sys.exit(main())

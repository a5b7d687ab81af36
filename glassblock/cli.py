import argparse
import logging
import sys
import time
from typing import List, Optional, Tuple

from .controller import DesignController
from .export.design_text import export_design, supply_shortfall
from .utils.errors import DesignError


def _pair(text: str) -> Tuple[int, str]:
    idx, sep, value = text.partition("=")
    if not sep or not idx.strip().isdigit():
        raise argparse.ArgumentTypeError(f"expected INDEX=VALUE, got {text!r}")
    return int(idx), value.strip()


def _size(text: str) -> Tuple[int, int]:
    w, sep, h = text.lower().partition("x")
    if not sep or not w.isdigit() or not h.isdigit():
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {text!r}")
    return int(w), int(h)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="glassblock", description="Build a glass block design document.")
    parser.add_argument("--load", default=None, help="Start from a saved design.json")
    parser.add_argument("--windows", type=int, default=None, help="Number of windows (1-20)")
    parser.add_argument("--size", type=_size, action="append", default=[],
                        help="Window size WIDTHxHEIGHT, repeat once per window in order")
    parser.add_argument("--colors", type=int, default=None, help="Number of colors (1-20)")
    parser.add_argument("--color", type=_pair, action="append", default=[], help="Slot color, e.g. 0=#ff8800")
    parser.add_argument("--count", type=_pair, action="append", default=[], help="Slot block count, e.g. 0=40")
    parser.add_argument("--out", default=None, help="Write design.json and the supply list here")
    parser.add_argument("--verbose", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    ctl = DesignController()
    t0 = time.time()
    try:
        if args.load:
            with open(args.load) as f:
                ctl.load(f.read())
        state = ctl.state
        if args.windows is not None:
            state.set_num_windows(args.windows)
        for i, (w, h) in enumerate(args.size):
            window = state.get_window(i)
            window.set_width(w)
            window.set_height(h)
        supply = state.get_block_supply()
        if args.colors is not None:
            supply.set_num_colors(args.colors)
        for i, color in args.color:
            supply.set_color(i, color)
        for i, count in args.count:
            if not count.isdigit():
                raise DesignError(f"Block count for slot {i} must be a whole number, got {count!r}")
            supply.set_block_count(i, int(count))
    except (DesignError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    if args.verbose:
        print(f"[TIMER] build design: {time.time()-t0:.3f}s", file=sys.stderr)

    print(ctl.design_text())

    short = supply_shortfall(state)
    if short:
        print(f"note: supply is {short} blocks short of filling every window", file=sys.stderr)

    if args.out:
        for p in export_design(state, args.out).values():
            print(f"wrote {p}", file=sys.stderr)
    return 0

# glassblock/model/colors.py
import math
import re
from typing import Any, Tuple

from ..utils.limits import MAX_COLORS

HEX_COLOR = re.compile(r"#[0-9a-fA-F]{6}")

# Stepping 2*pi/MAX_COLORS would cluster the first few slots in one arc of the wheel.
# (MAX_COLORS + 1) / 3 turns per step spreads consecutive slots far apart instead.
STEP = 2 * math.pi * ((MAX_COLORS + 1) / 3) / MAX_COLORS


def is_hex_color(value: Any) -> bool:
    return isinstance(value, str) and HEX_COLOR.fullmatch(value) is not None


def _channel(theta: float) -> str:
    v = round((math.cos(theta) + 1) * 127.5)
    v = max(0, min(255, v))
    return f"{v:02x}"


def make_default_color(index: int) -> str:
    """Deterministic default color for slot `index`, as lowercase #rrggbb.

    Walks a point around the color wheel with three cosines a third of a turn
    apart. Pure: the result depends on `index` only, so growing and shrinking a
    palette always regenerates the same colors.
    """
    theta = index * STEP
    return "#" + "".join(_channel(theta + k * 2 * math.pi / 3) for k in range(3))


def hex_to_rgb(color: str) -> Tuple[int, int, int]:
    return int(color[1:3], 16), int(color[3:5], 16), int(color[5:7], 16)


def color_distance(a: str, b: str) -> float:
    """Euclidean distance between two hex colors in RGB space."""
    return math.dist(hex_to_rgb(a), hex_to_rgb(b))

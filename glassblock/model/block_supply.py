# glassblock/model/block_supply.py
import logging
from typing import Any, Dict, List, Mapping

from ..utils.design_schema import BlockSupplyDoc, dump
from ..utils.errors import ValidationError
from ..utils.json_input import DesignInput, json_int, optional_list, parse_text, require_mapping
from ..utils.limits import LIMITS, MAX_COLORS
from .colors import is_hex_color, make_default_color
from .fields import check_count, check_index, check_int_range

logger = logging.getLogger(__name__)

HEX_HINT = "Color must be a valid hex color (e.g., #ff0000)"


class BlockSupply:
    """The palette: one slot per color, each with the number of blocks on hand.

    `colors` and `block_counts` are index-aligned and always `num_colors` long.
    Resizing appends default slots or truncates from the end, so slots below the
    new size keep whatever the user set.
    """

    def __init__(self):
        n = LIMITS.default_num_colors
        self._num_colors = n
        self._colors: List[str] = [make_default_color(i) for i in range(n)]
        self._block_counts: List[int] = [0] * n

    def __repr__(self) -> str:
        return f"BlockSupply(num_colors={self._num_colors}, colors={self._colors!r}, block_counts={self._block_counts!r})"

    # --- reads
    def get_num_colors(self) -> int:
        return self._num_colors

    def get_colors(self) -> List[str]:
        return list(self._colors)

    def get_color(self, index: int) -> str:
        return self._colors[check_index(index, self._num_colors, "Color")]

    def get_block_count(self, index: int) -> int:
        return self._block_counts[check_index(index, self._num_colors, "Color")]

    def get_block_counts(self) -> List[int]:
        return list(self._block_counts)

    def total_blocks(self) -> int:
        return sum(self._block_counts)

    # --- writes
    def set_num_colors(self, count: Any):
        check_int_range(count, "Number of colors", 1, MAX_COLORS)
        old = self._num_colors
        if count > old:
            self._colors.extend(make_default_color(i) for i in range(old, count))
            self._block_counts.extend([0] * (count - old))
        else:
            del self._colors[count:]
            del self._block_counts[count:]
        self._num_colors = count
        if count != old:
            logger.debug("block supply resized %d -> %d colors", old, count)

    def set_color(self, index: int, hex_color: Any):
        check_index(index, self._num_colors, "Color")
        if not is_hex_color(hex_color):
            raise ValidationError(HEX_HINT)
        self._colors[index] = hex_color.lower()

    def set_block_count(self, index: int, count: Any):
        check_index(index, self._num_colors, "Color")
        self._block_counts[index] = check_count(count, "Block count")

    # --- wire form
    def serialize(self) -> Dict[str, Any]:
        return dump(BlockSupplyDoc(
            num_colors=self._num_colors,
            colors=list(self._colors),
            block_counts=list(self._block_counts),
        ))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BlockSupply":
        data = require_mapping(data, "Block supply")
        supply = cls()
        if "numColors" in data:
            supply.set_num_colors(json_int(data["numColors"]))
        colors = optional_list(data, "colors", "Colors")
        counts = optional_list(data, "blockCounts", "Block counts")
        # entries past num_colors are ignored
        for i, color in enumerate(colors[:supply._num_colors]):
            if color is not None:
                supply.set_color(i, color)
        for i, count in enumerate(counts[:supply._num_colors]):
            if count is not None:
                supply.set_block_count(i, json_int(count))
        return supply

    @classmethod
    def from_json_text(cls, text: str) -> "BlockSupply":
        return cls.from_dict(parse_text(text))

    @classmethod
    def deserialize(cls, data: DesignInput) -> "BlockSupply":
        if isinstance(data, str):
            return cls.from_json_text(data)
        return cls.from_dict(data)

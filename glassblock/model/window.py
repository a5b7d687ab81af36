# glassblock/model/window.py
from typing import Any, Dict, Mapping

from ..utils.design_schema import WindowDoc, dump
from ..utils.json_input import DesignInput, json_int, parse_text, require_mapping
from ..utils.limits import LIMITS
from .fields import check_int_range


class Window:
    """One rectangular opening, measured in blocks."""

    def __init__(self):
        self._width = LIMITS.default_width
        self._height = LIMITS.default_height

    def __repr__(self) -> str:
        return f"Window(width={self._width}, height={self._height})"

    def get_width(self) -> int:
        return self._width

    def get_height(self) -> int:
        return self._height

    def set_width(self, value: Any):
        self._width = check_int_range(value, "Width", LIMITS.min_dimension, LIMITS.max_dimension)

    def set_height(self, value: Any):
        self._height = check_int_range(value, "Height", LIMITS.min_dimension, LIMITS.max_dimension)

    def block_area(self) -> int:
        return self._width * self._height

    def serialize(self) -> Dict[str, int]:
        return dump(WindowDoc(width=self._width, height=self._height))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Window":
        data = require_mapping(data, "Window")
        window = cls()
        if "width" in data:
            window.set_width(json_int(data["width"]))
        if "height" in data:
            window.set_height(json_int(data["height"]))
        return window

    @classmethod
    def from_json_text(cls, text: str) -> "Window":
        return cls.from_dict(parse_text(text))

    @classmethod
    def deserialize(cls, data: DesignInput) -> "Window":
        if isinstance(data, str):
            return cls.from_json_text(data)
        return cls.from_dict(data)

# glassblock/model/state.py
import logging
from typing import Any, Dict, List, Mapping

from ..utils.design_schema import DesignDoc, dump
from ..utils.json_input import DesignInput, json_int, optional_list, parse_text, require_mapping
from ..utils.limits import LIMITS, MAX_WINDOWS
from .block_supply import BlockSupply
from .fields import check_index, check_int_range
from .window import Window

logger = logging.getLogger(__name__)


class DesignState:
    """The whole design: the windows to fill and the block supply to fill them with.

    Owned by a single caller for the length of an editing session. Windows are
    edited through their own setters; `get_windows()` returns the live list so
    that works, but callers must not add or remove entries themselves.
    """

    def __init__(self):
        n = LIMITS.default_num_windows
        self._num_windows = n
        self._windows: List[Window] = [Window() for _ in range(n)]
        self._block_supply = BlockSupply()

    def __repr__(self) -> str:
        return f"DesignState(num_windows={self._num_windows}, block_supply={self._block_supply!r})"

    def get_num_windows(self) -> int:
        return self._num_windows

    def get_windows(self) -> List[Window]:
        return self._windows

    def get_window(self, index: int) -> Window:
        return self._windows[check_index(index, self._num_windows, "Window")]

    def get_block_supply(self) -> BlockSupply:
        return self._block_supply

    def set_num_windows(self, count: Any):
        check_int_range(count, "Number of windows", 1, MAX_WINDOWS)
        old = self._num_windows
        if count > old:
            self._windows.extend(Window() for _ in range(count - old))
        else:
            del self._windows[count:]
        self._num_windows = count
        if count != old:
            logger.debug("design resized %d -> %d windows", old, count)

    def serialize(self) -> Dict[str, Any]:
        # children serialize themselves, the document model checks the assembled whole
        doc = DesignDoc.model_validate({
            "numWindows": self._num_windows,
            "windows": [w.serialize() for w in self._windows],
            "blockSupply": self._block_supply.serialize(),
        })
        return dump(doc)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DesignState":
        data = require_mapping(data, "Design")
        state = cls()
        if "numWindows" in data:
            state.set_num_windows(json_int(data["numWindows"]))
        # overlay: slot i is rebuilt from entry i, entries past num_windows are ignored
        entries = optional_list(data, "windows", "Windows")
        for i, entry in enumerate(entries[:state._num_windows]):
            if entry is not None:
                state._windows[i] = Window.from_dict(entry)
        if data.get("blockSupply") is not None:
            state._block_supply = BlockSupply.from_dict(data["blockSupply"])
        return state

    @classmethod
    def from_json_text(cls, text: str) -> "DesignState":
        return cls.from_dict(parse_text(text))

    @classmethod
    def deserialize(cls, data: DesignInput) -> "DesignState":
        if isinstance(data, str):
            return cls.from_json_text(data)
        return cls.from_dict(data)

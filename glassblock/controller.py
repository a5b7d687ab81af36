# glassblock/controller.py
import logging
from typing import Any, Callable, NamedTuple, Optional

from .export.design_text import design_text
from .model.state import DesignState
from .utils.errors import SlotIndexError, ValidationError
from .utils.json_input import DesignInput

logger = logging.getLogger(__name__)

DIMENSIONS = ("width", "height")


class EditResult(NamedTuple):
    ok: bool
    value: Any
    message: Optional[str] = None


class DesignController:
    """Applies form edits to an owned DesignState.

    A rejected edit leaves the state untouched and reports the last valid value,
    which is what the form field should be reset to.
    """

    def __init__(self, state: Optional[DesignState] = None):
        self.state = state if state is not None else DesignState()

    def _apply(self, field: str, apply: Callable[[], None], current: Callable[[], Any]) -> EditResult:
        try:
            apply()
        except (ValidationError, SlotIndexError) as e:
            logger.info("rejected %s edit: %s", field, e)
            try:
                last = current()
            except SlotIndexError:
                last = None
            return EditResult(False, last, f"Invalid {field}: {e}")
        return EditResult(True, current())

    def update_num_windows(self, count: Any) -> EditResult:
        s = self.state
        return self._apply("number of windows", lambda: s.set_num_windows(count), s.get_num_windows)

    def update_window_dimension(self, index: int, dimension: str, value: Any) -> EditResult:
        if dimension not in DIMENSIONS:
            raise ValidationError(f"Unknown window dimension {dimension!r}")
        s = self.state

        def apply():
            window = s.get_window(index)
            getattr(window, f"set_{dimension}")(value)

        def current():
            return getattr(s.get_window(index), f"get_{dimension}")()

        return self._apply(dimension, apply, current)

    def update_num_colors(self, count: Any) -> EditResult:
        supply = self.state.get_block_supply()
        return self._apply("number of colors", lambda: supply.set_num_colors(count), supply.get_num_colors)

    def update_color(self, index: int, hex_color: Any) -> EditResult:
        supply = self.state.get_block_supply()
        return self._apply("color", lambda: supply.set_color(index, hex_color), lambda: supply.get_color(index))

    def update_block_count(self, index: int, count: Any) -> EditResult:
        supply = self.state.get_block_supply()
        return self._apply(
            "block count", lambda: supply.set_block_count(index, count), lambda: supply.get_block_count(index)
        )

    def load(self, data: DesignInput) -> DesignState:
        # replaced only once the whole document has been built
        self.state = DesignState.deserialize(data)
        return self.state

    def design_text(self) -> str:
        return design_text(self.state)

import pytest

from glassblock.controller import DesignController, EditResult
from glassblock.model.state import DesignState
from glassblock.utils.errors import ParseError, ValidationError


def test_owns_a_fresh_state_by_default() -> None:
    a, b = DesignController(), DesignController()
    assert a.state is not b.state
    s = DesignState()
    assert DesignController(s).state is s


def test_window_dimension_edit() -> None:
    ctl = DesignController()
    ctl.update_num_windows(2)
    assert ctl.update_window_dimension(1, "width", 14) == EditResult(True, 14)
    assert ctl.state.get_windows()[1].get_width() == 14


def test_rejected_edit_reports_last_valid_value() -> None:
    ctl = DesignController()
    ctl.update_window_dimension(0, "height", 9)
    res = ctl.update_window_dimension(0, "height", 0)
    assert not res.ok
    assert res.value == 9
    assert res.message == "Invalid height: Height must be between 1 and 100"


def test_rejected_edit_on_missing_window() -> None:
    res = DesignController().update_window_dimension(3, "width", 5)
    assert not res.ok
    assert res.value is None
    assert "Window index 3 is out of range" in res.message


def test_unknown_dimension_raises() -> None:
    with pytest.raises(ValidationError):
        DesignController().update_window_dimension(0, "depth", 5)


def test_supply_edits() -> None:
    ctl = DesignController()
    assert ctl.update_block_count(0, 5).ok
    assert ctl.update_num_colors(4) == EditResult(True, 4)
    assert ctl.update_num_colors(2).ok
    assert ctl.state.get_block_supply().get_block_counts() == [5, 0]

    before = ctl.state.get_block_supply().get_color(0)
    res = ctl.update_color(0, "red")
    assert res == EditResult(False, before, "Invalid color: Color must be a valid hex color (e.g., #ff0000)")
    assert ctl.update_color(1, "#ABCDEF").value == "#abcdef"

    res = ctl.update_num_windows(21)
    assert not res.ok and res.value == 1


def test_load_replaces_state_only_on_success() -> None:
    ctl = DesignController()
    ctl.update_num_windows(4)
    kept = ctl.state
    with pytest.raises(ParseError):
        ctl.load("not json")
    with pytest.raises(ValidationError):
        ctl.load({"numWindows": 2, "windows": [{"width": -1}]})
    assert ctl.state is kept

    ctl.load('{"numWindows": 2}')
    assert ctl.state is not kept
    assert ctl.state.get_num_windows() == 2
    assert '"numWindows": 2' in ctl.design_text()

import csv
import json
import os

from glassblock.export.design_text import design_text, export_design, supply_shortfall, window_block_totals, write_design
from glassblock.export.supply_list import make_supply_list, write_supply_list
from glassblock.model.state import DesignState


def _state() -> DesignState:
    s = DesignState()
    s.set_num_windows(2)
    s.get_windows()[1].set_width(10)
    supply = s.get_block_supply()
    supply.set_num_colors(2)
    supply.set_color(0, "#ff8000")
    supply.set_block_count(0, 50)
    supply.set_block_count(1, 20)
    return s


def test_design_text_is_indented_json() -> None:
    s = _state()
    text = design_text(s)
    assert text.startswith('{\n  "numWindows": 2')
    assert json.loads(text) == s.serialize()


def test_write_design_loads_back(tmp_path) -> None:
    s = _state()
    path = write_design(s, str(tmp_path / "out"))
    with open(path) as f:
        assert DesignState.deserialize(f.read()).serialize() == s.serialize()


def test_block_totals_and_shortfall() -> None:
    s = _state()
    assert window_block_totals(s) == {"per_window": [36, 60], "total": 96}
    assert supply_shortfall(s) == 26
    s.get_block_supply().set_block_count(1, 100)
    assert supply_shortfall(s) == 0


def test_supply_list(tmp_path) -> None:
    items = make_supply_list(_state().get_block_supply())
    assert items[0] == {"slot": 1, "color": "#ff8000", "rgb": "255,128,0", "quantity": 50}
    assert [it["quantity"] for it in items] == [50, 20]

    csv_path, json_path = write_supply_list(items, str(tmp_path))
    with open(csv_path, newline="") as f:
        rows = list(csv.DictReader(f))
    assert rows[1]["slot"] == "2"
    assert rows[1]["quantity"] == "20"
    with open(json_path) as f:
        assert json.load(f) == {"slots": items, "total": 70}


def test_export_design_writes_one_directory(tmp_path) -> None:
    s = _state()
    paths = export_design(s, str(tmp_path / "export"))
    assert sorted(os.path.basename(p) for p in paths.values()) == ["design.json", "supply.csv", "supply.json"]
    with open(paths["design"]) as f:
        assert DesignState.deserialize(f.read()).serialize() == s.serialize()
    with open(paths["supply_csv"], newline="") as f:
        assert next(csv.reader(f)) == ["slot", "color", "rgb", "quantity"]

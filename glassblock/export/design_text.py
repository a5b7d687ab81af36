# glassblock/export/design_text.py
import json
import os
from typing import Dict, List

from ..model.state import DesignState
from .supply_list import make_supply_list, write_supply_list


def design_text(state: DesignState) -> str:
    """Design details as shown to the user and copied to the clipboard."""
    return json.dumps(state.serialize(), indent=2)


def write_design(state: DesignState, outdir: str, name: str = "design.json") -> str:
    os.makedirs(outdir, exist_ok=True)
    path = os.path.join(outdir, name)
    with open(path, "w") as f:
        f.write(design_text(state))
        f.write("\n")
    return path


def window_block_totals(state: DesignState) -> Dict[str, object]:
    per_window: List[int] = [w.block_area() for w in state.get_windows()]
    return {"per_window": per_window, "total": sum(per_window)}


def supply_shortfall(state: DesignState) -> int:
    """Blocks still missing to fill every window, 0 when the supply covers them."""
    needed = window_block_totals(state)["total"]
    return max(0, needed - state.get_block_supply().total_blocks())


def export_design(state: DesignState, outdir: str) -> Dict[str, str]:
    """Write design.json and the supply list side by side; returns paths by kind."""
    csv_path, json_path = write_supply_list(make_supply_list(state.get_block_supply()), outdir)
    return {
        "design": write_design(state, outdir),
        "supply_csv": csv_path,
        "supply_json": json_path,
    }

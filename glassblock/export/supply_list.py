from typing import Any, Dict, List, Tuple
import csv, json, os

from ..model.block_supply import BlockSupply
from ..model.colors import hex_to_rgb

FIELDS = ["slot", "color", "rgb", "quantity"]
CSV_NAME = "supply.csv"
JSON_NAME = "supply.json"


def make_supply_list(supply: BlockSupply) -> List[Dict]:
    """One row per color slot, numbered from 1 as shown to the user."""
    items = []
    for slot, (color, qty) in enumerate(zip(supply.get_colors(), supply.get_block_counts())):
        r, g, b = hex_to_rgb(color)
        items.append({
            "slot": slot + 1,
            "color": color,
            "rgb": f"{r},{g},{b}",
            "quantity": qty,
        })
    return items


def supply_summary(items: List[Dict]) -> Dict[str, Any]:
    return {"slots": items, "total": sum(it["quantity"] for it in items)}


def write_supply_list(items: List[Dict], outdir: str) -> Tuple[str, str]:
    """Write the supply list as a spreadsheet (CSV) and as JSON with a block total."""
    os.makedirs(outdir, exist_ok=True)
    csv_path = os.path.join(outdir, CSV_NAME)
    with open(csv_path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(FIELDS)
        w.writerows([it[k] for k in FIELDS] for it in items)
    json_path = os.path.join(outdir, JSON_NAME)
    with open(json_path, "w") as f:
        json.dump(supply_summary(items), f, indent=2)
    return csv_path, json_path

"""CSV and YAML parsing for orderfill."""

import csv
from pathlib import Path

import yaml

from orderfill.models import MenuItem, WishlistRow


def parse_wishlist_csv(csv_path: Path) -> list[WishlistRow]:
    """
    Parse an exported wishlist CSV with user_id, food_id and rating columns.

    Rows missing a user or food are skipped.
    """
    rows: list[WishlistRow] = []

    with csv_path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        missing = {"user_id", "food_id", "rating"} - set(reader.fieldnames or [])
        if missing:
            raise ValueError(f"Missing columns: {', '.join(sorted(missing))}")

        for line_no, row in enumerate(reader, start=2):
            user_id = (row.get("user_id") or "").strip()
            food_id = (row.get("food_id") or "").strip()
            if not user_id or not food_id:
                continue

            raw_rating = (row.get("rating") or "").strip()
            try:
                rating = int(raw_rating)
            except ValueError:
                raise ValueError(f"Line {line_no}: rating {raw_rating!r} is not an integer") from None

            rows.append(WishlistRow(user_id=user_id, food_id=food_id, rating=rating))

    return rows


def parse_menu_yaml(yaml_path: Path) -> dict[str, MenuItem]:
    """Parse the menu YAML file into a food_id -> MenuItem lookup."""
    with yaml_path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not data:
        return {}
    if not isinstance(data, dict):
        raise ValueError("Menu file must be a mapping with a 'menu' list")
    if "menu" not in data:
        return {}
    if not isinstance(data["menu"], list):
        raise ValueError("'menu' must be a list of items")

    menu: dict[str, MenuItem] = {}
    for position, entry in enumerate(data["menu"], start=1):
        if not isinstance(entry, dict) or "id" not in entry:
            raise ValueError(f"Menu item {position} must be a mapping with an 'id'")
        food_id = str(entry["id"])
        menu[food_id] = MenuItem(
            food_id=food_id,
            name=entry.get("name", food_id),
            is_half=bool(entry.get("half", False)),
        )

    return menu


def create_menu_template(output_path: Path, food_ids: list[str]):
    """Create a menu template YAML file listing every wished-for food."""
    template = {
        "menu": [{"id": food_id, "name": food_id, "half": False} for food_id in food_ids]
        or [{"id": "food-id", "name": "Food Name", "half": False}]
    }

    header = """\
# Menu file for orderfill
# Mark items that can only be ordered as half of a shared line with half: true.
# Two participants wishing for the same half item can be paired on one line.
#
# Example entry:
#   - id: diavola-half
#     name: Diavola (half)
#     half: true

"""

    with output_path.open("w", encoding="utf-8") as f:
        f.write(header)
        yaml.dump(template, f, default_flow_style=False, sort_keys=False)

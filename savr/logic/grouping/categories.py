"""Category grouping for inventory and grocery lists.

Rows are (category, item, stored_index) triples. The grouped result always
contains every required category header (possibly empty) followed by any extra
categories present in the data, in first-appearance order.
"""
from __future__ import annotations
from datetime import date as _date
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from savr.logic.codec.records import (
    decode_grocery_item, decode_inventory_item,
    get_category_from_inventory_serialized, get_category_from_serialized,
)
from savr.utilities.constants import FALLBACK_CATEGORY, REQUIRED_CATEGORIES

Row = Tuple[str, Any, int]

__all__ = ["group_by_category", "flatten_groups", "inventory_rows", "grocery_rows"]


def group_by_category(rows: Iterable[Row], required: Sequence[str] = REQUIRED_CATEGORIES) -> Dict[str, List[Row]]:
    present: Dict[str, List[Row]] = {}
    for row in rows:
        present.setdefault(row[0], []).append(row)

    grouped: Dict[str, List[Row]] = {}
    for category in required:
        grouped[category] = present.get(category, [])
    for category, items in present.items():
        if category not in grouped:
            grouped[category] = items
    return grouped


def flatten_groups(grouped: Dict[str, List[Row]]) -> List[Row]:
    return [row for items in grouped.values() for row in items]


def inventory_rows(serialized: Iterable[str], today: Optional[_date] = None) -> List[Row]:
    """Decode inventory rows, dropping corrupt ones; the index is the position in the stored list."""
    rows = []
    for index, raw in enumerate(serialized):
        item = decode_inventory_item(raw, index, today)
        if item is None:
            continue
        rows.append((get_category_from_inventory_serialized(raw) or FALLBACK_CATEGORY, item, index))
    return rows


def grocery_rows(serialized: Iterable[str]) -> List[Row]:
    rows = []
    for index, raw in enumerate(serialized):
        item = decode_grocery_item(raw, index)
        if item is None:
            continue
        rows.append((get_category_from_serialized(raw) or FALLBACK_CATEGORY, item, index))
    return rows

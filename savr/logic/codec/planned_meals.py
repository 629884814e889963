"""Planned meals codec: {day_index: {recipe_id, ...}} <-> [{"dayIndex": int, "recipeIds": [...]}, ...]."""
from __future__ import annotations
import logging
from numbers import Number
from typing import Any, Dict, Iterable, List, Mapping, Set

logger = logging.getLogger(__name__)

__all__ = ["serialize_planned_meals", "deserialize_planned_meals"]


def serialize_planned_meals(planned_meals: Mapping[int, Iterable[str]]) -> List[Dict[str, Any]]:
    """One record per day that has recipes; empty days are left out entirely."""
    records = []
    for day_index in sorted(planned_meals):
        recipe_ids = sorted(set(planned_meals[day_index]))
        if not recipe_ids:
            continue
        records.append({"dayIndex": int(day_index), "recipeIds": recipe_ids})
    logger.debug(f"Serialized {len(records)} of {len(planned_meals)} planned days")
    return records


def _day_index(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, Number):
        return 0
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return 0


def deserialize_planned_meals(serialized: Any) -> Dict[int, Set[str]]:
    """Rebuild the day map. Bad sub-fields default (day 0, no recipes); nothing raises.

    When several records share a day index the last one wins.
    """
    result: Dict[int, Set[str]] = {}
    if not isinstance(serialized, list):
        return result
    for record in serialized:
        data = record if isinstance(record, Mapping) else {}
        day_index = _day_index(data.get("dayIndex"))
        raw_ids = data.get("recipeIds")
        ids = {rid for rid in raw_ids if isinstance(rid, str)} if isinstance(raw_ids, list) else set()
        result[day_index] = ids
    return result

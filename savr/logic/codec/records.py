"""Flat string codec for inventory, grocery and recipe records.

Persisted layouts (field delimiter "|", never escaped):
  inventory: emoji|name|category|quantity|DD/MM/YYYY|STATUS
  grocery:   emoji|name|category|quantity[|checked]
  recipe:    id|emoji|name|calories|minutes|matchBadge

Callers must keep the delimiter out of every field. Decoding never raises:
a record with too few fields decodes to None and is dropped by the list helpers.
"""
from __future__ import annotations
import logging
from datetime import date as _date
from typing import Iterable, List, Optional

from savr.domain.DisplayRecipe import DisplayRecipe
from savr.domain.GroceryItem import GroceryItem
from savr.domain.InventoryCategory import InventoryCategory
from savr.domain.InventoryItem import InventoryItem
from savr.logic.expiry.classifier import calculate_expiry_status
from savr.utilities.constants import (
    CHECKED_SUFFIX, FIELD_DELIMITER, GROCERY_FIELD_COUNT, INVENTORY_FIELD_COUNT, RECIPE_FIELD_COUNT
)

logger = logging.getLogger(__name__)

__all__ = [
    "encode_inventory_item", "decode_inventory_item", "get_category_from_inventory_serialized",
    "encode_grocery_item", "decode_grocery_item", "get_category_from_serialized",
    "is_checked_serialized", "strip_checked_suffix", "set_checked_serialized",
    "encode_recipe", "decode_recipe", "encode_recipes", "decode_recipes",
]


def _join(*fields) -> str:
    return FIELD_DELIMITER.join(str(f) for f in fields)


def _to_int(value: str) -> int:
    try:
        return int(value.strip())
    except (AttributeError, ValueError):
        return 0


# -------------------- Inventory --------------------
def encode_inventory_item(item: InventoryItem, category: Optional[str] = None) -> str:
    """Encode an inventory item; category is the catalog's free-text label when known."""
    label = category if category is not None else item.category.label
    return _join(item.emoji, item.name, label, item.quantity, item.expiry_label, item.status.name)


def decode_inventory_item(serialized: str, id: int, today: Optional[_date] = None) -> Optional[InventoryItem]:
    """Decode an inventory row; the stored status is ignored and re-derived from the expiry date."""
    parts = serialized.split(FIELD_DELIMITER) if isinstance(serialized, str) else []
    if len(parts) < INVENTORY_FIELD_COUNT:
        logger.debug(f"Dropping malformed inventory record #{id}: {serialized!r}")
        return None
    expiry_label = parts[4]
    return InventoryItem(
        id=id,
        emoji=parts[0],
        name=parts[1],
        quantity=parts[3],
        expiry_label=expiry_label,
        status=calculate_expiry_status(expiry_label, today),
        category=InventoryCategory.from_label(parts[2]),
    )


def get_category_from_inventory_serialized(serialized: str) -> Optional[str]:
    """Return the free-text category field of an inventory row."""
    parts = serialized.split(FIELD_DELIMITER) if isinstance(serialized, str) else []
    return parts[2] if len(parts) >= 3 else None


# -------------------- Grocery --------------------
def is_checked_serialized(serialized: str) -> bool:
    return isinstance(serialized, str) and serialized.endswith(CHECKED_SUFFIX)


def strip_checked_suffix(serialized: str) -> str:
    if is_checked_serialized(serialized):
        return serialized[: -len(CHECKED_SUFFIX)]
    return serialized


def set_checked_serialized(serialized: str, checked: bool) -> str:
    """Rewrite the checked suffix of a grocery row."""
    base = strip_checked_suffix(serialized)
    return base + CHECKED_SUFFIX if checked else base


def encode_grocery_item(item: GroceryItem, category: str) -> str:
    encoded = _join(item.emoji, item.name, category, item.quantity)
    return encoded + CHECKED_SUFFIX if item.is_checked else encoded


def decode_grocery_item(serialized: str, id: int, is_checked: bool = False) -> Optional[GroceryItem]:
    """Decode a grocery row. The checked suffix is stripped before splitting and marks the item checked."""
    if not isinstance(serialized, str):
        return None
    checked = is_checked or is_checked_serialized(serialized)
    parts = strip_checked_suffix(serialized).split(FIELD_DELIMITER)
    if len(parts) < GROCERY_FIELD_COUNT:
        logger.debug(f"Dropping malformed grocery record #{id}: {serialized!r}")
        return None
    return GroceryItem(
        id=id,
        emoji=parts[0],
        name=parts[1],
        quantity=parts[3],  # unit already embedded
        is_checked=checked,
    )


def get_category_from_serialized(serialized: str) -> Optional[str]:
    """Return the category field of a grocery row (checked suffix ignored)."""
    if not isinstance(serialized, str):
        return None
    parts = strip_checked_suffix(serialized).split(FIELD_DELIMITER)
    return parts[2] if len(parts) >= 3 else None


# -------------------- Recipes --------------------
def encode_recipe(recipe: DisplayRecipe) -> str:
    return _join(recipe.id, recipe.emoji, recipe.name, recipe.calories, recipe.minutes, recipe.match_badge)


def decode_recipe(serialized: str) -> Optional[DisplayRecipe]:
    """Decode a generated-meal row; non-numeric calories/minutes become 0."""
    parts = serialized.split(FIELD_DELIMITER) if isinstance(serialized, str) else []
    if len(parts) < RECIPE_FIELD_COUNT:
        logger.debug(f"Dropping malformed recipe record: {serialized!r}")
        return None
    return DisplayRecipe(
        id=parts[0],
        emoji=parts[1],
        name=parts[2],
        calories=_to_int(parts[3]),
        minutes=_to_int(parts[4]),
        match_badge=parts[5],
    )


def encode_recipes(recipes: Iterable[DisplayRecipe]) -> List[str]:
    return [encode_recipe(r) for r in recipes]


def decode_recipes(serialized: Iterable[str]) -> List[DisplayRecipe]:
    result = []
    for row in serialized:
        recipe = decode_recipe(row)
        if recipe is not None:
            result.append(recipe)
    return result

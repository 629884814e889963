"""Recipe matching against the current inventory.

score_recipe(recipe, inventory_by_name) -> float
filter_recipes_by_inventory(recipes, inventory_items, limit=7) -> top recipes
map_recipe_catalog_to_display(item, inventory_items=None) -> DisplayRecipe
generate_meals(recipes, inventory_items) -> ranked DisplayRecipe list

Expiry bonuses (1000/100/10) dominate the 0..100 coverage term, so ranking is
effectively by urgent usage, then warning, then fresh, with coverage breaking ties.
"""
from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from savr.domain.DisplayRecipe import DisplayRecipe
from savr.domain.InventoryItem import InventoryItem
from savr.domain.Recipe import RecipeCatalogItem
from savr.utilities.constants import (
    DEFAULT_MAX_RECIPES, EXPIRY_BONUS, MATCH_BADGE_ALL, MATCH_BADGE_NONE, MATCH_BADGE_PARTIAL
)

logger = logging.getLogger(__name__)

__all__ = [
    "index_inventory", "score_recipe", "score_recipes", "filter_recipes_by_inventory",
    "count_matched_ingredients", "build_match_badge", "map_recipe_catalog_to_display",
    "generate_meals", "filter_by_dietary_preferences",
]


def index_inventory(inventory_items: Iterable[InventoryItem]) -> Dict[str, InventoryItem]:
    """Lowercased name -> item. On duplicate names the last item wins."""
    return {item.name.lower(): item for item in inventory_items}


def score_recipe(recipe: RecipeCatalogItem, inventory_by_name: Dict[str, InventoryItem]) -> float:
    if not recipe.ingredients:
        return 0.0
    bonus = 0.0
    matched = 0
    for ingredient in recipe.ingredients:
        item = inventory_by_name.get(ingredient.food_id.lower())
        if item is None:
            continue
        matched += 1
        bonus += EXPIRY_BONUS[item.status.name]
    match_percentage = matched / len(recipe.ingredients)
    return match_percentage * 100 + bonus


def score_recipes(recipes: Iterable[RecipeCatalogItem],
                  inventory_items: Iterable[InventoryItem]) -> List[Tuple[RecipeCatalogItem, float]]:
    """Score every recipe, keep those with a positive score, highest first (ties keep input order)."""
    by_name = index_inventory(inventory_items)
    scored = []
    for recipe in recipes:
        score = score_recipe(recipe, by_name)
        if score > 0:
            scored.append((recipe, score))
    scored.sort(key=lambda pair: pair[1], reverse=True)
    return scored


def filter_recipes_by_inventory(recipes: Iterable[RecipeCatalogItem],
                                inventory_items: Iterable[InventoryItem],
                                limit: int = DEFAULT_MAX_RECIPES) -> List[RecipeCatalogItem]:
    """Top `limit` recipes that use at least one owned ingredient."""
    scored = score_recipes(recipes, inventory_items)
    logger.debug(f"{len(scored)} recipes matched the inventory; keeping {min(limit, len(scored))}")
    return [recipe for recipe, _ in scored[:limit]]


def count_matched_ingredients(recipe: RecipeCatalogItem, inventory_items: Iterable[InventoryItem]) -> int:
    by_name = index_inventory(inventory_items)
    return sum(1 for ing in recipe.ingredients if ing.food_id.lower() in by_name)


def build_match_badge(matched: int, total: int) -> str:
    if matched == total:
        return MATCH_BADGE_ALL
    if matched > 0:
        return MATCH_BADGE_PARTIAL.format(matched=matched, total=total)
    return MATCH_BADGE_NONE


def map_recipe_catalog_to_display(catalog_item: RecipeCatalogItem,
                                  inventory_items: Optional[Sequence[InventoryItem]] = None,
                                  is_selected: bool = False) -> DisplayRecipe:
    """Project a catalog recipe for display; without inventory every ingredient counts as matched."""
    total = len(catalog_item.ingredients)
    if inventory_items is not None:
        matched = count_matched_ingredients(catalog_item, inventory_items)
    else:
        matched = total
    return DisplayRecipe(
        id=catalog_item.id,
        emoji=catalog_item.emoji,
        name=catalog_item.title,
        calories=catalog_item.calories,
        minutes=catalog_item.prep_time_minutes,
        match_badge=build_match_badge(matched, total),
        is_selected=is_selected,
    )


def generate_meals(recipes: Iterable[RecipeCatalogItem], inventory_items: Sequence[InventoryItem],
                   limit: int = DEFAULT_MAX_RECIPES) -> List[DisplayRecipe]:
    """Rank the catalog and project the winners; this is the persisted "generated meals" list."""
    inventory_items = list(inventory_items)
    ranked = filter_recipes_by_inventory(recipes, inventory_items, limit=limit)
    return [map_recipe_catalog_to_display(r, inventory_items=inventory_items) for r in ranked]


def _satisfies(recipe: RecipeCatalogItem, preference: str) -> bool:
    wanted = preference.strip().lower()
    if not wanted:
        return True
    if any(r.strip().lower() == wanted for r in recipe.dietary_restrictions):
        return True
    # flags use camelCase keys, e.g. "lactoseFree" for "Lactose Free"
    compact = wanted.replace(" ", "").replace("-", "").replace("_", "")
    return any(value and key.lower() == compact for key, value in recipe.dietary_flags.items())


def filter_by_dietary_preferences(recipes: Iterable[RecipeCatalogItem],
                                  preferences: Optional[Iterable[str]]) -> List[RecipeCatalogItem]:
    """Keep recipes that satisfy every preference via a restriction label or a true dietary flag."""
    prefs = [p for p in (preferences or []) if isinstance(p, str) and p.strip()]
    recipes = list(recipes)
    if not prefs:
        return recipes
    return [r for r in recipes if all(_satisfies(r, p) for p in prefs)]

import logging
from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from savr.api.deps import get_profile_repository, get_recipe_catalog, get_today
from savr.domain.Inventory import Inventory
from savr.domain.Recipe import RecipeCatalogItem
from savr.infra.Profile_Repository import ProfileRepository
from savr.logic.codec.records import decode_recipes, encode_recipes
from savr.logic.matching.scoring import filter_by_dietary_preferences, generate_meals
from savr.utilities.config import MAX_GENERATED_MEALS

router = APIRouter(prefix="/api/users/{uid}/meals", tags=["meals"])
logger = logging.getLogger(__name__)


@router.post("/generate")
def generate_user_meals(uid: str,
                        respect_preferences: bool = Query(default=False),
                        repo: ProfileRepository = Depends(get_profile_repository),
                        catalog: List[RecipeCatalogItem] = Depends(get_recipe_catalog),
                        today: date = Depends(get_today)):
    """Rank the catalog against the user's inventory and store the result as generated meals."""
    generated = {}

    def mutate(profile):
        inventory_items = Inventory(profile.current_inventory, today=today).get_items()
        recipes = catalog
        if respect_preferences:
            recipes = filter_by_dietary_preferences(catalog, profile.dietary_preferences)
        meals = generate_meals(recipes, inventory_items, limit=MAX_GENERATED_MEALS)
        profile.generated_meals = encode_recipes(meals)
        generated["meals"] = meals

    repo.update_profile(uid, mutate)
    meals = generated["meals"]
    logger.info(f"Generated {len(meals)} meals for {uid} from {len(catalog)} catalog recipes")
    return {"count": len(meals), "recipes": [m.to_dict() for m in meals]}


@router.get("")
def list_generated_meals(uid: str, repo: ProfileRepository = Depends(get_profile_repository)):
    profile = repo.get_profile(uid)
    if profile is None:
        raise HTTPException(status_code=404, detail=f"No profile for user {uid}")
    meals = decode_recipes(profile.generated_meals)
    return {"count": len(meals), "recipes": [m.to_dict() for m in meals]}

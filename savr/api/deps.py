"""FastAPI dependency providers (overridable in tests via app.dependency_overrides)."""
from datetime import date
from functools import lru_cache
from typing import List

from savr.domain.FoodCatalogItem import FoodCatalogItem
from savr.domain.Recipe import RecipeCatalogItem
from savr.infra.Catalog_Repository import load_food_catalog, load_recipe_catalog
from savr.infra.Profile_Repository import ProfileRepository
from savr.utilities.config import FOOD_CATALOG_FILE, PROFILE_STORE_FILE, RECIPE_CATALOG_FILE


@lru_cache
def get_profile_repository() -> ProfileRepository:
    return ProfileRepository(PROFILE_STORE_FILE)


def get_recipe_catalog() -> List[RecipeCatalogItem]:
    return load_recipe_catalog(RECIPE_CATALOG_FILE)


def get_food_catalog() -> List[FoodCatalogItem]:
    return load_food_catalog(FOOD_CATALOG_FILE)


def get_today() -> date:
    return date.today()

import json
import logging
from pathlib import Path
from typing import List

from savr.domain.FoodCatalogItem import FoodCatalogItem
from savr.domain.Recipe import RecipeCatalogItem

logger = logging.getLogger(__name__)


def _read_documents(path) -> list:
    """Return (doc_id, data) pairs from a {id: data} object or a list of objects."""
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = json.load(f)
    except FileNotFoundError:
        logger.warning(f"Catalog file not found: {path}. Returning empty list.")
        return []
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in catalog file {path}: {e}")
        return []
    except OSError as e:
        logger.error(f"Error reading catalog {path}: {e}")
        return []

    if isinstance(raw, dict):
        return [(str(doc_id), data) for doc_id, data in raw.items()]
    if isinstance(raw, list):
        docs = []
        for data in raw:
            doc_id = data.get("id") if isinstance(data, dict) else None
            docs.append((doc_id if isinstance(doc_id, str) else "", data))
        return docs
    logger.error(f"Catalog file {path} holds neither an object nor a list")
    return []


def load_recipe_catalog(path) -> List[RecipeCatalogItem]:
    """Read the recipe catalog; recipes without an id or a title are skipped."""
    recipes = []
    documents = _read_documents(path)
    for doc_id, data in documents:
        recipe = RecipeCatalogItem.from_dict(data, doc_id=doc_id)
        if not recipe.id.strip():
            logger.warning(f"Skipping recipe {recipe.title!r} - no id")
            continue
        if not recipe.title.strip():
            logger.warning(f"Skipping recipe {doc_id!r} - no title")
            continue
        recipes.append(recipe)
    logger.debug(f"Loaded {len(recipes)} of {len(documents)} catalog recipes from {path}")
    return recipes


def load_food_catalog(path) -> List[FoodCatalogItem]:
    """Read the food catalog; entries without a name are skipped."""
    foods = []
    for doc_id, data in _read_documents(path):
        item = FoodCatalogItem.from_dict(data)
        if not item.name.strip():
            logger.warning(f"Skipping food {doc_id!r} - no name")
            continue
        foods.append(item)
    return foods

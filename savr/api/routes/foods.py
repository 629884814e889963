from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from savr.api.deps import get_food_catalog
from savr.domain.FoodCatalogItem import FoodCatalogItem

router = APIRouter(prefix="/api/foods", tags=["foods"])


@router.get("")
def list_foods(q: Optional[str] = Query(default=None),
               foods: List[FoodCatalogItem] = Depends(get_food_catalog)):
    """Food catalog used by the add-item forms; ?q= filters by name substring."""
    if q:
        needle = q.strip().lower()
        foods = [f for f in foods if needle in f.name.lower()]
    return {"count": len(foods), "foods": [f.to_dict() for f in foods]}

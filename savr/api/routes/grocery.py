import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from savr.api.deps import get_profile_repository
from savr.api.routes.serializers import grouped_response
from savr.domain.GroceryItem import GroceryItem
from savr.domain.GroceryList import GroceryList
from savr.infra.Profile_Repository import ProfileRepository
from savr.utilities.validators import GroceryItemInput

router = APIRouter(prefix="/api/users/{uid}/grocery", tags=["grocery"])
logger = logging.getLogger(__name__)


@router.get("")
def list_grocery(uid: str, repo: ProfileRepository = Depends(get_profile_repository)):
    profile = repo.get_profile(uid)
    if profile is None:
        raise HTTPException(status_code=404, detail=f"No profile for user {uid}")
    return grouped_response(GroceryList(profile.grocery_list).grouped())


@router.post("", status_code=201)
def add_grocery_item(uid: str, body: GroceryItemInput,
                     repo: ProfileRepository = Depends(get_profile_repository)):
    added = {}

    def mutate(profile):
        groceries = GroceryList(profile.grocery_list)
        item = GroceryItem(emoji=body.emoji, name=body.name, quantity=body.quantity)
        added["item"] = groceries.add_item(item, body.category)
        profile.grocery_list = groceries.to_list()

    repo.update_profile(uid, mutate)
    return added["item"].to_dict()


@router.post("/{index}/toggle")
def toggle_grocery_item(uid: str, index: int, repo: ProfileRepository = Depends(get_profile_repository)):
    state = {}

    def mutate(profile):
        groceries = GroceryList(profile.grocery_list)
        state["checked"] = groceries.toggle_checked(index)
        profile.grocery_list = groceries.to_list()

    repo.update_profile(uid, mutate)
    return {"index": index, "is_checked": state["checked"]}


@router.delete("/{index}")
def delete_grocery_item(uid: str, index: int, name: Optional[str] = Query(default=None),
                        repo: ProfileRepository = Depends(get_profile_repository)):
    removed = {}

    def mutate(profile):
        groceries = GroceryList(profile.grocery_list)
        removed["row"] = groceries.remove_at(index, expected_name=name)
        profile.grocery_list = groceries.to_list()

    repo.update_profile(uid, mutate)
    return {"status": "ok", "removed": removed["row"]}

import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from savr.api.deps import get_profile_repository, get_today
from savr.api.routes.serializers import grouped_response
from savr.domain.Inventory import Inventory
from savr.domain.InventoryItem import InventoryItem
from savr.infra.Profile_Repository import ProfileRepository
from savr.utilities.validators import InventoryItemInput

router = APIRouter(prefix="/api/users/{uid}/inventory", tags=["inventory"])
logger = logging.getLogger(__name__)


@router.get("")
def list_inventory(uid: str, repo: ProfileRepository = Depends(get_profile_repository),
                   today: date = Depends(get_today)):
    """Inventory grouped by stored category; required headers are always present."""
    profile = repo.get_profile(uid)
    if profile is None:
        raise HTTPException(status_code=404, detail=f"No profile for user {uid}")
    return grouped_response(Inventory(profile.current_inventory, today=today).grouped())


@router.post("", status_code=201)
def add_inventory_item(uid: str, body: InventoryItemInput,
                       repo: ProfileRepository = Depends(get_profile_repository),
                       today: date = Depends(get_today)):
    added = {}

    def mutate(profile):
        inventory = Inventory(profile.current_inventory, today=today)
        item = InventoryItem(emoji=body.emoji, name=body.name, quantity=body.quantity,
                             expiry_label=body.expiry_date)
        added["item"] = inventory.add_item(item, body.category)
        profile.current_inventory = inventory.to_list()

    repo.update_profile(uid, mutate)
    item = added["item"]
    logger.info(f"Added inventory item {item.name!r} ({item.status.name}) for {uid}")
    return item.to_dict()


@router.delete("/{index}")
def delete_inventory_item(uid: str, index: int, name: Optional[str] = Query(default=None),
                          repo: ProfileRepository = Depends(get_profile_repository)):
    """Delete by position; pass ?name= to reject the call if the list shifted meanwhile."""
    removed = {}

    def mutate(profile):
        inventory = Inventory(profile.current_inventory)
        removed["row"] = inventory.remove_at(index, expected_name=name)
        profile.current_inventory = inventory.to_list()

    repo.update_profile(uid, mutate)
    return {"status": "ok", "removed": removed["row"]}

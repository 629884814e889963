import logging

from fastapi import APIRouter, Depends, HTTPException

from savr.api.deps import get_profile_repository
from savr.infra.Profile_Repository import ProfileRepository
from savr.utilities.validators import ProfileCreateInput

router = APIRouter(prefix="/api/users", tags=["profile"])
logger = logging.getLogger(__name__)


@router.post("/{uid}", status_code=201)
def create_profile(uid: str, body: ProfileCreateInput,
                   repo: ProfileRepository = Depends(get_profile_repository)):
    """Create (or reset) the user's profile document."""
    profile = repo.create_user_document(uid, body.display_name, body.username)
    if body.dietary_preferences:
        profile = repo.update_profile(
            uid, lambda p: setattr(p, "dietary_preferences", body.dietary_preferences))
    return profile.to_dict()


@router.get("/{uid}")
def read_profile(uid: str, repo: ProfileRepository = Depends(get_profile_repository)):
    profile = repo.get_profile(uid)
    if profile is None:
        raise HTTPException(status_code=404, detail=f"No profile for user {uid}")
    return profile.to_dict()


@router.delete("/{uid}")
def delete_profile(uid: str, repo: ProfileRepository = Depends(get_profile_repository)):
    if not repo.delete_user_document(uid):
        raise HTTPException(status_code=404, detail=f"No profile for user {uid}")
    return {"status": "ok", "deleted": uid}

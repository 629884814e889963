"""Profile repository: one JSON document per user id, stored in a single file.

Every access reads the whole store and every change writes the whole store
back (temp file + move). Changes are published as profile.updated events so
screens can subscribe to a user's document and unsubscribe when done.
"""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from threading import RLock
from typing import Callable, Dict, Optional

from savr.domain.UserProfile import UserProfile
from savr.events.Event_Bus import EventBus, GLOBAL_EVENT_BUS, PROFILE_UPDATED
from savr.utilities.exceptions import ItemNotFoundError, ProfileStoreError

logger = logging.getLogger(__name__)

ProfileCallback = Callable[[Optional[UserProfile]], None]


class ProfileRepository:
    def __init__(self, path, event_bus: Optional[EventBus] = None):
        self.path = Path(path)
        self._event_bus = event_bus or GLOBAL_EVENT_BUS
        self._lock = RLock()
        # (uid, callback) -> bus listener, so unsubscribe can find the wrapper
        self._listeners: Dict[tuple, Callable] = {}

    # -------------------- raw store --------------------
    def _read_store(self, for_write: bool = False) -> dict:
        '''
        Reads the whole store. An unparseable file reads as empty, but when the
        caller is about to write it back, ProfileStoreError is raised instead so
        the other users' documents are never overwritten.
        '''
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                store = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in profile store {self.path}: {e}")
            if for_write:
                raise ProfileStoreError(f"Refusing to overwrite unparseable profile store {self.path}") from e
            return {}
        except OSError as e:
            raise ProfileStoreError(f"Cannot read profile store {self.path}: {e}") from e
        if not isinstance(store, dict):
            logger.error(f"Profile store {self.path} is not a JSON object; ignoring its content")
            if for_write:
                raise ProfileStoreError(f"Refusing to overwrite non-object profile store {self.path}")
            return {}
        return store

    def _atomic_write(self, store: dict):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), prefix=".profiles_", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(store, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, str(self.path))
        except OSError as e:
            raise ProfileStoreError(f"Cannot write profile store {self.path}: {e}") from e
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    def _publish(self, uid: str, profile: Optional[UserProfile]):
        self._event_bus.publish(PROFILE_UPDATED, {"uid": uid, "profile": profile})

    # -------------------- documents --------------------
    def get_profile(self, uid: str) -> Optional[UserProfile]:
        """Return the user's profile, or None when the document does not exist."""
        with self._lock:
            data = self._read_store().get(uid)
        if data is None:
            return None
        return UserProfile.from_dict(data)

    def set_profile(self, uid: str, profile: UserProfile) -> UserProfile:
        """Create or overwrite the whole document."""
        with self._lock:
            store = self._read_store(for_write=True)
            store[uid] = profile.to_dict()
            self._atomic_write(store)
        logger.debug(f"Saved profile {uid}")
        self._publish(uid, profile)
        return profile

    def create_user_document(self, uid: str, display_name: str, username: str = "") -> UserProfile:
        profile = UserProfile(display_name=display_name.strip(), username=username.strip())
        self.set_profile(uid, profile)
        logger.info(f"Created profile {uid}")
        return profile

    def delete_user_document(self, uid: str) -> bool:
        with self._lock:
            store = self._read_store(for_write=True)
            if uid not in store:
                return False
            del store[uid]
            self._atomic_write(store)
        logger.info(f"Deleted profile {uid}")
        self._publish(uid, None)
        return True

    def update_profile(self, uid: str, mutate: Callable[[UserProfile], object]) -> UserProfile:
        """Read the document, apply mutate(profile) and write it back under one lock.

        Raises ItemNotFoundError when the user has no document.
        """
        with self._lock:
            profile = self.get_profile(uid)
            if profile is None:
                raise ItemNotFoundError(f"No profile for user {uid}")
            mutate(profile)
            self.set_profile(uid, profile)
        return profile

    # -------------------- subscriptions --------------------
    def subscribe(self, uid: str, callback: ProfileCallback) -> None:
        """Call callback(profile) now and after every change to uid's document."""
        def listener(event_name, payload):
            if payload.get("uid") == uid:
                callback(payload.get("profile"))

        with self._lock:
            if (uid, callback) in self._listeners:
                return
            self._listeners[(uid, callback)] = listener
        self._event_bus.subscribe(PROFILE_UPDATED, listener)
        callback(self.get_profile(uid))

    def unsubscribe(self, uid: str, callback: ProfileCallback) -> None:
        with self._lock:
            listener = self._listeners.pop((uid, callback), None)
        if listener is not None:
            self._event_bus.unsubscribe(PROFILE_UPDATED, listener)

"""Simple Event Bus / Observer implementation.

Event names used so far:
  profile.updated        -> payload {"uid": str, "profile": UserProfile | None}
  inventory.near_expiry  -> payload {"item": InventoryItem, "status": ExpiryStatus}

Subscribers are callables taking (event_name, payload). Subscriptions have an
explicit lifecycle: subscribe() returns nothing, unsubscribe() removes the callback.
"""
from __future__ import annotations
import logging
from collections import defaultdict
from threading import Lock
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
PROFILE_UPDATED = "profile.updated"
INVENTORY_NEAR_EXPIRY = "inventory.near_expiry"

Callback = Callable[[str, Any], None]


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callback]] = defaultdict(list)
		self._lock = Lock()

	def subscribe(self, event_name: str, callback: Callback):
		with self._lock:
			if callback not in self._subscribers[event_name]:
				self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callback):
		with self._lock:
			try:
				self._subscribers[event_name].remove(callback)
			except (ValueError, KeyError):
				pass

	def publish(self, event_name: str, payload: Any):
		with self._lock:
			callbacks = list(self._subscribers.get(event_name, []))
		for cb in callbacks:
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception(f"Error delivering {event_name} to {cb!r}")


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()

__all__ = ['EventBus', 'GLOBAL_EVENT_BUS', 'PROFILE_UPDATED', 'INVENTORY_NEAR_EXPIRY']

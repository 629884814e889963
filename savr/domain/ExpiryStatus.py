"""Urgency tiers derived from days until expiry."""
from enum import Enum


class ExpiryStatus(Enum):
    URGENT = "URGENT"
    WARNING = "WARNING"
    FRESH = "FRESH"

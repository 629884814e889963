"""Core business logic layer.

Subpackages:
- codec: flat string / map encoding of stored records
- expiry: urgency tiers from expiry dates
- matching: recipe scoring and ranking against the inventory
- grouping: category sections for inventory and grocery lists
- plan: week keys and weekly roll-over

Everything here is pure and synchronous; "today" is always injectable.
"""
__all__ = ["codec", "expiry", "matching", "grouping", "plan"]

from __future__ import annotations


class SavrError(RuntimeError):
    """Base class for errors raised outside the pure core."""


class ProfileStoreError(SavrError):
    """Profile document store could not be read or written."""


class ItemNotFoundError(SavrError, LookupError):
    """No list entry at the requested position (or no such profile)."""


class StaleIndexError(SavrError):
    """The entry at the requested position is not the one the caller expected."""

"""Expiry classification.

Maps a DD/MM/YYYY expiry date to an urgency tier relative to an injectable
"today". Unparseable dates fail open to FRESH and are logged.
"""
from __future__ import annotations
import logging
import re
from datetime import datetime, date as _date
from typing import Optional

from savr.domain.ExpiryStatus import ExpiryStatus
from savr.utilities.constants import DATE_FORMAT, DATE_PATTERN, URGENT_MAX_DAYS, WARNING_MAX_DAYS

logger = logging.getLogger(__name__)

__all__ = ["parse_expiry_date", "days_until_expiry", "calculate_expiry_status", "status_from_days"]


def parse_expiry_date(expiry_date_string: str) -> Optional[_date]:
    """Parse a DD/MM/YYYY string; returns None when it cannot be parsed.

    Day and month must be two digits: "1/3/2026" is rejected even though
    strptime alone would accept it.
    """
    if not isinstance(expiry_date_string, str):
        return None
    value = expiry_date_string.strip()
    if not re.fullmatch(DATE_PATTERN, value):
        return None
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        return None


def days_until_expiry(expiry_date_string: str, today: Optional[_date] = None) -> Optional[int]:
    """Calendar days from today to the expiry date (negative once expired)."""
    expiry = parse_expiry_date(expiry_date_string)
    if expiry is None:
        return None
    today = today or _date.today()
    return (expiry - today).days


def status_from_days(days_left: int) -> ExpiryStatus:
    if days_left <= URGENT_MAX_DAYS:
        return ExpiryStatus.URGENT
    elif days_left <= WARNING_MAX_DAYS:
        return ExpiryStatus.WARNING
    else:
        return ExpiryStatus.FRESH


def calculate_expiry_status(expiry_date_string: str, today: Optional[_date] = None) -> ExpiryStatus:
    """URGENT for <= 2 days left (expired included), WARNING for 3-7, FRESH beyond.

    A date that cannot be parsed is reported as FRESH.
    """
    days_left = days_until_expiry(expiry_date_string, today)
    if days_left is None:
        logger.warning(f"Unparseable expiry date {expiry_date_string!r}; treating item as FRESH")
        return ExpiryStatus.FRESH
    return status_from_days(days_left)

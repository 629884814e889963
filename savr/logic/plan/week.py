"""Week helpers: Monday-based week key, day chips, month label and new-week roll-over."""
from __future__ import annotations
import logging
from datetime import date as _date, timedelta
from typing import List, NamedTuple, Optional, Tuple

from savr.domain.UserProfile import UserProfile
from savr.utilities.constants import DAY_NAMES

logger = logging.getLogger(__name__)

__all__ = ["DayChip", "week_monday", "get_current_week_days", "get_current_week_key",
           "get_month_name", "roll_over_week"]

_MONTHS = ["JAN", "FEB", "MAR", "APR", "MAY", "JUN", "JUL", "AUG", "SEP", "OCT", "NOV", "DEC"]


class DayChip(NamedTuple):
    day_name: str
    day_num: int


def week_monday(today: Optional[_date] = None) -> _date:
    today = today or _date.today()
    return today - timedelta(days=today.weekday())


def get_current_week_days(today: Optional[_date] = None) -> Tuple[List[DayChip], int]:
    """Monday..Sunday chips for the week containing today, plus today's index (0=Monday)."""
    today = today or _date.today()
    monday = week_monday(today)
    days = []
    for offset in range(7):
        d = monday + timedelta(days=offset)
        days.append(DayChip(DAY_NAMES[d.weekday()], d.day))
    return days, today.weekday()


def get_current_week_key(today: Optional[_date] = None) -> str:
    """ISO date of the week's Monday, e.g. "2026-02-23"."""
    return week_monday(today).isoformat()


def get_month_name(d: _date) -> str:
    return _MONTHS[d.month - 1]


def roll_over_week(profile: UserProfile, today: Optional[_date] = None) -> bool:
    """Clear last week's planned meals when a new week starts.

    A blank stored key (older documents) keeps its meals and is stamped with the
    current week. Returns True when the profile was modified.
    """
    current = get_current_week_key(today)
    stored = profile.planned_meals_week_key
    if stored == current:
        return False
    if stored.strip():
        logger.info(f"New week detected ({stored} -> {current}); clearing planned meals")
        profile.planned_meals = []
    profile.planned_meals_week_key = current
    return True

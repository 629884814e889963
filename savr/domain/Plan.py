"""Plan domain entity: recipe ids planned per weekday (0=Monday..6=Sunday) for one week."""
from typing import Dict, Iterable, Optional, Set


class Plan:
    def __init__(self, week_key: str = "", meals: Optional[Dict[int, Set[str]]] = None):
        self.week_key = week_key
        self.meals: Dict[int, Set[str]] = {day: set(ids) for day, ids in (meals or {}).items() if ids}

    def set_day(self, day_index: int, recipe_ids: Iterable[str]):
        '''Replaces the recipes planned for a day; an empty selection removes the day.'''
        ids = set(recipe_ids)
        if ids:
            self.meals[day_index] = ids
        else:
            self.meals.pop(day_index, None)
        return self

    def recipes_for(self, day_index: int) -> Set[str]:
        return set(self.meals.get(day_index, set()))

    def clear(self):
        self.meals = {}
        return self

    def __str__(self) -> str:
        days = ", ".join(f"{day}: {sorted(ids)}" for day, ids in sorted(self.meals.items()))
        return f"Plan {self.week_key} - {days or 'empty'}"

    __repr__ = __str__

"""User profile document: one per user, holding the encoded list fields."""
from typing import Any, Dict, List, Optional


def _str_list(value) -> List[str]:
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, str)]


class UserProfile:
    def __init__(self, display_name: str = "", username: str = "",
                 dietary_preferences: Optional[List[str]] = None,
                 grocery_list: Optional[List[str]] = None,
                 current_inventory: Optional[List[str]] = None,
                 generated_meals: Optional[List[str]] = None,
                 planned_meals: Optional[List[Dict[str, Any]]] = None,
                 planned_meals_week_key: str = ""):
        self.display_name = display_name
        self.username = username
        self.dietary_preferences = dietary_preferences[:] if dietary_preferences else []
        self.grocery_list = grocery_list[:] if grocery_list else []
        self.current_inventory = current_inventory[:] if current_inventory else []
        self.generated_meals = generated_meals[:] if generated_meals else []
        self.planned_meals = planned_meals[:] if planned_meals else []
        self.planned_meals_week_key = planned_meals_week_key

    def __str__(self) -> str:
        return (f"{self.display_name or self.username or '<unnamed>'} - "
                f"{len(self.current_inventory)} inventory, {len(self.grocery_list)} grocery, "
                f"{len(self.generated_meals)} generated, week {self.planned_meals_week_key or '-'}")

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Builds a profile from a stored document, ignoring unknown or wrong-typed fields.'''
        d = data if isinstance(data, dict) else {}
        planned = d.get("plannedMeals")
        week_key = d.get("plannedMealsWeekKey")
        return UserProfile(
            display_name=d.get("displayName") if isinstance(d.get("displayName"), str) else "",
            username=d.get("username") if isinstance(d.get("username"), str) else "",
            dietary_preferences=_str_list(d.get("dietaryPreferences")),
            grocery_list=_str_list(d.get("groceryList")),
            current_inventory=_str_list(d.get("currentInventory")),
            generated_meals=_str_list(d.get("generatedMeals")),
            # Individual records are validated by the plan codec on read
            planned_meals=list(planned) if isinstance(planned, list) else [],
            planned_meals_week_key=week_key if isinstance(week_key, str) else "",
        )

    def to_dict(self):
        return {
            "displayName": self.display_name,
            "username": self.username,
            "dietaryPreferences": list(self.dietary_preferences),
            "groceryList": list(self.grocery_list),
            "currentInventory": list(self.current_inventory),
            "generatedMeals": list(self.generated_meals),
            "plannedMeals": list(self.planned_meals),
            "plannedMealsWeekKey": self.planned_meals_week_key,
        }

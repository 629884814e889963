"""Recipe catalog entities: ingredient references and read-only catalog recipes."""
from numbers import Number
from typing import Any, Dict, List, Optional


def _as_str(value: Any, default: str = "") -> str:
    return value if isinstance(value, str) else default


def _as_int(value: Any, default: int = 0) -> int:
    # bool is an int subclass but never a valid count
    if isinstance(value, bool) or not isinstance(value, Number):
        return default
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return default


class RecipeIngredient:
    def __init__(self, food_id: str = "", quantity: int = 0, unit: str = ""):
        self.food_id = food_id
        self.quantity = quantity
        self.unit = unit

    def __str__(self) -> str:
        return f"{self.food_id} - {self.quantity} {self.unit}".rstrip()

    __repr__ = __str__

    @staticmethod
    def from_dict(data) -> "RecipeIngredient":
        '''Creates an ingredient reference from a catalog map; wrong-typed fields become defaults.'''
        d = data if isinstance(data, dict) else {}
        return RecipeIngredient(
            food_id=_as_str(d.get("foodId")),
            quantity=_as_int(d.get("quantity")),
            unit=_as_str(d.get("unit")),
        )

    def to_dict(self):
        return {"foodId": self.food_id, "quantity": self.quantity, "unit": self.unit}


class RecipeCatalogItem:
    def __init__(self, id: str = "", title: str = "", emoji: str = "", calories: int = 0,
                 prep_time_minutes: int = 0, difficulty: int = 1, description: str = "",
                 ingredients: Optional[List[RecipeIngredient]] = None,
                 dietary_flags: Optional[Dict[str, bool]] = None,
                 dietary_restrictions: Optional[List[str]] = None):
        self.id = id
        self.title = title
        self.emoji = emoji
        self.calories = calories
        self.prep_time_minutes = prep_time_minutes
        self.difficulty = difficulty
        self.description = description
        self.ingredients = ingredients[:] if ingredients else []
        self.dietary_flags = dict(dietary_flags) if dietary_flags else {}
        self.dietary_restrictions = dietary_restrictions[:] if dietary_restrictions else []

    def __str__(self) -> str:
        names = ", ".join(ing.food_id for ing in self.ingredients)
        return (f"{self.emoji} {self.title} ({self.id}) - {self.calories} kcal - "
                f"{self.prep_time_minutes} min - Ingredients: {names}")

    __repr__ = __str__

    @staticmethod
    def from_dict(data, doc_id: Optional[str] = None) -> "RecipeCatalogItem":
        '''Creates a catalog recipe from a stored document.

        Absent or wrong-typed fields fall back to defaults; ingredients with a blank
        foodId are dropped. doc_id wins over any "id" field inside the document.
        '''
        d = data if isinstance(data, dict) else {}

        ingredients = []
        raw_ingredients = d.get("ingredients")
        if isinstance(raw_ingredients, list):
            for raw in raw_ingredients:
                if not isinstance(raw, dict):
                    continue
                ingredient = RecipeIngredient.from_dict(raw)
                if ingredient.food_id.strip():
                    ingredients.append(ingredient)

        flags = {}
        raw_flags = d.get("dietaryFlags")
        if isinstance(raw_flags, dict):
            for key, value in raw_flags.items():
                name = str(key) if key is not None else ""
                if name.strip():
                    flags[name] = value if isinstance(value, bool) else False

        restrictions = []
        raw_restrictions = d.get("dietaryRestrictions")
        if isinstance(raw_restrictions, list):
            restrictions = [r for r in raw_restrictions if isinstance(r, str)]

        return RecipeCatalogItem(
            id=doc_id if doc_id is not None else _as_str(d.get("id")),
            title=_as_str(d.get("title")),
            emoji=_as_str(d.get("emoji")),
            calories=_as_int(d.get("calories")),
            prep_time_minutes=_as_int(d.get("prepTimeMinutes")),
            difficulty=_as_int(d.get("difficulty"), 1),
            description=_as_str(d.get("description")),
            ingredients=ingredients,
            dietary_flags=flags,
            dietary_restrictions=restrictions,
        )

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "emoji": self.emoji,
            "calories": self.calories,
            "prepTimeMinutes": self.prep_time_minutes,
            "difficulty": self.difficulty,
            "description": self.description,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "dietaryFlags": dict(self.dietary_flags),
            "dietaryRestrictions": list(self.dietary_restrictions),
        }

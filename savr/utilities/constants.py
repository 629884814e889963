from typing import Final

DATE_FORMAT: Final[str] = "%d/%m/%Y"
DATE_PATTERN: Final[str] = r"[0-9]{2}/[0-9]{2}/[0-9]{4}"

# Persisted record layout
FIELD_DELIMITER: Final[str] = "|"
CHECKED_SUFFIX: Final[str] = "|checked"
INVENTORY_FIELD_COUNT: Final[int] = 6
GROCERY_FIELD_COUNT: Final[int] = 4
RECIPE_FIELD_COUNT: Final[int] = 6

# Expiry tiers (days remaining, inclusive upper bounds)
URGENT_MAX_DAYS: Final[int] = 2
WARNING_MAX_DAYS: Final[int] = 7

# Recipe scoring
EXPIRY_BONUS: Final[dict[str, float]] = {"URGENT": 1000.0, "WARNING": 100.0, "FRESH": 10.0}
DEFAULT_MAX_RECIPES: Final[int] = 7

MATCH_BADGE_ALL: Final[str] = "✓ All ingredients"
MATCH_BADGE_PARTIAL: Final[str] = "✓ {matched}/{total} ingredients"
MATCH_BADGE_NONE: Final[str] = "✓ Available"

# Section headers always shown for inventory and grocery lists
REQUIRED_CATEGORIES: Final[list[str]] = [
    "Fruit",
    "Produce",
    "Spices",
    "Bakery",
    "Beverages",
    "Dairy & Eggs",
    "Meat",
    "Condiments",
    "Pantry",
    "Baking",
]
FALLBACK_CATEGORY: Final[str] = "Other"

DAY_NAMES: Final[list[str]] = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

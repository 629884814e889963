"""Closed set of inventory categories and the synonym table used to reach them."""
from enum import Enum


class InventoryCategory(Enum):
    VEG = ("Vegetables", "🥦")
    DAIRY = ("Dairy", "🥛")
    PROTEIN = ("Protein", "🥩")
    FRUIT = ("Fruit", "🍎")
    GRAIN = ("Grains", "🌾")
    OTHER = ("Other", "🥄")

    def __init__(self, label: str, emoji: str):
        self.label = label
        self.emoji = emoji

    @staticmethod
    def from_label(value: str) -> "InventoryCategory":
        '''Maps a free-text category (as stored in the food catalog) to the enum.

        Matching is case-insensitive; anything unrecognised becomes OTHER.
        '''
        key = (value or "").strip().lower()
        return _SYNONYMS.get(key, InventoryCategory.OTHER)


_SYNONYMS = {
    "fruit": InventoryCategory.FRUIT,
    "fruits": InventoryCategory.FRUIT,
    "vegetables": InventoryCategory.VEG,
    "vegetable": InventoryCategory.VEG,
    "produce": InventoryCategory.VEG,
    "dairy": InventoryCategory.DAIRY,
    "dairy & eggs": InventoryCategory.DAIRY,
    "eggs": InventoryCategory.DAIRY,
    "protein": InventoryCategory.PROTEIN,
    "meat": InventoryCategory.PROTEIN,
    "grain": InventoryCategory.GRAIN,
    "grains": InventoryCategory.GRAIN,
    "pantry": InventoryCategory.GRAIN,
    "baking": InventoryCategory.GRAIN,
}

# Display emoji per free-text category header
CATEGORY_EMOJI = {
    "fruit": "🍎",
    "produce": "🥬",
    "spices": "🌶️",
    "bakery": "🥖",
    "beverages": "🥤",
    "dairy & eggs": "🥛",
    "dairy": "🥛",
    "eggs": "🥛",
    "meat": "🥩",
    "condiments": "🍯",
    "pantry": "🥫",
    "baking": "🧁",
    "vegetables": "🥦",
    "vegetable": "🥦",
    "protein": "🥩",
    "grain": "🌾",
    "grains": "🌾",
}


def get_category_emoji(category: str) -> str:
    return CATEGORY_EMOJI.get((category or "").lower(), "🥄")

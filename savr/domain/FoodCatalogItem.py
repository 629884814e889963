"""Food catalog entry used to prefill emoji, category and unit when adding items."""


class FoodCatalogItem:
    def __init__(self, name: str = "", category: str = "", default_unit: str = "", emoji: str = ""):
        self.name = name
        self.category = category
        self.default_unit = default_unit
        self.emoji = emoji

    def __str__(self) -> str:
        return f"{self.emoji} {self.name} ({self.category}, {self.default_unit})"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = data if isinstance(data, dict) else {}

        def text(key):
            value = d.get(key)
            return value if isinstance(value, str) else ""

        return FoodCatalogItem(text("name"), text("category"), text("defaultUnit"), text("emoji"))

    def to_dict(self):
        return {
            "name": self.name,
            "category": self.category,
            "defaultUnit": self.default_unit,
            "emoji": self.emoji,
        }

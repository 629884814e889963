"""Grocery list entry: emoji, name, quantity (unit embedded) and checked flag."""


class GroceryItem:
    def __init__(self, id: int = 0, emoji: str = "", name: str = "", quantity: str = "",
                 is_checked: bool = False):
        self.id = id
        self.emoji = emoji
        self.name = name
        self.quantity = quantity
        self.is_checked = is_checked

    def __str__(self) -> str:
        mark = "[x]" if self.is_checked else "[ ]"
        return f"{mark} {self.emoji} {self.name} - {self.quantity}"

    __repr__ = __str__

    def to_dict(self):
        return {
            "id": self.id,
            "emoji": self.emoji,
            "name": self.name,
            "quantity": self.quantity,
            "is_checked": self.is_checked,
        }

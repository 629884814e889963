"""Inventory entry: emoji, name, free-text quantity, DD/MM/YYYY expiry, derived status, category."""
from savr.domain.ExpiryStatus import ExpiryStatus
from savr.domain.InventoryCategory import InventoryCategory


class InventoryItem:
    def __init__(self, id: int = 0, emoji: str = "", name: str = "", quantity: str = "",
                 expiry_label: str = "", status: ExpiryStatus = ExpiryStatus.FRESH,
                 category: InventoryCategory = InventoryCategory.OTHER):
        # id is the position in the owning list for this session only
        self.id = id
        self.emoji = emoji
        self.name = name
        self.quantity = quantity
        self.expiry_label = expiry_label
        self.status = status
        self.category = category

    def __str__(self) -> str:
        return (f"{self.emoji} {self.name} - {self.quantity} - Exp: {self.expiry_label} "
                f"({self.status.name}) - {self.category.label}")

    __repr__ = __str__

    def to_dict(self):
        '''Converts the item to a JSON-friendly dictionary for API responses.'''
        return {
            "id": self.id,
            "emoji": self.emoji,
            "name": self.name,
            "quantity": self.quantity,
            "expiry_label": self.expiry_label,
            "status": self.status.name,
            "category": self.category.label,
        }

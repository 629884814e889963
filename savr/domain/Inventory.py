"""Inventory aggregate: encoded inventory rows with expiry-aware notifications."""
from datetime import date
from typing import Iterable, Optional

from savr.domain.EncodedList import EncodedList
from savr.domain.ExpiryStatus import ExpiryStatus
from savr.domain.InventoryItem import InventoryItem
from savr.events.Event_Bus import GLOBAL_EVENT_BUS, INVENTORY_NEAR_EXPIRY
from savr.logic.codec.records import decode_inventory_item, encode_inventory_item
from savr.logic.expiry.classifier import calculate_expiry_status
from savr.logic.grouping.categories import group_by_category, inventory_rows


class Inventory(EncodedList):
    def __init__(self, rows: Optional[Iterable[str]] = None, today: Optional[date] = None):
        super().__init__(rows)
        self.today = today
        self._event_bus = GLOBAL_EVENT_BUS

    # --- Observer helpers -------------------------------------------------
    def set_event_bus(self, bus):
        self._event_bus = bus
        return self

    def _notify_near_expiry(self, item: InventoryItem):
        self._event_bus.publish(INVENTORY_NEAR_EXPIRY, {"item": item, "status": item.status})

    def _decode(self, raw: str, index: int):
        return decode_inventory_item(raw, index, self.today)

    def add_item(self, item: InventoryItem, category: Optional[str] = None) -> InventoryItem:
        '''
        Appends an item. Its status is recomputed from the expiry date before encoding.
        '''
        item.status = calculate_expiry_status(item.expiry_label, self.today)
        item.id = len(self.rows)
        self.rows.append(encode_inventory_item(item, category))
        if item.status is ExpiryStatus.URGENT:
            self._notify_near_expiry(item)
        return item

    def scan_and_notify(self):
        for item in self.get_items():
            if item.status is ExpiryStatus.URGENT:
                self._notify_near_expiry(item)
        return self

    def grouped(self):
        return group_by_category(inventory_rows(self.rows, self.today))

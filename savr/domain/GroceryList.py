"""GroceryList aggregate: encoded grocery rows with an out-of-band checked suffix."""
from savr.domain.EncodedList import EncodedList
from savr.domain.GroceryItem import GroceryItem
from savr.logic.codec.records import (
    decode_grocery_item, encode_grocery_item, is_checked_serialized, set_checked_serialized
)
from savr.logic.grouping.categories import group_by_category, grocery_rows


class GroceryList(EncodedList):
    def _decode(self, raw: str, index: int):
        return decode_grocery_item(raw, index)

    def add_item(self, item: GroceryItem, category: str) -> GroceryItem:
        '''
        Appends an item under the given category label.
        '''
        item.id = len(self.rows)
        self.rows.append(encode_grocery_item(item, category))
        return item

    def toggle_checked(self, index: int) -> bool:
        '''
        Flips the checked suffix of the row at index; returns the new state.
        '''
        self._check_index(index)
        checked = not is_checked_serialized(self.rows[index])
        self.rows[index] = set_checked_serialized(self.rows[index], checked)
        return checked

    def checked_indices(self):
        return {i for i, raw in enumerate(self.rows) if is_checked_serialized(raw)}

    def grouped(self):
        return group_by_category(grocery_rows(self.rows))

    def __str__(self) -> str:
        return f"Grocery List {super().__str__()}"

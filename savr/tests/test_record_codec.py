import unittest
from datetime import date

from savr.domain.DisplayRecipe import DisplayRecipe
from savr.domain.ExpiryStatus import ExpiryStatus
from savr.domain.GroceryItem import GroceryItem
from savr.domain.InventoryCategory import InventoryCategory
from savr.domain.InventoryItem import InventoryItem
from savr.logic.codec.records import (
    decode_grocery_item, decode_inventory_item, decode_recipe, decode_recipes,
    encode_grocery_item, encode_inventory_item, encode_recipe, encode_recipes,
    get_category_from_inventory_serialized, get_category_from_serialized, set_checked_serialized,
)

TODAY = date(2026, 3, 10)


class TestInventoryCodec(unittest.TestCase):

    def test_encode_layout(self):
        item = InventoryItem(0, "🥬", "Spinach", "1 bag", "11/03/2026", ExpiryStatus.URGENT, InventoryCategory.VEG)
        self.assertEqual(encode_inventory_item(item, "Produce"), "🥬|Spinach|Produce|1 bag|11/03/2026|URGENT")
        self.assertEqual(encode_inventory_item(item), "🥬|Spinach|Vegetables|1 bag|11/03/2026|URGENT")

    def test_round_trip_rederives_status(self):
        # Stored as FRESH but expires tomorrow: the stored tier must be ignored
        item = InventoryItem(3, "🧀", "Feta Cheese", "150g", "11/03/2026", ExpiryStatus.FRESH, InventoryCategory.DAIRY)
        decoded = decode_inventory_item(encode_inventory_item(item), 3, TODAY)
        self.assertEqual(decoded.id, 3)
        self.assertEqual(decoded.emoji, "🧀")
        self.assertEqual(decoded.name, "Feta Cheese")
        self.assertEqual(decoded.quantity, "150g")
        self.assertEqual(decoded.expiry_label, "11/03/2026")
        self.assertEqual(decoded.category, InventoryCategory.DAIRY)
        self.assertEqual(decoded.status, ExpiryStatus.URGENT)

    def test_category_synonyms(self):
        cases = {
            "Produce": InventoryCategory.VEG,
            "vegetable": InventoryCategory.VEG,
            "MEAT": InventoryCategory.PROTEIN,
            "Dairy & Eggs": InventoryCategory.DAIRY,
            "pantry": InventoryCategory.GRAIN,
            "Baking": InventoryCategory.GRAIN,
            "fruits": InventoryCategory.FRUIT,
            "Spices": InventoryCategory.OTHER,
            "": InventoryCategory.OTHER,
        }
        for label, expected in cases.items():
            decoded = decode_inventory_item(f"x|Thing|{label}|1|20/03/2026|FRESH", 0, TODAY)
            self.assertEqual(decoded.category, expected, label)

    def test_too_few_fields_is_dropped(self):
        self.assertIsNone(decode_inventory_item("🥬|Spinach|Produce|1 bag|11/03/2026", 0, TODAY))
        self.assertIsNone(decode_inventory_item("", 0, TODAY))

    def test_unparseable_date_decodes_as_fresh(self):
        decoded = decode_inventory_item("🥬|Spinach|Produce|1 bag|soon|URGENT", 0, TODAY)
        self.assertEqual(decoded.status, ExpiryStatus.FRESH)

    def test_category_extraction(self):
        self.assertEqual(get_category_from_inventory_serialized("a|b|Meat|1|x|y"), "Meat")
        self.assertIsNone(get_category_from_inventory_serialized("a|b"))


class TestGroceryCodec(unittest.TestCase):

    def test_round_trip(self):
        for checked in (False, True):
            item = GroceryItem(5, "🥛", "Whole Milk", "500 ml", is_checked=checked)
            encoded = encode_grocery_item(item, "Dairy & Eggs")
            decoded = decode_grocery_item(encoded, 5, item.is_checked)
            self.assertEqual((decoded.id, decoded.emoji, decoded.name, decoded.quantity, decoded.is_checked),
                             (5, "🥛", "Whole Milk", "500 ml", checked))
            self.assertEqual(get_category_from_serialized(encoded), "Dairy & Eggs")

    def test_checked_suffix(self):
        item = GroceryItem(0, "🍋", "Lemons", "3", is_checked=True)
        self.assertEqual(encode_grocery_item(item, "Fruit"), "🍋|Lemons|Fruit|3|checked")

    def test_suffix_is_stripped_before_field_count(self):
        # Three real fields plus the suffix must not pass the four-field check
        self.assertIsNone(decode_grocery_item("🧀|Cheese|Dairy|checked", 0))
        decoded = decode_grocery_item("🧀|Cheese|Dairy|200 g|checked", 0)
        self.assertEqual(decoded.quantity, "200 g")
        self.assertTrue(decoded.is_checked)

    def test_malformed_is_dropped(self):
        self.assertIsNone(decode_grocery_item("🧀|Cheese|Dairy", 0))

    def test_set_checked_serialized(self):
        row = "🧀|Cheese|Dairy|200 g"
        self.assertEqual(set_checked_serialized(row, True), row + "|checked")
        self.assertEqual(set_checked_serialized(row + "|checked", True), row + "|checked")
        self.assertEqual(set_checked_serialized(row + "|checked", False), row)


class TestRecipeCodec(unittest.TestCase):

    def test_encode_layout_and_round_trip(self):
        recipe = DisplayRecipe("banana_oatmeal", "🥣", "Banana Oatmeal", 340, 10, "✓ 2/3 ingredients")
        encoded = encode_recipe(recipe)
        self.assertEqual(encoded, "banana_oatmeal|🥣|Banana Oatmeal|340|10|✓ 2/3 ingredients")
        decoded = decode_recipe(encoded)
        self.assertEqual(decoded.id, "banana_oatmeal")
        self.assertEqual(decoded.calories, 340)
        self.assertEqual(decoded.minutes, 10)
        self.assertEqual(decoded.match_badge, "✓ 2/3 ingredients")
        self.assertFalse(decoded.is_selected)

    def test_non_numeric_fields_default_to_zero(self):
        decoded = decode_recipe("r1|🍝|Pasta|lots|?|✓ Available")
        self.assertEqual((decoded.calories, decoded.minutes), (0, 0))

    def test_list_helpers_drop_bad_rows(self):
        rows = encode_recipes([DisplayRecipe("a", "1", "A", 1, 2, "b"), DisplayRecipe("c", "2", "C", 3, 4, "d")])
        decoded = decode_recipes(rows + ["broken|row"])
        self.assertEqual([r.id for r in decoded], ["a", "c"])

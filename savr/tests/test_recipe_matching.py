import unittest

from savr.domain.ExpiryStatus import ExpiryStatus
from savr.domain.InventoryItem import InventoryItem
from savr.domain.Recipe import RecipeCatalogItem, RecipeIngredient
from savr.logic.matching.scoring import (
    filter_by_dietary_preferences, filter_recipes_by_inventory, generate_meals,
    index_inventory, map_recipe_catalog_to_display, score_recipe,
)


def _recipe(recipe_id, *food_ids, **kwargs):
    return RecipeCatalogItem(id=recipe_id, title=recipe_id.title(), emoji="🍽",
                             ingredients=[RecipeIngredient(f, 1, "pcs") for f in food_ids], **kwargs)


def _item(name, status):
    return InventoryItem(name=name, status=status)


class TestScoreRecipe(unittest.TestCase):

    def test_one_urgent_of_three(self):
        inventory = index_inventory([_item("A", ExpiryStatus.URGENT)])
        score = score_recipe(_recipe("r", "A", "B", "C"), inventory)
        self.assertAlmostEqual(score, 1033.33, places=2)

    def test_bonus_per_tier(self):
        inventory = index_inventory([
            _item("a", ExpiryStatus.URGENT), _item("b", ExpiryStatus.WARNING), _item("c", ExpiryStatus.FRESH),
        ])
        self.assertAlmostEqual(score_recipe(_recipe("r", "a", "b", "c"), inventory), 100 + 1110)
        self.assertAlmostEqual(score_recipe(_recipe("r", "b", "x"), inventory), 50 + 100)
        self.assertAlmostEqual(score_recipe(_recipe("r", "c"), inventory), 100 + 10)

    def test_matching_is_case_insensitive(self):
        inventory = index_inventory([_item("Feta Cheese", ExpiryStatus.FRESH)])
        self.assertAlmostEqual(score_recipe(_recipe("r", "feta CHEESE"), inventory), 110)

    def test_no_ingredients_or_no_match_scores_zero(self):
        inventory = index_inventory([_item("a", ExpiryStatus.URGENT)])
        self.assertEqual(score_recipe(_recipe("empty"), inventory), 0)
        self.assertEqual(score_recipe(_recipe("r", "x", "y"), inventory), 0)

    def test_last_duplicate_name_wins(self):
        inventory = index_inventory([_item("Milk", ExpiryStatus.URGENT), _item("milk", ExpiryStatus.FRESH)])
        self.assertEqual(inventory["milk"].status, ExpiryStatus.FRESH)


class TestRanker(unittest.TestCase):

    def test_truncates_to_seven_sorted_descending(self):
        inventory = [_item("u", ExpiryStatus.URGENT), _item("w", ExpiryStatus.WARNING)]
        catalog = [_recipe(f"r{i}", "w", *[f"missing{j}" for j in range(i)]) for i in range(9)]
        catalog.append(_recipe("best", "u"))
        ranked = filter_recipes_by_inventory(catalog, inventory)
        self.assertEqual(len(ranked), 7)
        by_name = index_inventory(inventory)
        scores = [score_recipe(r, by_name) for r in ranked]
        self.assertEqual(scores, sorted(scores, reverse=True))
        self.assertEqual(ranked[0].id, "best")
        self.assertEqual([r.id for r in ranked[1:]], ["r0", "r1", "r2", "r3", "r4", "r5"])

    def test_non_matching_recipes_are_excluded(self):
        ranked = filter_recipes_by_inventory(
            [_recipe("none", "zzz"), _recipe("empty"), _recipe("hit", "a")],
            [_item("a", ExpiryStatus.FRESH)],
        )
        self.assertEqual([r.id for r in ranked], ["hit"])

    def test_ties_keep_catalog_order_and_are_deterministic(self):
        inventory = [_item("a", ExpiryStatus.WARNING)]
        catalog = [_recipe("first", "a"), _recipe("second", "a"), _recipe("third", "a")]
        first = [r.id for r in filter_recipes_by_inventory(catalog, inventory)]
        second = [r.id for r in filter_recipes_by_inventory(catalog, inventory)]
        self.assertEqual(first, ["first", "second", "third"])
        self.assertEqual(first, second)

    def test_urgent_dominates_coverage(self):
        inventory = [_item("a", ExpiryStatus.URGENT), _item("b", ExpiryStatus.FRESH), _item("c", ExpiryStatus.FRESH)]
        catalog = [_recipe("full_fresh", "b", "c"), _recipe("partial_urgent", "a", "x", "y", "z")]
        self.assertEqual([r.id for r in filter_recipes_by_inventory(catalog, inventory)],
                         ["partial_urgent", "full_fresh"])


class TestDisplayProjection(unittest.TestCase):

    def test_badges(self):
        inventory = [_item("a", ExpiryStatus.FRESH), _item("b", ExpiryStatus.FRESH)]
        self.assertEqual(map_recipe_catalog_to_display(_recipe("r", "a", "b"), inventory).match_badge,
                         "✓ All ingredients")
        self.assertEqual(map_recipe_catalog_to_display(_recipe("r", "a", "x", "y"), inventory).match_badge,
                         "✓ 1/3 ingredients")
        self.assertEqual(map_recipe_catalog_to_display(_recipe("r", "x"), inventory).match_badge,
                         "✓ Available")
        self.assertEqual(map_recipe_catalog_to_display(_recipe("r", "x")).match_badge, "✓ All ingredients")

    def test_projection_keeps_catalog_id(self):
        recipe = RecipeCatalogItem(id="banana_oatmeal", title="Banana Oatmeal", emoji="🥣", calories=340,
                                   prep_time_minutes=10, ingredients=[RecipeIngredient("Oats")])
        display = map_recipe_catalog_to_display(recipe, is_selected=True)
        self.assertEqual((display.id, display.name, display.calories, display.minutes, display.is_selected),
                         ("banana_oatmeal", "Banana Oatmeal", 340, 10, True))

    def test_generate_meals(self):
        inventory = [_item("a", ExpiryStatus.URGENT)]
        meals = generate_meals([_recipe("miss", "z"), _recipe("hit", "a", "b")], inventory)
        self.assertEqual([(m.id, m.match_badge) for m in meals], [("hit", "✓ 1/2 ingredients")])


class TestDietaryFilter(unittest.TestCase):

    def test_restrictions_and_flags(self):
        veg = _recipe("veg", "a", dietary_restrictions=["Vegetarian"])
        lactose = _recipe("lf", "a", dietary_flags={"lactoseFree": True, "vegetarian": True})
        meat = _recipe("meat", "a", dietary_flags={"vegetarian": False})
        catalog = [veg, lactose, meat]
        self.assertEqual([r.id for r in filter_by_dietary_preferences(catalog, ["vegetarian"])], ["veg", "lf"])
        self.assertEqual([r.id for r in filter_by_dietary_preferences(catalog, ["Lactose Free"])], ["lf"])
        self.assertEqual(filter_by_dietary_preferences(catalog, []), catalog)
        self.assertEqual(filter_by_dietary_preferences(catalog, None), catalog)

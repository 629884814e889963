import unittest
from datetime import date

from savr.domain.UserProfile import UserProfile
from savr.logic.plan.week import get_current_week_days, get_current_week_key, get_month_name, roll_over_week

# A Tuesday
TODAY = date(2026, 3, 10)


class TestWeekHelpers(unittest.TestCase):

    def test_week_key_is_monday(self):
        self.assertEqual(get_current_week_key(TODAY), "2026-03-09")
        self.assertEqual(get_current_week_key(date(2026, 3, 15)), "2026-03-09")
        self.assertEqual(get_current_week_key(date(2026, 3, 16)), "2026-03-16")

    def test_week_days(self):
        days, today_index = get_current_week_days(TODAY)
        self.assertEqual(today_index, 1)
        self.assertEqual([d.day_name for d in days], ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"])
        self.assertEqual([d.day_num for d in days], [9, 10, 11, 12, 13, 14, 15])

    def test_week_crossing_month(self):
        days, _ = get_current_week_days(date(2026, 4, 1))
        self.assertEqual([d.day_num for d in days], [30, 31, 1, 2, 3, 4, 5])

    def test_month_name(self):
        self.assertEqual(get_month_name(TODAY), "MAR")
        self.assertEqual(get_month_name(date(2026, 12, 1)), "DEC")


class TestRollOver(unittest.TestCase):

    def test_same_week_is_untouched(self):
        profile = UserProfile(planned_meals=[{"dayIndex": 0, "recipeIds": ["a"]}],
                              planned_meals_week_key="2026-03-09")
        self.assertFalse(roll_over_week(profile, TODAY))
        self.assertEqual(len(profile.planned_meals), 1)

    def test_new_week_clears_meals(self):
        profile = UserProfile(planned_meals=[{"dayIndex": 0, "recipeIds": ["a"]}],
                              planned_meals_week_key="2026-03-02")
        self.assertTrue(roll_over_week(profile, TODAY))
        self.assertEqual(profile.planned_meals, [])
        self.assertEqual(profile.planned_meals_week_key, "2026-03-09")

    def test_blank_key_is_stamped_without_clearing(self):
        profile = UserProfile(planned_meals=[{"dayIndex": 3, "recipeIds": ["b"]}])
        self.assertTrue(roll_over_week(profile, TODAY))
        self.assertEqual(profile.planned_meals, [{"dayIndex": 3, "recipeIds": ["b"]}])
        self.assertEqual(profile.planned_meals_week_key, "2026-03-09")

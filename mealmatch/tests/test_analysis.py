import unittest
from datetime import date, datetime, timedelta, timezone
from mealmatch.domain.InventoryItem import InventoryItem
from mealmatch.domain.Recipe import Recipe
from mealmatch.logic.matching.matcher import match_recipe
from mealmatch.logic.pantry.analysis import compute_expiring_soon, days_until_expiration, is_expiring_soon

TODAY = date(2026, 10, 18)


class TestExpiry(unittest.TestCase):

    def test_days_until_expiration_for_dates(self):
        self.assertEqual(days_until_expiration(TODAY + timedelta(days=3), TODAY), 3)
        self.assertEqual(days_until_expiration(TODAY - timedelta(days=2), TODAY), -2)
        self.assertIsNone(days_until_expiration(None, TODAY))

    def test_days_until_expiration_rounds_partial_days_up(self):
        self.assertEqual(days_until_expiration(datetime(2026, 10, 19, 12, 0), TODAY), 2)
        self.assertEqual(days_until_expiration(datetime(2026, 10, 18, 6, 0), TODAY), 1)

    def test_mixed_timezone_awareness_does_not_raise(self):
        aware = datetime(2026, 10, 20, tzinfo=timezone.utc)
        self.assertEqual(days_until_expiration(aware, datetime(2026, 10, 18, 9, 0)), 2)
        naive = datetime(2026, 10, 20, 12, 0)
        self.assertEqual(days_until_expiration(naive, datetime(2026, 10, 18, tzinfo=timezone.utc)), 3)

    def test_aware_expiration_window_boundary(self):
        now = datetime(2026, 10, 18, 12, 0)
        on_edge = InventoryItem("a", "Milk", expiration_date=datetime(2026, 10, 25, 12, 0, tzinfo=timezone.utc))
        past_edge = InventoryItem("a", "Milk", expiration_date=datetime(2026, 10, 25, 13, 0, tzinfo=timezone.utc))
        self.assertTrue(is_expiring_soon(on_edge, now))
        self.assertFalse(is_expiring_soon(past_edge, now))

    def test_matcher_accepts_aware_expiration_with_naive_today(self):
        recipe = Recipe("r", "Salad", ["spinach"])
        inventory = [InventoryItem("i", "Spinach", "full", datetime(2026, 10, 20, tzinfo=timezone.utc))]
        evidence = match_recipe(recipe, inventory, today=datetime(2026, 10, 18, 9, 0))
        self.assertEqual(evidence.expiring_items, ("Spinach",))
        self.assertEqual(evidence.score, 16)

    def test_is_expiring_soon(self):
        self.assertTrue(is_expiring_soon(InventoryItem("a", "Milk", expiration_date=TODAY), TODAY))
        self.assertTrue(is_expiring_soon(InventoryItem("a", "Milk", expiration_date=TODAY + timedelta(days=7)), TODAY))
        self.assertFalse(is_expiring_soon(InventoryItem("a", "Milk", expiration_date=TODAY + timedelta(days=8)), TODAY))
        self.assertFalse(is_expiring_soon(InventoryItem("a", "Milk", expiration_date=TODAY - timedelta(days=1)), TODAY))
        self.assertFalse(is_expiring_soon(InventoryItem("a", "Milk"), TODAY))
        self.assertTrue(is_expiring_soon(InventoryItem("a", "Milk", expiration_date=TODAY + timedelta(days=9)),
                                         TODAY, window=10))


class TestComputeExpiringSoon(unittest.TestCase):

    def setUp(self):
        self.inventory = [
            InventoryItem("1", "Milk", expiration_date=TODAY + timedelta(days=1), category="dairy"),
            InventoryItem("2", "Bread", expiration_date=TODAY - timedelta(days=2)),
            InventoryItem("3", "Cheese", expiration_date=TODAY + timedelta(days=10)),
            InventoryItem("4", "Rice"),
            InventoryItem("5", "Yogurt", expiration_date=TODAY + timedelta(days=5)),
        ]

    def test_includes_expired_and_sorts_soonest_first(self):
        result = compute_expiring_soon(self.inventory, TODAY)
        self.assertEqual([r['name'] for r in result], ["Bread", "Milk", "Yogurt"])
        bread, milk, yogurt = result
        self.assertTrue(bread['expired'])
        self.assertTrue(milk['urgent'])
        self.assertFalse(yogurt['urgent'])
        self.assertEqual(milk['category'], "dairy")
        self.assertEqual(milk['expiration_date'], "2026-10-19")

    def test_limit(self):
        result = compute_expiring_soon(self.inventory, TODAY, limit=2)
        self.assertEqual([r['name'] for r in result], ["Bread", "Milk"])

    def test_accepts_plain_dicts(self):
        inventory = [
            {"id": "1", "name": "Milk", "expirationDate": "2026-10-19", "category": "dairy"},
            {"id": "2", "name": "Rice"},
        ]
        result = compute_expiring_soon(inventory, TODAY)
        self.assertEqual([r['name'] for r in result], ["Milk"])
        self.assertEqual(result[0]['days_left'], 1)
        self.assertEqual(inventory[0]['expirationDate'], "2026-10-19")


if __name__ == '__main__':
    unittest.main()

import unittest
from datetime import date, datetime
from mealmatch.domain.InventoryItem import InventoryItem, parse_expiration


class TestInventoryItem(unittest.TestCase):

    def test_from_dict_parses_fields(self):
        item = InventoryItem.from_dict({
            "id": 3, "name": "Milk", "quantity_level": "FULL",
            "expiration_date": "2026-10-20", "category": "dairy", "family_id": "f1",
        })
        self.assertEqual(item.id, "3")
        self.assertEqual(item.quantity_level, "full")
        self.assertTrue(item.is_full)
        self.assertEqual(item.expiration_date, date(2026, 10, 20))
        self.assertEqual(item.category, "dairy")

    def test_from_dict_accepts_camel_case(self):
        item = InventoryItem.from_dict({"name": "Milk", "quantityLevel": "low", "expirationDate": "2026-10-20"})
        self.assertEqual(item.quantity_level, "low")
        self.assertEqual(item.expiration_date, date(2026, 10, 20))

    def test_bad_values_fall_back_to_defaults(self):
        item = InventoryItem.from_dict({"name": "Milk", "quantity_level": "plenty", "expiration_date": "soon"})
        self.assertEqual(item.quantity_level, "medium")
        self.assertIsNone(item.expiration_date)
        self.assertEqual(item.category, "other")

    def test_parse_expiration(self):
        self.assertEqual(parse_expiration("2026-10-20T08:00:00Z"), date(2026, 10, 20))
        stamp = datetime(2026, 10, 20, 8, 30)
        self.assertIs(parse_expiration(stamp), stamp)
        self.assertIsNone(parse_expiration(""))
        self.assertIsNone(parse_expiration(None))

    def test_to_dict(self):
        item = InventoryItem("i1", "Eggs", "full", date(2026, 11, 1), "dairy")
        self.assertEqual(item.to_dict(), {
            "id": "i1", "name": "Eggs", "quantity_level": "full",
            "expiration_date": "2026-11-01", "category": "dairy",
        })
        self.assertEqual(InventoryItem.from_dict(item.to_dict()), item)


if __name__ == '__main__':
    unittest.main()

import unittest
from mealmatch.domain.InventoryItem import InventoryItem
from mealmatch.logic.pantry.updates import plan_meal_consumption, plan_receipt_restock, reduce_quantity_level


class TestPantryUpdates(unittest.TestCase):

    def setUp(self):
        self.inventory = [
            InventoryItem("e1", "Eggs", "full"),
            InventoryItem("r1", "Rice", "medium"),
            InventoryItem("s1", "Spinach", "low"),
        ]

    def test_reduce_quantity_level(self):
        self.assertEqual(reduce_quantity_level("full"), "medium")
        self.assertEqual(reduce_quantity_level("medium"), "low")
        self.assertEqual(reduce_quantity_level("low"), "low")

    def test_meal_consumption_reduces_each_item_once(self):
        meals = [["2 eggs", "1 cup rice"], {"ingredients": ["eggs", "soy sauce"]}, None]
        result = plan_meal_consumption(meals, self.inventory)
        self.assertEqual(result['items_used'], ["Eggs", "Rice"])
        self.assertEqual(result['updates'], [
            {'id': 'e1', 'name': 'Eggs', 'from': 'full', 'to': 'medium'},
            {'id': 'r1', 'name': 'Rice', 'from': 'medium', 'to': 'low'},
        ])
        # proposals only
        self.assertEqual(self.inventory[0].quantity_level, "full")

    def test_receipt_restock(self):
        result = plan_receipt_restock(["Fresh Spinach", "Soy Sauce", ""], self.inventory)
        self.assertEqual(result['restocked'], [{'id': 's1', 'name': 'Spinach', 'purchased': 'Fresh Spinach'}])
        self.assertEqual(result['new_items'], [{'name': 'Soy Sauce', 'category': 'other', 'quantity_level': 'full'}])


if __name__ == '__main__':
    unittest.main()

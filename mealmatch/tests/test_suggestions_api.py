import unittest
from fastapi.testclient import TestClient
from mealmatch.api.api_run import app


class TestSuggestionsAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def _payload(self, **overrides):
        payload = {
            'today': '2026-10-18',
            'recipes': [
                {'id': 'r1', 'name': 'Spinach Salad', 'ingredients': ['2 cups fresh chopped spinach']},
                {'id': 'r2', 'name': 'Pancakes', 'ingredients': {'ingredients': ['flour', 'milk']}},
                {'id': 'r3', 'name': 'Leftovers', 'ingredients': None},
            ],
            'inventory': [
                {'id': 'i1', 'name': 'Spinach', 'quantityLevel': 'full', 'expirationDate': '2026-10-21'},
            ],
        }
        payload.update(overrides)
        return payload

    def test_health(self):
        resp = self.client.get('/api/health')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {'status': 'ok'})

    def test_suggestions_basic(self):
        resp = self.client.post('/api/suggestions', json=self._payload())
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data['count'], 1)
        self.assertEqual(data['total'], 3)
        top = data['suggestions'][0]
        self.assertEqual(top['recipe_id'], 'r1')
        self.assertEqual(top['score'], 16)
        self.assertEqual(top['matched_items'], ['Spinach'])
        self.assertEqual(top['expiring_items'], ['Spinach'])
        self.assertEqual(top['in_stock_count'], 1)
        self.assertTrue(top['uses_expiring'])

    def test_empty_body(self):
        resp = self.client.post('/api/suggestions', json={})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['suggestions'], [])

    def test_invalid_limit_and_policy_rejected(self):
        self.assertEqual(self.client.post('/api/suggestions', json=self._payload(limit=0)).status_code, 422)
        self.assertEqual(self.client.post('/api/suggestions', json=self._payload(policy='worst')).status_code, 422)

    def test_invalid_inventory_rejected(self):
        bad = self._payload(inventory=[{'name': '  ', 'quantity_level': 'full'}])
        self.assertEqual(self.client.post('/api/suggestions', json=bad).status_code, 422)
        bad = self._payload(inventory=[{'name': 'Milk', 'quantity_level': 'plenty'}])
        self.assertEqual(self.client.post('/api/suggestions', json=bad).status_code, 422)

    def test_normalize(self):
        resp = self.client.post('/api/ingredients/normalize', json={'names': ['2 cups fresh chopped spinach', 'Fresh']})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['items'], [
            {'name': '2 cups fresh chopped spinach', 'core': 'spinach'},
            {'name': 'Fresh', 'core': 'Fresh'},
        ])


if __name__ == '__main__':
    unittest.main()

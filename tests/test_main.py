import unittest
import json
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

from array_tools.config import TOOLS
from array_tools.main import app, create_app


class TestMain(unittest.TestCase):
    def setUp(self):
        self.app = app.test_client()

    def test_dashboard(self):
        response = self.app.get('/')
        self.assertEqual(response.status_code, 200)
        self.assertIn(b'Array Tools', response.data)
        self.assertIn(b'/api/arrays/diff', response.data)

    def test_api_tools(self):
        response = self.app.get('/api/tools')
        self.assertEqual(response.status_code, 200)
        data = json.loads(response.data)
        self.assertIn('tools', data)
        self.assertEqual([tool['id'] for tool in data['tools']], [tool['id'] for tool in TOOLS])

    def test_health(self):
        response = self.app.get('/health')
        self.assertEqual(response.status_code, 200)
        data = json.loads(response.data)
        self.assertEqual(data['status'], 'healthy')
        self.assertIn('timestamp', data)
        self.assertEqual(data['tools_count'], len(TOOLS))

    def test_api_merge(self):
        response = self.app.post('/api/arrays/merge', json={
            'first': 'a, b',
            'second': 'b\nc',
            'remove_duplicates': True
        })
        self.assertEqual(response.status_code, 200)
        data = json.loads(response.data)
        self.assertTrue(data['success'])
        self.assertEqual(data['result'], '[\n  "a",\n  "b",\n  "c"\n]')

    def test_api_merge_no_data(self):
        response = self.app.post('/api/arrays/merge', json={})
        self.assertEqual(response.status_code, 400)
        data = json.loads(response.data)
        self.assertFalse(data['success'])
        self.assertEqual(data['error'], 'No data provided')


class TestDisabledTools(unittest.TestCase):
    def setUp(self):
        config = {
            'tools': {'jwt-decoder': {'enabled': False}},
            'defaults': {},
            'log_level': 'WARNING',
        }
        self.app = create_app(config).test_client()

    def test_disabled_tool_hidden_from_listing(self):
        data = json.loads(self.app.get('/api/tools').data)
        self.assertNotIn('jwt-decoder', [tool['id'] for tool in data['tools']])

    def test_disabled_tool_route_is_404(self):
        response = self.app.post('/api/jwt/decode', json={'token': 'a.b.c'})
        self.assertEqual(response.status_code, 404)

    def test_health_counts_enabled_tools(self):
        data = json.loads(self.app.get('/health').data)
        self.assertEqual(data['tools_count'], len(TOOLS) - 1)


if __name__ == '__main__':
    unittest.main()

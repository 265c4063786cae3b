"""Unit tests for POST /translate."""

import unittest

from fastapi.testclient import TestClient

from api.dependencies import get_model_cache, get_model_loader
from api.main import app
from adapter.fake.translation_model import FakeTranslationModelLoader
from adapter.translation.phrase_table import PhraseTableModelLoader
from utils.model_cache import ModelCache


class TestTranslateRoute(unittest.TestCase):
    """Test cases for POST /translate endpoint."""

    def setUp(self):
        self.client = TestClient(app)
        self.cache = ModelCache()
        app.dependency_overrides[get_model_cache] = lambda: self.cache
        app.dependency_overrides[get_model_loader] = lambda: PhraseTableModelLoader()

    def tearDown(self):
        app.dependency_overrides.clear()

    def test_translate_detected_source(self):
        """Test the source language is detected from the query."""
        response = self.client.post("/translate", json={"q": "美しい"})

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["query"], "美しい")
        self.assertEqual(data["source"], "ja")
        self.assertEqual(data["translations"]["en"], "beautiful")
        self.assertNotIn("ja", data["translations"])
        self.assertNotIn("errors", data)
        self.assertIn("timestamp", data)
        self.assertEqual(len(self.cache), 10)

    def test_translate_explicit_source(self):
        response = self.client.post("/translate", json={"q": "freedom", "src": "en"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["translations"]["ja"], "自由")

    def test_failing_pairs_reported(self):
        """Test failed pairs appear in errors and as placeholders."""
        app.dependency_overrides[get_model_loader] = lambda: FakeTranslationModelLoader({"fr"})

        response = self.client.post("/translate", json={"q": "hi", "src": "en"})

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["errors"], ["en->fr"])
        self.assertEqual(data["translations"]["fr"], "[Error: en->fr]")

    def test_missing_query(self):
        """Test an absent or empty q returns 400."""
        response = self.client.post("/translate", json={})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            response.json(), {"error": 'Query parameter "q" is required and must be a string'},
        )

    def test_unsupported_source(self):
        """Test an unknown src returns 400."""
        response = self.client.post("/translate", json={"q": "hi", "src": "xx"})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Unsupported source language: xx"})

    def test_non_string_query_rejected_by_schema(self):
        """Test a numeric q fails request validation."""
        response = self.client.post("/translate", json={"q": 42})
        self.assertEqual(response.status_code, 422)


if __name__ == "__main__":
    unittest.main()

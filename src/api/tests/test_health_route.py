"""Unit tests for GET /health and GET /."""

import unittest

from fastapi.testclient import TestClient

from api.dependencies import get_lexicon_repo, get_model_cache
from api.main import VERSION, app
from adapter.fake.lexicon import sample_lexicon
from adapter.lexicon.memory_repository import InMemoryLexiconRepository
from utils.model_cache import ModelCache


class TestHealthRoute(unittest.TestCase):
    """Test the health report for full, seed and empty tables."""

    def setUp(self):
        self.client = TestClient(app)
        self.cache = ModelCache()
        app.dependency_overrides[get_model_cache] = lambda: self.cache

    def tearDown(self):
        app.dependency_overrides.clear()

    def test_healthy_with_built_tables(self):
        """Test built tables report healthy with counts."""
        app.dependency_overrides[get_lexicon_repo] = sample_lexicon

        response = self.client.get("/health")

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["status"], "healthy")
        self.assertEqual(data["lexicon"], {"is_seed": False, "words": 5, "senses": 6, "synsets": 3})
        self.assertEqual(data["model_cache"], {"size": 0, "capacity": 10})

    def test_degraded_on_seed_table(self):
        """Test the seed sense table reports degraded."""
        app.dependency_overrides[get_lexicon_repo] = lambda: InMemoryLexiconRepository(
            {}, {"00000001-n": {"en": ["x"]}}, is_seed=True,
        )

        response = self.client.get("/health")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "degraded")

    def test_degraded_on_empty_synset_table(self):
        """Test an empty synset table reports degraded with status 200."""
        app.dependency_overrides[get_lexicon_repo] = lambda: InMemoryLexiconRepository()

        response = self.client.get("/health")

        self.assertEqual(response.json()["status"], "degraded")


class TestRootRoute(unittest.TestCase):
    """Test the service banner."""

    def test_root(self):
        response = TestClient(app).get("/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {
            "service": "WordTree Lookup API",
            "version": VERSION,
            "status": "running",
        })


if __name__ == "__main__":
    unittest.main()

"""Unit tests for GET /lookup."""

import unittest
from unittest.mock import AsyncMock, patch

from fastapi.testclient import TestClient

from api.dependencies import get_etymology_port, get_lexicon_repo, get_word_relations_port
from api.main import app
from adapter.fake.etymology import FakeEtymologyAdapter
from adapter.fake.lexicon import BEAUTIFUL_DEFINITION, sample_lexicon
from adapter.fake.word_relations import FakeWordRelationsAdapter, UnavailableWordRelationsAdapter
from domain.model.errors import LookupFailedError
from domain.model.lexicon import RelatedWord


class TestLookupRoute(unittest.TestCase):
    """Test cases for GET /lookup endpoint."""

    def setUp(self):
        self.client = TestClient(app)
        self.word_api = FakeWordRelationsAdapter(
            definitions={"freedom": [RelatedWord(
                word="freedom",
                definitions=("n\tthe condition of being free",),
                tags=("ipa_pron:ˈfɹiːdəm",),
            )]},
            synonyms={"freedom": ["liberty"]},
        )
        self.etymology_port = FakeEtymologyAdapter(
            etymologies={"freedom": "From Old English frēodōm."},
        )
        app.dependency_overrides[get_lexicon_repo] = sample_lexicon
        app.dependency_overrides[get_word_relations_port] = lambda: self.word_api
        app.dependency_overrides[get_etymology_port] = lambda: self.etymology_port

    def tearDown(self):
        app.dependency_overrides.clear()

    def test_japanese_word(self):
        """Test a Japanese word answered from the tables."""
        response = self.client.get("/lookup", params={"word": "美しい"})

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["dictionary"]["meanings"], [{
            "partOfSpeech": "adjective",
            "definitions": [{"definition": BEAUTIFUL_DEFINITION}],
        }])
        self.assertNotIn("phonetic", data["dictionary"])
        self.assertEqual(data["synonyms"], {"word": "美しい", "synonyms": ["綺麗"]})
        self.assertEqual(data["translations"]["translations"]["en"], ["beautiful"])
        self.assertNotIn("etymology", data)

    def test_english_word_with_etymology(self):
        """Test etymology=true adds the etymology field."""
        response = self.client.get("/lookup", params={"word": "freedom", "etymology": "true"})

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["dictionary"]["phonetic"], "ˈfɹiːdəm")
        self.assertEqual(data["synonyms"]["synonyms"], ["liberty"])
        self.assertNotIn("antonyms", data["synonyms"])
        self.assertEqual(data["etymology"]["etymology"], "From Old English frēodōm.")
        self.assertEqual(data["etymology"]["source"], "dbnary")
        self.assertIn("retrievedAt", data["etymology"])

    def test_etymology_flag_must_be_true(self):
        """Test values other than "true" leave etymology out."""
        response = self.client.get("/lookup", params={"word": "freedom", "etymology": "1"})

        self.assertEqual(response.status_code, 200)
        self.assertNotIn("etymology", response.json())
        self.assertEqual(self.etymology_port.fetched, [])

    def test_partial_failure_is_success(self):
        """Test rejected sources are omitted from a 200 response."""
        app.dependency_overrides[get_word_relations_port] = lambda: UnavailableWordRelationsAdapter()

        response = self.client.get("/lookup", params={"word": "freedom"})

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertNotIn("dictionary", data)
        self.assertNotIn("synonyms", data)
        self.assertIn("ja", data["translations"]["translations"])

    def test_missing_word(self):
        """Test a missing word parameter returns 400."""
        response = self.client.get("/lookup")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Word parameter is required"})

    def test_empty_word(self):
        response = self.client.get("/lookup", params={"word": ""})
        self.assertEqual(response.status_code, 400)

    @patch('api.routes.lookup.handle_lookup', new_callable=AsyncMock)
    def test_total_failure(self, mock_lookup):
        """Test all mandatory sources failing returns 500."""
        mock_lookup.side_effect = LookupFailedError("Failed to fetch data for the word")

        response = self.client.get("/lookup", params={"word": "freedom"})

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"error": "Failed to fetch data for the word"})

    @patch('api.routes.lookup.handle_lookup', new_callable=AsyncMock)
    def test_unexpected_error(self, mock_lookup):
        """Test an unexpected exception returns a generic 500."""
        mock_lookup.side_effect = RuntimeError("boom")

        response = self.client.get("/lookup", params={"word": "freedom"})

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"error": "Internal server error"})


if __name__ == "__main__":
    unittest.main()

"""Tests for lookup_service.handle_lookup: fan-out and partial-failure merging.

Scenarios:
1. Japanese word answered entirely from the offline tables
2. English word with every source answering
3. Partial failure: rejected sub-lookups are omitted, the rest returned
4. Total failure: all three mandatory sub-lookups reject
"""

import unittest
from unittest.mock import AsyncMock, patch

from adapter.fake.etymology import FakeEtymologyAdapter
from adapter.fake.lexicon import BEAUTIFUL_DEFINITION, sample_lexicon
from adapter.fake.word_relations import FakeWordRelationsAdapter, UnavailableWordRelationsAdapter
from adapter.lexicon.json_loader import SEED_WORD_SENSES
from adapter.lexicon.memory_repository import InMemoryLexiconRepository
from domain.model.errors import LookupFailedError, UpstreamError, ValidationError
from domain.model.lexicon import RelatedWord
from services.lookup_service import handle_lookup
from utils.etymology_fallback import get_fallback_etymology

CAT_ETYMOLOGY = (
    "From Old English catt, from Late Latin cattus, from Latin catta, from Afro-Asiatic origin."
)


def _freedom_api(**overrides) -> FakeWordRelationsAdapter:
    relations = {
        "definitions": {"freedom": [RelatedWord(
            word="freedom",
            definitions=("n\tthe condition of being free",),
            tags=("ipa_pron:ˈfɹiːdəm",),
        )]},
        "synonyms": {"freedom": ["liberty", "independence"]},
        "antonyms": {"freedom": ["captivity"]},
    }
    relations.update(overrides)
    return FakeWordRelationsAdapter(**relations)


class TestHandleLookup(unittest.IsolatedAsyncioTestCase):
    """Test the orchestrator against the sample tables."""

    async def test_japanese_word_from_offline_tables(self):
        """Test a Japanese lookup never calls the word API."""
        word_api = UnavailableWordRelationsAdapter()

        result = await handle_lookup(sample_lexicon(), word_api, FakeEtymologyAdapter(), "美しい")

        self.assertEqual(result.dictionary.meanings[0].part_of_speech, "adjective")
        self.assertEqual(result.dictionary.meanings[0].definitions[0].definition, BEAUTIFUL_DEFINITION)
        self.assertEqual(result.synonyms.synonyms, ["綺麗"])
        self.assertIsNone(result.synonyms.antonyms)
        self.assertEqual(result.translations.translations["en"], ["beautiful"])
        self.assertNotIn("ja", result.translations.translations)
        self.assertIsNone(result.etymology)
        self.assertEqual(word_api.calls, 0)

    async def test_english_word_all_sources(self):
        """Test every source answering for an English word."""
        etymology_port = FakeEtymologyAdapter(etymologies={"freedom": "From Old English frēodōm."})

        result = await handle_lookup(
            sample_lexicon(), _freedom_api(), etymology_port, "freedom", include_etymology=True,
        )

        self.assertEqual(result.dictionary.phonetic, "ˈfɹiːdəm")
        self.assertEqual(result.synonyms.synonyms, ["liberty", "independence"])
        self.assertEqual(result.synonyms.antonyms, ["captivity"])
        self.assertEqual(result.translations.translations["ja"], ["自由", "自主"])
        self.assertNotIn("en", result.translations.translations)
        self.assertEqual(result.etymology.etymology, "From Old English frēodōm.")

    async def test_etymology_not_fetched_unless_requested(self):
        etymology_port = FakeEtymologyAdapter()
        result = await handle_lookup(sample_lexicon(), _freedom_api(), etymology_port, "freedom")
        self.assertIsNone(result.etymology)
        self.assertEqual(etymology_port.fetched, [])

    async def test_fallback_etymology_scenario(self):
        """Test cat resolves from the fallback etymology table."""
        result = await handle_lookup(
            sample_lexicon(), _freedom_api(), FakeEtymologyAdapter(), "cat", include_etymology=True,
        )
        self.assertEqual(result.etymology.word, "cat")
        self.assertEqual(result.etymology.etymology, CAT_ETYMOLOGY)
        self.assertEqual(get_fallback_etymology("cat"), CAT_ETYMOLOGY)

    async def test_partial_failure_omits_rejected_sources(self):
        """Test a rejected dictionary is omitted."""
        word_api = _freedom_api(definitions=UpstreamError("datamuse", "HTTP 500", 500))

        result = await handle_lookup(sample_lexicon(), word_api, FakeEtymologyAdapter(), "freedom")

        self.assertIsNone(result.dictionary)
        self.assertIsNotNone(result.synonyms)
        self.assertIsNotNone(result.translations)

    async def test_api_outage_still_returns_translations(self):
        result = await handle_lookup(
            sample_lexicon(), UnavailableWordRelationsAdapter(), FakeEtymologyAdapter(), "freedom",
        )
        self.assertIsNone(result.dictionary)
        self.assertIsNone(result.synonyms)
        self.assertEqual(result.translations.translations["fr"], ["liberté", "exemption"])

    async def test_etymology_failure_is_not_surfaced(self):
        with patch(
            "services.lookup_service.etymology_service.lookup",
            new=AsyncMock(side_effect=RuntimeError("boom")),
        ):
            result = await handle_lookup(
                sample_lexicon(), _freedom_api(), FakeEtymologyAdapter(), "freedom",
                include_etymology=True,
            )
        self.assertIsNone(result.etymology)
        self.assertIsNotNone(result.dictionary)

    async def test_invalid_etymology_word_is_not_surfaced(self):
        """Etymology validation errors stay inside the optional sub-lookup."""
        result = await handle_lookup(
            sample_lexicon(), UnavailableWordRelationsAdapter(), FakeEtymologyAdapter(), "美しい",
            include_etymology=True,
        )
        self.assertIsNone(result.etymology)
        self.assertIsNotNone(result.dictionary)

    async def test_total_failure_raises(self):
        """Test all mandatory sources failing raises LookupFailedError."""
        with patch(
            "services.lookup_service.translation_service.aggregate",
            side_effect=RuntimeError("table gone"),
        ):
            with self.assertRaises(LookupFailedError) as ctx:
                await handle_lookup(
                    sample_lexicon(), UnavailableWordRelationsAdapter(), FakeEtymologyAdapter(),
                    "freedom",
                )
        self.assertEqual(str(ctx.exception), "Failed to fetch data for the word")

    async def test_empty_word_rejected(self):
        for word in ("", None):
            with self.subTest(word=word):
                with self.assertRaises(ValidationError):
                    await handle_lookup(
                        sample_lexicon(), FakeWordRelationsAdapter(), FakeEtymologyAdapter(), word,
                    )

    async def test_idempotent_against_unchanged_tables(self):
        """Test repeated lookups give equal results."""
        lexicon = sample_lexicon()
        first = await handle_lookup(lexicon, _freedom_api(), FakeEtymologyAdapter(), "自由")
        second = await handle_lookup(lexicon, _freedom_api(), FakeEtymologyAdapter(), "自由")
        self.assertEqual(first, second)



class TestSeedAndSparseTables(unittest.IsolatedAsyncioTestCase):
    """Lookups against the one-word seed table and a synset table missing the word."""

    def _seed_lexicon(self) -> InMemoryLexiconRepository:
        return InMemoryLexiconRepository(SEED_WORD_SENSES, {}, is_seed=True)

    async def test_seed_table_japanese_word(self):
        """The seed entry yields one adjective meaning and no siblings."""
        word_api = UnavailableWordRelationsAdapter()

        result = await handle_lookup(self._seed_lexicon(), word_api, FakeEtymologyAdapter(), "美しい")

        self.assertEqual(result.dictionary.word, "美しい")
        self.assertEqual(len(result.dictionary.meanings), 1)
        self.assertEqual(result.dictionary.meanings[0].part_of_speech, "adjective")
        self.assertEqual(
            result.dictionary.meanings[0].definitions[0].definition,
            SEED_WORD_SENSES["美しい"][0].definition,
        )
        self.assertEqual(result.synonyms.synonyms, [])
        self.assertEqual(result.translations.translations, {})
        self.assertEqual(word_api.calls, 0)

    async def test_word_missing_from_synset_table_with_expansion_outage(self):
        """No synsets resolve, so translations come back empty rather than failing."""
        lexicon = InMemoryLexiconRepository(
            {}, {"00217728-a": {"en": ["beautiful"], "ja": ["美しい"]}},
        )

        result = await handle_lookup(
            lexicon, UnavailableWordRelationsAdapter(), FakeEtymologyAdapter(), "freedom",
        )

        self.assertEqual(result.translations.word, "freedom")
        self.assertEqual(result.translations.translations, {})
        self.assertIsNone(result.dictionary)
        self.assertIsNone(result.synonyms)


if __name__ == "__main__":
    unittest.main()

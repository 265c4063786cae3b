"""In-memory implementation of LexiconRepository.

Holds the word-sense table and the multilingual synset table, plus two
derived indexes built once at construction:
- lemma index: (language, lemma) → synset ids in synset-table order
- synset → words index for same-synset sibling lookups
"""

from collections import defaultdict
from types import MappingProxyType
from typing import Iterator, Mapping

from domain.model.lexicon import MultilingualSynsetTable, SenseEntry, WordSenseTable

_EMPTY: Mapping[str, list[str]] = MappingProxyType({})


class InMemoryLexiconRepository:
    """Read-only lexicon backed by plain insertion-ordered dicts."""

    def __init__(
        self,
        word_senses: WordSenseTable | None = None,
        synsets: MultilingualSynsetTable | None = None,
        is_seed: bool = False,
    ):
        self._word_senses: WordSenseTable = dict(word_senses or {})
        self._synsets: MultilingualSynsetTable = dict(synsets or {})
        self._is_seed = is_seed

        self._word_order: dict[str, int] = {
            word: i for i, word in enumerate(self._word_senses)
        }
        self._words_by_synset: dict[str, list[str]] = defaultdict(list)
        for word, entries in self._word_senses.items():
            for entry in entries:
                bucket = self._words_by_synset[entry.synset_id]
                if not bucket or bucket[-1] != word:
                    bucket.append(word)

        self._lemma_index: dict[tuple[str, str], list[str]] = defaultdict(list)
        for synset_id, languages in self._synsets.items():
            for language, lemmas in languages.items():
                for lemma in dict.fromkeys(lemmas):
                    self._lemma_index[(language, lemma)].append(synset_id)

    @property
    def is_seed(self) -> bool:
        return self._is_seed

    # ── Word-sense table ─────────────────────────────────────

    def senses(self, word: str) -> list[SenseEntry]:
        return list(self._word_senses.get(word, ()))

    def iter_senses(self) -> Iterator[tuple[str, list[SenseEntry]]]:
        yield from self._word_senses.items()

    def words_sharing_synsets(self, synset_ids: list[str], exclude: str) -> list[str]:
        """Other words with at least one of the synsets, in table order."""
        found: set[str] = set()
        for synset_id in synset_ids:
            found.update(self._words_by_synset.get(synset_id, ()))
        found.discard(exclude)
        return sorted(found, key=self._word_order.__getitem__)

    # ── Multilingual synset table ────────────────────────────

    def synsets_with_lemma(self, lemma: str, language: str) -> list[str]:
        return list(self._lemma_index.get((language, lemma), ()))

    def synsets_matching_fuzzy(self, word: str, language: str) -> list[str]:
        """Synsets where word and a lemma contain one another, case-insensitively."""
        needle = word.lower()
        matches: list[str] = []
        for synset_id, languages in self._synsets.items():
            for lemma in languages.get(language, ()):
                candidate = lemma.lower()
                if needle in candidate or candidate in needle:
                    matches.append(synset_id)
                    break
        return matches

    def lemmas(self, synset_id: str) -> Mapping[str, list[str]]:
        languages = self._synsets.get(synset_id)
        if languages is None:
            return _EMPTY
        return MappingProxyType(languages)

    def stats(self) -> dict[str, int]:
        return {
            "words": len(self._word_senses),
            "senses": sum(len(entries) for entries in self._word_senses.values()),
            "synsets": len(self._synsets),
        }

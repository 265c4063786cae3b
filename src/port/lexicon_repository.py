"""Lexicon repository port: read-only access to the offline WordNet tables."""

from typing import Iterator, Mapping, Protocol

from domain.model.lexicon import SenseEntry


class LexiconRepository(Protocol):
    """Port for the two offline lexical tables.

    Implementations are built once at start-up and never mutated.
    Iteration order is the insertion order of the source tables.
    """

    @property
    def is_seed(self) -> bool:
        """True when the built-in seed table replaced a missing sense table."""
        ...

    def senses(self, word: str) -> list[SenseEntry]: ...

    def iter_senses(self) -> Iterator[tuple[str, list[SenseEntry]]]: ...

    def words_sharing_synsets(self, synset_ids: list[str], exclude: str) -> list[str]: ...

    def synsets_with_lemma(self, lemma: str, language: str) -> list[str]: ...

    def synsets_matching_fuzzy(self, word: str, language: str) -> list[str]: ...

    def lemmas(self, synset_id: str) -> Mapping[str, list[str]]: ...

    def stats(self) -> dict[str, int]: ...

"""In-memory implementation of WordRelationsPort for testing."""

from domain.model.errors import UpstreamError
from domain.model.lexicon import RelatedWord


class FakeWordRelationsAdapter:
    """Returns preconfigured relations; an Exception value is raised instead."""

    def __init__(
        self,
        definitions: dict[str, list[RelatedWord]] | Exception | None = None,
        synonyms: dict[str, list[str]] | Exception | None = None,
        antonyms: dict[str, list[str]] | Exception | None = None,
    ):
        self.definitions = definitions if definitions is not None else {}
        self.synonym_map = synonyms if synonyms is not None else {}
        self.antonym_map = antonyms if antonyms is not None else {}
        self.calls: list[tuple[str, str, int]] = []

    async def define(self, word: str, max_results: int = 1) -> list[RelatedWord]:
        self.calls.append(("define", word, max_results))
        return _pick(self.definitions, word)[:max_results]

    async def synonyms(
        self, word: str, max_results: int = 20, timeout: float | None = None,
    ) -> list[RelatedWord]:
        self.calls.append(("synonyms", word, max_results))
        return [RelatedWord(word=w) for w in _pick(self.synonym_map, word)[:max_results]]

    async def antonyms(self, word: str, max_results: int = 10) -> list[RelatedWord]:
        self.calls.append(("antonyms", word, max_results))
        return [RelatedWord(word=w) for w in _pick(self.antonym_map, word)[:max_results]]


class UnavailableWordRelationsAdapter:
    """Simulates a total outage of the word-relations API."""

    def __init__(self):
        self.calls = 0

    async def define(self, word: str, max_results: int = 1) -> list[RelatedWord]:
        self.calls += 1
        raise UpstreamError("datamuse", "request timed out")

    async def synonyms(
        self, word: str, max_results: int = 20, timeout: float | None = None,
    ) -> list[RelatedWord]:
        self.calls += 1
        raise UpstreamError("datamuse", "request timed out")

    async def antonyms(self, word: str, max_results: int = 10) -> list[RelatedWord]:
        self.calls += 1
        raise UpstreamError("datamuse", "request timed out")


def _pick(source, word: str) -> list:
    if isinstance(source, Exception):
        raise source
    return list(source.get(word, []))

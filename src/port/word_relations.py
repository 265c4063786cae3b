"""Word relations port: outbound interface for the live synonym/definition API."""

from typing import Protocol

from domain.model.lexicon import RelatedWord


class WordRelationsPort(Protocol):
    """Port for the live word-relations API.

    All methods raise UpstreamError on non-success status, timeout,
    transport failure or a payload that does not validate.
    """

    async def define(self, word: str, max_results: int = 1) -> list[RelatedWord]:
        """Spelling lookup with definitions and pronunciation metadata."""
        ...

    async def synonyms(
        self, word: str, max_results: int = 20, timeout: float | None = None,
    ) -> list[RelatedWord]: ...

    async def antonyms(self, word: str, max_results: int = 10) -> list[RelatedWord]: ...

"""Translation model port: pluggable per-language-pair model loading."""

from typing import Protocol


class TranslationModel(Protocol):
    def translate(self, text: str) -> str: ...


class TranslationModelLoader(Protocol):
    async def load(self, source: str, target: str) -> TranslationModel:
        """Load the model for one language pair. May raise on fetch failure."""
        ...

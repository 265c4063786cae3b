"""In-memory implementation of TranslationModelLoader for testing."""

from adapter.translation.phrase_table import PhraseTableModel


class FakeTranslationModelLoader:
    """Counts loads and fails for the configured target languages."""

    def __init__(self, failing_targets: set[str] | None = None):
        self.failing_targets = failing_targets or set()
        self.loaded: list[str] = []

    async def load(self, source: str, target: str) -> PhraseTableModel:
        self.loaded.append(f"{source}_{target}")
        if target in self.failing_targets:
            raise RuntimeError(f"model blob unavailable for {source}_{target}")
        return PhraseTableModel(source=source, target=target, table={"hi": {target: f"hi-{target}"}})

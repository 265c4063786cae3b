"""In-memory implementation of EtymologyPort for testing."""


class FakeEtymologyAdapter:
    def __init__(self, etymologies: dict[str, str] | None = None, error: Exception | None = None):
        self.etymologies = etymologies or {}
        self.error = error
        self.fetched: list[str] = []

    async def fetch(self, word: str, language: str = "eng") -> str | None:
        self.fetched.append(word)
        if self.error is not None:
            raise self.error
        return self.etymologies.get(word)

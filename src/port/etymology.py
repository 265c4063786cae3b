"""Etymology port: outbound interface for the remote etymology knowledge graph."""

from typing import Protocol


class EtymologyPort(Protocol):
    async def fetch(self, word: str, language: str = "eng") -> str | None:
        """Return etymology text for a normalized word, or None if the graph has none.

        Raises UpstreamError on timeout or non-success status.
        """
        ...

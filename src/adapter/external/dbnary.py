"""DBnary SPARQL adapter.

Implements EtymologyPort by querying the DBnary Wiktionary knowledge graph
for an ontolex lexical entry's dbnary:etymology literal.

Endpoint: http://kaiko.getalp.org/sparql
Answers are cached per (word, language) for 24 hours.
"""

import logging
import os
from typing import Any

import httpx
from cachetools import TTLCache

from domain.model.errors import UpstreamError

logger = logging.getLogger(__name__)

DBNARY_SPARQL_URL = os.getenv("DBNARY_SPARQL_URL", "http://kaiko.getalp.org/sparql")
API_TIMEOUT_SECONDS = 8.0
CACHE_TTL_SECONDS = 24 * 60 * 60
SERVICE_NAME = "dbnary"
USER_AGENT = "WordTree/1.0 (https://github.com/keigo1110/wordtree)"

_ISO_639_1 = {"eng": "en", "fra": "fr", "deu": "de", "jpn": "ja"}

# Shared across adapter instances; an adapter is created per request
_etymology_cache: TTLCache = TTLCache(maxsize=2048, ttl=CACHE_TTL_SECONDS)


def clear_cache() -> None:
    _etymology_cache.clear()


def build_etymology_query(word: str, language: str = "eng") -> str:
    """Build the SPARQL query for a word that already passed validation."""
    tag = _ISO_639_1.get(language, "en")
    return f"""
PREFIX dbnary: <http://kaiko.getalp.org/dbnary#>
PREFIX ontolex: <http://www.w3.org/ns/lemon/ontolex#>
PREFIX lime: <http://www.w3.org/ns/lemon/lime#>
SELECT ?ety WHERE {{
  ?l ontolex:writtenRep "{word}"@{tag} ;
     lime:language "{language}" ;
     dbnary:etymology ?ety
}} LIMIT 1
""".strip()


class DbnaryAdapter:
    """Adapter that fetches etymology text from the DBnary SPARQL endpoint."""

    def __init__(self, endpoint: str = DBNARY_SPARQL_URL, timeout: float = API_TIMEOUT_SECONDS):
        self.endpoint = endpoint
        self.timeout = timeout

    async def fetch(self, word: str, language: str = "eng") -> str | None:
        key = (word, language)
        if key in _etymology_cache:
            return _etymology_cache[key]

        query = build_etymology_query(word, language)
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.endpoint,
                    data={"query": query},
                    headers={
                        "Accept": "application/sparql-results+json",
                        "User-Agent": USER_AGENT,
                    },
                )
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as e:
            raise UpstreamError(
                SERVICE_NAME, f"HTTP {e.response.status_code}", e.response.status_code,
            ) from e
        except httpx.TimeoutException as e:
            raise UpstreamError(SERVICE_NAME, "request timed out") from e
        except httpx.RequestError as e:
            raise UpstreamError(SERVICE_NAME, f"request failed: {type(e).__name__}") from e
        except ValueError as e:
            raise UpstreamError(SERVICE_NAME, "invalid JSON payload") from e

        etymology = parse_etymology_bindings(payload)
        _etymology_cache[key] = etymology
        logger.debug(
            "DBnary lookup finished",
            extra={"word": word, "language": language, "found": etymology is not None},
        )
        return etymology


def parse_etymology_bindings(payload: Any) -> str | None:
    """Read results.bindings[0].ety.value from a SPARQL JSON result."""
    if not isinstance(payload, dict):
        raise UpstreamError(SERVICE_NAME, "expected a SPARQL results object")
    results = payload.get("results")
    if not isinstance(results, dict):
        raise UpstreamError(SERVICE_NAME, "missing results")
    bindings = results.get("bindings")
    if not isinstance(bindings, list):
        raise UpstreamError(SERVICE_NAME, "missing bindings")
    if not bindings:
        return None
    first = bindings[0]
    ety = first.get("ety") if isinstance(first, dict) else None
    value = ety.get("value") if isinstance(ety, dict) else None
    return value if isinstance(value, str) and value else None

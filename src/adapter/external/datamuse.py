"""Datamuse API adapter.

Implements WordRelationsPort against the Datamuse word-finding API
(WordNet-backed synonyms, antonyms and definitions).

API Documentation: https://www.datamuse.com/api/
Query parameters used: sp (spelling), rel_syn, rel_ant, md, ipa, max
"""

import logging
import os
from typing import Any

import httpx
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from domain.model.errors import UpstreamError
from domain.model.lexicon import RelatedWord

logger = logging.getLogger(__name__)

DATAMUSE_API_BASE_URL = os.getenv("DATAMUSE_API_BASE_URL", "https://api.datamuse.com/words")
API_TIMEOUT_SECONDS = 5.0
SERVICE_NAME = "datamuse"


class DatamuseAdapter:
    """Adapter that fetches word relations from the Datamuse API."""

    def __init__(
        self,
        base_url: str = DATAMUSE_API_BASE_URL,
        timeout: float = API_TIMEOUT_SECONDS,
    ):
        self.base_url = base_url
        self.timeout = timeout

    async def define(self, word: str, max_results: int = 1) -> list[RelatedWord]:
        # md=dr adds definitions and pronunciation, ipa=1 switches it to IPA
        return await self._query(
            {"sp": word, "md": "dr", "ipa": "1", "max": str(max_results)}
        )

    async def synonyms(
        self, word: str, max_results: int = 20, timeout: float | None = None,
    ) -> list[RelatedWord]:
        return await self._query({"rel_syn": word, "max": str(max_results)}, timeout=timeout)

    async def antonyms(self, word: str, max_results: int = 10) -> list[RelatedWord]:
        return await self._query({"rel_ant": word, "max": str(max_results)})

    async def _query(
        self, params: dict[str, str], timeout: float | None = None,
    ) -> list[RelatedWord]:
        """Run one GET and validate the payload, raising UpstreamError on any failure."""
        try:
            async with httpx.AsyncClient(timeout=timeout or self.timeout) as client:
                response = await _get_with_retry(client, self.base_url, params)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Datamuse API HTTP error",
                extra={"params": params, "status_code": e.response.status_code},
            )
            raise UpstreamError(
                SERVICE_NAME, f"HTTP {e.response.status_code}", e.response.status_code,
            ) from e
        except httpx.TimeoutException as e:
            logger.warning("Datamuse API timeout", extra={"params": params})
            raise UpstreamError(SERVICE_NAME, "request timed out") from e
        except httpx.RequestError as e:
            logger.warning(
                "Datamuse API request error",
                extra={"params": params, "error_type": type(e).__name__},
            )
            raise UpstreamError(SERVICE_NAME, f"request failed: {type(e).__name__}") from e
        except ValueError as e:
            logger.warning("Datamuse API returned invalid JSON", extra={"params": params})
            raise UpstreamError(SERVICE_NAME, "invalid JSON payload") from e

        words = parse_related_words(payload)
        logger.debug(
            "Datamuse API lookup successful",
            extra={"params": params, "result_count": len(words)},
        )
        return words


# ── HTTP helpers ─────────────────────────────────────────────


@retry(
    retry=retry_if_exception_type(httpx.ConnectError),
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=0.5, min=0.5, max=2),
    reraise=True,
)
async def _get_with_retry(
    client: httpx.AsyncClient, url: str, params: dict[str, str],
) -> httpx.Response:
    """GET with automatic retry on connection failures. Timeouts are not retried."""
    return await client.get(url, params=params)


# ── Payload validation ───────────────────────────────────────


def parse_related_words(payload: Any) -> list[RelatedWord]:
    """Validate a Datamuse payload into RelatedWord records.

    Fails closed: anything other than a list of objects with a string
    "word" raises UpstreamError.
    """
    if not isinstance(payload, list):
        raise UpstreamError(SERVICE_NAME, f"expected a list, got {type(payload).__name__}")

    words: list[RelatedWord] = []
    for item in payload:
        if not isinstance(item, dict) or not isinstance(item.get("word"), str):
            raise UpstreamError(SERVICE_NAME, "record without a word")
        score = item.get("score", 0)
        words.append(
            RelatedWord(
                word=item["word"],
                score=score if isinstance(score, int) else 0,
                definitions=_string_tuple(item.get("defs")),
                tags=_string_tuple(item.get("tags")),
            )
        )
    return words


def _string_tuple(value: Any) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(v for v in value if isinstance(v, str))

"""Etymology lookup service: English words only, fallback table first."""

import logging
import re

from domain.model.errors import UpstreamError, ValidationError
from domain.model.lookup import EtymologyResult
from port.etymology import EtymologyPort
from utils.etymology_fallback import get_fallback_etymology
from utils.timestamps import utc_timestamp

logger = logging.getLogger(__name__)

_STRIP = re.compile(r"[^A-Za-z0-9_'-]")
_VALID = re.compile(r"^[a-zA-Z0-9'-]+$")


def normalize_word(word: str) -> str:
    """Lowercase and drop everything but ASCII word characters, hyphen and apostrophe."""
    return _STRIP.sub("", word.lower())


async def lookup(etymology_port: EtymologyPort, word: str) -> EtymologyResult:
    """Return etymology for `word`.

    Raises:
        ValidationError: the normalized word is empty or has invalid characters.

    Remote failures resolve to a result without `etymology`.
    """
    normalized = normalize_word(word)
    if not _VALID.match(normalized):
        raise ValidationError(f"Invalid word format: {word!r}")

    fallback = get_fallback_etymology(normalized)
    if fallback:
        logger.debug("Using fallback etymology", extra={"word": normalized})
        return EtymologyResult(word=normalized, etymology=fallback, retrieved_at=utc_timestamp())

    try:
        etymology = await etymology_port.fetch(normalized, "eng")
    except UpstreamError as e:
        logger.warning(
            "Etymology fetch failed",
            extra={"word": normalized, "error": str(e)},
        )
        etymology = None

    if etymology is None:
        logger.info("No etymology found", extra={"word": normalized})
    return EtymologyResult(word=normalized, etymology=etymology, retrieved_at=utc_timestamp())

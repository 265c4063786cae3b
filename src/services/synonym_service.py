"""Synonym/antonym lookup service."""

import asyncio
import logging

from domain.model.language import JAPANESE, detect_language
from domain.model.lookup import MAX_ANTONYMS, MAX_SYNONYMS, SynonymResult
from port.lexicon_repository import LexiconRepository
from port.word_relations import WordRelationsPort

logger = logging.getLogger(__name__)

SYNONYM_FETCH_MAX = 20
ANTONYM_FETCH_MAX = 10


async def lookup(
    lexicon: LexiconRepository,
    word_api: WordRelationsPort,
    word: str,
) -> SynonymResult:
    if detect_language(word) is JAPANESE:
        return lookup_japanese(lexicon, word)
    return await lookup_english(word_api, word)


def lookup_japanese(lexicon: LexiconRepository, word: str) -> SynonymResult:
    """Words sharing a synset with `word` in the sense table. No antonyms."""
    try:
        synset_ids = list(dict.fromkeys(entry.synset_id for entry in lexicon.senses(word)))
        if not synset_ids:
            return SynonymResult(word=word, synonyms=[])
        siblings = lexicon.words_sharing_synsets(synset_ids, exclude=word)
        return SynonymResult(word=word, synonyms=siblings[:MAX_SYNONYMS])
    except Exception as e:
        logger.warning("Sense table synonym lookup failed", extra={"word": word, "error": str(e)})
        return SynonymResult(word=word, synonyms=[])


async def lookup_english(word_api: WordRelationsPort, word: str) -> SynonymResult:
    """Synonyms and antonyms from the live API.

    The antonym call is best-effort; a synonym failure propagates.
    """
    synonym_outcome, antonym_outcome = await asyncio.gather(
        word_api.synonyms(word, max_results=SYNONYM_FETCH_MAX),
        word_api.antonyms(word, max_results=ANTONYM_FETCH_MAX),
        return_exceptions=True,
    )
    if isinstance(synonym_outcome, BaseException):
        raise synonym_outcome

    antonyms: list[str] = []
    if isinstance(antonym_outcome, BaseException):
        logger.warning(
            "Antonym fetch failed, returning synonyms only",
            extra={"word": word, "error": str(antonym_outcome)},
        )
    else:
        antonyms = [item.word for item in antonym_outcome][:MAX_ANTONYMS]

    return SynonymResult(
        word=word,
        synonyms=[item.word for item in synonym_outcome][:MAX_SYNONYMS],
        antonyms=antonyms or None,
    )

"""Lookup orchestrator: fans one word out to every source and merges the answers.

Per request:
    received → resolving-synsets → fanned-out → merging → success | total-failure

Dictionary, synonyms and translations are mandatory sub-lookups; each is
tracked as fulfilled or rejected on its own and only fulfilled ones appear in
the result. Etymology is optional and its failure is never surfaced.
Only when all three mandatory sub-lookups reject does the request fail.
"""

import asyncio
import logging

from domain.model.errors import LookupFailedError, ValidationError
from domain.model.lookup import LookupResult
from port.etymology import EtymologyPort
from port.lexicon_repository import LexiconRepository
from port.word_relations import WordRelationsPort
from services import (
    dictionary_service,
    etymology_service,
    synonym_service,
    synset_resolver,
    translation_service,
)

logger = logging.getLogger(__name__)


async def handle_lookup(
    lexicon: LexiconRepository,
    word_api: WordRelationsPort,
    etymology_port: EtymologyPort,
    word: str | None,
    include_etymology: bool = False,
) -> LookupResult:
    """Run every sub-lookup for `word` concurrently and assemble the result.

    Raises:
        ValidationError: `word` is empty or missing.
        LookupFailedError: dictionary, synonyms and translations all failed.
    """
    if not word:
        raise ValidationError("Word parameter is required")

    logger.info("Lookup started", extra={"word": word, "etymology": include_etymology})

    synset_ids = await synset_resolver.resolve(lexicon, word_api, word)

    tasks = [
        dictionary_service.lookup(lexicon, word_api, word),
        synonym_service.lookup(lexicon, word_api, word),
        _aggregate_translations(lexicon, word, synset_ids),
    ]
    if include_etymology:
        tasks.append(etymology_service.lookup(etymology_port, word))

    outcomes = await asyncio.gather(*tasks, return_exceptions=True)
    dictionary, synonyms, translations = outcomes[:3]

    result = LookupResult()
    if _fulfilled("dictionary", word, dictionary):
        result.dictionary = dictionary
    if _fulfilled("synonyms", word, synonyms):
        result.synonyms = synonyms
    if _fulfilled("translations", word, translations):
        result.translations = translations

    if include_etymology:
        etymology = outcomes[3]
        if isinstance(etymology, BaseException):
            logger.warning(
                "Etymology lookup failed, omitting it",
                extra={"word": word, "error": str(etymology)},
            )
        else:
            result.etymology = etymology

    if result.dictionary is None and result.synonyms is None and result.translations is None:
        logger.error("All data fetching failed", extra={"word": word})
        raise LookupFailedError("Failed to fetch data for the word")

    logger.info("Lookup finished", extra={
        "word": word,
        "synset_count": len(synset_ids),
        "dictionary": result.dictionary is not None,
        "synonyms": result.synonyms is not None,
        "translations": result.translations is not None,
        "etymology": result.etymology is not None,
    })
    return result


async def _aggregate_translations(lexicon, word, synset_ids):
    return translation_service.aggregate(lexicon, word, synset_ids)


def _fulfilled(name: str, word: str, outcome) -> bool:
    if isinstance(outcome, BaseException):
        logger.warning(
            f"{name} lookup rejected",
            extra={"word": word, "error_type": type(outcome).__name__, "error": str(outcome)},
        )
        return False
    return True

"""Synset resolver: maps a word to the WordNet synsets it participates in.

Japanese words come straight from the sense table. English words go through
three tiers, stopping at the first that finds anything:
    1. exact English lemma match in the multilingual table
    2. case-insensitive substring match either way
    3. live synonyms (max 5, 5s timeout), each matched exactly
"""

import logging

from domain.model.errors import DomainError
from domain.model.language import ENGLISH, JAPANESE, detect_language
from port.lexicon_repository import LexiconRepository
from port.word_relations import WordRelationsPort

logger = logging.getLogger(__name__)

EXPANSION_MAX_RESULTS = 5
EXPANSION_TIMEOUT_SECONDS = 5.0


async def resolve(
    lexicon: LexiconRepository,
    word_api: WordRelationsPort,
    word: str,
) -> list[str]:
    """Return ordered, de-duplicated synset ids for `word`. Never raises."""
    if not word:
        return []

    synset_ids: list[str] = []
    try:
        if detect_language(word) is JAPANESE:
            synset_ids = _japanese_synsets(lexicon, word)
        else:
            synset_ids = await _english_synsets(lexicon, word_api, word)
    except Exception as e:
        logger.error(
            "Synset resolution failed",
            extra={"word": word, "error": str(e)},
            exc_info=True,
        )

    logger.debug("Synsets resolved", extra={"word": word, "synset_count": len(synset_ids)})
    return synset_ids


def _japanese_synsets(lexicon: LexiconRepository, word: str) -> list[str]:
    return _unique(entry.synset_id for entry in lexicon.senses(word))


async def _english_synsets(
    lexicon: LexiconRepository,
    word_api: WordRelationsPort,
    word: str,
) -> list[str]:
    exact = lexicon.synsets_with_lemma(word, ENGLISH.code)
    if exact:
        return _unique(exact)

    fuzzy = lexicon.synsets_matching_fuzzy(word, ENGLISH.code)
    if fuzzy:
        return _unique(fuzzy)

    return await _expand_via_synonyms(lexicon, word_api, word)


async def _expand_via_synonyms(
    lexicon: LexiconRepository,
    word_api: WordRelationsPort,
    word: str,
) -> list[str]:
    try:
        related = await word_api.synonyms(
            word, max_results=EXPANSION_MAX_RESULTS, timeout=EXPANSION_TIMEOUT_SECONDS,
        )
    except DomainError as e:
        logger.warning(
            "Synonym expansion unavailable, continuing without it",
            extra={"word": word, "error": str(e)},
        )
        return []

    found: list[str] = []
    for item in related:
        found.extend(lexicon.synsets_with_lemma(item.word, ENGLISH.code))
    return _unique(found)


def _unique(ids) -> list[str]:
    return list(dict.fromkeys(ids))

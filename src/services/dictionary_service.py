"""Dictionary lookup service: part-of-speech grouped definitions for a word.

Japanese words are answered from the offline sense table (exact match,
then first substring match in table order). English words go to the live
word-relations API; failures there propagate so the orchestrator can record
the dictionary sub-lookup as rejected.
"""

import logging

from domain.model.errors import NotFoundError
from domain.model.language import JAPANESE, detect_language
from domain.model.lexicon import SenseEntry
from domain.model.lookup import Definition, DictionaryResult, Meaning
from port.lexicon_repository import LexiconRepository
from port.word_relations import WordRelationsPort

logger = logging.getLogger(__name__)

# Default messages
NO_DEFINITION = "No definition available"
UNKNOWN_PART_OF_SPEECH = "unknown"
NOT_REGISTERED_DEFINITION = "This word is not registered in the dictionary"
ERROR_PART_OF_SPEECH = "error"
ERROR_DEFINITION = "An error occurred during dictionary search"


async def lookup(
    lexicon: LexiconRepository,
    word_api: WordRelationsPort,
    word: str,
) -> DictionaryResult:
    """Look up definitions for `word`.

    Raises:
        NotFoundError: English word without definitions.
        UpstreamError: English lookup failed upstream.
    """
    if detect_language(word) is JAPANESE:
        return lookup_japanese(lexicon, word)
    return await lookup_english(word_api, word)


# ------------------------------------------------------------------
# Offline sense table
# ------------------------------------------------------------------

def lookup_japanese(lexicon: LexiconRepository, word: str) -> DictionaryResult:
    """Never raises: misses and internal errors become a synthetic meaning."""
    try:
        entries = lexicon.senses(word)
        if entries:
            logger.debug("Sense table exact match", extra={"word": word})
            return DictionaryResult(word=word, meanings=_group_senses(entries))

        for key, candidates in lexicon.iter_senses():
            if word in key or key in word:
                logger.debug("Sense table partial match", extra={"word": word, "key": key})
                return DictionaryResult(word=word, meanings=_group_senses(candidates))

        logger.info("Word not in sense table", extra={"word": word})
        return _synthetic(word, UNKNOWN_PART_OF_SPEECH, NOT_REGISTERED_DEFINITION)
    except Exception as e:
        logger.error(
            "Sense table lookup failed",
            extra={"word": word, "error": str(e)},
            exc_info=True,
        )
        return _synthetic(word, ERROR_PART_OF_SPEECH, ERROR_DEFINITION)


def _group_senses(entries: list[SenseEntry]) -> list[Meaning]:
    grouped: dict[str, list[Definition]] = {}
    for entry in entries:
        grouped.setdefault(entry.part_of_speech, []).append(
            Definition(definition=entry.definition or NO_DEFINITION)
        )
    return [Meaning(part_of_speech=pos, definitions=defs) for pos, defs in grouped.items()]


def _synthetic(word: str, part_of_speech: str, definition: str) -> DictionaryResult:
    return DictionaryResult(
        word=word,
        meanings=[Meaning(part_of_speech=part_of_speech, definitions=[Definition(definition)])],
    )


# ------------------------------------------------------------------
# Live API
# ------------------------------------------------------------------

async def lookup_english(word_api: WordRelationsPort, word: str) -> DictionaryResult:
    results = await word_api.define(word, max_results=1)
    if not results or not results[0].definitions:
        raise NotFoundError(f"No dictionary data found for {word!r}")

    entry = results[0]
    meanings = parse_definitions(entry.definitions)
    logger.info(
        "Definitions fetched",
        extra={"word": word, "meaning_count": len(meanings)},
    )
    return DictionaryResult(word=entry.word, meanings=meanings, phonetic=entry.phonetic)


def parse_definitions(raw_definitions: tuple[str, ...] | list[str]) -> list[Meaning]:
    """Group "pos\\tdefinition" strings by part of speech, first-seen order."""
    grouped: dict[str, list[Definition]] = {}
    for raw in raw_definitions:
        part_of_speech, _, definition = raw.partition("\t")
        if part_of_speech and definition:
            grouped.setdefault(part_of_speech, []).append(Definition(definition=definition))
    return [Meaning(part_of_speech=pos, definitions=defs) for pos, defs in grouped.items()]

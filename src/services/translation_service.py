"""Translation aggregator: cross-lingual lemmas for resolved synsets."""

import logging

from domain.model.language import detect_language
from domain.model.lookup import MAX_TRANSLATIONS_PER_LANGUAGE, TranslationResult
from port.lexicon_repository import LexiconRepository

logger = logging.getLogger(__name__)


def aggregate(
    lexicon: LexiconRepository,
    word: str,
    synset_ids: list[str],
) -> TranslationResult:
    """Union lemmas per language across `synset_ids`, minus the input language.

    Each language keeps at most MAX_TRANSLATIONS_PER_LANGUAGE lemmas in
    first-seen order. Never raises: errors yield an empty mapping.
    """
    try:
        merged: dict[str, dict[str, None]] = {}
        for synset_id in synset_ids:
            for language, lemmas in lexicon.lemmas(synset_id).items():
                bucket = merged.setdefault(language, {})
                for lemma in lemmas:
                    bucket.setdefault(lemma, None)

        merged.pop(detect_language(word).code, None)

        translations = {
            language: list(lemmas)[:MAX_TRANSLATIONS_PER_LANGUAGE]
            for language, lemmas in merged.items()
        }
    except Exception as e:
        logger.error(
            "Translation aggregation failed",
            extra={"word": word, "error": str(e)},
            exc_info=True,
        )
        return TranslationResult(word=word, translations={})

    if translations:
        logger.info(
            "Translations aggregated",
            extra={"word": word, "language_count": len(translations)},
        )
    else:
        logger.info(
            "No translations found",
            extra={"word": word, "synset_count": len(synset_ids)},
        )
    return TranslationResult(word=word, translations=translations)

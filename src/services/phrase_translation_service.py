"""Phrase translation service: translate a short query into every supported language.

Models are loaded per (source, target) pair through a TranslationModelLoader
and kept in a bounded LRU ModelCache. A pair that fails to load or translate
is reported in `errors` without failing the others.
"""

import logging

from domain.model.errors import UnsupportedLanguageError, ValidationError
from domain.model.language import TRANSLATION_LANGUAGES, detect_language, is_translation_language
from domain.model.lookup import PhraseTranslation
from port.translation_model import TranslationModelLoader
from utils.model_cache import ModelCache
from utils.timestamps import utc_timestamp

logger = logging.getLogger(__name__)


async def translate_phrase(
    loader: TranslationModelLoader,
    cache: ModelCache,
    query: str | None,
    source: str | None = None,
) -> PhraseTranslation:
    """Translate `query` from `source` (detected when omitted) into all other languages.

    Raises:
        ValidationError: `query` is empty or missing.
        UnsupportedLanguageError: `source` is not a supported language code.
    """
    if not query or not isinstance(query, str):
        raise ValidationError('Query parameter "q" is required and must be a string')

    source_language = source or detect_language(query).code
    if not is_translation_language(source_language):
        raise UnsupportedLanguageError(source_language)

    translations: dict[str, str] = {}
    errors: list[str] = []
    for target in TRANSLATION_LANGUAGES:
        if target == source_language:
            continue
        pair = f"{source_language}->{target}"
        try:
            model = await cache.get_or_load(source_language, target, loader.load)
            translations[target] = model.translate(query)
        except Exception as e:
            logger.error(
                "Translation failed for language pair",
                extra={"pair": pair, "error": str(e)},
            )
            errors.append(pair)
            translations[target] = f"[Error: {pair}]"

    logger.info("Phrase translated", extra={
        "source": source_language,
        "target_count": len(translations),
        "error_count": len(errors),
    })
    return PhraseTranslation(
        query=query,
        source=source_language,
        translations=translations,
        errors=errors or None,
        timestamp=utc_timestamp(),
    )

"""Language Value Object.

Encapsulates the language metadata used for routing lookups:
language codes, the script ranges that identify Japanese input,
and the language sets known to the phrase translator and table builder.
"""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class Language:
    """Immutable value object representing an input language."""

    name: str
    code: str
    has_local_dictionary: bool = False


JAPANESE = Language(name="Japanese", code="ja", has_local_dictionary=True)
ENGLISH = Language(name="English", code="en")

# Hiragana, katakana and CJK unified ideographs
_JAPANESE_SCRIPT = re.compile(r"[\u3040-\u309F\u30A0-\u30FF\u4E00-\u9FAF]")


def detect_language(token: str) -> Language:
    """Classify a token as Japanese or English by script.

    Any hiragana, katakana or kanji character makes the token Japanese;
    everything else (Latin, digits, other scripts, empty) is English.
    """
    if _JAPANESE_SCRIPT.search(token or ""):
        return JAPANESE
    return ENGLISH


# ── Phrase translator languages ───────────────────────────────

TRANSLATION_LANGUAGES: tuple[str, ...] = (
    "en", "ja", "de", "fr", "es", "it", "pt", "ru", "zh",
    "ko", "ar", "hi", "tr", "nl", "el", "sv", "pl",
)


def is_translation_language(code: str) -> bool:
    return code in TRANSLATION_LANGUAGES


# ── Open Multilingual Wordnet languages ───────────────────────

OMW_LANGUAGE_NAMES: dict[str, str] = {
    "omw-en": "English",
    "omw-ja": "日本語",
    "omw-fr": "Français",
    "omw-es": "Español",
    "omw-de": "Deutsch",
    "omw-it": "Italiano",
    "omw-pt": "Português",
    "omw-ru": "Русский",
    "omw-cmn": "中文",
    "omw-ko": "한국어",
    "omw-nl": "Nederlands",
    "omw-sv": "Svenska",
    "omw-da": "Dansk",
    "omw-no": "Norsk",
    "omw-fi": "Suomi",
    "omw-pl": "Polski",
    "omw-cs": "Čeština",
    "omw-sk": "Slovenčina",
    "omw-hu": "Magyar",
    "omw-ro": "Română",
    "omw-bg": "Български",
    "omw-hr": "Hrvatski",
    "omw-sr": "Српски",
    "omw-sl": "Slovenščina",
    "omw-et": "Eesti",
    "omw-lv": "Latviešu",
    "omw-lt": "Lietuvių",
    "omw-el": "Ελληνικά",
    "omw-tr": "Türkçe",
    "omw-ar": "العربية",
}

OMW_PREFIX = "omw-"


def omw_short_code(lexicon_id: str) -> str:
    """Strip the OMW namespace prefix (e.g., "omw-cmn" → "cmn")."""
    if lexicon_id.startswith(OMW_PREFIX):
        return lexicon_id[len(OMW_PREFIX):]
    return lexicon_id


def omw_display_name(lexicon_id: str) -> str:
    return OMW_LANGUAGE_NAMES.get(lexicon_id, lexicon_id)

"""Lookup result value objects.

Each sub-lookup returns one of these; the orchestrator assembles them
into a LookupResult where an absent field means "this source did not answer".
"""

from dataclasses import dataclass, field
from typing import Literal

# Caps applied to every response
MAX_SYNONYMS = 15
MAX_ANTONYMS = 10
MAX_TRANSLATIONS_PER_LANGUAGE = 5


@dataclass(frozen=True)
class Definition:
    definition: str
    example: str | None = None


@dataclass(frozen=True)
class Meaning:
    part_of_speech: str
    definitions: list[Definition] = field(default_factory=list)


@dataclass(frozen=True)
class DictionaryResult:
    word: str
    meanings: list[Meaning] = field(default_factory=list)
    phonetic: str | None = None


@dataclass(frozen=True)
class SynonymResult:
    word: str
    synonyms: list[str] = field(default_factory=list)
    antonyms: list[str] | None = None


@dataclass(frozen=True)
class TranslationResult:
    word: str
    translations: dict[str, list[str]] = field(default_factory=dict)


@dataclass(frozen=True)
class EtymologyResult:
    word: str
    retrieved_at: str
    etymology: str | None = None
    source: Literal["dbnary"] = "dbnary"


@dataclass
class LookupResult:
    """Assembled response for one /lookup request."""
    dictionary: DictionaryResult | None = None
    synonyms: SynonymResult | None = None
    translations: TranslationResult | None = None
    etymology: EtymologyResult | None = None


@dataclass(frozen=True)
class PhraseTranslation:
    """Result of the toy phrase translator."""
    query: str
    source: str
    translations: dict[str, str]
    timestamp: str
    errors: list[str] | None = None

"""Load the offline WordNet tables from the JSON files written by the builder.

Connection-style caching: the repository is loaded once per process and
shared by every request. A missing or corrupt sense table falls back to a
one-word seed table; a missing or corrupt synset table falls back to an empty one.
"""

import json
import logging
import os
from pathlib import Path

from adapter.lexicon.memory_repository import InMemoryLexiconRepository
from domain.model.lexicon import MultilingualSynsetTable, SenseEntry, WordSenseTable

logger = logging.getLogger(__name__)

WORD_SENSE_TABLE_PATH = os.getenv("WORD_SENSE_TABLE_PATH", "data/japanese-wordnet.json")
MULTILINGUAL_SYNSET_TABLE_PATH = os.getenv(
    "MULTILINGUAL_SYNSET_TABLE_PATH", "data/multilingual-wordnet.json"
)

SEED_WORD_SENSES: WordSenseTable = {
    "美しい": [
        SenseEntry.create(
            synset_id="00217728-a",
            word="美しい",
            confidence="hand",
            definition="感覚を活気づけ、知的情緒的賞賛を喚起する",
        )
    ]
}

_repository_cache: InMemoryLexiconRepository | None = None


def reset_repository() -> None:
    global _repository_cache
    _repository_cache = None


def get_lexicon_repository() -> InMemoryLexiconRepository:
    """Return the process-wide lexicon, loading it on first use."""
    global _repository_cache
    if _repository_cache is None:
        _repository_cache = load_lexicon_repository(
            Path(WORD_SENSE_TABLE_PATH), Path(MULTILINGUAL_SYNSET_TABLE_PATH)
        )
    return _repository_cache


def load_lexicon_repository(
    word_sense_path: Path, synset_path: Path,
) -> InMemoryLexiconRepository:
    word_senses = load_word_sense_table(word_sense_path)
    is_seed = word_senses is None
    if is_seed:
        word_senses = dict(SEED_WORD_SENSES)

    synsets = load_synset_table(synset_path)
    if synsets is None:
        synsets = {}

    repository = InMemoryLexiconRepository(word_senses, synsets, is_seed=is_seed)
    logger.info("Lexicon loaded", extra={"is_seed": is_seed, **repository.stats()})
    return repository


def load_word_sense_table(path: Path) -> WordSenseTable | None:
    """Read word → [SenseEntry]. Returns None when the file is missing or unreadable."""
    raw = _read_json(path, "word-sense table")
    if raw is None:
        return None
    try:
        table = {
            word: [SenseEntry.from_dict(item) for item in entries]
            for word, entries in raw.items()
        }
    except (AttributeError, KeyError, TypeError) as e:
        logger.warning(
            "Word-sense table has unexpected shape",
            extra={"path": str(path), "error": str(e)},
        )
        return None
    if not all(
        isinstance(entry.synset_id, str) and isinstance(entry.word, str)
        for entries in table.values()
        for entry in entries
    ):
        logger.warning("Word-sense table has non-string ids", extra={"path": str(path)})
        return None
    return table


def load_synset_table(path: Path) -> MultilingualSynsetTable | None:
    """Read synsetId → {lang → [lemma]}. Returns None when missing or unreadable."""
    raw = _read_json(path, "multilingual synset table")
    if raw is None:
        return None
    if not all(_is_language_map(languages) for languages in raw.values()):
        logger.warning("Multilingual synset table has unexpected shape", extra={"path": str(path)})
        return None
    return raw


def _is_language_map(languages) -> bool:
    return isinstance(languages, dict) and all(
        isinstance(lemmas, list) and all(isinstance(lemma, str) for lemma in lemmas)
        for lemmas in languages.values()
    )


def _read_json(path: Path, label: str) -> dict | None:
    if not path.exists():
        logger.warning(
            f"{label} not found; run the table builder to generate it",
            extra={"path": str(path)},
        )
        return None
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load {label}", extra={"path": str(path), "error": str(e)})
        return None
    if not isinstance(data, dict):
        logger.warning(f"{label} is not a JSON object", extra={"path": str(path)})
        return None
    return data

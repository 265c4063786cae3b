"""Offline builder for the two WordNet lookup tables.

Japanese WordNet (wnjpn-ok.tab + wnjpn-def.tab) → word-sense table:
    {word: [{synsetId, word, confidence, partOfSpeech, definition?}, ...]}

Open Multilingual Wordnet 1.4 (one WN-LMF XML per language) → synset table:
    {synsetId: {lang: [lemma, ...]}}

Both builders abort before writing anything when their inputs are missing.
"""

import json
import logging
import re
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

from lxml import etree

from domain.model.errors import BuildAbortedError
from domain.model.language import OMW_LANGUAGE_NAMES, omw_display_name, omw_short_code
from domain.model.lexicon import MultilingualSynsetTable, SenseEntry, WordSenseTable

logger = logging.getLogger(__name__)

JAPANESE_WORDNET_DOWNLOAD = (
    "curl -L https://github.com/bond-lab/wnja/releases/download/v1.1/wnjpn-ok.tab.gz "
    "-o data/wnjpn-ok.tab.gz && gunzip data/wnjpn-ok.tab.gz"
)
OMW_DOWNLOAD = (
    'curl -L "https://github.com/omwn/omw-data/releases/download/v1.4/omw-1.4.tar.xz" '
    "-o data/omw-1.4.tar.xz && tar -xf data/omw-1.4.tar.xz -C data/"
)
TARGET_LANGUAGES: tuple[str, ...] = tuple(OMW_LANGUAGE_NAMES)
OUTPUT_SIZE_WARNING_BYTES = 50 * 1024 * 1024

_SYNSET_PREFIX = re.compile(r"^omw-[a-z]+-")


@dataclass
class SenseTableStats:
    total_words: int = 0
    total_entries: int = 0
    by_part_of_speech: dict[str, int] = field(default_factory=dict)


@dataclass
class SynsetTableStats:
    total_synsets: int = 0
    languages: list[str] = field(default_factory=list)
    lemma_counts: dict[str, int] = field(default_factory=dict)
    failed_languages: list[str] = field(default_factory=list)
    file_size_bytes: int = 0


# ── Tab-separated input ──────────────────────────────────────


def read_tab_rows(path: Path) -> Iterator[list[str]]:
    """Yield tab-split rows, skipping blank lines."""
    with open(path, encoding="utf-8") as f:
        for line in f:
            if line.strip():
                yield line.rstrip("\r\n").split("\t")


def load_definitions(path: Path) -> dict[str, str]:
    """synsetId → Japanese definition. Later rows overwrite earlier ones."""
    definitions: dict[str, str] = {}
    for row in read_tab_rows(path):
        if len(row) < 4:
            continue
        synset_id, japanese_def = row[0], row[3].strip()
        if synset_id and japanese_def:
            definitions[synset_id] = japanese_def
    return definitions


def build_word_sense_table(
    rows: Iterator[list[str]] | list[list[str]],
    definitions: dict[str, str],
) -> WordSenseTable:
    """Group sense rows by word and keep only high-confidence entries.

    Words whose entries are all low-confidence are dropped entirely.
    """
    grouped: dict[str, list[SenseEntry]] = {}
    for row in rows:
        if len(row) < 3:
            continue
        synset_id, word, confidence = row[0], row[1], row[2]
        grouped.setdefault(word, []).append(
            SenseEntry.create(
                synset_id=synset_id,
                word=word,
                confidence=confidence,
                definition=definitions.get(synset_id),
            )
        )

    table: WordSenseTable = {}
    for word, entries in grouped.items():
        kept = [entry for entry in entries if entry.is_high_confidence]
        if kept:
            table[word] = kept
    return table


def sense_table_stats(table: WordSenseTable) -> SenseTableStats:
    by_pos = Counter(entry.part_of_speech for entries in table.values() for entry in entries)
    return SenseTableStats(
        total_words=len(table),
        total_entries=sum(by_pos.values()),
        by_part_of_speech=dict(by_pos),
    )


def build_japanese_wordnet(
    word_path: Path,
    definitions_path: Path,
    output_path: Path,
) -> SenseTableStats:
    """Build and write the word-sense table.

    Raises:
        BuildAbortedError: `word_path` does not exist.
    """
    if not word_path.exists():
        logger.error(
            "Japanese WordNet data file not found. Download it with: " + JAPANESE_WORDNET_DOWNLOAD,
            extra={"path": str(word_path)},
        )
        raise BuildAbortedError(f"Missing input file: {word_path}")

    definitions: dict[str, str] = {}
    if definitions_path.exists():
        definitions = load_definitions(definitions_path)
    else:
        logger.warning(
            "Definition file not found, building without definitions",
            extra={"path": str(definitions_path)},
        )

    table = build_word_sense_table(read_tab_rows(word_path), definitions)
    write_table(
        {word: [entry.to_dict() for entry in entries] for word, entries in table.items()},
        output_path,
    )

    stats = sense_table_stats(table)
    logger.info("Word-sense table written", extra={
        "path": str(output_path),
        "total_words": stats.total_words,
        "total_entries": stats.total_entries,
        "by_part_of_speech": stats.by_part_of_speech,
    })
    return stats


# ── WN-LMF XML input ─────────────────────────────────────────


def normalize_synset_id(synset: str) -> str:
    """"omw-en-08641944-n" → "08641944-n"."""
    return _SYNSET_PREFIX.sub("", synset)


def extract_lemmas_from_xml(source) -> dict[str, list[str]]:
    """Map synsetId → unique lemmas from one WN-LMF document.

    Only LexicalEntry elements with both a written form and a sense count;
    the first Sense decides the synset. `source` is a path or file object.
    """
    lemmas: dict[str, list[str]] = {}
    for _, entry in etree.iterparse(source, events=("end",), tag="LexicalEntry"):
        lemma = entry.find("Lemma")
        sense = entry.find("Sense")
        written_form = lemma.get("writtenForm") if lemma is not None else None
        synset = sense.get("synset") if sense is not None else None

        if written_form and synset:
            bucket = lemmas.setdefault(normalize_synset_id(synset), [])
            if written_form not in bucket:
                bucket.append(written_form)

        entry.clear()
        while entry.getprevious() is not None:
            del entry.getparent()[0]
    return lemmas


def merge_language(
    table: MultilingualSynsetTable,
    language: str,
    lemmas: dict[str, list[str]],
) -> None:
    for synset_id, lemma_list in lemmas.items():
        table.setdefault(synset_id, {})[language] = lemma_list


def build_multilingual_wordnet(
    omw_dir: Path,
    output_path: Path,
    languages: tuple[str, ...] = TARGET_LANGUAGES,
) -> SynsetTableStats:
    """Build and write the multilingual synset table.

    A language whose XML fails to parse is logged and skipped.

    Raises:
        BuildAbortedError: `omw_dir` does not exist.
    """
    if not omw_dir.is_dir():
        logger.error(
            "OMW data directory not found. Download it with: " + OMW_DOWNLOAD,
            extra={"path": str(omw_dir)},
        )
        raise BuildAbortedError(f"Missing input directory: {omw_dir}")

    available = sorted(
        (p.name for p in omw_dir.iterdir() if p.is_dir() and p.name in languages),
        key=languages.index,
    )
    logger.info("Processing OMW languages", extra={
        "available": len(available), "targets": len(languages), "languages": available,
    })

    table: MultilingualSynsetTable = {}
    stats = SynsetTableStats()
    for lexicon_id in available:
        xml_path = omw_dir / lexicon_id / f"{lexicon_id}.xml"
        if not xml_path.exists():
            logger.warning("XML file not found", extra={"path": str(xml_path)})
            continue

        try:
            lemmas = extract_lemmas_from_xml(str(xml_path))
        except (etree.XMLSyntaxError, OSError) as e:
            logger.error(
                "Failed to process language",
                extra={"language": lexicon_id, "error": str(e)},
            )
            stats.failed_languages.append(lexicon_id)
            continue

        code = omw_short_code(lexicon_id)
        merge_language(table, code, lemmas)
        stats.languages.append(code)
        stats.lemma_counts[code] = sum(len(v) for v in lemmas.values())
        logger.info("Language processed", extra={
            "language": lexicon_id,
            "display_name": omw_display_name(lexicon_id),
            "synsets": len(lemmas),
            "lemmas": stats.lemma_counts[code],
        })

    stats.total_synsets = len(table)
    stats.file_size_bytes = write_table(table, output_path)
    logger.info("Multilingual synset table written", extra={
        "path": str(output_path),
        "total_synsets": stats.total_synsets,
        "size_mb": round(stats.file_size_bytes / 1024 / 1024, 2),
    })
    if stats.file_size_bytes > OUTPUT_SIZE_WARNING_BYTES:
        logger.warning("Output file exceeds 50 MB; start-up load will be slow")
    return stats


# ── Output ───────────────────────────────────────────────────


def write_table(table: dict, output_path: Path) -> int:
    """Write `table` as pretty-printed UTF-8 JSON, returning the file size."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(table, f, ensure_ascii=False, indent=2)
    return output_path.stat().st_size

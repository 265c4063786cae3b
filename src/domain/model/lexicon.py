"""Lexicon domain models.

SenseEntry is one row of the Japanese WordNet sense inventory.
Its JSON shape (camelCase keys) is the on-disk format written by the
table builder and read back at start-up.
"""

from dataclasses import dataclass
from typing import Any

HIGH_CONFIDENCE = frozenset({"hand", "mono"})

PART_OF_SPEECH = {
    "n": "noun",
    "v": "verb",
    "a": "adjective",
    "r": "adverb",
}
OTHER_PART_OF_SPEECH = "other"


def part_of_speech_for(synset_id: str) -> str:
    """Derive the part of speech from a synset id like "00217728-a"."""
    _, _, pos_char = synset_id.partition("-")
    return PART_OF_SPEECH.get(pos_char, OTHER_PART_OF_SPEECH)


@dataclass(frozen=True)
class SenseEntry:
    """One word-sense pairing from the monolingual sense inventory."""

    synset_id: str
    word: str
    confidence: str
    part_of_speech: str
    definition: str | None = None

    @property
    def is_high_confidence(self) -> bool:
        return self.confidence in HIGH_CONFIDENCE

    @classmethod
    def create(
        cls,
        synset_id: str,
        word: str,
        confidence: str,
        definition: str | None = None,
    ) -> "SenseEntry":
        return cls(
            synset_id=synset_id,
            word=word,
            confidence=confidence,
            part_of_speech=part_of_speech_for(synset_id),
            definition=definition,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "synsetId": self.synset_id,
            "word": self.word,
            "confidence": self.confidence,
            "partOfSpeech": self.part_of_speech,
        }
        if self.definition is not None:
            data["definition"] = self.definition
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SenseEntry":
        synset_id = data["synsetId"]
        return cls(
            synset_id=synset_id,
            word=data["word"],
            confidence=data.get("confidence", "hand"),
            part_of_speech=data.get("partOfSpeech") or part_of_speech_for(synset_id),
            definition=data.get("definition"),
        )


# word → [SenseEntry], first-seen order
WordSenseTable = dict[str, list[SenseEntry]]

# synsetId → {language code → [lemma]}
MultilingualSynsetTable = dict[str, dict[str, list[str]]]


@dataclass(frozen=True)
class RelatedWord:
    """One validated record from the live word-relations API."""

    word: str
    score: int = 0
    definitions: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()

    @property
    def phonetic(self) -> str | None:
        for tag in self.tags:
            if tag.startswith("ipa_pron:"):
                return tag[len("ipa_pron:"):].strip() or None
        return None

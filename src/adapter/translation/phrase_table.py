"""Phrase-table translation models.

A stand-in for downloadable per-pair translation models: each "model"
is a lookup into a small static phrase table, scoped to one target language.
Unknown phrases come back bracketed (e.g., "[cat]").
"""

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_SHARED = {
    "de": "Freiheit", "fr": "liberté", "es": "libertad", "it": "libertà",
    "pt": "liberdade", "ru": "свобода", "zh": "自由", "ko": "자유",
    "ar": "حرية", "hi": "स्वतंत्रता", "tr": "özgürlük", "nl": "vrijheid",
    "el": "ελευθερία", "sv": "frihet", "pl": "wolność",
}
_BEAUTIFUL = {
    "de": "schön", "fr": "beau", "es": "hermoso", "it": "bello",
    "pt": "belo", "ru": "красивый", "zh": "美丽", "ko": "아름다운",
    "ar": "جميل", "hi": "सुंदर", "tr": "güzel", "nl": "mooi",
    "el": "όμορφος", "sv": "vacker", "pl": "piękny",
}

PHRASE_TABLE: dict[str, dict[str, str]] = {
    "自由": {"en": "freedom", **_SHARED},
    "美しい": {"en": "beautiful", **_BEAUTIFUL},
    "freedom": {"ja": "自由", **_SHARED},
    "beautiful": {"ja": "美しい", **_BEAUTIFUL},
    "on": {
        "ja": "オン", "de": "an", "fr": "sur", "es": "en", "it": "su",
        "pt": "em", "ru": "на", "zh": "在", "ko": "에", "ar": "على",
        "hi": "पर", "tr": "üzerinde", "nl": "op", "el": "επί",
        "sv": "på", "pl": "na",
    },
}


@dataclass(frozen=True)
class PhraseTableModel:
    source: str
    target: str
    table: dict[str, dict[str, str]]

    def translate(self, text: str) -> str:
        return self.table.get(text, {}).get(self.target) or f"[{text}]"


class PhraseTableModelLoader:
    """TranslationModelLoader that builds phrase-table models without I/O."""

    def __init__(self, table: dict[str, dict[str, str]] | None = None):
        self.table = table if table is not None else PHRASE_TABLE

    async def load(self, source: str, target: str) -> PhraseTableModel:
        logger.debug("Loading phrase-table model", extra={"source": source, "target": target})
        return PhraseTableModel(source=source, target=target, table=self.table)

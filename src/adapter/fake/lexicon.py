"""Small lexicon tables for tests, shaped like the builder's output."""

from adapter.lexicon.memory_repository import InMemoryLexiconRepository
from domain.model.lexicon import MultilingualSynsetTable, SenseEntry, WordSenseTable

BEAUTIFUL_SYNSET = "00217728-a"
FREEDOM_SYNSET = "13985818-n"
EXEMPTION_SYNSET = "05623628-n"

BEAUTIFUL_DEFINITION = "感覚を活気づけ、知的情緒的賞賛を喚起する"


def sample_word_senses() -> WordSenseTable:
    return {
        "自由": [
            SenseEntry.create(FREEDOM_SYNSET, "自由", "hand", "束縛や障害がない状態"),
            SenseEntry.create(EXEMPTION_SYNSET, "自由", "hand"),
        ],
        "自主": [SenseEntry.create(FREEDOM_SYNSET, "自主", "hand")],
        "フリーダム": [SenseEntry.create(FREEDOM_SYNSET, "フリーダム", "mono")],
        "美しい": [SenseEntry.create(BEAUTIFUL_SYNSET, "美しい", "hand", BEAUTIFUL_DEFINITION)],
        "綺麗": [SenseEntry.create(BEAUTIFUL_SYNSET, "綺麗", "hand")],
    }


def sample_synsets() -> MultilingualSynsetTable:
    return {
        FREEDOM_SYNSET: {
            "en": ["freedom", "liberty"],
            "ja": ["自由", "自主"],
            "fr": ["liberté"],
        },
        EXEMPTION_SYNSET: {
            "en": ["freedom", "exemption"],
            "fr": ["liberté", "exemption"],
            "de": ["Freiheit"],
        },
        BEAUTIFUL_SYNSET: {
            "en": ["beautiful"],
            "ja": ["美しい", "綺麗"],
            "fr": ["beau", "belle"],
        },
    }


def sample_lexicon() -> InMemoryLexiconRepository:
    return InMemoryLexiconRepository(sample_word_senses(), sample_synsets())

from adapter.external.datamuse import DatamuseAdapter
from adapter.external.dbnary import DbnaryAdapter
from adapter.lexicon.json_loader import get_lexicon_repository
from adapter.translation.phrase_table import PhraseTableModelLoader
from port.etymology import EtymologyPort
from port.lexicon_repository import LexiconRepository
from port.translation_model import TranslationModelLoader
from port.word_relations import WordRelationsPort
from utils.model_cache import ModelCache

_model_cache = ModelCache()


def get_lexicon_repo() -> LexiconRepository:
    return get_lexicon_repository()


def get_word_relations_port() -> WordRelationsPort:
    return DatamuseAdapter()


def get_etymology_port() -> EtymologyPort:
    return DbnaryAdapter()


def get_model_loader() -> TranslationModelLoader:
    return PhraseTableModelLoader()


def get_model_cache() -> ModelCache:
    return _model_cache

"""Bounded LRU cache for per-language-pair translation models."""

import logging
import time
from dataclasses import dataclass
from typing import Awaitable, Callable

from cachetools import LRUCache

from port.translation_model import TranslationModel

logger = logging.getLogger(__name__)

MAX_CACHE_SIZE = 10


@dataclass
class CachedModel:
    key: str
    model: TranslationModel
    last_used: float


def model_key(source: str, target: str) -> str:
    return f"{source}_{target}"


class ModelCache:
    """Keeps at most `capacity` models, evicting the least recently used.

    Only touched from the event loop thread; a lock is needed if this is
    ever shared across worker threads.
    """

    def __init__(self, capacity: int = MAX_CACHE_SIZE):
        self.capacity = capacity
        self._entries: LRUCache = LRUCache(maxsize=capacity)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def keys(self) -> list[str]:
        return list(self._entries.keys())

    def get(self, key: str) -> CachedModel | None:
        entry = self._entries.get(key)
        if entry is not None:
            entry.last_used = time.monotonic()
        return entry

    def put(self, key: str, model: TranslationModel) -> CachedModel:
        entry = CachedModel(key=key, model=model, last_used=time.monotonic())
        self._entries[key] = entry
        return entry

    async def get_or_load(
        self,
        source: str,
        target: str,
        load: Callable[[str, str], Awaitable[TranslationModel]],
    ) -> TranslationModel:
        key = model_key(source, target)
        cached = self.get(key)
        if cached is not None:
            return cached.model

        model = await load(source, target)
        self.put(key, model)
        logger.debug("Model cached", extra={"key": key, "cache_size": len(self._entries)})
        return model

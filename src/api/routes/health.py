"""Health check endpoint."""

import logging
from fastapi import APIRouter, Depends

from api.dependencies import get_lexicon_repo, get_model_cache
from port.lexicon_repository import LexiconRepository
from utils.model_cache import ModelCache
from utils.timestamps import utc_timestamp

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health(
    lexicon: LexiconRepository = Depends(get_lexicon_repo),
    cache: ModelCache = Depends(get_model_cache),
):
    """Health check with lexicon table status.

    Always 200; `degraded` means lookups run on the seed or an empty synset table.
    """
    stats = lexicon.stats()
    health_status = {
        "status": "healthy",
        "timestamp": utc_timestamp(),
        "lexicon": {
            "is_seed": lexicon.is_seed,
            **stats,
        },
        "model_cache": {
            "size": len(cache),
            "capacity": cache.capacity,
        },
    }

    if lexicon.is_seed or stats["synsets"] == 0:
        health_status["status"] = "degraded"
        logger.warning("Lexicon tables not built; serving degraded lookups", extra=stats)

    return health_status

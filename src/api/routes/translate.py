"""Phrase translation route.

Endpoints:
- POST /translate: translate `q` into every other supported language
"""

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_model_cache, get_model_loader
from api.models import ErrorResponse, TranslateRequest, TranslateResponse
from domain.model.errors import ValidationError
from port.translation_model import TranslationModelLoader
from services.phrase_translation_service import translate_phrase
from utils.model_cache import ModelCache

logger = logging.getLogger(__name__)

router = APIRouter(tags=["translate"])


@router.post(
    "/translate",
    response_model=TranslateResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def translate(
    request: TranslateRequest,
    loader: TranslationModelLoader = Depends(get_model_loader),
    cache: ModelCache = Depends(get_model_cache),
):
    try:
        result = await translate_phrase(loader, cache, request.q, request.src)
    except ValidationError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except Exception:
        logger.error("Translation request failed", extra={"query": request.q}, exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    return TranslateResponse.model_validate(asdict(result))

"""Word lookup route.

Endpoints:
- GET /lookup?word=<word>&etymology=true: dictionary, synonyms, translations
  and (optionally) etymology for one word
"""

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from api.dependencies import get_etymology_port, get_lexicon_repo, get_word_relations_port
from api.models import ErrorResponse, LookupResponse
from domain.model.errors import LookupFailedError, ValidationError
from port.etymology import EtymologyPort
from port.lexicon_repository import LexiconRepository
from port.word_relations import WordRelationsPort
from services.lookup_service import handle_lookup

logger = logging.getLogger(__name__)

router = APIRouter(tags=["lookup"])


@router.get(
    "/lookup",
    response_model=LookupResponse,
    response_model_exclude_none=True,
    response_model_by_alias=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def lookup_word(
    word: str | None = Query(None, description="Word to look up"),
    etymology: str | None = Query(None, description='"true" to include etymology'),
    lexicon: LexiconRepository = Depends(get_lexicon_repo),
    word_api: WordRelationsPort = Depends(get_word_relations_port),
    etymology_port: EtymologyPort = Depends(get_etymology_port),
):
    """Look up a word in every source and return what succeeded."""
    try:
        result = await handle_lookup(
            lexicon,
            word_api,
            etymology_port,
            word,
            include_etymology=etymology == "true",
        )
    except ValidationError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except LookupFailedError as e:
        return JSONResponse(status_code=500, content={"error": str(e)})
    except Exception:
        logger.error("Lookup failed unexpectedly", extra={"word": word}, exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    return LookupResponse.model_validate(asdict(result))

"""Pydantic models for API request/response.

Responses serialize with camelCase aliases; routes set
`response_model_exclude_none=True` so absent fields are omitted.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DefinitionResponse(CamelModel):
    definition: str
    example: Optional[str] = None


class MeaningResponse(CamelModel):
    part_of_speech: str
    definitions: list[DefinitionResponse]


class DictionaryResponse(CamelModel):
    word: str
    phonetic: Optional[str] = None
    meanings: list[MeaningResponse]


class SynonymResponse(CamelModel):
    word: str
    synonyms: list[str]
    antonyms: Optional[list[str]] = None


class TranslationResponse(CamelModel):
    word: str
    translations: dict[str, list[str]] = Field(
        ..., description="Language code → up to 5 lemmas"
    )


class EtymologyResponse(CamelModel):
    word: str
    etymology: Optional[str] = None
    source: str = "dbnary"
    retrieved_at: str = Field(..., description="ISO-8601 retrieval time")


class LookupResponse(CamelModel):
    """Merged result of every sub-lookup that succeeded."""
    dictionary: Optional[DictionaryResponse] = None
    synonyms: Optional[SynonymResponse] = None
    translations: Optional[TranslationResponse] = None
    etymology: Optional[EtymologyResponse] = None


class TranslateRequest(BaseModel):
    """Request model for phrase translation."""
    q: Optional[str] = Field(None, description="Phrase to translate")
    src: Optional[str] = Field(None, description="Source language code (detected when omitted)")


class TranslateResponse(BaseModel):
    query: str
    source: str
    translations: dict[str, str]
    errors: Optional[list[str]] = None
    timestamp: str


class ErrorResponse(BaseModel):
    error: str

"""
Translation request/response models for the document translation gateway.
"""
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import TranslationFailure


class TranslationRequest(BaseModel):
    """
    Request model for the translate endpoint.

    Wire names are camelCase to match the browser client.
    """
    model_config = ConfigDict(populate_by_name=True)

    text: Optional[str] = None  # The original-language summary
    insights: List[str] = Field(default_factory=list)  # Key insights, in display order
    target_language: Optional[str] = Field(default=None, alias="targetLanguage")  # Short code, e.g. "es"

    @field_validator("insights", mode="before")
    @classmethod
    def _null_insights_as_empty(cls, value):
        return [] if value is None else value

    @property
    def is_complete(self) -> bool:
        return bool(self.text) and bool(self.target_language)


class TranslationResult(BaseModel):
    """
    Response model for a successful translation.
    """
    model_config = ConfigDict(populate_by_name=True)

    translated_summary: str = Field(alias="translatedSummary")
    translated_insights: List[str] = Field(default_factory=list, alias="translatedInsights")


class ErrorResponse(BaseModel):
    """
    Body returned alongside any non-200 status.
    """
    error: str


def parse_translation_request(raw_body: bytes) -> Union[TranslationRequest, TranslationFailure]:
    """
    Parse and validate a raw JSON request body.

    Args:
        raw_body: The request body as received

    Returns:
        A TranslationRequest with text and targetLanguage present, or a
        validation TranslationFailure
    """
    try:
        request = TranslationRequest.model_validate_json(raw_body)
    except ValidationError as e:
        return TranslationFailure.validation(f"Invalid request body: {_first_error(e)}")

    if not request.is_complete:
        return TranslationFailure.validation()

    return request


def _first_error(error: ValidationError) -> str:
    details = error.errors()
    if not details:
        return str(error)
    first = details[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{location}: {first['msg']}" if location else first["msg"]

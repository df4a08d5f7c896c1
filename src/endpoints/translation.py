"""
Translation API endpoints for document summaries and key insights.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from ..models.language import Language, supported_languages
from ..services.translation_gateway import TranslationGateway

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/translation", tags=["translation"])


def get_translation_gateway(request: Request) -> TranslationGateway:
    """Return the gateway created by the application factory."""
    return request.app.state.translation_gateway


@router.api_route("/translate", methods=["POST", "OPTIONS"])
async def translate(request: Request, gateway: TranslationGateway = Depends(get_translation_gateway)) -> Response:
    """
    Translate a document summary and its insights into the target language.

    OPTIONS answers the browser preflight; POST expects
    {text, insights?, targetLanguage}.
    """
    return await gateway.handle(request)


@router.get("/languages", response_model=List[Language])
async def list_languages():
    """
    List the languages the document viewer offers for translation.
    """
    return supported_languages()


@router.get("/health")
async def translation_health(gateway: TranslationGateway = Depends(get_translation_gateway)):
    """
    Health check endpoint for the translation service.

    Reports configuration only; it does not spend an upstream call.
    """
    is_valid, error_message = gateway.config.validate()
    if is_valid:
        return {"status": "healthy", "service": "translation", "model": gateway.config.model_id}

    logger.warning(f"Translation service unavailable: {error_message}")
    return {
        "status": "unavailable",
        "service": "translation",
        "model": gateway.config.model_id,
        "error": error_message,
    }

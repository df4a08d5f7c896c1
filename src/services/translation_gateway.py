"""
Translation gateway: turns a translate request into two chat completions.
"""
import logging
from typing import List, Optional, Union

from fastapi import Request
from fastapi.responses import Response

from ..middleware.cors import error_response, json_response, preflight_response
from ..models.errors import TranslationFailure
from ..models.language import language_name_for
from ..models.translation import TranslationRequest, TranslationResult, parse_translation_request
from ..translation_config import TranslationConfig
from .completion_client import CompletionClient, OpenRouterCompletionClient

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a professional translator. "
    "Translate text accurately while maintaining the original meaning and tone."
)


def build_summary_prompt(language_name: str, text: str) -> str:
    return (
        f"Translate the following text to {language_name}. "
        "Maintain the professional tone and technical accuracy. "
        "Only provide the translation, no additional text:\n\n"
        f"{text}"
    )


def build_insights_prompt(language_name: str, insights: List[str]) -> str:
    return (
        f"Translate the following list items to {language_name}. "
        "Maintain the professional tone. "
        "Return ONLY the translated items, one per line:\n\n"
        + "\n".join(insights)
    )


def split_translated_lines(content: str) -> List[str]:
    """Split a one-item-per-line completion, dropping blank lines."""
    return [line for line in content.split("\n") if line.strip()]


class TranslationGateway:
    """
    Stateless handler for document summary and insight translation.

    The summary call and the insights call run one after the other: a rate
    limit or billing failure on the summary aborts before the insights call is
    made, while an insights failure falls back to the original insights.
    """

    def __init__(self, config: TranslationConfig, client: Optional[CompletionClient] = None):
        """
        Initialize the gateway.

        Args:
            config: Upstream provider configuration
            client: Completion client; defaults to the OpenRouter-backed one
        """
        self.config = config
        self.client = client or OpenRouterCompletionClient(config)

    async def handle(self, request: Request) -> Response:
        """
        Answer one HTTP request to the translate endpoint.

        Args:
            request: The incoming request (OPTIONS or POST)

        Returns:
            Response with CORS headers, JSON for everything but preflight
        """
        if request.method == "OPTIONS":
            return preflight_response()

        try:
            parsed = parse_translation_request(await request.body())
            if isinstance(parsed, TranslationFailure):
                logger.warning(f"Rejected translation request: {parsed.message}")
                return error_response(parsed.message, parsed.status_code)

            logger.info(
                f"Translation request: targetLanguage={parsed.target_language}, "
                f"textLength={len(parsed.text)}, insightsCount={len(parsed.insights)}"
            )

            outcome = await self.translate(parsed)
            if isinstance(outcome, TranslationFailure):
                return error_response(outcome.message, outcome.status_code)

            return json_response(outcome.model_dump(by_alias=True))

        except Exception as e:
            logger.error(f"Translation error: {str(e)}")
            return error_response(str(e) or "Translation failed", 500)

    async def translate(self, request: TranslationRequest) -> Union[TranslationResult, TranslationFailure]:
        """
        Translate a validated request's summary and insights.

        Args:
            request: Request with text and target_language present

        Returns:
            TranslationResult, or the TranslationFailure that stopped the summary
        """
        if not self.config.is_configured:
            logger.error("OPENROUTER_API_KEY is not configured")
            return TranslationFailure.configuration()

        language_name = language_name_for(request.target_language)
        logger.info(f"Translating to: {language_name}")

        summary = await self.client.complete(SYSTEM_PROMPT, build_summary_prompt(language_name, request.text))
        if not summary.ok:
            failure = summary.failure
            logger.error(f"Summary translation error: {failure.status_code} {failure.body}")
            return failure.to_translation_failure()
        logger.info("Summary translated successfully")

        translated_insights: List[str] = []
        if request.insights:
            translated_insights = await self._translate_insights(language_name, request.insights)

        return TranslationResult(
            translated_summary=summary.content,
            translated_insights=translated_insights,
        )

    async def _translate_insights(self, language_name: str, insights: List[str]) -> List[str]:
        result = await self.client.complete(SYSTEM_PROMPT, build_insights_prompt(language_name, insights))
        if not result.ok:
            # keep the summary translation and show insights untranslated
            logger.error(f"Insights translation error: {result.failure.status_code} {result.failure.body}")
            return list(insights)

        logger.info("Insights translated successfully")
        return split_translated_lines(result.content)

    async def aclose(self) -> None:
        await self.client.aclose()

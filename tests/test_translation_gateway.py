import pytest

from src.models.errors import CompletionResult, TranslationErrorKind, TranslationFailure
from src.models.translation import TranslationRequest, TranslationResult
from src.services.translation_gateway import (
    SYSTEM_PROMPT,
    TranslationGateway,
    build_insights_prompt,
    build_summary_prompt,
    split_translated_lines,
)
from src.translation_config import TranslationConfig


def test_summary_prompt_text():
    prompt = build_summary_prompt("Spanish", "Quarterly revenue grew 23%.")

    assert prompt == (
        "Translate the following text to Spanish. Maintain the professional tone and technical accuracy. "
        "Only provide the translation, no additional text:\n\nQuarterly revenue grew 23%."
    )


def test_insights_prompt_text():
    prompt = build_insights_prompt("French", ["Net 30 payment terms", "Mutual NDA"])

    assert prompt == (
        "Translate the following list items to French. Maintain the professional tone. "
        "Return ONLY the translated items, one per line:\n\nNet 30 payment terms\nMutual NDA"
    )


def test_system_prompt_text():
    assert SYSTEM_PROMPT == (
        "You are a professional translator. "
        "Translate text accurately while maintaining the original meaning and tone."
    )


@pytest.mark.parametrize("content,expected", [
    ("A\n\nB\n", ["A", "B"]),
    ("  \nA\n \t \nB", ["A", "B"]),
    ("only one", ["only one"]),
    ("", []),
    ("\n\n", []),
])
def test_split_translated_lines(content, expected):
    assert split_translated_lines(content) == expected


@pytest.mark.asyncio
async def test_translate_returns_result(config, fake_client):
    fake_client.results = [
        CompletionResult.success("Ciao"),
        CompletionResult.success("Uno\nDue"),
    ]
    gateway = TranslationGateway(config, client=fake_client)

    outcome = await gateway.translate(TranslationRequest(text="Hello", insights=["One", "Two"], target_language="it"))

    assert isinstance(outcome, TranslationResult)
    assert outcome.translated_summary == "Ciao"
    assert outcome.translated_insights == ["Uno", "Due"]
    assert "Italian" in fake_client.calls[0][1]
    assert "Italian" in fake_client.calls[1][1]


@pytest.mark.asyncio
async def test_translate_rate_limited_failure(config, fake_client):
    fake_client.results = [CompletionResult.failed(429, "busy")]
    gateway = TranslationGateway(config, client=fake_client)

    outcome = await gateway.translate(TranslationRequest(text="Hello", insights=["One"], target_language="ja"))

    assert isinstance(outcome, TranslationFailure)
    assert outcome.kind is TranslationErrorKind.RATE_LIMITED
    assert outcome.status_code == 429
    assert len(fake_client.calls) == 1


@pytest.mark.asyncio
async def test_translate_without_api_key(fake_client):
    gateway = TranslationGateway(TranslationConfig(), client=fake_client)

    outcome = await gateway.translate(TranslationRequest(text="Hello", target_language="ko"))

    assert outcome == TranslationFailure.configuration()
    assert fake_client.calls == []


@pytest.mark.asyncio
async def test_insights_fallback_is_a_copy(config, fake_client):
    fake_client.results = [
        CompletionResult.success("Hola"),
        CompletionResult.failed(None, "malformed completion response"),
    ]
    gateway = TranslationGateway(config, client=fake_client)
    insights = ["One", "Two"]

    outcome = await gateway.translate(TranslationRequest(text="Hello", insights=insights, target_language="es"))

    assert outcome.translated_insights == insights
    assert outcome.translated_insights is not insights


def test_default_client_is_openrouter(config):
    from src.services.completion_client import OpenRouterCompletionClient

    gateway = TranslationGateway(config)

    assert isinstance(gateway.client, OpenRouterCompletionClient)
    assert gateway.client.config is config

from typing import List, Tuple

import pytest
from fastapi.testclient import TestClient

from main import create_app
from src.models.errors import CompletionResult
from src.services.completion_client import CompletionClient
from src.translation_config import TranslationConfig


class FakeCompletionClient(CompletionClient):
    """Replays queued CompletionResults and records every prompt pair."""

    def __init__(self, *results: CompletionResult):
        self.results = list(results)
        self.calls: List[Tuple[str, str]] = []
        self.closed = False

    async def complete(self, system_prompt: str, user_prompt: str) -> CompletionResult:
        self.calls.append((system_prompt, user_prompt))
        if not self.results:
            raise AssertionError("Unexpected completion call")
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def config():
    return TranslationConfig(api_key="test-key", model_id="test/model", upstream_endpoint="https://llm.test/v1")


@pytest.fixture
def fake_client():
    return FakeCompletionClient()


@pytest.fixture
def client(config, fake_client):
    app = create_app(config=config, completion_client=fake_client)
    return TestClient(app)

"""
Chat-completion client used by the translation gateway.
"""
import logging
from abc import ABC, abstractmethod
from typing import Optional

import httpx
from openai import APIResponseValidationError, APIStatusError, AsyncOpenAI

from ..models.errors import CompletionResult
from ..translation_config import TranslationConfig

logger = logging.getLogger(__name__)


class CompletionClient(ABC):
    """Base class for chat-completion providers."""

    @abstractmethod
    async def complete(self, system_prompt: str, user_prompt: str) -> CompletionResult:
        """
        Run one chat completion.

        Args:
            system_prompt: Instruction for the system role
            user_prompt: Instruction for the user role

        Returns:
            CompletionResult with the first choice's content, or the upstream failure
        """
        ...

    async def aclose(self) -> None:
        return None


class OpenRouterCompletionClient(CompletionClient):
    """
    Completion client for OpenAI-compatible gateways such as OpenRouter.

    Non-success statuses and malformed payloads come back as failures.
    Transport errors (connection, timeout) are raised to the caller.
    """

    def __init__(self, config: TranslationConfig, http_client: Optional[httpx.AsyncClient] = None):
        """
        Initialize the client without touching the network.

        Args:
            config: Provider configuration
            http_client: Optional httpx client, mostly for tests
        """
        self.config = config
        self._http_client = http_client
        self._client: Optional[AsyncOpenAI] = None

    def _get_client(self) -> AsyncOpenAI:
        # AsyncOpenAI refuses an empty key, so build it on first use only
        if self._client is None:
            self._client = AsyncOpenAI(
                api_key=self.config.api_key,
                base_url=self.config.upstream_endpoint,
                timeout=self.config.timeout_seconds,
                max_retries=0,
                http_client=self._http_client,
            )
        return self._client

    async def complete(self, system_prompt: str, user_prompt: str) -> CompletionResult:
        client = self._get_client()
        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ]

        try:
            response = await client.chat.completions.create(
                model=self.config.model_id,
                messages=messages,
            )
        except APIStatusError as e:
            return CompletionResult.failed(e.status_code, e.response.text)
        except APIResponseValidationError as e:
            logger.warning(f"Upstream returned an unparseable completion: {str(e)}")
            return CompletionResult.failed(None, "malformed completion response")

        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError, TypeError):
            content = None

        if not isinstance(content, str):
            return CompletionResult.failed(None, "completion response has no message content")

        return CompletionResult.success(content)

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None

"""
Error kinds and failure values for the translation pipeline.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

MISSING_FIELDS_MESSAGE = "Missing required fields: text and targetLanguage"
NOT_CONFIGURED_MESSAGE = "Translation service is not configured"
RATE_LIMITED_MESSAGE = "Rate limit exceeded. Please try again later."
PAYMENT_REQUIRED_MESSAGE = "Translation service requires payment. Please add credits to continue."


class TranslationErrorKind(str, Enum):
    VALIDATION = "validation_error"
    CONFIGURATION = "configuration_error"
    RATE_LIMITED = "rate_limited"
    PAYMENT_REQUIRED = "payment_required"
    UPSTREAM = "upstream_error"


_STATUS_BY_KIND = {
    TranslationErrorKind.RATE_LIMITED: 429,
    TranslationErrorKind.PAYMENT_REQUIRED: 402,
}


@dataclass(frozen=True)
class TranslationFailure:
    """
    A failed translation request, carried as a value rather than raised.
    """

    kind: TranslationErrorKind
    message: str

    @property
    def status_code(self) -> int:
        return _STATUS_BY_KIND.get(self.kind, 500)

    @classmethod
    def validation(cls, message: str = MISSING_FIELDS_MESSAGE) -> "TranslationFailure":
        return cls(TranslationErrorKind.VALIDATION, message)

    @classmethod
    def configuration(cls) -> "TranslationFailure":
        return cls(TranslationErrorKind.CONFIGURATION, NOT_CONFIGURED_MESSAGE)


@dataclass(frozen=True)
class UpstreamFailure:
    """
    A non-success answer from the chat-completion provider.

    status_code is None when the provider answered 2xx but the payload did not
    have the expected shape.
    """

    status_code: Optional[int]
    body: str

    @property
    def kind(self) -> TranslationErrorKind:
        if self.status_code == 429:
            return TranslationErrorKind.RATE_LIMITED
        if self.status_code == 402:
            return TranslationErrorKind.PAYMENT_REQUIRED
        return TranslationErrorKind.UPSTREAM

    def to_translation_failure(self) -> TranslationFailure:
        kind = self.kind
        if kind is TranslationErrorKind.RATE_LIMITED:
            return TranslationFailure(kind, RATE_LIMITED_MESSAGE)
        if kind is TranslationErrorKind.PAYMENT_REQUIRED:
            return TranslationFailure(kind, PAYMENT_REQUIRED_MESSAGE)
        return TranslationFailure(kind, f"AI translation failed: {self.body}")


@dataclass(frozen=True)
class CompletionResult:
    """Either the completion text or the upstream failure, never both."""

    content: Optional[str] = None
    failure: Optional[UpstreamFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, content: str) -> "CompletionResult":
        return cls(content=content)

    @classmethod
    def failed(cls, status_code: Optional[int], body: str) -> "CompletionResult":
        return cls(failure=UpstreamFailure(status_code=status_code, body=body))

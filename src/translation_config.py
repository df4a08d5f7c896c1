"""
Configuration settings for the document translation gateway.
"""
import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"
DEFAULT_MODEL = "google/gemini-2.5-flash"
DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class TranslationConfig:
    """
    Configuration for the translation gateway and its upstream provider.

    Built once by the process entry point and passed into the gateway, so the
    translation pipeline itself never reads the environment.
    """

    api_key: str = ""
    model_id: str = DEFAULT_MODEL
    upstream_endpoint: str = DEFAULT_BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls) -> "TranslationConfig":
        """
        Build a configuration object from environment variables.

        Returns:
            TranslationConfig populated from OPENROUTER_* and TRANSLATION_TIMEOUT
        """
        return cls(
            api_key=os.getenv("OPENROUTER_API_KEY", ""),
            model_id=os.getenv("OPENROUTER_MODEL", DEFAULT_MODEL),
            upstream_endpoint=os.getenv("OPENROUTER_BASE_URL", DEFAULT_BASE_URL),
            timeout_seconds=float(os.getenv("TRANSLATION_TIMEOUT", str(DEFAULT_TIMEOUT_SECONDS))),
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def validate(self) -> tuple[bool, str]:
        """
        Validate that required configuration values are present.

        Returns:
            Tuple of (is_valid, error_message)
        """
        if not self.api_key:
            return False, "OPENROUTER_API_KEY is required for translation service"

        if not self.model_id:
            return False, "OPENROUTER_MODEL is required for translation service"

        if self.timeout_seconds <= 0:
            return False, "TRANSLATION_TIMEOUT must be a positive number of seconds"

        return True, ""

    def __repr__(self) -> str:
        # keep the secret out of logs and tracebacks
        return (
            f"TranslationConfig(model_id={self.model_id!r}, "
            f"upstream_endpoint={self.upstream_endpoint!r}, "
            f"timeout_seconds={self.timeout_seconds!r}, configured={self.is_configured})"
        )

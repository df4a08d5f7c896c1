from src.translation_config import DEFAULT_BASE_URL, DEFAULT_MODEL, TranslationConfig


def test_from_env_defaults(monkeypatch):
    for name in ("OPENROUTER_API_KEY", "OPENROUTER_MODEL", "OPENROUTER_BASE_URL", "TRANSLATION_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)

    config = TranslationConfig.from_env()

    assert config.api_key == ""
    assert config.model_id == DEFAULT_MODEL
    assert config.upstream_endpoint == DEFAULT_BASE_URL
    assert config.timeout_seconds == 30.0
    assert not config.is_configured


def test_from_env_overrides(monkeypatch):
    monkeypatch.setenv("OPENROUTER_API_KEY", "sk-or-secret")
    monkeypatch.setenv("OPENROUTER_MODEL", "openai/gpt-4o-mini")
    monkeypatch.setenv("OPENROUTER_BASE_URL", "https://gateway.example/v1")
    monkeypatch.setenv("TRANSLATION_TIMEOUT", "12.5")

    config = TranslationConfig.from_env()

    assert config.is_configured
    assert config.model_id == "openai/gpt-4o-mini"
    assert config.upstream_endpoint == "https://gateway.example/v1"
    assert config.timeout_seconds == 12.5


def test_validate():
    assert TranslationConfig(api_key="k").validate() == (True, "")
    assert TranslationConfig().validate()[0] is False
    assert TranslationConfig(api_key="k", model_id="").validate()[0] is False
    assert TranslationConfig(api_key="k", timeout_seconds=0).validate()[0] is False


def test_repr_hides_api_key():
    assert "sk-or-secret" not in repr(TranslationConfig(api_key="sk-or-secret"))

"""Tests for environment-driven configuration."""

from geminisst.config import load_config


def test_load_config_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "key-123")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-3-pro-preview")
    monkeypatch.setenv("GEMINISST_LOG_LEVEL", "debug")

    config = load_config()

    assert config.gemini.api_key == "key-123"
    assert config.gemini.model_name == "gemini-3-pro-preview"
    assert config.logging.level == "DEBUG"


def test_load_config_defaults(monkeypatch) -> None:
    for name in ("GEMINI_API_KEY", "GEMINI_MODEL", "GEMINISST_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    config = load_config()

    assert config.gemini.api_key == ""
    assert config.gemini.model_name == "gemini-2.5-flash-lite"
    assert config.logging.level == "INFO"

"""
Goose Quotes Backend: Settings Tests
=====================================
"""

import pytest
from pydantic import ValidationError

from goose_quotes.config import Settings


def test_defaults_match_generation_contract():
    s = Settings(_env_file=None, openai_api_key="k")

    assert s.llm_temperature == 0.7
    assert s.llm_max_tokens == 2048
    assert s.image_size == "1024x1024"


def test_provider_is_normalized():
    assert Settings(_env_file=None, llm_provider="Gemini").llm_provider == "gemini"


def test_unknown_provider_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, llm_provider="clippy")


def test_log_level_is_uppercased():
    assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"


def test_missing_key_fails_production_check():
    s = Settings(_env_file=None, llm_provider="gemini", gemini_api_key="")

    with pytest.raises(ValueError, match="GEMINI_API_KEY is not set"):
        s.validate_required_for_production()


def test_sqlite_detection():
    assert Settings(_env_file=None, database_url="sqlite+aiosqlite:///x.db").is_sqlite
    assert not Settings(
        _env_file=None, database_url="postgresql+asyncpg://u:p@h/db"
    ).is_sqlite


def test_cors_origins_list():
    s = Settings(_env_file=None, cors_origins="http://a.test, http://b.test")

    assert s.cors_origins_list == ["http://a.test", "http://b.test"]

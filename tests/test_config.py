"""
Tests for configuration loading.
"""

import os

import pytest
from pydantic import ValidationError
from unittest.mock import patch

from video_analyzer.config import Config, DevelopmentConfig, ProductionConfig, get_config


CLEAN_ENV = {
    "OPENAI_API_KEY": "",
    "PERPLEXITY_API_KEY": "",
    "OPENAI_SUMMARY_MODEL": "",
    "PPLX_MODEL": "",
    "CORS_ORIGIN": "",
}


@patch.dict(os.environ, CLEAN_ENV)
def test_defaults_without_credentials():
    config = Config.from_env()

    assert config.OPENAI_API_KEY is None
    assert not config.summarization_enabled
    assert not config.related_news_enabled
    assert config.OPENAI_SUMMARY_MODEL == "gpt-4o-mini"
    assert config.PPLX_MODEL == "sonar-pro"
    assert config.CORS_ORIGIN == "*"


@patch.dict(os.environ, {
    "OPENAI_API_KEY": "sk-test",
    "PERPLEXITY_API_KEY": "pplx-test",
    "OPENAI_SUMMARY_MODEL": "gpt-4o",
    "PPLX_MODEL": "sonar",
    "HTTP_TIMEOUT": "12.5",
})
def test_values_from_environment():
    config = Config.from_env()

    assert config.summarization_enabled
    assert config.related_news_enabled
    assert config.OPENAI_SUMMARY_MODEL == "gpt-4o"
    assert config.PPLX_MODEL == "sonar"
    assert config.HTTP_TIMEOUT == 12.5


def test_config_is_immutable():
    config = Config()
    with pytest.raises(ValidationError):
        config.OPENAI_API_KEY = "changed"


@patch.dict(os.environ, {"ENVIRONMENT": "production"})
def test_get_config_production():
    config = get_config()
    assert isinstance(config, ProductionConfig)
    assert config.DEBUG is False


@patch.dict(os.environ, {"ENVIRONMENT": "development"})
def test_get_config_development_with_overrides():
    config = get_config(CORS_ORIGIN="http://localhost:5173")
    assert isinstance(config, DevelopmentConfig)
    assert config.DEBUG is True
    assert config.CORS_ORIGIN == "http://localhost:5173"

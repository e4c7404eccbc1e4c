"""
Configuration settings for the video analyzer.
"""

import os
from typing import Optional, Dict, Any

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

from video_analyzer import __version__
from video_analyzer.utils.logger import logging


# Ensure environment variables are loaded
load_dotenv()


DEFAULT_SUMMARY_MODEL = "gpt-4o-mini"
DEFAULT_RELATED_MODEL = "sonar-pro"
DEFAULT_PERPLEXITY_BASE_URL = "https://api.perplexity.ai"
DEFAULT_OEMBED_URL = "https://www.youtube.com/oembed"
DEFAULT_TRANSCRIPT_URL = "https://youtubetranscript.com/"


class Config(BaseModel):
    """Base configuration, built once at startup and never mutated."""

    model_config = ConfigDict(frozen=True)

    # Application info
    APP_NAME: str = "YouTube Video Analyzer"
    APP_VERSION: str = __version__

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # API keys; their presence switches the LLM and related-news paths on
    OPENAI_API_KEY: Optional[str] = None
    PERPLEXITY_API_KEY: Optional[str] = None

    # Models
    OPENAI_SUMMARY_MODEL: str = DEFAULT_SUMMARY_MODEL
    PPLX_MODEL: str = DEFAULT_RELATED_MODEL
    PERPLEXITY_BASE_URL: str = DEFAULT_PERPLEXITY_BASE_URL

    # Collaborator endpoints
    OEMBED_URL: str = DEFAULT_OEMBED_URL
    TRANSCRIPT_URL: str = DEFAULT_TRANSCRIPT_URL

    # Seconds allowed for each external call
    HTTP_TIMEOUT: float = 30.0

    CORS_ORIGIN: str = "*"

    @classmethod
    def from_env(cls, **overrides) -> "Config":
        """Build a configuration from environment variables (and .env)."""
        values: Dict[str, Any] = {
            "OPENAI_API_KEY": os.getenv("OPENAI_API_KEY") or None,
            "PERPLEXITY_API_KEY": os.getenv("PERPLEXITY_API_KEY") or None,
            "OPENAI_SUMMARY_MODEL": os.getenv("OPENAI_SUMMARY_MODEL") or DEFAULT_SUMMARY_MODEL,
            "PPLX_MODEL": os.getenv("PPLX_MODEL") or DEFAULT_RELATED_MODEL,
            "PERPLEXITY_BASE_URL": os.getenv("PERPLEXITY_BASE_URL") or DEFAULT_PERPLEXITY_BASE_URL,
            "OEMBED_URL": os.getenv("OEMBED_URL") or DEFAULT_OEMBED_URL,
            "TRANSCRIPT_URL": os.getenv("TRANSCRIPT_URL") or DEFAULT_TRANSCRIPT_URL,
            "HTTP_TIMEOUT": float(os.getenv("HTTP_TIMEOUT") or 30),
            "CORS_ORIGIN": os.getenv("CORS_ORIGIN") or "*",
        }
        if os.getenv("LOG_LEVEL"):
            values["LOG_LEVEL"] = os.getenv("LOG_LEVEL").upper()
        values.update(overrides)
        return cls(**values)

    @property
    def summarization_enabled(self) -> bool:
        return bool(self.OPENAI_API_KEY)

    @property
    def related_news_enabled(self) -> bool:
        return bool(self.PERPLEXITY_API_KEY)

    def warn_missing_credentials(self):
        """Log which optional services will run in fallback mode."""
        if not self.OPENAI_API_KEY:
            logging.warning("OPENAI_API_KEY not set; summaries will use the local fallback.")
        if not self.PERPLEXITY_API_KEY:
            logging.warning("PERPLEXITY_API_KEY not set; related news will be empty.")


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG: bool = True
    LOG_LEVEL: str = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"


def get_config(**overrides) -> Config:
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig.from_env(**overrides)
    return DevelopmentConfig.from_env(**overrides)

"""
Centralized error handling for the application.

Only URL validation is allowed to fail a request. Every other stage either
returns its empty value or raises one of the errors below, which the
pipeline turns into a degraded result.
"""

from typing import Optional, Dict, Any
import json

from video_analyzer.utils.logger import logging


INVALID_URL_MESSAGE = "Invalid or missing YouTube URL"
MISSING_VIDEO_ID_MESSAGE = "Unable to extract video ID"
INTERNAL_ERROR_MESSAGE = "Internal Server Error"


class VideoAnalyzerError(Exception):
    """Base class for errors raised by the analyzer."""


class VideoUrlError(VideoAnalyzerError, ValueError):
    """The submitted URL cannot be turned into a video reference."""

    message = INVALID_URL_MESSAGE

    def __init__(self, url: Optional[str] = None, message: Optional[str] = None):
        self.url = url
        if message:
            self.message = message
        super().__init__(self.message)


class InvalidVideoUrlError(VideoUrlError):
    """Empty input or a host that is not YouTube."""

    message = INVALID_URL_MESSAGE


class MissingVideoIdError(VideoUrlError):
    """YouTube URL without a recoverable video id (channel, playlist...)."""

    message = MISSING_VIDEO_ID_MESSAGE


class SummarizationError(VideoAnalyzerError):
    """The LLM summary could not be produced or parsed."""


def log_degradation(stage: str, error: BaseException, context: Optional[Dict[str, Any]] = None) -> None:
    """
    Record that an optional stage failed and a fallback value is being used.

    Args:
        stage: Name of the pipeline stage (e.g. "summarize")
        error: The exception that caused the fallback
        context: Extra values worth logging (video id, url...)
    """
    details = f" {json.dumps(context, default=str)}" if context else ""
    logging.warning(f"[{stage}] degraded to fallback: {type(error).__name__}: {error}{details}")


def log_diagnostic_info(context: Dict[str, Any], debug: bool = False):
    """
    Log diagnostic information for debugging.

    Args:
        context: Dictionary of diagnostic information
        debug: Only logs when True
    """
    if not debug:
        return

    try:
        logging.info(f"Diagnostic info: {json.dumps(context, default=str)}")
    except (TypeError, ValueError) as e:
        logging.error(f"Error logging diagnostic info: {str(e)}")

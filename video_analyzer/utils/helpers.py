"""
Helper utility functions for the video analyzer.
"""

import re


TRUNCATION_MARKER = "\n…[truncated]"

_CODE_FENCE_START = re.compile(r"^```(json)?", re.IGNORECASE)
_CODE_FENCE_END = re.compile(r"```$")


def truncate_text(text: str, max_length: int = 8000, suffix: str = TRUNCATION_MARKER) -> str:
    """
    Truncate text to a maximum length.

    The suffix is appended after the cut so the reader can see that the
    text was shortened.

    Args:
        text: Text to truncate
        max_length: Maximum length kept from the original text
        suffix: Suffix to add if truncated

    Returns:
        Truncated text
    """
    if not text:
        return ""
    if len(text) <= max_length:
        return text
    return text[:max_length] + suffix


def strip_code_fence(text: str) -> str:
    """Remove a leading ```/```json marker and a trailing ``` from model output."""
    cleaned = _CODE_FENCE_START.sub("", str(text))
    cleaned = _CODE_FENCE_END.sub("", cleaned)
    return cleaned.strip()


def collapse_whitespace(text: str) -> str:
    """Replace every run of whitespace with a single space."""
    return re.sub(r"\s+", " ", text or "").strip()

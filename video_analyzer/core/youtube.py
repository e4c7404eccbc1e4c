"""
YouTube URL resolution and oEmbed metadata lookup.
"""

import re
from typing import Optional
from urllib.parse import urlsplit, parse_qs

import httpx

from video_analyzer.models.schemas import VideoRef, VideoMeta
from video_analyzer.utils.error_handling import InvalidVideoUrlError, MissingVideoIdError
from video_analyzer.utils.logger import logging


YOUTUBE_URL_RE = re.compile(r"^(https?://)?(www\.)?(youtube\.com|youtu\.be)/", re.IGNORECASE)
SHORT_LINK_HOST = "youtu.be"

# Some collaborators refuse requests without a browser-like agent
BROWSER_HEADERS = {"User-Agent": "Mozilla/5.0"}


def is_youtube_url(url: str) -> bool:
    """Check that the string points at youtube.com or youtu.be."""
    return bool(url) and bool(YOUTUBE_URL_RE.match(url))


def extract_video_id(url: str) -> Optional[str]:
    """
    Extract the video ID from a YouTube URL.

    Precedence: short-link path, then the ``v`` query parameter, then the
    segment after ``embed``. Returns None when none applies or the URL
    cannot be parsed as an absolute URL (schemeless input included).
    """
    try:
        parts = urlsplit(url)
        hostname = parts.hostname or ""
    except ValueError:
        return None

    if not parts.scheme or not hostname:
        return None

    segments = parts.path.split("/")

    if hostname == SHORT_LINK_HOST or hostname.endswith("." + SHORT_LINK_HOST):
        return segments[1] if len(segments) > 1 and segments[1] else None

    v = parse_qs(parts.query).get("v")
    if v and v[0]:
        return v[0]

    if "embed" in segments:
        idx = segments.index("embed")
        if idx + 1 < len(segments) and segments[idx + 1]:
            return segments[idx + 1]

    return None


def resolve_video_url(raw: Optional[str]) -> VideoRef:
    """
    Validate a user supplied URL and build a VideoRef.

    Args:
        raw: URL as received from the caller

    Returns:
        VideoRef with a non-empty video id

    Raises:
        InvalidVideoUrlError: empty input or not a YouTube host
        MissingVideoIdError: YouTube host without a recoverable id
    """
    url = (raw or "").strip()
    if not url or not is_youtube_url(url):
        raise InvalidVideoUrlError(url)

    video_id = extract_video_id(url)
    if not video_id:
        raise MissingVideoIdError(url)

    return VideoRef(url=url, video_id=video_id)


async def fetch_video_meta(client: httpx.AsyncClient, video_url: str, oembed_endpoint: str) -> VideoMeta:
    """
    Look up title and channel through oEmbed.

    Never raises: any failure yields ``VideoMeta.empty()``.
    """
    try:
        response = await client.get(
            oembed_endpoint,
            params={"format": "json", "url": video_url},
            headers=BROWSER_HEADERS,
        )
        response.raise_for_status()
        data = response.json()
    except Exception as e:
        logging.warning(f"oEmbed lookup failed for {video_url}: {e}")
        return VideoMeta.empty()

    if not isinstance(data, dict):
        logging.warning(f"oEmbed returned unexpected payload for {video_url}")
        return VideoMeta.empty()

    meta = VideoMeta(
        title=_text_or_none(data.get("title")),
        channel=_text_or_none(data.get("author_name")),
    )
    logging.info(f"oEmbed title='{meta.title}' channel='{meta.channel}'")
    return meta


def _text_or_none(value) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text or None

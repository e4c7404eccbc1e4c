"""
Module for fetching video transcripts from the transcript endpoint.
"""

from typing import Any, List

import httpx

from video_analyzer.core.youtube import BROWSER_HEADERS
from video_analyzer.utils.logger import logging


def join_segments(segments: List[Any]) -> str:
    """
    Join transcript segments into a single text.

    Segments keep their source order; every segment contributes one line,
    even when it is empty or repeated.
    """
    lines = []
    for segment in segments:
        text = segment.get("text") if isinstance(segment, dict) else None
        lines.append("" if text is None else str(text))
    return "\n".join(lines)


async def fetch_transcript(client: httpx.AsyncClient, video_id: str, transcript_endpoint: str) -> str:
    """
    Fetch the transcript of a video.

    Args:
        client: HTTP client used for the request
        video_id: YouTube video id
        transcript_endpoint: Base URL of the transcript service

    Returns:
        Transcript text, or "" when no transcript is available
    """
    logging.info(f"Fetching transcript for {video_id}")
    try:
        response = await client.get(
            transcript_endpoint,
            params={"server_vid2": video_id},
            headers=BROWSER_HEADERS,
        )
        response.raise_for_status()
        data = response.json()
    except Exception as e:
        logging.warning(f"Transcript unavailable for {video_id}: {e}")
        return ""

    if not isinstance(data, list) or not any(isinstance(segment, dict) for segment in data):
        logging.warning(f"Transcript service returned no segments for {video_id}")
        return ""

    transcript = join_segments(data)
    logging.info(f"Transcript ok length={len(transcript)} segments={len(data)} for {video_id}")
    return transcript

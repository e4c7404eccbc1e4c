"""
Tests for the transcript fetcher.
"""

import httpx
import pytest

from video_analyzer.core.transcriber import fetch_transcript, join_segments


TRANSCRIPTS = "https://transcripts.test/"


def test_join_segments_keeps_order_and_duplicates():
    segments = [{"text": "one"}, {"text": "two"}, {"text": "two"}, {"text": "three"}]
    assert join_segments(segments) == "one\ntwo\ntwo\nthree"


def test_join_segments_without_text():
    assert join_segments([{"text": "a"}, {"start": 1.0}, "junk", {"text": "b"}]) == "a\n\n\nb"


@pytest.mark.asyncio
async def test_fetch_transcript_success(make_client):
    seen = {}

    def handler(request):
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json=[
            {"text": "First line.", "start": 0.0, "dur": 1.2},
            {"text": "  Second line  ", "start": 1.2, "dur": 2.0},
        ])

    async with make_client(handler) as client:
        transcript = await fetch_transcript(client, "abc123", TRANSCRIPTS)

    assert transcript == "First line.\n  Second line  "
    assert seen["params"] == {"server_vid2": "abc123"}


@pytest.mark.asyncio
async def test_fetch_transcript_empty_list(make_client):
    async with make_client(lambda request: httpx.Response(200, json=[])) as client:
        assert await fetch_transcript(client, "abc123", TRANSCRIPTS) == ""


@pytest.mark.asyncio
@pytest.mark.parametrize("response", [
    httpx.Response(404),
    httpx.Response(503, json=[{"text": "ignored"}]),
    httpx.Response(200, json={"error": "video unavailable"}),
    httpx.Response(200, text="<transcript><text>xml</text></transcript>"),
])
async def test_fetch_transcript_bad_responses(make_client, response):
    async with make_client(lambda request: response) as client:
        assert await fetch_transcript(client, "abc123", TRANSCRIPTS) == ""


@pytest.mark.asyncio
async def test_fetch_transcript_transport_error(make_client, failing_handler):
    async with make_client(failing_handler) as client:
        assert await fetch_transcript(client, "abc123", TRANSCRIPTS) == ""


@pytest.mark.asyncio
async def test_fetch_transcript_timeout(make_client):
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    async with make_client(handler) as client:
        assert await fetch_transcript(client, "abc123", TRANSCRIPTS) == ""


@pytest.mark.asyncio
async def test_fetch_transcript_list_without_segments(make_client):
    async with make_client(lambda request: httpx.Response(200, json=["a", "b"])) as client:
        assert await fetch_transcript(client, "abc123", TRANSCRIPTS) == ""

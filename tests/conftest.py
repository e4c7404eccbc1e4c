"""
Configuration for pytest tests.
"""

import json

import httpx
import pytest
from unittest.mock import MagicMock, AsyncMock

from langchain_core.messages import AIMessage

from video_analyzer.config import Config


OEMBED_URL = "https://oembed.test/oembed"
TRANSCRIPT_URL = "https://transcripts.test/"


@pytest.fixture
def config():
    """Configuration without any credentials."""
    return Config(OEMBED_URL=OEMBED_URL, TRANSCRIPT_URL=TRANSCRIPT_URL, HTTP_TIMEOUT=5)


@pytest.fixture
def llm_config():
    """Configuration with both AI services switched on."""
    return Config(
        OEMBED_URL=OEMBED_URL,
        TRANSCRIPT_URL=TRANSCRIPT_URL,
        HTTP_TIMEOUT=5,
        OPENAI_API_KEY="test_openai_key",
        PERPLEXITY_API_KEY="test_pplx_key",
    )


@pytest.fixture
def make_client():
    """Build an AsyncClient whose requests are answered by a handler."""
    def _make(handler):
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return _make


@pytest.fixture
def failing_handler():
    """Handler that fails every request at the transport level."""
    def _handler(request):
        raise httpx.ConnectError("connection refused", request=request)
    return _handler


@pytest.fixture
def collaborators_handler():
    """Handler answering oEmbed and transcript requests successfully."""
    def _handler(request):
        if request.url.host == "oembed.test":
            return httpx.Response(200, json={"title": "Test Video", "author_name": "Test Channel"})
        if request.url.host == "transcripts.test":
            return httpx.Response(200, json=[
                {"text": "Hello and welcome.", "start": 0.0},
                {"text": "Today we talk about testing.", "start": 2.5},
            ])
        return httpx.Response(404)
    return _handler


@pytest.fixture
def mock_chat_model():
    """A chat model whose ainvoke answer can be set per test."""
    model = MagicMock()
    model.bind.return_value = model
    model.ainvoke = AsyncMock(return_value=AIMessage(content="{}"))
    return model


@pytest.fixture
def llm_answer():
    """Wrap a payload as the chat model would return it."""
    def _answer(payload):
        content = payload if isinstance(payload, str) else json.dumps(payload)
        return AIMessage(content=content)
    return _answer

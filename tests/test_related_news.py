"""
Tests for the related news finder.
"""

import pytest
from unittest.mock import patch

from video_analyzer.core.related_news import RelatedNewsFinder, parse_related_articles
from video_analyzer.models.schemas import RelatedArticle


URL = "https://youtu.be/abc123"
ARTICLE = RelatedArticle(title="A", description="B", link="C")


@pytest.fixture
def patched_init_chat_model(mock_chat_model):
    with patch("video_analyzer.core.related_news.init_chat_model") as mock_init:
        mock_init.return_value = mock_chat_model
        yield mock_init


def test_parse_fenced_array_matches_unfenced():
    fenced = '```json\n[{"title":"A","description":"B","link":"C"}]\n```'
    unfenced = '[{"title":"A","description":"B","link":"C"}]'

    assert parse_related_articles(fenced) == [ARTICLE]
    assert parse_related_articles(fenced) == parse_related_articles(unfenced)


def test_parse_plain_fence():
    assert parse_related_articles('```\n[{"title":"A","description":"B","link":"C"}]\n```') == [ARTICLE]


def test_parse_object_with_items():
    content = '{"items": [{"title":"A","description":"B","link":"C"}]}'
    assert parse_related_articles(content) == [ARTICLE]


@pytest.mark.parametrize("content", [
    "",
    None,
    "I could not find any related articles.",
    '{"articles": []}',
    '{"items": "none"}',
    '"just a string"',
])
def test_parse_unusable_content(content):
    assert parse_related_articles(content) == []


def test_parse_keeps_order_and_caps_at_five():
    items = ",".join(f'{{"title":"T{i}","description":"D{i}","link":"L{i}"}}' for i in range(7))
    articles = parse_related_articles(f"[{items}]")

    assert [a.title for a in articles] == ["T0", "T1", "T2", "T3", "T4"]


def test_parse_fills_missing_fields_and_skips_junk():
    articles = parse_related_articles('[{"title": "Only title"}, "junk", {"link": "L", "extra": 1}]')

    assert articles == [
        RelatedArticle(title="Only title", description="", link=""),
        RelatedArticle(title="", description="", link="L"),
    ]


@pytest.mark.asyncio
async def test_find_related_without_key(config, patched_init_chat_model):
    finder = RelatedNewsFinder(config)

    assert await finder.find_related("Title", ["bullet"], URL) == []
    patched_init_chat_model.assert_not_called()


@pytest.mark.asyncio
async def test_find_related_success(llm_config, patched_init_chat_model, mock_chat_model, llm_answer):
    mock_chat_model.ainvoke.return_value = llm_answer('```json\n[{"title":"A","description":"B","link":"C"}]\n```')

    finder = RelatedNewsFinder(llm_config)
    articles = await finder.find_related("Title", ["first point", "second point"], URL)

    assert articles == [ARTICLE]
    kwargs = patched_init_chat_model.call_args.kwargs
    assert kwargs["model"] == "sonar-pro"
    assert kwargs["base_url"] == "https://api.perplexity.ai"
    assert kwargs["api_key"] == "test_pplx_key"

    system_message, user_message = mock_chat_model.ainvoke.call_args.args[0]
    assert "Always return only JSON." in system_message.content
    assert "Title: Title" in user_message.content
    assert f"URL: {URL}" in user_message.content
    assert "- first point\n- second point" in user_message.content


@pytest.mark.asyncio
async def test_find_related_call_failure(llm_config, patched_init_chat_model, mock_chat_model):
    mock_chat_model.ainvoke.side_effect = RuntimeError("Perplexity error 429")

    finder = RelatedNewsFinder(llm_config)

    assert await finder.find_related("Title", ["bullet"], URL) == []


@pytest.mark.asyncio
async def test_find_related_unparsable_answer(llm_config, patched_init_chat_model, mock_chat_model, llm_answer):
    mock_chat_model.ainvoke.return_value = llm_answer("Here are some articles: none")

    finder = RelatedNewsFinder(llm_config)

    assert await finder.find_related("Title", [], URL) == []

"""
Module for finding news articles related to a summarized video.
"""

import json
from typing import List, Optional, Sequence

from langchain.chat_models import init_chat_model

from video_analyzer.config import Config
from video_analyzer.core.prompts import related_prompt
from video_analyzer.models.schemas import RelatedArticle
from video_analyzer.utils.helpers import strip_code_fence
from video_analyzer.utils.logger import logging


MAX_RELATED_ARTICLES = 5


def parse_related_articles(content) -> List[RelatedArticle]:
    """
    Parse the model answer into articles.

    Accepts a JSON array, optionally wrapped in a code fence, or an object
    with an ``items`` array. Anything else yields an empty list.
    """
    cleaned = strip_code_fence(content or "[]")
    try:
        data = json.loads(cleaned)
    except ValueError:
        logging.warning("Related news answer is not valid JSON")
        return []

    if isinstance(data, dict):
        data = data.get("items")
    if not isinstance(data, list):
        return []

    articles = [RelatedArticle.model_validate(item) for item in data if isinstance(item, dict)]
    return articles[:MAX_RELATED_ARTICLES]


class RelatedNewsFinder:
    """Searches related news through the Perplexity chat-completion API."""

    def __init__(self, config: Config):
        self.config = config
        self.llm = None
        if config.related_news_enabled:
            self.llm = init_chat_model(
                model=config.PPLX_MODEL,
                model_provider="openai",
                api_key=config.PERPLEXITY_API_KEY,
                base_url=config.PERPLEXITY_BASE_URL,
                temperature=0.2,
                timeout=config.HTTP_TIMEOUT,
                max_retries=0,
            )

    async def find_related(self, title: Optional[str], bullets: Sequence[str], url: str) -> List[RelatedArticle]:
        """
        Find 3-5 articles related to the video.

        Never raises: returns [] without a key or on any failure.
        """
        if self.llm is None:
            return []

        messages = related_prompt.format_messages(
            title=title or "",
            url=url,
            bullets="\n- ".join(bullets),
        )
        try:
            response = await self.llm.ainvoke(messages)
            articles = parse_related_articles(response.content)
        except Exception as e:
            logging.warning(f"Related news lookup failed for {url}: {e}")
            return []

        logging.info(f"Found {len(articles)} related articles for {url}")
        return articles

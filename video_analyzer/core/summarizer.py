"""
Module for summarizing transcripts, with an LLM or with a local fallback.
"""

import json
import re
from abc import ABC, abstractmethod
from typing import List, Optional

from langchain.chat_models import init_chat_model
from pydantic import ValidationError

from video_analyzer.config import Config
from video_analyzer.core.prompts import summary_prompt
from video_analyzer.models.schemas import SummaryResult
from video_analyzer.utils.error_handling import SummarizationError
from video_analyzer.utils.helpers import truncate_text, collapse_whitespace
from video_analyzer.utils.logger import logging


MAX_TRANSCRIPT_CHARS = 8000
MAX_FALLBACK_SENTENCES = 36
SENTENCES_PER_PARAGRAPH = 5

SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")


def default_greeting() -> str:
    return "Análise concluída! Aqui estão os principais pontos do vídeo."


def default_bullets(transcript: str, title: Optional[str]) -> List[str]:
    bullets = []
    if title:
        bullets.append(f"Resumo automático do vídeo: {title}")
    if transcript:
        bullets.append("Transcrição obtida; análise resumida indisponível sem OpenAI.")
    if not bullets:
        bullets.append("Não foi possível gerar o resumo.")
    return bullets


def default_narrative(transcript: str, title: Optional[str]) -> str:
    """
    Build a narrative from the first sentences of the transcript.

    At most 36 sentences are kept, grouped five per paragraph; the title
    opens the first paragraph when known.
    """
    if transcript:
        sentences = [s for s in SENTENCE_BOUNDARY.split(collapse_whitespace(transcript)) if s]
        sentences = sentences[:MAX_FALLBACK_SENTENCES]
        paragraphs = [
            " ".join(sentences[i:i + SENTENCES_PER_PARAGRAPH])
            for i in range(0, len(sentences), SENTENCES_PER_PARAGRAPH)
        ]
        header = f"{title}. " if title else ""
        first = paragraphs[0] if paragraphs else ""
        return "\n\n".join([header + first] + paragraphs[1:])

    if title:
        return f"Resumo do vídeo: {title}. O conteúdo não pôde ser transcrito automaticamente."
    return "Resumo indisponível."


def fallback_summary(transcript: str, title: Optional[str]) -> SummaryResult:
    """Deterministic summary used when no LLM is available or it failed."""
    return SummaryResult(
        greeting=default_greeting(),
        bullets=default_bullets(transcript, title),
        narrative=default_narrative(transcript, title),
    )


class BaseSummarizer(ABC):
    """Common interface of the summarizers; callers never know which one ran."""

    @abstractmethod
    async def summarize(
        self,
        transcript: str,
        title: Optional[str],
        channel: Optional[str],
        url: str,
    ) -> SummaryResult:
        """Summarize a transcript into greeting, bullets and narrative."""


class FallbackSummarizer(BaseSummarizer):
    """Summarizer that works without any credentials."""

    async def summarize(self, transcript, title, channel, url) -> SummaryResult:
        return fallback_summary(transcript, title)


class LLMSummarizer(BaseSummarizer):
    """Class to handle transcript summarization through an OpenAI chat model."""

    def __init__(self, config: Config):
        """
        Initialize the summarizer.

        Args:
            config: Application configuration holding the OpenAI key and model
        """
        if not config.OPENAI_API_KEY:
            raise ValueError("OpenAI API key is required for LLM summaries.")

        self.model_name = config.OPENAI_SUMMARY_MODEL
        llm = init_chat_model(
            model=config.OPENAI_SUMMARY_MODEL,
            model_provider="openai",
            api_key=config.OPENAI_API_KEY,
            temperature=0.4,
            timeout=config.HTTP_TIMEOUT,
            max_retries=0,
        )
        self.llm = llm.bind(response_format={"type": "json_object"})

    async def summarize(self, transcript, title, channel, url) -> SummaryResult:
        """
        Summarize a transcript with the LLM.

        Raises:
            SummarizationError: the call failed or the answer is not the
                expected JSON shape
        """
        messages = summary_prompt.format_messages(
            title=title or "Unknown",
            channel=channel or "Unknown",
            url=url,
            transcript=truncate_text(transcript, MAX_TRANSCRIPT_CHARS),
        )

        logging.info(f"Requesting summary from {self.model_name} (transcript chars={len(transcript)})")
        try:
            response = await self.llm.ainvoke(messages)
        except Exception as e:
            raise SummarizationError(f"Summary request failed: {e}") from e

        return parse_summary(response.content)


def parse_summary(content) -> SummaryResult:
    """Parse the JSON answer of the LLM into a SummaryResult."""
    if not content or not isinstance(content, str):
        raise SummarizationError("Summary model returned empty content")

    try:
        return SummaryResult.model_validate(json.loads(content))
    except (ValueError, ValidationError) as e:
        raise SummarizationError(f"Summary model returned malformed JSON: {e}") from e


def build_summarizer(config: Config) -> BaseSummarizer:
    """Pick the LLM summarizer when an OpenAI key is configured."""
    if config.summarization_enabled:
        return LLMSummarizer(config)
    return FallbackSummarizer()

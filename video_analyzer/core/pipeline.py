"""
Pipeline that turns a YouTube URL into the analysis payload.
"""

from typing import List, Optional

import httpx

from video_analyzer.api.schemas import AnalysisResponse, ResponseMeta
from video_analyzer.config import Config
from video_analyzer.core.related_news import RelatedNewsFinder
from video_analyzer.core.summarizer import BaseSummarizer, build_summarizer, fallback_summary
from video_analyzer.core.transcriber import fetch_transcript
from video_analyzer.core.youtube import resolve_video_url, fetch_video_meta
from video_analyzer.models.schemas import SummaryResult, RelatedArticle
from video_analyzer.utils.error_handling import log_degradation, log_diagnostic_info
from video_analyzer.utils.logger import logging


class VideoAnalysisPipeline:
    """
    Runs the analysis stages in order: validate, enrich, transcribe,
    summarize, relate, assemble.

    Only validation may fail the request (``VideoUrlError``). The other
    stages fall back to empty values or to the local summary.
    """

    def __init__(
        self,
        config: Config,
        http_client: Optional[httpx.AsyncClient] = None,
        summarizer: Optional[BaseSummarizer] = None,
        related_finder: Optional[RelatedNewsFinder] = None,
    ):
        self.config = config
        self.http_client = http_client
        self.summarizer = summarizer or build_summarizer(config)
        self.related_finder = related_finder or RelatedNewsFinder(config)

    async def analyze(self, raw_url: Optional[str]) -> AnalysisResponse:
        """
        Analyze a video.

        Args:
            raw_url: URL submitted by the caller

        Returns:
            AnalysisResponse ready to be serialized

        Raises:
            VideoUrlError: the URL is invalid or has no video id
        """
        video = resolve_video_url(raw_url)
        logging.info(f"Analyzing video {video.video_id} ({video.url})")

        if self.http_client is not None:
            return await self._run(video, self.http_client)

        async with httpx.AsyncClient(timeout=self.config.HTTP_TIMEOUT, follow_redirects=True) as client:
            return await self._run(video, client)

    async def _run(self, video, client: httpx.AsyncClient) -> AnalysisResponse:
        meta = await fetch_video_meta(client, video.url, self.config.OEMBED_URL)
        transcript = await fetch_transcript(client, video.video_id, self.config.TRANSCRIPT_URL)

        summary = await self._summarize(transcript, meta.title, meta.channel, video.url)
        related = await self._find_related(meta.title, summary.bullets, video.url)

        log_diagnostic_info(
            {
                "video_id": video.video_id,
                "has_title": meta.title is not None,
                "transcript_chars": len(transcript),
                "bullets": len(summary.bullets),
                "related": len(related),
            },
            debug=self.config.DEBUG,
        )

        return AnalysisResponse(
            greeting=summary.greeting,
            summary=summary.bullets,
            summary_text=summary.narrative,
            transcript=transcript,
            related_news=related,
            meta=ResponseMeta(title=meta.title, channel=meta.channel, video_id=video.video_id),
        )

    async def _summarize(self, transcript: str, title, channel, url: str) -> SummaryResult:
        try:
            return await self.summarizer.summarize(transcript, title, channel, url)
        except Exception as e:
            log_degradation("summarize", e, {"url": url})
            return fallback_summary(transcript, title)

    async def _find_related(self, title, bullets: List[str], url: str) -> List[RelatedArticle]:
        try:
            return await self.related_finder.find_related(title or "", bullets, url)
        except Exception as e:
            log_degradation("relate", e, {"url": url})
            return []

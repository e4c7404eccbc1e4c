from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List

from video_analyzer.models.schemas import RelatedArticle


class AnalyzeRequest(BaseModel):
    """Model for requesting a video analysis."""
    url: Optional[str] = None


class ResponseMeta(BaseModel):
    """Video metadata echoed back to the caller."""
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    channel: Optional[str] = None
    video_id: str = Field(alias="videoId")


class AnalysisResponse(BaseModel):
    """Model for analysis responses; serialized with camelCase keys."""
    model_config = ConfigDict(populate_by_name=True)

    greeting: str
    summary: List[str]
    summary_text: str = Field(alias="summaryText")
    transcript: str = ""
    related_news: List[RelatedArticle] = Field(default_factory=list, alias="relatedNews")
    meta: ResponseMeta


class ErrorResponse(BaseModel):
    """Body of every error response."""
    error: str

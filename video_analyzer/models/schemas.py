"""
Data models for the video analyzer.
"""
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field, field_validator


class VideoRef(BaseModel):
    """A validated YouTube URL and the video id extracted from it."""
    model_config = ConfigDict(frozen=True)

    url: str
    video_id: str = Field(min_length=1)


class VideoMeta(BaseModel):
    """Title and channel from oEmbed; both may be unknown."""
    title: Optional[str] = None
    channel: Optional[str] = None

    @classmethod
    def empty(cls) -> "VideoMeta":
        return cls(title=None, channel=None)


class SummaryResult(BaseModel):
    """
    Three-part summary of a video.

    The LLM answers with the keys ``greeting``, ``summary`` and
    ``summary_text``; those are accepted as aliases of the field names.
    """
    model_config = ConfigDict(populate_by_name=True)

    greeting: str
    bullets: List[str] = Field(alias="summary")
    narrative: str = Field(alias="summary_text")

    @field_validator("bullets")
    def strip_blank_bullets(cls, v):
        return [b for b in v if b and b.strip()]


class RelatedArticle(BaseModel):
    """A news article related to the video."""
    title: str = ""
    description: str = ""
    link: str = ""

    @field_validator("title", "description", "link", mode="before")
    def coerce_to_text(cls, v):
        if v is None:
            return ""
        return str(v)

from .schemas import VideoRef, VideoMeta, SummaryResult, RelatedArticle

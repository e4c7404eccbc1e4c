"""
API routes for the video analyzer.
"""

import traceback

from fastapi import APIRouter, HTTPException, Depends, Request

from video_analyzer.api.schemas import AnalyzeRequest, AnalysisResponse
from video_analyzer.core.pipeline import VideoAnalysisPipeline
from video_analyzer.utils.error_handling import VideoUrlError, INTERNAL_ERROR_MESSAGE
from video_analyzer.utils.logger import logging

router = APIRouter(prefix="/api", tags=["analyze"])


def get_pipeline(request: Request) -> VideoAnalysisPipeline:
    """The pipeline built by create_app for this application."""
    return request.app.state.pipeline


@router.post("/analyze", response_model=AnalysisResponse)
async def analyze_video(
    request: AnalyzeRequest,
    pipeline: VideoAnalysisPipeline = Depends(get_pipeline),
):
    """
    Analyze a YouTube video by URL.

    - 400 when the URL is invalid or has no video id
    - 500 with a generic message on unexpected failures
    - 200 with best-effort content otherwise
    """
    try:
        return await pipeline.analyze(request.url)
    except VideoUrlError as e:
        logging.info(f"Rejected url {request.url!r}: {e.message}")
        raise HTTPException(status_code=400, detail=e.message)
    except Exception as e:
        logging.error(f"Error analyzing {request.url!r}: {str(e)}")
        logging.error(traceback.format_exc())
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR_MESSAGE)

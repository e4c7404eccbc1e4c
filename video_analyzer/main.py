"""
Command line entry point for the video analyzer.
"""

import argparse
import asyncio
import json
import sys
from typing import Optional

from video_analyzer.api.schemas import AnalysisResponse
from video_analyzer.config import Config, get_config
from video_analyzer.core.pipeline import VideoAnalysisPipeline
from video_analyzer.utils.error_handling import VideoUrlError
from video_analyzer.utils.logger import logging, set_log_level


async def analyze_youtube_video(url: str, config: Optional[Config] = None) -> AnalysisResponse:
    """
    Analyze one YouTube video.

    Args:
        url: YouTube video URL
        config: Configuration; read from the environment when omitted

    Returns:
        AnalysisResponse object
    """
    config = config or get_config()
    pipeline = VideoAnalysisPipeline(config)
    return await pipeline.analyze(url)


def main(argv=None) -> int:
    """Main function to run the analyzer from the command line."""
    parser = argparse.ArgumentParser(description="YouTube Video Analyzer")
    parser.add_argument("url", help="YouTube video URL")
    parser.add_argument("--output", help="Write the JSON result to this file instead of stdout")
    parser.add_argument("--no-transcript", action="store_true",
                        help="Leave the transcript out of the printed result")

    args = parser.parse_args(argv)

    config = get_config()
    set_log_level(config.LOG_LEVEL)
    config.warn_missing_credentials()

    try:
        result = asyncio.run(analyze_youtube_video(args.url, config))
    except VideoUrlError as e:
        print(json.dumps({"error": e.message}, ensure_ascii=False), file=sys.stderr)
        return 2

    payload = result.model_dump(by_alias=True)
    if args.no_transcript:
        payload.pop("transcript", None)

    text = json.dumps(payload, indent=2, ensure_ascii=False)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text)
        logging.info(f"Analysis saved to: {args.output}")
    else:
        print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())

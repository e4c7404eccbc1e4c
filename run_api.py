"""
FastAPI server entry point for the video analyzer.
"""

import os
import argparse
import uvicorn
from dotenv import load_dotenv


def main():
    """Run the FastAPI server."""
    # Load environment variables
    load_dotenv()

    # Parse command line arguments
    parser = argparse.ArgumentParser(description="YouTube Video Analyzer API")
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind the server to")
    parser.add_argument("--port", type=int, default=int(os.getenv("PORT", "3001")),
                        help="Port to bind the server to")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload for development")
    args = parser.parse_args()

    from video_analyzer.config import get_config
    config = get_config()

    # Print startup info
    print(f"Starting {config.APP_NAME} API server v{config.APP_VERSION}")
    print(f"Environment: {os.getenv('ENVIRONMENT', 'development')}")
    print(f"Binding to: {args.host}:{args.port}")

    # Run the server
    uvicorn.run(
        "video_analyzer.api.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()

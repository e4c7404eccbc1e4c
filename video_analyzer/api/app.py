"""
FastAPI application for the video analyzer.
"""

import time
import traceback
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from video_analyzer.config import Config, get_config
from video_analyzer.api.routes import router
from video_analyzer.core.pipeline import VideoAnalysisPipeline
from video_analyzer.utils.error_handling import INVALID_URL_MESSAGE, INTERNAL_ERROR_MESSAGE
from video_analyzer.utils.logger import logging, set_log_level


def create_app(config: Optional[Config] = None, pipeline: Optional[VideoAnalysisPipeline] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: Configuration; read from the environment when omitted
        pipeline: Pipeline to serve; built from the configuration when omitted
    """
    config = config or get_config()
    set_log_level(config.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Report which optional services are configured."""
        logging.info(f"Starting {config.APP_NAME} v{config.APP_VERSION}")
        config.warn_missing_credentials()
        if config.CORS_ORIGIN != "*":
            logging.info(f"CORS origin: {config.CORS_ORIGIN}")
        yield

    app = FastAPI(
        title=config.APP_NAME,
        version=config.APP_VERSION,
        description="An API for summarizing YouTube videos and finding related news",
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.pipeline = pipeline or VideoAnalysisPipeline(config)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[config.CORS_ORIGIN],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
        max_age=86400,
    )

    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        """Middleware to add processing time header to responses."""
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)
        return response

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Unreadable bodies are treated like a missing URL."""
        logging.info(f"Rejected request body on {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=400, content={"error": INVALID_URL_MESSAGE})

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler for unhandled exceptions."""
        logging.error(f"{request.method} {request.url.path} failed: {exc}")
        logging.error("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)))
        return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR_MESSAGE})

    app.include_router(router)

    @app.get("/health")
    async def health():
        return {"ok": True}

    @app.get("/")
    async def root():
        """Root endpoint returning basic API information."""
        return {
            "name": config.APP_NAME,
            "version": config.APP_VERSION,
            "description": "YouTube Video Analyzer API",
        }

    return app

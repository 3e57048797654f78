"""FastAPI application exposing the subtitles endpoint.

WHY: Browser front-ends need one HTTP call that turns a YouTube URL into
ready-to-download SRT and plain-text subtitles. FastAPI provides request
parsing, response validation, and automatic OpenAPI documentation.

HOW: ``/api/subtitles`` validates the URL, lists the video's caption tracks
through a YouTubeClient dependency, and runs the per-track pipeline. Known
request-level failures map to their status codes; anything else is logged
with its traceback and returned as a generic 500. An HTTP middleware stamps
permissive CORS headers on every response, and the OPTIONS route answers
preflight requests with an empty 200.

RULES:
- Error bodies are ``{"error": "..."}``; internal details are never returned
- 400 invalid/missing URL; 404 video missing, no tracks, or no usable tracks
- Every response carries CORS_HEADERS from config
- The YouTube client comes from get_youtube_client() so tests can override it
- Python 3.9+ compatible (no match/case, no PEP 604 unions)
"""

from __future__ import annotations

import logging
from typing import Annotated, AsyncIterator, List, Optional

from fastapi import Depends, FastAPI, Query, Request
from fastapi.responses import JSONResponse, Response

from yt_subtitles import __version__
from yt_subtitles.config import API_HOST, API_PORT, CORS_HEADERS
from yt_subtitles.core.pipeline import fetch_subtitles
from yt_subtitles.errors import RequestError
from yt_subtitles.formatters import FORMATTERS
from yt_subtitles.server.models import (
    ErrorResponse,
    FormatInfo,
    HealthResponse,
    SubtitlesResponse,
)
from yt_subtitles.youtube.client import YouTubeClient
from yt_subtitles.youtube.urls import INVALID_URL_MESSAGE, is_valid_url

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal server error occurred."

app = FastAPI(
    title="YouTube Subtitles API",
    description=(
        "Fetch a YouTube video's caption tracks and return each one as SRT "
        "and plain text, split into original and translatable tracks."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ---------------------------------------------------------------------------
# Middleware and dependencies
# ---------------------------------------------------------------------------


@app.middleware("http")
async def add_cors_headers(request: Request, call_next):  # noqa: ANN001
    """Attach permissive CORS headers to every response."""
    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


async def get_youtube_client() -> AsyncIterator[YouTubeClient]:
    """Provide a YouTubeClient scoped to one request."""
    async with YouTubeClient() as client:
        yield client


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


# ---------------------------------------------------------------------------
# Endpoints: Subtitles
# ---------------------------------------------------------------------------


@app.api_route(
    "/api/subtitles",
    methods=["GET", "POST"],
    response_model=SubtitlesResponse,
    tags=["subtitles"],
    summary="Get a video's subtitles",
    description=(
        "Lists the video's caption tracks, downloads each one, and renders it "
        "as SRT and plain text. Tracks that fail to download or parse are "
        "skipped; the request fails only when no track succeeds."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid YouTube URL"},
        404: {"model": ErrorResponse, "description": "Video, tracks, or usable tracks not found"},
        500: {"model": ErrorResponse, "description": "Unexpected failure"},
    },
)
async def get_subtitles(
    client: Annotated[YouTubeClient, Depends(get_youtube_client)],
    url: Annotated[
        Optional[str],
        Query(description="YouTube video URL, e.g. https://www.youtube.com/watch?v=dQw4w9WgXcQ"),
    ] = None,
):
    if not is_valid_url(url):
        return _error_response(400, INVALID_URL_MESSAGE)

    try:
        result = await fetch_subtitles(url, client)
    except RequestError as exc:
        logger.info("Subtitles request for %s failed: %s", url, exc)
        return _error_response(exc.status_code, str(exc))
    except Exception:
        logger.exception("Unexpected failure while fetching subtitles for %s", url)
        return _error_response(500, INTERNAL_ERROR_MESSAGE)

    return SubtitlesResponse.from_result(result)


@app.options("/api/subtitles", include_in_schema=False)
async def subtitles_preflight() -> Response:
    return Response(status_code=200)


# ---------------------------------------------------------------------------
# Endpoints: Formats
# ---------------------------------------------------------------------------


@app.get(
    "/api/formats",
    response_model=List[FormatInfo],
    tags=["formats"],
    summary="List output formats",
    description="Returns every format rendered for each track, keyed as in the 'formats' object.",
)
async def list_formats() -> List[FormatInfo]:
    return [
        FormatInfo(
            key=key,
            name=formatter_cls.name,
            suffix=formatter_cls.suffix,
            media_type=formatter_cls.media_type,
        )
        for key, formatter_cls in FORMATTERS.items()
    ]


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description="Liveness check for load balancers and orchestrators.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api() -> None:
    """Entry point for the yt-subtitles-api console script."""
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    uvicorn.run(app, host=API_HOST, port=API_PORT)

"""Configuration constants and .env loading.

WHY: Centralizes all configurable values so they are easy to find, update,
and override. Network timeouts, retry counts, and concurrency limits are a
deployment concern, not something buried in the client or pipeline.

HOW: python-dotenv loads the .env file on import. Constants are defined at
module level from environment variables with defaults.

RULES:
- All defaults can be overridden via environment variables
- Numeric variables that fail to parse raise ValueError naming the variable
- No secrets are needed; YouTube caption endpoints are public
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the server is run from)
load_dotenv()


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError("{} must be a number, got {!r}".format(name, raw)) from None


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError("{} must be an integer, got {!r}".format(name, raw)) from None


# ---------------------------------------------------------------------------
# YouTube access
# ---------------------------------------------------------------------------

USER_AGENT = os.getenv(
    "YT_SUBTITLES_USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0 Safari/537.36",
)
ACCEPT_LANGUAGE = os.getenv("YT_SUBTITLES_ACCEPT_LANGUAGE", "en-US,en;q=0.9")

REQUEST_TIMEOUT_S = _env_float("YT_SUBTITLES_TIMEOUT_S", 15.0)
"""Upper bound in seconds on one YouTube call (listing or one track download)."""

FETCH_RETRIES = _env_int("YT_SUBTITLES_FETCH_RETRIES", 1)
"""Extra attempts per caption document after a transport error."""

MAX_CONCURRENT_TRACKS = _env_int("YT_SUBTITLES_MAX_CONCURRENCY", 4)
"""Upper bound on caption documents fetched in parallel for one request."""

# ---------------------------------------------------------------------------
# HTTP API
# ---------------------------------------------------------------------------

API_HOST = os.getenv("YT_SUBTITLES_HOST", "0.0.0.0")
API_PORT = _env_int("YT_SUBTITLES_PORT", 8000)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

"""YouTube URL validation and video id extraction."""

from __future__ import annotations

import re
from typing import Optional
from urllib.parse import parse_qs, urlsplit

from yt_subtitles.errors import InvalidInputError

VIDEO_ID_RE = re.compile(r"^[A-Za-z0-9_-]{11}$")

_YOUTUBE_HOSTS = frozenset({"youtube.com", "youtube-nocookie.com"})
_PATH_PREFIXES = frozenset({"shorts", "embed", "live", "v"})
_HOST_PREFIXES = ("www.", "m.", "music.")

INVALID_URL_MESSAGE = "Invalid YouTube video URL provided."


def _normalise_host(host: str) -> str:
    host = host.lower()
    for prefix in _HOST_PREFIXES:
        if host.startswith(prefix):
            return host[len(prefix):]
    return host


def extract_video_id(url: Optional[str]) -> str:
    """Return the 11-character video id from a YouTube URL.

    Accepts watch, youtu.be, shorts, embed, live, and /v/ URLs, with or
    without a scheme.

    Raises:
        InvalidInputError: ``url`` is empty or not a YouTube video URL.
    """
    if not url or not url.strip():
        raise InvalidInputError(INVALID_URL_MESSAGE)

    url = url.strip()
    if "://" not in url:
        url = "https://" + url

    try:
        parts = urlsplit(url)
    except ValueError:
        raise InvalidInputError(INVALID_URL_MESSAGE) from None
    if parts.scheme not in ("http", "https"):
        raise InvalidInputError(INVALID_URL_MESSAGE)

    host = _normalise_host(parts.hostname or "")
    segments = [s for s in parts.path.split("/") if s]

    video_id = None
    if host == "youtu.be" and segments:
        video_id = segments[0]
    elif host in _YOUTUBE_HOSTS:
        if segments == ["watch"]:
            video_id = parse_qs(parts.query).get("v", [None])[0]
        elif len(segments) >= 2 and segments[0] in _PATH_PREFIXES:
            video_id = segments[1]

    if not video_id or not VIDEO_ID_RE.match(video_id):
        raise InvalidInputError(INVALID_URL_MESSAGE)
    return video_id


def is_valid_url(url: Optional[str]) -> bool:
    try:
        extract_video_id(url)
    except InvalidInputError:
        return False
    return True

"""Async client for YouTube caption discovery and download.

WHY: Listing a video's caption tracks and downloading each one are the two
network steps of the service. This module keeps all YouTube access behind
one client class so the pipeline, API, and CLI only see typed CaptionTrack
values and decoded fragments.

HOW: Wraps youtube-transcript-api. list() discovers the tracks and each
Transcript's fetch() downloads one. The library is blocking (requests), so
every call runs in a worker thread via asyncio.to_thread(), bounded by
asyncio.wait_for(). YouTubeClient is an async context manager: enter it to
open a requests.Session, exit to close it.

RULES:
- Always use the async context manager (async with YouTubeClient() as client:)
- Timeout and retry counts come from config (REQUEST_TIMEOUT_S, FETCH_RETRIES)
- Only transport failures (connection errors, timeouts) are retried
- Captions disabled → empty track list; unavailable video → VideoNotFoundError
- Any other library failure → CaptionFetchError
"""

from __future__ import annotations

import asyncio
import functools
import logging
from typing import Any, Callable, List, Optional, TypeVar

import requests
from youtube_transcript_api import (
    CouldNotRetrieveTranscript,
    InvalidVideoId,
    TranscriptsDisabled,
    VideoUnavailable,
    YouTubeTranscriptApi,
)

from yt_subtitles.config import ACCEPT_LANGUAGE, FETCH_RETRIES, REQUEST_TIMEOUT_S, USER_AGENT
from yt_subtitles.core.ir import RawCueFragment
from yt_subtitles.core.parser import make_fragment
from yt_subtitles.errors import CaptionFetchError, VideoNotFoundError
from yt_subtitles.youtube.models import CaptionTrack
from yt_subtitles.youtube.urls import extract_video_id

logger = logging.getLogger(__name__)

T = TypeVar("T")

_TRANSPORT_ERRORS = (requests.ConnectionError, requests.Timeout, asyncio.TimeoutError)


def _describe(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


class YouTubeClient:
    """Async client for YouTube caption tracks.

    RULES:
    - Use as: async with YouTubeClient() as client: ...
    - retries defaults to FETCH_RETRIES, timeout to REQUEST_TIMEOUT_S
    - api is for tests; when given, no session is opened
    """

    def __init__(
        self,
        retries: Optional[int] = None,
        timeout: Optional[float] = None,
        api: Optional[Any] = None,
    ) -> None:
        self._retries = FETCH_RETRIES if retries is None else max(0, retries)
        self._timeout = REQUEST_TIMEOUT_S if timeout is None else timeout
        self._api = api
        self._session: Optional[requests.Session] = None

    async def __aenter__(self) -> YouTubeClient:
        if self._api is None:
            self._session = requests.Session()
            self._session.headers.update({"User-Agent": USER_AGENT, "Accept-Language": ACCEPT_LANGUAGE})
            self._api = YouTubeTranscriptApi(http_client=self._session)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        if self._session is not None:
            self._session.close()
            self._session = None
            self._api = None

    def _ensure_api(self) -> Any:
        """Return the active transcript API, raising if not in context manager."""
        if self._api is None:
            raise RuntimeError(
                "YouTubeClient must be used as an async context manager: "
                "async with YouTubeClient() as client: ..."
            )
        return self._api

    async def _call(self, description: str, func: Callable[[], T]) -> T:
        """Run a blocking library call in a thread, retrying transport errors."""
        attempts = self._retries + 1
        attempt = 0
        while True:
            attempt += 1
            try:
                return await asyncio.wait_for(asyncio.to_thread(func), self._timeout)
            except _TRANSPORT_ERRORS as exc:
                logger.warning(
                    "%s failed (attempt %d/%d): %s", description, attempt, attempts, _describe(exc),
                )
                if attempt >= attempts:
                    raise CaptionFetchError(
                        "{} failed: {}".format(description, _describe(exc))
                    ) from exc

    # ------------------------------------------------------------------
    # Track lister
    # ------------------------------------------------------------------

    async def list_tracks(self, video_url: str) -> List[CaptionTrack]:
        """List the caption tracks of a video.

        Manually created tracks come first, then auto-generated ones, each
        group in the order YouTube lists it.

        Raises:
            InvalidInputError: ``video_url`` is not a YouTube video URL.
            VideoNotFoundError: YouTube reports the video as unavailable.
            CaptionFetchError: The track list could not be retrieved.
        """
        video_id = extract_video_id(video_url)
        api = self._ensure_api()
        try:
            transcript_list = await self._call(
                "Listing captions of {}".format(video_id),
                functools.partial(api.list, video_id),
            )
        except TranscriptsDisabled:
            logger.info("Video %s has captions disabled", video_id)
            return []
        except (VideoUnavailable, InvalidVideoId) as exc:
            raise VideoNotFoundError("Video {} could not be found.".format(video_id)) from exc
        except CouldNotRetrieveTranscript as exc:
            raise CaptionFetchError(
                "Could not list captions of {}: {}".format(video_id, type(exc).__name__)
            ) from exc

        tracks = [CaptionTrack.from_transcript(transcript) for transcript in transcript_list]
        logger.info("Video %s lists %d caption track(s)", video_id, len(tracks))
        return tracks

    # ------------------------------------------------------------------
    # Document fetcher
    # ------------------------------------------------------------------

    async def fetch_document(self, track: CaptionTrack) -> List[RawCueFragment]:
        """Download one caption track as validated fragments.

        Formatting tags are preserved so that markup handling stays in
        the core normalisation step.

        Raises:
            CaptionFetchError: The library could not retrieve the track, or
                transport failed on every attempt.
            MalformedDocumentError: A snippet carries unusable timing.
        """
        self._ensure_api()
        if track.handle is None:
            raise CaptionFetchError("Track {} has nothing to fetch".format(track.language_label))
        try:
            fetched = await self._call(
                "Fetching {} captions".format(track.language_label),
                functools.partial(track.handle.fetch, preserve_formatting=True),
            )
        except CouldNotRetrieveTranscript as exc:
            raise CaptionFetchError(
                "Could not fetch {} captions: {}".format(track.language_label, type(exc).__name__)
            ) from exc

        return [
            make_fragment(snippet.start, snippet.duration, snippet.text, index)
            for index, snippet in enumerate(fetched)
        ]

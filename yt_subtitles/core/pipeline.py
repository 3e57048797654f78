"""Per-track fetch → parse → render pipeline and result aggregation.

WHY: A video usually lists several caption tracks, and any one of them can
fail (request error, timeout, empty or broken timed text). One bad track
must not cost the caller the others, and the response must list tracks in
the order they were discovered no matter which download finishes first.

HOW: process_track() runs one track end to end and returns a TrackOutcome
instead of raising. build_subtitles() fans the tracks out with
asyncio.gather (bounded by a semaphore), which keeps one result slot per
track in input order, then aggregate() buckets the successful tracks into
originals and translations.

RULES:
- Empty track list → NoTracksError, before any fetch
- Track failures are logged through the injected logger and skipped
- No exception crosses the per-track boundary (cancellation excepted)
- Bucket: is_translatable → translations, else originals; discovery order kept
- No successful track → NoUsableSubtitlesError
- max_concurrency=1 processes tracks sequentially
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Awaitable, Callable, Iterable, List, Optional, Sequence

from yt_subtitles.config import MAX_CONCURRENT_TRACKS
from yt_subtitles.core.ir import Cue, SubtitlesResult, SubtitleTrack
from yt_subtitles.core.parser import TrackPayload, parse_payload
from yt_subtitles.errors import (
    CaptionFetchError,
    MalformedDocumentError,
    NoTracksError,
    NoUsableSubtitlesError,
)
from yt_subtitles.formatters import FORMATTERS
from yt_subtitles.youtube.models import CaptionTrack

if TYPE_CHECKING:
    from yt_subtitles.youtube.client import YouTubeClient

logger = logging.getLogger(__name__)

FetchDocument = Callable[[CaptionTrack], Awaitable[TrackPayload]]

NO_TRACKS_MESSAGE = "No subtitles found for this video."
NO_USABLE_MESSAGE = "None of this video's subtitle tracks could be processed."


@dataclass(frozen=True)
class TrackOutcome:
    """Result of processing one caption track: a subtitle or the error."""

    track: CaptionTrack
    subtitle: Optional[SubtitleTrack] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.subtitle is not None


def render_track(track: CaptionTrack, cues: Sequence[Cue]) -> SubtitleTrack:
    """Render cues into every registered format."""
    formats = {key: formatter_cls().render(cues) for key, formatter_cls in FORMATTERS.items()}
    return SubtitleTrack(
        language_label=track.language_label,
        is_translatable=track.is_translatable,
        formats=formats,
    )


async def process_track(
    track: CaptionTrack,
    fetch_document: FetchDocument,
    log: Optional[logging.Logger] = None,
) -> TrackOutcome:
    """Fetch, parse, and render one track. Never raises."""
    log = log or logger
    context = {"language": track.language_code, "label": track.language_label}
    try:
        payload = await fetch_document(track)
        subtitle = render_track(track, parse_payload(payload))
    except MalformedDocumentError as exc:
        log.warning(
            "Skipping %s track: malformed timed-text document (%s)",
            track.language_label, exc,
            extra=dict(context, outcome="malformed"),
        )
        return TrackOutcome(track=track, error=exc)
    except CaptionFetchError as exc:
        log.warning(
            "Skipping %s track: download failed (%s)",
            track.language_label, exc,
            extra=dict(context, outcome="fetch_failed"),
        )
        return TrackOutcome(track=track, error=exc)
    except Exception as exc:
        log.exception(
            "Skipping %s track: unexpected error",
            track.language_label,
            extra=dict(context, outcome="error"),
        )
        return TrackOutcome(track=track, error=exc)

    log.debug(
        "Processed %s track", track.language_label,
        extra=dict(context, outcome="ok"),
    )
    return TrackOutcome(track=track, subtitle=subtitle)


def aggregate(outcomes: Iterable[TrackOutcome]) -> SubtitlesResult:
    """Bucket successful outcomes into originals and translations.

    Raises:
        NoUsableSubtitlesError: No outcome carries a subtitle.
    """
    originals: List[SubtitleTrack] = []
    translations: List[SubtitleTrack] = []
    for outcome in outcomes:
        if outcome.subtitle is None:
            continue
        if outcome.subtitle.is_translatable:
            translations.append(outcome.subtitle)
        else:
            originals.append(outcome.subtitle)

    result = SubtitlesResult(originals=tuple(originals), translations=tuple(translations))
    if result.is_empty:
        raise NoUsableSubtitlesError(NO_USABLE_MESSAGE)
    return result


async def build_subtitles(
    tracks: Iterable[CaptionTrack],
    fetch_document: FetchDocument,
    *,
    log: Optional[logging.Logger] = None,
    max_concurrency: Optional[int] = None,
) -> SubtitlesResult:
    """Process every track and aggregate the survivors.

    Args:
        tracks: Caption tracks in discovery order.
        fetch_document: Coroutine function returning a track's timed text,
            as raw XML or decoded fragments.
        log: Logger for per-track failures; defaults to this module's logger.
        max_concurrency: Parallel fetch limit; defaults to MAX_CONCURRENT_TRACKS.

    Raises:
        NoTracksError: ``tracks`` is empty.
        NoUsableSubtitlesError: Every track failed.
    """
    log = log or logger
    tracks = list(tracks)
    if not tracks:
        raise NoTracksError(NO_TRACKS_MESSAGE)

    limit = MAX_CONCURRENT_TRACKS if max_concurrency is None else max_concurrency
    if limit < 1:
        raise ValueError("max_concurrency must be at least 1, got {}".format(limit))
    semaphore = asyncio.Semaphore(limit)

    async def _bounded(track: CaptionTrack) -> TrackOutcome:
        async with semaphore:
            return await process_track(track, fetch_document, log)

    outcomes = await asyncio.gather(*(_bounded(track) for track in tracks))

    failed = sum(1 for outcome in outcomes if not outcome.ok)
    log.info("Processed %d caption track(s), %d failed", len(outcomes), failed)
    return aggregate(outcomes)


async def fetch_subtitles(
    video_url: str,
    client: YouTubeClient,
    *,
    log: Optional[logging.Logger] = None,
    max_concurrency: Optional[int] = None,
) -> SubtitlesResult:
    """List a video's tracks with ``client`` and build the full result."""
    tracks = await client.list_tracks(video_url)
    return await build_subtitles(
        tracks, client.fetch_document, log=log, max_concurrency=max_concurrency,
    )

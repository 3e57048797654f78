"""Exception hierarchy shared by the parser, pipeline, client, and API.

WHY: The HTTP layer maps failures to status codes, and the pipeline has to
tell track-level failures (skip the track) apart from request-level ones
(fail the request). A typed hierarchy makes both decisions a plain
``except`` clause instead of string matching.

HOW: Two branches under SubtitlesError. RequestError subclasses carry the
HTTP status code they map to and are the only errors the API reports to
clients by name. TrackError subclasses describe one caption track going
wrong; the pipeline contains them.

RULES:
- RequestError: InvalidInputError (400), VideoNotFoundError (404),
  NoTracksError (404), NoUsableSubtitlesError (404)
- TrackError: MalformedDocumentError, CaptionFetchError
- A CaptionFetchError raised outside a track (e.g. listing tracks) is an
  unexpected failure at the API boundary and becomes a generic 500
- Messages of RequestError are safe to show to API clients
"""

from __future__ import annotations


class SubtitlesError(Exception):
    """Base class for all expected failures in this package."""


# ---------------------------------------------------------------------------
# Request-level
# ---------------------------------------------------------------------------


class RequestError(SubtitlesError):
    """A failure that ends the whole request with a specific HTTP status."""

    status_code = 500


class InvalidInputError(RequestError):
    """The video URL is missing or is not a recognisable YouTube URL."""

    status_code = 400


class VideoNotFoundError(RequestError):
    """YouTube has no playable video for the given identifier."""

    status_code = 404


class NoTracksError(RequestError):
    """The video exists but exposes no caption tracks at all."""

    status_code = 404


class NoUsableSubtitlesError(RequestError):
    """Every caption track failed to fetch or parse."""

    status_code = 404


# ---------------------------------------------------------------------------
# Track-level
# ---------------------------------------------------------------------------


class TrackError(SubtitlesError):
    """A failure confined to a single caption track."""


class MalformedDocumentError(TrackError):
    """A timed-text document could not be decoded into cue fragments."""


class CaptionFetchError(TrackError):
    """Listing or downloading caption tracks failed.

    Wraps youtube-transcript-api retrieval errors, and transport errors
    (including timeouts) once retries are exhausted.
    """

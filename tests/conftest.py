"""Shared test fixtures for the yt_subtitles test suite.

WHY: Parser, pipeline, API, and CLI tests all need the same small set of
timed-text documents and caption tracks. Centralizing them keeps every test
module working from identical input.

HOW: Module-level constants hold raw XML documents in both supported
layouts plus deliberately broken ones. FakeYouTubeClient stands in for the
network client: it serves documents from a dict keyed by track handle and
records every fetch. Tests use plain strings as handles.

RULES:
- Documents are literal XML as YouTube serves it (srv1 is double-escaped)
- FakeYouTubeClient raises CaptionFetchError for unknown handles
- No test touches the network
"""

from __future__ import annotations

from typing import Dict, List, Optional, Union

import pytest

from yt_subtitles.core.ir import Cue
from yt_subtitles.core.parser import TrackPayload
from yt_subtitles.errors import CaptionFetchError
from yt_subtitles.youtube.models import CaptionTrack


# ---------------------------------------------------------------------------
# Timed-text documents
# ---------------------------------------------------------------------------

SRV1_DOCUMENT = (
    '<?xml version="1.0" encoding="utf-8" ?>'
    "<transcript>"
    '<text start="0" dur="2">A</text>'
    '<text start="2" dur="2">B</text>'
    "</transcript>"
)

SRV1_MARKUP_DOCUMENT = (
    '<?xml version="1.0" encoding="utf-8" ?>'
    "<transcript>"
    '<text start="1.5" dur="2.25">Hello &lt;i&gt;world&lt;/i&gt;\nfoo</text>'
    '<text start="3.75" dur="1">it&amp;#39;s &lt;b&gt;bold&lt;/b&gt;</text>'
    "</transcript>"
)

SRV3_DOCUMENT = (
    '<?xml version="1.0" encoding="utf-8" ?>'
    '<timedtext format="3">'
    "<body>"
    '<p t="0" d="1500">First <s>line</s></p>'
    '<p t="1500" d="2000">Second\nline</p>'
    "</body>"
    "</timedtext>"
)

EMPTY_TRANSCRIPT = '<?xml version="1.0" encoding="utf-8" ?><transcript></transcript>'

MALFORMED_XML = "<transcript><text start='0' dur='1'>unterminated"
MALFORMED_TIMING = (
    "<transcript>"
    '<text start="0" dur="1">fine</text>'
    '<text start="abc" dur="1">broken</text>'
    "</transcript>"
)


# ---------------------------------------------------------------------------
# Fake YouTube client
# ---------------------------------------------------------------------------


def make_track(
    label: str,
    handle: str,
    translatable: bool = False,
    code: Optional[str] = None,
) -> CaptionTrack:
    return CaptionTrack(
        language_label=label,
        language_code=code or label[:2].lower(),
        is_translatable=translatable,
        handle=handle,
    )


class FakeYouTubeClient:
    """In-memory stand-in for YouTubeClient."""

    def __init__(
        self,
        tracks: List[CaptionTrack],
        documents: Dict[str, Union[TrackPayload, Exception]],
        list_error: Optional[Exception] = None,
    ) -> None:
        self.tracks = tracks
        self.documents = documents
        self.list_error = list_error
        self.fetched: List[str] = []
        self.listed: List[str] = []

    async def __aenter__(self) -> FakeYouTubeClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        return None

    async def list_tracks(self, video_url: str) -> List[CaptionTrack]:
        self.listed.append(video_url)
        if self.list_error is not None:
            raise self.list_error
        return list(self.tracks)

    async def fetch_document(self, track: CaptionTrack) -> TrackPayload:
        self.fetched.append(track.handle)
        document = self.documents.get(track.handle)
        if document is None:
            raise CaptionFetchError("No captions for {}".format(track.handle))
        if isinstance(document, Exception):
            raise document
        return document


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def two_cues() -> List[Cue]:
    return [Cue(start_s=0.0, end_s=2.0, text="A"), Cue(start_s=2.0, end_s=4.0, text="B")]


@pytest.fixture
def mixed_client() -> FakeYouTubeClient:
    """Three tracks: one original, one translatable, one malformed original."""
    tracks = [
        make_track("English", "en", translatable=True),
        make_track("Deutsch", "de-broken"),
        make_track("Español", "es"),
    ]
    documents = {
        "en": SRV1_DOCUMENT,
        "de-broken": MALFORMED_XML,
        "es": SRV3_DOCUMENT,
    }
    return FakeYouTubeClient(tracks, documents)

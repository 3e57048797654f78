"""Intermediate representation dataclasses for caption tracks.

WHY: YouTube hands back loosely shaped data (transcript listings, timed-text XML).
The parser, formatters, and API need explicit, typed values with fixed
invariants so bad data fails at the boundary instead of deep in rendering.

HOW: Four frozen dataclasses form a pipeline:
  RawCueFragment : one <text>/<p> element or snippet, timing + raw markup
  Cue            : normalised fragment: end time computed, markup removed
  SubtitleTrack  : one rendered track (language, flag, srt + txt strings)
  SubtitlesResult: the response payload: originals and translations

RULES:
- All times are float seconds (srv3 milliseconds are converted on decode)
- Cue.end_s = start_s + duration_s, so end_s >= start_s
- Cue.text contains no tags and no newlines
- Every value is immutable; stages build new values instead of mutating
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass(frozen=True)
class RawCueFragment:
    """One timed fragment as it appears in a timed-text document.

    RULES:
    - start_s / duration_s: non-negative, finite float seconds
    - raw_text: element text with nested markup preserved, may contain newlines
    """

    start_s: float
    duration_s: float
    raw_text: str


@dataclass(frozen=True)
class Cue:
    """A timed, text-bearing unit of a subtitle track."""

    start_s: float
    end_s: float
    text: str


@dataclass(frozen=True)
class SubtitleTrack:
    """A caption track rendered into every registered output format.

    RULES:
    - language_label: human-readable name from YouTube (e.g. "English (auto-generated)")
    - is_translatable: YouTube's flag, decides the result bucket
    - formats: format key ("srt", "txt") → rendered content
    """

    language_label: str
    is_translatable: bool
    formats: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class SubtitlesResult:
    """Top-level payload: tracks bucketed by translatability, discovery order kept."""

    originals: Tuple[SubtitleTrack, ...] = ()
    translations: Tuple[SubtitleTrack, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.originals and not self.translations

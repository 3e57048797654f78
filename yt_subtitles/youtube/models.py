"""Caption track dataclass.

WHY: youtube-transcript-api hands back Transcript objects that mix listing
metadata with the means to download them. The pipeline only needs a handful
of fields per track, and it needs them typed and immutable.

HOW: CaptionTrack copies the fields the pipeline reads and keeps the library
object as an opaque ``handle`` for the fetcher. Factory method
from_transcript() handles the mapping.

RULES:
- language_label comes from the transcript's display name, else the
  language code, else "Unknown"
- is_translatable: YouTube's flag, False when absent
- handle is excluded from equality and repr; only the fetcher reads it
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from youtube_transcript_api import Transcript


@dataclass(frozen=True)
class CaptionTrack:
    """One caption track listed for a video."""

    language_label: str
    language_code: str
    is_translatable: bool
    handle: Any = field(default=None, compare=False, repr=False)

    @classmethod
    def from_transcript(cls, transcript: Transcript) -> CaptionTrack:
        """Build a CaptionTrack from a youtube-transcript-api Transcript."""
        language_code = str(transcript.language_code or "")
        return cls(
            language_label=str(transcript.language or "") or language_code or "Unknown",
            language_code=language_code,
            is_translatable=bool(transcript.is_translatable),
            handle=transcript,
        )

"""Plain text transcript formatter.

WHY: Readers, search indexes, and summarisers want the spoken text without
timecodes. This is the simplest formatter.

HOW: Join every cue's text with a single space and strip the result.

RULES:
- Cue order is preserved
- Separator is exactly one space; inner spacing of each cue is untouched
- Leading/trailing whitespace of the whole result is stripped
- Media type: "text/plain"
"""

from __future__ import annotations

from typing import Sequence

from yt_subtitles.core.ir import Cue
from yt_subtitles.formatters.base import BaseFormatter


def render_txt(cues: Sequence[Cue]) -> str:
    """Flatten cues into a single line of text."""
    return " ".join(cue.text for cue in cues).strip()


class PlainTextFormatter(BaseFormatter):
    """Formatter that flattens cues into plain text."""

    key = "txt"
    name = "Plain Text"
    suffix = ".txt"
    media_type = "text/plain"

    def render(self, cues: Sequence[Cue]) -> str:
        return render_txt(cues)

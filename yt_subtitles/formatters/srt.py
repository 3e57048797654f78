"""SRT subtitle formatter.

WHY: SRT is the subtitle format every player and editor accepts. Cues from
the parser already carry start/end seconds and single-line text, so SRT
output is a direct numbering and timestamping pass.

HOW: Each cue becomes a block ``index / timing line / text / blank``.
Blocks are concatenated and the trailing blank line is trimmed.

RULES:
- Indices are 1-based, consecutive, in cue order
- Timing line: ``HH:MM:SS,mmm --> HH:MM:SS,mmm`` via format_timestamp()
- No trailing blank line; empty input gives an empty string
- Media type: "application/x-subrip"
"""

from __future__ import annotations

from typing import List, Sequence

from yt_subtitles.core.ir import Cue
from yt_subtitles.core.timecode import format_timestamp
from yt_subtitles.formatters.base import BaseFormatter


def render_srt(cues: Sequence[Cue]) -> str:
    """Render cues as an SRT document."""
    blocks: List[str] = []
    for index, cue in enumerate(cues, 1):
        blocks.append("{}\n{} --> {}\n{}\n\n".format(
            index,
            format_timestamp(cue.start_s),
            format_timestamp(cue.end_s),
            cue.text,
        ))
    return "".join(blocks).strip()


class SRTFormatter(BaseFormatter):
    """Formatter that produces numbered, timestamped SRT blocks."""

    key = "srt"
    name = "SRT Subtitles"
    suffix = ".srt"
    media_type = "application/x-subrip"

    def render(self, cues: Sequence[Cue]) -> str:
        return render_srt(cues)

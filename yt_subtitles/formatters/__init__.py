"""Output formatter registry.

WHY: The pipeline, CLI, and API layers need a single lookup to find the
right formatter by name. A central dict makes it trivial to add new formats:
create the formatter class, import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["srt"]()``.

RULES:
- Keys match each class's ``key`` attribute and the JSON ``formats`` keys
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from yt_subtitles.formatters.plain_text import PlainTextFormatter, render_txt
from yt_subtitles.formatters.srt import SRTFormatter, render_srt

if TYPE_CHECKING:
    from yt_subtitles.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    SRTFormatter.key: SRTFormatter,
    PlainTextFormatter.key: PlainTextFormatter,
}

__all__ = ["FORMATTERS", "PlainTextFormatter", "SRTFormatter", "render_srt", "render_txt"]

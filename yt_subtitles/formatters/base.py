"""Abstract base formatter.

WHY: Every output format consumes the same cue list but produces different
text. A shared interface lets the pipeline, CLI, and API render every
registered format generically.

HOW: BaseFormatter is an ABC with class-level metadata (``key``, ``name``,
``suffix``, ``media_type``) and one abstract ``render()`` method.

RULES:
- render() is pure: the same cues always give byte-identical output
- ``suffix`` includes the dot, e.g. ``".srt"``
- The caller is responsible for prepending a filename stem
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from yt_subtitles.core.ir import Cue


class BaseFormatter(ABC):
    """Abstract base for all output formatters.

    To add a new output format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter and fill in the metadata
    3. Implement render()
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    key: str = ""
    name: str = ""
    suffix: str = ""
    media_type: str = "text/plain"

    @abstractmethod
    def render(self, cues: Sequence[Cue]) -> str:
        """Render an ordered cue sequence into the output format."""

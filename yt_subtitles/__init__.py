"""YouTube Subtitles: caption tracks as SRT and plain text.

WHY: YouTube exposes captions as timed text attached to each video. Most
consumers want ready-made SRT files or a plain transcript instead, grouped
into the video's original tracks and its translatable tracks.

HOW: Three-stage pipeline: discover and fetch (youtube package), parse
into cues (core), render (pluggable formatters). An HTTP API and a CLI sit
on top. Each stage is independently testable.

RULES:
- All formatters consume the same Cue sequence
- Adding a new output format = one new formatter module, no core changes
- One failing caption track never fails the whole request
"""

__version__ = "0.1.0"

"""Core caption processing: IR, timed-text parsing, timecodes, and the track pipeline.

WHY: The core package holds the part of the service that does not depend on
HTTP: turning raw timed-text documents into cues, and running many tracks
through parse and render without one failure sinking the rest.

HOW: ir.py defines the data structures, parser.py builds cues from XML,
timecode.py formats SRT timestamps, pipeline.py orchestrates tracks.

RULES:
- IR dataclasses are the contract between parsing and formatting
- Parsing is format-agnostic; no formatter-specific logic here
"""

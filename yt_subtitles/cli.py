"""Command-line interface for saving a video's subtitles to disk.

WHY: Not every user wants to run the HTTP API. The CLI wires together the
same pipeline as the API (URL validation, track listing, per-track
fetch, parse and render) and writes each rendered track to a file.

HOW: Uses argparse to accept a video URL, output format selection, an
output directory, and a track group filter. Runs the async pipeline via
asyncio.run(). Status messages go to stderr; files are saved as
``{video_id}-{language}{suffix}``.

RULES:
- Positional argument: YouTube video URL
- --formats: comma-separated formatter keys (default: all registered)
- --only: restrict output to "originals" or "translations"
- Output naming: numeric suffix on conflicts (``abc-English-2.srt``)
- Status output goes to stderr (not stdout)
- Expected failures print ``Error: ...`` and exit with status 1
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import re
import sys
from pathlib import Path
from typing import List, Optional

from yt_subtitles.core.pipeline import fetch_subtitles
from yt_subtitles.errors import SubtitlesError
from yt_subtitles.formatters import FORMATTERS
from yt_subtitles.youtube.client import YouTubeClient
from yt_subtitles.youtube.urls import extract_video_id

_UNSAFE_FILENAME_RE = re.compile(r"[^\w-]+")


def _status(msg: str) -> None:
    """Print a status message to stderr."""
    print(msg, file=sys.stderr, flush=True)


def _label_to_filename(label: str) -> str:
    """Turn a language label into a filename-safe token.

    "English (auto-generated)" → "English_auto-generated"
    """
    return _UNSAFE_FILENAME_RE.sub("_", label).strip("_") or "track"


def _resolve_output_path(stem: str, suffix: str, output_dir: Path) -> Path:
    """Resolve the output file path, adding a numeric suffix on conflict.

    Two tracks can share a label (e.g. an uploaded and an auto-generated
    "English"), and earlier runs may have left files behind. The counter
    starts at 2: ``stem.srt``, ``stem-2.srt``, ``stem-3.srt``...
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    counter = 2
    while True:
        candidate = output_dir / "{}-{}{}".format(stem, counter, suffix)
        if not candidate.exists():
            return candidate
        counter += 1


def _parse_formats(raw: Optional[str]) -> List[str]:
    """Split --formats into registry keys; raises ValueError on unknown keys."""
    if not raw:
        return list(FORMATTERS.keys())
    keys = [k.strip() for k in raw.split(",") if k.strip()]
    unknown = [k for k in keys if k not in FORMATTERS]
    if unknown:
        raise ValueError("Unknown output format(s): {}. Available: {}".format(
            ", ".join(unknown), ", ".join(sorted(FORMATTERS.keys())),
        ))
    return keys


async def _run_pipeline(args: argparse.Namespace, format_keys: List[str]) -> List[Path]:
    """Fetch every track and save the requested formats. Returns saved paths."""
    video_id = extract_video_id(args.url)
    _status("Fetching caption tracks for {}...".format(video_id))

    async with YouTubeClient() as client:
        result = await fetch_subtitles(args.url, client)

    groups = [("originals", result.originals), ("translations", result.translations)]
    if args.only:
        groups = [g for g in groups if g[0] == args.only]

    output_dir = Path(args.output_dir) if args.output_dir else Path.cwd()
    output_dir.mkdir(parents=True, exist_ok=True)

    saved: List[Path] = []
    for group, tracks in groups:
        for track in tracks:
            stem = "{}-{}".format(video_id, _label_to_filename(track.language_label))
            for key in format_keys:
                path = _resolve_output_path(stem, FORMATTERS[key].suffix, output_dir)
                path.write_text(track.formats[key], encoding="utf-8")
                saved.append(path)
                _status("  Saved {} ({})".format(path, group))

    if not saved:
        _status("No {} tracks to save.".format(args.only or "subtitle"))
    return saved


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="yt-subtitles",
        description="Download a YouTube video's caption tracks as SRT and plain text files.",
    )

    parser.add_argument(
        "url",
        help="YouTube video URL (watch, youtu.be, shorts, embed, or live link).",
    )

    parser.add_argument(
        "--formats",
        default=None,
        help="Comma-separated list of output formats. "
             "Available: {}. Default: all.".format(", ".join(sorted(FORMATTERS.keys()))),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save output files (default: current directory).",
    )

    parser.add_argument(
        "--only",
        choices=["originals", "translations"],
        default=None,
        help="Only save original or only translatable tracks.",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log per-track progress and failures to stderr.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the yt-subtitles console script.

    argv=None means use sys.argv; an explicit list is for testing.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        format_keys = _parse_formats(args.formats)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        asyncio.run(_run_pipeline(args, format_keys))
    except SubtitlesError as exc:
        print("Error: {}".format(exc), file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()

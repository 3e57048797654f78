"""Tests for the yt-subtitles command-line interface.

WHY: The CLI is the offline way to save subtitles. File naming, format and
group selection, and exit codes are what scripts calling it depend on.

HOW: YouTubeClient is patched in the cli module to return a
FakeYouTubeClient, and main() is called with an explicit argv list. Files
land in pytest's tmp_path.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from conftest import SRV1_DOCUMENT, FakeYouTubeClient, make_track
from yt_subtitles.cli import _label_to_filename, _parse_formats, _resolve_output_path, main
from yt_subtitles.errors import VideoNotFoundError

VIDEO_URL = "https://youtu.be/dQw4w9WgXcQ"
SRT = "1\n00:00:00,000 --> 00:00:02,000\nA\n\n2\n00:00:02,000 --> 00:00:04,000\nB"


def _run(fake, argv):
    with patch("yt_subtitles.cli.YouTubeClient", return_value=fake):
        main(argv)


@pytest.fixture
def fake():
    return FakeYouTubeClient(
        [
            make_track("English", "en", translatable=True),
            make_track("English (auto-generated)", "asr"),
        ],
        {"en": SRV1_DOCUMENT, "asr": SRV1_DOCUMENT},
    )


class TestMain:

    def test_writes_every_format(self, fake, tmp_path):
        _run(fake, [VIDEO_URL, "--output-dir", str(tmp_path)])
        names = sorted(p.name for p in tmp_path.iterdir())
        assert names == [
            "dQw4w9WgXcQ-English.srt",
            "dQw4w9WgXcQ-English.txt",
            "dQw4w9WgXcQ-English_auto-generated.srt",
            "dQw4w9WgXcQ-English_auto-generated.txt",
        ]
        assert (tmp_path / "dQw4w9WgXcQ-English.srt").read_text(encoding="utf-8") == SRT
        assert (tmp_path / "dQw4w9WgXcQ-English.txt").read_text(encoding="utf-8") == "A B"

    def test_formats_option(self, fake, tmp_path):
        _run(fake, [VIDEO_URL, "--output-dir", str(tmp_path), "--formats", "txt"])
        assert sorted(p.suffix for p in tmp_path.iterdir()) == [".txt", ".txt"]

    def test_only_translations(self, fake, tmp_path):
        _run(fake, [VIDEO_URL, "--output-dir", str(tmp_path), "--only", "translations"])
        assert sorted(p.name for p in tmp_path.iterdir()) == [
            "dQw4w9WgXcQ-English.srt",
            "dQw4w9WgXcQ-English.txt",
        ]

    def test_existing_file_not_overwritten(self, fake, tmp_path):
        existing = tmp_path / "dQw4w9WgXcQ-English.srt"
        existing.write_text("keep me", encoding="utf-8")
        _run(fake, [VIDEO_URL, "--output-dir", str(tmp_path), "--formats", "srt"])
        assert existing.read_text(encoding="utf-8") == "keep me"
        assert (tmp_path / "dQw4w9WgXcQ-English-2.srt").read_text(encoding="utf-8") == SRT

    def test_creates_output_dir(self, fake, tmp_path):
        target = tmp_path / "nested" / "out"
        _run(fake, [VIDEO_URL, "--output-dir", str(target)])
        assert len(list(target.iterdir())) == 4

    def test_unknown_format_exits(self, fake, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            _run(fake, [VIDEO_URL, "--output-dir", str(tmp_path), "--formats", "vtt"])
        assert exc_info.value.code == 2
        assert "Unknown output format" in capsys.readouterr().err
        assert fake.listed == []

    def test_invalid_url_exits_with_error(self, fake, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            _run(fake, ["https://example.com/video", "--output-dir", str(tmp_path)])
        assert exc_info.value.code == 1
        assert "Error: Invalid YouTube video URL provided." in capsys.readouterr().err

    def test_pipeline_error_exits_with_error(self, tmp_path, capsys):
        fake = FakeYouTubeClient([], {}, list_error=VideoNotFoundError("Video gone"))
        with pytest.raises(SystemExit) as exc_info:
            _run(fake, [VIDEO_URL, "--output-dir", str(tmp_path)])
        assert exc_info.value.code == 1
        assert "Error: Video gone" in capsys.readouterr().err
        assert list(tmp_path.iterdir()) == []

    def test_no_tracks_exits_with_error(self, tmp_path, capsys):
        empty = FakeYouTubeClient([], {})
        with pytest.raises(SystemExit):
            _run(empty, [VIDEO_URL, "--output-dir", str(tmp_path)])
        assert "No subtitles found for this video." in capsys.readouterr().err


class TestHelpers:

    def test_label_to_filename(self):
        assert _label_to_filename("English (auto-generated)") == "English_auto-generated"
        assert _label_to_filename("Português (Brasil)") == "Português_Brasil"
        assert _label_to_filename("???") == "track"

    def test_parse_formats_default(self):
        assert _parse_formats(None) == ["srt", "txt"]

    def test_parse_formats_strips_and_validates(self):
        assert _parse_formats(" txt , srt ") == ["txt", "srt"]
        with pytest.raises(ValueError, match="vtt"):
            _parse_formats("srt,vtt")

    def test_resolve_output_path_counter(self, tmp_path):
        (tmp_path / "a.srt").write_text("", encoding="utf-8")
        (tmp_path / "a-2.srt").write_text("", encoding="utf-8")
        assert _resolve_output_path("a", ".srt", tmp_path) == tmp_path / "a-3.srt"

"""Tests for the SRT and plain-text formatters.

WHY: Both formats are returned verbatim to clients and written to disk by
the CLI. Block layout, numbering, and whitespace must match exactly.

HOW: Render the shared two-cue fixture and compare to literal strings, then
check empty input, numbering, and the registry metadata.
"""

from __future__ import annotations

import pytest

from yt_subtitles.core.ir import Cue
from yt_subtitles.formatters import FORMATTERS, PlainTextFormatter, SRTFormatter, render_srt, render_txt
from yt_subtitles.formatters.base import BaseFormatter


# ---------------------------------------------------------------------------
# SRT
# ---------------------------------------------------------------------------


class TestSRT:

    def test_two_cues(self, two_cues):
        assert render_srt(two_cues) == (
            "1\n00:00:00,000 --> 00:00:02,000\nA\n\n"
            "2\n00:00:02,000 --> 00:00:04,000\nB"
        )

    def test_empty(self):
        assert render_srt([]) == ""

    def test_single_cue_has_no_trailing_blank_line(self):
        output = render_srt([Cue(start_s=1.5, end_s=3.75, text="Hello world foo")])
        assert output == "1\n00:00:01,500 --> 00:00:03,750\nHello world foo"

    def test_block_count_and_indices(self):
        cues = [Cue(start_s=float(i), end_s=i + 1.0, text="cue {}".format(i)) for i in range(12)]
        blocks = render_srt(cues).split("\n\n")
        assert len(blocks) == 12
        assert [block.split("\n")[0] for block in blocks] == [str(i) for i in range(1, 13)]

    def test_timing_line(self):
        output = render_srt([Cue(start_s=3661.5, end_s=3662.0, text="x")])
        assert output.split("\n")[1] == "01:01:01,500 --> 01:01:02,000"

    def test_blank_cue_text_keeps_block(self):
        output = render_srt([Cue(start_s=0.0, end_s=1.0, text=""), Cue(start_s=1.0, end_s=2.0, text="B")])
        assert output.startswith("1\n00:00:00,000 --> 00:00:01,000\n\n\n2\n")

    def test_formatter_class(self, two_cues):
        assert SRTFormatter().render(two_cues) == render_srt(two_cues)


# ---------------------------------------------------------------------------
# Plain text
# ---------------------------------------------------------------------------


class TestPlainText:

    def test_two_cues(self, two_cues):
        assert render_txt(two_cues) == "A B"

    def test_empty(self):
        assert render_txt([]) == ""

    def test_inner_spacing_preserved(self):
        cues = [Cue(start_s=0.0, end_s=1.0, text="a  b"), Cue(start_s=1.0, end_s=2.0, text="c")]
        assert render_txt(cues) == "a  b c"

    def test_outer_whitespace_stripped(self):
        cues = [Cue(start_s=0.0, end_s=1.0, text=" lead"), Cue(start_s=1.0, end_s=2.0, text="trail ")]
        assert render_txt(cues) == "lead trail"

    def test_formatter_class(self, two_cues):
        assert PlainTextFormatter().render(two_cues) == "A B"


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class TestRegistry:

    def test_keys(self):
        assert sorted(FORMATTERS) == ["srt", "txt"]

    @pytest.mark.parametrize("key", ["srt", "txt"])
    def test_entries_are_formatter_classes(self, key):
        formatter_cls = FORMATTERS[key]
        assert issubclass(formatter_cls, BaseFormatter)
        assert formatter_cls.key == key
        assert formatter_cls.suffix == "." + key

    def test_media_types(self):
        assert FORMATTERS["srt"].media_type == "application/x-subrip"
        assert FORMATTERS["txt"].media_type == "text/plain"

    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            BaseFormatter()

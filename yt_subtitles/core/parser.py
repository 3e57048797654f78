"""Timed-text decoding and cue normalisation.

WHY: YouTube captions arrive either as timed-text XML, one element per
displayed line, or as snippets already decoded by youtube-transcript-api.
Either way the text may carry inline markup (``<i>``, ``<font>``, karaoke
``<s>`` spans), character references, and hard line breaks. Both output
formats need clean, single-line text with start and end times.

HOW: Two passes. decode_fragments() parses the XML and validates every
timing attribute up front, producing RawCueFragment values; make_fragment()
does the same validation for one snippet. to_cue() then normalises each
fragment into a Cue: end time computed, tags stripped, character references
unescaped, newlines turned into spaces.

RULES:
- Supported layouts:
    <transcript><text start="s" dur="s">   (seconds)
    <timedtext><body><p t="ms" d="ms">     (milliseconds)
- Any unparsable, missing, negative, or non-finite timing value makes the
  whole document malformed; partial transcripts are never returned
- Tags are any ``<...>`` run, removed before unescaping so an escaped
  ``&lt;`` in the text survives as a literal ``<``
- Each newline becomes one space; runs of spaces are not collapsed
- Output order and cardinality match the document's fragments
- Byte input is decoded per its XML declaration; str input is used as is
"""

from __future__ import annotations

import html
import math
import re
import xml.etree.ElementTree as ElementTree
from typing import List, Optional, Sequence, Union

from yt_subtitles.core.ir import Cue, RawCueFragment
from yt_subtitles.errors import MalformedDocumentError

TAG_RE = re.compile(r"<[^>]*>")

# (fragment tag, start attribute, duration attribute, units per second)
_SRV1_LAYOUT = ("text", "start", "dur", 1.0)
_SRV3_LAYOUT = ("p", "t", "d", 1000.0)

TrackPayload = Union[str, bytes, Sequence[RawCueFragment]]


def strip_tags(text: str) -> str:
    """Remove every ``<...>`` sequence from ``text``."""
    return TAG_RE.sub("", text)


def _parse_time(
    value: Union[str, float, None],
    attribute: str,
    index: int,
    units_per_second: float,
) -> float:
    if value is None:
        raise MalformedDocumentError(
            "Fragment {} is missing the '{}' attribute".format(index, attribute)
        )
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise MalformedDocumentError(
            "Fragment {} has a non-numeric '{}' value: {!r}".format(index, attribute, value)
        ) from None
    if not math.isfinite(number) or number < 0:
        raise MalformedDocumentError(
            "Fragment {} has an invalid '{}' value: {!r}".format(index, attribute, value)
        )
    return number / units_per_second


def make_fragment(
    start: Union[str, float, None],
    duration: Union[str, float, None],
    text: Optional[str],
    index: int,
) -> RawCueFragment:
    """Build one validated fragment from start/duration values in seconds.

    Raises:
        MalformedDocumentError: Either value is missing, non-numeric,
            negative, or non-finite.
    """
    return RawCueFragment(
        start_s=_parse_time(start, "start", index, 1.0),
        duration_s=_parse_time(duration, "duration", index, 1.0),
        raw_text=text or "",
    )


def decode_fragments(document: Union[str, bytes]) -> List[RawCueFragment]:
    """Decode a timed-text document into raw fragments.

    Raises:
        MalformedDocumentError: The XML does not parse, the root element is
            not a known timed-text layout, or any fragment has bad timing.
    """
    if not document.strip():
        raise MalformedDocumentError("Timed-text document is empty")

    try:
        root = ElementTree.fromstring(document)
    except ElementTree.ParseError as exc:
        raise MalformedDocumentError("Timed-text document is not valid XML: {}".format(exc)) from exc

    if root.tag == "transcript":
        container = root
        tag, start_attr, dur_attr, units_per_second = _SRV1_LAYOUT
    elif root.tag == "timedtext":
        container = root.find("body")
        if container is None:
            raise MalformedDocumentError("Timed-text document has no <body> element")
        tag, start_attr, dur_attr, units_per_second = _SRV3_LAYOUT
    else:
        raise MalformedDocumentError("Unexpected root element <{}>".format(root.tag))

    fragments: List[RawCueFragment] = []
    for index, element in enumerate(container.findall(tag)):
        fragments.append(RawCueFragment(
            start_s=_parse_time(element.get(start_attr), start_attr, index, units_per_second),
            duration_s=_parse_time(element.get(dur_attr), dur_attr, index, units_per_second),
            raw_text="".join(element.itertext()),
        ))
    return fragments


def normalise_text(raw_text: str) -> str:
    """Strip markup and flatten line breaks in one fragment's text.

    srv1 payloads are double-escaped: XML parsing turns ``&lt;i&gt;`` into a
    real tag and leaves ``&amp;#39;`` as ``&#39;``. Tags go first, then the
    remaining references are unescaped.
    """
    text = html.unescape(strip_tags(raw_text))
    return text.replace("\n", " ")


def to_cue(fragment: RawCueFragment) -> Cue:
    return Cue(
        start_s=fragment.start_s,
        end_s=fragment.start_s + fragment.duration_s,
        text=normalise_text(fragment.raw_text),
    )


def parse_document(document: Union[str, bytes]) -> List[Cue]:
    """Parse a timed-text document into an ordered list of cues.

    Args:
        document: Raw XML as returned by the caption endpoint.

    Returns:
        One Cue per fragment, in document order.

    Raises:
        MalformedDocumentError: See decode_fragments().
    """
    return [to_cue(fragment) for fragment in decode_fragments(document)]


def parse_payload(payload: TrackPayload) -> List[Cue]:
    """Turn a fetched track into cues, from raw XML or decoded fragments."""
    if isinstance(payload, (str, bytes)):
        return parse_document(payload)
    return [to_cue(fragment) for fragment in payload]

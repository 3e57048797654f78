"""Pydantic response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for response serialization
and automatic OpenAPI documentation. The JSON field names (``originals``,
``translations``, ``lang``, ``formats``) are a public contract with the
front-end and must not drift from the internal dataclass names.

HOW: One model per JSON object. from_result()/from_track() convert the
internal IR dataclasses into response models.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- Error bodies are ``{"error": "..."}``
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from yt_subtitles.core.ir import SubtitlesResult, SubtitleTrack


class TrackFormats(BaseModel):
    """Rendered content of one track in every output format."""

    srt: str = Field(description="SRT subtitle document.")
    txt: str = Field(description="Plain text flattening of the captions.")


class TrackResponse(BaseModel):
    """One caption track in the response."""

    lang: str = Field(description="Human-readable track language label.")
    formats: TrackFormats = Field(description="Track content keyed by format.")

    @classmethod
    def from_track(cls, track: SubtitleTrack) -> TrackResponse:
        return cls(
            lang=track.language_label,
            formats=TrackFormats(srt=track.formats["srt"], txt=track.formats["txt"]),
        )


class SubtitlesResponse(BaseModel):
    """Subtitles of a video, split into original and translatable tracks.

    RULES:
    - originals: tracks YouTube marks as not translatable
    - translations: tracks YouTube marks as translatable
    - Each list keeps YouTube's track order
    """

    originals: List[TrackResponse] = Field(description="Non-translatable caption tracks.")
    translations: List[TrackResponse] = Field(description="Translatable caption tracks.")

    @classmethod
    def from_result(cls, result: SubtitlesResult) -> SubtitlesResponse:
        return cls(
            originals=[TrackResponse.from_track(t) for t in result.originals],
            translations=[TrackResponse.from_track(t) for t in result.translations],
        )

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "originals": [],
                "translations": [
                    {
                        "lang": "English",
                        "formats": {
                            "srt": "1\n00:00:00,000 --> 00:00:02,000\nHello there",
                            "txt": "Hello there",
                        },
                    }
                ],
            }
        ]
    }}


class FormatInfo(BaseModel):
    """Description of an available output format."""

    key: str = Field(description="Format identifier used as a key in 'formats'.")
    name: str = Field(description="Human-readable format name.")
    suffix: str = Field(description="File suffix used when saving (e.g. '.srt').")
    media_type: str = Field(description="MIME type of the rendered content.")


class ErrorResponse(BaseModel):
    """Standard error response body."""

    error: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})

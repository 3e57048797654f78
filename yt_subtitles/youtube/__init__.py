"""YouTube access package: caption track discovery and document download.

WHY: Track listing and document fetching are external collaborators of the
subtitle pipeline. Keeping them in one package means no other module needs
to know about the transcript library or its errors.

HOW: Wraps youtube-transcript-api behind YouTubeClient, which provides
list_tracks() and fetch_document(); library objects are mapped into typed
dataclasses defined in models.py. URL validation lives in urls.py.

RULES:
- All YouTube calls go through YouTubeClient (no library usage elsewhere)
- No authentication; only public caption tracks are reachable
"""

from yt_subtitles.youtube.client import YouTubeClient
from yt_subtitles.youtube.models import CaptionTrack
from yt_subtitles.youtube.urls import extract_video_id, is_valid_url

__all__ = ["CaptionTrack", "YouTubeClient", "extract_video_id", "is_valid_url"]

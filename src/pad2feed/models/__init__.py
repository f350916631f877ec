"""
Data models for feed entries.

Provides the Pydantic models for one podcast feed record and its
YAML rendering.
"""

from pad2feed.models.entities import AudioRef, ChapterMark, EpisodeRecord

__all__ = [
    "AudioRef",
    "ChapterMark",
    "EpisodeRecord",
]

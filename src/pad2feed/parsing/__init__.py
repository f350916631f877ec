"""
Pad parsing: section splitting and field extraction.
"""

from pad2feed.parsing.extractor import (
    extract_chapters,
    extract_long_summary,
    extract_music_credits,
    extract_summary,
)
from pad2feed.parsing.sections import PRE_SECTION, split_sections

__all__ = [
    "PRE_SECTION",
    "split_sections",
    "extract_summary",
    "extract_long_summary",
    "extract_chapters",
    "extract_music_credits",
]

"""
Field extraction from pad sections.

Turns the loosely structured section lines into the pieces of a feed
record: short summary, shownotes body, chapter marks and music credits.
Required sections raise MissingSectionError; optional ones that are
absent or contain unusable lines are logged and skipped.
"""

import logging
from typing import Callable, Dict, List

from pad2feed.errors import MissingSectionError
from pad2feed.ingestion.links import first_http_token
from pad2feed.models.entities import ChapterMark

logger = logging.getLogger(__name__)

SUMMARY_SECTION = "summary"
SHOWNOTES_SECTIONS = ("shownotes", "long summary")
CHAPTERS_SECTION = "chapters"
MUSIC_SECTION = "mukke"

SHOWNOTES_HEADER = "**Shownotes:**\n"
# Musical notes glyph plus non-breaking space, as HTML entities
MUSIC_NOTE = "&#x1f3b6;&nbsp;"

Sections = Dict[str, List[str]]


def extract_summary(sections: Sections) -> str:
    """
    Join the "summary" section into the short summary.

    Raises:
        MissingSectionError: If the pad has no summary section
    """
    if SUMMARY_SECTION not in sections:
        raise MissingSectionError("Summary", _section_sizes(sections))
    return "\n".join(sections[SUMMARY_SECTION])


def extract_long_summary(sections: Sections) -> str:
    """
    Build the markdown shownotes body.

    Uses the "shownotes" section, falling back to "long summary".

    Args:
        sections: Output of split_sections

    Returns:
        "**Shownotes:**" header line followed by the section lines

    Raises:
        MissingSectionError: If neither section exists
    """
    for name in SHOWNOTES_SECTIONS:
        if name in sections:
            return SHOWNOTES_HEADER + "\n".join(sections[name])

    found = _section_sizes(sections)
    logger.error("=== Found following sections:")
    for name, size in found.items():
        logger.error("=== %s: %d", name, size)
    raise MissingSectionError("Shownotes", found)


def extract_chapters(sections: Sections) -> List[ChapterMark]:
    """
    Parse the optional "chapters" section.

    Each line is split on single spaces: the first token is the start
    timestamp and the remaining tokens form the title. Lines with fewer
    than two tokens are skipped.

    Args:
        sections: Output of split_sections

    Returns:
        Chapter marks in source order, empty if there is no section

    Example:
        >>> extract_chapters({"chapters": ["00:01:23 Intro music"]})
        [ChapterMark(start='00:01:23', title='Intro music')]
    """
    chapters: List[ChapterMark] = []
    for line in sections.get(CHAPTERS_SECTION, []):
        tokens = line.split(" ")
        if len(tokens) < 2:
            continue
        chapters.append(ChapterMark(start=tokens[0], title=" ".join(tokens[1:])))
    return chapters


def extract_music_credits(
    sections: Sections,
    title_fetcher: Callable[[str], str],
) -> List[str]:
    """
    Format the optional "mukke" section as markdown credit lines.

    The first http token of each line is the track link; its page title
    is looked up with ``title_fetcher``. Lines without a link are logged
    and skipped.

    Args:
        sections: Output of split_sections
        title_fetcher: Returns the title of the page at a URL

    Returns:
        Entries like ``&#x1f3b6;&nbsp;[Title](url)`` in source order
    """
    if MUSIC_SECTION not in sections:
        logger.info("No mukke section in pad")
        return []

    credits: List[str] = []
    for line in sections[MUSIC_SECTION]:
        link = first_http_token(line)
        if not link:
            logger.warning("No link found in mukke entry: %r", line)
            continue
        credits.append(format_music_credit(title_fetcher(link), link))
    return credits


def format_music_credit(title: str, url: str) -> str:
    """Render one credit as a note glyph and a markdown link."""
    return f"{MUSIC_NOTE}[{title}]({url})"


def _section_sizes(sections: Sections) -> Dict[str, int]:
    return {name: len(lines) for name, lines in sections.items()}

"""
Assemble the podcast feed record for one episode.

The episode date comes from the pad URL (``..._YYYY-MM-DD...``); uuid,
title, publication date and audio file name are derived from it. The
text fields come from the pad sections.
"""

import logging
from typing import Callable, Dict, List, NamedTuple, Optional

from pad2feed.config import Config, get_config
from pad2feed.errors import ConfigError, MalformedEpisodeURLError
from pad2feed.models.entities import AudioRef, EpisodeRecord
from pad2feed.parsing.extractor import (
    extract_chapters,
    extract_long_summary,
    extract_music_credits,
    extract_summary,
)

logger = logging.getLogger(__name__)


class EpisodeDate(NamedTuple):
    """Date components as they appear in the pad URL (zero-padded strings)."""

    year: str
    month: str
    day: str


def parse_episode_date(url: str) -> EpisodeDate:
    """
    Take the episode date from the second ``_``-separated part of a URL.

    The components are sliced at fixed offsets of ``YYYY-MM-DD`` and are
    not validated further.

    Args:
        url: Episode pad URL

    Returns:
        EpisodeDate with year, month and day

    Raises:
        MalformedEpisodeURLError: If there is no ``_`` or the part after
            it is shorter than 10 characters

    Example:
        >>> parse_episode_date("https://pad.ccc-p.org/CiR_2023-05-10_x")
        EpisodeDate(year='2023', month='05', day='10')
    """
    parts = url.split("_")
    if len(parts) < 2:
        raise MalformedEpisodeURLError(
            f"pad url must contain a date in the format YYYY-MM-DD_: {url}"
        )
    entry_date = parts[1]
    if len(entry_date) < 10:
        raise MalformedEpisodeURLError(
            f"pad url must contain a date in the format YYYY-MM-DD_: {url}"
        )
    logger.debug("Entry date: %s", entry_date)
    return EpisodeDate(entry_date[0:4], entry_date[5:7], entry_date[8:10])


def assemble_record(
    url: str,
    sections: Dict[str, List[str]],
    title_fetcher: Callable[[str], str],
    config: Optional[Config] = None,
) -> EpisodeRecord:
    """
    Build the feed record from the episode URL and its pad sections.

    Args:
        url: Episode pad URL carrying the date
        sections: Output of split_sections
        title_fetcher: Looks up page titles for music credits
        config: Record constants (subtitle, audio template, offset)

    Returns:
        The complete EpisodeRecord

    Raises:
        MalformedEpisodeURLError: If the URL carries no date
        MissingSectionError: If summary or shownotes are missing
        ConfigError: If the audio URL template has unknown placeholders
    """
    if config is None:
        config = get_config()

    date = parse_episode_date(url)
    long_summary = extract_long_summary(sections)
    summary = extract_summary(sections)
    chapters = extract_chapters(sections)

    for credit in extract_music_credits(sections, title_fetcher):
        long_summary += "\n" + credit

    return EpisodeRecord(
        uuid=f"nt-{date.year}-{date.month}-{date.day}",
        title=f"CiR am {date.day}.{date.month}.{date.year}",
        subtitle=config.subtitle,
        summary=summary,
        publication_date=(
            f"{date.year}-{date.month}-{date.day}T00:00:00{config.utc_offset}"
        ),
        audio=AudioRef(
            url=_audio_url(config.audio_url_template, date),
            mime_type=config.audio_mime_type,
        ),
        chapters=chapters,
        long_summary_md=long_summary,
    )


def _audio_url(template: str, date: EpisodeDate) -> str:
    try:
        return template.format(year=date.year, month=date.month, day=date.day)
    except (KeyError, IndexError, ValueError) as exc:
        raise ConfigError(
            f"audio_url_template may only use {{year}}, {{month}} and {{day}}: {template}"
        ) from exc

"""
End-to-end run: find the episode pad, parse it, assemble the record.

Everything here blocks; each fetched pad is closed before the next step
starts.
"""

import logging
from typing import Optional

from pad2feed.config import Config, RunOptions, get_config
from pad2feed.errors import EpisodeLinkNotFoundError, InvalidPadURLError
from pad2feed.feed.assembler import assemble_record
from pad2feed.ingestion.fetcher import PadFetcher
from pad2feed.ingestion.links import resolve_first_link
from pad2feed.models.entities import EpisodeRecord
from pad2feed.parsing.sections import split_sections

logger = logging.getLogger(__name__)


def resolve_episode_url(
    options: RunOptions,
    config: Config,
    fetcher: PadFetcher,
) -> str:
    """
    Decide which pad describes the episode.

    An explicit URL must live on the pad server. Otherwise the first pad
    link on the index pad is used.

    Raises:
        InvalidPadURLError: If the explicit URL is on another host
        EpisodeLinkNotFoundError: If the index pad links to no pad
    """
    if options.episode_url:
        if not options.episode_url.startswith(config.pad_host_prefix):
            raise InvalidPadURLError(
                f"pad url must start with {config.pad_host_prefix}"
            )
        return options.episode_url

    with fetcher.open_pad(config.index_url) as lines:
        pad_url = resolve_first_link(lines, config.pad_host_prefix)

    if pad_url is None:
        raise EpisodeLinkNotFoundError(
            f"no link to {config.pad_host_prefix} found in {config.index_url}"
        )
    return pad_url


def run_pipeline(
    options: RunOptions,
    config: Optional[Config] = None,
    fetcher: Optional[PadFetcher] = None,
) -> EpisodeRecord:
    """
    Produce the feed record for the episode selected by ``options``.

    Args:
        options: Command-line choices for this run
        config: Application configuration (default: get_config())
        fetcher: HTTP fetcher (default: PadFetcher with the configured timeout)

    Returns:
        The assembled EpisodeRecord

    Raises:
        Pad2FeedError: On any fetch or content failure
    """
    if config is None:
        config = get_config()
    if fetcher is None:
        fetcher = PadFetcher(timeout=config.request_timeout)

    pad_url = resolve_episode_url(options, config, fetcher)
    logger.debug("pad url: %s", pad_url)

    with fetcher.open_pad(pad_url) as lines:
        sections = split_sections(lines)
    logger.debug("Sections found: %s", ", ".join(sections))

    return assemble_record(pad_url, sections, fetcher.fetch_title, config)

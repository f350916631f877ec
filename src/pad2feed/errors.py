"""Custom exceptions for pad2feed.

Fatal conditions are raised as one of these and only turned into an exit
status by the CLI. Soft omissions (missing optional sections, unparsable
chapter or credit lines) are logged and never raised.
"""

from typing import Dict, Optional


class Pad2FeedError(Exception):
    """Base exception for all pad2feed errors."""

    pass


class ConfigError(Pad2FeedError):
    """Settings from the environment, .env or pad2feed.yaml are invalid."""

    pass


class FetchError(Pad2FeedError):
    """Transport failure or non-200 response while fetching a document."""

    def __init__(self, message: str, url: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ContentError(Pad2FeedError):
    """The fetched document does not have the expected structure."""

    pass


class MissingSectionError(ContentError):
    """A required section is absent from the pad."""

    def __init__(self, section: str, found: Optional[Dict[str, int]] = None) -> None:
        super().__init__(f"no {section} section in pad")
        self.section = section
        self.found = found or {}


class MalformedEpisodeURLError(ContentError):
    """The episode URL does not carry a date in the format YYYY-MM-DD_."""

    pass


class EpisodeLinkNotFoundError(ContentError):
    """The index pad links to no episode pad."""

    pass


class InvalidPadURLError(ContentError):
    """An explicitly given pad URL is not hosted on the pad server."""

    pass


class OutputError(Pad2FeedError):
    """The output file is missing or cannot be written."""

    pass

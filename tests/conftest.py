"""
Shared test fixtures.

Provides pytest fixtures for common test resources including:
- Test configuration isolated from the environment
- A realistic episode pad and its split sections
- A fake fetcher serving pads and page titles from memory
"""

import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, List

import pytest

from pad2feed.config import Config
from pad2feed.parsing.sections import split_lines, split_sections


EPISODE_URL = "https://pad.ccc-p.org/CiR_2023-05-10_Chaos-im-Radio"

EPISODE_PAD = """\
# Chaos im Radio
Vorbereitung fuer die Sendung

## Summary
Wir reden ueber Mesh-Netze.
Und ueber Freifunk.

## Shownotes
* [Freifunk](https://freifunk.net)
* Mesh-Netze

## Chapters
00:00:00.000 Begruessung
00:03:12.500 Freifunk in Potsdam
kaputt

## Mukke
Artist - Track https://freemusicarchive.org/music/artist/track
nur Text ohne Link
"""

INDEX_PAD = """\
# Radio
Naechste Sendung: [CiR](https://pad.ccc-p.org/CiR_2023-05-10_Chaos-im-Radio)
Letzte Sendung: [CiR](https://pad.ccc-p.org/CiR_2023-04-12_Chaos-im-Radio)
"""


class FakeFetcher:
    """In-memory stand-in for PadFetcher."""

    def __init__(self, pads: Dict[str, str], titles: Dict[str, str] = None) -> None:
        self.pads = pads
        self.titles = titles or {}
        self.opened: List[str] = []
        self.title_requests: List[str] = []

    @contextmanager
    def open_pad(self, pad_url: str) -> Iterator[Iterator[str]]:
        self.opened.append(pad_url)
        yield iter(split_lines(self.pads[pad_url]))

    def fetch_title(self, url: str) -> str:
        self.title_requests.append(url)
        return self.titles.get(url, url)


@pytest.fixture
def temp_dir():
    """
    Create temporary directory for test files.

    Yields:
        Path: Temporary directory path
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_config() -> Config:
    """
    Create test configuration with default values.

    Returns:
        Config: Configuration that ignores .env files
    """
    return Config(_env_file=None)


@pytest.fixture
def episode_sections() -> Dict[str, List[str]]:
    """Sections of the sample episode pad."""
    return split_sections(EPISODE_PAD)


@pytest.fixture
def fake_fetcher() -> FakeFetcher:
    """Fetcher serving the sample index and episode pads."""
    return FakeFetcher(
        pads={
            "https://pad.ccc-p.org/Radio": INDEX_PAD,
            EPISODE_URL: EPISODE_PAD,
        },
        titles={
            "https://freemusicarchive.org/music/artist/track": "Track by Artist",
        },
    )

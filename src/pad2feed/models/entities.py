"""
Pydantic data models for the podcast feed record.

Field names follow Python conventions; the aliases are the keys the
website's content.yaml expects, and are used when rendering.
"""

from typing import List

import yaml
from pydantic import BaseModel, ConfigDict, Field


class _RecordDumper(yaml.SafeDumper):
    """SafeDumper that writes multi-line strings as literal blocks."""


def _represent_str(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    if "\n" in data:
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", data)


_RecordDumper.add_representer(str, _represent_str)


class AudioRef(BaseModel):
    """
    Audio enclosure of an episode.

    The URL is a template; the ``$media_base_url`` placeholder is
    substituted when the website is built.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    url: str
    mime_type: str = Field(default="audio/mp3", alias="mimeType")


class ChapterMark(BaseModel):
    """A chapter start timestamp (e.g. 00:01:23.000, unvalidated) and title."""
    model_config = ConfigDict(frozen=True)

    start: str
    title: str


class EpisodeRecord(BaseModel):
    """
    One podcast feed entry.

    Built once per run from a single pad and never changed afterwards.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    uuid: str
    title: str
    subtitle: str
    summary: str
    publication_date: str = Field(alias="publicationDate")
    audio: AudioRef
    chapters: List[ChapterMark] = Field(default_factory=list)
    long_summary_md: str

    def to_yaml(self) -> str:
        """Render the record as a YAML mapping using the feed key names."""
        return yaml.dump(
            self.model_dump(by_alias=True),
            Dumper=_RecordDumper,
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        )

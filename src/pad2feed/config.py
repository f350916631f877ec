"""
Configuration management for pad2feed.

Provides centralized configuration using Pydantic for validation and
environment variable support. Supports pad2feed.yaml for per-checkout
settings, and a small RunOptions value holding the command-line choices
of a single run.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Type

import yaml
from pydantic import Field, ValidationError
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from pad2feed.errors import ConfigError


# Index pad linking to the current episode pad
INDEX_URL = "https://pad.ccc-p.org/Radio"
PAD_HOST_PREFIX = "https://pad.ccc-p.org/"

# Content file of the website checkout, relative to the working directory
DEFAULT_OUTPUT_PATH = "../content.yaml"

CONFIG_YAML = "pad2feed.yaml"


class Config(BaseSettings):
    """
    Application configuration with environment variable support.

    Configuration can be provided via:
    1. Environment variables (prefixed with PAD2FEED_)
    2. .env file
    3. pad2feed.yaml in the working directory
    4. Default values

    Example:
        export PAD2FEED_INDEX_URL="https://pad.ccc-p.org/Radio"
        export PAD2FEED_REQUEST_TIMEOUT=30
    """

    model_config = SettingsConfigDict(
        env_prefix="PAD2FEED_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        yaml_file=CONFIG_YAML,
        yaml_file_encoding="utf-8",
    )

    # Pad server
    index_url: str = Field(
        default=INDEX_URL,
        description="Pad whose first pad link points to the current episode"
    )
    pad_host_prefix: str = Field(
        default=PAD_HOST_PREFIX,
        description="URL prefix every episode pad link starts with"
    )

    # Output
    output_path: str = Field(
        default=DEFAULT_OUTPUT_PATH,
        description="YAML file the record is appended to (empty: stdout)"
    )

    # Record constants
    subtitle: str = Field(
        default="Der Chaostreff im Freien Radio Potsdam",
        description="Subtitle shared by all episodes"
    )
    audio_url_template: str = Field(
        default="$media_base_url/{year}_{month}_{day}-chaos-im-radio.mp3",
        description="Audio URL; $media_base_url is substituted by the site build"
    )
    audio_mime_type: str = Field(
        default="audio/mp3",
        description="MIME type of the episode audio"
    )
    utc_offset: str = Field(
        default="+02:00",
        description="Offset appended to the publication date"
    )

    # Network
    request_timeout: Optional[float] = Field(
        default=None,
        description="Per-request timeout in seconds (None blocks until done)"
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """Insert pad2feed.yaml below environment and .env in precedence."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


@dataclass(frozen=True)
class RunOptions:
    """
    Choices made on the command line for one run.

    Attributes:
        output_path: File to append the record to, None for stdout
        episode_url: Explicit episode pad URL, None to resolve via the index
        verbose: Enable debug logging
    """

    output_path: Optional[Path] = None
    episode_url: Optional[str] = None
    verbose: bool = False


def get_config() -> Config:
    """
    Get the application configuration instance.

    Merges settings from environment variables, .env file,
    and pad2feed.yaml (if present).

    Returns:
        Config: Application configuration

    Raises:
        ConfigError: If a setting has the wrong type or pad2feed.yaml
            is not valid YAML
    """
    try:
        return Config()
    except ValidationError as exc:
        raise ConfigError(f"invalid configuration: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"cannot read {CONFIG_YAML}: {exc}") from exc

"""
Append a rendered feed record to the website content file.

The content file must already exist; it is opened for read/append and
never created. Without a path the record goes to standard output.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from pad2feed.errors import OutputError
from pad2feed.models.entities import EpisodeRecord

logger = logging.getLogger(__name__)


def write_record(record: EpisodeRecord, output_path: Optional[Path] = None) -> str:
    """
    Render the record as YAML and append it to a file or print it.

    Args:
        record: Feed record to write
        output_path: Existing file to append to, None for stdout

    Returns:
        The rendered YAML text

    Raises:
        OutputError: If the file is missing or the write fails
    """
    rendered = record.to_yaml()

    if output_path is None:
        sys.stdout.write(rendered)
        return rendered

    try:
        fd = os.open(output_path, os.O_RDWR | os.O_APPEND)
    except OSError as exc:
        logger.debug("%s", rendered)
        raise OutputError(f"Error while opening {output_path}: {exc}") from exc

    try:
        with os.fdopen(fd, "a", encoding="utf-8") as f:
            f.write(rendered)
    except OSError as exc:
        logger.debug("%s", rendered)
        raise OutputError(f"Error writing {output_path}: {exc}") from exc

    logger.info("Appended %s to %s", record.uuid, output_path)
    return rendered

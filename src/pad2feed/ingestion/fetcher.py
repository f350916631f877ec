"""
HTTP access to the pad server and to music credit pages.

Pads are served by HedgeDoc; appending ``/download`` to a pad URL returns
its raw markdown. Bodies are streamed and read line by line, and every
response is closed when its ``with`` block exits, whichever way it exits.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

import requests

from pad2feed.errors import FetchError
from pad2feed.parsing.sections import drop_line_ending

logger = logging.getLogger(__name__)

TITLE_OPEN = "<title>"
TITLE_CLOSE = "</title>"

# Bytes read per streamed chunk
CHUNK_SIZE = 512


class PadFetcher:
    """
    Blocking fetcher for pad markdown and page titles.

    Any transport error or non-200 status raises FetchError; there are
    no retries.

    Attributes:
        timeout: Per-request timeout in seconds, None to wait indefinitely

    Example:
        >>> fetcher = PadFetcher(timeout=30)
        >>> with fetcher.open_pad("https://pad.ccc-p.org/Radio") as lines:
        ...     for line in lines:
        ...         print(line)
    """

    def __init__(self, timeout: Optional[float] = None) -> None:
        self.timeout = timeout

    @contextmanager
    def open_pad(self, pad_url: str) -> Iterator[Iterator[str]]:
        """
        Stream the raw markdown of a pad.

        Args:
            pad_url: Pad URL, with or without trailing slash

        Yields:
            Iterator over the document lines, without line terminators
        """
        download_url = f"{pad_url.rstrip('/')}/download"
        response = self._get(download_url)
        try:
            yield _iter_text_lines(response, download_url)
        finally:
            response.close()

    def fetch_title(self, url: str) -> str:
        """
        Look up the HTML title of a page.

        Only a line that starts with ``<title>`` is recognised; the tag
        and a trailing ``</title>`` are stripped.

        Args:
            url: Page URL

        Returns:
            The page title, or the URL itself if no title line is found
        """
        response = self._get(url)
        try:
            for line in _iter_text_lines(response, url):
                if line.startswith(TITLE_OPEN):
                    title = line[len(TITLE_OPEN):]
                    if title.endswith(TITLE_CLOSE):
                        title = title[:-len(TITLE_CLOSE)]
                    return title
        finally:
            response.close()

        logger.debug("No title line found on %s", url)
        return url

    def _get(self, url: str) -> requests.Response:
        logger.debug("GET %s", url)
        try:
            response = requests.get(url, stream=True, timeout=self.timeout)
        except requests.exceptions.Timeout as exc:
            raise FetchError(f"request to {url} timed out", url) from exc
        except requests.exceptions.RequestException as exc:
            raise FetchError(f"request to {url} failed: {exc}", url) from exc

        if response.status_code != 200:
            response.close()
            raise FetchError(
                f"{url} must be accessible, got HTTP {response.status_code}",
                url,
                status_code=response.status_code,
            )
        return response


def _iter_text_lines(response: requests.Response, url: str) -> Iterator[str]:
    """
    Decode a streamed body line by line, as UTF-8 unless a charset is given.

    Lines end at ``\\n`` only, with one trailing ``\\r`` dropped. A final
    line without newline is yielded when it is not empty.
    """
    content_type = response.headers.get("Content-Type", "")
    if "charset" not in content_type.lower():
        response.encoding = "utf-8"

    pending = ""
    try:
        for chunk in response.iter_content(chunk_size=CHUNK_SIZE, decode_unicode=True):
            pending += chunk
            lines = pending.split("\n")
            pending = lines.pop()
            for line in lines:
                yield drop_line_ending(line)
    except requests.exceptions.RequestException as exc:
        raise FetchError(f"reading {url} failed: {exc}", url) from exc

    if pending:
        yield drop_line_ending(pending)

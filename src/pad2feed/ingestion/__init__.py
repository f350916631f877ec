"""
Ingestion module for fetching pads and locating links in them.

Provides streaming download of pad markdown, page title lookup for
music credits, and the link scanners used on pad text.
"""

from pad2feed.ingestion.fetcher import PadFetcher
from pad2feed.ingestion.links import first_http_token, resolve_first_link

__all__ = ["PadFetcher", "first_http_token", "resolve_first_link"]

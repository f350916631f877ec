"""
Link scanners for pad text.

The index pad lists episodes as markdown links; the first one pointing to
the pad server is the current episode. Music credit lines carry a bare
URL somewhere in free text.
"""

from typing import Iterable, Optional

from pad2feed.config import PAD_HOST_PREFIX


def resolve_first_link(
    lines: Iterable[str],
    prefix: str = PAD_HOST_PREFIX,
) -> Optional[str]:
    """
    Find the first parenthesised link starting with ``prefix``.

    Each line is split on ``(``; a fragment qualifies when it starts with
    the prefix and contains a closing ``)``. The link is the text before
    that ``)``. Scanning stops at the first match, so a lazily read
    stream is not consumed further than needed.

    Args:
        lines: Document lines in order
        prefix: Host prefix a link must start with

    Returns:
        The link, or None if no line holds a qualifying link

    Example:
        >>> resolve_first_link(["text (https://pad.ccc-p.org/Foo) more"])
        'https://pad.ccc-p.org/Foo'
        >>> resolve_first_link(["(https://pad.ccc-p.org/Foo"]) is None
        True
    """
    for line in lines:
        for candidate in line.split("("):
            if candidate.startswith(prefix) and ")" in candidate:
                return candidate.split(")", 1)[0]
    return None


def first_http_token(line: str) -> str:
    """
    Return the first space-separated token starting with ``http``.

    Args:
        line: Free-text line, e.g. a music credit

    Returns:
        The token, or an empty string if the line has none
    """
    for token in line.split(" "):
        if token.startswith("http"):
            return token
    return ""

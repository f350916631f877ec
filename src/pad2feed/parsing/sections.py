"""
Split pad markdown into sections keyed by second-level headings.

Only ``## `` headings open sections; other heading levels are dropped.
Section names are lower-cased. A heading that repeats replaces the
content collected under its earlier occurrence.
"""

from typing import Dict, Iterable, List, Union

# Key for the lines above the first "## " heading
PRE_SECTION = "pre-section"

SECTION_PREFIX = "## "


def drop_line_ending(line: str) -> str:
    """Remove one trailing ``\\n`` and then one trailing ``\\r``."""
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def split_lines(text: str) -> List[str]:
    """
    Split text into lines at ``\\n`` only.

    Other separators such as ``\\u2028`` or form feeds stay inside the
    line. A trailing newline does not add an empty last line.

    Example:
        >>> split_lines("a\\r\\nb\\n")
        ['a', 'b']
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [drop_line_ending(line) for line in lines]


def split_sections(document: Union[str, Iterable[str]]) -> Dict[str, List[str]]:
    """
    Group document lines by the ``## `` heading above them.

    Lines are stripped of surrounding plain spaces (tabs are kept) and
    blank lines are preserved. The ``pre-section`` key is always present.

    Args:
        document: Whole markdown text, or an iterable of its lines

    Returns:
        Mapping of lower-cased section name to its lines in order

    Example:
        >>> split_sections("## Summary\\nHallo\\n")
        {'pre-section': [], 'summary': ['Hallo']}
    """
    lines = split_lines(document) if isinstance(document, str) else document

    sections: Dict[str, List[str]] = {}
    current_name = PRE_SECTION
    current_lines: List[str] = []

    for raw_line in lines:
        line = drop_line_ending(raw_line)
        if line.startswith(SECTION_PREFIX):
            sections[current_name] = current_lines
            current_name = line[len(SECTION_PREFIX):].lower()
            current_lines = []
            continue
        if line.startswith("#"):
            continue
        current_lines.append(line.strip(" "))

    sections[current_name] = current_lines
    return sections

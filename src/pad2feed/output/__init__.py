"""
Output of rendered feed records.
"""

from pad2feed.output.writer import write_record

__all__ = ["write_record"]

"""
Feed record assembly.
"""

from pad2feed.feed.assembler import EpisodeDate, assemble_record, parse_episode_date

__all__ = ["EpisodeDate", "assemble_record", "parse_episode_date"]

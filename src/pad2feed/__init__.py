"""
pad2feed

Turns the markdown pad of a "Chaos im Radio" episode into a podcast feed
entry. Fetches the pad, splits it into sections, extracts summary,
shownotes, chapters and music credits, and renders one YAML record.
"""

__version__ = "0.1.0"
__author__ = "CCC Potsdam Radio Team"

from pad2feed.config import Config, RunOptions

__all__ = ["Config", "RunOptions", "__version__"]

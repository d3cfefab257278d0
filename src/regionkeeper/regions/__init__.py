"""Regions module — parse, pool and merge protected regions."""

from regionkeeper.regions.document import Document, Segment
from regionkeeper.regions.lexicon import Comment, CommentLexicon
from regionkeeper.regions.merge import fill_in, merge
from regionkeeper.regions.oracle import Marker, PatternOracle, RegionOracle, get_oracle
from regionkeeper.regions.parser import RegionParser
from regionkeeper.regions.pool import RegionPool

__all__ = [
    "Document",
    "Segment",
    "Comment",
    "CommentLexicon",
    "merge",
    "fill_in",
    "Marker",
    "PatternOracle",
    "RegionOracle",
    "get_oracle",
    "RegionParser",
    "RegionPool",
]

"""Core data structures for the link-cut forest."""

from .aggregate import SUBTREE_SIZE, PathAggregate
from .forest import NIL, ForestStats, LinkCutForest

__all__ = [
    "NIL",
    "ForestStats",
    "LinkCutForest",
    "PathAggregate",
    "SUBTREE_SIZE",
]

"""Shared test utilities for linkcut."""

from .reference import ReferenceForest, UnionFind, real_root

__all__ = ["ReferenceForest", "UnionFind", "real_root"]

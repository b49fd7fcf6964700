"""linkcut: an arena-backed link-cut tree.

Quick Start
-----------
>>> from linkcut import Node
>>>
>>> a, b, c = Node.new(), Node.new(), Node.new()
>>> b.link(a)
>>> c.link(b)
>>> c.expose()
>>> c.aggregate()  # nodes on the path a -> b -> c
3
>>> c.cut()

Classes
-------
Node : Handle exposing the per-vertex operations.
LinkCutForest : Arena holding the node buffers of one forest.
PathAggregate : Monoid folded over splay subtrees (``SUBTREE_SIZE`` by default).
"""

from importlib.metadata import version as _pkg_version

try:
    __version__ = _pkg_version("linkcut")
except Exception:  # pragma: no cover - best effort during local development
    __version__ = "0.1.0"

from .api import Node, default_forest, reset_default_forest
from .algo import cut, expose, link, rotate, splay
from .core import NIL, SUBTREE_SIZE, ForestStats, LinkCutForest, PathAggregate
from .errors import (
    AlreadyLinkedError,
    CycleError,
    ForeignNodeError,
    InvalidDirectionError,
    LinkCutError,
    NoSuchEdgeError,
    PreconditionError,
    UnknownNodeError,
)

__all__ = [
    "__version__",
    # Primary API
    "Node",
    "LinkCutForest",
    "default_forest",
    "reset_default_forest",
    # Kernels
    "rotate",
    "splay",
    "expose",
    "link",
    "cut",
    # Core
    "NIL",
    "ForestStats",
    "PathAggregate",
    "SUBTREE_SIZE",
    # Errors
    "LinkCutError",
    "InvalidDirectionError",
    "UnknownNodeError",
    "ForeignNodeError",
    "PreconditionError",
    "AlreadyLinkedError",
    "CycleError",
    "NoSuchEdgeError",
]

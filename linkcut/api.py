from __future__ import annotations

from functools import lru_cache
from typing import Any, Optional

from linkcut import algo
from linkcut.core.forest import LinkCutForest
from linkcut.errors import ForeignNodeError


@lru_cache(maxsize=None)
def default_forest() -> LinkCutForest:
    """Forest backing `Node.new()` calls that do not name one."""

    return LinkCutForest()


def reset_default_forest() -> None:
    default_forest.cache_clear()


class Node:
    """Handle to one vertex of a :class:`LinkCutForest`.

    Handles compare by identity of the underlying vertex: two handles are equal
    iff they refer to the same id in the same forest object.
    """

    __slots__ = ("forest", "index")

    def __init__(self, forest: LinkCutForest, index: int) -> None:
        self.forest = forest
        self.index = forest.check_node(index)

    @classmethod
    def new(cls, forest: LinkCutForest | None = None) -> "Node":
        """Create a singleton tree (no parent, no children, aggregate of one node)."""

        if forest is None:
            forest = default_forest()
        return cls(forest, forest.new())

    def _wrap(self, index: Optional[int]) -> Optional["Node"]:
        if index is None:
            return None
        return Node(self.forest, index)

    def _same_forest(self, other: "Node") -> None:
        if other.forest is not self.forest:
            raise ForeignNodeError(f"{other!r} belongs to a different forest than {self!r}.")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.forest is other.forest and self.index == other.index

    def __hash__(self) -> int:
        return hash((id(self.forest), self.index))

    def __repr__(self) -> str:
        return f"Node({self.index})"

    # Node & ownership model
    def parent(self) -> Optional["Node"]:
        return self._wrap(self.forest.parent(self.index))

    def child(self, direction: int) -> Optional["Node"]:
        return self._wrap(self.forest.child(self.index, direction))

    def aggregate(self) -> Any:
        return self.forest.aggregate(self.index)

    def dir(self) -> Optional[int]:
        return self.forest.dir(self.index)

    def is_path_root(self) -> bool:
        return self.forest.is_path_root(self.index)

    def path_parent(self) -> Optional["Node"]:
        return self._wrap(self.forest.path_parent(self.index))

    def update(self) -> None:
        self.forest.update(self.index)

    # Restructuring
    def rotate(self) -> bool:
        return algo.rotate(self.forest, self.index)

    def splay(self) -> None:
        algo.splay(self.forest, self.index)

    def expose(self) -> None:
        algo.expose(self.forest, self.index)

    # Forest mutation
    def link(self, new_parent: "Node") -> None:
        """Make this node, which must be a tree root, a child of `new_parent`."""

        self._same_forest(new_parent)
        algo.link(self.forest, self.index, new_parent.index)

    def cut(self) -> None:
        """Detach this node's subtree from its parent."""

        algo.cut(self.forest, self.index)

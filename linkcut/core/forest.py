from __future__ import annotations

import operator
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

import numpy as np

from linkcut import config as lc_config
from linkcut.core.aggregate import SUBTREE_SIZE, PathAggregate
from linkcut.errors import InvalidDirectionError, UnknownNodeError
from linkcut.logging import get_logger

NIL = -1

LOGGER = get_logger("core.forest")


@dataclass
class ForestStats:
    rotations: int = 0
    splays: int = 0
    exposes: int = 0
    links: int = 0
    cuts: int = 0


class LinkCutForest:
    """Arena holding every node of one link-cut forest.

    Nodes are dense integer ids. `parents`, `children` and `aggregates` are the
    raw buffers the kernels in :mod:`linkcut.algo` rewrite in place; they are
    sized to the arena capacity, and only the first `num_nodes` entries are
    live. External code should go through the accessors below or through
    :class:`linkcut.api.Node` rather than writing the buffers directly.

    A parent link is non-owning: ``parents[c] == p`` while ``p`` does not list
    ``c`` in ``children[p]`` is a light edge.
    """

    def __init__(
        self,
        capacity: int | None = None,
        *,
        aggregate: PathAggregate = SUBTREE_SIZE,
        enable_numba: bool | None = None,
        check_preconditions: bool | None = None,
    ) -> None:
        runtime = lc_config.runtime_config()
        if capacity is None:
            capacity = runtime.initial_capacity
        if capacity <= 0:
            raise ValueError(f"Capacity must be positive, got {capacity}.")
        if enable_numba is None:
            enable_numba = runtime.enable_numba
        if enable_numba and aggregate is not SUBTREE_SIZE:
            LOGGER.debug(
                "Compiled kernels only cover the '%s' aggregate; using Python kernels for '%s'.",
                SUBTREE_SIZE.name,
                aggregate.name,
            )
            enable_numba = False

        self.aggregate_fold = aggregate
        self.use_numba = bool(enable_numba)
        if check_preconditions is None:
            check_preconditions = runtime.check_preconditions
        self.check_preconditions = bool(check_preconditions)
        self.stats = ForestStats()
        self.num_nodes = 0
        self.parents = np.full((capacity,), NIL, dtype=np.int64)
        self.children = np.full((capacity, 2), NIL, dtype=np.int64)
        self.aggregates = aggregate.empty_buffer(capacity)

    def __len__(self) -> int:
        return self.num_nodes

    def __repr__(self) -> str:
        return (
            f"LinkCutForest(num_nodes={self.num_nodes}, capacity={self.capacity}, "
            f"aggregate={self.aggregate_fold.name!r}, kernel={self.kernel_name!r})"
        )

    @property
    def capacity(self) -> int:
        return int(self.parents.shape[0])

    @property
    def kernel_name(self) -> str:
        return "numba" if self.use_numba else "python"

    # ------------------------------------------------------------------ #
    # Allocation
    # ------------------------------------------------------------------ #

    def _grow(self, required: int) -> None:
        new_capacity = self.capacity
        while new_capacity < required:
            new_capacity *= 2
        get_logger("core.forest", forest=self).debug(
            "Growing arena from %d to %d nodes.", self.capacity, new_capacity
        )
        extra = new_capacity - self.capacity
        self.parents = np.concatenate(
            [self.parents, np.full((extra,), NIL, dtype=np.int64)]
        )
        self.children = np.concatenate(
            [self.children, np.full((extra, 2), NIL, dtype=np.int64)]
        )
        self.aggregates = np.concatenate(
            [self.aggregates, self.aggregate_fold.empty_buffer(extra)]
        )

    def new(self) -> int:
        """Allocate a singleton node and return its id."""

        return int(self.new_nodes(1)[0])

    def new_nodes(self, count: int) -> np.ndarray:
        """Allocate `count` singleton nodes and return their ids."""

        if count < 0:
            raise ValueError(f"Cannot allocate a negative number of nodes ({count}).")
        start = self.num_nodes
        stop = start + count
        if stop > self.capacity:
            self._grow(stop)
        self.parents[start:stop] = NIL
        self.children[start:stop] = NIL
        self.aggregates[start:stop] = self.aggregate_fold.unit
        self.num_nodes = stop
        return np.arange(start, stop, dtype=np.int64)

    # ------------------------------------------------------------------ #
    # Read accessors
    # ------------------------------------------------------------------ #

    def check_node(self, node: int) -> int:
        try:
            index = operator.index(node)
        except TypeError as exc:
            raise UnknownNodeError(node, self.num_nodes) from exc
        if not 0 <= index < self.num_nodes:
            raise UnknownNodeError(node, self.num_nodes)
        return index

    def parent(self, node: int) -> Optional[int]:
        parent = int(self.parents[self.check_node(node)])
        return None if parent == NIL else parent

    def child(self, node: int, direction: int) -> Optional[int]:
        if (
            isinstance(direction, bool)
            or not isinstance(direction, (int, np.integer))
            or direction not in (0, 1)
        ):
            raise InvalidDirectionError(direction)
        child = int(self.children[self.check_node(node), direction])
        return None if child == NIL else child

    def aggregate(self, node: int) -> Any:
        return self.aggregates[self.check_node(node)].item()

    def dir(self, node: int) -> Optional[int]:
        """Slot at which `node`'s parent stores it, or None across a light edge."""

        parent = self.parents[node]
        if parent == NIL:
            return None
        if self.children[parent, 0] == node:
            return 0
        if self.children[parent, 1] == node:
            return 1
        return None

    def is_path_root(self, node: int) -> bool:
        return self.dir(node) is None

    def path_parent(self, node: int) -> Optional[int]:
        if self.dir(node) is None:
            return None
        return int(self.parents[node])

    # ------------------------------------------------------------------ #
    # Aggregate maintenance
    # ------------------------------------------------------------------ #

    def _fold_children(self, node: int) -> Any:
        fold = self.aggregate_fold
        left, right = self.children[node]
        left_value = fold.identity if left == NIL else self.aggregates[left]
        right_value = fold.identity if right == NIL else self.aggregates[right]
        return fold.combine(fold.combine(left_value, fold.unit), right_value)

    def update(self, node: int) -> None:
        self.aggregates[node] = self._fold_children(node)

    # ------------------------------------------------------------------ #
    # Diagnostics
    # ------------------------------------------------------------------ #

    def validate(self) -> None:
        """Raise `ValueError` if any structural invariant is violated."""

        n = self.num_nodes
        parents = self.parents[:n]
        children = self.children[:n]
        if np.any((parents < NIL) | (parents >= n)):
            raise ValueError("Parent ids must be NIL or refer to allocated nodes.")
        if np.any((children < NIL) | (children >= n)):
            raise ValueError("Child ids must be NIL or refer to allocated nodes.")

        for node in range(n):
            for direction in (0, 1):
                child = int(children[node, direction])
                if child != NIL and parents[child] != node:
                    raise ValueError(
                        f"Node {node} lists {child} as child {direction} but "
                        f"{child}'s parent is {int(parents[child])}."
                    )
            if children[node, 0] != NIL and children[node, 0] == children[node, 1]:
                raise ValueError(f"Node {node} lists the same child in both slots.")

            expected = self._fold_children(node)
            if self.aggregates[node] != expected:
                raise ValueError(
                    f"Stale aggregate at node {node}: stored {self.aggregates[node]!r}, "
                    f"expected {expected!r}."
                )

        # Every parent chain must reach a root within n steps.
        for node in range(n):
            current = node
            for _ in range(n + 1):
                current = int(parents[current])
                if current == NIL:
                    break
            else:
                raise ValueError(f"Parent chain starting at node {node} contains a cycle.")

    def materialise(self) -> Dict[str, Any]:
        n = self.num_nodes
        return {
            "num_nodes": n,
            "aggregate": self.aggregate_fold.name,
            "kernel": self.kernel_name,
            "parents": self.parents[:n].copy(),
            "children": self.children[:n].copy(),
            "aggregates": self.aggregates[:n].copy(),
            "stats": asdict(self.stats),
        }

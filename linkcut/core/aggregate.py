from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable

import numpy as np


@dataclass(frozen=True)
class PathAggregate:
    """Monoid fold maintained over every splay subtree of a forest.

    A node's aggregate is ``combine(combine(left, unit), right)`` where absent
    children contribute ``identity``. `combine` must be associative, so the
    fold over a splay subtree equals the fold over the path segment it
    represents, in path order.
    """

    name: str
    dtype: Any
    identity: Any
    unit: Any
    combine: Callable[[Any, Any], Any]

    def empty_buffer(self, capacity: int) -> np.ndarray:
        return np.full((capacity,), self.unit, dtype=self.dtype)


SUBTREE_SIZE = PathAggregate(
    name="size",
    dtype=np.int64,
    identity=0,
    unit=1,
    combine=operator.add,
)

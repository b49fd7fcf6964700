"""Exceptions raised by the link-cut forest."""

from __future__ import annotations


class LinkCutError(Exception):
    """Base class for all errors raised by :mod:`linkcut`."""


class InvalidDirectionError(LinkCutError, IndexError):
    """A child slot other than 0 (left) or 1 (right) was requested."""

    def __init__(self, direction: object) -> None:
        super().__init__(f"Child direction must be 0 or 1, got {direction!r}.")
        self.direction = direction


class UnknownNodeError(LinkCutError, IndexError):
    """A node id does not refer to an allocated node of the forest."""

    def __init__(self, node: object, num_nodes: int) -> None:
        super().__init__(f"Node {node!r} is not allocated (forest holds {num_nodes} nodes).")
        self.node = node


class ForeignNodeError(LinkCutError, ValueError):
    """Two node handles belong to different forests."""


class PreconditionError(LinkCutError, ValueError):
    """A forest mutation was requested whose contract does not hold."""


class AlreadyLinkedError(PreconditionError):
    """`link` was called on a node that is not the root of its tree."""


class CycleError(PreconditionError):
    """`link` would join a node to a tree it already belongs to."""


class NoSuchEdgeError(PreconditionError):
    """`cut` was called on the root of a tree, which has no parent edge."""

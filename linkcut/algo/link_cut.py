from __future__ import annotations

from linkcut.algo.expose import expose
from linkcut.core.forest import NIL, LinkCutForest
from linkcut.errors import AlreadyLinkedError, CycleError, NoSuchEdgeError
from linkcut.logging import get_logger

LOGGER = get_logger("algo.link_cut")


def link(forest: LinkCutForest, node: int, new_parent: int) -> None:
    """Attach the tree rooted at `node` as a child of `new_parent`.

    `node` must be the root of its real tree and `new_parent` must belong to
    another tree. Both conditions are verified when the forest was built with
    `check_preconditions`; they are checked before any edge changes, so a
    rejected call leaves the topology untouched.
    """

    node = forest.check_node(node)
    new_parent = forest.check_node(new_parent)
    parents = forest.parents
    children = forest.children
    checked = forest.check_preconditions

    expose(forest, node)
    if checked and children[node, 0] != NIL:
        LOGGER.debug("Rejected link(%d, %d): node is not a tree root.", node, new_parent)
        raise AlreadyLinkedError(f"Node {node} already has a parent; cut it before linking.")
    expose(forest, new_parent)
    # `node` is a tree root, so it lies on the exposed path iff both share a tree.
    if checked and (node == new_parent or parents[node] != NIL):
        LOGGER.debug("Rejected link(%d, %d): nodes share a tree.", node, new_parent)
        raise CycleError(f"Linking {node} under {new_parent} would create a cycle.")

    parents[node] = new_parent
    children[new_parent, 1] = node
    forest.update(new_parent)
    forest.stats.links += 1


def cut(forest: LinkCutForest, node: int) -> None:
    """Detach `node` and its descendants from `node`'s parent."""

    node = forest.check_node(node)
    parents = forest.parents
    children = forest.children

    expose(forest, node)
    above = int(children[node, 0])
    if above == NIL:
        LOGGER.debug("Rejected cut(%d): node is a tree root.", node)
        raise NoSuchEdgeError(f"Node {node} is the root of its tree and has no parent edge.")

    children[node, 0] = NIL
    parents[above] = NIL
    forest.update(node)
    forest.stats.cuts += 1

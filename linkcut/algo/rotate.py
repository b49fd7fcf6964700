from __future__ import annotations

from linkcut.core.forest import NIL, LinkCutForest


def rotate(forest: LinkCutForest, node: int) -> bool:
    """Rotate `node` above its parent within their splay tree.

    The parent's own upward link is inherited by `node`, so when the parent
    was a path root `node` becomes the path root and keeps the light edge.
    Returns False (and changes nothing) when `node` hangs off a light edge or
    has no parent.
    """

    node = forest.check_node(node)
    direction = forest.dir(node)
    if direction is None:
        return False

    parents = forest.parents
    children = forest.children
    parent = int(parents[node])
    inner = int(children[node, 1 - direction])

    children[parent, direction] = inner
    if inner != NIL:
        parents[inner] = parent

    parent_direction = forest.dir(parent)
    grandparent = int(parents[parent])
    if parent_direction is not None:
        children[grandparent, parent_direction] = node
    parents[node] = grandparent

    children[node, 1 - direction] = parent
    parents[parent] = node

    forest.update(parent)
    forest.update(node)
    forest.stats.rotations += 1
    return True

from __future__ import annotations

from linkcut.algo import _splay_numba
from linkcut.algo.splay import splay
from linkcut.core.forest import NIL, LinkCutForest


def _expose_python(forest: LinkCutForest, node: int) -> None:
    parents = forest.parents
    children = forest.children
    while True:
        splay(forest, node)
        # The deeper part of the path stays attached to `node` by a light edge.
        children[node, 1] = NIL
        forest.update(node)
        parent = int(parents[node])
        if parent == NIL:
            break
        splay(forest, parent)
        children[parent, 1] = node
        forest.update(parent)


def expose(forest: LinkCutForest, node: int) -> None:
    """Make the path from `node`'s tree root to `node` a single splay tree.

    Afterwards `node` is the root of that splay tree, its left subtree holds
    exactly its strict ancestors and its right slot is empty, so its
    aggregate folds the whole root-to-node path.
    """

    node = forest.check_node(node)
    forest.stats.exposes += 1
    if forest.use_numba:
        rotations, splays = _splay_numba.expose_kernel(
            forest.parents, forest.children, forest.aggregates, node
        )
        forest.stats.rotations += rotations
        forest.stats.splays += splays
        return
    _expose_python(forest, node)

from __future__ import annotations

from linkcut.algo import _splay_numba
from linkcut.algo.rotate import rotate
from linkcut.core.forest import LinkCutForest


def _splay_python(forest: LinkCutForest, node: int) -> None:
    while True:
        parent = forest.path_parent(node)
        if parent is None:
            break
        if forest.is_path_root(parent):
            # zig
            pass
        elif forest.dir(node) == forest.dir(parent):
            # zig-zig
            rotate(forest, parent)
        else:
            # zig-zag
            rotate(forest, node)
        rotate(forest, node)


def splay(forest: LinkCutForest, node: int) -> None:
    """Move `node` to the root of its splay tree without crossing light edges."""

    node = forest.check_node(node)
    forest.stats.splays += 1
    if forest.use_numba:
        forest.stats.rotations += _splay_numba.splay_kernel(
            forest.parents, forest.children, forest.aggregates, node
        )
        return
    _splay_python(forest, node)

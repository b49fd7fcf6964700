"""Algorithmic kernels: rotation, splaying, exposure and forest mutation."""

from .rotate import rotate
from .splay import splay
from .expose import expose
from .link_cut import cut, link

__all__ = [
    "rotate",
    "splay",
    "expose",
    "link",
    "cut",
]

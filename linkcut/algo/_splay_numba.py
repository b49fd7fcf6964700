"""Compiled splay/expose kernels for forests folding subtree sizes.

The kernels rewrite the same `parents`/`children`/`aggregates` buffers as the
Python kernels and must leave them bit-identical for the same call sequence.
They hard-code the size fold (``1 + left + right``).
"""

from __future__ import annotations

import numpy as np
from numba import njit


@njit(cache=True)
def _dir_impl(parents: np.ndarray, children: np.ndarray, node: int) -> int:
    parent = parents[node]
    if parent < 0:
        return -1
    if children[parent, 0] == node:
        return 0
    if children[parent, 1] == node:
        return 1
    return -1


@njit(cache=True)
def _update_impl(children: np.ndarray, aggregates: np.ndarray, node: int) -> None:
    total = 1
    for direction in range(2):
        child = children[node, direction]
        if child >= 0:
            total += aggregates[child]
    aggregates[node] = total


@njit(cache=True)
def _rotate_impl(
    parents: np.ndarray, children: np.ndarray, aggregates: np.ndarray, node: int
) -> int:
    direction = _dir_impl(parents, children, node)
    if direction < 0:
        return 0
    parent = parents[node]
    inner = children[node, 1 - direction]

    children[parent, direction] = inner
    if inner >= 0:
        parents[inner] = parent

    parent_direction = _dir_impl(parents, children, parent)
    grandparent = parents[parent]
    if parent_direction >= 0:
        children[grandparent, parent_direction] = node
    parents[node] = grandparent

    children[node, 1 - direction] = parent
    parents[parent] = node

    _update_impl(children, aggregates, parent)
    _update_impl(children, aggregates, node)
    return 1


@njit(cache=True)
def splay_kernel(
    parents: np.ndarray, children: np.ndarray, aggregates: np.ndarray, node: int
) -> int:
    rotations = 0
    while _dir_impl(parents, children, node) >= 0:
        parent = parents[node]
        parent_direction = _dir_impl(parents, children, parent)
        if parent_direction < 0:
            pass
        elif _dir_impl(parents, children, node) == parent_direction:
            rotations += _rotate_impl(parents, children, aggregates, parent)
        else:
            rotations += _rotate_impl(parents, children, aggregates, node)
        rotations += _rotate_impl(parents, children, aggregates, node)
    return rotations


@njit(cache=True)
def expose_kernel(
    parents: np.ndarray, children: np.ndarray, aggregates: np.ndarray, node: int
) -> tuple[int, int]:
    rotations = 0
    splays = 0
    while True:
        rotations += splay_kernel(parents, children, aggregates, node)
        splays += 1
        children[node, 1] = -1
        _update_impl(children, aggregates, node)
        parent = parents[node]
        if parent < 0:
            break
        rotations += splay_kernel(parents, children, aggregates, parent)
        splays += 1
        children[parent, 1] = node
        _update_impl(children, aggregates, parent)
    return rotations, splays

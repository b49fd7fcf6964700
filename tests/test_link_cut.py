import numpy as np
import pytest

from linkcut.algo import cut, expose, link, rotate, splay
from linkcut.core.forest import NIL, LinkCutForest
from linkcut.errors import (
    AlreadyLinkedError,
    CycleError,
    NoSuchEdgeError,
    PreconditionError,
    UnknownNodeError,
)

from tests.utils import real_root


def test_abc_scenario():
    forest = LinkCutForest()
    a, b, c = forest.new(), forest.new(), forest.new()
    assert [forest.aggregate(node) for node in (a, b, c)] == [1, 1, 1]

    link(forest, b, a)
    link(forest, c, b)
    expose(forest, c)
    assert forest.aggregate(c) == 3

    cut(forest, c)
    expose(forest, b)
    assert forest.aggregate(b) == 2
    expose(forest, c)
    assert forest.aggregate(c) == 1
    assert real_root(forest, c) == c
    assert real_root(forest, b) == a
    forest.validate()


def test_link_leaves_no_stale_aggregate():
    forest = LinkCutForest()
    a, b = forest.new(), forest.new()

    link(forest, b, a)

    assert forest.parent(b) == a
    assert forest.child(a, 1) == b
    assert forest.aggregate(a) == 2
    assert forest.stats.links == 1
    forest.validate()


def test_link_moves_whole_subtree():
    forest = LinkCutForest()
    nodes = [int(node) for node in forest.new_nodes(6)]
    link(forest, nodes[1], nodes[0])
    link(forest, nodes[2], nodes[1])
    link(forest, nodes[4], nodes[3])
    link(forest, nodes[5], nodes[3])

    link(forest, nodes[3], nodes[2])

    for node in nodes:
        assert real_root(forest, node) == nodes[0]
    expose(forest, nodes[5])
    assert forest.aggregate(nodes[5]) == 5
    forest.validate()


def test_cut_splits_into_two_components():
    forest = LinkCutForest()
    nodes = [int(node) for node in forest.new_nodes(5)]
    link(forest, nodes[1], nodes[0])
    link(forest, nodes[2], nodes[1])
    link(forest, nodes[3], nodes[2])
    link(forest, nodes[4], nodes[1])

    cut(forest, nodes[2])

    roots = {node: real_root(forest, node) for node in nodes}
    assert roots == {
        nodes[0]: nodes[0],
        nodes[1]: nodes[0],
        nodes[4]: nodes[0],
        nodes[2]: nodes[2],
        nodes[3]: nodes[2],
    }
    assert forest.stats.cuts == 1
    forest.validate()


def test_cut_then_relink_restores_aggregates():
    forest = LinkCutForest()
    nodes = [int(node) for node in forest.new_nodes(6)]
    for parent, child in zip(nodes, nodes[1:]):
        link(forest, child, parent)

    def path_sizes():
        sizes = []
        for node in nodes:
            expose(forest, node)
            sizes.append(forest.aggregate(node))
        return sizes

    before = path_sizes()
    cut(forest, nodes[3])
    assert path_sizes() == [1, 2, 3, 1, 2, 3]
    link(forest, nodes[3], nodes[2])
    assert path_sizes() == before == [1, 2, 3, 4, 5, 6]


def test_cut_on_root_raises():
    forest = LinkCutForest()
    a, b = forest.new(), forest.new()
    link(forest, b, a)

    with pytest.raises(NoSuchEdgeError):
        cut(forest, a)
    with pytest.raises(PreconditionError):
        cut(forest, a)
    with pytest.raises(ValueError):
        cut(forest, forest.new())
    forest.validate()


def test_link_non_root_raises_and_leaves_topology():
    forest = LinkCutForest()
    a, b, c = forest.new(), forest.new(), forest.new()
    link(forest, b, a)

    with pytest.raises(AlreadyLinkedError):
        link(forest, b, c)

    assert real_root(forest, b) == a
    assert real_root(forest, c) == c
    forest.validate()


@pytest.mark.parametrize("target_index", [0, 1, 2])
def test_link_within_tree_raises_cycle(target_index: int):
    forest = LinkCutForest()
    nodes = [int(node) for node in forest.new_nodes(3)]
    link(forest, nodes[1], nodes[0])
    link(forest, nodes[2], nodes[1])

    with pytest.raises(CycleError):
        link(forest, nodes[0], nodes[target_index])

    for node in nodes:
        assert real_root(forest, node) == nodes[0]
    expose(forest, nodes[2])
    assert forest.aggregate(nodes[2]) == 3
    forest.validate()


def test_unchecked_link_trusts_the_caller():
    forest = LinkCutForest(check_preconditions=False)
    a, b, c = forest.new(), forest.new(), forest.new()
    link(forest, b, a)

    link(forest, b, c)

    assert forest.parent(b) == c
    assert forest.children[c, 1] == b
    assert forest.stats.links == 2


def test_second_child_becomes_light_edge():
    forest = LinkCutForest()
    a, b, c = forest.new(), forest.new(), forest.new()
    link(forest, b, a)
    link(forest, c, a)

    assert forest.parent(b) == a
    assert forest.children[a, 1] == c
    assert forest.is_path_root(b)
    expose(forest, b)
    assert forest.aggregate(b) == 2
    assert forest.children[b, 1] == NIL
    np.testing.assert_array_equal(forest.children[c], [NIL, NIL])
    forest.validate()


@pytest.mark.parametrize("enable_numba", [False, True])
@pytest.mark.parametrize("bad_id", [-1, 1, 10, 10_000])
def test_kernels_reject_unallocated_ids(enable_numba: bool, bad_id: int):
    forest = LinkCutForest(4, enable_numba=enable_numba)
    a = forest.new()

    with pytest.raises(UnknownNodeError):
        link(forest, a, bad_id)
    with pytest.raises(UnknownNodeError):
        link(forest, bad_id, a)
    with pytest.raises(UnknownNodeError):
        cut(forest, bad_id)
    with pytest.raises(UnknownNodeError):
        expose(forest, bad_id)
    with pytest.raises(UnknownNodeError):
        splay(forest, bad_id)
    with pytest.raises(UnknownNodeError):
        rotate(forest, bad_id)
    assert forest.parent(a) is None
    assert forest.stats.links == 0


def test_rejected_id_leaves_no_edge_to_later_allocation():
    forest = LinkCutForest(4)
    a = forest.new()

    with pytest.raises(UnknownNodeError):
        link(forest, a, 1)
    b = forest.new()

    assert forest.parent(a) is None
    assert forest.child(b, 1) is None
    assert real_root(forest, a) == a
    forest.validate()


def test_kernels_reject_non_integer_ids():
    forest = LinkCutForest()
    forest.new()

    with pytest.raises(UnknownNodeError):
        expose(forest, 0.0)

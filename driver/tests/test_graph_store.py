import pytest

from pgnudge.graph.graph_schema import Node, Edge
from pgnudge.graph.graph_store import GraphStore

from helpers import make_graph, edge_list


def test_add_edge_reports_whether_edge_was_new():
    graph = make_graph(owners=[0, 1], edges=[])

    assert graph.add_edge(0, 1) is True
    before = graph.adjacency()

    assert graph.add_edge(0, 1) is False
    assert graph.adjacency() == before
    assert graph.successors(0) == [1]
    assert graph.predecessors(1) == [0]


def test_self_loop_is_added_once():
    graph = make_graph(owners=[0], edges=[])

    assert graph.add_edge(0, 0) is True
    assert graph.add_edge(0, 0) is False
    assert graph.successors(0) == [0]
    assert graph.predecessors(0) == [0]


def test_add_edge_rejects_unknown_nodes():
    graph = make_graph(owners=[0], edges=[])

    with pytest.raises(IndexError):
        graph.add_edge(0, 1)


def test_remove_edge_updates_both_directions(diamond):
    diamond.remove_edge(0, 2)

    assert diamond.successors(0) == [1]
    assert diamond.predecessors(2) == []
    diamond.check_invariants()

    # absent edge is a no-op
    before = diamond.adjacency()
    diamond.remove_edge(0, 2)
    assert diamond.adjacency() == before


def test_successor_order_is_insertion_order():
    graph = make_graph(owners=[0, 0, 0, 0], edges=[(0, 3), (0, 1), (0, 2)])

    assert graph.successors(0) == [3, 1, 2]

    graph.remove_edge(0, 3)
    graph.add_edge(0, 3)
    assert graph.successors(0) == [1, 2, 3]


def test_extract_subgraph_renumbers_in_keep_order(diamond):
    sub = diamond.extract_subgraph([3, 0, 1])

    assert sub.node_count() == 3
    assert [n.owner for n in sub.get_nodes()] == [1, 0, 1]
    assert [n.priority for n in sub.get_nodes()] == [3, 2, 1]
    # 3->0, 0->1, 1->3 survive; edges through node 2 are dropped
    assert sorted(edge_list(sub)) == [(0, 1), (1, 2), (2, 0)]
    sub.check_invariants()

    # the source store is untouched
    assert diamond.node_count() == 4
    assert diamond.edge_count() == 5


def test_extract_subgraph_rejects_bad_keep_lists(diamond):
    with pytest.raises(ValueError):
        diamond.extract_subgraph([0, 0])
    with pytest.raises(ValueError):
        diamond.extract_subgraph([0, 9])


def test_without_node_removes_every_reference(diamond):
    sub = diamond.without_node(0)

    assert sub.node_count() == 3
    assert sorted(edge_list(sub)) == [(0, 2), (1, 2)]
    for node in range(sub.node_count()):
        assert all(0 <= m < 3 for m in sub.successors(node))
        assert all(0 <= m < 3 for m in sub.predecessors(node))
    sub.check_invariants()


def test_extract_subgraph_remaps_start_metadata(diamond):
    diamond.metadata["start"] = 2

    assert diamond.extract_subgraph([2, 3]).metadata["start"] == 0
    assert "start" not in diamond.extract_subgraph([0, 1]).metadata


def test_replace_contents_swaps_graph(diamond):
    sub = diamond.without_node(3)
    diamond.replace_contents(sub)

    assert diamond.node_count() == 3
    assert sorted(edge_list(diamond)) == [(0, 1), (0, 2)]


def test_clone_is_independent(diamond):
    copy = diamond.clone()
    copy.flip_owner(0)
    copy.add_edge(1, 0)

    assert diamond.owner(0) == 0
    assert not diamond.has_edge(1, 0)


def test_from_nodes_requires_dense_ids():
    nodes = [Node(id=0, priority=1, owner=0), Node(id=2, priority=1, owner=1)]

    with pytest.raises(ValueError):
        GraphStore.from_nodes(nodes)


def test_owner_must_be_a_player():
    graph = GraphStore()

    with pytest.raises(ValueError):
        graph.add_node(owner=2)


def test_check_invariants_detects_broken_adjacency(diamond):
    # corrupt the backing graph behind the store's back
    del diamond._graph._pred[1][0]

    with pytest.raises(ValueError):
        diamond.check_invariants()


def test_edges_are_value_objects(diamond):
    assert Edge(source=0, target=1) in diamond.get_edges()
    assert diamond.get_node(2) == Node(id=2, priority=4, owner=0, label=None)

from __future__ import annotations

from typing import List, Sequence

from pgnudge.graph.graph_store import GraphStore


def reindex(graph: GraphStore) -> List[int]:
    """
    Renumber nodes in ascending priority order, ties kept in index order.

    Returns the mapping ``mapping[new] = old``; ``permute(graph, mapping)``
    restores the previous numbering.
    """
    order = sorted(range(graph.node_count()), key=lambda i: (graph.priority(i), i))
    graph.replace_contents(graph.extract_subgraph(order))
    return order


def permute(graph: GraphStore, mapping: Sequence[int]) -> None:
    """
    Move the node at index ``i`` to index ``mapping[i]``.
    """
    n = graph.node_count()
    if sorted(mapping) != list(range(n)):
        raise ValueError(f"mapping is not a permutation of 0..{n - 1}")
    order = [0] * n
    for node, target in enumerate(mapping):
        order[target] = node
    graph.replace_contents(graph.extract_subgraph(order))

from __future__ import annotations

from typing import Dict, Iterable, List

from pgnudge.graph.graph_store import GraphStore


def _next_with_parity(previous: int, parity: int) -> int:
    value = previous + 1
    if value % 2 != parity % 2:
        value += 1
    return value


def _remap(graph: GraphStore, table: Dict[int, int]) -> None:
    for node in range(graph.node_count()):
        graph.set_priority(node, table[graph.priority(node)])


def _distinct(priorities: Iterable[int]) -> List[int]:
    return sorted(set(priorities))


def evenodd(graph: GraphStore) -> None:
    """
    Swap the roles of the players: shift every priority by one and flip
    every owner.
    """
    for node in range(graph.node_count()):
        graph.set_priority(node, graph.priority(node) + 1)
        graph.flip_owner(node)


def minmax(graph: GraphStore) -> None:
    """
    Reverse the priority order while keeping every priority's parity.
    """
    if graph.node_count() == 0:
        return
    top = max(graph.priorities())
    top += top % 2
    for node in range(graph.node_count()):
        graph.set_priority(node, top - graph.priority(node))


def inflate(graph: GraphStore) -> None:
    """
    Give every node its own priority, preserving order and parity.
    """
    order = sorted(range(graph.node_count()), key=lambda i: (graph.priority(i), i))
    current = -1
    for node in order:
        current = _next_with_parity(current, graph.priority(node))
        graph.set_priority(node, current)


def compress(graph: GraphStore) -> None:
    """
    Merge neighbouring priorities of equal parity and close the gaps.
    """
    table: Dict[int, int] = {}
    current = None
    for p in _distinct(graph.priorities()):
        if current is None:
            current = p % 2
        elif current % 2 != p % 2:
            current += 1
        table[p] = current
    _remap(graph, table)


def renumber(graph: GraphStore) -> None:
    """
    Map the distinct priorities onto the smallest increasing sequence that
    keeps every parity.
    """
    table: Dict[int, int] = {}
    current = -1
    for p in _distinct(graph.priorities()):
        current = _next_with_parity(current, p)
        table[p] = current
    _remap(graph, table)

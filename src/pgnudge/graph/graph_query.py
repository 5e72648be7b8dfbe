from __future__ import annotations

import logging
from typing import List, Set

import networkx as nx

from pgnudge.graph.graph_store import GraphStore


def _oriented(graph: GraphStore, start: int, downward: bool) -> nx.DiGraph:
    if not 0 <= start < graph.node_count():
        raise IndexError(f"node {start} out of range [0, {graph.node_count()})")
    g = graph.to_networkx()
    return g if downward else g.reverse(copy=False)


def reachable(graph: GraphStore, start: int, *, downward: bool = True) -> Set[int]:
    """
    Nodes reachable from ``start``, including ``start`` itself.

    Follows successors when ``downward``, predecessors otherwise.
    """
    g = _oriented(graph, start, downward)
    return nx.descendants(g, start) | {start}


def bottom_scc(graph: GraphStore, start: int, *, downward: bool = True) -> List[int]:
    """
    A terminal strongly connected component reachable from ``start``.

    Among the terminal components of the reachable part, the one holding
    the smallest node index is returned, as a sorted list. No edge leaves
    it in the followed direction.
    """
    g = _oriented(graph, start, downward)
    region = nx.descendants(g, start) | {start}

    condensed = nx.condensation(g.subgraph(region))
    sinks = [
        condensed.nodes[c]["members"]
        for c in condensed.nodes
        if condensed.out_degree(c) == 0
    ]
    scc = sorted(min(sinks, key=min))

    logging.getLogger("pgnudge.scc").info(
        "bottom scc from node %s: size=%s (reachable=%s, terminal components=%s)",
        start,
        len(scc),
        len(region),
        len(sinks),
    )
    return scc

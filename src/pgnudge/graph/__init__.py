"""
Graph subsystem for pgnudge.

Defines the game graph store, the random mutation engine and the
structural queries used before output.
"""

from pgnudge.graph.graph_schema import Node, Edge
from pgnudge.graph.graph_store import GraphStore
from pgnudge.graph.graph_query import bottom_scc, reachable
from pgnudge.graph.graph_mutator import GraphMutator, MutationReport

__all__ = [
    "Node",
    "Edge",
    "GraphStore",
    "bottom_scc",
    "reachable",
    "GraphMutator",
    "MutationReport",
]

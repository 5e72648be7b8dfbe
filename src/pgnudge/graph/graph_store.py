from __future__ import annotations

import networkx as nx
from typing import Iterable, Iterator, List, Dict, Any, Optional, Sequence, Tuple

from pgnudge.graph.graph_schema import Node, Edge, opponent


class GraphStore:
    """
    Authoritative in-memory game graph.

    Nodes are the dense integers ``0..n-1``. Each node carries an owner,
    a priority and an optional label. Successor and predecessor lists keep
    insertion order and never hold the same pair twice.

    Node deletion never happens in place: ``extract_subgraph`` builds a new,
    densely renumbered store.
    """

    def __init__(self) -> None:
        self._graph = nx.DiGraph()
        self.metadata: Dict[str, Any] = {}

    @classmethod
    def from_nodes(
        cls,
        nodes: Iterable[Node],
        edges: Iterable[Tuple[int, int]] = (),
    ) -> "GraphStore":
        g = cls()
        for expected, node in enumerate(nodes):
            if node.id != expected:
                raise ValueError(f"node ids must be dense, got {node.id} at position {expected}")
            g.add_node(owner=node.owner, priority=node.priority, label=node.label)
        for source, target in edges:
            g.add_edge(source, target)
        return g

    # -------------------- Nodes --------------------

    def add_node(
        self,
        *,
        owner: int,
        priority: int = 0,
        label: Optional[str] = None,
    ) -> int:
        if owner not in (0, 1):
            raise ValueError(f"owner must be 0 or 1, got {owner}")
        node_id = self._graph.number_of_nodes()
        self._graph.add_node(node_id, owner=owner, priority=priority, label=label)
        return node_id

    def get_node(self, node_id: int) -> Node:
        data = self._data(node_id)
        return Node(
            id=node_id,
            priority=data["priority"],
            owner=data["owner"],
            label=data["label"],
        )

    def get_nodes(self) -> List[Node]:
        return [self.get_node(n) for n in self._graph.nodes]

    def owner(self, node_id: int) -> int:
        return self._data(node_id)["owner"]

    def flip_owner(self, node_id: int) -> None:
        data = self._data(node_id)
        data["owner"] = opponent(data["owner"])

    def priority(self, node_id: int) -> int:
        return self._data(node_id)["priority"]

    def set_priority(self, node_id: int, priority: int) -> None:
        self._data(node_id)["priority"] = priority

    def label(self, node_id: int) -> Optional[str]:
        return self._data(node_id)["label"]

    def owners(self) -> List[int]:
        return [data["owner"] for _, data in self._graph.nodes(data=True)]

    def priorities(self) -> List[int]:
        return [data["priority"] for _, data in self._graph.nodes(data=True)]

    # -------------------- Edges --------------------

    def add_edge(self, source: int, target: int) -> bool:
        """
        Insert ``source -> target`` unless it is already present.

        Returns whether an edge was actually added.
        """
        self._check(source)
        self._check(target)
        if self._graph.has_edge(source, target):
            return False
        self._graph.add_edge(source, target)
        return True

    def remove_edge(self, source: int, target: int) -> None:
        if self._graph.has_edge(source, target):
            self._graph.remove_edge(source, target)

    def has_edge(self, source: int, target: int) -> bool:
        return self._graph.has_edge(source, target)

    def edges(self) -> Iterator[Edge]:
        for u, v in self._graph.edges():
            yield Edge(source=u, target=v)

    def get_edges(self) -> List[Edge]:
        return list(self.edges())

    # -------------------- Traversal --------------------

    def successors(self, node_id: int) -> List[int]:
        self._check(node_id)
        return list(self._graph.successors(node_id))

    def predecessors(self, node_id: int) -> List[int]:
        self._check(node_id)
        return list(self._graph.predecessors(node_id))

    def out_degree(self, node_id: int) -> int:
        self._check(node_id)
        return self._graph.out_degree(node_id)

    def adjacency(self) -> Tuple[List[List[int]], List[List[int]]]:
        """
        Snapshot of every successor list and every predecessor list.
        """
        nodes = list(self._graph.nodes)
        return (
            [list(self._graph.successors(n)) for n in nodes],
            [list(self._graph.predecessors(n)) for n in nodes],
        )

    def to_networkx(self) -> nx.DiGraph:
        """
        Read-only view of the backing graph.
        """
        return self._graph.copy(as_view=True)

    # -------------------- Analytics --------------------

    def node_count(self) -> int:
        return self._graph.number_of_nodes()

    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    def __len__(self) -> int:
        return self.node_count()

    def check_invariants(self) -> None:
        """
        Verify adjacency symmetry, absence of duplicates, dense indexing and
        owner totality. Raises ValueError on the first violation.
        """
        n = self.node_count()
        nodes = list(self._graph.nodes)
        if nodes != list(range(n)):
            raise ValueError(f"node ids are not dense: {nodes}")

        succ = self._graph.succ
        pred = self._graph.pred
        for node, data in self._graph.nodes(data=True):
            if data.get("owner") not in (0, 1):
                raise ValueError(f"node {node} has invalid owner {data.get('owner')!r}")
            out_list = list(succ[node])
            in_list = list(pred[node])
            if len(set(out_list)) != len(out_list):
                raise ValueError(f"duplicate successor of node {node}")
            if len(set(in_list)) != len(in_list):
                raise ValueError(f"duplicate predecessor of node {node}")
            for m in out_list:
                if node not in pred[m]:
                    raise ValueError(f"edge {node}->{m} missing from predecessors of {m}")
            for m in in_list:
                if node not in succ[m]:
                    raise ValueError(f"edge {m}->{node} missing from successors of {m}")

    # -------------------- Compaction --------------------

    def extract_subgraph(self, keep: Sequence[int]) -> "GraphStore":
        """
        Build a new store over ``keep``, renumbered in the order given.

        Edges with an endpoint outside ``keep`` are dropped.
        """
        index: Dict[int, int] = {}
        for new_id, old_id in enumerate(keep):
            if old_id not in self._graph:
                raise ValueError(f"cannot keep unknown node {old_id}")
            if old_id in index:
                raise ValueError(f"node {old_id} listed twice")
            index[old_id] = new_id

        sub = GraphStore()
        sub.metadata = dict(self.metadata)
        if "start" in sub.metadata:
            start = sub.metadata.pop("start")
            if start in index:
                sub.metadata["start"] = index[start]
        for old_id in keep:
            data = self._graph.nodes[old_id]
            sub._graph.add_node(
                index[old_id],
                owner=data["owner"],
                priority=data["priority"],
                label=data["label"],
            )
        for old_id in keep:
            for target in self._graph.successors(old_id):
                if target in index:
                    sub._graph.add_edge(index[old_id], index[target])
        return sub

    def without_node(self, node_id: int) -> "GraphStore":
        self._check(node_id)
        return self.extract_subgraph(
            [i for i in range(self.node_count()) if i != node_id]
        )

    def replace_contents(self, other: "GraphStore") -> None:
        """
        Take over another store's graph, dropping the current one.
        """
        self._graph = other._graph
        self.metadata = other.metadata

    # -------------------- Cloning --------------------

    def clone(self) -> "GraphStore":
        g = GraphStore()
        g._graph = self._graph.copy()
        g.metadata = dict(self.metadata)
        return g

    # -------------------- Internals --------------------

    def _check(self, node_id: int) -> None:
        if node_id not in self._graph:
            raise IndexError(f"node {node_id} out of range [0, {self.node_count()})")

    def _data(self, node_id: int) -> Dict[str, Any]:
        self._check(node_id)
        return self._graph.nodes[node_id]

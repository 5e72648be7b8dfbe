from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from pgnudge.config.settings import MutationConfig
from pgnudge.graph.graph_store import GraphStore


class ScriptedSampler:
    """
    Returns pre-recorded draws in order; optionally cycles through them.
    """

    def __init__(self, values: Sequence[int], *, repeat: bool = False) -> None:
        self.values = list(values)
        self.repeat = repeat
        self.calls: List[Tuple[int, int]] = []
        self._pos = 0

    def uniform(self, low: int, high: int) -> int:
        if self._pos >= len(self.values):
            if not self.repeat:
                raise AssertionError(f"unexpected draw in [{low}, {high}]")
            self._pos = 0
        value = self.values[self._pos]
        self._pos += 1
        self.calls.append((low, high))
        assert low <= value <= high, f"scripted {value} outside [{low}, {high}]"
        return value


def make_graph(
    owners: Iterable[int],
    edges: Iterable[Tuple[int, int]],
    priorities: Iterable[int] | None = None,
) -> GraphStore:
    owners = list(owners)
    priorities = list(priorities) if priorities is not None else [0] * len(owners)
    graph = GraphStore()
    for owner, priority in zip(owners, priorities):
        graph.add_node(owner=owner, priority=priority)
    for source, target in edges:
        graph.add_edge(source, target)
    return graph


def edge_list(graph: GraphStore) -> List[Tuple[int, int]]:
    return [(e.source, e.target) for e in graph.edges()]


def mutation_config(profile="full", **overrides) -> MutationConfig:
    values = dict(
        enabled=True,
        count=1,
        profile=profile,
        verify_invariants=True,
    )
    values.update(overrides)
    return MutationConfig(**values)

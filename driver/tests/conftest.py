from __future__ import annotations

import pytest

from pgnudge.graph.graph_store import GraphStore

from helpers import make_graph


@pytest.fixture()
def diamond() -> GraphStore:
    # 0 -> 1, 0 -> 2, 1 -> 3, 2 -> 3, 3 -> 0
    return make_graph(
        owners=[0, 1, 0, 1],
        edges=[(0, 1), (0, 2), (1, 3), (2, 3), (3, 0)],
        priorities=[2, 1, 4, 3],
    )


@pytest.fixture()
def four_cycle_with_tail() -> GraphStore:
    return make_graph(
        owners=[0, 1, 0, 1],
        edges=[(0, 1), (1, 2), (2, 0), (2, 3)],
    )

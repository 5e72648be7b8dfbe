from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


def opponent(owner: int) -> int:
    return 1 - owner


@dataclass(frozen=True)
class Node:
    """
    Value view of a game node.

    The store owns the live state; a Node is a snapshot.
    """

    id: int
    priority: int
    owner: int
    label: Optional[str] = None


@dataclass(frozen=True)
class Edge:
    """
    Directed move from one node to another.
    """

    source: int
    target: int

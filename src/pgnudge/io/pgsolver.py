from __future__ import annotations

import logging
import re
import time
from typing import Dict, List, Optional, TextIO, Tuple

from pgnudge.errors import ParseError
from pgnudge.graph.graph_schema import Node
from pgnudge.graph.graph_store import GraphStore

# A statement runs up to the next ';' that is not inside a quoted label.
_STATEMENT = re.compile(r'((?:[^;"]|"[^"]*")*);')
_HEADER = re.compile(r"^parity\s+(-?\d+)$")
_START = re.compile(r"^start\s+(\d+)$")
_NODE = re.compile(
    r'^(\d+)\s+(\d+)\s+(\d+)'
    r'(?:\s+(\d+(?:\s*,\s*\d+)*))?'
    r'(?:\s+"([^"]*)")?$'
)


def _statements(text: str) -> List[str]:
    statements: List[str] = []
    pos = 0
    while True:
        match = _STATEMENT.match(text, pos)
        if match is None:
            break
        statements.append(match.group(1).strip())
        pos = match.end()
    trailing = text[pos:].strip()
    if trailing:
        raise ParseError(
            f"unterminated statement {trailing[:40]!r}",
            statement=len(statements) + 1,
        )
    return statements


def parse_pgsolver(text: str) -> GraphStore:
    """
    Parse a game in PGSolver format.

    Every node id up to the declared maximum must appear exactly once;
    node declarations may come in any order.
    """
    logger = logging.getLogger("pgnudge.io")
    t0 = time.perf_counter()
    statements = _statements(text)
    if not statements:
        raise ParseError("empty input")

    header = _HEADER.match(statements[0])
    if header is None:
        raise ParseError(f"expected 'parity <max_id>', got {statements[0]!r}", statement=1)
    n_nodes = int(header.group(1)) + 1
    if n_nodes < 0:
        raise ParseError("negative node count", statement=1)

    start: Optional[int] = None
    nodes: Dict[int, Node] = {}
    successors: Dict[int, List[int]] = {}

    for number, statement in enumerate(statements[1:], start=2):
        start_match = _START.match(statement)
        if start_match is not None:
            if nodes or start is not None:
                raise ParseError("'start' must directly follow the header", statement=number)
            start = int(start_match.group(1))
            continue

        match = _NODE.match(statement)
        if match is None:
            raise ParseError(f"malformed node declaration {statement!r}", statement=number)

        node_id, priority, owner = (int(match.group(i)) for i in (1, 2, 3))
        if node_id >= n_nodes:
            raise ParseError(f"node {node_id} exceeds declared maximum {n_nodes - 1}", statement=number)
        if node_id in nodes:
            raise ParseError(f"node {node_id} declared twice", statement=number)
        if owner not in (0, 1):
            raise ParseError(f"node {node_id} has invalid owner {owner}", statement=number)

        succ: List[int] = []
        if match.group(4):
            for token in match.group(4).split(","):
                target = int(token)
                if target >= n_nodes:
                    raise ParseError(
                        f"successor {target} of node {node_id} exceeds declared maximum",
                        statement=number,
                    )
                if target in succ:
                    logger.warning("skipping duplicate edge %s->%s", node_id, target)
                    continue
                succ.append(target)

        nodes[node_id] = Node(id=node_id, priority=priority, owner=owner, label=match.group(5))
        successors[node_id] = succ

    missing = [i for i in range(n_nodes) if i not in nodes]
    if missing:
        raise ParseError(f"missing declarations for nodes {missing[:10]}")
    if start is not None and start >= n_nodes:
        raise ParseError(f"start node {start} out of range")

    edges: List[Tuple[int, int]] = [
        (source, target) for source in range(n_nodes) for target in successors[source]
    ]
    graph = GraphStore.from_nodes((nodes[i] for i in range(n_nodes)), edges)
    if start is not None:
        graph.metadata["start"] = start

    logger.info(
        "parsed game: nodes=%s edges=%s in %.3fs",
        graph.node_count(),
        graph.edge_count(),
        time.perf_counter() - t0,
    )
    return graph


def read_pgsolver(stream: TextIO) -> GraphStore:
    return parse_pgsolver(stream.read())


def format_pgsolver(graph: GraphStore) -> str:
    """
    Serialise a game in PGSolver format, nodes in index order.
    """
    lines = [f"parity {graph.node_count() - 1};"]
    for node in graph.get_nodes():
        line = f"{node.id} {node.priority} {node.owner}"
        succ = graph.successors(node.id)
        if succ:
            line += " " + ",".join(str(m) for m in succ)
        if node.label is not None:
            line += f' "{node.label}"'
        lines.append(line + ";")
    return "\n".join(lines) + "\n"


def write_pgsolver(graph: GraphStore, stream: TextIO) -> None:
    stream.write(format_pgsolver(graph))

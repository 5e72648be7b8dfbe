from __future__ import annotations

import logging
import sys
from pathlib import Path

from pgnudge.graph.graph_store import GraphStore
from pgnudge.io.pgsolver import read_pgsolver, write_pgsolver


def load_game(path: str | Path | None) -> GraphStore:
    """
    Read a PGSolver game from ``path``, or from standard input when empty.
    """
    logger = logging.getLogger("pgnudge.load_game")
    if not path:
        logger.info("reading game from stdin")
        return read_pgsolver(sys.stdin)

    path = Path(path)
    logger.info("reading game from %s", path)
    with path.open("r", encoding="utf-8") as handle:
        return read_pgsolver(handle)


def save_game(graph: GraphStore, path: str | Path | None) -> None:
    """
    Write ``graph`` to ``path``, or to standard output when empty.
    """
    logger = logging.getLogger("pgnudge.load_game")
    if not path:
        write_pgsolver(graph, sys.stdout)
        sys.stdout.flush()
        return

    path = Path(path)
    with path.open("w", encoding="utf-8") as handle:
        write_pgsolver(graph, handle)
    logger.info("wrote game with %s nodes to %s", graph.node_count(), path)

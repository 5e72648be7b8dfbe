from __future__ import annotations

import logging
import time
from typing import Optional

from pgnudge.config.settings import NudgeConfig
from pgnudge.graph.graph_store import GraphStore
from pgnudge.graph.graph_mutator import GraphMutator, MutationReport
from pgnudge.graph.graph_query import bottom_scc
from pgnudge.sampling.sampler import Sampler, SamplingSource
from pgnudge.transforms import (
    reindex,
    permute,
    evenodd,
    minmax,
    inflate,
    compress,
    renumber,
)


class NudgePipeline:
    """
    Orchestration layer for pgnudge.

    This is the ONLY place where:
    - config is interpreted
    - subsystems are wired
    - the order of post-processing steps is fixed
    """

    def __init__(
        self,
        *,
        config: NudgeConfig,
        sampler: Optional[SamplingSource] = None,
    ) -> None:
        self.config = config
        self.sampler = sampler if sampler is not None else Sampler(seed=config.sampling.seed)

        # ---------------- Mutation ----------------

        self.mutator = GraphMutator(
            config=config.mutation,
            sampler=self.sampler,
        )
        self.last_report: Optional[MutationReport] = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self, graph: GraphStore) -> GraphStore:
        """
        Mutate, restrict and transform ``graph`` in place and return it.
        """
        logger = logging.getLogger("pgnudge.pipeline")
        t0 = time.perf_counter()
        output = self.config.output

        # ---------------- Mutation ----------------

        mutation = self.config.mutation
        if mutation.enabled and mutation.count > 0:
            self.last_report = self.mutator.mutate(graph, target=mutation.count)

        # ---------------- Bottom SCC ----------------

        if output.bottom_scc:
            self._restrict_to_bottom_scc(graph)

        # ---------------- Transforms ----------------

        mapping = reindex(graph)

        if output.evenodd:
            evenodd(graph)
        if output.minmax:
            minmax(graph)

        if output.inflate:
            inflate(graph)
        if output.compress:
            compress(graph)
        if output.renumber:
            renumber(graph)

        if output.order:
            reindex(graph)
        else:
            permute(graph, mapping)

        logger.info(
            "pipeline finished: nodes=%s edges=%s in %.3fs",
            graph.node_count(),
            graph.edge_count(),
            time.perf_counter() - t0,
        )
        return graph

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _restrict_to_bottom_scc(self, graph: GraphStore) -> None:
        if graph.node_count() == 0:
            logging.getLogger("pgnudge.pipeline").warning(
                "empty graph; skipping bottom scc restriction"
            )
            return
        start = self.sampler.uniform(0, graph.node_count() - 1)
        scc = bottom_scc(graph, start, downward=True)
        graph.replace_contents(graph.extract_subgraph(scc))

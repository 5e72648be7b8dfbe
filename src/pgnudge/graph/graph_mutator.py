from __future__ import annotations

import logging
import time
from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Dict, Tuple, Union

from pgnudge.config.settings import MutationConfig
from pgnudge.errors import MutationExhaustedError
from pgnudge.graph.graph_store import GraphStore
from pgnudge.sampling.sampler import SamplingSource, choose

REMOVE_EDGE = 0
CONTRACT_NODE = 1
REMOVE_NODE = 2
FLIP_OWNER = 3
BYPASS_PREDECESSOR = 4
ADD_EDGE = 5

ACTION_NAMES = {
    REMOVE_EDGE: "remove_edge",
    CONTRACT_NODE: "contract_node",
    REMOVE_NODE: "remove_node",
    FLIP_OWNER: "flip_owner",
    BYPASS_PREDECESSOR: "bypass_predecessor",
    ADD_EDGE: "add_edge",
}

# Each profile draws uniform(0, len(slots) - 1) and maps the slot to an action.
PROFILES: Dict[str, Tuple[int, ...]] = {
    "remove-only": (REMOVE_EDGE, CONTRACT_NODE, REMOVE_NODE, FLIP_OWNER),
    "remove-or-add": (REMOVE_EDGE, FLIP_OWNER, ADD_EDGE),
    "full": (
        REMOVE_EDGE,
        CONTRACT_NODE,
        REMOVE_NODE,
        FLIP_OWNER,
        BYPASS_PREDECESSOR,
        ADD_EDGE,
    ),
}

PROFILE_ALIASES = {
    0: "remove-only",
    1: "remove-or-add",
    2: "full",
}


def resolve_profile(profile: Union[str, int]) -> Tuple[int, ...]:
    """
    Map a profile name or numeric alias to its action slots.

    Numeric profiles other than 0 and 1 select the full action set.
    """
    if isinstance(profile, str) and profile.strip().lstrip("-").isdigit():
        profile = int(profile)
    if isinstance(profile, int):
        profile = PROFILE_ALIASES.get(profile, "full")
    if profile not in PROFILES:
        raise ValueError(f"unknown mutation profile {profile!r}")
    return PROFILES[profile]


@dataclass(frozen=True)
class MutationReport:
    """
    Outcome of a mutation run.
    """

    target: int
    successes: int
    attempts: int
    applied: Dict[str, int] = field(default_factory=dict)
    rejected: Dict[str, int] = field(default_factory=dict)


class GraphMutator:
    """
    Applies random structural edits to a game graph.

    Each attempt samples a node, then an action from the active profile.
    Attempts whose precondition fails are retried and do not count
    towards the target.
    """

    def __init__(
        self,
        *,
        config: MutationConfig,
        sampler: SamplingSource,
    ) -> None:
        self.config = config
        self.sampler = sampler
        self.slots = resolve_profile(config.profile)
        self._actions: Dict[int, Callable[[GraphStore, int], bool]] = {
            REMOVE_EDGE: self._remove_edge,
            CONTRACT_NODE: self._contract_node,
            REMOVE_NODE: self._remove_node,
            FLIP_OWNER: self._flip_owner,
            BYPASS_PREDECESSOR: self._bypass_predecessor,
            ADD_EDGE: self._add_edge,
        }

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def mutate(self, graph: GraphStore, *, target: int) -> MutationReport:
        """
        Apply exactly ``target`` successful edits to ``graph`` in place.

        Raises MutationExhaustedError when the attempt cap is reached or the
        graph runs out of nodes.
        """
        if target < 0:
            raise ValueError(f"target must be non-negative, got {target}")

        logger = logging.getLogger("pgnudge.mutation")
        t0 = time.perf_counter()
        max_attempts = self.config.max_attempts(target)
        applied: Counter = Counter()
        rejected: Counter = Counter()
        successes = 0
        attempts = 0

        while successes < target:
            if graph.node_count() == 0:
                raise MutationExhaustedError(
                    target=target,
                    successes=successes,
                    attempts=attempts,
                    reason="graph has no nodes left",
                )
            if attempts >= max_attempts:
                raise MutationExhaustedError(
                    target=target,
                    successes=successes,
                    attempts=attempts,
                    reason=f"no applicable action within {max_attempts} attempts",
                )

            attempts += 1
            node = self.sampler.uniform(0, graph.node_count() - 1)
            action = self.slots[self.sampler.uniform(0, len(self.slots) - 1)]

            if self.apply(graph, node=node, action=action):
                successes += 1
                applied[ACTION_NAMES[action]] += 1
                logger.debug(
                    "applied %s on node %s (%s/%s)",
                    ACTION_NAMES[action],
                    node,
                    successes,
                    target,
                )
            else:
                rejected[ACTION_NAMES[action]] += 1

        logger.info(
            "mutated graph: successes=%s attempts=%s nodes=%s edges=%s in %.3fs",
            successes,
            attempts,
            graph.node_count(),
            graph.edge_count(),
            time.perf_counter() - t0,
        )
        return MutationReport(
            target=target,
            successes=successes,
            attempts=attempts,
            applied=dict(applied),
            rejected=dict(rejected),
        )

    def apply(self, graph: GraphStore, *, node: int, action: int) -> bool:
        """
        Run one action against ``node``. Returns whether it succeeded.
        """
        if action not in self._actions:
            raise ValueError(f"unknown action {action}")
        ok = self._actions[action](graph, node)
        if ok and self.config.verify_invariants:
            graph.check_invariants()
        return ok

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def _remove_edge(self, graph: GraphStore, n: int) -> bool:
        out = graph.successors(n)
        if len(out) < 2:
            return False
        graph.remove_edge(n, choose(self.sampler, out))
        return True

    def _contract_node(self, graph: GraphStore, n: int) -> bool:
        out = graph.successors(n)
        if len(out) != 1 or out[0] == n:
            return False
        for source in graph.predecessors(n):
            for target in out:
                graph.add_edge(source, target)
        graph.replace_contents(graph.without_node(n))
        return True

    def _remove_node(self, graph: GraphStore, n: int) -> bool:
        graph.replace_contents(graph.without_node(n))
        return True

    def _flip_owner(self, graph: GraphStore, n: int) -> bool:
        graph.flip_owner(n)
        return True

    def _bypass_predecessor(self, graph: GraphStore, n: int) -> bool:
        preds = graph.predecessors(n)
        if not preds:
            return False
        source = choose(self.sampler, preds)
        if source == n:
            return False
        graph.remove_edge(source, n)
        for target in graph.successors(n):
            graph.add_edge(source, target)
        return True

    def _add_edge(self, graph: GraphStore, n: int) -> bool:
        return graph.add_edge(n, self.sampler.uniform(0, graph.node_count() - 1))

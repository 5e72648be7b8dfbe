"""
pgnudge
=======

Random structural perturbation of parity game graphs, for stress and fuzz
testing of parity game solvers.

Core idea:
- Apply a fixed number of valid random edits, never a partial run.

Public API:
- GraphStore
- GraphMutator
- Sampler
- NudgePipeline
"""

from pgnudge.graph.graph_store import GraphStore
from pgnudge.graph.graph_mutator import GraphMutator
from pgnudge.sampling.sampler import Sampler
from pgnudge.pipeline.nudge_pipeline import NudgePipeline

__all__ = [
    "GraphStore",
    "GraphMutator",
    "Sampler",
    "NudgePipeline",
]

__version__ = "0.1.0"

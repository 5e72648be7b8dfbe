from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Union

ProfileName = Literal["remove-only", "remove-or-add", "full"]

# ---------------------------------------------------------------------
# Random graph mutation
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class MutationConfig:
    """
    Controls how many edits are applied and which actions are eligible.
    """

    enabled: bool
    count: int
    profile: Union[ProfileName, int]
    attempts_per_success: int = 1000
    min_attempts: int = 10_000
    verify_invariants: bool = False

    def max_attempts(self, target: int) -> int:
        return max(self.min_attempts, self.attempts_per_success * target)


# ---------------------------------------------------------------------
# Post-processing before output
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class OutputConfig:
    """
    Transformations applied after mutation, in pipeline order.
    """

    bottom_scc: bool = False
    evenodd: bool = False
    minmax: bool = False
    inflate: bool = False
    compress: bool = False
    renumber: bool = False
    order: bool = False


# ---------------------------------------------------------------------
# Randomness
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class SamplingConfig:
    """
    Seed for reproducible runs; None draws from OS entropy.
    """

    seed: Optional[int] = None


# ---------------------------------------------------------------------
# Root configuration object
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class NudgeConfig:
    """
    Root configuration object for pgnudge.

    Constructed explicitly and passed to the pipeline; never global.
    """

    mutation: MutationConfig
    output: OutputConfig = OutputConfig()
    sampling: SamplingConfig = SamplingConfig()

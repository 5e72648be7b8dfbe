"""
Configuration layer for pgnudge.

Configuration is:
- Explicit (passed, not global)
- Typed (frozen dataclasses)
"""

from pgnudge.config.settings import (
    MutationConfig,
    OutputConfig,
    SamplingConfig,
    NudgeConfig,
)

__all__ = [
    "MutationConfig",
    "OutputConfig",
    "SamplingConfig",
    "NudgeConfig",
]

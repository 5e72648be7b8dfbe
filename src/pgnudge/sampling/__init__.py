"""
Random sources for graph mutation.

Every consumer receives its sampler explicitly; there is no process-wide
generator.
"""

from pgnudge.sampling.sampler import Sampler, SamplingSource, choose

__all__ = [
    "Sampler",
    "SamplingSource",
    "choose",
]

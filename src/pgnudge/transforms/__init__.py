"""
Priority and ordering transforms applied before output.

None of these touch the edge structure beyond renumbering nodes.
"""

from pgnudge.transforms.ordering import reindex, permute
from pgnudge.transforms.priorities import (
    evenodd,
    minmax,
    inflate,
    compress,
    renumber,
)

__all__ = [
    "reindex",
    "permute",
    "evenodd",
    "minmax",
    "inflate",
    "compress",
    "renumber",
]

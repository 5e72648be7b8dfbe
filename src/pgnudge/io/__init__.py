"""
Text formats for parity games.
"""

from pgnudge.io.pgsolver import (
    parse_pgsolver,
    read_pgsolver,
    format_pgsolver,
    write_pgsolver,
)

__all__ = [
    "parse_pgsolver",
    "read_pgsolver",
    "format_pgsolver",
    "write_pgsolver",
]

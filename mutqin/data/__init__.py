"""
Verse data module for Mutqin library.

Loads the verse dataset and checks its structural invariants.
"""

from mutqin.data.dataset import (
    load_verses,
    load_index,
    parse_verses,
    clear_cache,
)
from mutqin.data.invariants import check_invariants

__all__ = [
    "load_verses",
    "load_index",
    "parse_verses",
    "clear_cache",
    "check_invariants",
]

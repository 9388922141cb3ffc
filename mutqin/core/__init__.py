"""
Core modules for Mutqin library.

This package contains the core business logic for:
- The read-only verse index
- Range resolution (ayah, ruku and juz ranges)
- Test pool building
- Navigation and boundary queries
"""

from mutqin.core.index import VerseIndex
from mutqin.core.ranges import (
    resolve_ayah_range,
    ayahs_for_ruku,
    resolve_ruku_range,
    resolve_juz_range,
    resolve_range,
    is_valid_range,
)
from mutqin.core.pool import build_pool, pool_summary
from mutqin.core.navigation import (
    Direction,
    next_ayah,
    prev_ayah,
    first_ayah_of_page,
    last_ayah_of_page,
    first_ayah_of_ruku,
    last_ayah_of_ruku,
    nearest_ruku_boundary,
    ayahs_to_boundary,
)

__all__ = [
    # Index
    "VerseIndex",
    # Ranges
    "resolve_ayah_range",
    "ayahs_for_ruku",
    "resolve_ruku_range",
    "resolve_juz_range",
    "resolve_range",
    "is_valid_range",
    # Pool
    "build_pool",
    "pool_summary",
    # Navigation
    "Direction",
    "next_ayah",
    "prev_ayah",
    "first_ayah_of_page",
    "last_ayah_of_page",
    "first_ayah_of_ruku",
    "last_ayah_of_ruku",
    "nearest_ruku_boundary",
    "ayahs_to_boundary",
]

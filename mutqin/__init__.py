"""
مُتْقِن (Mutqin) - A Python library for memorizing the structure of the Quran.

Build test pools from ayah, ruku and juz ranges, and answer navigation
questions (next ayah, first ayah of a page, nearest ruku boundary).

Usage:
    from mutqin.data import load_index
    from mutqin.core import build_pool, nearest_ruku_boundary
    from mutqin.models import AyahRange, JuzRange

    index = load_index("ayah_full_13line.json")

    pool = build_pool(index, [
        JuzRange(start=1, end=1),
        AyahRange(start={"surah": 2, "ayah": 255}, end={"surah": 2, "ayah": 257}),
    ])

    for verse in pool[:3]:
        boundary = nearest_ruku_boundary(index, verse, "forward")
        print(f"Recite {verse.verse_key} to {boundary.verse_key}")
"""

from mutqin.models import (
    Verse,
    AyahRange,
    RukuRange,
    JuzRange,
    Attempt,
    AccuracyBucket,
    ProgressSummary,
    parse_range,
    parse_ranges,
)
from mutqin.config import MutqinSettings, get_settings, configure
from mutqin.exceptions import (
    MutqinError,
    VerseDataError,
    RangeDescriptorError,
    ConfigurationError,
)
from mutqin.core import VerseIndex, Direction, build_pool
from mutqin.data import load_index, load_verses

__version__ = "0.1.0"
__all__ = [
    # Version
    "__version__",
    # Models
    "Verse",
    "AyahRange",
    "RukuRange",
    "JuzRange",
    "Attempt",
    "AccuracyBucket",
    "ProgressSummary",
    "parse_range",
    "parse_ranges",
    # Config
    "MutqinSettings",
    "get_settings",
    "configure",
    # Exceptions
    "MutqinError",
    "VerseDataError",
    "RangeDescriptorError",
    "ConfigurationError",
    # Core
    "VerseIndex",
    "Direction",
    "build_pool",
    # Data
    "load_index",
    "load_verses",
]

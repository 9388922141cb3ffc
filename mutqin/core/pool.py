"""
Test pool building.

Merges any number of ranges into one list of verses, de-duplicated by
ayah key and sorted in reading order.
"""

from typing import Iterable

from mutqin.core.index import VerseIndex
from mutqin.core.ranges import resolve_range
from mutqin.models import AyahRange, JuzRange, RukuRange, Verse


def build_pool(
    index: VerseIndex,
    ranges: Iterable[AyahRange | RukuRange | JuzRange],
) -> list[Verse]:
    """
    Build a test pool from a list of ranges.

    Overlapping ranges are merged. The result depends only on the set of
    verses the ranges cover, not on their order or repetition.

    Args:
        index: Verse index
        ranges: Range descriptors selected by the learner

    Returns:
        Unique verses in ascending ``global_order`` (empty for no ranges)
    """
    pool: dict[str, Verse] = {}
    for descriptor in ranges:
        for verse in resolve_range(index, descriptor):
            pool[verse.verse_key] = verse
    return sorted(pool.values(), key=lambda v: v.global_order)


def pool_summary(pool: list[Verse]) -> dict[str, int]:
    """Count the verses, pages, juz and rukus a pool covers."""
    return {
        "verses": len(pool),
        "pages": len({v.page for v in pool}),
        "juz": len({v.juz for v in pool}),
        "rukus": len({v.ruku_global for v in pool}),
    }

"""
Navigation queries over the verse index.

Adjacency (next/previous ayah) and boundary lookups (first/last ayah of a
page or ruku, nearest ruku boundary). Lookups that can miss return None;
``nearest_ruku_boundary`` always returns a verse, falling back to the
first or last verse of the text.
"""

from enum import Enum
from typing import Optional

from mutqin.core.index import VerseIndex
from mutqin.models import Verse


class Direction(str, Enum):
    """Direction to search for a ruku boundary."""

    FORWARD = "forward"
    BACKWARD = "backward"


def next_ayah(index: VerseIndex, verse: Verse) -> Optional[Verse]:
    """The verse right after ``verse``, or None at the end of the text."""
    return index.find_by_order(verse.global_order + 1)


def prev_ayah(index: VerseIndex, verse: Verse) -> Optional[Verse]:
    """The verse right before ``verse``, or None at the start of the text."""
    return index.find_by_order(verse.global_order - 1)


def first_ayah_of_page(index: VerseIndex, page: int) -> Optional[Verse]:
    for verse in index:
        if verse.page == page and verse.is_page_start:
            return verse
    return None


def last_ayah_of_page(index: VerseIndex, page: int) -> Optional[Verse]:
    for verse in index:
        if verse.page == page and verse.is_page_end:
            return verse
    return None


def first_ayah_of_ruku(index: VerseIndex, ruku_global: int) -> Optional[Verse]:
    for verse in index:
        if verse.ruku_global == ruku_global and verse.is_ruku_start:
            return verse
    return None


def last_ayah_of_ruku(index: VerseIndex, ruku_global: int) -> Optional[Verse]:
    """
    The last verse of a ruku.

    The dataset has no ruku-end flag, so this is the verse before the next
    ruku's first verse. The final ruku of the text has no successor; its
    last verse is taken directly.

    Args:
        index: Verse index
        ruku_global: Ruku identifier across the whole text

    Returns:
        The ruku's last verse, or None if the ruku is not in the index
    """
    next_start = first_ayah_of_ruku(index, ruku_global + 1)
    if next_start is not None:
        return prev_ayah(index, next_start)

    ruku_ayahs = index.filter(lambda v: v.ruku_global == ruku_global)
    return ruku_ayahs[-1] if ruku_ayahs else None


def nearest_ruku_boundary(
    index: VerseIndex,
    verse: Verse,
    direction: Direction | str,
) -> Verse:
    """
    Find the ruku boundary nearest to ``verse`` in the given direction.

    Forward, the boundary is the verse just before the next ruku start
    after ``verse`` (the last verse of the current ruku). Backward, it is
    the closest ruku start strictly before ``verse``.

    Args:
        index: Verse index
        verse: Verse to search from
        direction: Direction.FORWARD / "forward" or Direction.BACKWARD / "backward"

    Returns:
        The boundary verse. Falls back to the last verse of the text going
        forward and the first verse going backward when no boundary exists.
    """
    if direction == Direction.FORWARD:
        for candidate in index:
            if candidate.global_order > verse.global_order and candidate.is_ruku_start:
                return prev_ayah(index, candidate) or verse
        return index.last or verse

    for candidate in reversed(index.verses):
        if candidate.global_order < verse.global_order and candidate.is_ruku_start:
            return candidate
    return index.first or verse


def ayahs_to_boundary(
    index: VerseIndex,
    verse: Verse,
    direction: Direction | str,
) -> list[Verse]:
    """
    Verses between ``verse`` and its nearest ruku boundary, inclusive.

    Used for "recite from X to the ruku boundary" prompts.

    Returns:
        Verses in ascending ``global_order`` regardless of direction
    """
    boundary = nearest_ruku_boundary(index, verse, direction)
    low = min(verse.global_order, boundary.global_order)
    high = max(verse.global_order, boundary.global_order)
    return index.filter(lambda v: low <= v.global_order <= high)

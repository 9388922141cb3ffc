"""
Range resolution.

Each resolver maps a range to the verses it covers, in ascending
``global_order``. Resolvers never raise: an unknown endpoint or an
inverted range resolves to an empty list, which callers treat as an
invalid selection.
"""

from mutqin.core.index import VerseIndex
from mutqin.models import AyahRange, JuzRange, RukuRange, Verse


def _between_orders(index: VerseIndex, start_order: int, end_order: int) -> list[Verse]:
    return index.filter(lambda v: start_order <= v.global_order <= end_order)


def resolve_ayah_range(index: VerseIndex, start_key: str, end_key: str) -> list[Verse]:
    """
    Get every ayah from ``start_key`` to ``end_key`` inclusive.

    Args:
        index: Verse index
        start_key: First ayah key, e.g. "1:1"
        end_key: Last ayah key, e.g. "2:5"

    Returns:
        Verses in order; empty if either key is unknown or start comes after end
    """
    start = index.find_by_key(start_key)
    end = index.find_by_key(end_key)
    if start is None or end is None:
        return []
    if start.global_order > end.global_order:
        return []
    return _between_orders(index, start.global_order, end.global_order)


def ayahs_for_ruku(index: VerseIndex, juz: int, ruku_in_juz: int) -> list[Verse]:
    """Get the verses of one ruku, identified by its juz and ordinal within that juz."""
    return index.filter(lambda v: v.juz == juz and v.ruku_in_juz == ruku_in_juz)


def resolve_ruku_range(
    index: VerseIndex,
    start_juz: int,
    start_ruku: int,
    end_juz: int,
    end_ruku: int,
) -> list[Verse]:
    """
    Get every ayah from the start of one ruku to the end of another.

    All rukus lying between the two endpoints are included, so the result
    is one contiguous run of the text.

    Args:
        index: Verse index
        start_juz: Juz of the first ruku
        start_ruku: Ordinal of the first ruku within its juz
        end_juz: Juz of the last ruku
        end_ruku: Ordinal of the last ruku within its juz

    Returns:
        Verses in order; empty if either ruku is unknown or the range is inverted
    """
    start_ayahs = ayahs_for_ruku(index, start_juz, start_ruku)
    end_ayahs = ayahs_for_ruku(index, end_juz, end_ruku)
    if not start_ayahs or not end_ayahs:
        return []

    start_order = start_ayahs[0].global_order
    end_order = end_ayahs[-1].global_order
    if start_order > end_order:
        return []
    return _between_orders(index, start_order, end_order)


def resolve_juz_range(index: VerseIndex, start_juz: int, end_juz: int) -> list[Verse]:
    """Get every ayah in juz ``start_juz`` through ``end_juz``; empty if inverted."""
    if start_juz > end_juz:
        return []
    return index.filter(lambda v: start_juz <= v.juz <= end_juz)


def resolve_range(index: VerseIndex, descriptor: AyahRange | RukuRange | JuzRange) -> list[Verse]:
    """
    Resolve any range descriptor by dispatching on its type.

    Args:
        index: Verse index
        descriptor: AyahRange, RukuRange or JuzRange

    Returns:
        Verses covered by the range, in order
    """
    if isinstance(descriptor, AyahRange):
        return resolve_ayah_range(index, descriptor.start.key, descriptor.end.key)
    if isinstance(descriptor, RukuRange):
        return resolve_ruku_range(
            index,
            descriptor.start.juz,
            descriptor.start.ruku,
            descriptor.end.juz,
            descriptor.end.ruku,
        )
    if isinstance(descriptor, JuzRange):
        return resolve_juz_range(index, descriptor.start, descriptor.end)
    return []


def is_valid_range(index: VerseIndex, descriptor: AyahRange | RukuRange | JuzRange) -> bool:
    """Whether a range selects at least one verse."""
    return bool(resolve_range(index, descriptor))

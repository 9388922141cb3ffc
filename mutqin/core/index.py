"""
Read-only verse index.

Holds the full verse collection in ``global_order`` and provides lookups
by ayah key and by order. Every range and navigation query runs against
an index.
"""

from typing import Callable, Iterable, Iterator, Optional

from mutqin.models import Verse


class VerseIndex:
    """
    Immutable ordered collection of verses.

    Verses are sorted by ``global_order`` on construction. The index never
    changes afterwards, so it can be shared freely between callers.

    Example:
        index = VerseIndex(load_verses("ayah_full_13line.json"))
        verse = index.find_by_key("2:255")
        page_verses = index.filter(lambda v: v.page == verse.page)
    """

    def __init__(self, verses: Iterable[Verse]) -> None:
        self._verses: tuple[Verse, ...] = tuple(
            sorted(verses, key=lambda v: v.global_order)
        )
        self._by_key: dict[str, Verse] = {v.verse_key: v for v in self._verses}
        self._by_order: dict[int, Verse] = {v.global_order: v for v in self._verses}

    @property
    def verses(self) -> tuple[Verse, ...]:
        """All verses in ascending ``global_order``."""
        return self._verses

    @property
    def first(self) -> Optional[Verse]:
        return self._verses[0] if self._verses else None

    @property
    def last(self) -> Optional[Verse]:
        return self._verses[-1] if self._verses else None

    def find_by_key(self, key: str) -> Optional[Verse]:
        """Look up a verse by its "<surah>:<ayah>" key."""
        return self._by_key.get(key)

    def find_by_order(self, order: int) -> Optional[Verse]:
        """Look up a verse by its ``global_order``."""
        return self._by_order.get(order)

    def filter(self, predicate: Callable[[Verse], bool]) -> list[Verse]:
        """Return the verses matching ``predicate``, in ``global_order``."""
        return [v for v in self._verses if predicate(v)]

    def juz_numbers(self) -> list[int]:
        """Distinct juz numbers present in the index, ascending."""
        return sorted({v.juz for v in self._verses})

    def rukus_in_juz(self, juz: int) -> list[int]:
        """
        Distinct ruku ordinals present in a juz, ascending.

        Args:
            juz: Juz number (1-30)

        Returns:
            Sorted ``ruku_in_juz`` values; empty if the juz is not in the index
        """
        return sorted({v.ruku_in_juz for v in self._verses if v.juz == juz})

    def __len__(self) -> int:
        return len(self._verses)

    def __iter__(self) -> Iterator[Verse]:
        return iter(self._verses)

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def __repr__(self) -> str:
        if not self._verses:
            return "VerseIndex(empty)"
        return f"VerseIndex({len(self._verses)} verses, {self.first.verse_key}..{self.last.verse_key})"

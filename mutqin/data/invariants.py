"""
Structural checks for a verse dataset.

The range and navigation queries rely on the dataset being ordered and on
pages and rukus forming contiguous runs with exactly one start (and, for
pages, one end) flag each.
"""

from typing import Sequence

from mutqin._logging import log_invariants_checked
from mutqin.exceptions import VerseDataError
from mutqin.models import Verse


def _check_order(verses: Sequence[Verse]) -> None:
    seen_keys: set[str] = set()
    prev = None
    for verse in verses:
        if verse.verse_key in seen_keys:
            raise VerseDataError("Duplicate verse_key", verse_key=verse.verse_key)
        seen_keys.add(verse.verse_key)

        if prev is not None:
            if verse.global_order <= prev.global_order:
                raise VerseDataError(
                    "global_order must be strictly increasing",
                    verse_key=verse.verse_key,
                    context={"global_order": verse.global_order, "previous": prev.global_order},
                )
            for field in ("juz", "ruku_global", "page"):
                if getattr(verse, field) < getattr(prev, field):
                    raise VerseDataError(
                        f"{field} decreases along global_order",
                        verse_key=verse.verse_key,
                        context={field: getattr(verse, field), "previous": getattr(prev, field)},
                    )
        prev = verse


def _check_ruku_starts(verses: Sequence[Verse]) -> None:
    prev = None
    for verse in verses:
        opens_ruku = prev is None or verse.ruku_global != prev.ruku_global
        if verse.is_ruku_start != opens_ruku:
            raise VerseDataError(
                "is_ruku_start must mark exactly the first verse of each ruku",
                verse_key=verse.verse_key,
                context={"ruku_global": verse.ruku_global},
            )
        prev = verse


def _check_page_flags(verses: Sequence[Verse]) -> None:
    for i, verse in enumerate(verses):
        opens_page = i == 0 or verses[i - 1].page != verse.page
        closes_page = i == len(verses) - 1 or verses[i + 1].page != verse.page
        if verse.is_page_start != opens_page:
            raise VerseDataError(
                "is_page_start must mark exactly the first verse of each page",
                verse_key=verse.verse_key,
                context={"page": verse.page},
            )
        if verse.is_page_end != closes_page:
            raise VerseDataError(
                "is_page_end must mark exactly the last verse of each page",
                verse_key=verse.verse_key,
                context={"page": verse.page},
            )


def check_invariants(verses: Sequence[Verse]) -> None:
    """
    Verify the structural invariants of a verse dataset.

    Args:
        verses: All verses, in ``global_order``

    Raises:
        VerseDataError: On the first verse that breaks an invariant
    """
    _check_order(verses)
    _check_ruku_starts(verses)
    _check_page_flags(verses)
    log_invariants_checked(
        len(verses),
        len({v.page for v in verses}),
        len({v.ruku_global for v in verses}),
    )

"""
Shared fixtures: small synthetic mushaf layouts.

Layouts are lists of (verse_key, page, juz, ruku_global, ruku_in_juz) in
reading order. ``make_verses`` fills in global_order and the start/end
flags so every fixture satisfies the dataset invariants.
"""

import json
import logging

import pytest

from mutqin.config import reset_settings
from mutqin.core import VerseIndex
from mutqin.data import clear_cache
from mutqin.models import Verse


# Ten verses, ruku starts at orders 1, 4 and 8.
#   ruku 1: orders 1-3  (juz 1, ruku 1)
#   ruku 2: orders 4-7  (juz 1, ruku 2)
#   ruku 3: orders 8-10 (juz 2, ruku 1)
#   pages:  1 = 1-3, 2 = 4-6, 3 = 7-8, 4 = 9-10
TEN_VERSE_LAYOUT = [
    ("1:1", 1, 1, 1, 1),
    ("1:2", 1, 1, 1, 1),
    ("1:3", 1, 1, 1, 1),
    ("1:4", 2, 1, 2, 2),
    ("1:5", 2, 1, 2, 2),
    ("1:6", 2, 1, 2, 2),
    ("1:7", 3, 1, 2, 2),
    ("2:1", 3, 2, 3, 1),
    ("2:2", 4, 2, 3, 1),
    ("2:3", 4, 2, 3, 1),
]

# Fifteen verses over three juz, three verses per ruku, four per page.
#   juz 1: rukus 1-2 (orders 1-6)
#   juz 2: rukus 3-4 (orders 7-12)
#   juz 3: ruku 5    (orders 13-15)
THREE_JUZ_LAYOUT = [
    ("1:1", 1, 1, 1, 1),
    ("1:2", 1, 1, 1, 1),
    ("1:3", 1, 1, 1, 1),
    ("1:4", 1, 1, 2, 2),
    ("1:5", 2, 1, 2, 2),
    ("1:6", 2, 1, 2, 2),
    ("1:7", 2, 2, 3, 1),
    ("2:1", 2, 2, 3, 1),
    ("2:2", 3, 2, 3, 1),
    ("2:3", 3, 2, 4, 2),
    ("2:4", 3, 2, 4, 2),
    ("2:5", 3, 2, 4, 2),
    ("2:6", 4, 3, 5, 1),
    ("2:7", 4, 3, 5, 1),
    ("2:8", 4, 3, 5, 1),
]


def make_verses(layout, first_order=1):
    """Build Verse objects for a layout, numbering global_order from first_order."""
    verses = []
    for i, (key, page, juz, ruku_global, ruku_in_juz) in enumerate(layout):
        surah, ayah = (int(p) for p in key.split(":"))
        prev = layout[i - 1] if i > 0 else None
        nxt = layout[i + 1] if i + 1 < len(layout) else None
        verses.append(
            Verse(
                verse_key=key,
                surah=surah,
                ayah=ayah,
                text=f"text {key}",
                page=page,
                line_numbers=(1, 2),
                global_order=first_order + i,
                juz=juz,
                ruku_global=ruku_global,
                ruku_in_juz=ruku_in_juz,
                is_ruku_start=prev is None or prev[3] != ruku_global,
                is_page_start=prev is None or prev[1] != page,
                is_page_end=nxt is None or nxt[1] != page,
            )
        )
    return verses


def write_dataset(path, verses):
    """Write verses to ``path`` in the on-disk dataset format."""
    rows = [v.model_dump(by_alias=True) for v in verses]
    path.write_text(json.dumps(rows, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    for name in ("DATA_PATH", "VALIDATE_DATA", "LOG_LEVEL", "WEAK_ACCURACY_THRESHOLD", "RECENT_ATTEMPTS"):
        monkeypatch.delenv(f"MUTQIN_{name}", raising=False)
    reset_settings()
    clear_cache()
    yield
    reset_settings()
    clear_cache()
    logging.getLogger("mutqin").handlers.clear()


@pytest.fixture
def ten_verses():
    return make_verses(TEN_VERSE_LAYOUT)


@pytest.fixture
def ten_index(ten_verses):
    return VerseIndex(ten_verses)


@pytest.fixture
def juz_index():
    return VerseIndex(make_verses(THREE_JUZ_LAYOUT))


@pytest.fixture
def dataset_file(tmp_path, ten_verses):
    return write_dataset(tmp_path / "ayahs.json", ten_verses)

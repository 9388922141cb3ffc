"""
Tests for data models (mutqin/models/).

Run: pytest tests/test_models.py -v
"""

import pytest
from pydantic import ValidationError

from mutqin.exceptions import RangeDescriptorError
from mutqin.models import (
    AccuracyBucket,
    Attempt,
    AyahRange,
    JuzRange,
    RukuRange,
    Verse,
    parse_range,
    parse_ranges,
)

DATASET_ROW = {
    "verse_key": "2:255",
    "surah": 2,
    "ayah": 255,
    "text_indopak": "اللّٰهُ لَاۤ اِلٰهَ اِلَّا هُوَ",
    "page_13line": 42,
    "line_numbers": [3, 4, 5],
    "global_order": 262,
    "juz_number": 3,
    "ruku_global": 35,
    "ruku_in_juz": 1,
    "is_ruku_start": True,
    "is_page_start": False,
    "is_page_end": False,
}


class TestVerse:
    def test_from_dataset_row(self):
        verse = Verse.model_validate(DATASET_ROW)
        assert verse.page == 42
        assert verse.juz == 3
        assert verse.text.startswith("اللّٰهُ")
        assert verse.line_numbers == (3, 4, 5)

    def test_dump_by_alias_round_trips(self):
        verse = Verse.model_validate(DATASET_ROW)
        assert Verse.model_validate(verse.model_dump(by_alias=True)) == verse

    def test_key_must_match_surah_and_ayah(self):
        with pytest.raises(ValidationError):
            Verse.model_validate({**DATASET_ROW, "verse_key": "2:256"})

    def test_juz_out_of_range(self):
        with pytest.raises(ValidationError):
            Verse.model_validate({**DATASET_ROW, "juz_number": 31})

    def test_frozen(self):
        verse = Verse.model_validate(DATASET_ROW)
        with pytest.raises(ValidationError):
            verse.page = 1

    def test_hashable(self):
        verse = Verse.model_validate(DATASET_ROW)
        assert len({verse, Verse.model_validate(DATASET_ROW)}) == 1

    def test_str(self):
        assert str(Verse.model_validate(DATASET_ROW)) == "Verse(2:255)"


class TestRangeDescriptors:
    def test_parse_ayah(self):
        descriptor = parse_range({"type": "ayah", "start": {"surah": 1, "ayah": 1}, "end": {"surah": 1, "ayah": 7}})
        assert isinstance(descriptor, AyahRange)
        assert descriptor.start.key == "1:1"
        assert descriptor.label == "1:1-1:7"

    def test_parse_ruku(self):
        descriptor = parse_range({"type": "ruku", "start": {"juz": 1, "ruku": 1}, "end": {"juz": 2, "ruku": 3}})
        assert isinstance(descriptor, RukuRange)
        assert descriptor.label == "J1:R1-J2:R3"

    def test_parse_juz(self):
        descriptor = parse_range({"type": "juz", "start": 1, "end": 2})
        assert isinstance(descriptor, JuzRange)
        assert descriptor.label == "Juz 1-2"

    def test_inverted_is_not_a_parse_error(self):
        assert parse_range({"type": "juz", "start": 5, "end": 3}) == JuzRange(start=5, end=3)

    def test_unknown_type(self):
        with pytest.raises(RangeDescriptorError) as exc_info:
            parse_range({"type": "hizb", "start": 1, "end": 2})
        assert exc_info.value.payload == {"type": "hizb", "start": 1, "end": 2}

    def test_missing_field(self):
        with pytest.raises(RangeDescriptorError):
            parse_range({"type": "ayah", "start": {"surah": 1, "ayah": 1}})

    def test_non_integer(self):
        with pytest.raises(RangeDescriptorError):
            parse_range({"type": "juz", "start": "first", "end": 2})

    def test_parse_ranges_keeps_order(self):
        parsed = parse_ranges([{"type": "juz", "start": 2, "end": 2}, {"type": "juz", "start": 1, "end": 1}])
        assert [d.start for d in parsed] == [2, 1]

    def test_descriptors_are_hashable(self):
        assert len({JuzRange(start=1, end=1), JuzRange(start=1, end=1)}) == 1


class TestAttempt:
    def test_for_verse(self):
        verse = Verse.model_validate(DATASET_ROW)
        attempt = Attempt.for_verse(verse, "page_number", correct=True)
        assert attempt.ayah_key == "2:255"
        assert attempt.page == 42
        assert attempt.juz == 3
        assert attempt.ruku_in_juz == 1
        assert attempt.id is None

    def test_from_stored_row(self):
        attempt = Attempt.model_validate({
            "id": 7,
            "ayah_key": "1:1",
            "question_type": "ayah_number",
            "page_13line": 1,
            "juz_number": 1,
            "ruku_in_juz": 1,
            "correct": 0,
            "timestamp": "2024-01-15T10:30:00",
        })
        assert attempt.correct is False
        assert attempt.timestamp.year == 2024

    def test_accuracy_bucket(self):
        bucket = AccuracyBucket()
        assert bucket.accuracy == 0.0
        bucket.add(True)
        bucket.add(False)
        assert (bucket.correct, bucket.total, bucket.accuracy) == (1, 2, 0.5)

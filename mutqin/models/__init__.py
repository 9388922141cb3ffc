"""
Pydantic data models for Mutqin library.

These models represent the core data structures used throughout the library:
- Verse: A single ayah with its page, juz and ruku position
- AyahRange, RukuRange, JuzRange: Test pool range descriptors
- Attempt: An answered quiz question
- AccuracyBucket, ProgressSummary: Accuracy aggregates
"""

from mutqin.models.verse import Verse
from mutqin.models.ranges import (
    AyahRef,
    RukuRef,
    AyahRange,
    RukuRange,
    JuzRange,
    RangeDescriptor,
    parse_range,
    parse_ranges,
)
from mutqin.models.attempt import Attempt, AccuracyBucket, ProgressSummary

__all__ = [
    "Verse",
    "AyahRef",
    "RukuRef",
    "AyahRange",
    "RukuRange",
    "JuzRange",
    "RangeDescriptor",
    "parse_range",
    "parse_ranges",
    "Attempt",
    "AccuracyBucket",
    "ProgressSummary",
]

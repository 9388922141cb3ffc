"""
Quiz attempt and accuracy data models.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, computed_field

from mutqin.models.verse import Verse


class Attempt(BaseModel):
    """
    One answered quiz question.

    Attempts are recorded and stored by the caller. The library only
    aggregates them into accuracy figures.

    Attributes:
        id: Storage identifier (None until persisted)
        ayah_key: Key of the ayah the question was about
        question_type: Kind of question asked (e.g. "page_number")
        page: Page of the ayah
        juz: Juz of the ayah
        ruku_in_juz: Ruku ordinal within the juz
        correct: Whether the answer was correct
        timestamp: When the question was answered
    """

    id: Optional[int] = Field(
        default=None,
        description="Storage identifier",
    )
    ayah_key: str = Field(
        ...,
        description="Key of the ayah the question was about",
    )
    question_type: str = Field(
        ...,
        description="Kind of question asked",
    )
    page: int = Field(
        ...,
        description="Page of the ayah",
        alias="page_13line",
    )
    juz: int = Field(
        ...,
        description="Juz of the ayah",
        alias="juz_number",
    )
    ruku_in_juz: int = Field(
        ...,
        description="Ruku ordinal within the juz",
    )
    correct: bool = Field(
        ...,
        description="Whether the answer was correct",
    )
    timestamp: datetime = Field(
        default_factory=datetime.now,
        description="When the question was answered",
    )

    model_config = {"populate_by_name": True}

    @classmethod
    def for_verse(cls, verse: Verse, question_type: str, correct: bool) -> "Attempt":
        """Build an attempt about the given verse."""
        return cls(
            ayah_key=verse.verse_key,
            question_type=question_type,
            page=verse.page,
            juz=verse.juz,
            ruku_in_juz=verse.ruku_in_juz,
            correct=correct,
        )

    def __str__(self) -> str:
        mark = "correct" if self.correct else "wrong"
        return f"Attempt({self.ayah_key}, {self.question_type}, {mark})"


class AccuracyBucket(BaseModel):
    """Correct/total counts for one group of attempts."""

    correct: int = Field(default=0, ge=0)
    total: int = Field(default=0, ge=0)

    @computed_field
    @property
    def accuracy(self) -> float:
        """Fraction of correct answers (0.0 for an empty bucket)."""
        if self.total == 0:
            return 0.0
        return self.correct / self.total

    def add(self, correct: bool) -> None:
        self.total += 1
        if correct:
            self.correct += 1


class ProgressSummary(BaseModel):
    """
    Overall accuracy plus the weakest page, juz and question type.

    Attributes:
        total: Number of attempts
        accuracy: Percentage of correct attempts (0-100)
        weakest_page: (page, bucket) with the lowest accuracy
        weakest_juz: (juz, bucket) with the lowest accuracy
        weakest_type: (question_type, bucket) with the lowest accuracy
        recent: Most recent attempts, newest first
    """

    total: int
    accuracy: float
    weakest_page: Optional[tuple[int, AccuracyBucket]] = None
    weakest_juz: Optional[tuple[int, AccuracyBucket]] = None
    weakest_type: Optional[tuple[str, AccuracyBucket]] = None
    recent: list[Attempt] = Field(default_factory=list)

    def __str__(self) -> str:
        return f"ProgressSummary(total={self.total}, accuracy={self.accuracy:.1f}%)"

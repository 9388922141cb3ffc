"""
Accuracy aggregation over quiz attempts.

Attempts are stored by the caller; these helpers turn a list of them into
per-page, per-juz and per-question-type accuracy, pick out weak pages, and
narrow a test pool to those pages for focused practice.
"""

from typing import Literal, Optional, Sequence

from mutqin.config import get_settings
from mutqin.models import AccuracyBucket, Attempt, ProgressSummary, Verse

GroupKey = Literal["page", "juz", "question_type"]


def accuracy_by(attempts: Sequence[Attempt], key: GroupKey) -> dict:
    """
    Group attempts and count correct answers per group.

    Args:
        attempts: Attempts to aggregate
        key: Attempt field to group by ("page", "juz" or "question_type")

    Returns:
        Dict mapping each group value to its AccuracyBucket, in first-seen order
    """
    buckets: dict = {}
    for attempt in attempts:
        group = getattr(attempt, key)
        buckets.setdefault(group, AccuracyBucket()).add(attempt.correct)
    return buckets


def weakest(buckets: dict) -> Optional[tuple]:
    """The (group, bucket) pair with the lowest accuracy; ties go to the first seen."""
    if not buckets:
        return None
    return min(buckets.items(), key=lambda item: item[1].accuracy)


def weak_pages(attempts: Sequence[Attempt], threshold: Optional[float] = None) -> list[int]:
    """
    Pages whose accuracy is below the threshold.

    Args:
        attempts: Attempts to aggregate
        threshold: Accuracy cut-off (default: settings.weak_accuracy_threshold)

    Returns:
        Sorted page numbers
    """
    if threshold is None:
        threshold = get_settings().weak_accuracy_threshold
    buckets = accuracy_by(attempts, "page")
    return sorted(page for page, bucket in buckets.items() if bucket.accuracy < threshold)


def focus_pool(
    pool: Sequence[Verse],
    attempts: Sequence[Attempt],
    threshold: Optional[float] = None,
) -> list[Verse]:
    """
    Narrow a test pool to the learner's weak pages.

    Falls back to the whole pool when no weak page lies inside it.
    """
    pages = set(weak_pages(attempts, threshold))
    focused = [v for v in pool if v.page in pages]
    return focused or list(pool)


def summarize(attempts: Sequence[Attempt], recent: Optional[int] = None) -> Optional[ProgressSummary]:
    """
    Summarize overall progress.

    Args:
        attempts: Attempts in the order they were made
        recent: How many recent attempts to include (default: settings.recent_attempts)

    Returns:
        ProgressSummary, or None if there are no attempts
    """
    if not attempts:
        return None
    if recent is None:
        recent = get_settings().recent_attempts

    correct = sum(1 for a in attempts if a.correct)
    latest = list(attempts[-recent:])[::-1] if recent > 0 else []
    return ProgressSummary(
        total=len(attempts),
        accuracy=correct / len(attempts) * 100,
        weakest_page=weakest(accuracy_by(attempts, "page")),
        weakest_juz=weakest(accuracy_by(attempts, "juz")),
        weakest_type=weakest(accuracy_by(attempts, "question_type")),
        recent=latest,
    )

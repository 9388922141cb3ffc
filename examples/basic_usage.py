"""
Basic usage example for Mutqin library.

This example demonstrates the core workflow:
1. Load the verse dataset into an index
2. Build a test pool from a few ranges
3. Ask navigation questions about verses in the pool
"""

import random
import sys
from pathlib import Path

from mutqin.core import (
    build_pool,
    pool_summary,
    first_ayah_of_page,
    last_ayah_of_page,
    ayahs_to_boundary,
)
from mutqin.data import load_index
from mutqin.models import parse_ranges


def study_session(data_path: str, questions: int = 3):
    """
    Print a handful of study prompts drawn from juz 30 and Ayat al-Kursi.

    Args:
        data_path: Path to the verse dataset JSON
        questions: Number of prompts to print
    """
    print(f"Loading verses from {data_path}")
    print("=" * 50)

    index = load_index(data_path)
    print(f"   Loaded {len(index)} verses")

    ranges = parse_ranges([
        {"type": "juz", "start": 30, "end": 30},
        {"type": "ayah", "start": {"surah": 2, "ayah": 255}, "end": {"surah": 2, "ayah": 257}},
    ])
    pool = build_pool(index, ranges)
    summary = pool_summary(pool)
    print(f"\n📚 Test pool: {summary['verses']} ayahs on {summary['pages']} pages")

    if not pool:
        print("   Pool is empty, nothing to study.")
        return

    for _ in range(questions):
        verse = random.choice(pool)

        first = first_ayah_of_page(index, verse.page)
        last = last_ayah_of_page(index, verse.page)
        print(f"\n❓ Page {verse.page}: first ayah is {first.verse_key}, last ayah is {last.verse_key}")

        run = ayahs_to_boundary(index, verse, "forward")
        print(f"   Recite {verse.verse_key} to the ruku boundary ({run[-1].verse_key}):")
        for ayah in run:
            print(f"   - {ayah.verse_key}: {ayah.text[:40]}")


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python basic_usage.py <ayah_full_13line.json>")
        sys.exit(1)

    if not Path(sys.argv[1]).exists():
        print(f"Error: dataset not found: {sys.argv[1]}")
        sys.exit(1)

    study_session(sys.argv[1])

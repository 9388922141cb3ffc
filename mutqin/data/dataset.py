"""
Verse dataset loader.

Loads the 13-line mushaf verse dataset (a JSON array with one object per
ayah) and builds the read-only verse index from it.
"""

import json
import time
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from mutqin._logging import log_dataset_loaded
from mutqin.config import get_settings
from mutqin.core.index import VerseIndex
from mutqin.data.invariants import check_invariants
from mutqin.exceptions import VerseDataError
from mutqin.models import Verse


def _resolve_path(path: str | Path | None) -> Path:
    if path is None:
        return Path(get_settings().data_path)
    return Path(path)


def parse_verses(rows: list) -> list[Verse]:
    """
    Convert raw dataset rows into Verse objects.

    Args:
        rows: List of dicts as stored in the dataset file

    Returns:
        Verses in file order

    Raises:
        VerseDataError: If a row is missing fields or has invalid values
    """
    if not isinstance(rows, list):
        raise VerseDataError(
            "Verse dataset must be a JSON array",
            context={"found": type(rows).__name__},
        )

    verses = []
    for position, row in enumerate(rows):
        try:
            verses.append(Verse.model_validate(row))
        except ValidationError as e:
            key = row.get("verse_key") if isinstance(row, dict) else None
            first = e.errors()[0]
            field = ".".join(str(p) for p in first["loc"]) or "row"
            raise VerseDataError(
                f"Invalid verse record: {field}: {first['msg']}",
                verse_key=key,
                context={"row": position},
            )
    return verses


def load_verses(path: str | Path | None = None, validate: Optional[bool] = None) -> list[Verse]:
    """
    Load all verses from a dataset file.

    Args:
        path: Dataset JSON path (default: settings.data_path)
        validate: Check dataset invariants (default: settings.validate_data)

    Returns:
        List of all Verse objects in file order

    Raises:
        VerseDataError: If the file cannot be read or the data is invalid
    """
    data_path = _resolve_path(path)
    if validate is None:
        validate = get_settings().validate_data

    started = time.time()
    try:
        with open(data_path, "r", encoding="utf-8") as f:
            rows = json.load(f)
    except FileNotFoundError:
        raise VerseDataError("Verse dataset not found", context={"path": str(data_path)})
    except OSError as e:
        raise VerseDataError(
            f"Cannot read verse dataset: {e.strerror}",
            context={"path": str(data_path)},
        )
    except UnicodeDecodeError as e:
        raise VerseDataError(
            f"Verse dataset is not valid UTF-8: {e.reason}",
            context={"path": str(data_path), "position": e.start},
        )
    except json.JSONDecodeError as e:
        raise VerseDataError(
            f"Verse dataset is not valid JSON: {e.msg}",
            context={"path": str(data_path), "line": e.lineno},
        )

    verses = parse_verses(rows)
    if validate:
        check_invariants(verses)

    log_dataset_loaded(data_path, len(verses), time.time() - started)
    return verses


@lru_cache(maxsize=1)
def _cached_index(path: Path, validate: bool) -> VerseIndex:
    return VerseIndex(load_verses(path, validate=validate))


def load_index(path: str | Path | None = None, validate: Optional[bool] = None) -> VerseIndex:
    """
    Load the dataset once and return its verse index.

    Repeated calls with the same path return the same cached index.

    Args:
        path: Dataset JSON path (default: settings.data_path)
        validate: Check dataset invariants (default: settings.validate_data)

    Returns:
        VerseIndex over the whole dataset
    """
    if validate is None:
        validate = get_settings().validate_data
    return _cached_index(_resolve_path(path).resolve(), validate)


def clear_cache() -> None:
    """Drop the cached index so the next load_index() re-reads the file."""
    _cached_index.cache_clear()

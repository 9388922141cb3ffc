"""Command line front end for Mutqin.

Builds test pools and runs navigation lookups against a verse dataset.

Examples:
    mutqin --data ayah_full_13line.json pool --range ayah:1:1-1:7 --range juz:2-3
    mutqin nav 2:255 ruku-forward
    mutqin page 12 first
"""

import argparse
import json
import re
import sys

from mutqin._logging import (
    configure_logging,
    enable_debug_logging,
    log_error,
    log_pool_built,
    log_warning,
)
from mutqin.config import get_settings
from mutqin.core import (
    VerseIndex,
    build_pool,
    first_ayah_of_page,
    first_ayah_of_ruku,
    last_ayah_of_page,
    last_ayah_of_ruku,
    nearest_ruku_boundary,
    next_ayah,
    pool_summary,
    prev_ayah,
)
from mutqin.data import load_index
from mutqin.exceptions import MutqinError, RangeDescriptorError
from mutqin.models import AyahRange, JuzRange, RukuRange, Verse, parse_range

_AYAH_RANGE = re.compile(r"^(\d+):(\d+)-(\d+):(\d+)$")
_RUKU_RANGE = re.compile(r"^(\d+)\.(\d+)-(\d+)\.(\d+)$")
_JUZ_RANGE = re.compile(r"^(\d+)-(\d+)$")


def parse_range_arg(text: str) -> AyahRange | RukuRange | JuzRange:
    """
    Parse a command line range.

    Formats:
        ayah:S:A-S:A   e.g. ayah:1:1-1:7
        ruku:J.R-J.R   e.g. ruku:1.1-1.3
        juz:J-J        e.g. juz:1-2

    Raises:
        RangeDescriptorError: If the text matches none of the formats
    """
    kind, _, bounds = text.partition(":")
    kind = kind.strip().lower()
    bounds = bounds.strip()

    patterns = {"ayah": _AYAH_RANGE, "ruku": _RUKU_RANGE, "juz": _JUZ_RANGE}
    match = patterns[kind].match(bounds) if kind in patterns else None
    if match is None:
        raise RangeDescriptorError("Unrecognized range", payload=text)

    numbers = [int(g) for g in match.groups()]
    if kind == "ayah":
        payload = {
            "type": "ayah",
            "start": {"surah": numbers[0], "ayah": numbers[1]},
            "end": {"surah": numbers[2], "ayah": numbers[3]},
        }
    elif kind == "ruku":
        payload = {
            "type": "ruku",
            "start": {"juz": numbers[0], "ruku": numbers[1]},
            "end": {"juz": numbers[2], "ruku": numbers[3]},
        }
    else:
        payload = {"type": "juz", "start": numbers[0], "end": numbers[1]}

    return parse_range(payload)


def _range_type(text: str) -> AyahRange | RukuRange | JuzRange:
    try:
        return parse_range_arg(text)
    except RangeDescriptorError as e:
        raise argparse.ArgumentTypeError(str(e))


def _print_verse(verse: Verse | None) -> int:
    if verse is None:
        print("-")
        return 1
    print(f"{verse.verse_key}\tpage {verse.page}\tjuz {verse.juz}\truku {verse.ruku_in_juz}\t{verse.text}")
    return 0


def cmd_pool(index: VerseIndex, args: argparse.Namespace) -> int:
    pool = build_pool(index, args.ranges)
    log_pool_built(len(args.ranges), len(pool))
    if not pool:
        log_warning("Test pool is empty", ranges=", ".join(d.label for d in args.ranges) or "none")

    if args.json:
        print(json.dumps([v.verse_key for v in pool]))
        return 0

    for descriptor in args.ranges:
        print(f"{descriptor.type}: {descriptor.label}")
    summary = pool_summary(pool)
    print(
        f"Pool: {summary['verses']} ayahs, {summary['pages']} pages, "
        f"{summary['juz']} juz, {summary['rukus']} rukus"
    )
    return 0 if pool else 1


def cmd_nav(index: VerseIndex, args: argparse.Namespace) -> int:
    verse = index.find_by_key(args.key)
    if verse is None:
        print("-")
        return 1

    if args.target == "next":
        return _print_verse(next_ayah(index, verse))
    if args.target == "prev":
        return _print_verse(prev_ayah(index, verse))
    if args.target == "ruku-forward":
        return _print_verse(nearest_ruku_boundary(index, verse, "forward"))
    return _print_verse(nearest_ruku_boundary(index, verse, "backward"))


def cmd_page(index: VerseIndex, args: argparse.Namespace) -> int:
    if args.which == "first":
        return _print_verse(first_ayah_of_page(index, args.page))
    return _print_verse(last_ayah_of_page(index, args.page))


def cmd_ruku(index: VerseIndex, args: argparse.Namespace) -> int:
    if args.which == "first":
        return _print_verse(first_ayah_of_ruku(index, args.ruku))
    return _print_verse(last_ayah_of_ruku(index, args.ruku))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mutqin", description="Quran structure test pools and navigation")
    parser.add_argument("--data", default=None, help="Verse dataset JSON (default: MUTQIN_DATA_PATH)")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    pool = sub.add_parser("pool", help="Build a test pool from ranges")
    pool.add_argument(
        "--range",
        dest="ranges",
        action="append",
        type=_range_type,
        default=[],
        help="ayah:S:A-S:A, ruku:J.R-J.R or juz:J-J (repeatable)",
    )
    pool.add_argument("--json", action="store_true", help="Print pool verse keys as JSON")
    pool.set_defaults(func=cmd_pool)

    nav = sub.add_parser("nav", help="Adjacent ayah or nearest ruku boundary")
    nav.add_argument("key", help='Ayah key, e.g. "2:255"')
    nav.add_argument("target", choices=["next", "prev", "ruku-forward", "ruku-backward"])
    nav.set_defaults(func=cmd_nav)

    page = sub.add_parser("page", help="First or last ayah of a page")
    page.add_argument("page", type=int)
    page.add_argument("which", choices=["first", "last"])
    page.set_defaults(func=cmd_page)

    ruku = sub.add_parser("ruku", help="First or last ayah of a ruku")
    ruku.add_argument("ruku", type=int, help="Global ruku number")
    ruku.add_argument("which", choices=["first", "last"])
    ruku.set_defaults(func=cmd_ruku)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        enable_debug_logging()
    else:
        configure_logging(level=get_settings().log_level)

    try:
        index = load_index(args.data)
    except MutqinError as e:
        log_error("Could not load verse data", path=args.data or get_settings().data_path)
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return args.func(index, args)


if __name__ == "__main__":
    sys.exit(main())

"""
Tests for the command line front end (mutqin/cli.py).

Run: pytest tests/test_cli.py -v
"""

import json

import pytest

from mutqin.cli import main, parse_range_arg
from mutqin.exceptions import RangeDescriptorError
from mutqin.models import AyahRange, JuzRange, RukuRange


class TestParseRangeArg:
    def test_ayah(self):
        descriptor = parse_range_arg("ayah:1:1-1:7")
        assert isinstance(descriptor, AyahRange)
        assert descriptor.label == "1:1-1:7"

    def test_ruku(self):
        descriptor = parse_range_arg("ruku:1.2-3.1")
        assert isinstance(descriptor, RukuRange)
        assert (descriptor.start.juz, descriptor.start.ruku) == (1, 2)
        assert (descriptor.end.juz, descriptor.end.ruku) == (3, 1)

    def test_juz(self):
        assert parse_range_arg("juz:2-3") == JuzRange(start=2, end=3)

    def test_case_insensitive_kind(self):
        assert parse_range_arg("JUZ:1-1") == JuzRange(start=1, end=1)

    @pytest.mark.parametrize("text", ["hizb:1-2", "juz:1", "ayah:1-7", "ruku:1:1-1:2", ""])
    def test_malformed(self, text):
        with pytest.raises(RangeDescriptorError):
            parse_range_arg(text)


class TestMain:
    def test_pool_json(self, dataset_file, capsys):
        code = main(["--data", str(dataset_file), "pool", "--range", "ayah:1:6-2:1", "--range", "juz:2-2", "--json"])
        assert code == 0
        assert json.loads(capsys.readouterr().out) == ["1:6", "1:7", "2:1", "2:2", "2:3"]

    def test_pool_summary(self, dataset_file, capsys):
        code = main(["--data", str(dataset_file), "pool", "--range", "juz:1-1"])
        out = capsys.readouterr().out
        assert code == 0
        assert "juz: Juz 1-1" in out
        assert "Pool: 7 ayahs, 3 pages, 1 juz, 2 rukus" in out

    def test_empty_pool_exit_code(self, dataset_file, capsys):
        assert main(["--data", str(dataset_file), "pool", "--range", "juz:2-1"]) == 1

    def test_malformed_range_exits(self, dataset_file):
        with pytest.raises(SystemExit) as exc_info:
            main(["--data", str(dataset_file), "pool", "--range", "juz:one-two"])
        assert exc_info.value.code == 2

    def test_nav_ruku_forward(self, dataset_file, capsys):
        assert main(["--data", str(dataset_file), "nav", "1:5", "ruku-forward"]) == 0
        assert capsys.readouterr().out.startswith("1:7\t")

    def test_nav_next_of_last(self, dataset_file, capsys):
        assert main(["--data", str(dataset_file), "nav", "2:3", "next"]) == 1
        assert capsys.readouterr().out.strip() == "-"

    def test_nav_unknown_key(self, dataset_file, capsys):
        assert main(["--data", str(dataset_file), "nav", "9:9", "prev"]) == 1

    def test_page_last(self, dataset_file, capsys):
        assert main(["--data", str(dataset_file), "page", "3", "last"]) == 0
        assert capsys.readouterr().out.startswith("2:1\t")

    def test_ruku_last(self, dataset_file, capsys):
        assert main(["--data", str(dataset_file), "ruku", "3", "last"]) == 0
        assert capsys.readouterr().out.startswith("2:3\t")

    def test_empty_pool_logs_warning(self, dataset_file, capsys):
        main(["--data", str(dataset_file), "pool", "--range", "juz:2-1"])
        assert "Test pool is empty (ranges=Juz 2-1)" in capsys.readouterr().err

    def test_undecodable_dataset(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_bytes(b'[{"verse_key": "\xff\xfe"}]')
        assert main(["--data", str(path), "page", "1", "first"]) == 2
        assert "not valid UTF-8" in capsys.readouterr().err

    def test_missing_dataset(self, tmp_path, capsys):
        assert main(["--data", str(tmp_path / "missing.json"), "page", "1", "first"]) == 2
        assert "not found" in capsys.readouterr().err

"""
Tests for the sanitize_text script.

Verifies rules-file defaults, per-run overrides and check mode.
"""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from scripts.sanitize_text import build_parser, main


@pytest.fixture
def no_rules(tmp_path: Path) -> str:
    return str(tmp_path / "absent.yaml")


def write_input(tmp_path: Path, text: str) -> str:
    path = tmp_path / "input.txt"
    path.write_text(text, encoding="utf-8")
    return str(path)


class TestParser:
    def test_defaults(self) -> None:
        args = build_parser().parse_args([])

        assert args.source == "-"
        assert args.multi_line is None
        assert args.max_length is None
        assert args.sanitise is None
        assert args.check is False

    def test_mode_flags_are_exclusive(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--multi-line", "--single-line"])


class TestSanitize:
    def test_sanitizes_file_with_defaults(
        self, tmp_path: Path, no_rules: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        source = write_input(tmp_path, "  foo&nbsp;bar\n")

        assert main(["--rules", no_rules, source]) == 0
        assert capsys.readouterr().out == "foo bar\n"

    def test_reads_stdin(
        self,
        no_rules: str,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("foo   bar"))

        assert main(["--rules", no_rules, "-"]) == 0
        assert capsys.readouterr().out == "foo bar\n"

    def test_rules_file_defaults(
        self, tmp_path: Path, rules_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        source = write_input(tmp_path, "foo\n\n\nbar")

        main(["--rules", str(rules_file), source])

        assert capsys.readouterr().out == "foo\n\nbar\n"

    def test_single_line_override(
        self, tmp_path: Path, rules_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        source = write_input(tmp_path, "foo\n\n\nbar")

        main(["--rules", str(rules_file), "--single-line", source])

        assert capsys.readouterr().out == "foo bar\n"

    def test_max_length_override(
        self, tmp_path: Path, no_rules: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        source = write_input(tmp_path, "foo bar")

        main(["--rules", no_rules, "--max-length", "5", source])

        assert capsys.readouterr().out == "foo b\n"

    def test_no_sanitise_only_truncates(
        self, tmp_path: Path, no_rules: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        source = write_input(tmp_path, "foo  bar")

        main(["--rules", no_rules, "--no-sanitise", "--max-length", "4", source])

        assert capsys.readouterr().out == "foo \n"


class TestCheck:
    def test_clean_input(
        self, tmp_path: Path, no_rules: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        source = write_input(tmp_path, "foo bar")

        assert main(["--rules", no_rules, "--check", source]) == 0
        assert capsys.readouterr().out.strip() == "clean"

    def test_dirty_input(
        self, tmp_path: Path, no_rules: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        source = write_input(tmp_path, "foo  bar")

        assert main(["--rules", no_rules, "--check", source]) == 1
        assert capsys.readouterr().out.strip() == "dirty"

    def test_invalid_rules_file_raises(self, tmp_path: Path) -> None:
        rules = tmp_path / "rules.yaml"
        rules.write_text("editor: [")
        source = write_input(tmp_path, "foo")

        with pytest.raises(ValueError):
            main(["--rules", str(rules), source])

    def test_trailing_newline_of_file_is_ignored(
        self, tmp_path: Path, no_rules: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        source = write_input(tmp_path, "foo bar\n")

        assert main(["--rules", no_rules, "--check", source]) == 0
        assert capsys.readouterr().out.strip() == "clean"

    def test_only_one_trailing_newline_is_ignored(
        self, tmp_path: Path, rules_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        source = write_input(tmp_path, "foo\n\nbar\n\n")

        assert main(["--rules", str(rules_file), "--check", source]) == 1
        assert capsys.readouterr().out.strip() == "dirty"

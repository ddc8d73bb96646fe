from __future__ import annotations

import io
import json
import sys
from pathlib import Path

import pytest

from suffixiter.cli import main


def test_prints_each_suffix(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["héllo"]) == 0
    assert capsys.readouterr().out == "héllo\néllo\nllo\nlo\no\n"


def test_count_and_hint(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--count", "a€\U0001f600"]) == 0
    assert capsys.readouterr().out == "3\n"
    assert main(["--hint", "a€\U0001f600"]) == 0
    assert capsys.readouterr().out == "2 8\n"


def test_json_output(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--json", "abc"]) == 0
    assert json.loads(capsys.readouterr().out) == ["abc", "bc", "c"]
    assert main(["--json", "--count", "abc"]) == 0
    assert json.loads(capsys.readouterr().out) == {"count": 3}


def test_sequence_mode(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--seq", "a b  c"]) == 0
    assert capsys.readouterr().out == "a b c\nb c\nc\n"
    assert main(["--seq", "--hint", "a b c"]) == 0
    assert capsys.readouterr().out == "3 3\n"


def test_reads_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = tmp_path / "in.txt"
    p.write_bytes("日本".encode("utf-8"))
    assert main(["--file", str(p)]) == 0
    assert capsys.readouterr().out == "日本\n本\n"


def test_reads_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"xy")))
    assert main(["--count"]) == 0
    assert capsys.readouterr().out == "2\n"


def test_validate_reports_bad_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = tmp_path / "bad.txt"
    p.write_bytes(b"ok\xc3")
    assert main(["--validate", "--file", str(p)]) == 1
    err = capsys.readouterr().err
    assert "offset 2" in err
    assert "invalid utf-8" in err


def test_json_keeps_newline_suffixes_apart(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--json", "a\nb"]) == 0
    assert json.loads(capsys.readouterr().out) == ["a\nb", "\nb", "b"]

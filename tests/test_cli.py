from __future__ import annotations

import json
from pathlib import Path

import pytest

from yaml_error_context.cli import main


YAML = """---
outer:
  inner: ~ # null variant
"""


def _write(tmp_path: Path) -> Path:
    p = tmp_path / "config.yaml"
    p.write_text(YAML, encoding="utf-8")
    return p


def test_cli_reports_recovered_location(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = _write(tmp_path)
    rc = main(
        [
            str(p),
            "--message",
            "outer.inner: unknown variant `~`, expected `One` or `Two` at line 3 column 10",
            "--location",
            "0:1:1",
        ]
    )
    assert rc == 0
    out = capsys.readouterr().out
    assert out == f"{p}:3:10: error: outer.inner: unknown variant `~`, expected `One` or `Two`\n"


def test_cli_reports_context(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = _write(tmp_path)
    rc = main([str(p), "-m", "missing field `value` at line 3 column 10 at line 3 column 3", "-l", "0:1:1"])
    assert rc == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        f"{p}:3:10: error: missing field `value`",
        f"{p}:3:3: note: enclosing context",
    ]


def test_cli_without_location(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = _write(tmp_path)
    assert main([str(p), "-m", "EOF while parsing a value"]) == 0
    assert capsys.readouterr().out == f"{p}: error: EOF while parsing a value\n"


def test_cli_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = _write(tmp_path)
    rc = main([str(p), "-m", "missing field `a` at line 3 column 10 at line 3 column 3", "-l", "0:1:1", "--json"])
    assert rc == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == {
        "error_message": "missing field `a`",
        "error_span": {"offset": 20, "line": 3, "column": 10},
        "context_span": {"offset": 13, "line": 3, "column": 3},
    }


def test_cli_trusted_location_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = _write(tmp_path)
    rc = main([str(p), "-m", "invalid type: unit value, expected u32", "-l", "20:3:10", "--json", "-d"])
    assert rc == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["error_span"] == {"offset": 20, "line": 3, "column": 10}
    assert payload["context_span"] is None


def test_cli_rejects_bad_location(tmp_path: Path) -> None:
    p = _write(tmp_path)
    with pytest.raises(SystemExit) as e:
        main([str(p), "-m", "boom", "-l", "1:2"])
    assert e.value.code == 2


def test_cli_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    rc = main([str(tmp_path / "missing.yaml"), "-m", "boom"])
    assert rc == 1
    assert "cannot read" in capsys.readouterr().err

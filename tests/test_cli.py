"""Tests for the command-line entry point."""

from __future__ import annotations

import io
import json

import pytest

from src.cli import main, run


def _lines(out: str) -> list[dict]:
    return [json.loads(line) for line in out.splitlines() if line.strip()]


def test_one_result_per_utterance(
        clean_env: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    assert main(["oka kg tomatolu", "do dozen eggs"]) == 0

    results = _lines(capsys.readouterr().out)
    assert len(results) == 2
    assert results[0]["items"] == [
        {"name": "tomato", "quantity": 1.0, "unit": "kg", "raw": "oka kg tomatolu"}
    ]
    assert results[0]["languageHint"] == "te"
    assert results[1]["items"][0]["unit"] == "dozen"


def test_batch_reads_stdin(
        clean_env: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    clean_env.setattr("sys.stdin", io.StringIO("2 kg bendakayalu\n\noka kilo tomatolu\n"))

    assert main(["--batch"]) == 0

    results = _lines(capsys.readouterr().out)
    assert len(results) == 1
    assert [item["name"] for item in results[0]["items"]] == ["okra", "tomato"]
    assert results[0]["languageHint"] == "te"


def test_indent_from_settings(
        clean_env: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    clean_env.setenv("OUTPUT_INDENT", "2")

    assert main(["half kilo tomato"]) == 0

    out = capsys.readouterr().out
    assert out.startswith("{\n  ")
    assert json.loads(out)["languageHint"] == "en"


def test_invalid_settings_exit_with_error(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("LOG_LEVEL", "chatty")
    assert main(["oka kg tomatolu"]) == 1


def test_run_batch_and_single() -> None:
    assert len(run(["a", "b"], batch=False)) == 2
    assert len(run(["a", "b"], batch=True)) == 1

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from ngram_tools.cli.ngrams import app
from ngram_tools.constants import WORD_SEP
from ngram_tools.utils.typer import run_typer_app_as_main

runner = CliRunner()


def test_words_from_stdin() -> None:
    result = runner.invoke(app, ["-n", "2"], input="one two three four\n")
    assert result.exit_code == 0
    assert result.output.splitlines() == ["one two", "two three", "three four"]


def test_words_padded() -> None:
    result = runner.invoke(app, ["-n", "2", "--pad"], input="one two\nthree\n")
    assert result.exit_code == 0
    assert result.output.splitlines() == [
        f"{WORD_SEP} one",
        "one two",
        "two three",
        f"three {WORD_SEP}",
    ]


def test_chars_from_file(tmp_path: Path) -> None:
    input_file = tmp_path / "input.txt"
    input_file.write_text("foo", encoding="utf-8")
    result = runner.invoke(app, [str(input_file), "--tokens", "chars", "-n", "2"])
    assert result.exit_code == 0
    assert result.output.splitlines() == ["fo", "oo"]


def test_lines_with_separator() -> None:
    result = runner.invoke(
        app,
        ["-t", "lines", "-n", "2", "-s", " | "],
        input="first line\n\nsecond line\nthird\n",
    )
    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "first line | second line",
        "second line | third",
    ]


def test_json_output() -> None:
    result = runner.invoke(
        app, ["-n", "3", "--pad", "--format", "json"], input="a b c\n"
    )
    assert result.exit_code == 0
    records = [json.loads(line) for line in result.output.splitlines()]
    assert len(records) == 5
    assert records[0] == {
        "index": 0,
        "tokens": [WORD_SEP, WORD_SEP, "a"],
        "hasPadding": True,
    }
    assert records[2] == {"index": 2, "tokens": ["a", "b", "c"], "hasPadding": False}
    assert [r["index"] for r in records] == [0, 1, 2, 3, 4]


def test_environment_configuration() -> None:
    result = runner.invoke(
        app,
        [],
        input="abc",
        env={"NGRAMS_SIZE": "3", "NGRAMS_TOKENS": "chars", "NGRAMS_PAD": "false"},
    )
    assert result.exit_code == 0
    assert result.output.splitlines() == ["abc"]


def test_input_too_short() -> None:
    result = runner.invoke(app, ["-n", "4"], input="one\n")
    assert result.exit_code == 1
    assert "Need at least 3 token(s)" in result.output
    assert "Traceback" not in result.output


def test_input_too_short_lenient() -> None:
    result = runner.invoke(app, ["-n", "4", "--lenient"], input="one\n")
    assert result.exit_code == 0
    assert result.output == ""


@pytest.mark.parametrize("size_args", [["-n", "0"], ["--size=-2"]])
def test_invalid_size(size_args: list[str]) -> None:
    result = runner.invoke(app, size_args, input="one two\n")
    assert result.exit_code == 1
    assert "Window size must be a positive integer" in result.output


def test_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, [str(tmp_path / "missing.txt")])
    assert result.exit_code == 2


def test_invalid_utf8_file(tmp_path: Path) -> None:
    input_file = tmp_path / "input.txt"
    input_file.write_bytes(b"\xff\xfe")
    result = runner.invoke(app, [str(input_file)])
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "can't decode" in result.output


def test_main_exits_non_zero_on_invalid_utf8(tmp_path: Path) -> None:
    input_file = tmp_path / "input.txt"
    input_file.write_bytes(b"\xff\xfe")
    with pytest.raises(SystemExit) as exc_info:
        run_typer_app_as_main(app, args=[str(input_file)], prog_name="ngrams")
    assert exc_info.value.code == 1


def test_json_padding_flag_ignores_real_sentinel_tokens() -> None:
    result = runner.invoke(
        app,
        ["-t", "chars", "-n", "2", "--pad", "-f", "json"],
        input=f"a{WORD_SEP}b",
    )
    assert result.exit_code == 0
    records = [json.loads(line) for line in result.output.splitlines()]
    assert [r["hasPadding"] for r in records] == [True, False, False, True]
    assert records[1]["tokens"] == ["a", WORD_SEP]


def test_json_without_pad_never_flags_padding() -> None:
    result = runner.invoke(
        app, ["-t", "chars", "-n", "2", "-f", "json"], input=f"{WORD_SEP}x"
    )
    assert result.exit_code == 0
    records = [json.loads(line) for line in result.output.splitlines()]
    assert records == [{"index": 0, "tokens": [WORD_SEP, "x"], "hasPadding": False}]

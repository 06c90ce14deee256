#!/usr/bin/env python3

from __future__ import annotations

import logging
import sys
from contextlib import nullcontext
from enum import Enum
from pathlib import Path
from typing import TextIO

import typer

from ngram_tools.constants import (
    DEFAULT_OUTPUT_SEPARATOR,
    DEFAULT_WINDOW_SIZE,
    ENV_PAD,
    ENV_TOKEN_MODE,
    ENV_WINDOW_SIZE,
)
from ngram_tools.models.window import WindowRecord
from ngram_tools.ngrams.errors import NgramError
from ngram_tools.ngrams.windows import Ngrams
from ngram_tools.utils.iteration import TokenMode, tokenize
from ngram_tools.utils.log import configure_logging
from ngram_tools.utils.typer import exit_on_error, run_typer_app_as_main

app = typer.Typer(rich_markup_mode="rich")

log = logging.getLogger(__name__)


class OutputFormat(Enum):
    TEXT = "text"
    JSON = "json"


def main() -> None:
    run_typer_app_as_main(app, prog_name="ngrams")


@app.command(help="Print the n-grams of a text, one per line.")
def command(
    input_file: Path | None = typer.Argument(
        None,
        exists=True,
        readable=True,
        file_okay=True,
        dir_okay=False,
        allow_dash=True,
        metavar="[FILE]",
        help="Text to read. Reads standard input when omitted or '-'.",
    ),
    size: int = typer.Option(
        DEFAULT_WINDOW_SIZE,
        "--size",
        "-n",
        envvar=ENV_WINDOW_SIZE,
        show_default=True,
        help="Number of tokens in each n-gram.",
    ),
    pad: bool = typer.Option(
        False,
        "--pad/--no-pad",
        envvar=ENV_PAD,
        show_default=True,
        help="Pad both ends of the input so edge tokens appear in N n-grams.",
    ),
    tokens: TokenMode = typer.Option(
        TokenMode.WORDS,
        "--tokens",
        "-t",
        envvar=ENV_TOKEN_MODE,
        case_sensitive=False,
        show_default=True,
        help="How to split the input into tokens.",
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.TEXT,
        "--format",
        "-f",
        case_sensitive=False,
        show_default=True,
        help="[bold]text[/bold]: joined tokens; [bold]json[/bold]: JSON Lines records.",
    ),
    separator: str | None = typer.Option(
        None,
        "--separator",
        "-s",
        help="Joins tokens in text output. Default: nothing for chars, a space otherwise.",
    ),
    lenient: bool = typer.Option(
        False,
        "--lenient",
        is_flag=True,
        help="Print nothing, instead of failing, when the input is too short.",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", is_flag=True, help="Log progress to stderr."
    ),
) -> None:
    configure_logging(verbose)
    if separator is None:
        separator = "" if tokens == TokenMode.CHARS else DEFAULT_OUTPUT_SEPARATOR

    use_stdin = input_file is None or str(input_file) == "-"
    with exit_on_error(NgramError, UnicodeDecodeError):
        with (
            nullcontext(sys.stdin)
            if use_stdin
            else input_file.open("r", encoding="utf-8")
        ) as stream:
            count = write_ngrams(
                stream,
                size=size,
                pad=pad,
                tokens=tokens,
                output_format=output_format,
                separator=separator,
                strict=not lenient,
            )
    log.info("Wrote %d n-gram(s).", count)


def write_ngrams(
    stream: TextIO,
    *,
    size: int,
    pad: bool,
    tokens: TokenMode,
    output_format: OutputFormat,
    separator: str,
    strict: bool,
) -> int:
    """Print the n-grams of the tokens in `stream`, returning how many there were."""
    producer = Ngrams(tokenize(stream, tokens), size, strict=strict)
    if pad:
        producer.pad()

    count = 0
    for index, window in enumerate(producer):
        if output_format == OutputFormat.JSON:
            record = WindowRecord.from_window(
                index, window, has_padding=producer.window_has_padding(index)
            )
            print(record.to_json_line())
        else:
            print(separator.join(window))
        count += 1
    return count


if __name__ == "__main__":
    main()

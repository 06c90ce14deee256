#
# Helpers for the `typer` package.
#
import sys
import traceback
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape

from ngram_tools.ngrams.errors import NgramError

err_console = Console(stderr=True)


def run_typer_app_as_main(app, *args, **kwargs) -> Any | None:
    """Run a typer app as the main function.

    Catch any uncaught exceptions, print them to stderr and exit with status 1.
    """
    try:
        return app(*args, **kwargs)
    except typer.Exit as e:
        sys.exit(e.exit_code)
    except Exception:
        traceback.print_exc()
        sys.exit(1)


@contextmanager
def exit_on_error(
    *error_types: type[Exception], console: Console | None = None
) -> Generator[None, None, None]:
    """Report expected errors as a one-line message and exit with status 1.

    Anything not listed in `error_types` propagates with its traceback.
    Defaults to `NgramError`.

    :param error_types: Exception types that mean "bad input", not "bug".
    :param console: (Optional) Where to report. Defaults to stderr.
    """
    console = console or err_console
    handled = error_types or (NgramError,)
    try:
        yield
    except handled as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(code=1) from e

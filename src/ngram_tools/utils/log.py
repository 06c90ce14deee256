import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Send log records to stderr through rich.

    :param verbose: Log at DEBUG level instead of WARNING.
    :param console: (Optional) The console to log to. Defaults to stderr.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=console or Console(stderr=True),
                show_path=verbose,
                rich_tracebacks=True,
            )
        ],
        force=True,
    )

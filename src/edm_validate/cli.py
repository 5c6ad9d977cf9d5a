from __future__ import annotations

import logging

import typer

from .config import EXAMPLES_GLOB, EXIT_CRASH, SCHEMA_PATH, log_level
from .runner import run_examples

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    help=f"Validate {EXAMPLES_GLOB} against {SCHEMA_PATH.as_posix()}.",
)


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, log_level(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr"),
) -> None:
    """
    Run from the project root: the schema and examples resolve against the working directory.

    Exit 0 when all examples are valid (or none exist), 1 on invalid examples, 2 on any crash.
    """
    setup_logging(verbose)
    try:
        report = run_examples()
    except Exception as exc:
        logger.debug("validation run aborted", exc_info=True)
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=EXIT_CRASH) from exc
    raise typer.Exit(code=report.exit_code)


if __name__ == "__main__":
    app()

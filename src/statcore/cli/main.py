"""Main CLI entrypoint using Typer."""

from __future__ import annotations

import logging

import typer

from statcore import __version__
from statcore.cli.stats import stats_app

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

app = typer.Typer(
    name="statcore",
    help="Deterministic statistical analysis for tabular data files.",
    add_completion=False,
)
app.add_typer(stats_app, name="stats")

logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


def _show_version(value: bool):
    if value:
        typer.echo(f"statcore {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=_show_version,
        is_eager=True,
        help="Show version and exit.",
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Only log warnings and errors from the analysis engine."
    ),
):
    """statcore: exact, reproducible statistics for CSV/TSV/Excel data."""
    logging.getLogger("statcore").setLevel(logging.WARNING if quiet else logging.NOTSET)


if __name__ == "__main__":
    app()

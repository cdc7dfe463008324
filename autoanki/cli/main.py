#!/usr/bin/env python
"""Command line tools for inspecting and producing Autoanki note fields."""

import logging

import typer
from rich.logging import RichHandler

from autoanki.cli.commands import field

app = typer.Typer(help="Inspect and produce Autoanki note fields")

app.command("decode")(field.decode)
app.command("encode")(field.encode)
app.command("tree")(field.tree)


@app.callback()
def callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logs and detailed output"
    ),
):
    """Encode and decode the text Autoanki stores in Anki note fields."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[
            RichHandler(
                rich_tracebacks=True,
                show_time=True,
                log_time_format="%H:%M:%S",
            )
        ],
    )


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()

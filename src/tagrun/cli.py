"""
Command line entry point for tagrun.

Takes the whole tag-language document as its single argument, parses it and
runs the command spelled by the top-level element names:

    tagrun '<ls/><-la/>'        # runs: ls -la
"""

import logging

import click

from tagrun.exceptions import CommandSpawnError, DocumentParseError
from tagrun.execution.dispatch import elements_to_args, run_cli_command
from tagrun.parsing.grammar import parse_document


@click.command()
@click.argument("text")
def cli(text: str) -> None:
    """Parse TEXT as tag markup and run the command it names."""
    logging.basicConfig(
        level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s"
    )

    try:
        elements = parse_document(text)
    except DocumentParseError as e:
        raise click.ClickException(str(e)) from e
    except RecursionError as e:
        # Nesting depth is bounded only by the interpreter's recursion limit
        raise click.ClickException("Input is nested too deeply to parse") from e

    try:
        run_cli_command(elements_to_args(elements))
    except CommandSpawnError as e:
        raise click.ClickException(str(e)) from e

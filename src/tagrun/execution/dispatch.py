"""
Flattening and dispatch of parsed tag documents.

Top-level element names become the argument vector of an external process:
the first name is the executable, the rest are its arguments. Attributes and
nested children are parsed but play no part in the command.
"""

import logging
import subprocess
from collections.abc import Iterable, Mapping
from pathlib import Path

import click
from attrs import frozen

from tagrun.core.element import Element
from tagrun.core.types import CommandArgs
from tagrun.exceptions import CommandSpawnError

logger = logging.getLogger(__name__)


@frozen
class RunOptions:
    """Process settings for `run_cli_command`; `None` inherits from the caller."""

    cwd: Path | None = None
    env: Mapping[str, str] | None = None


def elements_to_args(elements: Iterable[Element]) -> CommandArgs:
    """
    Project top-level elements onto their names.

    This is lossy: attributes and children are dropped and cannot be
    recovered from the result.

    Params:
        elements: Top-level elements in source order

    Returns:
        Element names in the same order
    """
    return [element.name for element in elements]


def run_cli_command(
    args: CommandArgs, options: RunOptions = RunOptions()
) -> int | None:
    """
    Run `args[0]` with `args[1:]` as arguments and wait for it to finish.

    An empty argument list and a non-zero exit status are reported on stderr
    but are not errors.

    Params:
        args: Executable followed by its arguments
        options: Working directory and environment for the child process

    Returns:
        Exit status of the process, or None when there was nothing to run

    Raises:
        CommandSpawnError: If the process could not be started
    """
    if not args:
        logger.info("No command to run")
        click.echo("No command to run.", err=True)
        return None

    command, *command_args = args
    logger.debug("Running %s with arguments %s", command, command_args)
    try:
        completed = subprocess.run(
            [command, *command_args],
            cwd=options.cwd,
            env=None if options.env is None else dict(options.env),
            check=False,
        )
    except OSError as e:
        raise CommandSpawnError(command, str(e)) from e

    if completed.returncode != 0:
        logger.info("%s exited with status %d", command, completed.returncode)
        click.echo(f"Command exited with status: {completed.returncode}", err=True)
    return completed.returncode

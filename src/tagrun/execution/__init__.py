"""
Command dispatch for parsed tag documents.

This package turns top-level elements into a process argument vector and
runs it.
"""

from tagrun.execution.dispatch import RunOptions, elements_to_args, run_cli_command

__all__ = [
    "RunOptions",
    "elements_to_args",
    "run_cli_command",
]

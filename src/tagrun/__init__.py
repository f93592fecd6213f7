"""
tagrun - run a command spelled out in a small tag language

tagrun parses XML-like tag markup with a parser combinator engine and runs the
command named by the top-level elements.
"""

from importlib.metadata import version

from tagrun.core.element import Element
from tagrun.execution.dispatch import RunOptions, elements_to_args, run_cli_command
from tagrun.parsing.grammar import parse_document

__version__ = version("tagrun")

__all__ = [
    "__version__",
    "Element",
    "RunOptions",
    "elements_to_args",
    "parse_document",
    "run_cli_command",
]

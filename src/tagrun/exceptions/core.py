"""
Exception classes for tagrun.

This module defines the exception types raised when tag-language input cannot
be parsed and when the parsed command cannot be started.
"""


class TagRunError(Exception):
    """Base exception for all tagrun errors."""

    pass


class DocumentParseError(TagRunError):
    """
    Raised when the input is not a complete tag-language document.

    Only the unconsumed suffix is known: a syntax error, a mismatched closing
    tag and unexpected end of input all look the same.
    """

    def __init__(self, remaining: str):
        """
        Initialize the exception.

        Params:
            remaining: Suffix of the input that could not be parsed
        """
        self.remaining = remaining
        super().__init__(f"Failed to parse input at: {remaining!r}")


class CommandSpawnError(TagRunError):
    """Raised when the external command cannot be started."""

    def __init__(self, command: str, reason: str):
        """
        Initialize the exception.

        Params:
            command: Executable that failed to start
            reason: The underlying reason for the failure
        """
        self.command = command
        self.reason = reason
        super().__init__(f"Failed to run command '{command}': {reason}")

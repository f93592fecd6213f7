"""
Core type definitions for tagrun.

This module contains the small type aliases and character classes shared
between the parser, the element tree and the dispatcher.
"""

Attribute = tuple[str, str]

Attributes = tuple[Attribute, ...]

CommandArgs = list[str]

IDENTIFIER_PUNCTUATION = frozenset("-&.")

# str.isspace() also accepts the information separators U+001C..U+001F,
# which are not Unicode White_Space.
_NON_WHITESPACE_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


def is_identifier_char(char: str) -> bool:
    """Element names and attribute keys use letters, digits, '-', '&' and '.'."""
    return char.isalnum() or char in IDENTIFIER_PUNCTUATION


def is_identifier(text: str) -> bool:
    return bool(text) and all(is_identifier_char(char) for char in text)


def is_whitespace(char: str) -> bool:
    return char.isspace() and char not in _NON_WHITESPACE_SEPARATORS

"""
Primitive parsers the tag grammar is assembled from.
"""

from tagrun.core.types import is_identifier_char, is_whitespace
from tagrun.parsing.combinators import (
    Failure,
    ParseResult,
    Parser,
    Success,
    left,
    one_or_more,
    pred,
    right,
    zero_or_more,
)


def literal(expected: str) -> Parser[None]:
    """
    Match `expected` as an exact, case-sensitive prefix of the input.

    Params:
        expected: Text that must appear next in the input

    Returns:
        Parser producing `None` and consuming exactly `expected`
    """

    def run(text: str) -> ParseResult:
        if text.startswith(expected):
            return Success(text[len(expected) :], None)
        return Failure(text)

    return Parser(run)


def _any_char(text: str) -> ParseResult:
    if not text:
        return Failure(text)
    return Success(text[1:], text[0])


any_char: Parser[str] = Parser(_any_char)


def _identifier(text: str) -> ParseResult:
    end = 0
    while end < len(text) and is_identifier_char(text[end]):
        end += 1
    if end == 0:
        return Failure(text)
    return Success(text[end:], text[:end])


# Element names and attribute keys: letters, digits, "-", "&" and "."
identifier: Parser[str] = Parser(_identifier)

whitespace_char: Parser[str] = pred(any_char, is_whitespace)

space0: Parser[list[str]] = zero_or_more(whitespace_char)
space1: Parser[list[str]] = one_or_more(whitespace_char)


def _join(chars: list[str]) -> str:
    return "".join(chars)


# No escape sequences: the first '"' after the opening one always closes.
quoted_string: Parser[str] = right(
    literal('"'),
    left(zero_or_more(any_char.pred(lambda char: char != '"')), literal('"')),
).map(_join)

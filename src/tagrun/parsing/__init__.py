"""
tagrun parsing components.

This package provides the parser combinator engine, the primitive parsers and
the tag-language grammar built from them.
"""

from tagrun.parsing.combinators import (
    Failure,
    ParseResult,
    Parser,
    Success,
    and_then,
    either,
    lazy,
    left,
    mapper,
    one_or_more,
    pair,
    pred,
    right,
    zero_or_more,
)
from tagrun.parsing.grammar import document, element, parse_document

__all__ = [
    "Failure",
    "ParseResult",
    "Parser",
    "Success",
    "and_then",
    "either",
    "lazy",
    "left",
    "mapper",
    "one_or_more",
    "pair",
    "pred",
    "right",
    "zero_or_more",
    "document",
    "element",
    "parse_document",
]

"""
Grammar for the tagrun tag language.

This module assembles the tag-language parsers from primitives and
combinators and provides `parse_document`, the entry point that turns a
command string into a list of top-level elements.

    attribute_pair    := identifier "=" quoted_string
    attributes        := ( space1 attribute_pair )*
    element_start     := "<" identifier attributes
    self_closing      := element_start "/>"
    open_tag          := element_start ">"
    close_tag(name)   := "</" identifier ">"   where identifier == name
    parent_element    := open_tag element* close_tag(open_tag.name)
    element           := space0 ( self_closing | parent_element ) space0
    document          := ( space0 element space0 )+
"""

import logging

from tagrun.core.element import Element
from tagrun.core.types import Attribute
from tagrun.exceptions import DocumentParseError
from tagrun.parsing.combinators import (
    Parser,
    either,
    lazy,
    left,
    one_or_more,
    pair,
    right,
    zero_or_more,
)
from tagrun.parsing.primitives import identifier, literal, quoted_string, space0, space1

logger = logging.getLogger(__name__)


def whitespace_wrap(parser: Parser) -> Parser:
    """Allow any amount of whitespace before and after `parser`."""
    return right(space0, left(parser, space0))


attribute_pair: Parser[Attribute] = pair(identifier, right(literal("="), quoted_string))

# Every attribute needs at least one whitespace character in front of it
attributes: Parser[list[Attribute]] = zero_or_more(right(space1, attribute_pair))

element_start: Parser[tuple[str, list[Attribute]]] = right(
    literal("<"), pair(identifier, attributes)
)


def _build_element(start: tuple[str, list[Attribute]]) -> Element:
    name, element_attributes = start
    return Element(name=name, attributes=tuple(element_attributes))


self_closing_element: Parser[Element] = left(element_start, literal("/>")).map(
    _build_element
)

# Provisional element; children are attached once the closing tag matched
open_tag: Parser[Element] = left(element_start, literal(">")).map(_build_element)


def close_tag(expected_name: str) -> Parser[str]:
    """
    Match `</name>` where name is exactly `expected_name`.

    Params:
        expected_name: Name captured from the corresponding opening tag

    Returns:
        Parser that fails on the whole closing tag when the names differ
    """
    return right(literal("</"), left(identifier, literal(">"))).pred(
        lambda name: name == expected_name
    )


_child_elements: Parser[list[Element]] = zero_or_more(lazy(lambda: element))


def _children_until_close(parent: Element) -> Parser[Element]:
    return left(_child_elements, close_tag(parent.name)).map(parent.with_children)


parent_element: Parser[Element] = open_tag.and_then(_children_until_close)

# Self-closing first: it fails cleanly before "/>" so the parent branch
# restarts from the same "<".
element: Parser[Element] = whitespace_wrap(either(self_closing_element, parent_element))

document: Parser[list[Element]] = one_or_more(whitespace_wrap(element))


def parse_document(text: str) -> list[Element]:
    """
    Parse a complete tag-language document.

    Params:
        text: The whole command string

    Returns:
        Top-level elements in source order (never empty)

    Raises:
        DocumentParseError: If the text does not start with an element or
            contains anything after the last element that is not whitespace.
            The error carries the unconsumed suffix.
    """
    result = document.parse(text)
    if not result.ok:
        logger.debug("Parse failed at %r", result.remaining)
        raise DocumentParseError(result.remaining)
    if result.remaining:
        logger.debug("Unparsed input remains: %r", result.remaining)
        raise DocumentParseError(result.remaining)

    logger.debug("Parsed %d top-level element(s)", len(result.value))
    return result.value

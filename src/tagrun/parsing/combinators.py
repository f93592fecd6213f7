"""
Parser abstraction and combinator algebra.

A parser is a function from a suffix of the input text to a `ParseResult`:
either `Success(remaining, value)` or `Failure(remaining)`. Parsers never
mutate a shared cursor, so an alternative can always retry from the input it
was handed without any save/restore bookkeeping.

Nothing in this module knows about the tag language; the grammar in
`tagrun.parsing.grammar` is assembled entirely from these pieces.
"""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from attrs import field, frozen

T = TypeVar("T")
U = TypeVar("U")


@frozen
class Success(Generic[T]):
    """A successful parse: the unconsumed input and the produced value."""

    remaining: str
    value: T

    @property
    def ok(self) -> bool:
        return True


@frozen
class Failure:
    """
    A failed parse.

    `remaining` is the input exactly as received by the parser that failed.
    There is deliberately no position, offset or message.
    """

    remaining: str

    @property
    def ok(self) -> bool:
        return False


ParseResult = Success[T] | Failure


@frozen
class Parser(Generic[T]):
    """
    A composable parsing unit.

    Wraps a plain function `str -> ParseResult` and offers the fluent forms of
    the most common combinators (`map`, `pred`, `and_then`) so rules can be
    written left to right.
    """

    fn: Callable[[str], ParseResult] = field(repr=False)

    def parse(self, text: str) -> ParseResult:
        """
        Run the parser on `text`.

        Params:
            text: Input suffix to parse

        Returns:
            `Success` with the unconsumed suffix and value, or `Failure`
        """
        return self.fn(text)

    def __call__(self, text: str) -> ParseResult:
        return self.fn(text)

    def map(self, map_fn: Callable[[T], U]) -> "Parser[U]":
        return mapper(self, map_fn)

    def pred(self, pred_fn: Callable[[T], bool]) -> "Parser[T]":
        return pred(self, pred_fn)

    def and_then(self, bind_fn: Callable[[T], "Parser[U]"]) -> "Parser[U]":
        return and_then(self, bind_fn)


def mapper(parser: Parser[T], map_fn: Callable[[T], U]) -> Parser[U]:
    """
    Transform the success value of `parser` with a pure function.

    Remaining input is left untouched and failures pass through unchanged.
    """

    def run(text: str) -> ParseResult:
        result = parser.parse(text)
        if not result.ok:
            return result
        return Success(result.remaining, map_fn(result.value))

    return Parser(run)


def pair(first: Parser[T], second: Parser[U]) -> Parser[tuple[T, U]]:
    """
    Run `first`, then `second` on what `first` left over.

    Succeeds with a `(first_value, second_value)` tuple only if both succeed;
    otherwise the failure of whichever parser failed is propagated as is.
    """

    def run(text: str) -> ParseResult:
        first_result = first.parse(text)
        if not first_result.ok:
            return first_result
        second_result = second.parse(first_result.remaining)
        if not second_result.ok:
            return second_result
        return Success(
            second_result.remaining, (first_result.value, second_result.value)
        )

    return Parser(run)


def left(first: Parser[T], second: Parser[Any]) -> Parser[T]:
    """Sequence two parsers and keep only the value of the first."""
    return mapper(pair(first, second), lambda values: values[0])


def right(first: Parser[Any], second: Parser[U]) -> Parser[U]:
    """Sequence two parsers and keep only the value of the second."""
    return mapper(pair(first, second), lambda values: values[1])


def either(first: Parser[T], second: Parser[T]) -> Parser[T]:
    """
    Try `first`; if it fails, try `second` on the same original input.

    Returns the success of `first` when there is one, otherwise whatever
    `second` produced (success or failure).
    """

    def run(text: str) -> ParseResult:
        result = first.parse(text)
        if result.ok:
            return result
        return second.parse(text)

    return Parser(run)


def and_then(parser: Parser[T], bind_fn: Callable[[T], Parser[U]]) -> Parser[U]:
    """
    Build the next parser from the value of the previous one.

    On success `bind_fn(value)` produces a new parser which is run on the
    remaining input. This is what lets a closing tag depend on the name
    captured from its opening tag.
    """

    def run(text: str) -> ParseResult:
        result = parser.parse(text)
        if not result.ok:
            return result
        return bind_fn(result.value).parse(result.remaining)

    return Parser(run)


def zero_or_more(parser: Parser[T]) -> Parser[list[T]]:
    """
    Apply `parser` as many times as it succeeds.

    Always succeeds, possibly with an empty list. Stops at the first failure
    and leaves the input where the last success ended.
    """

    def run(text: str) -> ParseResult:
        values = []
        while True:
            result = parser.parse(text)
            if not result.ok:
                return Success(text, values)
            values.append(result.value)
            text = result.remaining

    return Parser(run)


def one_or_more(parser: Parser[T]) -> Parser[list[T]]:
    """Like `zero_or_more`, but fail with the first failure if nothing matched."""
    repeat = zero_or_more(parser)

    def run(text: str) -> ParseResult:
        first_result = parser.parse(text)
        if not first_result.ok:
            return first_result
        rest = repeat.parse(first_result.remaining)
        return Success(rest.remaining, [first_result.value, *rest.value])

    return Parser(run)


def pred(parser: Parser[T], pred_fn: Callable[[T], bool]) -> Parser[T]:
    """
    Accept the value of `parser` only if `pred_fn` holds for it.

    A rejected value reports failure on the original input given to the
    filter, never on the consumed-but-rejected remainder.
    """

    def run(text: str) -> ParseResult:
        result = parser.parse(text)
        if result.ok and pred_fn(result.value):
            return result
        return Failure(text)

    return Parser(run)


def lazy(factory: Callable[[], Parser[T]]) -> Parser[T]:
    """
    Defer building a parser until it is first run.

    Needed for recursive rules: `element` contains `parent_element`, which in
    turn repeats `element`. The built parser is cached after the first call.
    """
    cache: list[Parser[T]] = []

    def run(text: str) -> ParseResult:
        if not cache:
            cache.append(factory())
        return cache[0].parse(text)

    return Parser(run)

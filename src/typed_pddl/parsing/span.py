"""Define the immutable input position threaded through every grammar rule."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field, replace
from functools import wraps
from typing import Callable, Protocol, TypeVar

from typed_pddl.errors import NestingTooDeepError, ParseError
from typed_pddl.io.settings import DEFAULT_MAX_NESTING_DEPTH

NodeT = TypeVar("NodeT")
"""Type of the AST node produced by a grammar rule."""

NodeT_co = TypeVar("NodeT_co", covariant=True)


def _line_starts(text: str) -> tuple[int, ...]:
    """Compute the offsets at which each line of the text begins."""
    starts = [0]
    starts.extend(i + 1 for i, char in enumerate(text) if char == "\n")
    return tuple(starts)


@dataclass(frozen=True)
class Span:
    """A position in a PDDL input buffer, along with the current nesting depth.

    Spans are never mutated: consuming input produces a new span further along the same text.
    A span also remembers the furthest failure recovered from on the way to it (e.g., by a list
    that stopped at an element it could not parse), so that a later failure at a shallower
    position can report where matching actually went wrong.
    """

    text: str
    offset: int = 0
    depth: int = 0
    max_depth: int = DEFAULT_MAX_NESTING_DEPTH
    furthest_error: ParseError | None = field(default=None, compare=False, repr=False)
    line_starts: tuple[int, ...] | None = field(default=None, compare=False, repr=False)
    """Offsets at which each line begins, computed once per input text."""

    def __post_init__(self) -> None:
        """Index the lines of the text, unless a span of the same text already did."""
        if self.line_starts is None:
            object.__setattr__(self, "line_starts", _line_starts(self.text))

    @classmethod
    def of(cls, source: Span | str) -> Span:
        """Construct a span at the start of the given text (or return an existing span)."""
        return source if isinstance(source, Span) else cls(source)

    @property
    def remaining(self) -> str:
        """Retrieve the text that has not yet been consumed."""
        return self.text[self.offset :]

    @property
    def at_end(self) -> bool:
        """Check whether the entire input has been consumed."""
        return self.offset >= len(self.text)

    def peek(self, lookahead: int = 0) -> str:
        """Retrieve the character at the given distance from the current position ("" if none)."""
        index = self.offset + lookahead
        return self.text[index] if 0 <= index < len(self.text) else ""

    def advance(self, count: int) -> Span:
        """Consume the given number of characters."""
        return replace(self, offset=self.offset + count)

    def moved_to(self, offset: int) -> Span:
        """Move to an absolute offset in the same text."""
        return replace(self, offset=offset)

    def line_column(self) -> tuple[int, int]:
        """Compute the (1-based) line and (0-based) column of the current position."""
        starts = self.line_starts or (0,)
        line_index = bisect_right(starts, self.offset) - 1
        return line_index + 1, self.offset - starts[line_index]

    def fail(self, expected: str, error_type: type[ParseError] = ParseError) -> ParseError:
        """Construct a parse error describing what was expected at the current position.

        If a failure recovered from earlier reached further into the input, that failure is
        returned instead, so that errors point at the deepest attempted match.

        :param expected: Description of the input that the failing rule expected
        :param error_type: Type of parse error to construct (default: ParseError)
        :return: Parse error located at this span or beyond it (for the caller to raise)
        """
        furthest = self.furthest_error
        if error_type is ParseError and furthest is not None and furthest.offset > self.offset:
            return furthest
        line, column = self.line_column()
        return error_type(expected, self.offset, line, column)

    def recovered(self, error: ParseError) -> Span:
        """Remember a failure that a rule recovered from, if it reached beyond this position.

        :param error: Failure caught by the rule (e.g., by a list that ended at a bad element)
        :return: This span, remembering the failure if it is the furthest one seen so far
        """
        furthest = self.furthest_error
        if error.offset <= self.offset:
            return self
        if furthest is not None and furthest.offset >= error.offset:
            return self
        return replace(self, furthest_error=error)

    def nested(self) -> Span:
        """Enter one more level of nesting, enforcing the configured depth ceiling.

        :raises NestingTooDeepError: If the new depth exceeds the ceiling
        """
        if self.depth >= self.max_depth:
            line, column = self.line_column()
            raise NestingTooDeepError(self.max_depth, self.offset, line, column)
        return replace(self, depth=self.depth + 1)

    def with_depth(self, depth: int) -> Span:
        """Return the same position at the given nesting depth."""
        return self if depth == self.depth else replace(self, depth=depth)


def grammar_rule(rule: Callable[[Span], tuple[Span, NodeT]]) -> Rule[NodeT]:
    """Decorate a grammar rule so that it also accepts a plain string as its input.

    When called with a string (i.e., at the top of a parse), a `RecursionError` raised by the
    host interpreter is reported as a `NestingTooDeepError` instead.
    """

    @wraps(rule)
    def parse(source: Span | str) -> tuple[Span, NodeT]:
        if isinstance(source, Span):
            return rule(source)
        span = Span(source)
        try:
            return rule(span)
        except RecursionError as error:
            line, column = span.line_column()
            raise NestingTooDeepError(span.max_depth, span.offset, line, column) from error

    return parse


def recursive_rule(rule: Callable[[Span], tuple[Span, NodeT]]) -> Rule[NodeT]:
    """Decorate a self-recursive grammar rule so that each call counts one level of nesting.

    The remaining input returned by the rule is restored to the caller's nesting depth.
    """

    @grammar_rule
    @wraps(rule)
    def parse(span: Span) -> tuple[Span, NodeT]:
        rest, node = rule(span.nested())
        return rest.with_depth(span.depth), node

    return parse


class Rule(Protocol[NodeT_co]):
    """A grammar rule: consumes a prefix of its input and returns the remaining input and a node."""

    def __call__(self, source: Span | str, /) -> tuple[Span, NodeT_co]: ...

"""Implement the generic parser combinators from which the PDDL grammar is assembled.

A parser is any callable taking a `Span` and returning the remaining input together with the
parsed node. Failures raise a recoverable `ParseError`; alternatives backtrack by retrying from
the span they were given, which is never modified. Where an optional or repeated parser
recovers from a failure, the span it returns remembers that failure, so errors raised later point
at the deepest attempted match. Committed failures (e.g., an unknown requirement flag) are never
recovered from.
"""

from __future__ import annotations

import re
from enum import StrEnum
from functools import lru_cache
from typing import Callable, TypeVar

from typed_pddl.ast.typed import (
    NUMBER_TYPE,
    OBJECT_TYPE,
    EitherType,
    ExactType,
    Type,
    Typed,
    TypedList,
)
from typed_pddl.errors import ParseError
from typed_pddl.parsing.lexical import NAME_CHARACTERS, parse_primitive_type, skip_whitespace
from typed_pddl.parsing.span import Span, grammar_rule

T = TypeVar("T")
U = TypeVar("U")
EnumT = TypeVar("EnumT", bound=StrEnum)

Parser = Callable[[Span], tuple[Span, T]]
"""A parser consumes a prefix of its input and returns the remaining input and a node."""

_EMPTY_PARENS = re.compile(r"\(\s*\)")


@lru_cache(maxsize=None)
def _keyword_pattern(keyword: str) -> re.Pattern[str]:
    """Compile the pattern matching a keyword, which may consist of several words (`at end`).

    Keywords ending in a name character must not run into a longer name, so that `and` does not
    match the start of `android`.
    """
    regex = r"\s+".join(re.escape(word) for word in keyword.split())
    if keyword[-1] in NAME_CHARACTERS:
        regex += r"(?![a-zA-Z0-9\-_])"
    return re.compile(regex)


def tag(keyword: str) -> Parser[str]:
    """Create a parser that matches the given keyword (e.g., `and`, `:effect`, or `at start`)."""
    pattern = _keyword_pattern(keyword)

    @grammar_rule
    def parse(span: Span) -> tuple[Span, str]:
        match = pattern.match(span.text, span.offset)
        if match is None:
            raise span.fail(f"'{keyword}'")
        return span.moved_to(match.end()), keyword

    return parse


def char(expected: str, span: Span) -> Span:
    """Consume exactly the given character at the current position."""
    if span.peek() != expected:
        raise span.fail(f"'{expected}'")
    return span.advance(1)


def separator(span: Span) -> Span:
    """Consume the mandatory separation between two list elements or operands.

    Separation is whitespace or comments, except that none is needed next to a parenthesis,
    so that `(p)(q)` separates two elements just as `(p) (q)` does. Whitespace consumed just
    before the current position also counts.

    :raises ParseError: If the current position separates nothing
    """
    rest = skip_whitespace(span)
    previous = span.peek(-1)
    if rest.offset > span.offset or previous == ")" or previous.isspace():
        return rest
    if span.peek() in ("(", ")"):
        return rest
    raise span.fail("whitespace")


def ws(parser: Parser[T]) -> Parser[T]:
    """Wrap a parser so that whitespace and comments around it are consumed."""

    @grammar_rule
    def parse(span: Span) -> tuple[Span, T]:
        rest, node = parser(skip_whitespace(span))
        return skip_whitespace(rest), node

    return parse


def spaced(*parsers: Parser) -> Parser[tuple]:
    """Create a parser that applies the given parsers in sequence, separated as list elements."""
    first, *others = parsers

    @grammar_rule
    def parse(span: Span) -> tuple[Span, tuple]:
        span, node = first(span)
        nodes = [node]
        for parser in others:
            span, node = parser(separator(span))
            nodes.append(node)
        return span, tuple(nodes)

    return parse


def parens(parser: Parser[T]) -> Parser[T]:
    """Wrap a parser in parentheses, tolerating whitespace immediately inside them."""

    @grammar_rule
    def parse(span: Span) -> tuple[Span, T]:
        span = skip_whitespace(char("(", span))
        span, node = parser(span)
        return char(")", skip_whitespace(span)), node

    return parse


def prefix_expr(keyword: str, parser: Parser[T]) -> Parser[T]:
    """Create a parser for the form `(<keyword> ...)`, where the parser consumes the `...` part."""
    keyword_tag = tag(keyword)

    @grammar_rule
    def parse(span: Span) -> tuple[Span, T]:
        span, _ = keyword_tag(skip_whitespace(char("(", span)))
        span, node = parser(skip_whitespace(span))
        return char(")", skip_whitespace(span)), node

    return parse


def alt(*parsers: Parser) -> Parser:
    """Create a parser that tries the given parsers in order and commits to the first success.

    When every alternative fails, the failure that reached furthest into the input is raised.
    """

    @grammar_rule
    def parse(span: Span) -> tuple[Span, object]:
        furthest: ParseError | None = None
        for parser in parsers:
            try:
                return parser(span)
            except ParseError as error:
                if error.committed:
                    raise
                if furthest is None or error.offset > furthest.offset:
                    furthest = error
        if furthest is None:
            raise span.fail("an alternative")
        raise furthest

    return parse


def opt(parser: Parser[T]) -> Parser[T | None]:
    """Create a parser that yields None (consuming nothing) where the given parser fails."""

    @grammar_rule
    def parse(span: Span) -> tuple[Span, T | None]:
        try:
            return parser(span)
        except ParseError as error:
            if error.committed:
                raise
            return span.recovered(error), None

    return parse


def map_parser(parser: Parser[T], function: Callable[[T], U]) -> Parser[U]:
    """Create a parser that transforms the node produced by the given parser."""

    @grammar_rule
    def parse(span: Span) -> tuple[Span, U]:
        rest, node = parser(span)
        return rest, function(node)

    return parse


def preceded(keyword: str, parser: Parser[T]) -> Parser[T]:
    """Create a parser for a keyword-introduced section, e.g. `:effect <effect>`."""
    keyword_tag = tag(keyword)

    @grammar_rule
    def parse(span: Span) -> tuple[Span, T]:
        span, _ = keyword_tag(span)
        return parser(separator(span))

    return parse


def _continue_list(parser: Parser[T], span: Span, items: list[T]) -> tuple[Span, tuple[T, ...]]:
    """Parse separated elements after those already parsed until the parser fails."""
    while True:
        try:
            rest, item = parser(separator(span))
        except ParseError as error:
            if error.committed:
                raise
            return span.recovered(error), tuple(items)
        if rest.offset == span.offset:
            return span, tuple(items)
        span = rest
        items.append(item)


def space_separated_list0(parser: Parser[T]) -> Parser[tuple[T, ...]]:
    """Create a parser for zero or more separated occurrences of the given parser."""

    @grammar_rule
    def parse(span: Span) -> tuple[Span, tuple[T, ...]]:
        try:
            rest, first = parser(span)
        except ParseError as error:
            if error.committed:
                raise
            return span.recovered(error), ()
        return _continue_list(parser, rest, [first])

    return parse


def space_separated_list1(parser: Parser[T]) -> Parser[tuple[T, ...]]:
    """Create a parser for one or more separated occurrences of the given parser."""

    @grammar_rule
    def parse(span: Span) -> tuple[Span, tuple[T, ...]]:
        rest, first = parser(span)
        return _continue_list(parser, rest, [first])

    return parse


def empty_or(parser: Parser[T]) -> Parser[T | None]:
    """Create a parser that yields None for an explicitly empty `()`, else runs the given parser."""

    @grammar_rule
    def parse(span: Span) -> tuple[Span, T | None]:
        match = _EMPTY_PARENS.match(span.text, span.offset)
        if match is not None:
            return span.moved_to(match.end()), None
        return parser(span)

    return parse


def keyword_enum(enum_type: type[EnumT]) -> Parser[EnumT]:
    """Create a parser that matches any keyword of a closed enumeration and yields its member.

    Longer keywords are tried first, so that `<=` is never read as `<` followed by `=`.
    """
    members = sorted(enum_type, key=len, reverse=True)
    member_tags = [(member, tag(member.value)) for member in members]
    expected = " or ".join(f"'{member.value}'" for member in enum_type)

    @grammar_rule
    def parse(span: Span) -> tuple[Span, EnumT]:
        for member, member_tag in member_tags:
            try:
                rest, _ = member_tag(span)
            except ParseError:
                continue
            return rest, member
        raise span.fail(expected)

    return parse


@grammar_rule
def parse_type(span: Span) -> tuple[Span, Type]:
    """Parse a type annotation: a primitive type or `(either <primitive-type>+)`."""
    return _type(span)


_type: Parser[Type] = alt(
    map_parser(parse_primitive_type, ExactType),
    map_parser(
        prefix_expr("either", space_separated_list1(parse_primitive_type)),
        EitherType,
    ),
)


def typed_list(parser: Parser[T], default: Type = OBJECT_TYPE) -> Parser[TypedList[T]]:
    """Create a parser for PDDL's typed-list notation `x1 x2 - t1 y1 - t2 z1 z2`.

    Groups with an explicit `- <type>` suffix are parsed first; any trailing items without a type
    are appended afterwards with the default type.

    :param parser: Parser for the individual items of the list
    :param default: Type assigned to items without an explicit type (default: `object`)
    :return: Parser producing a (possibly empty) typed list
    """
    values_parser = space_separated_list1(parser)
    untyped_parser = space_separated_list0(parser)

    def explicit_group(span: Span) -> tuple[Span, list[Typed[T]]]:
        span, values = values_parser(span)
        span = skip_whitespace(char("-", skip_whitespace(span)))
        span, type_ = parse_type(span)
        return span, [Typed(value, type_) for value in values]

    @grammar_rule
    def parse(span: Span) -> tuple[Span, TypedList[T]]:
        items: list[Typed[T]] = []
        while True:
            try:
                rest, group = explicit_group(separator(span) if items else span)
            except ParseError as error:
                span = span.recovered(error)
                break
            span = rest
            items.extend(group)

        try:
            rest, values = untyped_parser(separator(span) if items else span)
        except ParseError as error:
            return span.recovered(error), TypedList(tuple(items))
        if values:
            span = rest
            items.extend(Typed(value, default) for value in values)
        return span, TypedList(tuple(items))

    return parse


def function_typed_list(parser: Parser[T]) -> Parser[TypedList[T]]:
    """Create a parser for a typed list of function declarations, whose default type is `number`."""
    return typed_list(parser, default=NUMBER_TYPE)


def optional_sections(*sections: Parser) -> Parser[tuple]:
    """Create a parser for a fixed-order sequence of sections, each of which may be omitted.

    :param sections: Parsers for the sections, in the order they must appear
    :return: Parser producing one node (or None, if absent) per section
    """

    @grammar_rule
    def parse(span: Span) -> tuple[Span, tuple]:
        nodes = []
        for section in sections:
            try:
                span, node = section(separator(span))
            except ParseError as error:
                if error.committed:
                    raise
                span = span.recovered(error)
                node = None
            nodes.append(node)
        return span, tuple(nodes)

    return parse

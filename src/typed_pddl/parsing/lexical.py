"""Implement the lexical primitives of PDDL: names, variables, numbers, and whitespace.

Reference: Section 2 ("Syntactic Notation") of the PDDL 3.1 BNF (Kovacs, 2011).

Token parsers consume a prefix of the remaining input and never skip leading whitespace; the
whitespace and `;` comments between tokens are consumed by `skip_whitespace` instead.
"""

from __future__ import annotations

import re
from enum import StrEnum

from typed_pddl.ast.number import Number
from typed_pddl.ast.symbols import (
    PDDL_NAME_REGEX,
    FunctionSymbol,
    Name,
    Predicate,
    PreferenceName,
    PrimitiveType,
    Variable,
)
from typed_pddl.parsing.span import Span, grammar_rule


class PDDLTokenType(StrEnum):
    """Enumeration of the token types recognized by the lexical primitives."""

    NAME = PDDL_NAME_REGEX
    """Name of a PDDL domain, type, predicate, action, object, etc."""

    VARIABLE = r"\?" + PDDL_NAME_REGEX
    """Name of a PDDL variable."""

    KEYWORD = r":" + PDDL_NAME_REGEX
    """A PDDL keyword (e.g., a requirement flag) starts with a colon."""

    NUMBER = r"[0-9]+(?:\.[0-9]+)?"
    """A non-negative decimal number; digits before the decimal point are mandatory."""

    WHITESPACE = r"(?:\s+|;[^\n]*)+"
    """Whitespace and comments, which begin with a semicolon and end with the next newline."""

    @property
    def pattern(self) -> re.Pattern[str]:
        """Retrieve the compiled regular expression for the token type."""
        return _TOKEN_PATTERNS[self]

    @property
    def description(self) -> str:
        """Describe the token type for use in error messages."""
        return f"a {self.name.lower()}"


_TOKEN_PATTERNS = {tt: re.compile(tt.value, flags=re.ASCII) for tt in PDDLTokenType}

NAME_CHARACTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-_")
"""Characters that may continue a PDDL name; keywords must not be followed by one of these."""

_INTEGER_PATTERN = re.compile(r"[0-9]+")


def match_token(span: Span, token_type: PDDLTokenType) -> tuple[Span, str]:
    """Consume a token of the given type at the current position.

    :param span: Current position in the input
    :param token_type: Type of token expected next
    :return: Tuple containing the remaining input and the matched text
    :raises ParseError: If no token of the given type begins at the current position
    """
    match = token_type.pattern.match(span.text, span.offset)
    if match is None:
        raise span.fail(token_type.description)
    return span.moved_to(match.end()), match.group()


def skip_whitespace(span: Span) -> Span:
    """Skip any whitespace and comments at the current position (possibly none)."""
    match = PDDLTokenType.WHITESPACE.pattern.match(span.text, span.offset)
    return span if match is None else span.moved_to(match.end())


@grammar_rule
def parse_name(span: Span) -> tuple[Span, Name]:
    """Parse a name, e.g. `briefcase-world`."""
    rest, text = match_token(span, PDDLTokenType.NAME)
    return rest, Name(text)


@grammar_rule
def parse_variable(span: Span) -> tuple[Span, Variable]:
    """Parse a variable, e.g. `?x`; the resulting symbol excludes the question mark."""
    rest, text = match_token(span, PDDLTokenType.VARIABLE)
    return rest, Variable(text[1:])


@grammar_rule
def parse_predicate(span: Span) -> tuple[Span, Predicate]:
    """Parse a predicate symbol."""
    rest, text = match_token(span, PDDLTokenType.NAME)
    return rest, Predicate(text)


@grammar_rule
def parse_function_symbol(span: Span) -> tuple[Span, FunctionSymbol]:
    """Parse a function (fluent) symbol."""
    rest, text = match_token(span, PDDLTokenType.NAME)
    return rest, FunctionSymbol(text)


@grammar_rule
def parse_pref_name(span: Span) -> tuple[Span, PreferenceName]:
    """Parse the name of a preference."""
    rest, text = match_token(span, PDDLTokenType.NAME)
    return rest, PreferenceName(text)


@grammar_rule
def parse_primitive_type(span: Span) -> tuple[Span, PrimitiveType]:
    """Parse the name of a primitive type, e.g. `location` or `object`."""
    rest, text = match_token(span, PDDLTokenType.NAME)
    return rest, PrimitiveType(text)


@grammar_rule
def parse_number(span: Span) -> tuple[Span, Number]:
    """Parse a decimal number, e.g. `3` or `0.25`; leading signs and bare fractions are rejected."""
    rest, text = match_token(span, PDDLTokenType.NUMBER)
    return rest, Number(float(text))


@grammar_rule
def parse_integer(span: Span) -> tuple[Span, int]:
    """Parse a non-negative integer, as used by the deprecated `:length` section."""
    match = _INTEGER_PATTERN.match(span.text, span.offset)
    if match is None:
        raise span.fail("an integer")
    return span.moved_to(match.end()), int(match.group())

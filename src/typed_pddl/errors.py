"""Define the exceptions raised while building or parsing PDDL abstract syntax trees."""

from __future__ import annotations


class PDDLError(Exception):
    """Base class for every error raised by this package."""


class SymbolError(PDDLError, ValueError):
    """An error raised when a symbol is constructed from text that is not a valid PDDL name."""


class NumberError(PDDLError, ValueError):
    """An error raised when a PDDL number is constructed from a non-finite value."""


class ParseError(PDDLError):
    """A recoverable failure to match a grammar rule at a position in the input.

    Alternatives catch this error and try their next branch; when every branch fails, the
    failure that reached furthest into the input is propagated.
    """

    committed = False
    """Committed failures are not recovered from by optional sections or alternatives."""

    def __init__(self, expected: str, offset: int, line: int, column: int) -> None:
        """Initialize the error with a description of what was expected and where.

        :param expected: Description of the input the failed rule expected
        :param offset: Character offset into the input at which matching failed
        :param line: Line number (1-based) of the offset
        :param column: Column (0-based) of the offset within its line
        """
        super().__init__(f"Expected {expected} at line {line}, column {column}.")
        self.expected = expected
        self.offset = offset
        self.line = line
        self.column = column


class UnknownRequirementError(ParseError):
    """A `:requirements` section named a requirement flag outside the supported set."""

    committed = True


class TrailingInputError(ParseError):
    """A complete parse left non-blank input unconsumed."""


class NestingTooDeepError(PDDLError):
    """Nested expressions exceeded the configured recursion ceiling.

    This error is not recoverable; alternatives do not catch it.
    """

    def __init__(self, max_depth: int, offset: int, line: int, column: int) -> None:
        """Initialize the error with the exceeded ceiling and the offending position."""
        super().__init__(
            f"Expressions nested deeper than {max_depth} levels at line {line}, column {column}.",
        )
        self.max_depth = max_depth
        self.offset = offset
        self.line = line
        self.column = column

"""Define the identifier-like leaf nodes of the PDDL abstract syntax tree.

Reference: Section 3 ("Domains") of the PDDL 3.1 BNF (Kovacs, 2011).

Every symbol wraps the text of one `<name>` token. Symbols compare and hash by their text, so a
symbol equals the plain string it was built from (e.g., `Name("truck") == "truck"`), while two
symbols of different kinds never compare equal to each other.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

from typed_pddl.errors import SymbolError

PDDL_NAME_REGEX = r"[a-zA-Z][a-zA-Z0-9\-_]*"
"""Names in PDDL begin with a letter and contain only letters, digits, hyphens, and underscores."""

_NAME_PATTERN = re.compile(PDDL_NAME_REGEX, flags=re.ASCII)


def is_valid_name(text: str) -> bool:
    """Evaluate whether the given string is a well-formed PDDL name."""
    return _NAME_PATTERN.fullmatch(text) is not None


@dataclass(frozen=True, eq=False)
class Symbol:
    """Base class for all PDDL symbols, each wrapping the text of a single name token."""

    value: str

    prefix: ClassVar[str] = ""
    """Text written before the name when the symbol is displayed (e.g., `?` for variables)."""

    def __post_init__(self) -> None:
        """Verify that the wrapped text is a well-formed PDDL name."""
        if not is_valid_name(self.value):
            raise SymbolError(f"Invalid {type(self).__name__.lower()} name: '{self.value}'.")

    def __str__(self) -> str:
        """Return the symbol as it is written in PDDL."""
        return f"{self.prefix}{self.value}"

    def __repr__(self) -> str:
        """Return a compact representation of the symbol."""
        return f"{type(self).__name__}({self.value!r})"

    def __eq__(self, other: object) -> bool:
        """Compare by textual value against a plain string or a symbol of the same kind."""
        if isinstance(other, str):
            return self.value == other
        if type(other) is type(self):
            return self.value == other.value  # type: ignore[attr-defined]
        return NotImplemented

    def __hash__(self) -> int:
        """Hash by textual value, consistent with equality against plain strings."""
        return hash(self.value)

    def __len__(self) -> int:
        """Return the number of characters in the symbol's name."""
        return len(self.value)


class Name(Symbol):
    """The name of a domain, problem, object, constant, type, or action."""


class Variable(Symbol):
    """A variable (e.g., `?x`); the stored value excludes the leading question mark."""

    prefix = "?"


class Predicate(Symbol):
    """The name of a predicate."""


class FunctionSymbol(Symbol):
    """The name of a numeric or object fluent."""


class PreferenceName(Symbol):
    """The name of a preference (`:preferences` requirement)."""


class PrimitiveType(Symbol):
    """The name of a primitive type, such as the built-in `object` or `number` types."""


OBJECT = PrimitiveType("object")
"""The built-in root type of every object and constant."""

NUMBER = PrimitiveType("number")
"""The built-in type of numeric fluents."""

"""Define the finite decimal numbers that appear in PDDL numeric expressions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from functools import total_ordering

from typed_pddl.errors import NumberError


@total_ordering
@dataclass(frozen=True, eq=False)
class Number:
    """A finite floating-point PDDL number.

    Numbers are totally ordered; positive and negative zero compare (and hash) as equal.
    """

    value: float

    def __post_init__(self) -> None:
        """Reject NaN and infinite values."""
        if not math.isfinite(self.value):
            raise NumberError(f"PDDL numbers must be finite, got {self.value}.")
        object.__setattr__(self, "value", float(self.value))

    def __float__(self) -> float:
        """Return the number as a Python float."""
        return self.value

    def __str__(self) -> str:
        """Return the number in PDDL's `digits[.digits]` form (integers have no decimal part)."""
        if self.value.is_integer():
            return str(int(self.value))
        return format(Decimal(repr(self.value)), "f")  # Shortest round-tripping, no exponent

    def __eq__(self, other: object) -> bool:
        """Compare against another Number or a plain int/float."""
        if isinstance(other, Number):
            return self.value == other.value
        if isinstance(other, (int, float)):
            return self.value == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        """Order numbers by their value."""
        if isinstance(other, Number):
            return self.value < other.value
        if isinstance(other, (int, float)):
            return self.value < other
        return NotImplemented

    def __hash__(self) -> int:
        """Hash consistently with float equality (so that 0.0 and -0.0 collide)."""
        return hash(self.value)

"""Define numeric expressions (`:numeric-fluents`) and their durative and metric variants."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from typed_pddl.ast.number import Number
from typed_pddl.ast.operators import AssignOp, BinaryComp, BinaryOp, MultiOp
from typed_pddl.ast.symbols import FunctionSymbol, Name, PreferenceName
from typed_pddl.ast.terms import Term

ExpT = TypeVar("ExpT")
"""Type of the operands of an arithmetic expression."""


@dataclass(frozen=True)
class FHead:
    """A numeric fluent reference, written `f` or `(f t1 ... tn)`."""

    symbol: FunctionSymbol
    terms: tuple[Term, ...] = ()


@dataclass(frozen=True)
class BinaryOpExp(Generic[ExpT]):
    """A binary arithmetic expression, e.g. `(- (fuel ?t) 1)`."""

    op: BinaryOp
    left: ExpT
    right: ExpT


@dataclass(frozen=True)
class MultiOpExp(Generic[ExpT]):
    """An arithmetic expression over two or more operands, e.g. `(+ a b c)`."""

    op: MultiOp
    first: ExpT
    rest: tuple[ExpT, ...]


@dataclass(frozen=True)
class NegativeExp(Generic[ExpT]):
    """The unary negation of an expression, written `(- e)`."""

    value: ExpT


FExp = Union[Number, BinaryOpExp["FExp"], MultiOpExp["FExp"], NegativeExp["FExp"], FHead]
"""A numeric expression over numbers and fluents."""


@dataclass(frozen=True)
class FComp:
    """A numeric comparison used as a goal, e.g. `(>= (fuel ?t) 5)`."""

    comp: BinaryComp
    left: FExp
    right: FExp


@dataclass(frozen=True)
class DurationVariable:
    """The special `?duration` variable of a durative action (`:duration-inequalities`)."""

    def __str__(self) -> str:
        """Return the variable as written in PDDL."""
        return "?duration"


DURATION = DurationVariable()
"""The unique `?duration` expression."""

FExpDa = Union[
    DurationVariable,
    BinaryOpExp["FExpDa"],
    MultiOpExp["FExpDa"],
    NegativeExp["FExpDa"],
    FExp,
]
"""A numeric expression inside a durative action, which may mention `?duration`."""


@dataclass(frozen=True)
class FExpT:
    """A continuous-effect rate: `#t` alone, or scaled as `(* #t e)` / `(* e #t)`."""

    scale: FExp | None = None
    """Expression multiplied by `#t` (None when the rate is `#t` alone)."""


@dataclass(frozen=True)
class FAssignDa:
    """A numeric assignment in a durative action, e.g. `(increase (fuel ?t) ?duration)`."""

    op: AssignOp
    head: FHead
    value: FExpDa


@dataclass(frozen=True)
class MetricFunction:
    """A fluent referenced by a plan metric, applied to names only."""

    symbol: FunctionSymbol
    names: tuple[Name, ...] = ()


@dataclass(frozen=True)
class TotalTime:
    """The `total-time` of a plan, usable in a plan metric."""

    def __str__(self) -> str:
        """Return the keyword as written in PDDL."""
        return "total-time"


TOTAL_TIME = TotalTime()
"""The unique `total-time` expression."""


@dataclass(frozen=True)
class IsViolated:
    """The number of times a named preference is violated, `(is-violated p)` (`:preferences`)."""

    preference: PreferenceName


MetricFExp = Union[
    Number,
    BinaryOpExp["MetricFExp"],
    MultiOpExp["MetricFExp"],
    NegativeExp["MetricFExp"],
    TotalTime,
    IsViolated,
    MetricFunction,
]
"""A numeric expression used in a problem's `:metric` section."""

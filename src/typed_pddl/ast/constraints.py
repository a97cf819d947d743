"""Define duration constraints of durative actions and trajectory constraints of domains/problems.

Reference: `<duration-constraint>`, `<con-GD>`, `<con2-GD>`, and `<pref-con-GD>` in the PDDL 3.1
BNF (Kovacs, 2011).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

from typed_pddl.ast.expressions import FExp
from typed_pddl.ast.goals import GoalDefinition
from typed_pddl.ast.number import Number
from typed_pddl.ast.operators import DOp, TimeSpecifier
from typed_pddl.ast.symbols import PreferenceName, Variable
from typed_pddl.ast.typed import TypedList

DurationValue = FExp
"""The value bounding a duration: a number or any numeric expression (`<d-value>`)."""


@dataclass(frozen=True)
class DurationOp:
    """A comparison of `?duration` against a value, e.g. `(= ?duration 5)`."""

    op: DOp
    value: DurationValue


@dataclass(frozen=True)
class TimedDurationConstraint:
    """A duration constraint that applies at the start or end of the action."""

    time: TimeSpecifier
    constraint: SimpleDurationConstraint


SimpleDurationConstraint = Union[DurationOp, TimedDurationConstraint]
"""A single duration constraint (`<simple-duration-constraint>`)."""


@dataclass(frozen=True)
class DurationConstraint:
    """One duration constraint or a conjunction of them (`:duration-inequalities`)."""

    constraints: tuple[SimpleDurationConstraint, ...]

    def __len__(self) -> int:
        """Return the number of conjoined constraints."""
        return len(self.constraints)

    def __iter__(self) -> Iterator[SimpleDurationConstraint]:
        """Iterate over the conjoined constraints in declared order."""
        return iter(self.constraints)


@dataclass(frozen=True)
class ConstraintAnd:
    """A conjunction of trajectory constraints; an empty one means "no constraints"."""

    constraints: tuple[ConGD, ...] = ()

    def is_empty(self) -> bool:
        """Check whether the conjunction constrains nothing."""
        return all(isinstance(c, ConstraintAnd) and c.is_empty() for c in self.constraints)


@dataclass(frozen=True)
class ConstraintForall:
    """A trajectory constraint for every binding of some variables."""

    variables: TypedList[Variable]
    constraint: ConGD


@dataclass(frozen=True)
class AtEnd:
    """A goal that must hold in the final state of the plan, `(at end <GD>)`."""

    goal: GoalDefinition


@dataclass(frozen=True)
class Always:
    """A condition that must hold in every state of the plan."""

    condition: Con2GD


@dataclass(frozen=True)
class Sometime:
    """A condition that must hold in at least one state of the plan."""

    condition: Con2GD


@dataclass(frozen=True)
class Within:
    """A condition that must become true within the given time."""

    deadline: Number
    condition: Con2GD


@dataclass(frozen=True)
class AtMostOnce:
    """A condition that may become true at most once during the plan."""

    condition: Con2GD


@dataclass(frozen=True)
class SometimeAfter:
    """Whenever `first` holds, `then` must hold in the same or some later state."""

    first: Con2GD
    then: Con2GD


@dataclass(frozen=True)
class SometimeBefore:
    """Whenever `later` holds, `earlier` must have held in some strictly earlier state."""

    later: Con2GD
    earlier: Con2GD


@dataclass(frozen=True)
class AlwaysWithin:
    """Whenever `first` holds, `second` must follow within the given time."""

    deadline: Number
    first: Con2GD
    second: Con2GD


@dataclass(frozen=True)
class HoldDuring:
    """A condition that must hold throughout the interval `[begin, end)`."""

    begin: Number
    end: Number
    condition: Con2GD


@dataclass(frozen=True)
class HoldAfter:
    """A condition that must hold from the given time onwards."""

    time: Number
    condition: Con2GD


ConGD = Union[
    ConstraintAnd,
    ConstraintForall,
    AtEnd,
    Always,
    Sometime,
    Within,
    AtMostOnce,
    SometimeAfter,
    SometimeBefore,
    AlwaysWithin,
    HoldDuring,
    HoldAfter,
]
"""A trajectory constraint (`<con-GD>`, `:constraints`)."""

Con2GD = Union[GoalDefinition, ConGD]
"""The operand of a modal operator: a plain goal or a nested trajectory constraint."""


@dataclass(frozen=True)
class PrefConstraintAnd:
    """A conjunction of (possibly preferred) trajectory constraints."""

    constraints: tuple[PrefConGD, ...] = ()

    def is_empty(self) -> bool:
        """Check whether the conjunction constrains nothing."""
        return not self.constraints


@dataclass(frozen=True)
class PrefConstraintForall:
    """A (possibly preferred) trajectory constraint for every binding of some variables."""

    variables: TypedList[Variable]
    constraint: PrefConGD


@dataclass(frozen=True)
class ConstraintPreference:
    """A trajectory constraint that a plan should, but need not, satisfy (`:preferences`)."""

    name: PreferenceName | None
    constraint: ConGD


PrefConGD = Union[PrefConstraintAnd, PrefConstraintForall, ConstraintPreference, ConGD]
"""A problem's trajectory constraint, possibly wrapped in preferences (`<pref-con-GD>`)."""

"""Define the root node of a parsed PDDL problem and its problem-only sections."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from typed_pddl.ast.constraints import PrefConGD, PrefConstraintAnd
from typed_pddl.ast.expressions import MetricFExp
from typed_pddl.ast.formulas import Literal
from typed_pddl.ast.goals import PreconditionGoalDefinitions
from typed_pddl.ast.number import Number
from typed_pddl.ast.operators import Optimization
from typed_pddl.ast.requirements import Requirements
from typed_pddl.ast.symbols import Name
from typed_pddl.ast.terms import BasicFunctionTerm
from typed_pddl.ast.typed import TypedList


@dataclass(frozen=True)
class TimedLiteral:
    """A literal that becomes true at a given time, `(at 10 (p a))` (`:timed-initial-literals`)."""

    time: Number
    literal: Literal[Name]


@dataclass(frozen=True)
class NumericFluentValue:
    """The initial value of a numeric fluent, `(= (fuel t1) 5)`."""

    term: BasicFunctionTerm
    value: Number


@dataclass(frozen=True)
class ObjectFluentValue:
    """The initial value of an object fluent, `(= (loc t1) depot)`."""

    term: BasicFunctionTerm
    value: Name


InitElement = Union[Literal[Name], TimedLiteral, NumericFluentValue, ObjectFluentValue]
"""An element of a problem's initial state (`<init-el>`)."""


@dataclass(frozen=True)
class MetricSpec:
    """The plan metric to minimize or maximize, `(:metric minimize (total-cost))`."""

    optimization: Optimization
    expression: MetricFExp


@dataclass(frozen=True)
class LengthSpec:
    """Deprecated bounds on plan length, `(:length (:serial 10) (:parallel 4))`."""

    serial: int | None = None
    parallel: int | None = None


@dataclass(frozen=True)
class Problem:
    """A PDDL problem: objects, an initial state, and a goal for some domain."""

    name: Name
    domain: Name
    """Name of the domain the problem is posed in."""

    requirements: Requirements = field(default_factory=Requirements)
    objects: TypedList[Name] = field(default_factory=TypedList)
    init: tuple[InitElement, ...] = ()
    goal: PreconditionGoalDefinitions = field(default_factory=PreconditionGoalDefinitions)
    constraints: PrefConGD = field(default_factory=PrefConstraintAnd)
    metric: MetricSpec | None = None
    length: LengthSpec | None = None

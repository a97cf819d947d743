"""Define action effects and the timed effects of durative actions.

Reference: `<effect>`, `<c-effect>`, `<p-effect>`, `<cond-effect>`, `<timed-effect>`, and
`<da-effect>` in the PDDL 3.1 BNF (Kovacs, 2011).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union

from typed_pddl.ast.expressions import FAssignDa, FExp, FExpT, FHead
from typed_pddl.ast.formulas import AtomicFormula
from typed_pddl.ast.goals import DurativeActionGoalDefinition, GoalDefinition
from typed_pddl.ast.operators import AssignOp, AssignOpT, TimeSpecifier
from typed_pddl.ast.symbols import Variable
from typed_pddl.ast.terms import FunctionTerm, Term
from typed_pddl.ast.typed import TypedList


@dataclass(frozen=True)
class AtomicEffect:
    """An effect that makes an atomic formula true."""

    formula: AtomicFormula[Term]


@dataclass(frozen=True)
class NotAtomicEffect:
    """An effect that makes an atomic formula false, written `(not <atomic formula>)`."""

    formula: AtomicFormula[Term]


@dataclass(frozen=True)
class AssignNumericFluent:
    """An effect that updates a numeric fluent (`:numeric-fluents`)."""

    op: AssignOp
    head: FHead
    value: FExp


@dataclass(frozen=True)
class AssignObjectFluent:
    """An effect that assigns an object fluent (`:object-fluents`)."""

    function: FunctionTerm
    value: Term | None
    """New value of the fluent (None when assigned `undefined`)."""


PEffect = Union[AtomicEffect, NotAtomicEffect, AssignNumericFluent, AssignObjectFluent]
"""A primitive effect (`<p-effect>`)."""


@dataclass(frozen=True)
class ConditionalEffect:
    """The consequent of a `when` effect: one primitive effect or an `(and ...)` of them."""

    effects: tuple[PEffect, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        """Return the number of primitive effects."""
        return len(self.effects)

    def __iter__(self) -> Iterator[PEffect]:
        """Iterate over the primitive effects in declared order."""
        return iter(self.effects)

    def __getitem__(self, index: int) -> PEffect:
        """Retrieve a primitive effect by position."""
        return self.effects[index]


@dataclass(frozen=True)
class ForallEffect:
    """An effect applied for every binding of some variables (`:conditional-effects`)."""

    variables: TypedList[Variable]
    effects: Effects


@dataclass(frozen=True)
class WhenEffect:
    """An effect applied only when a condition holds (`:conditional-effects`)."""

    condition: GoalDefinition
    effect: ConditionalEffect


CEffect = Union[PEffect, ForallEffect, WhenEffect]
"""A (possibly quantified or conditional) effect (`<c-effect>`)."""


@dataclass(frozen=True)
class Effects:
    """One or more effects; models the implicit conjunction of an action's `:effect` section."""

    effects: tuple[CEffect, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        """Return the number of effects."""
        return len(self.effects)

    def __iter__(self) -> Iterator[CEffect]:
        """Iterate over the effects in declared order."""
        return iter(self.effects)

    def __getitem__(self, index: int) -> CEffect:
        """Retrieve an effect by position."""
        return self.effects[index]

    def is_empty(self) -> bool:
        """Check whether there are no effects at all."""
        return not self.effects

    def single(self) -> CEffect | None:
        """Retrieve the only effect, if there is exactly one (else None)."""
        return self.effects[0] if len(self.effects) == 1 else None


@dataclass(frozen=True)
class TimedConditionalEffect:
    """Primitive effects applied at the start or end of a durative action."""

    time: TimeSpecifier
    effect: ConditionalEffect


@dataclass(frozen=True)
class TimedFluentEffect:
    """A numeric fluent assignment applied at the start or end of a durative action."""

    time: TimeSpecifier
    assignment: FAssignDa


@dataclass(frozen=True)
class ContinuousEffect:
    """A fluent changing continuously over a durative action (`:continuous-effects`)."""

    op: AssignOpT
    head: FHead
    rate: FExpT


TimedEffect = Union[TimedConditionalEffect, TimedFluentEffect, ContinuousEffect]
"""An effect of a durative action (`<timed-effect>`)."""


@dataclass(frozen=True)
class DurativeEffectConjunction:
    """A conjunction of durative-action effects."""

    effects: tuple[DurativeActionEffect, ...] = ()


@dataclass(frozen=True)
class DurativeForallEffect:
    """A durative-action effect applied for every binding of some variables."""

    variables: TypedList[Variable]
    effect: DurativeActionEffect


@dataclass(frozen=True)
class DurativeWhenEffect:
    """A timed effect applied only when a durative-action condition holds."""

    condition: DurativeActionGoalDefinition
    effect: TimedEffect


DurativeActionEffect = Union[
    TimedEffect,
    DurativeEffectConjunction,
    DurativeForallEffect,
    DurativeWhenEffect,
]
"""A durative action's `:effect` (`<da-effect>`)."""

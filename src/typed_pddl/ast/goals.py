"""Define goal descriptions: the recursive boolean and quantified precondition language.

Reference: `<GD>`, `<pre-GD>`, `<pref-GD>`, and `<da-GD>` in the PDDL 3.1 BNF (Kovacs, 2011).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union

from typed_pddl.ast.expressions import FComp
from typed_pddl.ast.formulas import AtomicFormula, Literal
from typed_pddl.ast.operators import Interval, TimeSpecifier
from typed_pddl.ast.symbols import PreferenceName, Variable
from typed_pddl.ast.terms import Term
from typed_pddl.ast.typed import TypedList


@dataclass(frozen=True)
class Conjunction:
    """A conjunction (i.e., AND) of goal descriptions."""

    goals: tuple[GoalDefinition, ...] = ()


@dataclass(frozen=True)
class Disjunction:
    """A disjunction (i.e., OR) of goal descriptions (`:disjunctive-preconditions`)."""

    goals: tuple[GoalDefinition, ...] = ()


@dataclass(frozen=True)
class Negation:
    """The negation of a goal description."""

    goal: GoalDefinition


@dataclass(frozen=True)
class Implication:
    """An implication between goal descriptions (`:disjunctive-preconditions`)."""

    premise: GoalDefinition
    conclusion: GoalDefinition


@dataclass(frozen=True)
class Existential:
    """An existentially quantified goal description (`:existential-preconditions`)."""

    variables: TypedList[Variable]
    goal: GoalDefinition


@dataclass(frozen=True)
class Universal:
    """A universally quantified goal description (`:universal-preconditions`)."""

    variables: TypedList[Variable]
    goal: GoalDefinition


And = Conjunction
Or = Disjunction
Not = Negation
Imply = Implication
Exists = Existential
ForAll = Universal

GoalDefinition = Union[
    AtomicFormula[Term],
    Literal[Term],
    Conjunction,
    Disjunction,
    Negation,
    Implication,
    Existential,
    Universal,
    FComp,
]
"""A goal description (`<GD>`)."""


@dataclass(frozen=True)
class Preference:
    """A goal that a plan should, but need not, satisfy (`:preferences`)."""

    name: PreferenceName | None
    goal: GoalDefinition


PreferenceGD = Union[Preference, GoalDefinition]
"""A goal description that may be wrapped in a preference (`<pref-GD>`)."""


@dataclass(frozen=True)
class PreconditionForall:
    """A universally quantified group of preconditions (`:universal-preconditions`)."""

    variables: TypedList[Variable]
    goals: PreconditionGoalDefinitions


PreconditionGoalDefinition = Union[PreferenceGD, PreconditionForall]
"""A single precondition: a (preference-)goal or a quantified group of preconditions."""


@dataclass(frozen=True)
class PreconditionGoalDefinitions:
    """One or more preconditions; an `(and ...)` of preconditions is flattened into this list."""

    goals: tuple[PreconditionGoalDefinition, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        """Return the number of preconditions."""
        return len(self.goals)

    def __iter__(self) -> Iterator[PreconditionGoalDefinition]:
        """Iterate over the preconditions in declared order."""
        return iter(self.goals)

    def __getitem__(self, index: int) -> PreconditionGoalDefinition:
        """Retrieve a precondition by position."""
        return self.goals[index]

    def is_empty(self) -> bool:
        """Check whether there are no preconditions at all."""
        return not self.goals


@dataclass(frozen=True)
class AtTimedGD:
    """A goal that must hold at the start or end of a durative action."""

    time: TimeSpecifier
    goal: GoalDefinition


@dataclass(frozen=True)
class OverTimedGD:
    """A goal that must hold over an interval of a durative action (i.e., `over all`)."""

    interval: Interval
    goal: GoalDefinition


TimedGD = Union[AtTimedGD, OverTimedGD]
"""A time-qualified goal description (`<timed-GD>`)."""


@dataclass(frozen=True)
class TimedPreference:
    """A time-qualified goal wrapped in a preference (`:preferences`)."""

    name: PreferenceName | None
    goal: TimedGD


PrefTimedGD = Union[TimedGD, TimedPreference]
"""A time-qualified goal that may be wrapped in a preference (`<pref-timed-GD>`)."""


@dataclass(frozen=True)
class DurativeConjunction:
    """A conjunction of durative-action conditions."""

    goals: tuple[DurativeActionGoalDefinition, ...] = ()


@dataclass(frozen=True)
class DurativeForall:
    """A universally quantified durative-action condition (`:universal-preconditions`)."""

    variables: TypedList[Variable]
    goal: DurativeActionGoalDefinition


DurativeActionGoalDefinition = Union[PrefTimedGD, DurativeConjunction, DurativeForall]
"""A durative action's `:condition` (`<da-GD>`)."""

"""Define the structure definitions of a domain: actions, durative actions, derived predicates."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from typed_pddl.ast.constraints import DurationConstraint
from typed_pddl.ast.effects import DurativeActionEffect, Effects
from typed_pddl.ast.formulas import AtomicFormulaSkeleton
from typed_pddl.ast.goals import (
    DurativeActionGoalDefinition,
    GoalDefinition,
    PreconditionGoalDefinitions,
)
from typed_pddl.ast.symbols import Name, Variable
from typed_pddl.ast.typed import TypedList


@dataclass(frozen=True)
class ActionDefinition:
    """An action schema, written `(:action <name> :parameters (...) :precondition ... :effect ...)`.

    An omitted section and an explicitly empty section `()` are both represented as None.
    """

    symbol: Name
    parameters: TypedList[Variable] = field(default_factory=TypedList)
    precondition: PreconditionGoalDefinitions | None = None
    effect: Effects | None = None


@dataclass(frozen=True)
class DurativeActionDefinition:
    """A durative action schema (`:durative-actions`)."""

    symbol: Name
    parameters: TypedList[Variable] = field(default_factory=TypedList)
    duration: DurationConstraint | None = None
    condition: DurativeActionGoalDefinition | None = None
    effect: DurativeActionEffect | None = None


@dataclass(frozen=True)
class DerivedPredicate:
    """A predicate defined by a formula, `(:derived <skeleton> <GD>)` (`:derived-predicates`)."""

    predicate: AtomicFormulaSkeleton
    goal: GoalDefinition


StructureDef = Union[ActionDefinition, DurativeActionDefinition, DerivedPredicate]
"""A structure definition in a domain (`<structure-def>`)."""

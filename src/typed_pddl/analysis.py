"""Determine which requirement flags the constructs of a parsed PDDL definition depend on.

The parser accepts every construct regardless of the declared requirements. These helpers let
callers check a parsed domain or problem against its `:requirements` section afterwards.
"""

from __future__ import annotations

import dataclasses
from typing import Iterator

from typed_pddl.ast.constraints import (
    Always,
    AlwaysWithin,
    AtEnd,
    AtMostOnce,
    ConstraintAnd,
    ConstraintForall,
    ConstraintPreference,
    DurationOp,
    HoldAfter,
    HoldDuring,
    PrefConstraintAnd,
    PrefConstraintForall,
    Sometime,
    SometimeAfter,
    SometimeBefore,
    Within,
)
from typed_pddl.ast.domain import Domain
from typed_pddl.ast.effects import (
    AssignNumericFluent,
    AssignObjectFluent,
    ContinuousEffect,
    DurativeForallEffect,
    DurativeWhenEffect,
    ForallEffect,
    WhenEffect,
)
from typed_pddl.ast.expressions import FComp, FHead, IsViolated
from typed_pddl.ast.formulas import AtomicFunctionSkeleton, Equality, Literal
from typed_pddl.ast.goals import (
    Disjunction,
    DurativeForall,
    Existential,
    Implication,
    Negation,
    PreconditionForall,
    Preference,
    TimedPreference,
    Universal,
)
from typed_pddl.ast.operators import AssignOp, DOp
from typed_pddl.ast.problem import ObjectFluentValue, Problem, TimedLiteral
from typed_pddl.ast.requirements import Requirement
from typed_pddl.ast.structure import DerivedPredicate, DurativeActionDefinition
from typed_pddl.ast.terms import FunctionTerm
from typed_pddl.ast.typed import NUMBER_TYPE, OBJECT_TYPE, Typed

TOTAL_COST = "total-cost"
"""The only fluent that domains declaring just `:action-costs` may use."""

_REQUIRED_BY_NODE_TYPE: dict[type, Requirement] = {
    Disjunction: Requirement.DISJUNCTIVE_PRECONDITIONS,
    Implication: Requirement.DISJUNCTIVE_PRECONDITIONS,
    Equality: Requirement.EQUALITY,
    Existential: Requirement.EXISTENTIAL_PRECONDITIONS,
    Universal: Requirement.UNIVERSAL_PRECONDITIONS,
    PreconditionForall: Requirement.UNIVERSAL_PRECONDITIONS,
    DurativeForall: Requirement.UNIVERSAL_PRECONDITIONS,
    ForallEffect: Requirement.CONDITIONAL_EFFECTS,
    WhenEffect: Requirement.CONDITIONAL_EFFECTS,
    DurativeForallEffect: Requirement.CONDITIONAL_EFFECTS,
    DurativeWhenEffect: Requirement.CONDITIONAL_EFFECTS,
    FComp: Requirement.NUMERIC_FLUENTS,
    FunctionTerm: Requirement.OBJECT_FLUENTS,
    AssignObjectFluent: Requirement.OBJECT_FLUENTS,
    ObjectFluentValue: Requirement.OBJECT_FLUENTS,
    DurativeActionDefinition: Requirement.DURATIVE_ACTIONS,
    ContinuousEffect: Requirement.CONTINUOUS_EFFECTS,
    DerivedPredicate: Requirement.DERIVED_PREDICATES,
    TimedLiteral: Requirement.TIMED_INITIAL_LITERALS,
    Preference: Requirement.PREFERENCES,
    TimedPreference: Requirement.PREFERENCES,
    ConstraintPreference: Requirement.PREFERENCES,
    IsViolated: Requirement.PREFERENCES,
    ConstraintForall: Requirement.CONSTRAINTS,
    PrefConstraintForall: Requirement.CONSTRAINTS,
    AtEnd: Requirement.CONSTRAINTS,
    Always: Requirement.CONSTRAINTS,
    Sometime: Requirement.CONSTRAINTS,
    Within: Requirement.CONSTRAINTS,
    AtMostOnce: Requirement.CONSTRAINTS,
    SometimeAfter: Requirement.CONSTRAINTS,
    SometimeBefore: Requirement.CONSTRAINTS,
    AlwaysWithin: Requirement.CONSTRAINTS,
    HoldDuring: Requirement.CONSTRAINTS,
    HoldAfter: Requirement.CONSTRAINTS,
}


def iter_nodes(node: object) -> Iterator[object]:
    """Iterate over the given AST node and all of its descendants in depth-first order."""
    yield node
    if isinstance(node, tuple):
        for child in node:
            yield from iter_nodes(child)
    elif dataclasses.is_dataclass(node) and not isinstance(node, type):
        for f in dataclasses.fields(node):
            yield from iter_nodes(getattr(node, f.name))


def _increases_total_cost(effect: AssignNumericFluent) -> bool:
    """Check whether an effect only increases `total-cost`, as permitted by `:action-costs`."""
    return effect.op is AssignOp.INCREASE and effect.head.symbol == TOTAL_COST


def _required_by(node: object) -> Requirement | None:
    """Identify the requirement (if any) needed by a single node, ignoring its descendants."""
    required = _REQUIRED_BY_NODE_TYPE.get(type(node))
    if required is not None:
        return required

    match node:
        case Literal(negated=True) | Negation():
            return Requirement.NEGATIVE_PRECONDITIONS
        case FHead(symbol=symbol) | AtomicFunctionSkeleton(symbol=symbol):
            return Requirement.ACTION_COSTS if symbol == TOTAL_COST else Requirement.NUMERIC_FLUENTS
        case AssignNumericFluent() if not _increases_total_cost(node):
            return Requirement.NUMERIC_FLUENTS
        case DurationOp(op=op) if op is not DOp.EQUAL:
            return Requirement.DURATION_INEQUALITIES
        case ConstraintAnd(constraints=constraints) if constraints:
            return Requirement.CONSTRAINTS
        case PrefConstraintAnd(constraints=constraints) if constraints:
            return Requirement.CONSTRAINTS
        case Typed(type_=type_) if type_ not in (OBJECT_TYPE, NUMBER_TYPE):
            return Requirement.TYPING
    return None


def used_requirements(node: object) -> frozenset[Requirement]:
    """Determine the requirements needed by the constructs in the given AST (sub)tree.

    :param node: Any node of a PDDL abstract syntax tree (e.g., a whole domain)
    :return: Set of requirement flags (never including shorthands) that the tree depends on
    """
    used = {_required_by(n) for n in iter_nodes(node)}
    if isinstance(node, Domain) and len(node.types) > 0:
        used.add(Requirement.TYPING)
    used.discard(None)
    return frozenset(used)  # type: ignore[arg-type]


def undeclared_requirements(definition: Domain | Problem) -> list[Requirement]:
    """Find the requirements used by a domain or problem that its `:requirements` do not declare.

    :param definition: Parsed PDDL domain or problem
    :return: List of undeclared requirements, in the enumeration's order
    """
    declared = definition.requirements.effective()
    used = used_requirements(definition)
    return [r for r in Requirement if r in used and r not in declared]

"""Render PDDL abstract syntax trees back into canonical PDDL text.

Rendering a parsed node and parsing the result again yields an equal node. Domains and problems
are rendered with one section per line; all nested expressions are rendered on a single line.
"""

from __future__ import annotations

from enum import StrEnum
from functools import singledispatch
from typing import Iterable

from typed_pddl.ast.constraints import (
    Always,
    AlwaysWithin,
    AtEnd,
    AtMostOnce,
    ConstraintAnd,
    ConstraintForall,
    ConstraintPreference,
    DurationConstraint,
    DurationOp,
    HoldAfter,
    HoldDuring,
    PrefConstraintAnd,
    PrefConstraintForall,
    Sometime,
    SometimeAfter,
    SometimeBefore,
    TimedDurationConstraint,
    Within,
)
from typed_pddl.ast.domain import Domain
from typed_pddl.ast.effects import (
    AssignNumericFluent,
    AssignObjectFluent,
    AtomicEffect,
    ConditionalEffect,
    ContinuousEffect,
    DurativeEffectConjunction,
    DurativeForallEffect,
    DurativeWhenEffect,
    Effects,
    ForallEffect,
    NotAtomicEffect,
    TimedConditionalEffect,
    TimedFluentEffect,
    WhenEffect,
)
from typed_pddl.ast.expressions import (
    BinaryOpExp,
    DurationVariable,
    FAssignDa,
    FComp,
    FExpT,
    FHead,
    IsViolated,
    MetricFunction,
    MultiOpExp,
    NegativeExp,
    TotalTime,
)
from typed_pddl.ast.formulas import (
    AtomicFormulaSkeleton,
    AtomicFunctionSkeleton,
    Equality,
    Literal,
    PredicateFormula,
)
from typed_pddl.ast.goals import (
    AtTimedGD,
    Conjunction,
    Disjunction,
    DurativeConjunction,
    DurativeForall,
    Existential,
    Implication,
    Negation,
    OverTimedGD,
    PreconditionForall,
    PreconditionGoalDefinitions,
    Preference,
    TimedPreference,
    Universal,
)
from typed_pddl.ast.number import Number
from typed_pddl.ast.problem import (
    LengthSpec,
    MetricSpec,
    NumericFluentValue,
    ObjectFluentValue,
    Problem,
    TimedLiteral,
)
from typed_pddl.ast.requirements import Requirements
from typed_pddl.ast.structure import ActionDefinition, DerivedPredicate, DurativeActionDefinition
from typed_pddl.ast.symbols import Symbol
from typed_pddl.ast.terms import BasicFunctionTerm, FunctionTerm
from typed_pddl.ast.typed import NUMBER_TYPE, OBJECT_TYPE, EitherType, ExactType, Type, TypedList

INDENT = "  "


def _form(head: str, *parts: object) -> str:
    """Render a parenthesized form, e.g. `(and (p) (q))`."""
    return "(" + " ".join([head, *(to_pddl(part) for part in parts)]) + ")"


def _joined(nodes: Iterable[object]) -> str:
    """Render nodes separated by single spaces."""
    return " ".join(to_pddl(node) for node in nodes)


@singledispatch
def to_pddl(node: object) -> str:
    """Render the given AST node as PDDL text.

    :param node: Node of the PDDL abstract syntax tree (or a plain string, rendered as-is)
    :return: PDDL text that parses back into an equal node
    :raises TypeError: If the object is not a PDDL AST node
    """
    raise TypeError(f"Cannot render object of type {type(node).__name__} as PDDL.")


@to_pddl.register
def _(node: str) -> str:
    return str(node)  # Symbols are str-compatible but are dispatched separately


@to_pddl.register
def _(node: Symbol) -> str:
    return str(node)


@to_pddl.register
def _(node: StrEnum) -> str:
    return node.value


@to_pddl.register
def _(node: Number) -> str:
    if node.value < 0:
        return f"(- {Number(-node.value)})"
    return str(node)


@to_pddl.register(ExactType)
@to_pddl.register(EitherType)
def _(node: Type) -> str:
    return str(node)


def render_typed_list(typed_list: TypedList, default: Type = OBJECT_TYPE) -> str:
    """Render a typed list in PDDL's compact notation, e.g. `?x ?y - block ?h`.

    A trailing group with the default type is written without its type.
    """
    groups = typed_list.groups()
    rendered = []
    for i, (values, type_) in enumerate(groups):
        rendered.append(_joined(values))
        if i < len(groups) - 1 or type_ != default:
            rendered.append(f"- {to_pddl(type_)}")
    return " ".join(rendered)


@to_pddl.register
def _(node: TypedList) -> str:
    return render_typed_list(node)


# Terms and formulas


@to_pddl.register
def _(node: FunctionTerm) -> str:
    return _form(node.symbol.value, *node.terms)


@to_pddl.register
def _(node: BasicFunctionTerm) -> str:
    return _form(node.symbol.value, *node.names)


@to_pddl.register
def _(node: Equality) -> str:
    return _form("=", node.left, node.right)


@to_pddl.register
def _(node: PredicateFormula) -> str:
    return _form(node.predicate.value, *node.terms)


@to_pddl.register
def _(node: Literal) -> str:
    return _form("not", node.formula) if node.negated else to_pddl(node.formula)


@to_pddl.register
def _(node: AtomicFormulaSkeleton) -> str:
    return f"({' '.join(filter(None, [node.predicate.value, render_typed_list(node.variables)]))})"


@to_pddl.register
def _(node: AtomicFunctionSkeleton) -> str:
    return f"({' '.join(filter(None, [node.symbol.value, render_typed_list(node.variables)]))})"


# Numeric expressions


@to_pddl.register
def _(node: FHead) -> str:
    return _form(node.symbol.value, *node.terms)


@to_pddl.register
def _(node: BinaryOpExp) -> str:
    return _form(node.op.value, node.left, node.right)


@to_pddl.register
def _(node: MultiOpExp) -> str:
    return _form(node.op.value, node.first, *node.rest)


@to_pddl.register
def _(node: NegativeExp) -> str:
    return _form("-", node.value)


@to_pddl.register
def _(node: FComp) -> str:
    return _form(node.comp.value, node.left, node.right)


@to_pddl.register(DurationVariable)
@to_pddl.register(TotalTime)
def _(node: DurationVariable | TotalTime) -> str:
    return str(node)


@to_pddl.register
def _(node: FExpT) -> str:
    return "#t" if node.scale is None else _form("*", "#t", node.scale)


@to_pddl.register
def _(node: FAssignDa) -> str:
    return _form(node.op.value, node.head, node.value)


@to_pddl.register
def _(node: MetricFunction) -> str:
    return _form(node.symbol.value, *node.names)


@to_pddl.register
def _(node: IsViolated) -> str:
    return _form("is-violated", node.preference)


# Goal descriptions


def _quantified(keyword: str, variables: TypedList, body: object) -> str:
    return f"({keyword} ({render_typed_list(variables)}) {to_pddl(body)})"


@to_pddl.register
def _(node: Conjunction) -> str:
    return _form("and", *node.goals)


@to_pddl.register
def _(node: Disjunction) -> str:
    return _form("or", *node.goals)


@to_pddl.register
def _(node: Negation) -> str:
    return _form("not", node.goal)


@to_pddl.register
def _(node: Implication) -> str:
    return _form("imply", node.premise, node.conclusion)


@to_pddl.register
def _(node: Existential) -> str:
    return _quantified("exists", node.variables, node.goal)


@to_pddl.register
def _(node: Universal) -> str:
    return _quantified("forall", node.variables, node.goal)


@to_pddl.register(Preference)
@to_pddl.register(TimedPreference)
def _(node: Preference | TimedPreference) -> str:
    if node.name is None:
        return _form("preference", node.goal)
    return _form("preference", node.name, node.goal)


@to_pddl.register
def _(node: PreconditionForall) -> str:
    return _quantified("forall", node.variables, node.goals)


@to_pddl.register
def _(node: PreconditionGoalDefinitions) -> str:
    if len(node) == 1:
        return to_pddl(node[0])
    return _form("and", *node.goals)


@to_pddl.register
def _(node: AtTimedGD) -> str:
    return _form("at", node.time, node.goal)


@to_pddl.register
def _(node: OverTimedGD) -> str:
    return _form("over", node.interval, node.goal)


@to_pddl.register
def _(node: DurativeConjunction) -> str:
    return _form("and", *node.goals)


@to_pddl.register
def _(node: DurativeForall) -> str:
    return _quantified("forall", node.variables, node.goal)


# Effects


@to_pddl.register
def _(node: AtomicEffect) -> str:
    return to_pddl(node.formula)


@to_pddl.register
def _(node: NotAtomicEffect) -> str:
    return _form("not", node.formula)


@to_pddl.register
def _(node: AssignNumericFluent) -> str:
    return _form(node.op.value, node.head, node.value)


@to_pddl.register
def _(node: AssignObjectFluent) -> str:
    return _form("assign", node.function, "undefined" if node.value is None else node.value)


@to_pddl.register
def _(node: ConditionalEffect) -> str:
    if len(node) == 1:
        return to_pddl(node[0])
    return _form("and", *node.effects)


@to_pddl.register
def _(node: ForallEffect) -> str:
    return _quantified("forall", node.variables, node.effects)


@to_pddl.register
def _(node: WhenEffect) -> str:
    return _form("when", node.condition, node.effect)


@to_pddl.register
def _(node: Effects) -> str:
    if len(node) == 1:
        return to_pddl(node[0])
    return _form("and", *node.effects)


@to_pddl.register
def _(node: TimedConditionalEffect) -> str:
    return _form("at", node.time, node.effect)


@to_pddl.register
def _(node: TimedFluentEffect) -> str:
    return _form("at", node.time, node.assignment)


@to_pddl.register
def _(node: ContinuousEffect) -> str:
    return _form(node.op.value, node.head, node.rate)


@to_pddl.register
def _(node: DurativeEffectConjunction) -> str:
    return _form("and", *node.effects)


@to_pddl.register
def _(node: DurativeForallEffect) -> str:
    return _quantified("forall", node.variables, node.effect)


@to_pddl.register
def _(node: DurativeWhenEffect) -> str:
    return _form("when", node.condition, node.effect)


# Duration and trajectory constraints


@to_pddl.register
def _(node: DurationOp) -> str:
    return _form(node.op.value, "?duration", node.value)


@to_pddl.register
def _(node: TimedDurationConstraint) -> str:
    return _form("at", node.time, node.constraint)


@to_pddl.register
def _(node: DurationConstraint) -> str:
    if len(node) == 1:
        return to_pddl(node.constraints[0])
    return _form("and", *node.constraints)


@to_pddl.register(ConstraintAnd)
@to_pddl.register(PrefConstraintAnd)
def _(node: ConstraintAnd | PrefConstraintAnd) -> str:
    return _form("and", *node.constraints)


@to_pddl.register(ConstraintForall)
@to_pddl.register(PrefConstraintForall)
def _(node: ConstraintForall | PrefConstraintForall) -> str:
    return _quantified("forall", node.variables, node.constraint)


@to_pddl.register
def _(node: ConstraintPreference) -> str:
    if node.name is None:
        return _form("preference", node.constraint)
    return _form("preference", node.name, node.constraint)


@to_pddl.register
def _(node: AtEnd) -> str:
    return _form("at end", node.goal)


@to_pddl.register
def _(node: Always) -> str:
    return _form("always", node.condition)


@to_pddl.register
def _(node: Sometime) -> str:
    return _form("sometime", node.condition)


@to_pddl.register
def _(node: Within) -> str:
    return _form("within", node.deadline, node.condition)


@to_pddl.register
def _(node: AtMostOnce) -> str:
    return _form("at-most-once", node.condition)


@to_pddl.register
def _(node: SometimeAfter) -> str:
    return _form("sometime-after", node.first, node.then)


@to_pddl.register
def _(node: SometimeBefore) -> str:
    return _form("sometime-before", node.later, node.earlier)


@to_pddl.register
def _(node: AlwaysWithin) -> str:
    return _form("always-within", node.deadline, node.first, node.second)


@to_pddl.register
def _(node: HoldDuring) -> str:
    return _form("hold-during", node.begin, node.end, node.condition)


@to_pddl.register
def _(node: HoldAfter) -> str:
    return _form("hold-after", node.time, node.condition)


# Structure definitions


def _sections(head: str, lines: list[str], depth: int) -> str:
    """Render a form whose parts each begin on a new, indented line."""
    inner = "\n".join(INDENT * (depth + 1) + line for line in lines)
    return f"{INDENT * depth}({head}\n{inner})"


def render_action(node: ActionDefinition, depth: int = 0) -> str:
    """Render an action schema with one section per line."""
    lines = [f":parameters ({render_typed_list(node.parameters)})"]
    if node.precondition is not None:
        lines.append(f":precondition {to_pddl(node.precondition)}")
    if node.effect is not None:
        lines.append(f":effect {to_pddl(node.effect)}")
    return _sections(f":action {node.symbol}", lines, depth)


def render_durative_action(node: DurativeActionDefinition, depth: int = 0) -> str:
    """Render a durative action schema with one section per line."""
    lines = [f":parameters ({render_typed_list(node.parameters)})"]
    if node.duration is not None:
        lines.append(f":duration {to_pddl(node.duration)}")
    if node.condition is not None:
        lines.append(f":condition {to_pddl(node.condition)}")
    if node.effect is not None:
        lines.append(f":effect {to_pddl(node.effect)}")
    return _sections(f":durative-action {node.symbol}", lines, depth)


@to_pddl.register
def _(node: ActionDefinition) -> str:
    return render_action(node)


@to_pddl.register
def _(node: DurativeActionDefinition) -> str:
    return render_durative_action(node)


@to_pddl.register
def _(node: DerivedPredicate) -> str:
    return _form(":derived", node.predicate, node.goal)


# Domains and problems


@to_pddl.register
def _(node: Requirements) -> str:
    return _form(":requirements", *node)


@to_pddl.register
def _(node: Domain) -> str:
    lines = [f"(domain {node.name})"]
    if node.extends:
        lines.append(_form(":extends", *node.extends))
    if not node.requirements.is_empty():
        lines.append(to_pddl(node.requirements))
    if node.types:
        lines.append(f"(:types {render_typed_list(node.types)})")
    if node.constants:
        lines.append(f"(:constants {render_typed_list(node.constants)})")
    if node.predicates:
        lines.append(_form(":predicates", *node.predicates))
    if node.timeless:
        lines.append(_form(":timeless", *node.timeless))
    if node.functions:
        lines.append(f"(:functions {render_typed_list(node.functions, default=NUMBER_TYPE)})")
    if node.constraints != ConstraintAnd():
        lines.append(_form(":constraints", node.constraints))

    rendered = _sections("define", lines, depth=0)
    structure = [_render_structure(s) for s in node.structure]
    if not structure:
        return rendered
    return rendered[:-1] + "\n" + "\n".join(structure) + ")"


def _render_structure(node: object) -> str:
    """Render a structure definition nested one level inside a domain."""
    if isinstance(node, ActionDefinition):
        return render_action(node, depth=1)
    if isinstance(node, DurativeActionDefinition):
        return render_durative_action(node, depth=1)
    return INDENT + to_pddl(node)


@to_pddl.register
def _(node: TimedLiteral) -> str:
    return _form("at", node.time, node.literal)


@to_pddl.register
def _(node: NumericFluentValue) -> str:
    return _form("=", node.term, node.value)


@to_pddl.register
def _(node: ObjectFluentValue) -> str:
    return _form("=", node.term, node.value)


@to_pddl.register
def _(node: MetricSpec) -> str:
    return _form(":metric", node.optimization, node.expression)


@to_pddl.register
def _(node: LengthSpec) -> str:
    parts = []
    if node.serial is not None:
        parts.append(f"(:serial {node.serial})")
    if node.parallel is not None:
        parts.append(f"(:parallel {node.parallel})")
    return f"({' '.join([':length', *parts])})"


@to_pddl.register
def _(node: Problem) -> str:
    lines = [f"(problem {node.name})", f"(:domain {node.domain})"]
    if not node.requirements.is_empty():
        lines.append(to_pddl(node.requirements))
    if node.objects:
        lines.append(f"(:objects {render_typed_list(node.objects)})")
    lines.append(_form(":init", *node.init))
    lines.append(_form(":goal", node.goal))
    if node.constraints != PrefConstraintAnd():
        lines.append(_form(":constraints", node.constraints))
    if node.metric is not None:
        lines.append(to_pddl(node.metric))
    if node.length is not None:
        lines.append(to_pddl(node.length))
    return _sections("define", lines, depth=0)

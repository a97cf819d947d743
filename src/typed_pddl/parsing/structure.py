"""Implement the grammar of action, durative-action, and derived-predicate definitions."""

from __future__ import annotations

from typed_pddl.ast.structure import (
    ActionDefinition,
    DerivedPredicate,
    DurativeActionDefinition,
    StructureDef,
)
from typed_pddl.parsing.combinators import (
    Parser,
    alt,
    empty_or,
    optional_sections,
    preceded,
    prefix_expr,
    spaced,
)
from typed_pddl.parsing.constraints import parse_duration_constraint
from typed_pddl.parsing.effects import parse_da_effect, parse_effect
from typed_pddl.parsing.formulas import parse_atomic_formula_skeleton
from typed_pddl.parsing.goals import parse_da_gd, parse_gd, parse_pre_gd, typed_variables
from typed_pddl.parsing.lexical import parse_name
from typed_pddl.parsing.span import Span, grammar_rule


_parameters = preceded(":parameters", typed_variables)


@grammar_rule
def parse_action_def(span: Span) -> tuple[Span, ActionDefinition]:
    """Parse an action definition.

    An explicitly empty `:precondition ()` or `:effect ()` is represented exactly like an
    omitted section, i.e. as None.
    """
    span, (symbol, parameters, (precondition, effect)) = _action_def(span)
    return span, ActionDefinition(symbol, parameters, precondition, effect)


_action_def = prefix_expr(
    ":action",
    spaced(
        parse_name,
        _parameters,
        optional_sections(
            preceded(":precondition", empty_or(parse_pre_gd)),
            preceded(":effect", empty_or(parse_effect)),
        ),
    ),
)


@grammar_rule
def parse_da_def(span: Span) -> tuple[Span, DurativeActionDefinition]:
    """Parse a durative action definition (`:durative-actions`)."""
    span, (symbol, parameters, (duration, condition, effect)) = _da_def(span)
    return span, DurativeActionDefinition(symbol, parameters, duration, condition, effect)


_da_def = prefix_expr(
    ":durative-action",
    spaced(
        parse_name,
        _parameters,
        optional_sections(
            preceded(":duration", parse_duration_constraint),
            preceded(":condition", empty_or(parse_da_gd)),
            preceded(":effect", empty_or(parse_da_effect)),
        ),
    ),
)


@grammar_rule
def parse_derived_predicate(span: Span) -> tuple[Span, DerivedPredicate]:
    """Parse a derived predicate definition, `(:derived <atomic formula skeleton> <GD>)`."""
    span, (predicate, goal) = _derived_predicate(span)
    return span, DerivedPredicate(predicate, goal)


_derived_predicate = prefix_expr(":derived", spaced(parse_atomic_formula_skeleton, parse_gd))


@grammar_rule
def parse_structure_def(span: Span) -> tuple[Span, StructureDef]:
    """Parse a structure definition: an action, a durative action, or a derived predicate."""
    return _structure_def(span)


_structure_def: Parser[StructureDef] = alt(parse_action_def, parse_da_def, parse_derived_predicate)

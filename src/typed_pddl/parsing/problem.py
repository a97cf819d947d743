"""Implement the grammar of problem definitions and their sections.

Reference: Section 4 ("Problems") of the PDDL 3.1 BNF (Kovacs, 2011).
"""

from __future__ import annotations

from typed_pddl.ast.constraints import PrefConGD, PrefConstraintAnd
from typed_pddl.ast.formulas import Literal
from typed_pddl.ast.goals import PreconditionGoalDefinitions
from typed_pddl.ast.operators import Optimization
from typed_pddl.ast.problem import (
    InitElement,
    LengthSpec,
    MetricSpec,
    NumericFluentValue,
    ObjectFluentValue,
    Problem,
    TimedLiteral,
)
from typed_pddl.ast.requirements import Requirements
from typed_pddl.ast.symbols import Name
from typed_pddl.ast.typed import TypedList
from typed_pddl.parsing.combinators import (
    Parser,
    alt,
    keyword_enum,
    map_parser,
    optional_sections,
    prefix_expr,
    separator,
    space_separated_list0,
    spaced,
    typed_list,
    ws,
)
from typed_pddl.parsing.constraints import parse_pref_con_gd
from typed_pddl.parsing.domain import parse_require_def
from typed_pddl.parsing.expressions import parse_metric_f_exp
from typed_pddl.parsing.formulas import literal, parse_basic_function_term
from typed_pddl.parsing.goals import parse_pre_gd
from typed_pddl.parsing.lexical import parse_integer, parse_name, parse_number
from typed_pddl.parsing.span import Span, grammar_rule

parse_optimization = keyword_enum(Optimization)

_ground_literal: Parser[Literal[Name]] = literal(parse_name)


@grammar_rule
def parse_objects_def(span: Span) -> tuple[Span, TypedList[Name]]:
    """Parse an `(:objects <typed list (name)>)` section."""
    return _objects_def(span)


_objects_def = prefix_expr(":objects", typed_list(parse_name))


@grammar_rule
def parse_init_el(span: Span) -> tuple[Span, InitElement]:
    """Parse an element of the initial state (`<init-el>`).

    Literals over names are tried first, then timed literals, then numeric fluent values, and
    finally object fluent values.
    """
    return _init_el(span)


_init_el: Parser[InitElement] = alt(
    _ground_literal,
    map_parser(
        prefix_expr("at", spaced(parse_number, _ground_literal)),
        lambda parsed: TimedLiteral(*parsed),
    ),
    map_parser(
        prefix_expr("=", spaced(parse_basic_function_term, parse_number)),
        lambda parsed: NumericFluentValue(*parsed),
    ),
    map_parser(
        prefix_expr("=", spaced(parse_basic_function_term, parse_name)),
        lambda parsed: ObjectFluentValue(*parsed),
    ),
)


@grammar_rule
def parse_init_def(span: Span) -> tuple[Span, tuple[InitElement, ...]]:
    """Parse an `(:init <init-el>*)` section."""
    return _init_def(span)


_init_def = prefix_expr(":init", space_separated_list0(parse_init_el))


@grammar_rule
def parse_goal_def(span: Span) -> tuple[Span, PreconditionGoalDefinitions]:
    """Parse a `(:goal <pre-GD>)` section."""
    return _goal_def(span)


_goal_def = prefix_expr(":goal", parse_pre_gd)


@grammar_rule
def parse_problem_constraints_def(span: Span) -> tuple[Span, PrefConGD]:
    """Parse a problem's `(:constraints <pref-con-GD>)` section."""
    return _problem_constraints_def(span)


_problem_constraints_def = prefix_expr(":constraints", parse_pref_con_gd)


@grammar_rule
def parse_metric_spec(span: Span) -> tuple[Span, MetricSpec]:
    """Parse a `(:metric minimize|maximize <metric-f-exp>)` section."""
    span, (optimization, expression) = _metric_spec(span)
    return span, MetricSpec(optimization, expression)


_metric_spec = prefix_expr(":metric", spaced(parse_optimization, parse_metric_f_exp))


@grammar_rule
def parse_length_spec(span: Span) -> tuple[Span, LengthSpec]:
    """Parse a deprecated `(:length [(:serial <integer>)] [(:parallel <integer>)])` section."""
    span, (serial, parallel) = _length_spec(span)
    return span, LengthSpec(serial, parallel)


_length_spec = prefix_expr(
    ":length",
    optional_sections(
        prefix_expr(":serial", parse_integer),
        prefix_expr(":parallel", parse_integer),
    ),
)


@grammar_rule
def parse_problem(span: Span) -> tuple[Span, Problem]:
    """Parse a complete problem definition, `(define (problem <name>) (:domain <name>) ...)`.

    The `:init` and `:goal` sections are mandatory; every other section defaults to empty.

    :param span: Input positioned at (or before) the problem's opening parenthesis
    :return: Tuple containing the remaining input and the parsed problem
    """
    span, (name, domain, sections) = _problem(span)
    requirements, objects, init, goal, constraints, metric, length = sections
    return span, Problem(
        name=name,
        domain=domain,
        requirements=requirements or Requirements(),
        objects=objects or TypedList(),
        init=init,
        goal=goal,
        constraints=constraints if constraints is not None else PrefConstraintAnd(),
        metric=metric,
        length=length,
    )


def _problem_sections(span: Span) -> tuple[Span, tuple]:
    """Parse the sections following `(:domain <name>)`, in their fixed order."""
    span, (requirements, objects) = _leading_sections(span)
    span, init = _init_def(separator(span))
    span, goal = _goal_def(separator(span))
    span, (constraints, metric, length) = _trailing_sections(span)
    return span, (requirements, objects, init, goal, constraints, metric, length)


_leading_sections = optional_sections(parse_require_def, _objects_def)
_trailing_sections = optional_sections(
    _problem_constraints_def, parse_metric_spec, parse_length_spec
)

_problem = ws(
    prefix_expr(
        "define",
        spaced(
            prefix_expr("problem", parse_name),
            prefix_expr(":domain", parse_name),
            _problem_sections,
        ),
    ),
)

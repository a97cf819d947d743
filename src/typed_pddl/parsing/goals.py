"""Implement the grammar of goal descriptions, preconditions, and durative-action conditions."""

from __future__ import annotations

from typed_pddl.ast.goals import (
    AtTimedGD,
    Conjunction,
    Disjunction,
    DurativeActionGoalDefinition,
    DurativeConjunction,
    DurativeForall,
    Existential,
    GoalDefinition,
    Implication,
    Negation,
    OverTimedGD,
    PreconditionForall,
    PreconditionGoalDefinitions,
    Preference,
    PreferenceGD,
    PrefTimedGD,
    TimedGD,
    TimedPreference,
    Universal,
)
from typed_pddl.ast.operators import Interval, TimeSpecifier
from typed_pddl.parsing.combinators import (
    Parser,
    alt,
    keyword_enum,
    map_parser,
    parens,
    prefix_expr,
    space_separated_list0,
    spaced,
    typed_list,
)
from typed_pddl.parsing.expressions import parse_f_comp
from typed_pddl.parsing.formulas import parse_atomic_formula, parse_literal
from typed_pddl.parsing.lexical import parse_pref_name, parse_variable
from typed_pddl.parsing.span import Span, grammar_rule, recursive_rule

parse_time_specifier = keyword_enum(TimeSpecifier)
parse_interval = keyword_enum(Interval)

typed_variables = parens(typed_list(parse_variable))
"""Parser for the parenthesized variable list bound by a quantifier, e.g. `(?x ?y - block)`."""


def quantified(keyword: str, body: Parser) -> Parser[tuple]:
    """Create a parser for `(<keyword> (<typed variables>) <body>)`, e.g. a `forall` form."""
    return prefix_expr(keyword, spaced(typed_variables, body))


@recursive_rule
def parse_gd(span: Span) -> tuple[Span, GoalDefinition]:
    """Parse a goal description (`<GD>`).

    Keyword forms (`and`, `or`, `not`, `imply`, `exists`, `forall`) are tried before atomic
    formulas, then literals, then numeric comparisons.
    """
    return _gd(span)


_gd: Parser[GoalDefinition] = alt(
    map_parser(prefix_expr("and", space_separated_list0(parse_gd)), Conjunction),
    map_parser(prefix_expr("or", space_separated_list0(parse_gd)), Disjunction),
    map_parser(prefix_expr("not", parse_gd), Negation),
    map_parser(
        prefix_expr("imply", spaced(parse_gd, parse_gd)),
        lambda parsed: Implication(*parsed),
    ),
    map_parser(quantified("exists", parse_gd), lambda parsed: Existential(*parsed)),
    map_parser(quantified("forall", parse_gd), lambda parsed: Universal(*parsed)),
    parse_atomic_formula,
    parse_literal,
    parse_f_comp,
)


@grammar_rule
def parse_pref_gd(span: Span) -> tuple[Span, PreferenceGD]:
    """Parse a goal description that may be wrapped in a named or unnamed preference."""
    return _pref_gd(span)


_pref_gd: Parser[PreferenceGD] = alt(
    map_parser(
        prefix_expr("preference", spaced(parse_pref_name, parse_gd)),
        lambda parsed: Preference(*parsed),
    ),
    map_parser(prefix_expr("preference", parse_gd), lambda goal: Preference(None, goal)),
    parse_gd,
)


@recursive_rule
def parse_pre_gd(span: Span) -> tuple[Span, PreconditionGoalDefinitions]:
    """Parse preconditions (`<pre-GD>`), flattening nested `(and ...)` forms into one list."""
    return _pre_gd(span)


def _flatten(groups: tuple[PreconditionGoalDefinitions, ...]) -> PreconditionGoalDefinitions:
    """Concatenate the preconditions of the operands of an `and`."""
    return PreconditionGoalDefinitions(tuple(goal for group in groups for goal in group))


_pre_gd: Parser[PreconditionGoalDefinitions] = alt(
    map_parser(prefix_expr("and", space_separated_list0(parse_pre_gd)), _flatten),
    map_parser(
        quantified("forall", parse_pre_gd),
        lambda parsed: PreconditionGoalDefinitions((PreconditionForall(*parsed),)),
    ),
    map_parser(parse_pref_gd, lambda goal: PreconditionGoalDefinitions((goal,))),
)


@grammar_rule
def parse_timed_gd(span: Span) -> tuple[Span, TimedGD]:
    """Parse a time-qualified goal: `(at start|end <GD>)` or `(over all <GD>)`."""
    return _timed_gd(span)


_timed_gd: Parser[TimedGD] = alt(
    map_parser(
        prefix_expr("at", spaced(parse_time_specifier, parse_gd)),
        lambda parsed: AtTimedGD(*parsed),
    ),
    map_parser(
        prefix_expr("over", spaced(parse_interval, parse_gd)),
        lambda parsed: OverTimedGD(*parsed),
    ),
)


@grammar_rule
def parse_pref_timed_gd(span: Span) -> tuple[Span, PrefTimedGD]:
    """Parse a time-qualified goal that may be wrapped in a (named) preference."""
    return _pref_timed_gd(span)


_pref_timed_gd: Parser[PrefTimedGD] = alt(
    map_parser(
        prefix_expr("preference", spaced(parse_pref_name, parse_timed_gd)),
        lambda parsed: TimedPreference(*parsed),
    ),
    map_parser(
        prefix_expr("preference", parse_timed_gd),
        lambda goal: TimedPreference(None, goal),
    ),
    parse_timed_gd,
)


@recursive_rule
def parse_da_gd(span: Span) -> tuple[Span, DurativeActionGoalDefinition]:
    """Parse the `:condition` of a durative action (`<da-GD>`)."""
    return _da_gd(span)


_da_gd: Parser[DurativeActionGoalDefinition] = alt(
    map_parser(quantified("forall", parse_da_gd), lambda parsed: DurativeForall(*parsed)),
    map_parser(prefix_expr("and", space_separated_list0(parse_da_gd)), DurativeConjunction),
    parse_pref_timed_gd,
)

"""Implement the grammar of action effects and the timed effects of durative actions."""

from __future__ import annotations

from typed_pddl.ast.effects import (
    AssignNumericFluent,
    AssignObjectFluent,
    AtomicEffect,
    CEffect,
    ConditionalEffect,
    ContinuousEffect,
    DurativeActionEffect,
    DurativeEffectConjunction,
    DurativeForallEffect,
    DurativeWhenEffect,
    Effects,
    ForallEffect,
    NotAtomicEffect,
    PEffect,
    TimedConditionalEffect,
    TimedEffect,
    TimedFluentEffect,
    WhenEffect,
)
from typed_pddl.ast.operators import AssignOpT
from typed_pddl.parsing.combinators import (
    Parser,
    alt,
    keyword_enum,
    map_parser,
    parens,
    prefix_expr,
    space_separated_list0,
    spaced,
    tag,
)
from typed_pddl.parsing.expressions import (
    parse_assign_op,
    parse_f_assign_da,
    parse_f_exp,
    parse_f_exp_t,
    parse_f_head,
)
from typed_pddl.parsing.formulas import parse_atomic_formula, parse_function_term, parse_term
from typed_pddl.parsing.goals import parse_da_gd, parse_gd, parse_time_specifier, quantified
from typed_pddl.parsing.span import Span, grammar_rule, recursive_rule

parse_assign_op_t = keyword_enum(AssignOpT)


@grammar_rule
def parse_p_effect(span: Span) -> tuple[Span, PEffect]:
    """Parse a primitive effect (`<p-effect>`).

    Undefining an object fluent is tried first, then fluent assignments, then negated and positive
    atomic formulas.
    """
    return _p_effect(span)


_p_effect: Parser[PEffect] = alt(
    map_parser(
        prefix_expr("assign", spaced(parse_function_term, tag("undefined"))),
        lambda parsed: AssignObjectFluent(parsed[0], None),
    ),
    map_parser(
        parens(spaced(parse_assign_op, parse_f_head, parse_f_exp)),
        lambda parsed: AssignNumericFluent(*parsed),
    ),
    map_parser(
        prefix_expr("assign", spaced(parse_function_term, parse_term)),
        lambda parsed: AssignObjectFluent(*parsed),
    ),
    map_parser(prefix_expr("not", parse_atomic_formula), NotAtomicEffect),
    map_parser(parse_atomic_formula, AtomicEffect),
)


@grammar_rule
def parse_cond_effect(span: Span) -> tuple[Span, ConditionalEffect]:
    """Parse the consequent of a `when` effect: `(and <p-effect>*)` or a single primitive effect."""
    return _cond_effect(span)


_cond_effect: Parser[ConditionalEffect] = alt(
    map_parser(prefix_expr("and", space_separated_list0(parse_p_effect)), ConditionalEffect),
    map_parser(parse_p_effect, lambda effect: ConditionalEffect((effect,))),
)


@recursive_rule
def parse_c_effect(span: Span) -> tuple[Span, CEffect]:
    """Parse a (possibly quantified or conditional) effect (`<c-effect>`)."""
    return _c_effect(span)


@recursive_rule
def parse_effect(span: Span) -> tuple[Span, Effects]:
    """Parse an action's effect: `(and <c-effect>*)` or a single effect."""
    return _effect(span)


_c_effect: Parser[CEffect] = alt(
    map_parser(quantified("forall", parse_effect), lambda parsed: ForallEffect(*parsed)),
    map_parser(
        prefix_expr("when", spaced(parse_gd, parse_cond_effect)),
        lambda parsed: WhenEffect(*parsed),
    ),
    parse_p_effect,
)

_effect: Parser[Effects] = alt(
    map_parser(prefix_expr("and", space_separated_list0(parse_c_effect)), Effects),
    map_parser(parse_c_effect, lambda effect: Effects((effect,))),
)


@grammar_rule
def parse_timed_effect(span: Span) -> tuple[Span, TimedEffect]:
    """Parse an effect of a durative action (`<timed-effect>`).

    A fluent assignment at a time point is tried before primitive effects at a time point, since
    both share the `(at start|end (...))` shape.
    """
    return _timed_effect(span)


_timed_effect: Parser[TimedEffect] = alt(
    map_parser(
        prefix_expr("at", spaced(parse_time_specifier, parse_f_assign_da)),
        lambda parsed: TimedFluentEffect(*parsed),
    ),
    map_parser(
        prefix_expr("at", spaced(parse_time_specifier, parse_cond_effect)),
        lambda parsed: TimedConditionalEffect(*parsed),
    ),
    map_parser(
        parens(spaced(parse_assign_op_t, parse_f_head, parse_f_exp_t)),
        lambda parsed: ContinuousEffect(*parsed),
    ),
)


@recursive_rule
def parse_da_effect(span: Span) -> tuple[Span, DurativeActionEffect]:
    """Parse the `:effect` of a durative action (`<da-effect>`)."""
    return _da_effect(span)


_da_effect: Parser[DurativeActionEffect] = alt(
    map_parser(
        prefix_expr("and", space_separated_list0(parse_da_effect)),
        DurativeEffectConjunction,
    ),
    map_parser(
        quantified("forall", parse_da_effect),
        lambda parsed: DurativeForallEffect(*parsed),
    ),
    map_parser(
        prefix_expr("when", spaced(parse_da_gd, parse_timed_effect)),
        lambda parsed: DurativeWhenEffect(*parsed),
    ),
    parse_timed_effect,
)

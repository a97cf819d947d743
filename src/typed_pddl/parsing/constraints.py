"""Implement the grammar of duration constraints and trajectory constraints."""

from __future__ import annotations

from typed_pddl.ast.constraints import (
    Always,
    AlwaysWithin,
    AtEnd,
    AtMostOnce,
    Con2GD,
    ConGD,
    ConstraintAnd,
    ConstraintForall,
    ConstraintPreference,
    DurationConstraint,
    DurationOp,
    DurationValue,
    HoldAfter,
    HoldDuring,
    PrefConGD,
    PrefConstraintAnd,
    PrefConstraintForall,
    SimpleDurationConstraint,
    Sometime,
    SometimeAfter,
    SometimeBefore,
    TimedDurationConstraint,
    Within,
)
from typed_pddl.ast.operators import DOp
from typed_pddl.parsing.combinators import (
    Parser,
    alt,
    empty_or,
    keyword_enum,
    map_parser,
    parens,
    prefix_expr,
    space_separated_list0,
    space_separated_list1,
    spaced,
    tag,
)
from typed_pddl.parsing.expressions import parse_f_exp
from typed_pddl.parsing.goals import parse_gd, parse_time_specifier, quantified
from typed_pddl.parsing.lexical import parse_number, parse_pref_name
from typed_pddl.parsing.span import Span, grammar_rule, recursive_rule

parse_d_op = keyword_enum(DOp)


@grammar_rule
def parse_d_value(span: Span) -> tuple[Span, DurationValue]:
    """Parse the value bounding a duration: a number, else any numeric expression."""
    return _d_value(span)


_d_value: Parser[DurationValue] = alt(parse_number, parse_f_exp)


@recursive_rule
def parse_simple_duration_constraint(span: Span) -> tuple[Span, SimpleDurationConstraint]:
    """Parse `(<d-op> ?duration <d-value>)` or `(at start|end <simple-duration-constraint>)`."""
    return _simple_duration_constraint(span)


_simple_duration_constraint: Parser[SimpleDurationConstraint] = alt(
    map_parser(
        parens(spaced(parse_d_op, tag("?duration"), parse_d_value)),
        lambda parsed: DurationOp(parsed[0], parsed[2]),
    ),
    map_parser(
        prefix_expr("at", spaced(parse_time_specifier, parse_simple_duration_constraint)),
        lambda parsed: TimedDurationConstraint(*parsed),
    ),
)


@grammar_rule
def parse_duration_constraint(span: Span) -> tuple[Span, DurationConstraint | None]:
    """Parse the `:duration` of a durative action; an empty `()` yields None."""
    return _duration_constraint(span)


_duration_constraint: Parser[DurationConstraint | None] = empty_or(
    alt(
        map_parser(parse_simple_duration_constraint, lambda c: DurationConstraint((c,))),
        map_parser(
            prefix_expr("and", space_separated_list1(parse_simple_duration_constraint)),
            DurationConstraint,
        ),
    ),
)


@recursive_rule
def parse_con_gd(span: Span) -> tuple[Span, ConGD]:
    """Parse a trajectory constraint (`<con-GD>`)."""
    return _con_gd(span)


@recursive_rule
def parse_con2_gd(span: Span) -> tuple[Span, Con2GD]:
    """Parse the operand of a modal operator: a goal description, else a nested constraint."""
    return _con2_gd(span)


_con_gd: Parser[ConGD] = alt(
    map_parser(prefix_expr("and", space_separated_list0(parse_con_gd)), ConstraintAnd),
    map_parser(quantified("forall", parse_con_gd), lambda parsed: ConstraintForall(*parsed)),
    map_parser(prefix_expr("at end", parse_gd), AtEnd),
    map_parser(prefix_expr("always", parse_con2_gd), Always),
    map_parser(prefix_expr("sometime", parse_con2_gd), Sometime),
    map_parser(
        prefix_expr("within", spaced(parse_number, parse_con2_gd)),
        lambda parsed: Within(*parsed),
    ),
    map_parser(prefix_expr("at-most-once", parse_con2_gd), AtMostOnce),
    map_parser(
        prefix_expr("sometime-after", spaced(parse_con2_gd, parse_con2_gd)),
        lambda parsed: SometimeAfter(*parsed),
    ),
    map_parser(
        prefix_expr("sometime-before", spaced(parse_con2_gd, parse_con2_gd)),
        lambda parsed: SometimeBefore(*parsed),
    ),
    map_parser(
        prefix_expr("always-within", spaced(parse_number, parse_con2_gd, parse_con2_gd)),
        lambda parsed: AlwaysWithin(*parsed),
    ),
    map_parser(
        prefix_expr("hold-during", spaced(parse_number, parse_number, parse_con2_gd)),
        lambda parsed: HoldDuring(*parsed),
    ),
    map_parser(
        prefix_expr("hold-after", spaced(parse_number, parse_con2_gd)),
        lambda parsed: HoldAfter(*parsed),
    ),
)

_con2_gd: Parser[Con2GD] = alt(parse_gd, parse_con_gd)


@recursive_rule
def parse_pref_con_gd(span: Span) -> tuple[Span, PrefConGD]:
    """Parse a problem's trajectory constraint, possibly preferred (`<pref-con-GD>`)."""
    return _pref_con_gd(span)


_pref_con_gd: Parser[PrefConGD] = alt(
    map_parser(
        prefix_expr("and", space_separated_list0(parse_pref_con_gd)),
        PrefConstraintAnd,
    ),
    map_parser(
        quantified("forall", parse_pref_con_gd),
        lambda parsed: PrefConstraintForall(*parsed),
    ),
    map_parser(
        prefix_expr("preference", spaced(parse_pref_name, parse_con_gd)),
        lambda parsed: ConstraintPreference(*parsed),
    ),
    map_parser(
        prefix_expr("preference", parse_con_gd),
        lambda constraint: ConstraintPreference(None, constraint),
    ),
    parse_con_gd,
)

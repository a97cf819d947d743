"""Implement the grammar of numeric expressions and their durative and metric variants."""

from __future__ import annotations

from typed_pddl.ast.expressions import (
    DURATION,
    TOTAL_TIME,
    BinaryOpExp,
    FAssignDa,
    FComp,
    FExp,
    FExpDa,
    FExpT,
    FHead,
    IsViolated,
    MetricFExp,
    MetricFunction,
    MultiOpExp,
    NegativeExp,
)
from typed_pddl.ast.operators import AssignOp, BinaryComp, BinaryOp, MultiOp
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
from typed_pddl.parsing.formulas import parse_term
from typed_pddl.parsing.lexical import (
    parse_function_symbol,
    parse_name,
    parse_number,
    parse_pref_name,
)
from typed_pddl.parsing.span import Span, grammar_rule, recursive_rule

parse_binary_comp = keyword_enum(BinaryComp)
parse_binary_op = keyword_enum(BinaryOp)
parse_multi_op = keyword_enum(MultiOp)
parse_assign_op = keyword_enum(AssignOp)


def _arithmetic(operand: Parser) -> Parser:
    """Create a parser for arithmetic over the given operand, reading each expression once.

    The operator and operand count select the form: `(- e)` is a negation, `(<binary-op> e e)`
    a binary expression, and `(<multi-op> e e e+)` a multi-operand expression.

    :param operand: Parser for the operands (e.g., `f-exp` or `f-exp-da`)
    :return: Parser producing a NegativeExp, BinaryOpExp, or MultiOpExp
    """
    application = parens(spaced(parse_binary_op, operand, space_separated_list0(operand)))

    @grammar_rule
    def parse(span: Span) -> tuple[Span, object]:
        rest, (op, first, others) = application(span)
        if not others:
            if op is not BinaryOp.SUBTRACTION:
                raise span.fail(f"a second operand for '{op}'")
            return rest, NegativeExp(first)
        if len(others) == 1:
            return rest, BinaryOpExp(op, first, others[0])
        if op not in (BinaryOp.ADDITION, BinaryOp.MULTIPLICATION):
            raise span.fail(f"exactly two operands for '{op}'")
        return rest, MultiOpExp(MultiOp(op.value), first, others)

    return parse


@grammar_rule
def parse_f_head(span: Span) -> tuple[Span, FHead]:
    """Parse a numeric fluent reference: a bare function symbol or `(f t1 ... tn)`."""
    return _f_head(span)


_f_head: Parser[FHead] = alt(
    map_parser(parse_function_symbol, FHead),
    map_parser(
        parens(spaced(parse_function_symbol, space_separated_list0(parse_term))),
        lambda parsed: FHead(*parsed),
    ),
)


@recursive_rule
def parse_f_exp(span: Span) -> tuple[Span, FExp]:
    """Parse a numeric expression (`:numeric-fluents`)."""
    return _f_exp(span)


_f_exp: Parser[FExp] = alt(parse_number, _arithmetic(parse_f_exp), _f_head)


@grammar_rule
def parse_f_comp(span: Span) -> tuple[Span, FComp]:
    """Parse a numeric comparison, e.g. `(>= (fuel ?t) 5)`."""
    span, (comp, left, right) = _f_comp(span)
    return span, FComp(comp, left, right)


_f_comp = parens(spaced(parse_binary_comp, parse_f_exp, parse_f_exp))


@recursive_rule
def parse_f_exp_da(span: Span) -> tuple[Span, FExpDa]:
    """Parse a numeric expression of a durative action, which may mention `?duration`."""
    return _f_exp_da(span)


_f_exp_da: Parser[FExpDa] = alt(
    map_parser(tag("?duration"), lambda _: DURATION),
    _arithmetic(parse_f_exp_da),
    parse_f_exp,
)


@grammar_rule
def parse_f_exp_t(span: Span) -> tuple[Span, FExpT]:
    """Parse the rate of a continuous effect: `(* #t e)`, `(* e #t)`, or `#t`."""
    return _f_exp_t(span)


_time = tag("#t")

# The expression scaling `#t` may be written on either side of it
_scaled_by_time: Parser[FExp] = alt(
    map_parser(spaced(_time, parse_f_exp), lambda parsed: parsed[1]),
    map_parser(spaced(parse_f_exp, _time), lambda parsed: parsed[0]),
)


_f_exp_t: Parser[FExpT] = alt(
    map_parser(prefix_expr("*", _scaled_by_time), FExpT),
    map_parser(_time, lambda _: FExpT()),
)


@grammar_rule
def parse_f_assign_da(span: Span) -> tuple[Span, FAssignDa]:
    """Parse a numeric assignment of a durative action, e.g. `(increase (fuel ?t) ?duration)`."""
    span, (op, head, value) = _f_assign_da(span)
    return span, FAssignDa(op, head, value)


_f_assign_da = parens(spaced(parse_assign_op, parse_f_head, parse_f_exp_da))


@recursive_rule
def parse_metric_f_exp(span: Span) -> tuple[Span, MetricFExp]:
    """Parse the expression of a plan metric, e.g. `(+ (total-cost) (* 2 total-time))`."""
    return _metric_f_exp(span)


_metric_f_exp: Parser[MetricFExp] = alt(
    parse_number,
    _arithmetic(parse_metric_f_exp),
    map_parser(tag("total-time"), lambda _: TOTAL_TIME),
    map_parser(prefix_expr("is-violated", parse_pref_name), IsViolated),
    map_parser(
        parens(spaced(parse_function_symbol, space_separated_list0(parse_name))),
        lambda parsed: MetricFunction(*parsed),
    ),
    map_parser(parse_function_symbol, MetricFunction),
)

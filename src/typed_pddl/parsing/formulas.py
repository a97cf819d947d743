"""Implement the grammar of terms, atomic formulas, literals, and predicate/function skeletons."""

from __future__ import annotations

from typed_pddl.ast.formulas import (
    AtomicFormula,
    AtomicFormulaSkeleton,
    AtomicFunctionSkeleton,
    Equality,
    Literal,
    PredicateFormula,
)
from typed_pddl.ast.terms import BasicFunctionTerm, FunctionTerm, Term
from typed_pddl.parsing.combinators import (
    Parser,
    T,
    alt,
    map_parser,
    parens,
    prefix_expr,
    space_separated_list0,
    spaced,
    typed_list,
)
from typed_pddl.parsing.lexical import (
    parse_function_symbol,
    parse_name,
    parse_predicate,
    parse_variable,
    skip_whitespace,
)
from typed_pddl.parsing.span import Span, grammar_rule, recursive_rule


def _symbol_and_arguments(symbol: Parser, arguments: Parser) -> Parser[tuple]:
    """Create a parser for `<symbol> <argument>*`, as found inside the parentheses of a formula."""

    @grammar_rule
    def parse(span: Span) -> tuple[Span, tuple]:
        span, head = symbol(span)
        span, args = arguments(skip_whitespace(span))
        return span, (head, args)

    return parse


@recursive_rule
def parse_term(span: Span) -> tuple[Span, Term]:
    """Parse a term: a variable, a function term, or a name (tried in that order)."""
    return _term(span)


@grammar_rule
def parse_function_term(span: Span) -> tuple[Span, FunctionTerm]:
    """Parse a function symbol applied to terms, e.g. `(loc ?t)` (`:object-fluents`)."""
    return _function_term(span)


_function_term: Parser[FunctionTerm] = map_parser(
    parens(_symbol_and_arguments(parse_function_symbol, space_separated_list0(parse_term))),
    lambda parsed: FunctionTerm(parsed[0], parsed[1]),
)

_term: Parser[Term] = alt(parse_variable, _function_term, parse_name)


def atomic_formula(inner: Parser[T]) -> Parser[AtomicFormula[T]]:
    """Create a parser for an atomic formula whose arguments are parsed by the given parser.

    The equality form `(= t1 t2)` is tried before the predicate form `(p t1 ... tn)`.

    :param inner: Parser for the formula's arguments (e.g., names or terms)
    :return: Parser producing an `Equality` or a `PredicateFormula`
    """
    equality = map_parser(
        prefix_expr("=", spaced(inner, inner)),
        lambda parsed: Equality(parsed[0], parsed[1]),
    )
    predicate = map_parser(
        parens(_symbol_and_arguments(parse_predicate, space_separated_list0(inner))),
        lambda parsed: PredicateFormula(parsed[0], parsed[1]),
    )
    return alt(equality, predicate)


def literal(inner: Parser[T]) -> Parser[Literal[T]]:
    """Create a parser for a literal: `(not <atomic formula>)` or an atomic formula."""
    formula = atomic_formula(inner)
    negated = map_parser(prefix_expr("not", formula), lambda f: Literal(f, negated=True))
    positive = map_parser(formula, Literal)
    return alt(negated, positive)


@grammar_rule
def parse_atomic_formula(span: Span) -> tuple[Span, AtomicFormula[Term]]:
    """Parse an atomic formula over terms, as used in goals and effects."""
    return _atomic_formula_of_terms(span)


@grammar_rule
def parse_literal(span: Span) -> tuple[Span, Literal[Term]]:
    """Parse a literal over terms."""
    return _literal_of_terms(span)


_atomic_formula_of_terms = atomic_formula(parse_term)
_literal_of_terms = literal(parse_term)


@grammar_rule
def parse_atomic_formula_skeleton(span: Span) -> tuple[Span, AtomicFormulaSkeleton]:
    """Parse a predicate declaration, e.g. `(at ?x - physob ?l - location)`."""
    span, (predicate, variables) = _formula_skeleton(span)
    return span, AtomicFormulaSkeleton(predicate, variables)


@grammar_rule
def parse_atomic_function_skeleton(span: Span) -> tuple[Span, AtomicFunctionSkeleton]:
    """Parse a function declaration, e.g. `(fuel ?t - truck)`."""
    span, (symbol, variables) = _function_skeleton(span)
    return span, AtomicFunctionSkeleton(symbol, variables)


_variables = typed_list(parse_variable)
_formula_skeleton = parens(_symbol_and_arguments(parse_predicate, _variables))
_function_skeleton = parens(_symbol_and_arguments(parse_function_symbol, _variables))


@grammar_rule
def parse_basic_function_term(span: Span) -> tuple[Span, BasicFunctionTerm]:
    """Parse a function symbol applied to names only, e.g. `total-cost` or `(fuel t1)`."""
    return _basic_function_term(span)


_basic_function_term: Parser[BasicFunctionTerm] = alt(
    map_parser(parse_function_symbol, BasicFunctionTerm),
    map_parser(
        parens(_symbol_and_arguments(parse_function_symbol, space_separated_list0(parse_name))),
        lambda parsed: BasicFunctionTerm(parsed[0], parsed[1]),
    ),
)

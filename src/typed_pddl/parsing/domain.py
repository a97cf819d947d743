"""Implement the grammar of domain definitions and their sections.

Reference: Section 3 ("Domains") of the PDDL 3.1 BNF (Kovacs, 2011).

Sections must appear in the grammar's fixed order; every section other than the domain's name
may be omitted and then defaults to an empty value.
"""

from __future__ import annotations

from typed_pddl.ast.constraints import ConGD, ConstraintAnd
from typed_pddl.ast.domain import Domain
from typed_pddl.ast.formulas import AtomicFormulaSkeleton, AtomicFunctionSkeleton, Literal
from typed_pddl.ast.requirements import Requirement, Requirements
from typed_pddl.ast.symbols import Name, PrimitiveType
from typed_pddl.ast.typed import TypedList
from typed_pddl.errors import UnknownRequirementError
from typed_pddl.parsing.combinators import (
    Parser,
    function_typed_list,
    map_parser,
    optional_sections,
    prefix_expr,
    space_separated_list0,
    space_separated_list1,
    spaced,
    typed_list,
    ws,
)
from typed_pddl.parsing.constraints import parse_con_gd
from typed_pddl.parsing.formulas import (
    literal,
    parse_atomic_formula_skeleton,
    parse_atomic_function_skeleton,
)
from typed_pddl.parsing.lexical import (
    PDDLTokenType,
    match_token,
    parse_name,
    parse_primitive_type,
)
from typed_pddl.parsing.span import Span, grammar_rule
from typed_pddl.parsing.structure import parse_structure_def


@grammar_rule
def parse_requirement(span: Span) -> tuple[Span, Requirement]:
    """Parse a single requirement flag, e.g. `:typing`.

    :raises UnknownRequirementError: If the keyword is not a supported requirement flag
    """
    rest, keyword = match_token(span, PDDLTokenType.KEYWORD)
    try:
        return rest, Requirement(keyword)
    except ValueError:
        raise span.fail("a requirement flag", UnknownRequirementError) from None


@grammar_rule
def parse_require_def(span: Span) -> tuple[Span, Requirements]:
    """Parse a `(:requirements <requirement>+)` section."""
    return _require_def(span)


_require_def: Parser[Requirements] = map_parser(
    prefix_expr(":requirements", space_separated_list1(parse_requirement)),
    Requirements,
)


@grammar_rule
def parse_types_def(span: Span) -> tuple[Span, TypedList[PrimitiveType]]:
    """Parse a `(:types <typed list (name)>)` section."""
    return _types_def(span)


_types_def = prefix_expr(":types", typed_list(parse_primitive_type))


@grammar_rule
def parse_constants_def(span: Span) -> tuple[Span, TypedList[Name]]:
    """Parse a `(:constants <typed list (name)>)` section."""
    return _constants_def(span)


_constants_def = prefix_expr(":constants", typed_list(parse_name))


@grammar_rule
def parse_predicates_def(span: Span) -> tuple[Span, tuple[AtomicFormulaSkeleton, ...]]:
    """Parse a `(:predicates <atomic formula skeleton>+)` section."""
    return _predicates_def(span)


_predicates_def = prefix_expr(":predicates", space_separated_list1(parse_atomic_formula_skeleton))


@grammar_rule
def parse_timeless_def(span: Span) -> tuple[Span, tuple[Literal[Name], ...]]:
    """Parse a deprecated `(:timeless <literal (name)>+)` section (PDDL 1.2)."""
    return _timeless_def(span)


_timeless_def = prefix_expr(":timeless", space_separated_list1(literal(parse_name)))


@grammar_rule
def parse_functions_def(span: Span) -> tuple[Span, TypedList[AtomicFunctionSkeleton]]:
    """Parse a `(:functions ...)` section; untyped function declarations have type `number`."""
    return _functions_def(span)


_functions_def = prefix_expr(":functions", function_typed_list(parse_atomic_function_skeleton))


@grammar_rule
def parse_domain_constraints_def(span: Span) -> tuple[Span, ConGD]:
    """Parse a domain's `(:constraints <con-GD>)` section."""
    return _domain_constraints_def(span)


_domain_constraints_def = prefix_expr(":constraints", parse_con_gd)


@grammar_rule
def parse_domain(span: Span) -> tuple[Span, Domain]:
    """Parse a complete domain definition, `(define (domain <name>) ...)`.

    Whitespace and comments around the definition are consumed; anything else that follows it is
    returned as remaining input.

    :param span: Input positioned at (or before) the domain's opening parenthesis
    :return: Tuple containing the remaining input and the parsed domain
    """
    span, (name, sections) = _domain(span)
    (extends, requirements, types, constants, predicates, timeless, functions, constraints,
     structure) = sections
    return span, Domain(
        name=name,
        extends=extends or (),
        requirements=requirements or Requirements(),
        types=types or TypedList(),
        constants=constants or TypedList(),
        predicates=predicates or (),
        timeless=timeless or (),
        functions=functions or TypedList(),
        constraints=constraints if constraints is not None else ConstraintAnd(),
        structure=structure or (),
    )


_domain = ws(
    prefix_expr(
        "define",
        spaced(
            prefix_expr("domain", parse_name),
            optional_sections(
                prefix_expr(":extends", space_separated_list1(parse_name)),
                _require_def,
                _types_def,
                _constants_def,
                _predicates_def,
                _timeless_def,
                _functions_def,
                _domain_constraints_def,
                space_separated_list0(parse_structure_def),
            ),
        ),
    ),
)

"""Unit tests for parsing complete PDDL domains and their sections."""

import pytest

from typed_pddl.ast import (
    NUMBER_TYPE,
    OBJECT_TYPE,
    Always,
    ConstraintAnd,
    DurativeActionDefinition,
    ExactType,
    Literal,
    Name,
    Predicate,
    PredicateFormula,
    PrimitiveType,
    Requirement,
    Variable,
)
from typed_pddl.errors import ParseError, UnknownRequirementError
from typed_pddl.parsing import (
    parse_constants_def,
    parse_domain,
    parse_functions_def,
    parse_predicates_def,
    parse_require_def,
    parse_requirement,
    parse_timeless_def,
    parse_types_def,
)


def test_parse_briefcase_world_domain(briefcase_world_domain: str) -> None:
    """Verify that the complete briefcase world domain is parsed with all of its sections."""
    # Act - Parse the complete domain, as provided by the test fixture
    rest, domain = parse_domain(briefcase_world_domain)

    # Assert - Expect each section to contain the declared requirements, types, and actions
    assert rest.at_end
    assert domain.name == "briefcase-world"
    assert len(domain.requirements) == 4
    assert Requirement.CONDITIONAL_EFFECTS in domain.requirements
    assert domain.types.values == (PrimitiveType("location"), PrimitiveType("physob"))
    assert domain.constants.values == (Name("B"), Name("P"), Name("D"))
    assert set(domain.constants.types) == {ExactType(PrimitiveType("physob"))}
    assert len(domain.predicates) == 2
    assert len(domain.structure) == 3
    assert [str(a.symbol) for a in domain.actions] == ["mov-B", "put-in", "take-out"]


def test_parse_briefcase_world_domain_partial(briefcase_world_domain_partial: str) -> None:
    """Verify that a domain without structure definitions is parsed."""
    _, domain = parse_domain(briefcase_world_domain_partial)

    assert domain.structure == ()
    assert domain.predicates[1].variables.values == (Variable("x"), Variable("y"))


def test_omitted_domain_sections_default_to_empty() -> None:
    """Verify that every omitted section of a domain defaults to an empty value."""
    # Act
    _, domain = parse_domain("(define (domain empty))")

    # Assert
    assert domain.name == "empty"
    assert domain.extends == ()
    assert domain.requirements.is_empty()
    assert len(domain.types) == 0
    assert len(domain.constants) == 0
    assert domain.predicates == ()
    assert domain.timeless == ()
    assert len(domain.functions) == 0
    assert domain.constraints == ConstraintAnd()
    assert domain.structure == ()


def test_parse_durative_rover_domain(durative_rover_domain: str) -> None:
    """Verify that a temporal, numeric domain (preceded by a comment) is parsed."""
    # Act
    rest, domain = parse_domain(durative_rover_domain)

    # Assert
    assert rest.at_end
    assert domain.name == "rover-time"
    assert Requirement.CONTINUOUS_EFFECTS in domain.requirements
    assert domain.types.types == (OBJECT_TYPE, OBJECT_TYPE)
    assert len(domain.functions) == 3
    assert set(domain.functions.types) == {NUMBER_TYPE}
    assert [str(a.symbol) for a in domain.durative_actions] == ["navigate", "recharge"]

    navigate = domain.durative_actions[0]
    assert isinstance(navigate, DurativeActionDefinition)
    assert navigate.duration is not None
    assert len(navigate.duration) == 2


def test_parse_extends_and_timeless_sections() -> None:
    """Verify that the PDDL 1.2 `:extends` and `:timeless` sections are parsed."""
    # Arrange
    text = """(define (domain child)
                (:extends parent base)
                (:requirements :strips)
                (:predicates (connected ?a ?b) (blocked ?a))
                (:timeless (connected a b) (not (blocked a))))"""

    # Act
    _, domain = parse_domain(text)

    # Assert
    assert domain.extends == (Name("parent"), Name("base"))
    assert len(domain.timeless) == 2
    assert domain.timeless[1] == Literal(
        PredicateFormula(Predicate("blocked"), (Name("a"),)),
        negated=True,
    )


def test_parse_domain_constraints() -> None:
    """Verify that a domain's trajectory constraints are parsed."""
    _, domain = parse_domain("(define (domain safe) (:constraints (always (safe))))")

    assert domain.constraints == Always(PredicateFormula(Predicate("safe")))


def test_parse_domain_rejects_sections_out_of_order() -> None:
    """Verify that domain sections must appear in their fixed order."""
    with pytest.raises(ParseError):
        parse_domain("(define (domain d) (:types t) (:requirements :typing))")


def test_parse_requirement_rejects_unknown_flag() -> None:
    """Verify that an unknown requirement flag raises an UnknownRequirementError."""
    with pytest.raises(UnknownRequirementError) as error_info:
        parse_requirement(":teleportation")

    assert error_info.value.offset == 0


def test_unknown_requirement_is_not_skipped_as_optional() -> None:
    """Verify that an unknown requirement aborts the parse instead of omitting the section."""
    # Arrange
    text = "(define (domain broken)\n  (:requirements :strips :teleportation)\n  (:predicates (p)))"

    # Act/Assert
    with pytest.raises(UnknownRequirementError) as error_info:
        parse_domain(text)

    assert error_info.value.line == 2
    assert error_info.value.column == len("  (:requirements :strips ")


def test_parse_require_def_deduplicates() -> None:
    """Verify that repeated requirement flags are declared only once, in first-seen order."""
    _, requirements = parse_require_def("(:requirements :typing :strips :typing)")

    assert tuple(requirements) == (Requirement.TYPING, Requirement.STRIPS)


def test_parse_types_def_with_supertypes() -> None:
    """Verify that a type hierarchy is parsed as a typed list of types."""
    _, types = parse_types_def("(:types truck airplane - vehicle vehicle - object city)")

    assert types.groups() == [
        ((PrimitiveType("truck"), PrimitiveType("airplane")), ExactType(PrimitiveType("vehicle"))),
        ((PrimitiveType("vehicle"), PrimitiveType("city")), OBJECT_TYPE),
    ]


def test_parse_constants_def() -> None:
    """Verify that constants without a type default to `object`."""
    _, constants = parse_constants_def("(:constants home office)")

    assert constants.types == (OBJECT_TYPE, OBJECT_TYPE)


def test_parse_predicates_def_requires_a_predicate() -> None:
    """Verify that a `:predicates` section must declare at least one predicate."""
    with pytest.raises(ParseError):
        parse_predicates_def("(:predicates)")


def test_parse_functions_def_with_explicit_types() -> None:
    """Verify that function declarations may be typed explicitly or default to `number`."""
    # Act
    _, functions = parse_functions_def("(:functions (loc ?t) - location (fuel ?t))")

    # Assert
    assert [str(f.symbol) for f in functions.values] == ["loc", "fuel"]
    assert functions.types == (ExactType(PrimitiveType("location")), NUMBER_TYPE)


def test_parse_timeless_def() -> None:
    """Verify that timeless literals are parsed over names."""
    _, timeless = parse_timeless_def("(:timeless (road a b))")

    assert timeless == (Literal(PredicateFormula(Predicate("road"), (Name("a"), Name("b")))),)

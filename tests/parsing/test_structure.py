"""Unit tests for parsing actions, durative actions, and derived predicates."""

import pytest

from typed_pddl.ast import (
    ActionDefinition,
    DerivedPredicate,
    DurationConstraint,
    DurativeActionDefinition,
    Equality,
    ExactType,
    ForallEffect,
    Name,
    Negation,
    NotAtomicEffect,
    OverTimedGD,
    PrimitiveType,
    Variable,
    WhenEffect,
)
from typed_pddl.errors import ParseError
from typed_pddl.parsing import (
    parse_action_def,
    parse_da_def,
    parse_derived_predicate,
    parse_structure_def,
)

LOCATION = ExactType(PrimitiveType("location"))
PHYSOB = ExactType(PrimitiveType("physob"))


def test_parse_mov_b_action(mov_b_action: str) -> None:
    """Verify that the `mov-b` action of the briefcase world is parsed."""
    # Act
    rest, action = parse_action_def(mov_b_action)

    # Assert
    assert rest.at_end
    assert action.symbol == "mov-b"
    assert action.parameters.values == (Variable("m"), Variable("l"))
    assert action.parameters.types == (LOCATION, LOCATION)

    assert action.precondition is not None
    assert len(action.precondition) == 2
    assert action.precondition[1] == Negation(Equality(Variable("m"), Variable("l")))

    assert action.effect is not None
    assert len(action.effect) == 3
    assert isinstance(action.effect[1], NotAtomicEffect)
    assert isinstance(action.effect[2], ForallEffect)


def test_parse_put_in_action(put_in_action: str) -> None:
    """Verify that the `put-in` action, whose effect is a single `when`, is parsed."""
    # Act
    _, action = parse_action_def(put_in_action)

    # Assert
    assert action.parameters.types == (PHYSOB, LOCATION)
    assert action.precondition is not None
    assert action.precondition[0] == Negation(Equality(Variable("x"), Name("B")))
    assert action.effect is not None
    assert isinstance(action.effect.single(), WhenEffect)


def test_parse_take_out_action(take_out_action: str) -> None:
    """Verify that the `take-out` action, whose effect is a single negation, is parsed."""
    _, action = parse_action_def(take_out_action)

    assert action.symbol == "take-out"
    assert action.effect is not None
    assert isinstance(action.effect.single(), NotAtomicEffect)


@pytest.mark.parametrize(
    "text",
    [
        "(:action noop :parameters ())",
        "(:action noop :parameters () :precondition () :effect ())",
        "(:action noop :parameters ( ) :precondition ( ) :effect ( ))",
    ],
)
def test_omitted_and_empty_sections_are_equivalent(text: str) -> None:
    """Verify that omitted and explicitly empty action sections are both parsed as None."""
    _, action = parse_action_def(text)

    assert action == ActionDefinition(Name("noop"))


def test_parse_action_with_effect_only() -> None:
    """Verify that an action may omit its precondition but still declare an effect."""
    _, action = parse_action_def("(:action flip :parameters (?c) :effect (heads ?c))")

    assert action.precondition is None
    assert action.effect is not None
    assert len(action.effect) == 1


def test_parse_action_requires_parameters() -> None:
    """Verify that an action without a `:parameters` section is rejected."""
    with pytest.raises(ParseError):
        parse_action_def("(:action flip :effect (heads c))")


def test_parse_action_rejects_sections_out_of_order() -> None:
    """Verify that an action's sections must appear in their fixed order."""
    with pytest.raises(ParseError):
        parse_action_def("(:action flip :parameters (?c) :effect (heads ?c) :precondition (c ?c))")


def test_parse_durative_action() -> None:
    """Verify that a durative action with duration, condition, and effect is parsed."""
    # Arrange
    text = """(:durative-action recharge
                :parameters (?r - rover ?w - waypoint)
                :duration (= ?duration 5)
                :condition (over all (at ?r ?w))
                :effect (increase (energy ?r) (* #t 2)))"""

    # Act
    rest, action = parse_da_def(text)

    # Assert
    assert rest.at_end
    assert isinstance(action, DurativeActionDefinition)
    assert action.symbol == "recharge"
    assert isinstance(action.duration, DurationConstraint)
    assert isinstance(action.condition, OverTimedGD)
    assert action.effect is not None


def test_parse_durative_action_with_empty_sections() -> None:
    """Verify that the sections of a durative action may be explicitly empty."""
    _, action = parse_da_def("(:durative-action wait :parameters () :duration () :condition ())")

    assert action == DurativeActionDefinition(Name("wait"))


def test_parse_derived_predicate() -> None:
    """Verify that a derived predicate pairs a predicate declaration with its definition."""
    # Act
    _, derived = parse_derived_predicate(
        "(:derived (clear ?x - block) (not (exists (?y - block) (on ?y ?x))))",
    )

    # Assert
    assert isinstance(derived, DerivedPredicate)
    assert derived.predicate.predicate == "clear"
    assert isinstance(derived.goal, Negation)


@pytest.mark.parametrize(
    ("text", "expected_type"),
    [
        ("(:action a :parameters ())", ActionDefinition),
        ("(:durative-action a :parameters ())", DurativeActionDefinition),
        ("(:derived (p) (q))", DerivedPredicate),
    ],
)
def test_parse_structure_def(text: str, expected_type: type) -> None:
    """Verify that each kind of structure definition is recognized."""
    _, structure = parse_structure_def(text)

    assert isinstance(structure, expected_type)

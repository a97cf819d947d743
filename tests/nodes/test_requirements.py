"""Unit tests for PDDL requirement flags and their shorthands."""

import pytest

from typed_pddl.ast import Requirement, Requirements


@pytest.mark.parametrize(
    ("shorthand", "expected"),
    [
        (
            Requirement.QUANTIFIED_PRECONDITIONS,
            {Requirement.EXISTENTIAL_PRECONDITIONS, Requirement.UNIVERSAL_PRECONDITIONS},
        ),
        (Requirement.FLUENTS, {Requirement.NUMERIC_FLUENTS, Requirement.OBJECT_FLUENTS}),
        (Requirement.TYPING, {Requirement.TYPING}),
    ],
)
def test_requirement_expand(shorthand: Requirement, expected: set[Requirement]) -> None:
    """Verify that shorthands expand into the requirements they stand for."""
    assert set(shorthand.expand()) == expected


def test_adl_expands_to_eight_requirements() -> None:
    """Verify that `:adl` stands for STRIPS, typing, and the ADL precondition/effect flags."""
    # Act
    expanded = Requirement.ADL.expand()

    # Assert
    assert len(expanded) == 8
    assert Requirement.STRIPS in expanded
    assert Requirement.CONDITIONAL_EFFECTS in expanded
    assert Requirement.QUANTIFIED_PRECONDITIONS not in expanded


def test_adl_contains_quantified_preconditions() -> None:
    """Verify that `:adl` transitively includes the `:quantified-preconditions` shorthand."""
    assert Requirement.ADL.contains(Requirement.QUANTIFIED_PRECONDITIONS)
    assert Requirement.ADL.contains(Requirement.UNIVERSAL_PRECONDITIONS)
    assert not Requirement.ADL.contains(Requirement.NUMERIC_FLUENTS)


def test_requirement_contains_itself() -> None:
    """Verify that every requirement contains itself."""
    for requirement in Requirement:
        assert requirement.contains(requirement)


def test_empty_requirements_imply_strips() -> None:
    """Verify that declaring no requirements implies `:strips`."""
    # Arrange
    requirements = Requirements()

    # Act/Assert
    assert requirements.is_empty()
    assert requirements.effective() == {Requirement.STRIPS}
    assert Requirement.STRIPS in requirements


def test_requirements_membership_includes_shorthands() -> None:
    """Verify that membership accounts for requirements declared through shorthands."""
    requirements = Requirements.of([Requirement.FLUENTS])

    assert Requirement.NUMERIC_FLUENTS in requirements
    assert Requirement.FLUENTS in requirements
    assert Requirement.STRIPS not in requirements


def test_requirements_deduplicate_in_declared_order() -> None:
    """Verify that repeated declarations are dropped, keeping the first occurrence's position."""
    requirements = Requirements(
        (Requirement.TYPING, Requirement.STRIPS, Requirement.TYPING, Requirement.EQUALITY),
    )

    assert tuple(requirements) == (Requirement.TYPING, Requirement.STRIPS, Requirement.EQUALITY)
    assert len(requirements) == 3


def test_requirement_is_its_keyword() -> None:
    """Verify that requirement flags are stored as the keyword written in PDDL."""
    assert Requirement(":action-costs") is Requirement.ACTION_COSTS
    assert str(Requirement.ACTION_COSTS) == ":action-costs"

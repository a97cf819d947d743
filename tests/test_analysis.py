"""Unit tests for determining the requirements used by parsed PDDL definitions."""

import pytest

from tests.strategies import get_test_data_path
from typed_pddl.analysis import iter_nodes, undeclared_requirements, used_requirements
from typed_pddl.ast import Name, Requirement
from typed_pddl.parsing import (
    PDDLParser,
    load_domain,
    parse_con_gd,
    parse_derived_predicate,
    parse_effect,
    parse_gd,
    parse_init_el,
    parse_pre_gd,
)


def test_briefcase_domain_uses_undeclared_negation(briefcase_world_domain: str) -> None:
    """Verify that the `briefcase-world` domain's negated preconditions are reported.

    The domain writes `(not (= ?m ?l))` in preconditions without declaring
    `:negative-preconditions`.
    """
    # Arrange
    domain = PDDLParser(briefcase_world_domain).domain()

    # Act
    undeclared = undeclared_requirements(domain)

    # Assert
    assert undeclared == [Requirement.NEGATIVE_PRECONDITIONS]


def test_briefcase_domain_used_requirements(briefcase_world_domain: str) -> None:
    """Verify that the constructs of the `briefcase-world` domain map to their requirements."""
    domain = PDDLParser(briefcase_world_domain).domain()

    assert used_requirements(domain) == {
        Requirement.TYPING,
        Requirement.NEGATIVE_PRECONDITIONS,
        Requirement.EQUALITY,
        Requirement.CONDITIONAL_EFFECTS,
    }


def test_rover_domain_declares_everything_it_uses(durative_rover_domain: str) -> None:
    """Verify that a temporal numeric domain declaring its requirements has none undeclared."""
    # Arrange
    domain = PDDLParser(durative_rover_domain).domain()

    # Act
    used = used_requirements(domain)

    # Assert
    assert {
        Requirement.DURATIVE_ACTIONS,
        Requirement.DURATION_INEQUALITIES,
        Requirement.NUMERIC_FLUENTS,
        Requirement.CONTINUOUS_EFFECTS,
    } <= used
    assert undeclared_requirements(domain) == []


def test_blocksworld_domain_file_declares_everything_it_uses() -> None:
    """Verify that the blocksworld domain file has no undeclared requirements."""
    domain = load_domain(get_test_data_path() / "pddl" / "blocksworld_domain.pddl")

    assert undeclared_requirements(domain) == []


def test_preference_problem_reports_typed_objects(preference_problem: str) -> None:
    """Verify that a problem with typed objects but no `:typing` declaration is reported."""
    # Arrange
    problem = PDDLParser(preference_problem).problem()

    # Act/Assert
    assert {Requirement.PREFERENCES, Requirement.CONSTRAINTS} <= used_requirements(problem)
    assert undeclared_requirements(problem) == [Requirement.TYPING]


def test_strips_is_implied_when_nothing_is_declared() -> None:
    """Verify that a domain without requirements may still use plain STRIPS constructs."""
    domain = PDDLParser(
        "(define (domain d) (:predicates (p)) (:action a :parameters () :effect (p)))",
    ).domain()

    assert used_requirements(domain) == frozenset()
    assert undeclared_requirements(domain) == []


def test_shorthand_declarations_cover_their_expansions() -> None:
    """Verify that declaring `:adl` covers quantified and disjunctive preconditions."""
    domain = PDDLParser(
        """(define (domain d) (:requirements :adl)
             (:action a :parameters (?x)
               :precondition (or (p ?x) (exists (?y) (q ?x ?y)) (forall (?z) (r ?z)))
               :effect (when (not (p ?x)) (p ?x))))""",
    ).domain()

    assert undeclared_requirements(domain) == []


@pytest.mark.parametrize(
    ("effect", "expected"),
    [
        ("(increase (total-cost) 5)", {Requirement.ACTION_COSTS}),
        ("(increase (fuel) 5)", {Requirement.NUMERIC_FLUENTS}),
        ("(decrease (total-cost) 1)", {Requirement.ACTION_COSTS, Requirement.NUMERIC_FLUENTS}),
        ("(assign (holding) undefined)", {Requirement.OBJECT_FLUENTS}),
        ("(and (p) (not (q)))", set()),
    ],
)
def test_effect_requirements(effect: str, expected: set[Requirement]) -> None:
    """Verify that effects map to the requirements they depend on."""
    # Arrange
    _, parsed = parse_effect(effect)

    # Act/Assert
    assert used_requirements(parsed) == expected


@pytest.mark.parametrize(
    ("goal", "expected"),
    [
        ("(or (p) (q))", {Requirement.DISJUNCTIVE_PRECONDITIONS}),
        ("(imply (p) (q))", {Requirement.DISJUNCTIVE_PRECONDITIONS}),
        ("(exists (?x) (p ?x))", {Requirement.EXISTENTIAL_PRECONDITIONS}),
        ("(forall (?x - block) (p ?x))", {Requirement.UNIVERSAL_PRECONDITIONS, Requirement.TYPING}),
        ("(not (= a b))", {Requirement.NEGATIVE_PRECONDITIONS, Requirement.EQUALITY}),
        ("(> (fuel) 2)", {Requirement.NUMERIC_FLUENTS}),
    ],
)
def test_goal_requirements(goal: str, expected: set[Requirement]) -> None:
    """Verify that goal descriptions map to the requirements they depend on."""
    _, parsed = parse_gd(goal)

    assert used_requirements(parsed) == expected


def test_other_construct_requirements() -> None:
    """Verify requirement detection for preferences, constraints, derived predicates, and TILs."""
    # Act
    _, preference = parse_pre_gd("(preference p (clean a))")
    _, constraint = parse_con_gd("(always (clean a))")
    _, derived = parse_derived_predicate("(:derived (above ?x ?y) (on ?x ?y))")
    _, timed_literal = parse_init_el("(at 10 (clean a))")

    # Assert
    assert used_requirements(preference) == {Requirement.PREFERENCES}
    assert used_requirements(constraint) == {Requirement.CONSTRAINTS}
    assert used_requirements(derived) == {Requirement.DERIVED_PREDICATES}
    assert used_requirements(timed_literal) == {Requirement.TIMED_INITIAL_LITERALS}


def test_iter_nodes_visits_every_symbol() -> None:
    """Verify that iterating over a goal yields the goal itself and every nested name."""
    _, goal = parse_gd("(and (on a b) (on b c))")

    nodes = list(iter_nodes(goal))

    assert nodes[0] is goal
    assert [n for n in nodes if isinstance(n, Name)] == [Name(t) for t in "abbc"]

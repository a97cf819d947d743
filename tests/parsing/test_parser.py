"""Unit tests for the PDDL parser entry points and their settings."""

from pathlib import Path

import pytest

from tests.strategies import get_test_data_path
from typed_pddl.errors import (
    NestingTooDeepError,
    ParseError,
    TrailingInputError,
    UnknownRequirementError,
)
from typed_pddl.io.settings import ParserSettings
from typed_pddl.parsing import PDDLParser, load_domain, load_problem, parse_gd


def test_parser_parses_domain(briefcase_world_domain: str) -> None:
    """Verify that the parser produces the domain defined by a complete text."""
    domain = PDDLParser(briefcase_world_domain).domain()

    assert domain.name == "briefcase-world"


def test_parser_parses_problem(get_paid_problem: str) -> None:
    """Verify that the parser produces the problem defined by a complete text."""
    problem = PDDLParser(get_paid_problem).problem()

    assert problem.name == "get-paid"


def test_parser_rejects_trailing_input(get_paid_problem: str) -> None:
    """Verify that text following a complete definition raises a TrailingInputError."""
    # Arrange
    text = get_paid_problem + "\n(extra)"

    # Act/Assert - Expect the extra form to be reported where it begins
    with pytest.raises(TrailingInputError) as error_info:
        PDDLParser(text).problem()

    assert error_info.value.offset == len(get_paid_problem) + 1


def test_parser_allows_trailing_comments(get_paid_problem: str) -> None:
    """Verify that whitespace and comments after a definition are not trailing input."""
    problem = PDDLParser(get_paid_problem + "\n; end of file\n").problem()

    assert problem.domain == "briefcase-world"


def test_parser_allows_trailing_input_when_configured(get_paid_problem: str) -> None:
    """Verify that trailing input is ignored when complete input is not required."""
    settings = ParserSettings(require_complete_input=False)

    problem = PDDLParser(get_paid_problem + " (extra)", settings).problem()

    assert problem.name == "get-paid"


def test_parser_rejects_deep_nesting() -> None:
    """Verify that deeply nested expressions raise a NestingTooDeepError rather than crashing."""
    # Arrange
    depth = 100
    text = "(and " * depth + "(p)" + ")" * depth

    # Act/Assert
    with pytest.raises(NestingTooDeepError) as error_info:
        PDDLParser(text).parse(parse_gd)

    assert error_info.value.max_depth == ParserSettings().max_nesting_depth


def test_nesting_error_is_not_a_parse_error() -> None:
    """Verify that exceeding the nesting ceiling cannot be recovered from by alternatives."""
    assert not issubclass(NestingTooDeepError, ParseError)


def test_parser_respects_configured_nesting_depth() -> None:
    """Verify that the nesting ceiling is taken from the parser settings."""
    # Arrange
    text = "(and (and (and (p))))"
    shallow = ParserSettings(max_nesting_depth=2)

    # Act/Assert
    assert PDDLParser(text).parse(parse_gd) is not None
    with pytest.raises(NestingTooDeepError):
        PDDLParser(text, shallow).parse(parse_gd)


def test_parse_error_reports_line_and_column() -> None:
    """Verify that parse errors locate the failure by line and column."""
    # Arrange
    text = "(define (domain d)\n  (:predicates (p) 42))"

    # Act/Assert
    with pytest.raises(ParseError) as error_info:
        PDDLParser(text).domain()

    assert error_info.value.line == 2
    assert "line 2" in str(error_info.value)


def test_parse_error_points_into_a_later_action() -> None:
    """Verify that an error inside a later action's effect is located there, not at its start."""
    # Arrange
    lines = [
        "(define (domain d)",
        "  (:predicates (p) (q))",
        "  (:action a :parameters () :effect (p))",
        "  (:action b :parameters () :effect (q))",
        "  (:action c :parameters () :effect (and (p) ] (q))))",
    ]

    # Act
    with pytest.raises(ParseError) as error_info:
        PDDLParser("\n".join(lines)).domain()

    # Assert - Expect the stray bracket on the last line to be reported
    assert error_info.value.line == 5
    assert error_info.value.column == lines[4].index("]")


def test_load_domain_and_problem_from_files() -> None:
    """Verify that a domain and a problem are loaded from PDDL files."""
    # Arrange
    pddl_dir = get_test_data_path() / "pddl"

    # Act
    domain = load_domain(pddl_dir / "blocksworld_domain.pddl")
    problem = load_problem(pddl_dir / "blocksworld_problem.pddl")

    # Assert
    assert domain.name == problem.domain == "blocksworld"
    assert [str(a.symbol) for a in domain.actions] == ["pick-up", "put-down", "stack", "unstack"]
    assert len(domain.predicates) == 5
    assert problem.objects.values == ("a", "b", "c")
    assert len(problem.init) == 7
    assert len(problem.goal) == 2


def test_load_malformed_domain() -> None:
    """Verify that loading a domain with an unknown requirement raises an error."""
    with pytest.raises(UnknownRequirementError):
        load_domain(get_test_data_path() / "pddl" / "malformed_domain.pddl")


def test_load_nonexistent_file(tmp_path: Path) -> None:
    """Verify that loading a nonexistent file raises a FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_problem(tmp_path / "missing.pddl")

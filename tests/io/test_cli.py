"""Unit tests for the command-line interface for parsing PDDL files."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from tests.strategies import get_test_data_path
from typed_pddl.io.cli import cli

PDDL_DIR = get_test_data_path() / "pddl"

NESTED_DOMAIN = """\
(define (domain nested)
  (:predicates (p))
  (:action a :parameters () :precondition (and (and (and (and (p))))) :effect (p)))
"""


@pytest.fixture
def runner() -> CliRunner:
    """Return a runner that invokes the command-line interface in isolation."""
    return CliRunner()


def test_domain_summary(runner: CliRunner) -> None:
    """Verify that parsing a domain file prints a summary of its sections."""
    # Act
    result = runner.invoke(cli, ["domain", str(PDDL_DIR / "blocksworld_domain.pddl")])

    # Assert
    assert result.exit_code == 0
    assert "Domain: blocksworld" in result.output
    assert "pick-up" in result.output
    assert "Undeclared requirements" not in result.output


def test_problem_summary(runner: CliRunner) -> None:
    """Verify that parsing a problem file prints a summary of its sections."""
    result = runner.invoke(cli, ["problem", str(PDDL_DIR / "blocksworld_problem.pddl")])

    assert result.exit_code == 0
    assert "Problem: stack-three" in result.output


def test_problem_tree(runner: CliRunner) -> None:
    """Verify that the `--tree` option displays the parsed abstract syntax tree."""
    result = runner.invoke(
        cli,
        ["problem", str(PDDL_DIR / "blocksworld_problem.pddl"), "--tree"],
    )

    assert result.exit_code == 0
    assert "init:" in result.output
    assert "PredicateFormula" in result.output


def test_domain_pddl_rendering(runner: CliRunner) -> None:
    """Verify that the `--pddl` option prints the domain's canonical PDDL rendering."""
    result = runner.invoke(cli, ["domain", str(PDDL_DIR / "blocksworld_domain.pddl"), "--pddl"])

    assert result.exit_code == 0
    assert "(:action pick-up" in result.output
    assert "(:requirements :strips :typing)" in result.output


def test_malformed_domain_fails(runner: CliRunner) -> None:
    """Verify that a domain which fails to parse is reported with a nonzero exit code."""
    # Act
    result = runner.invoke(cli, ["domain", str(PDDL_DIR / "malformed_domain.pddl")])

    # Assert
    assert result.exit_code == 1
    assert "Failed to parse domain" in result.output


def test_undeclared_requirements_are_reported(
    runner: CliRunner,
    briefcase_world_domain: str,
    tmp_path: Path,
) -> None:
    """Verify that requirements used but not declared by a domain are reported."""
    # Arrange
    domain_path = tmp_path / "briefcase.pddl"
    domain_path.write_text(briefcase_world_domain)

    # Act
    result = runner.invoke(cli, ["domain", str(domain_path)])

    # Assert
    assert result.exit_code == 0
    assert "Undeclared requirements: :negative-preconditions" in result.output


def test_config_limits_nesting_depth(runner: CliRunner, tmp_path: Path) -> None:
    """Verify that the nesting ceiling from a `--config` file applies to parsing."""
    # Arrange
    domain_path = tmp_path / "nested.pddl"
    domain_path.write_text(NESTED_DOMAIN)
    shallow_config = tmp_path / "shallow.yaml"
    shallow_config.write_text("max_nesting_depth: 2\n")

    # Act
    default_result = runner.invoke(cli, ["domain", str(domain_path)])
    shallow_result = runner.invoke(
        cli,
        ["domain", str(domain_path), "--config", str(shallow_config)],
    )

    # Assert
    assert default_result.exit_code == 0
    assert shallow_result.exit_code == 1
    assert "Failed to parse domain" in shallow_result.output


def test_config_sets_log_level(runner: CliRunner, tmp_path: Path) -> None:
    """Verify that an `INFO` log level from a `--config` file reports what was parsed."""
    config = tmp_path / "verbose.yaml"
    config.write_text("log_level: INFO\n")

    result = runner.invoke(
        cli,
        ["domain", str(PDDL_DIR / "blocksworld_domain.pddl"), "--config", str(config)],
    )

    assert result.exit_code == 0
    assert "Parsed domain 'blocksworld'" in result.output


def test_invalid_config_fails(runner: CliRunner, tmp_path: Path) -> None:
    """Verify that a settings file with unknown keys is reported with a nonzero exit code."""
    config = tmp_path / "invalid.yaml"
    config.write_text("strict_requirements: true\n")

    result = runner.invoke(
        cli,
        ["domain", str(PDDL_DIR / "blocksworld_domain.pddl"), "--config", str(config)],
    )

    assert result.exit_code == 1
    assert "Failed to parse domain" in result.output


def test_problem_with_metric_and_length(runner: CliRunner, tmp_path: Path) -> None:
    """Verify that a problem with `:metric` and `:length` sections is summarized and printed."""
    # Arrange
    problem_path = tmp_path / "costed.pddl"
    problem_path.write_text(
        "(define (problem costed) (:domain blocksworld)\n"
        "  (:objects a b - block)\n"
        "  (:init (clear a) (clear b))\n"
        "  (:goal (on a b))\n"
        "  (:metric minimize (total-cost))\n"
        "  (:length (:serial 3) (:parallel 2)))\n"
    )

    # Act
    result = runner.invoke(cli, ["problem", str(problem_path), "--pddl"])

    # Assert
    assert result.exit_code == 0
    assert "minimize" in result.output
    assert "(:metric minimize (total-cost))" in result.output
    assert "(:length (:serial 3) (:parallel 2))" in result.output

"""Define the command-line interface for parsing and inspecting PDDL files."""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path

import click
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from typed_pddl.analysis import undeclared_requirements
from typed_pddl.ast.domain import Domain
from typed_pddl.ast.problem import Problem
from typed_pddl.ast.symbols import Symbol
from typed_pddl.errors import PDDLError
from typed_pddl.io.logging import configure_logging, console, log_info
from typed_pddl.io.settings import ParserSettings, load_settings
from typed_pddl.parsing.parser import load_domain, load_problem
from typed_pddl.printing import to_pddl

logger = logging.getLogger(__name__)

PDDL_FILE = click.Path(exists=True, dir_okay=False, path_type=Path)
SETTINGS_FILE = click.Path(exists=True, dir_okay=False, path_type=Path)


def _render_summary_table(title: str, rows: list[tuple[str, str]]) -> Table:
    """Render a two-column table summarizing the sections of a parsed definition."""
    table = Table(title=title, show_lines=False)
    table.add_column("Section", style="cyan", no_wrap=True)
    table.add_column("Contents", style="magenta")

    for section, contents in rows:
        table.add_row(section, contents)
    return table


def summarize_domain(domain: Domain) -> Table:
    """Summarize the sections of a parsed domain as a table."""
    requirements = " ".join(domain.requirements) or "(:strips implied)"
    actions = ", ".join(str(s.symbol) for s in domain.actions + domain.durative_actions)
    rows = [
        ("Requirements", requirements),
        ("Types", str(len(domain.types))),
        ("Constants", str(len(domain.constants))),
        ("Predicates", str(len(domain.predicates))),
        ("Functions", str(len(domain.functions))),
        ("Structure", f"{len(domain.structure)} ({actions or '-'})"),
    ]
    return _render_summary_table(f"Domain: {domain.name}", rows)


def summarize_problem(problem: Problem) -> Table:
    """Summarize the sections of a parsed problem as a table."""
    rows = [
        ("Domain", str(problem.domain)),
        ("Requirements", " ".join(problem.requirements) or "(:strips implied)"),
        ("Objects", str(len(problem.objects))),
        ("Init", str(len(problem.init))),
        ("Goal", str(len(problem.goal))),
        ("Metric", "-" if problem.metric is None else problem.metric.optimization.value),
    ]
    return _render_summary_table(f"Problem: {problem.name}", rows)


def build_tree(node: object, label: str | None = None, tree: Tree | None = None) -> Tree:
    """Build a rich tree displaying the structure of an AST node.

    :param node: Node of the PDDL abstract syntax tree
    :param label: Label for the node (e.g., the name of the field holding it; optional)
    :param tree: Tree to which the node is attached (if None, a new tree is created)
    :return: Tree rooted at the given node (or the given tree, extended with the node)
    """
    prefix = f"[dim]{label}:[/] " if label else ""

    if isinstance(node, (str, Symbol)) or not dataclasses.is_dataclass(node):
        text = prefix + escape(str(node) if not isinstance(node, tuple) else f"{len(node)} item(s)")
    else:
        text = prefix + f"[bold]{type(node).__name__}[/]"

    branch = Tree(text) if tree is None else tree.add(text)

    if isinstance(node, tuple):
        for child in node:
            build_tree(child, tree=branch)
    elif dataclasses.is_dataclass(node) and not isinstance(node, (Symbol, type)):
        for f in dataclasses.fields(node):
            build_tree(getattr(node, f.name), label=f.name, tree=branch)
    return branch


def _load_settings(config: Path | None) -> ParserSettings:
    """Load parser settings from the given YAML file, or use the defaults."""
    settings = ParserSettings() if config is None else load_settings(config)
    configure_logging(settings.log_level)
    return settings


def _report(definition: Domain | Problem, tree: bool, pddl: bool) -> None:
    """Print the summary (and optionally the tree and PDDL rendering) of a parsed definition."""
    if isinstance(definition, Domain):
        console.print(summarize_domain(definition))
    else:
        console.print(summarize_problem(definition))

    undeclared = undeclared_requirements(definition)
    if undeclared:
        console.print(f"[yellow]Undeclared requirements: {' '.join(undeclared)}[/]")

    if tree:
        console.print(build_tree(definition))
    if pddl:
        console.print(to_pddl(definition), markup=False, highlight=False, soft_wrap=True)


@click.group()
def cli() -> None:
    """Parse PDDL 3.1 domain and problem files."""


@cli.command()
@click.argument("path", type=PDDL_FILE)
@click.option("--tree", is_flag=True, help="Display the parsed abstract syntax tree.")
@click.option("--pddl", is_flag=True, help="Display the canonical PDDL rendering.")
@click.option("--config", type=SETTINGS_FILE, default=None, help="YAML file of parser settings.")
def domain(path: Path, tree: bool, pddl: bool, config: Path | None) -> None:
    """Parse a PDDL domain file and summarize its sections."""
    try:
        settings = _load_settings(config)
        parsed = load_domain(path, settings)
    except (PDDLError, RuntimeError) as error:
        console.print(f"[red]Failed to parse domain {escape(str(path))}: {escape(str(error))}[/]")
        raise SystemExit(1) from error

    log_info(f"Parsed domain '{parsed.name}' from {path}.")
    _report(parsed, tree, pddl)


@cli.command()
@click.argument("path", type=PDDL_FILE)
@click.option("--tree", is_flag=True, help="Display the parsed abstract syntax tree.")
@click.option("--pddl", is_flag=True, help="Display the canonical PDDL rendering.")
@click.option("--config", type=SETTINGS_FILE, default=None, help="YAML file of parser settings.")
def problem(path: Path, tree: bool, pddl: bool, config: Path | None) -> None:
    """Parse a PDDL problem file and summarize its sections."""
    try:
        settings = _load_settings(config)
        parsed = load_problem(path, settings)
    except (PDDLError, RuntimeError) as error:
        console.print(f"[red]Failed to parse problem {escape(str(path))}: {escape(str(error))}[/]")
        raise SystemExit(1) from error

    log_info(f"Parsed problem '{parsed.name}' from {path}.")
    _report(parsed, tree, pddl)


if __name__ == "__main__":
    cli()

"""Implement the entry point for parsing complete PDDL domain and problem texts.

Reference: Complete BNF description of PDDL 3.1 (Kovacs, 2011)
"""

from __future__ import annotations

import logging
from pathlib import Path

from typed_pddl.ast.domain import Domain
from typed_pddl.ast.problem import Problem
from typed_pddl.errors import NestingTooDeepError, TrailingInputError
from typed_pddl.io.settings import ParserSettings
from typed_pddl.parsing.domain import parse_domain
from typed_pddl.parsing.lexical import skip_whitespace
from typed_pddl.parsing.problem import parse_problem
from typed_pddl.parsing.span import NodeT, Rule, Span

logger = logging.getLogger(__name__)


class PDDLParser:
    """A parser for the Planning Domain Definition Language (PDDL 3.1)."""

    def __init__(self, text: str, settings: ParserSettings | None = None) -> None:
        """Initialize the PDDL parser for the given text.

        :param text: Complete PDDL source text (e.g., the contents of a domain file)
        :param settings: Optional parser settings (if None, the defaults are used)
        """
        self.text = text
        self.settings = settings if settings is not None else ParserSettings()

    def parse(self, rule: Rule[NodeT]) -> NodeT:
        """Parse the text using the given grammar rule.

        :param rule: Grammar rule expected to match the text (e.g., `parse_gd`)
        :return: AST node produced by the rule
        :raises ParseError: If the rule does not match the text
        :raises TrailingInputError: If complete input is required and the rule left some unparsed
        :raises NestingTooDeepError: If the text nests expressions beyond the configured ceiling
        """
        span = Span(self.text, max_depth=self.settings.max_nesting_depth)
        try:
            rest, node = rule(span)
        except RecursionError as error:
            line, column = span.line_column()
            raise NestingTooDeepError(span.max_depth, span.offset, line, column) from error

        rest = skip_whitespace(rest)
        if self.settings.require_complete_input and not rest.at_end:
            raise rest.fail("the end of input", TrailingInputError)

        return node

    def domain(self) -> Domain:
        """Parse the text as a PDDL domain definition."""
        domain = self.parse(parse_domain)
        logger.debug(
            f"Parsed domain '{domain.name}' with {len(domain.requirements)} requirements, "
            f"{len(domain.types)} types, {len(domain.predicates)} predicates, "
            f"and {len(domain.structure)} structure definitions.",
        )
        return domain

    def problem(self) -> Problem:
        """Parse the text as a PDDL problem definition."""
        problem = self.parse(parse_problem)
        logger.debug(
            f"Parsed problem '{problem.name}' for domain '{problem.domain}' with "
            f"{len(problem.objects)} objects and {len(problem.init)} initial-state elements.",
        )
        return problem


def load_domain(path: Path | str, settings: ParserSettings | None = None) -> Domain:
    """Load and parse a PDDL domain from the given file.

    :param path: Path to a PDDL domain file
    :param settings: Optional parser settings (if None, the defaults are used)
    :return: Parsed PDDL domain
    :raises FileNotFoundError: If the file does not exist
    """
    return PDDLParser(_read_pddl_file(Path(path)), settings).domain()


def load_problem(path: Path | str, settings: ParserSettings | None = None) -> Problem:
    """Load and parse a PDDL problem from the given file."""
    return PDDLParser(_read_pddl_file(Path(path)), settings).problem()


def _read_pddl_file(path: Path) -> str:
    """Read the contents of a PDDL file."""
    if not path.exists():
        raise FileNotFoundError(f"Cannot parse nonexistent PDDL file: {path}")

    return path.read_text()

"""Parse PDDL 3.1 domain and problem files into strongly-typed abstract syntax trees."""

from .analysis import undeclared_requirements as undeclared_requirements
from .analysis import used_requirements as used_requirements
from .ast import Domain as Domain
from .ast import Problem as Problem
from .ast import Requirement as Requirement
from .ast import Requirements as Requirements
from .errors import NestingTooDeepError as NestingTooDeepError
from .errors import ParseError as ParseError
from .errors import PDDLError as PDDLError
from .errors import TrailingInputError as TrailingInputError
from .errors import UnknownRequirementError as UnknownRequirementError
from .io import ParserSettings as ParserSettings
from .parsing import PDDLParser as PDDLParser
from .parsing import load_domain as load_domain
from .parsing import load_problem as load_problem
from .parsing import parse_domain as parse_domain
from .parsing import parse_problem as parse_problem
from .printing import to_pddl as to_pddl

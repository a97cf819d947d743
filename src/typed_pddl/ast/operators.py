"""Define the closed keyword enumerations of PDDL (comparisons, operators, time specifiers).

Each enumeration's values are exactly the keywords the grammar recognizes, so the parser derives
its keyword alternatives from the enumeration and every matched keyword maps back to a member.
"""

from __future__ import annotations

from enum import StrEnum


class BinaryComp(StrEnum):
    """Binary comparison between two numeric expressions (`:numeric-fluents`)."""

    GREATER_THAN = ">"
    LESS_THAN = "<"
    EQUAL = "="
    GREATER_THAN_OR_EQUAL = ">="
    LESS_THAN_OR_EQUAL = "<="


class BinaryOp(StrEnum):
    """Binary arithmetic operator (`:numeric-fluents`)."""

    MULTIPLICATION = "*"
    ADDITION = "+"
    SUBTRACTION = "-"
    DIVISION = "/"


class MultiOp(StrEnum):
    """Arithmetic operator accepting two or more operands (`:numeric-fluents`)."""

    MULTIPLICATION = "*"
    ADDITION = "+"


class AssignOp(StrEnum):
    """Numeric fluent assignment operator (`:numeric-fluents`)."""

    ASSIGN = "assign"
    SCALE_UP = "scale-up"
    SCALE_DOWN = "scale-down"
    INCREASE = "increase"
    DECREASE = "decrease"
    CHANGE = "change"
    """Deprecated synonym of `assign` from PDDL 2.1."""


class AssignOpT(StrEnum):
    """Assignment operator allowed in continuous effects (`:continuous-effects`)."""

    INCREASE = "increase"
    DECREASE = "decrease"


class DOp(StrEnum):
    """Comparison used in duration constraints (`:duration-inequalities` for `<=` and `>=`)."""

    LESS_THAN_OR_EQUAL = "<="
    GREATER_THAN_OR_EQUAL = ">="
    EQUAL = "="


class TimeSpecifier(StrEnum):
    """Point of a durative action at which a condition or effect applies."""

    START = "start"
    END = "end"


class Interval(StrEnum):
    """Interval of a durative action over which a condition must hold."""

    ALL = "all"


class Optimization(StrEnum):
    """Direction of a problem's plan metric."""

    MINIMIZE = "minimize"
    MAXIMIZE = "maximize"

"""Define PDDL terms, the units of reference inside formulas and effects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from typed_pddl.ast.symbols import FunctionSymbol, Name, Variable


@dataclass(frozen=True)
class FunctionTerm:
    """A function symbol applied to a list of terms (`:object-fluents`), e.g. `(loc ?t)`."""

    symbol: FunctionSymbol
    terms: tuple[Term, ...] = ()


Term = Union[Name, Variable, FunctionTerm]
"""A term is a name, a variable, or a function term."""


@dataclass(frozen=True)
class BasicFunctionTerm:
    """A function symbol applied to names only, as used in initial states and metrics."""

    symbol: FunctionSymbol
    names: tuple[Name, ...] = ()

"""Define atomic formulas, literals, and the skeletons that declare predicates and functions.

Atomic formulas and literals are generic over the term representation: initial states use plain
names, while goals and effects use full terms.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar, Union

from typed_pddl.ast.symbols import FunctionSymbol, Predicate, Variable
from typed_pddl.ast.typed import TypedList

TermT = TypeVar("TermT")
"""Type of the terms used as arguments (e.g., `Name` or `Term`)."""


@dataclass(frozen=True)
class Equality(Generic[TermT]):
    """An equality between two terms (`:equality`), written `(= t1 t2)`."""

    left: TermT
    right: TermT


@dataclass(frozen=True)
class PredicateFormula(Generic[TermT]):
    """A predicate applied to a list of terms, written `(p t1 ... tn)`."""

    predicate: Predicate
    terms: tuple[TermT, ...] = ()


AtomicFormula = Union[Equality[TermT], PredicateFormula[TermT]]
"""An atomic formula is either an equality or a predicate application."""


@dataclass(frozen=True)
class Literal(Generic[TermT]):
    """An atomic formula or its negation."""

    formula: AtomicFormula[TermT]
    negated: bool = False


@dataclass(frozen=True)
class AtomicFormulaSkeleton:
    """A predicate declaration in a `:predicates` section, e.g. `(at ?x - physob ?l - location)`."""

    predicate: Predicate
    variables: TypedList[Variable] = field(default_factory=TypedList)


@dataclass(frozen=True)
class AtomicFunctionSkeleton:
    """A function declaration in a `:functions` section, e.g. `(fuel ?t - truck)`."""

    symbol: FunctionSymbol
    variables: TypedList[Variable] = field(default_factory=TypedList)

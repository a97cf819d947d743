"""Define the requirement flags that domains and problems declare to unlock optional syntax."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Iterable, Iterator


class Requirement(StrEnum):
    """A PDDL requirement flag, stored as the keyword written in a `:requirements` section."""

    STRIPS = ":strips"
    TYPING = ":typing"
    NEGATIVE_PRECONDITIONS = ":negative-preconditions"
    DISJUNCTIVE_PRECONDITIONS = ":disjunctive-preconditions"
    EQUALITY = ":equality"
    EXISTENTIAL_PRECONDITIONS = ":existential-preconditions"
    UNIVERSAL_PRECONDITIONS = ":universal-preconditions"
    QUANTIFIED_PRECONDITIONS = ":quantified-preconditions"
    CONDITIONAL_EFFECTS = ":conditional-effects"
    FLUENTS = ":fluents"
    NUMERIC_FLUENTS = ":numeric-fluents"
    OBJECT_FLUENTS = ":object-fluents"
    ADL = ":adl"
    DURATIVE_ACTIONS = ":durative-actions"
    DURATION_INEQUALITIES = ":duration-inequalities"
    CONTINUOUS_EFFECTS = ":continuous-effects"
    DERIVED_PREDICATES = ":derived-predicates"
    TIMED_INITIAL_LITERALS = ":timed-initial-literals"
    PREFERENCES = ":preferences"
    CONSTRAINTS = ":constraints"
    ACTION_COSTS = ":action-costs"

    def expand(self) -> tuple[Requirement, ...]:
        """Expand a shorthand requirement into the requirements it stands for.

        Requirements that are not shorthands expand to themselves.
        """
        return _SHORTHANDS.get(self, (self,))

    def contains(self, other: Requirement) -> bool:
        """Evaluate whether declaring this requirement also declares the other one."""
        return other in Requirements((self,)).effective()


_SHORTHANDS: dict[Requirement, tuple[Requirement, ...]] = {
    Requirement.QUANTIFIED_PRECONDITIONS: (
        Requirement.EXISTENTIAL_PRECONDITIONS,
        Requirement.UNIVERSAL_PRECONDITIONS,
    ),
    Requirement.FLUENTS: (Requirement.NUMERIC_FLUENTS, Requirement.OBJECT_FLUENTS),
    Requirement.ADL: (
        Requirement.STRIPS,
        Requirement.TYPING,
        Requirement.NEGATIVE_PRECONDITIONS,
        Requirement.DISJUNCTIVE_PRECONDITIONS,
        Requirement.EQUALITY,
        Requirement.EXISTENTIAL_PRECONDITIONS,
        Requirement.UNIVERSAL_PRECONDITIONS,
        Requirement.CONDITIONAL_EFFECTS,
    ),
}


@dataclass(frozen=True)
class Requirements:
    """The requirements declared by a domain or problem, in declared order without repeats."""

    declared: tuple[Requirement, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Drop repeated declarations while keeping the order of first occurrence."""
        object.__setattr__(self, "declared", tuple(dict.fromkeys(self.declared)))

    @classmethod
    def of(cls, requirements: Iterable[Requirement]) -> Requirements:
        """Construct a collection of requirements from any iterable of flags."""
        return cls(tuple(requirements))

    def __len__(self) -> int:
        """Return the number of distinct declared requirements."""
        return len(self.declared)

    def __iter__(self) -> Iterator[Requirement]:
        """Iterate over the declared requirements in declared order."""
        return iter(self.declared)

    def __contains__(self, requirement: object) -> bool:
        """Evaluate whether a requirement is declared, directly or through a shorthand."""
        return requirement in self.effective()

    def is_empty(self) -> bool:
        """Check whether no requirements were declared."""
        return not self.declared

    def effective(self) -> frozenset[Requirement]:
        """Compute the effective requirements: expand shorthands and imply `:strips` if empty.

        :return: Set of requirements in force, including the shorthands themselves
        """
        if not self.declared:
            return frozenset({Requirement.STRIPS})
        expanded = {r for declared in self.declared for r in (declared, *declared.expand())}
        if Requirement.ADL in self.declared:
            expanded.add(Requirement.QUANTIFIED_PRECONDITIONS)
        return frozenset(expanded)

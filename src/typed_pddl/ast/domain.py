"""Define the root node of a parsed PDDL domain."""

from __future__ import annotations

from dataclasses import dataclass, field

from typed_pddl.ast.constraints import ConGD, ConstraintAnd
from typed_pddl.ast.formulas import AtomicFormulaSkeleton, AtomicFunctionSkeleton, Literal
from typed_pddl.ast.requirements import Requirements
from typed_pddl.ast.structure import ActionDefinition, DurativeActionDefinition, StructureDef
from typed_pddl.ast.symbols import Name, PrimitiveType
from typed_pddl.ast.typed import TypedList


@dataclass(frozen=True)
class Domain:
    """A PDDL domain: the types, predicates, and action schemas shared by a family of problems.

    Every section other than the name defaults to empty when absent from the source text.
    """

    name: Name
    extends: tuple[Name, ...] = ()
    """Names of the domains this domain extends (PDDL 1.2 `:extends`)."""

    requirements: Requirements = field(default_factory=Requirements)
    types: TypedList[PrimitiveType] = field(default_factory=TypedList)
    constants: TypedList[Name] = field(default_factory=TypedList)
    predicates: tuple[AtomicFormulaSkeleton, ...] = ()
    timeless: tuple[Literal[Name], ...] = ()
    """Literals that hold in every state (deprecated PDDL 1.2 `:timeless` section)."""

    functions: TypedList[AtomicFunctionSkeleton] = field(default_factory=TypedList)
    constraints: ConGD = field(default_factory=ConstraintAnd)
    structure: tuple[StructureDef, ...] = ()

    @property
    def actions(self) -> tuple[ActionDefinition, ...]:
        """Retrieve the (instantaneous) action schemas in declared order."""
        return tuple(s for s in self.structure if isinstance(s, ActionDefinition))

    @property
    def durative_actions(self) -> tuple[DurativeActionDefinition, ...]:
        """Retrieve the durative action schemas in declared order."""
        return tuple(s for s in self.structure if isinstance(s, DurativeActionDefinition))

    def get_action(self, name: str) -> ActionDefinition:
        """Retrieve the action schema with the given name.

        :param name: Name of the action (case-sensitive)
        :return: Action schema declared under that name
        :raises KeyError: If the domain declares no such action
        """
        for action in self.actions:
            if action.symbol == name:
                return action
        raise KeyError(f"Domain '{self.name}' declares no action named '{name}'.")

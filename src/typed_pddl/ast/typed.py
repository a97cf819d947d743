"""Define PDDL types and the typed lists that annotate parameters, objects, and constants.

A typed list uses PDDL's compact notation `x y z - type`, in which consecutive items share the
type written after them and items without a trailing type default to `object`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterator, TypeVar, Union, overload

from typed_pddl.ast.symbols import NUMBER, OBJECT, PrimitiveType

T = TypeVar("T")
"""Type of the values annotated by a typed list (e.g., names or variables)."""


@dataclass(frozen=True)
class ExactType:
    """Exactly one primitive type (e.g., `location`)."""

    primitive: PrimitiveType

    def __str__(self) -> str:
        """Return the type as written in PDDL."""
        return str(self.primitive)


@dataclass(frozen=True)
class EitherType:
    """A union of primitive types, written `(either t1 t2 ...)`."""

    primitives: tuple[PrimitiveType, ...]

    def __str__(self) -> str:
        """Return the type as written in PDDL."""
        return f"(either {' '.join(map(str, self.primitives))})"


Type = Union[ExactType, EitherType]
"""A PDDL type: either exactly one primitive type or a choice among several."""

OBJECT_TYPE = ExactType(OBJECT)
"""The default type assigned to items in a typed list that have no explicit type."""

NUMBER_TYPE = ExactType(NUMBER)
"""The default type assigned to function declarations that have no explicit type."""


@dataclass(frozen=True)
class Typed(Generic[T]):
    """A value paired with its PDDL type."""

    value: T
    type_: Type = OBJECT_TYPE


@dataclass(frozen=True)
class TypedList(Generic[T]):
    """An ordered sequence of typed values.

    The declared order matters only for presentation: it is kept so that contiguous runs of
    same-typed values can be regrouped when the list is displayed again.
    """

    items: tuple[Typed[T], ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        """Return the number of typed values in the list."""
        return len(self.items)

    def __iter__(self) -> Iterator[Typed[T]]:
        """Iterate over the typed values in declared order."""
        return iter(self.items)

    @overload
    def __getitem__(self, index: int) -> Typed[T]: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Typed[T], ...]: ...

    def __getitem__(self, index: int | slice) -> Typed[T] | tuple[Typed[T], ...]:
        """Retrieve one typed value (or a slice of them) by position."""
        return self.items[index]

    @property
    def values(self) -> tuple[T, ...]:
        """Retrieve the untyped values in declared order."""
        return tuple(t.value for t in self.items)

    @property
    def types(self) -> tuple[Type, ...]:
        """Retrieve the types of the values in declared order."""
        return tuple(t.type_ for t in self.items)

    def groups(self) -> list[tuple[tuple[T, ...], Type]]:
        """Regroup contiguous runs of values sharing a type, as in `x y - t`.

        :return: List of (values, type) pairs in declared order
        """
        grouped: list[tuple[tuple[T, ...], Type]] = []
        for typed in self.items:
            if grouped and grouped[-1][1] == typed.type_:
                values, type_ = grouped[-1]
                grouped[-1] = ((*values, typed.value), type_)
            else:
                grouped.append(((typed.value,), typed.type_))
        return grouped

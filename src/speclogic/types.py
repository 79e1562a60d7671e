from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, TypeAlias, TypeVar, runtime_checkable

T_contra = TypeVar("T_contra", contravariant=True)

SpecificationFn: TypeAlias = Callable[[T_contra], bool]


@runtime_checkable
class Satisfiable(Protocol[T_contra]):
    """
    Anything that can decide whether a candidate satisfies it.
    """

    def is_satisfied_by(self, candidate: T_contra, /) -> bool:
        """
        Decide whether the candidate satisfies the rule.

        Must be pure and total: no side effects, and a bool for every candidate.

        Args:
            candidate: The value to check.

        Examples:
            >>> class IsEven:
            ...     def is_satisfied_by(self, candidate: int) -> bool:
            ...         return candidate % 2 == 0
            >>> isinstance(IsEven(), Satisfiable)
            True

        """

        ...

from __future__ import annotations

from functools import reduce
from typing import TYPE_CHECKING, TypeVar

from speclogic.specification.boolean import FalseSpecification, TrueSpecification
from speclogic.specification.specification import AbstractSpecification, composable

if TYPE_CHECKING:
    from speclogic.types import Satisfiable

T_contra = TypeVar("T_contra", contravariant=True)


def all_of(*specs: Satisfiable[T_contra]) -> AbstractSpecification[T_contra]:
    """
    Fold the specifications with AND. No specifications: always satisfied.

    The result is a left-deep chain; evaluating it does not recurse per operand.
    """
    if not specs:
        return TrueSpecification()
    return reduce(lambda acc, s: acc.and_(s), specs[1:], composable(specs[0]))


def any_of(*specs: Satisfiable[T_contra]) -> AbstractSpecification[T_contra]:
    """
    Fold the specifications with OR. No specifications: never satisfied.
    """
    if not specs:
        return FalseSpecification()
    return reduce(lambda acc, s: acc.or_(s), specs[1:], composable(specs[0]))

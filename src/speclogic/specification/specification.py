from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import (
    TYPE_CHECKING,
    Any,
    Generic,
    Literal,
    Protocol,
    TypeGuard,
    TypeVar,
    final,
    runtime_checkable,
)

from speclogic.specification.errs import SpecificationTypeError
from speclogic.types import Satisfiable

if TYPE_CHECKING:
    from collections.abc import Iterator

    from speclogic.types import SpecificationFn

T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class Specification(Satisfiable[T_contra], Protocol[T_contra]):
    """
    Full capability of a specification: evaluation plus the five combinators.

    Every combinator returns a new specification and leaves both operands untouched.
    """

    def and_(self, other: Satisfiable[T_contra]) -> Specification[T_contra]:
        """Satisfied iff both `self` and `other` are satisfied."""
        ...

    def and_not(self, other: Satisfiable[T_contra]) -> Specification[T_contra]:
        """Satisfied iff `self` is satisfied and `other` is not."""
        ...

    def or_(self, other: Satisfiable[T_contra]) -> Specification[T_contra]:
        """Satisfied iff at least one of `self`, `other` is satisfied."""
        ...

    def or_not(self, other: Satisfiable[T_contra]) -> Specification[T_contra]:
        """Satisfied iff `self` is satisfied or `other` is not."""
        ...

    def not_(self) -> Specification[T_contra]:
        """Satisfied iff `self` is not satisfied."""
        ...


def _is_satisfiable(other: Any) -> bool:  # noqa: ANN401
    # A class has `is_satisfied_by` too, but only its instances can evaluate.
    return isinstance(other, Satisfiable) and not isinstance(other, type)


def _ensure_satisfiable(other: Any) -> Satisfiable:  # noqa: ANN401
    if not _is_satisfiable(other):
        raise SpecificationTypeError(other)
    return other


def _collect_chain(node: Satisfiable, node_cls: type) -> Iterator[Satisfiable]:
    """
    Yield the operands of a same-type AND/OR subtree, left to right, without recursion.

    Lazy, so `all`/`any` over it keep short-circuiting.
    """
    stack = [node]
    while stack:
        current = stack.pop()
        if type(current) is node_cls:
            stack.append(current.right)
            stack.append(current.left)
        else:
            yield current


def _collect_left_spine(node: Satisfiable, node_cls: type) -> tuple[Satisfiable, list[Satisfiable]]:
    """
    Split a left-deep chain of `node_cls` into its innermost left operand and the right operands, in order.
    """
    rights = []
    current = node
    while type(current) is node_cls:
        rights.append(current.right)
        current = current.left
    rights.reverse()
    return current, rights


class AbstractSpecification(ABC, Generic[T_contra]):
    """
    Base class for specifications. Subclasses only implement `is_satisfied_by`.

    Examples:
        ```python
        from dataclasses import dataclass


        @dataclass(frozen=True)
        class IsAdult(AbstractSpecification[User]):
            min_age: int = 18

            def is_satisfied_by(self, candidate: User) -> bool:
                return candidate.age >= self.min_age


        can_vote = IsAdult() & ~IsBanned()
        assert can_vote(User(age=30, banned=False))
        ```

    """

    __slots__ = ()

    @abstractmethod
    def is_satisfied_by(self, candidate: T_contra, /) -> bool:
        """
        Decide whether the candidate satisfies this specification.
        """
        ...

    def __call__(self, candidate: T_contra, /) -> bool:
        return self.is_satisfied_by(candidate)

    def and_(self, other: Satisfiable[T_contra]) -> AbstractSpecification[T_contra]:
        """
        Combine this specification with another using logical AND.

        Raises:
            SpecificationTypeError: If `other` has no `is_satisfied_by`.
        """
        return AndSpecification(self, _ensure_satisfiable(other))

    def and_not(self, other: Satisfiable[T_contra]) -> AbstractSpecification[T_contra]:
        """
        Satisfied when this specification is and `other` is not.

        Raises:
            SpecificationTypeError: If `other` has no `is_satisfied_by`.
        """
        return AndNotSpecification(self, _ensure_satisfiable(other))

    def or_(self, other: Satisfiable[T_contra]) -> AbstractSpecification[T_contra]:
        """
        Combine this specification with another using logical OR.

        Raises:
            SpecificationTypeError: If `other` has no `is_satisfied_by`.
        """
        return OrSpecification(self, _ensure_satisfiable(other))

    def or_not(self, other: Satisfiable[T_contra]) -> AbstractSpecification[T_contra]:
        """
        Satisfied when this specification is or `other` is not.

        Raises:
            SpecificationTypeError: If `other` has no `is_satisfied_by`.
        """
        return OrNotSpecification(self, _ensure_satisfiable(other))

    def not_(self) -> AbstractSpecification[T_contra]:
        return NotSpecification(self)

    def __and__(self, other: Satisfiable[T_contra]) -> AbstractSpecification[T_contra]:
        if not _is_satisfiable(other):
            return NotImplemented
        return AndSpecification(self, other)

    def __rand__(self, other: Satisfiable[T_contra]) -> AbstractSpecification[T_contra]:
        if not _is_satisfiable(other):
            return NotImplemented
        return AndSpecification(other, self)

    def __or__(self, other: Satisfiable[T_contra]) -> AbstractSpecification[T_contra]:
        if not _is_satisfiable(other):
            return NotImplemented
        return OrSpecification(self, other)

    def __ror__(self, other: Satisfiable[T_contra]) -> AbstractSpecification[T_contra]:
        if not _is_satisfiable(other):
            return NotImplemented
        return OrSpecification(other, self)

    def __invert__(self) -> AbstractSpecification[T_contra]:
        return NotSpecification(self)


@dataclass(frozen=True, slots=True)
@final
class AndSpecification(AbstractSpecification[T_contra]):
    """
    Satisfied iff both children are.
    """

    node_type: Literal["and"] = field(default="and", init=False, repr=False)
    left: Satisfiable[T_contra]
    right: Satisfiable[T_contra]

    def is_satisfied_by(self, candidate: T_contra, /) -> bool:
        return all(child.is_satisfied_by(candidate) for child in _collect_chain(self, AndSpecification))


@dataclass(frozen=True, slots=True)
@final
class OrSpecification(AbstractSpecification[T_contra]):
    """
    Satisfied iff at least one child is.
    """

    node_type: Literal["or"] = field(default="or", init=False, repr=False)
    left: Satisfiable[T_contra]
    right: Satisfiable[T_contra]

    def is_satisfied_by(self, candidate: T_contra, /) -> bool:
        return any(child.is_satisfied_by(candidate) for child in _collect_chain(self, OrSpecification))


@dataclass(frozen=True, slots=True)
@final
class NotSpecification(AbstractSpecification[T_contra]):
    """
    Satisfied iff the wrapped specification is not.
    """

    node_type: Literal["not"] = field(default="not", init=False, repr=False)
    inner: Satisfiable[T_contra]

    def is_satisfied_by(self, candidate: T_contra, /) -> bool:
        negate = True
        inner = self.inner
        while isinstance(inner, NotSpecification):
            negate = not negate
            inner = inner.inner
        return bool(inner.is_satisfied_by(candidate)) is not negate


@dataclass(frozen=True, slots=True)
@final
class AndNotSpecification(AbstractSpecification[T_contra]):
    """
    Satisfied iff `left` is and `right` is not.
    """

    node_type: Literal["and_not"] = field(default="and_not", init=False, repr=False)
    left: Satisfiable[T_contra]
    right: Satisfiable[T_contra]

    def is_satisfied_by(self, candidate: T_contra, /) -> bool:
        base, negated = _collect_left_spine(self, AndNotSpecification)
        return bool(base.is_satisfied_by(candidate)) and not any(r.is_satisfied_by(candidate) for r in negated)


@dataclass(frozen=True, slots=True)
@final
class OrNotSpecification(AbstractSpecification[T_contra]):
    """
    Satisfied iff `left` is or `right` is not.
    """

    node_type: Literal["or_not"] = field(default="or_not", init=False, repr=False)
    left: Satisfiable[T_contra]
    right: Satisfiable[T_contra]

    def is_satisfied_by(self, candidate: T_contra, /) -> bool:
        base, negated = _collect_left_spine(self, OrNotSpecification)
        return bool(base.is_satisfied_by(candidate)) or not all(r.is_satisfied_by(candidate) for r in negated)


@dataclass(frozen=True, slots=True)
@final
class FnSpecification(AbstractSpecification[T_contra]):
    """
    Leaf node backed by a plain function.
    """

    node_type: Literal["leaf"] = field(default="leaf", init=False, repr=False)
    fn: SpecificationFn[T_contra]
    desc: str | None = field(default=None, compare=False)

    def is_satisfied_by(self, candidate: T_contra, /) -> bool:
        return bool(self.fn(candidate))


@dataclass(frozen=True, slots=True)
@final
class ComposableSpecification(AbstractSpecification[T_contra]):
    """
    Give the combinators to an object that only knows `is_satisfied_by`.
    """

    node_type: Literal["leaf"] = field(default="leaf", init=False, repr=False)
    wrapped: Satisfiable[T_contra]

    def is_satisfied_by(self, candidate: T_contra, /) -> bool:
        return bool(self.wrapped.is_satisfied_by(candidate))


def specification(fn: SpecificationFn[T_contra], *, desc: str | None = None) -> AbstractSpecification[T_contra]:
    """
    Create a Specification from the function.

    Examples:
        ```python
        @specification
        def is_even(n: int) -> bool:
            return n % 2 == 0


        assert (is_even & ~specification(lambda n: n > 10))(4)
        ```

    """

    return FnSpecification(fn=fn, desc=desc or fn.__doc__)


def composable(obj: Satisfiable[T_contra]) -> AbstractSpecification[T_contra]:
    """
    Make any object with `is_satisfied_by` composable.

    Objects that already derive from `AbstractSpecification` are returned as is.

    Raises:
        SpecificationTypeError: If `obj` has no `is_satisfied_by`.
    """
    if isinstance(obj, AbstractSpecification):
        return obj
    return ComposableSpecification(_ensure_satisfiable(obj))


def is_specification(obj: Any) -> TypeGuard[AbstractSpecification]:  # noqa: ANN401
    """
    Check if the given object is a composable specification.
    """

    return isinstance(obj, AbstractSpecification)


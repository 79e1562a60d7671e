"""
Shared fixtures for specification tests.
"""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from polyfactory.factories import DataclassFactory

from speclogic import AbstractSpecification, specification

# ============================================================================
# Candidate Types
# ============================================================================


@dataclass(frozen=True)
class User:
    """Dataclass candidate type."""

    age: int
    active: bool
    name: str = "Anonymous"


class UserFactory(DataclassFactory[User]):
    __model__ = User
    __random_seed__ = 20221


# ============================================================================
# Leaf Specifications
# ============================================================================


@dataclass(frozen=True)
class Returning(AbstractSpecification[object]):
    """Leaf that ignores the candidate and returns a fixed result."""

    result: bool

    def is_satisfied_by(self, candidate: object, /) -> bool:
        return self.result


class IsEven:
    """Satisfiable object that does not derive from AbstractSpecification."""

    def is_satisfied_by(self, candidate: int, /) -> bool:
        return candidate % 2 == 0


@pytest.fixture
def users() -> list[User]:
    """A batch of generated users, plus the boundary ages."""
    return [*UserFactory.batch(size=50), User(age=17, active=True), User(age=18, active=False)]


@pytest.fixture
def adult_user() -> User:
    return User(age=25, active=True, name="Alice")


@pytest.fixture
def minor_user() -> User:
    return User(age=16, active=False, name="Bob")


@pytest.fixture
def is_adult():
    return specification(lambda user: user.age >= 18, desc="Adult")


@pytest.fixture
def is_active():
    return specification(lambda user: user.active, desc="Active")


@pytest.fixture
def is_named_alice():
    @specification
    def is_named_alice(user: User) -> bool:
        """Named Alice."""
        return user.name == "Alice"

    return is_named_alice

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, final

from speclogic.specification.specification import AbstractSpecification


@dataclass(frozen=True, slots=True)
@final
class TrueSpecification(AbstractSpecification[Any]):
    """
    Satisfied by every candidate.
    """

    node_type: Literal["true"] = field(default="true", init=False, repr=False)

    def is_satisfied_by(self, candidate: Any, /) -> bool:  # noqa: ANN401, ARG002
        return True


@dataclass(frozen=True, slots=True)
@final
class FalseSpecification(AbstractSpecification[Any]):
    """
    Satisfied by no candidate.
    """

    node_type: Literal["false"] = field(default="false", init=False, repr=False)

    def is_satisfied_by(self, candidate: Any, /) -> bool:  # noqa: ANN401, ARG002
        return False

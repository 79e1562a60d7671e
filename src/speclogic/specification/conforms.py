from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Literal, final

from pydantic import TypeAdapter, ValidationError

from speclogic.specification.specification import AbstractSpecification

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
@final
class ConformsTo(AbstractSpecification[Any]):
    """
    Satisfied iff the candidate validates against `type_`.

    Validation runs through a pydantic `TypeAdapter` built once per instance. In strict mode
    (the default) no coercion happens, so `"1"` does not conform to `int`.

    Examples:
        ```python
        from typing import Annotated

        from pydantic import Field

        positive = ConformsTo(Annotated[int, Field(gt=0)])
        assert positive(3)
        assert not positive(-3)
        assert not positive("3")
        ```

    """

    node_type: Literal["leaf"] = field(default="leaf", init=False, repr=False)
    type_: Any
    strict: bool = True
    _adapter: TypeAdapter[Any] = field(init=False, repr=False, hash=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_adapter", TypeAdapter(self.type_))

    def is_satisfied_by(self, candidate: Any, /) -> bool:  # noqa: ANN401
        try:
            self._adapter.validate_python(candidate, strict=self.strict)
        except ValidationError as e:
            logger.debug("Candidate rejected by %r: %d validation error(s)", self.type_, e.error_count())
            return False
        return True

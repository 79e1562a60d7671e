from .boolean import FalseSpecification, TrueSpecification
from .compose import all_of, any_of
from .conforms import ConformsTo
from .specification import (
    AbstractSpecification,
    AndNotSpecification,
    AndSpecification,
    ComposableSpecification,
    FnSpecification,
    NotSpecification,
    OrNotSpecification,
    OrSpecification,
    Specification,
    composable,
    is_specification,
    specification,
)

__all__ = [
    "AbstractSpecification",
    "AndNotSpecification",
    "AndSpecification",
    "ComposableSpecification",
    "ConformsTo",
    "FalseSpecification",
    "FnSpecification",
    "NotSpecification",
    "OrNotSpecification",
    "OrSpecification",
    "Specification",
    "TrueSpecification",
    "all_of",
    "any_of",
    "composable",
    "is_specification",
    "specification",
]

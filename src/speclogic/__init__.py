from .specification import (
    AbstractSpecification,
    ConformsTo,
    FalseSpecification,
    Specification,
    TrueSpecification,
    all_of,
    any_of,
    composable,
    is_specification,
    specification,
)
from .specification.errs import SpecificationError, SpecificationTypeError
from .types import Satisfiable

__all__ = [
    "AbstractSpecification",
    "ConformsTo",
    "FalseSpecification",
    "Satisfiable",
    "Specification",
    "SpecificationError",
    "SpecificationTypeError",
    "TrueSpecification",
    "all_of",
    "any_of",
    "composable",
    "is_specification",
    "specification",
]

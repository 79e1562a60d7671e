class SpecificationError(Exception):
    """Base Specification exception."""

    ...


class SpecificationTypeError(SpecificationError, TypeError):
    """
    Raised when a value without `is_satisfied_by` is used as a specification.
    """

    def __init__(self, value: object):
        """
        Args:
            value: the rejected operand.
        """
        self.value = value

        super().__init__(f"{type(value).__name__!r} object is not a specification: missing is_satisfied_by()")

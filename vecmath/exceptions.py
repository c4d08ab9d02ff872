"""vecmath exception hierarchy.

Centralised base classes so callers can catch library failures without
falling back to bare ``except Exception`` blocks.
"""


class VecMathError(Exception):
    """Root of all vecmath exceptions."""


class DegenerateVectorError(VecMathError, ValueError):
    """A zero-length vector was given to a direction-dependent operation.

    Subclasses ``ValueError`` so code written against "cannot normalize a
    zero-length vector" style errors keeps working.
    """

    def __init__(self, operation: str, message: str = "") -> None:
        self.operation = operation
        super().__init__(message or f"{operation}: zero-length vector has no direction")

"""Exceptions raised by nearmatch."""


class NearMatchError(Exception):
    """Base class for all nearmatch errors."""


class ValidationError(NearMatchError, ValueError):
    """An argument violates a documented precondition.

    Subclasses ``ValueError`` so callers that already guard numeric or
    argument errors keep working.
    """


__all__ = ["NearMatchError", "ValidationError"]

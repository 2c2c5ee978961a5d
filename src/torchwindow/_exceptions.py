"""Exceptions and warnings for window functions."""


class WindowWarning(UserWarning):
    """Warning for window parameters outside their meaningful domain."""

    pass


class WindowError(Exception):
    """Base exception for window errors."""

    pass


class LengthMismatchError(WindowError, ValueError):
    """Raised when window weights and samples differ in length."""

    pass

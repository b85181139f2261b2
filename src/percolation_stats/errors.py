"""Error types raised for invalid grid sizes, coordinates and trial counts."""

import operator

import numpy as np


class InvalidArgument(ValueError):
    """Raised when a caller passes an argument outside its valid range."""
    pass


def require_index(name: str, value) -> int:
    """
    Validate that value is an integer (int or numpy integer, never a bool).

    Args:
        name: Argument name used in the error message
        value: Value to check

    Returns:
        The value as a plain int
    """
    if isinstance(value, (bool, np.bool_)) or not hasattr(value, '__index__'):
        raise InvalidArgument(f"{name} must be an integer, provided: {value!r}")
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidArgument(f"{name} must be an integer, provided: {value!r}")


def require_positive(name: str, value) -> int:
    """Validate that value is a positive integer and return it as an int."""
    value = require_index(name, value)
    if value <= 0:
        raise InvalidArgument(f"{name} must be greater than 0, provided: {value}")
    return value

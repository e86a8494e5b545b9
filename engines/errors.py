"""Failure kinds raised inside filters.

Public filters never let these escape; they are turned into a ``False``
result by :func:`engines.registry.byte_filter`.
"""


class FilterError(ValueError):
    """Base class for rejected filter calls."""

    reason = "rejected"


class InvalidArgumentError(FilterError):
    """A buffer reference is unset, too short or not writable."""

    reason = "invalid argument"


class ParameterRangeError(FilterError):
    """A scalar or geometry parameter is outside its declared bound."""

    reason = "parameter out of range"


class KernelNotImplementedError(FilterError, NotImplementedError):
    """Reserved for future kernel support: parameters passed, no transform exists."""

    reason = "not implemented"

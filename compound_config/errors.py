"""Exceptions raised by compound options.

Validation failures are not exceptions: setters report them as ``False``.
The classes below cover programmer errors and broken invariants.
"""


class CompoundOptionError(Exception):
    """Base class for compound option errors."""

    pass


class ArityMismatchError(CompoundOptionError, TypeError):
    """Raised when a typed accessor is used with the wrong number of types."""

    pass


class CorruptValueError(CompoundOptionError, ValueError):
    """Raised when a stored cell cannot be converted to its declared type."""

    pass


class UnknownTypeError(CompoundOptionError, KeyError):
    """Raised when a value type has not been registered."""

    pass

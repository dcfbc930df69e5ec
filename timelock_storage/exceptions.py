"""Exceptions raised by the time-lock storage library."""


class TimeLockStorageError(Exception):
    """Base class for library failures that callers may want to recover from."""


class ParameterGenerationError(TimeLockStorageError):
    """Trapdoor parameters could not be generated.

    Raised when the prime search leaves the requested bit range or when the
    two primes coincide. No retry is attempted; call setup again.
    """

# qsim/errors.py


class QSimError(Exception):
    """Base class for every error raised by qsim."""


class DimensionError(QSimError, ValueError):
    """State length does not match 2**n for the declared qubit count."""


class QubitIndexError(QSimError, IndexError):
    """Qubit index outside [0, n), or repeated within one gate."""


class InvalidGateError(QSimError, ValueError):
    """Unsupported arity, malformed matrix, or a matrix that is not unitary."""


class NormalizationError(QSimError, ValueError):
    """Total probability deviates from 1 beyond tolerance."""

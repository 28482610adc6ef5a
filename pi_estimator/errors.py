# errors.py
"""Exceptions raised by the estimator."""


class EstimatorError(Exception):
    """Base exception for estimator errors."""


class InvalidArgumentError(EstimatorError, ValueError):
    """Raised when a run parameter (iterations, seed, block size) is invalid."""


class StartupError(EstimatorError, RuntimeError):
    """Raised when the random generator cannot be initialized."""

"""Exception types raised when a correlation vector cannot be spun."""

__all__ = [
    "CorrelationVectorError",
    "VersionInferenceError",
    "ValidationError",
]


class CorrelationVectorError(ValueError):
    """Base class for correlation vector failures."""


class VersionInferenceError(CorrelationVectorError):
    """The version of a correlation vector could not be determined."""


class ValidationError(CorrelationVectorError):
    """A correlation vector does not conform to the grammar of its version."""

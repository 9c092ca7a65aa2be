"""Correlation vector services."""

from .spin import SpinGenerator, spin, spin_with_parameters
from .vector import infer_version, new_correlation_vector, validate

__all__ = [
    "SpinGenerator",
    "spin",
    "spin_with_parameters",
    "infer_version",
    "new_correlation_vector",
    "validate",
]

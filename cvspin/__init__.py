"""
Correlation Vector Spin

Implements the Spin operator for correlation vectors: at the entry point of an
operation, a base vector is extended with a segment packed from a truncated
clock counter and random entropy bytes.
"""

from .exceptions import CorrelationVectorError, ValidationError, VersionInferenceError
from .models import (
    DEFAULT_SPIN_PARAMETERS,
    CorrelationVector,
    CorrelationVectorVersion,
    SpinCounterInterval,
    SpinCounterPeriodicity,
    SpinEntropy,
    SpinParameters,
)
from .services import SpinGenerator, spin, spin_with_parameters

__version__ = "1.0.0"
__author__ = "Correlation Vector Team"
__description__ = "Correlation vector Spin operator"

__all__ = [
    "CorrelationVectorError",
    "ValidationError",
    "VersionInferenceError",
    "DEFAULT_SPIN_PARAMETERS",
    "CorrelationVector",
    "CorrelationVectorVersion",
    "SpinCounterInterval",
    "SpinCounterPeriodicity",
    "SpinEntropy",
    "SpinParameters",
    "SpinGenerator",
    "spin",
    "spin_with_parameters",
]

"""Data models and settings for the correlation vector Spin operator."""

from .config import (
    SpinConfig,
    LoggingConfig,
    AppConfig,
)
from .parameters import (
    DEFAULT_SPIN_PARAMETERS,
    SpinCounterInterval,
    SpinCounterPeriodicity,
    SpinEntropy,
    SpinParameters,
)
from .vector import (
    CorrelationVector,
    CorrelationVectorVersion,
)

__all__ = [
    "SpinConfig",
    "LoggingConfig",
    "AppConfig",
    "DEFAULT_SPIN_PARAMETERS",
    "SpinCounterInterval",
    "SpinCounterPeriodicity",
    "SpinEntropy",
    "SpinParameters",
    "CorrelationVector",
    "CorrelationVectorVersion",
]

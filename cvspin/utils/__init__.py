"""Utility functions and helpers."""

from .logging import setup_logging, get_logger
from .correlation import (
    generate_base_vector,
    get_correlation_vector,
    get_or_generate_correlation_vector,
    set_correlation_vector,
)
from .sources import fixed_clock, fixed_entropy, random_bytes, system_ticks

__all__ = [
    "setup_logging",
    "get_logger",
    "generate_base_vector",
    "get_correlation_vector",
    "get_or_generate_correlation_vector",
    "set_correlation_vector",
    "fixed_clock",
    "fixed_entropy",
    "random_bytes",
    "system_ticks",
]

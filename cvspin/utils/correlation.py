"""Correlation vector utilities for request tracking."""

import base64
import uuid
from contextvars import ContextVar
from typing import Optional

from ..models.vector import CorrelationVectorVersion

# Context variable to store the correlation vector for the current request
_correlation_vector: ContextVar[Optional[str]] = ContextVar(
    "correlation_vector", default=None
)

# Bytes of randomness that encode to a full base segment for each version
_BASE_BYTES = {
    CorrelationVectorVersion.V1: 12,
    CorrelationVectorVersion.V2: 16,
}


def generate_base_vector(
    version: CorrelationVectorVersion = CorrelationVectorVersion.V1,
) -> str:
    """Generate a new random base64 base segment for the given version."""
    raw = uuid.uuid4().bytes[: _BASE_BYTES[version]]
    return base64.b64encode(raw).decode("ascii")[: version.base_length]


def set_correlation_vector(correlation_vector: str) -> None:
    """Set the correlation vector for the current context."""
    _correlation_vector.set(correlation_vector)


def get_correlation_vector() -> Optional[str]:
    """Get the correlation vector from the current context."""
    return _correlation_vector.get()


def get_or_generate_correlation_vector(
    version: CorrelationVectorVersion = CorrelationVectorVersion.V1,
) -> str:
    """Get the existing correlation vector or seed a new one."""
    correlation_vector = get_correlation_vector()
    if correlation_vector is None:
        correlation_vector = f"{generate_base_vector(version)}.0"
        set_correlation_vector(correlation_vector)
    return correlation_vector

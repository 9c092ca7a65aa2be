"""Correlation vector data models."""

from enum import Enum

from pydantic import BaseModel, Field


class CorrelationVectorVersion(str, Enum):
    """Correlation vector format versions."""

    V1 = "v1"
    V2 = "v2"

    @property
    def base_length(self) -> int:
        """Number of base64 characters in the base segment."""
        return 16 if self is CorrelationVectorVersion.V1 else 22

    @property
    def max_length(self) -> int:
        """Maximum length of the full vector string."""
        return 63 if self is CorrelationVectorVersion.V1 else 127


class CorrelationVector(BaseModel):
    """An immutable correlation vector: a base vector plus a current extension."""

    base_vector: str = Field(..., description="Vector up to, but excluding, the extension")
    extension: int = Field(default=0, ge=0, description="Current extension counter")
    version: CorrelationVectorVersion = Field(
        default=CorrelationVectorVersion.V1, description="Vector format version"
    )

    model_config = {"frozen": True}

    @property
    def value(self) -> str:
        """Full string form of the vector."""
        return f"{self.base_vector}.{self.extension}"

    def __str__(self) -> str:
        return self.value

"""Configuration models using Pydantic for environment-based settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from .parameters import (
    SpinCounterInterval,
    SpinCounterPeriodicity,
    SpinEntropy,
    SpinParameters,
    coerce_entropy,
    coerce_enum_member,
)


class SpinConfig(BaseSettings):
    """Spin operator configuration."""

    validate_during_creation: bool = Field(
        default=False, description="Validate the base vector before spinning"
    )
    interval: SpinCounterInterval = Field(
        default=SpinCounterInterval.COARSE, description="Counter increment interval"
    )
    periodicity: SpinCounterPeriodicity = Field(
        default=SpinCounterPeriodicity.SHORT, description="Counter bit width"
    )
    entropy: SpinEntropy = Field(
        default=SpinEntropy.TWO, description="Random bytes per spin value"
    )

    model_config = {"env_prefix": "SPIN_", "extra": "ignore"}

    @field_validator("interval", mode="before")
    @classmethod
    def validate_interval(cls, v):
        return coerce_enum_member(SpinCounterInterval, v)

    @field_validator("periodicity", mode="before")
    @classmethod
    def validate_periodicity(cls, v):
        return coerce_enum_member(SpinCounterPeriodicity, v)

    @field_validator("entropy", mode="before")
    @classmethod
    def validate_entropy(cls, v):
        return coerce_entropy(v)

    @property
    def parameters(self) -> SpinParameters:
        """Spin parameters described by this configuration."""
        return SpinParameters(
            interval=self.interval,
            periodicity=self.periodicity,
            entropy=self.entropy,
        )


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="json", description="Log format (json or text)")

    model_config = {"env_prefix": "LOG_", "extra": "ignore"}

    @field_validator("format")
    @classmethod
    def validate_format(cls, v):
        if v.lower() not in ("json", "text"):
            raise ValueError(f"Invalid log format: {v}")
        return v.lower()


class AppConfig(BaseSettings):
    """Main application configuration."""

    # Component configurations
    spin: SpinConfig = Field(default_factory=SpinConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    # Global settings
    debug: bool = Field(default=False, description="Enable debug mode")
    environment: str = Field(default="production", description="Environment name")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

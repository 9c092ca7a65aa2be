"""Spin parameter models."""

from enum import IntEnum

from pydantic import BaseModel, Field, field_validator

MAX_ENTROPY_BYTES = 4


class SpinCounterInterval(IntEnum):
    """Interval, proportional to time, by which the spin counter increments."""

    # Drops the 24 least significant bits of the tick count (~1.67 seconds)
    COARSE = 0
    # Drops the 16 least significant bits of the tick count (~6.5 milliseconds)
    FINE = 1


class SpinCounterPeriodicity(IntEnum):
    """How many bits of the counter are kept, and so how often it wraps."""

    NONE = 0
    SHORT = 1
    MEDIUM = 2
    LONG = 3


class SpinEntropy(IntEnum):
    """Number of random bytes mixed into the spin value."""

    NONE = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4


_TICK_BITS_TO_DROP = {
    SpinCounterInterval.COARSE: 24,
    SpinCounterInterval.FINE: 16,
}

_COUNTER_BITS = {
    SpinCounterPeriodicity.NONE: 0,
    SpinCounterPeriodicity.SHORT: 16,
    SpinCounterPeriodicity.MEDIUM: 24,
    SpinCounterPeriodicity.LONG: 32,
}


def coerce_enum_member(enum_cls, value):
    """Accept enum members, their integer values, or their names in any case."""
    if isinstance(value, str):
        if value.strip().isdigit():
            return int(value)
        try:
            return enum_cls[value.strip().upper()]
        except KeyError:
            choices = ", ".join(member.name.lower() for member in enum_cls)
            raise ValueError(
                f"Invalid {enum_cls.__name__} '{value}', expected one of: {choices}"
            )
    return value


def coerce_entropy(value):
    """Reject entropy outside 0..4 bytes instead of packing garbage."""
    value = coerce_enum_member(SpinEntropy, value)
    if isinstance(value, int) and not 0 <= value <= MAX_ENTROPY_BYTES:
        raise ValueError(
            f"Entropy must be between 0 and {MAX_ENTROPY_BYTES} bytes, got {value}"
        )
    return value


class SpinParameters(BaseModel):
    """Parameters used by the correlation vector Spin operator."""

    interval: SpinCounterInterval = Field(
        default=SpinCounterInterval.COARSE, description="Counter increment interval"
    )
    periodicity: SpinCounterPeriodicity = Field(
        default=SpinCounterPeriodicity.SHORT, description="Counter bit width"
    )
    entropy: SpinEntropy = Field(
        default=SpinEntropy.TWO, description="Random bytes appended to the counter"
    )

    model_config = {"frozen": True}

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
    def tick_bits_to_drop(self) -> int:
        """Low-order tick bits discarded before the counter is used."""
        return _TICK_BITS_TO_DROP.get(self.interval, 24)

    @property
    def counter_bits(self) -> int:
        """Bits of the shifted tick counter retained in the spin value."""
        return _COUNTER_BITS.get(self.periodicity, 0)

    @property
    def total_bits(self) -> int:
        """Bits in the spin value: counter bits plus eight per entropy byte."""
        return self.counter_bits + int(self.entropy) * 8


DEFAULT_SPIN_PARAMETERS = SpinParameters(
    interval=SpinCounterInterval.COARSE,
    periodicity=SpinCounterPeriodicity.SHORT,
    entropy=SpinEntropy.TWO,
)

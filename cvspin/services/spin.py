"""Correlation vector Spin operator."""

from typing import Optional

from ..exceptions import ValidationError
from ..models.config import SpinConfig
from ..models.parameters import DEFAULT_SPIN_PARAMETERS, SpinParameters
from ..models.vector import CorrelationVector
from ..utils.logging import LoggerMixin
from ..utils.sources import EntropySource, TickClock, random_bytes, system_ticks
from .vector import infer_version, new_correlation_vector, validate

UINT64_MASK = 0xFFFFFFFFFFFFFFFF
UINT32_MASK = 0xFFFFFFFF
SINGLE_FIELD_BITS = 32


def spin_mask(total_bits: int) -> int:
    """Bitmask covering the low ``total_bits`` bits of a 64-bit value."""
    if total_bits == 64:
        return UINT64_MASK
    return (1 << total_bits) - 1


def pack_spin_value(ticks: int, entropy: bytes, parameters: SpinParameters) -> int:
    """
    Pack a tick count and entropy bytes into a masked spin value.

    The tick count is shifted right to the configured interval, then each
    entropy byte is shifted in below it in draw order. The result is masked
    to ``parameters.total_bits`` so the counter wraps around.
    """
    value = (ticks >> parameters.tick_bits_to_drop) & UINT64_MASK
    for byte in entropy:
        value = ((value << 8) | byte) & UINT64_MASK
    return value & spin_mask(parameters.total_bits)


def format_spin_value(value: int, total_bits: int) -> str:
    """Render a spin value as one decimal field, or two when it exceeds 32 bits."""
    if total_bits > SINGLE_FIELD_BITS:
        # Each field is a uint32 extension, so the low field keeps only the low word
        return f"{value >> 32}.{value & UINT32_MASK}"
    return str(value)


class SpinGenerator(LoggerMixin):
    """Applies the Spin operator to correlation vectors at operation entry points."""

    def __init__(
        self,
        validate_during_creation: bool = False,
        clock: Optional[TickClock] = None,
        entropy_source: Optional[EntropySource] = None,
        default_parameters: Optional[SpinParameters] = None,
    ):
        self.validate_during_creation = validate_during_creation
        self.clock = clock or system_ticks
        self.entropy_source = entropy_source or random_bytes
        self.default_parameters = default_parameters or DEFAULT_SPIN_PARAMETERS

    @classmethod
    def from_config(
        cls,
        config: SpinConfig,
        clock: Optional[TickClock] = None,
        entropy_source: Optional[EntropySource] = None,
    ) -> "SpinGenerator":
        """Create a generator from spin settings."""
        return cls(
            validate_during_creation=config.validate_during_creation,
            clock=clock,
            entropy_source=entropy_source,
            default_parameters=config.parameters,
        )

    def spin(self, correlation_vector: str) -> CorrelationVector:
        """Spin a correlation vector using the generator's default parameters."""
        return self.spin_with_parameters(correlation_vector, self.default_parameters)

    def spin_with_parameters(
        self, correlation_vector: str, parameters: SpinParameters
    ) -> CorrelationVector:
        """
        Create a new correlation vector by applying the Spin operator.

        Args:
            correlation_vector: Existing vector to extend
            parameters: Counter interval, periodicity and entropy to use

        Returns:
            New vector whose base is ``correlation_vector`` plus the spin value,
            with its extension reset to 0

        Raises:
            VersionInferenceError: If the version of the vector can not be inferred
            ValidationError: If validation is enabled and the vector is invalid
        """
        version = infer_version(correlation_vector)

        if self.validate_during_creation:
            try:
                validate(correlation_vector, version)
            except ValidationError as e:
                self.log_warning(
                    f"Refusing to spin invalid correlation vector: {e}",
                    base_vector=correlation_vector,
                    version=version.value,
                )
                raise

        entropy = self.entropy_source(int(parameters.entropy))
        if len(entropy) != int(parameters.entropy):
            raise RuntimeError(
                f"Entropy source returned {len(entropy)} bytes, "
                f"expected {int(parameters.entropy)}"
            )

        value = pack_spin_value(self.clock(), entropy, parameters)
        spun = new_correlation_vector(
            f"{correlation_vector}.{format_spin_value(value, parameters.total_bits)}",
            0,
            version,
        )

        self.log_debug(
            "Spun correlation vector",
            base_vector=correlation_vector,
            version=version.value,
            interval=parameters.interval.name.lower(),
            periodicity=parameters.periodicity.name.lower(),
            entropy=int(parameters.entropy),
            spun_vector=spun.value,
        )
        return spun


def spin(
    correlation_vector: str, validate_during_creation: bool = False
) -> CorrelationVector:
    """Spin a correlation vector with the default parameters."""
    return SpinGenerator(validate_during_creation=validate_during_creation).spin(
        correlation_vector
    )


def spin_with_parameters(
    correlation_vector: str,
    parameters: SpinParameters,
    validate_during_creation: bool = False,
) -> CorrelationVector:
    """Spin a correlation vector with explicit parameters."""
    return SpinGenerator(
        validate_during_creation=validate_during_creation
    ).spin_with_parameters(correlation_vector, parameters)

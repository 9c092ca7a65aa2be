"""Version inference, validation and construction of correlation vectors."""

import re

from ..exceptions import ValidationError, VersionInferenceError
from ..models.vector import CorrelationVector, CorrelationVectorVersion

MAX_EXTENSION_VALUE = 0xFFFFFFFF

_BASE64_PATTERN = re.compile(r"[A-Za-z0-9+/]+")
_EXTENSION_PATTERN = re.compile(r"[0-9]+")
# The final character of a V2 base encodes only 2 bits of a 128-bit value
_V2_BASE_LAST_CHARACTERS = "AQgw"


def infer_version(correlation_vector: str) -> CorrelationVectorVersion:
    """
    Infer the format version of a correlation vector from its base length.

    A base segment of V2 length is V2; any other non-empty base is treated as
    V1 so that malformed vectors can still be spun when validation is off.

    Raises:
        VersionInferenceError: If the vector is blank or its base segment is empty.
    """
    if not correlation_vector or not correlation_vector.strip():
        raise VersionInferenceError("Correlation vector can not be empty")

    base, _, _ = correlation_vector.partition(".")
    if not base:
        raise VersionInferenceError(
            f"Invalid correlation vector {correlation_vector}. Base value is empty"
        )

    if len(base) == CorrelationVectorVersion.V2.base_length:
        return CorrelationVectorVersion.V2
    return CorrelationVectorVersion.V1


def validate(correlation_vector: str, version: CorrelationVectorVersion) -> None:
    """
    Check a correlation vector against the grammar of its version.

    Raises:
        ValidationError: If the length, base segment or any extension is invalid.
    """
    if not correlation_vector or not correlation_vector.strip():
        raise ValidationError(
            f"The {version.value} correlation vector can not be null or blank"
        )
    if len(correlation_vector) > version.max_length:
        raise ValidationError(
            f"The {version.value} correlation vector can not be bigger than "
            f"{version.max_length} characters"
        )

    base, *extensions = correlation_vector.split(".")
    if (
        not extensions
        or len(base) != version.base_length
        or not _BASE64_PATTERN.fullmatch(base)
    ):
        raise ValidationError(
            f"Invalid correlation vector {correlation_vector}. Invalid base value {base}"
        )
    if (
        version is CorrelationVectorVersion.V2
        and base[-1] not in _V2_BASE_LAST_CHARACTERS
    ):
        raise ValidationError(
            f"Invalid correlation vector {correlation_vector}. "
            f"The last character of the base value {base} is not valid for {version.value}"
        )

    for extension in extensions:
        if (
            not _EXTENSION_PATTERN.fullmatch(extension)
            or int(extension) > MAX_EXTENSION_VALUE
        ):
            raise ValidationError(
                f"Invalid correlation vector {correlation_vector}. "
                f"Invalid extension value {extension}"
            )


def new_correlation_vector(
    base_vector: str, extension: int, version: CorrelationVectorVersion
) -> CorrelationVector:
    """Construct a correlation vector from its parts."""
    return CorrelationVector(base_vector=base_vector, extension=extension, version=version)

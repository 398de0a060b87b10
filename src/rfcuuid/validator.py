"""UUID string validator."""

import logging
from dataclasses import dataclass

from rfcuuid.parser import parse

logger = logging.getLogger(__name__)

GENERATED_VERSIONS = (1, 4)


@dataclass
class ValidationResult:
    """UUID validation result."""

    valid: bool
    error: str | None = None
    warnings: list[str] | None = None

    def __post_init__(self) -> None:
        """Initialize warnings list."""
        if self.warnings is None:
            self.warnings = []


class UUIDValidator:
    """Validator for canonical UUID strings."""

    def validate(self, uuid: object) -> ValidationResult:
        """Validate a UUID string.

        A string is valid when it parses. Valid strings whose version is
        not one this package generates, or whose variant is not RFC 4122,
        carry warnings.

        Args:
            uuid: UUID string to validate

        Returns:
            Validation result
        """
        parsed = parse(uuid)
        if parsed is None:
            logger.debug(f"Rejected UUID string: {uuid!r}")
            return ValidationResult(
                valid=False,
                error=f"Invalid UUID format: {uuid!r}",
            )

        warnings = []
        if parsed.version not in GENERATED_VERSIONS:
            warnings.append(f"Unsupported UUID version: {parsed.version}")
        if parsed.variant_bits != 0b10:
            warnings.append(f"Not an RFC 4122 variant: {parsed.variant_bits:02b}")

        return ValidationResult(valid=True, warnings=warnings)

"""
rfcuuid - RFC 4122 UUID Library

Generates version 1 (time-based) and version 4 (random) UUIDs, parses the
canonical hyphenated form, and renders fields as integers, bit strings and
hex strings.
"""

from rfcuuid.config import DEFAULT_SETTINGS, GeneratorSettings
from rfcuuid.exceptions import FieldWidthError, RfcUUIDError
from rfcuuid.generator import (
    V1Generator,
    V1State,
    generate,
    generate_v1,
    generate_v4,
    get_v1_generator,
    reset_v1_generator,
    time_field_values,
)
from rfcuuid.models import FIELD_NAMES, FIELD_SIZES, UUID
from rfcuuid.parser import parse
from rfcuuid.validator import UUIDValidator, ValidationResult

__version__ = "0.1.0"

__all__ = [
    "UUID",
    "FIELD_NAMES",
    "FIELD_SIZES",
    "generate",
    "generate_v1",
    "generate_v4",
    "parse",
    "time_field_values",
    "V1Generator",
    "V1State",
    "get_v1_generator",
    "reset_v1_generator",
    "UUIDValidator",
    "ValidationResult",
    "GeneratorSettings",
    "DEFAULT_SETTINGS",
    "RfcUUIDError",
    "FieldWidthError",
]

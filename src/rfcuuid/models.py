"""
UUID value type.

A UUID holds the six RFC 4122 fields as integers. The binary and
hexadecimal renderings of each field, and of the whole value, are derived
on demand from those integers.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Literal

from rfcuuid.codec import align_number

FIELD_NAMES = (
    "timeLow",
    "timeMid",
    "timeHiAndVersion",
    "clockSeqHiAndReserved",
    "clockSeqLow",
    "node",
)

FIELD_SIZES = (32, 16, 16, 8, 8, 48)

# snake_case aliases, same order as FIELD_NAMES
FIELD_ATTRS = (
    "time_low",
    "time_mid",
    "time_hi_and_version",
    "clock_seq_hi_and_reserved",
    "clock_seq_low",
    "node",
)

_FIELD_INDEX = {
    **{name: i for i, name in enumerate(FIELD_NAMES)},
    **{name: i for i, name in enumerate(FIELD_ATTRS)},
}

Rendering = Literal["int", "bits", "hex"]


@dataclass(frozen=True)
class Field:
    """One UUID field: an unsigned integer of a fixed bit width."""

    value: int
    width: int

    @classmethod
    def masked(cls, value: Any, width: int) -> Field:
        """Build a field, truncating ``value`` to ``width`` bits."""
        return cls(int(value or 0) & ((1 << width) - 1), width)

    @property
    def bits(self) -> str:
        """Zero-padded binary rendering."""
        return align_number(self.value, self.width, 2)

    @property
    def hex(self) -> str:
        """Zero-padded lowercase hexadecimal rendering."""
        return align_number(self.value, self.width // 4, 16)


_RENDERERS: dict[str, Callable[[Field], Any]] = {
    "int": lambda f: f.value,
    "bits": lambda f: f.bits,
    "hex": lambda f: f.hex,
}


class FieldView(Sequence):
    """Read-only view of the six fields in one rendering.

    Indexable by position (0-5) or by field name, either camelCase
    (``"timeHiAndVersion"``) or snake_case (``"time_hi_and_version"``).
    """

    def __init__(self, fields: tuple[Field, ...], rendering: Rendering):
        self._fields = fields
        self._render = _RENDERERS[rendering]

    def __getitem__(self, key: Any) -> Any:
        if isinstance(key, str):
            try:
                key = _FIELD_INDEX[key]
            except KeyError:
                raise KeyError(f"Unknown UUID field: {key}") from None
        if isinstance(key, slice):
            return [self._render(f) for f in self._fields[key]]
        return self._render(self._fields[key])

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[Any]:
        return (self._render(f) for f in self._fields)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FieldView | list | tuple):
            return list(self) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"FieldView({list(self)!r})"


class UUID:
    """RFC 4122 UUID.

    Construction is total: each argument defaults to 0 and is masked to its
    field width, so any integers produce a valid instance.

    Args:
        time_low: time_low field (octets 0-3)
        time_mid: time_mid field (octets 4-5)
        time_hi_and_version: time_hi_and_version field (octets 6-7)
        clock_seq_hi_and_reserved: clock_seq_hi_and_reserved field (octet 8)
        clock_seq_low: clock_seq_low field (octet 9)
        node: node field (octets 10-15)

    Example:
        >>> u = UUID(0x12345678, 0x1234, 0x5678, 0x9A, 0xBC, 0x123456789012)
        >>> str(u)
        '12345678-1234-5678-9abc-123456789012'
        >>> u.version
        5
    """

    __slots__ = ("_fields",)

    def __init__(
        self,
        time_low: int = 0,
        time_mid: int = 0,
        time_hi_and_version: int = 0,
        clock_seq_hi_and_reserved: int = 0,
        clock_seq_low: int = 0,
        node: int = 0,
    ):
        values = (
            time_low,
            time_mid,
            time_hi_and_version,
            clock_seq_hi_and_reserved,
            clock_seq_low,
            node,
        )
        self._fields = tuple(
            Field.masked(value, width) for value, width in zip(values, FIELD_SIZES)
        )

    @property
    def int_fields(self) -> FieldView:
        """Field values as integers."""
        return FieldView(self._fields, "int")

    @property
    def bit_fields(self) -> FieldView:
        """Field values as zero-padded binary strings."""
        return FieldView(self._fields, "bits")

    @property
    def hex_fields(self) -> FieldView:
        """Field values as zero-padded hexadecimal strings."""
        return FieldView(self._fields, "hex")

    @property
    def time_low(self) -> int:
        return self._fields[0].value

    @property
    def time_mid(self) -> int:
        return self._fields[1].value

    @property
    def time_hi_and_version(self) -> int:
        return self._fields[2].value

    @property
    def clock_seq_hi_and_reserved(self) -> int:
        return self._fields[3].value

    @property
    def clock_seq_low(self) -> int:
        return self._fields[4].value

    @property
    def node(self) -> int:
        return self._fields[5].value

    @property
    def version(self) -> int:
        """Version number, bits 12-15 of time_hi_and_version."""
        return (self.time_hi_and_version >> 12) & 0xF

    @property
    def variant_bits(self) -> int:
        """Top two bits of clock_seq_hi_and_reserved (0b10 for RFC 4122)."""
        return self.clock_seq_hi_and_reserved >> 6

    @property
    def clock_seq(self) -> int:
        """14-bit clock sequence, with the variant bits stripped."""
        return ((self.clock_seq_hi_and_reserved & 0x3F) << 8) | self.clock_seq_low

    @property
    def bit_string(self) -> str:
        """128-bit binary string, fields concatenated in order."""
        return "".join(f.bits for f in self._fields)

    @property
    def hex_string(self) -> str:
        """Canonical form ``xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx``."""
        h = [f.hex for f in self._fields]
        return f"{h[0]}-{h[1]}-{h[2]}-{h[3]}{h[4]}-{h[5]}"

    def to_string(self) -> str:
        """Return the canonical hex string."""
        return self.hex_string

    def equals(self, other: object) -> bool:
        """Compare the six integer fields; False for non-UUID values."""
        if not isinstance(other, UUID):
            return False
        return all(a.value == b.value for a, b in zip(self._fields, other._fields))

    def __str__(self) -> str:
        return self.hex_string

    def __repr__(self) -> str:
        return f"UUID('{self.hex_string}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UUID):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(tuple(f.value for f in self._fields))

"""Canonical UUID string parsing."""

import re

from rfcuuid.models import UUID

UUID_REGEX = re.compile(
    r"^([0-9a-f]{8})-([0-9a-f]{4})-([0-9a-f]{4})-([0-9a-f]{2})([0-9a-f]{2})-([0-9a-f]{12})$",
    re.IGNORECASE,
)


def parse(text: object) -> UUID | None:
    """Parse ``xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx`` into a UUID.

    Hex digits may be upper or lower case. The fourth group is read as two
    separate 8-bit fields (clock_seq_hi_and_reserved, clock_seq_low).

    Args:
        text: Candidate UUID string

    Returns:
        Parsed UUID, or None if ``text`` is not a canonical UUID string

    Example:
        >>> parse("12345678-1234-5678-9abc-123456789012").version
        5
        >>> parse("not-a-uuid") is None
        True
    """
    if not isinstance(text, str):
        return None

    match = UUID_REGEX.fullmatch(text)
    if not match:
        return None

    return UUID(*(int(group, 16) for group in match.groups()))

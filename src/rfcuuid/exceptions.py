"""Custom exceptions for rfcuuid."""


class RfcUUIDError(Exception):
    """Base exception for rfcuuid errors."""

    pass


class FieldWidthError(RfcUUIDError, ValueError):
    """Random integer requested with an unsupported bit width."""

    def __init__(self, width: int):
        self.width = width
        super().__init__(
            f"Cannot draw a random integer of {width} bits.\n\n"
            f"Supported widths are 0 to 53 inclusive; UUID fields are at most "
            f"48 bits wide, so this indicates a caller bug."
        )

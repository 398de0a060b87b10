"""Random field values and fixed-width number formatting."""

import random
from collections.abc import Callable

from rfcuuid.exceptions import FieldWidthError

MAX_RANDOM_BITS = 53

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def random_bits(width: int, rng: random.Random | None = None) -> int:
    """Return an unsigned integer uniformly distributed in [0, 2**width).

    Widths above 30 are composed from two draws (low 30 bits and the
    remaining high bits) so that a single float never has to carry more
    integer precision than it holds.

    Args:
        width: Bit width, 0 to 53 inclusive
        rng: Random source (defaults to the ``random`` module)

    Returns:
        Random unsigned integer

    Raises:
        FieldWidthError: If width is outside [0, 53]
    """
    draw = rng.random if rng is not None else random.random

    if width < 0 or width > MAX_RANDOM_BITS:
        raise FieldWidthError(width)
    if width <= 30:
        return int(draw() * (1 << width))

    low = int(draw() * (1 << 30))
    high = int(draw() * (1 << (width - 30)))
    return low + high * (1 << 30)


def align_number(value: int, length: int, radix: int = 16) -> str:
    """Render ``value`` in ``radix`` left-padded with zeros to ``length``.

    Digits above 9 are lowercase letters. A value wider than ``length``
    is returned unpadded, never truncated.

    Example:
        >>> align_number(0x4a, 4)
        '004a'
        >>> align_number(5, 8, radix=2)
        '00000101'
    """
    if not 2 <= radix <= len(_DIGITS):
        raise ValueError(f"Radix must be between 2 and 36, got {radix}")
    if value < 0:
        raise ValueError(f"Cannot align negative value: {value}")

    if radix == 16:
        text = format(value, "x")
    elif radix == 2:
        text = format(value, "b")
    elif radix == 10:
        text = str(value)
    else:
        chars = []
        while value:
            value, digit = divmod(value, radix)
            chars.append(_DIGITS[digit])
        text = "".join(reversed(chars)) or "0"

    return text.rjust(length, "0")


def make_aligner(radix: int) -> Callable[[int, int], str]:
    """Return an ``align_number`` bound to one radix."""

    def aligner(value: int, length: int) -> str:
        return align_number(value, length, radix)

    return aligner

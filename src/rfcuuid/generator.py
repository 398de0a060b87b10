"""Version 1 (time-based) and version 4 (random) UUID generation."""

import logging
import random
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass

from rfcuuid.codec import random_bits
from rfcuuid.config import DEFAULT_SETTINGS, GeneratorSettings
from rfcuuid.models import UUID

logger = logging.getLogger(__name__)

# Milliseconds from the Gregorian reform (1582-10-15) to the Unix epoch
GREGORIAN_OFFSET_MS = 12_219_292_800_000

# 100ns intervals per millisecond
TICKS_PER_MS = 10_000


def generate_v4(rng: random.Random | None = None) -> UUID:
    """Generate a version 4 (random) UUID.

    Args:
        rng: Random source (defaults to the ``random`` module)

    Returns:
        UUID with version 4 and the RFC 4122 variant
    """
    return UUID(
        random_bits(32, rng),
        random_bits(16, rng),
        0x4000 | random_bits(12, rng),  # version '0100'
        0x80 | random_bits(6, rng),  # variant '10'
        random_bits(8, rng),
        random_bits(48, rng),
    )


def generate(rng: random.Random | None = None) -> str:
    """Return the canonical string of a new version 4 UUID."""
    return generate_v4(rng).hex_string


@dataclass(frozen=True)
class TimeFields:
    """Gregorian timestamp split into UUID time fields."""

    low: int
    mid: int
    hi: int
    timestamp: int  # milliseconds since 1582-10-15


def time_field_values(unix_ms: int) -> TimeFields:
    """Split a Unix millisecond timestamp into UUID time fields.

    The 60-bit count of 100ns intervals since 1582-10-15 is split into
    low 32, mid 16 and high 12 bits.
    """
    since_reform = unix_ms + GREGORIAN_OFFSET_MS
    intervals = since_reform * TICKS_PER_MS
    return TimeFields(
        low=intervals & 0xFFFFFFFF,
        mid=(intervals >> 32) & 0xFFFF,
        hi=(intervals >> 48) & 0xFFF,
        timestamp=since_reform,
    )


def _system_clock() -> int:
    return time.time_ns() // 1_000_000


@dataclass
class V1State:
    """Mutable state carried between version 1 generations."""

    timestamp: int  # last Unix time used, in milliseconds
    sequence: int  # 14-bit clock sequence
    node: int  # 48-bit node identifier
    tick: int = 0  # 100ns fraction within the current millisecond

    @classmethod
    def initial(cls, rng: random.Random | None = None) -> "V1State":
        """Random clock sequence and a random node with the multicast bit set.

        No hardware address is read; setting the multicast bit of the first
        octet keeps the random node from colliding with a real MAC.
        """
        node = (random_bits(8, rng) | 1) * (1 << 40) + random_bits(40, rng)
        return cls(timestamp=0, sequence=random_bits(14, rng), node=node)


class V1Generator:
    """Version 1 UUID generator.

    The wall clock only has millisecond resolution. Repeated calls within
    one millisecond either advance a sub-millisecond tick (with probability
    ``tick_ratio`` while the tick is below ``max_tick``) or advance the
    clock sequence. A clock that moves backwards also advances the clock
    sequence.

    Calls are serialized with a lock, so one instance may be shared across
    threads.
    """

    def __init__(
        self,
        settings: GeneratorSettings | None = None,
        clock: Callable[[], int] | None = None,
        rng: random.Random | None = None,
        state: V1State | None = None,
    ):
        """Initialize generator.

        Args:
            settings: Tick tuning (defaults to DEFAULT_SETTINGS)
            clock: Returns Unix time in milliseconds
            rng: Random source for state seeding and tick decisions
            state: Pre-built state (a fresh random state otherwise)
        """
        self.settings = settings or DEFAULT_SETTINGS
        self._clock = clock or _system_clock
        self._draw = rng.random if rng is not None else random.random
        self._lock = threading.Lock()
        self.state = state or V1State.initial(rng)
        logger.debug(
            f"Initialized v1 state: sequence={self.state.sequence:#06x}, "
            f"node={self.state.node:012x}"
        )

    def generate(self) -> UUID:
        """Generate a version 1 UUID and advance the state."""
        with self._lock:
            now = self._clock()
            st = self.state

            if now != st.timestamp:
                if now < st.timestamp:
                    logger.debug(
                        f"Clock moved backwards ({st.timestamp} -> {now}), "
                        f"advancing clock sequence"
                    )
                    st.sequence += 1
                st.timestamp = now
                st.tick = 0
            elif self._draw() < self.settings.tick_ratio and st.tick < self.settings.max_tick:
                st.tick += 1
            else:
                logger.debug(f"Advancing clock sequence within millisecond {now}")
                st.sequence += 1

            tf = time_field_values(st.timestamp)
            time_low = tf.low + st.tick
            time_hi_and_version = tf.hi | 0x1000  # version '0001'

            st.sequence &= 0x3FFF
            clock_seq_hi = (st.sequence >> 8) | 0x80  # variant '10'
            clock_seq_low = st.sequence & 0xFF

            return UUID(
                time_low,
                tf.mid,
                time_hi_and_version,
                clock_seq_hi,
                clock_seq_low,
                st.node,
            )


_default_generator = V1Generator()


def generate_v1() -> UUID:
    """Generate a version 1 UUID from the process-wide generator."""
    return _default_generator.generate()


def get_v1_generator() -> V1Generator:
    """Return the process-wide version 1 generator."""
    return _default_generator


def reset_v1_generator(generator: V1Generator | None = None) -> V1Generator:
    """Replace the process-wide generator (a fresh one if none given)."""
    global _default_generator
    _default_generator = generator or V1Generator()
    return _default_generator

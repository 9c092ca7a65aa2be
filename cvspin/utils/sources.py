"""Clock and entropy sources consumed by the Spin operator."""

import os
import time
from typing import Callable

# Returns the current time as 100-nanosecond ticks
TickClock = Callable[[], int]

# Returns the requested number of random bytes
EntropySource = Callable[[int], bytes]

NANOSECONDS_PER_TICK = 100


def system_ticks() -> int:
    """Current time in 100-nanosecond ticks since the Unix epoch."""
    return time.time_ns() // NANOSECONDS_PER_TICK


def random_bytes(count: int) -> bytes:
    """Uniformly distributed random bytes from the operating system."""
    return os.urandom(count)


def fixed_clock(ticks: int) -> TickClock:
    """Clock that always reports the same tick count."""

    def clock() -> int:
        return ticks

    return clock


def fixed_entropy(data: bytes) -> EntropySource:
    """Entropy source that replays the leading bytes of ``data``."""

    def source(count: int) -> bytes:
        if count > len(data):
            raise RuntimeError(
                f"Fixed entropy holds {len(data)} bytes, {count} requested"
            )
        return bytes(data[:count])

    return source

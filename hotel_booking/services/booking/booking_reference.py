"""
Booking reference generation.

References look like ``BK1718000000000A1B2C``: a prefix, the creation
time in unix milliseconds and five random base-36 characters.
"""

import random
import string
import time
from typing import Callable, Optional

BASE36_ALPHABET = string.digits + string.ascii_uppercase
SUFFIX_LENGTH = 5


def _now_millis() -> int:
    return int(time.time() * 1000)


class BookingReferenceGenerator:
    """
    Produces booking references.

    The clock and random source are injectable so references are
    reproducible in tests. Uniqueness is finally guaranteed by the
    database constraint on ``booking_reference``.
    """

    def __init__(
        self,
        prefix: str = "BK",
        clock: Optional[Callable[[], int]] = None,
        rng: Optional[random.Random] = None,
    ):
        self.prefix = prefix
        self._clock = clock or _now_millis
        self._rng = rng or random.SystemRandom()

    def generate(self) -> str:
        suffix = "".join(self._rng.choice(BASE36_ALPHABET) for _ in range(SUFFIX_LENGTH))
        return f"{self.prefix}{self._clock()}{suffix}"

    __call__ = generate

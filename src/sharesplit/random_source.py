"""Random coefficient generation for share polynomials."""
from __future__ import annotations

import random
import secrets
import threading
from typing import List, Optional

from .field import PRIME


class CoefficientSource:
    """Draw uniformly distributed field elements from an explicit generator.

    The default generator is backed by OS entropy. A seeded
    :class:`random.Random` may be injected for reproducible fixtures; such a
    source must never be used for real secrets.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else secrets.SystemRandom()
        self._lock = threading.Lock()

    @property
    def is_cryptographic(self) -> bool:
        return isinstance(self._rng, random.SystemRandom)

    def coefficients(self, count: int) -> List[int]:
        """Return ``count`` independent field elements."""

        with self._lock:
            return [self._rng.randrange(PRIME) for _ in range(count)]


_thread_state = threading.local()


def default_source() -> CoefficientSource:
    """Return the OS-entropy source owned by the calling thread."""

    source = getattr(_thread_state, "source", None)
    if source is None:
        source = CoefficientSource()
        _thread_state.source = source
    return source


__all__ = ["CoefficientSource", "default_source"]

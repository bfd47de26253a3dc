"""Value objects exchanged between the splitter, combiner and codec."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .errors import InvalidShareSet
from .field import PRIME

MAX_SHARES = 255


@dataclass(frozen=True)
class Share:
    """One participant's share: id ``x``, threshold and per-byte field values."""

    x: int
    threshold: int
    values: Tuple[int, ...]

    def __post_init__(self) -> None:
        if not 1 <= self.x <= MAX_SHARES:
            raise InvalidShareSet(f"share id {self.x} outside 1..{MAX_SHARES}")
        if not 1 <= self.threshold <= MAX_SHARES:
            raise InvalidShareSet(f"threshold {self.threshold} outside 1..{MAX_SHARES}")
        values = tuple(self.values)
        for value in values:
            if not 0 <= value < PRIME:
                raise InvalidShareSet(f"share value {value} is not a field element")
        object.__setattr__(self, "values", values)

    def __len__(self) -> int:
        return len(self.values)


__all__ = ["MAX_SHARES", "Share"]

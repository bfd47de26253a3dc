"""Recover secrets from shares by Lagrange interpolation at ``x = 0``."""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from .errors import DivisionByZero, EmptyInput, InvalidParameters, InvalidShareSet
from .field import BYTE_SENTINEL_VALUE, PRIME, mod_inverse
from .models import Share
from .validation import collect_issues, describe, distinct_points, validate_share_set

_logger = logging.getLogger(__name__)


def _select(items: Sequence, count: Optional[int]) -> Sequence:
    if not items:
        raise EmptyInput("no shares supplied")
    if count is None:
        return items
    if count < 1:
        raise EmptyInput("at least one share is required")
    if count > len(items):
        raise InvalidParameters(f"count {count} exceeds the {len(items)} shares supplied")
    return items[:count]


def lagrange_weights(xs: Sequence[int]) -> List[int]:
    """Return the basis weights ``l_i(0)`` for the x-coordinates ``xs``.

    ``l_i(0) = prod(-x_j) / prod(x_i - x_j)`` over ``j != i``. The weights only
    depend on the x-coordinates, so one set serves every byte position.
    """

    weights = []
    for i, x_i in enumerate(xs):
        numerator = 1
        denominator = 1
        for j, x_j in enumerate(xs):
            if i == j:
                continue
            numerator = (numerator * -x_j) % PRIME
            denominator = (denominator * (x_i - x_j)) % PRIME
        try:
            weights.append((numerator * mod_inverse(denominator)) % PRIME)
        except DivisionByZero as exc:
            raise DivisionByZero(f"x-coordinate {x_i} collides with another point") from exc
    return weights


def _interpolate(weights: Sequence[int], ys: Sequence[int]) -> int:
    total = 0
    for weight, y in zip(weights, ys):
        total = (total + y * weight) % PRIME
    return total


def join(pairs: Sequence[Tuple[int, int]], count: Optional[int] = None) -> int:
    """Reconstruct the constant term from ``count`` points (all by default).

    Fewer points than the original threshold give a well-defined but wrong
    value; the arithmetic cannot detect that.
    """

    selected = _select(pairs, count)
    issues = distinct_points(selected)
    if issues:
        raise InvalidShareSet(describe(issues))
    weights = lagrange_weights([x for x, _ in selected])
    return _interpolate(weights, [y for _, y in selected])


def join_secret(
    shares: Sequence[Share],
    count: Optional[int] = None,
    *,
    strict: bool = True,
) -> bytes:
    """Rebuild the secret bytes from the first ``count`` shares.

    With ``strict`` off, shares carrying different thresholds may be mixed.
    """

    selected = _select(shares, count)
    issues = collect_issues(validate_share_set(selected, strict=strict))
    if issues:
        raise InvalidShareSet(describe(issues))

    weights = lagrange_weights([share.x for share in selected])
    length = len(selected[0])
    result = bytearray()
    for position in range(length):
        value = _interpolate(weights, [share.values[position] for share in selected])
        if value == BYTE_SENTINEL_VALUE:
            raise InvalidShareSet(
                f"position {position} reconstructs to {value}, which is not a byte"
            )
        result.append(value)

    _logger.debug("joined %d bytes from %d shares", length, len(selected))
    return bytes(result)


__all__ = ["lagrange_weights", "join", "join_secret"]

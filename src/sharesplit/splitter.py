"""Split secret bytes into shares with random polynomials over GF(257)."""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple, Union

from .errors import InvalidParameters
from .field import PRIME
from .models import Share
from .random_source import CoefficientSource, default_source
from .validation import coerce_count, describe, validate_parameters

_logger = logging.getLogger(__name__)

SecretBytes = Union[bytes, bytearray, memoryview]


def evaluate_polynomial(coefficients: Sequence[int], x: int) -> int:
    """Evaluate ``coefficients`` (constant term first) at ``x`` with Horner's rule."""

    y = 0
    for coefficient in reversed(coefficients):
        y = (y * x + coefficient) % PRIME
    return y


def check_parameters(n: object, t: object) -> Tuple[int, int]:
    """Return ``(n, t)`` as ints or raise :class:`InvalidParameters`."""

    n_value = coerce_count(n, "n")
    t_value = coerce_count(t, "t")
    issues = validate_parameters(n_value, t_value)
    if issues:
        raise InvalidParameters(describe(issues))
    return n_value, t_value


def split_byte(value: int, n: int, t: int, coefficients: Sequence[int]) -> List[Tuple[int, int]]:
    """Hide ``value`` as the constant term and return ``n`` points ``(x, y)``.

    ``coefficients`` are the ``t - 1`` random higher-order terms; ``x`` runs
    over ``1..n`` because ``x = 0`` is the secret itself.
    """

    n, t = check_parameters(n, t)
    if not 0 <= value < PRIME:
        raise InvalidParameters(f"value {value} is not a field element")
    if len(coefficients) != t - 1:
        raise InvalidParameters(f"expected {t - 1} coefficients, got {len(coefficients)}")
    polynomial = [value, *coefficients]
    return [(x, evaluate_polynomial(polynomial, x)) for x in range(1, n + 1)]


def split_secret(
    secret: SecretBytes,
    n: object,
    t: object,
    *,
    source: Optional[CoefficientSource] = None,
) -> List[Share]:
    """Split ``secret`` into ``n`` shares, any ``t`` of which recover it.

    A fresh polynomial is drawn for every byte position.
    """

    if isinstance(secret, str):
        raise TypeError("secret must be bytes; encode text before splitting")
    data = bytes(secret)
    n, t = check_parameters(n, t)
    source = source or default_source()
    if not source.is_cryptographic:
        _logger.warning("splitting with a non-cryptographic coefficient source")

    columns: List[List[int]] = [[] for _ in range(n)]
    for byte in data:
        points = split_byte(byte, n, t, source.coefficients(t - 1))
        for column, (_, y) in zip(columns, points):
            column.append(y)

    _logger.debug("split %d bytes into %d shares (threshold %d)", len(data), n, t)
    return [Share(x=x, threshold=t, values=tuple(column)) for x, column in enumerate(columns, start=1)]


__all__ = ["evaluate_polynomial", "check_parameters", "split_byte", "split_secret"]

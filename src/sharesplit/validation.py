"""Precondition checks for split parameters and share collections.

Checks return lists of :class:`ValidationIssue` so several problems can be
reported together; the operations raise the typed error once the lists are
collected.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from .errors import InvalidParameters
from .models import MAX_SHARES, Share


@dataclass
class ValidationIssue:
    field: str
    message: str


def coerce_count(value: object, field: str) -> int:
    """Turn ``value`` into an ``int`` or raise :class:`InvalidParameters`.

    Decimal strings are accepted since ``n`` and ``t`` often come from argv.
    """

    if isinstance(value, bool):
        raise InvalidParameters(f"{field} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip(), 10)
        except ValueError as exc:
            raise InvalidParameters(f"{field} must be an integer, got {value!r}") from exc
    raise InvalidParameters(f"{field} must be an integer, got {value!r}")


def validate_parameters(n: int, t: int) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    if n < 1 or n > MAX_SHARES:
        issues.append(ValidationIssue("n", f"n must be between 1 and {MAX_SHARES}, got {n}"))
    if t < 1:
        issues.append(ValidationIssue("t", f"t must be at least 1, got {t}"))
    elif t > n:
        issues.append(ValidationIssue("t", f"t ({t}) must not exceed n ({n})"))
    return issues


def validate_share_set(shares: Sequence[Share], *, strict: bool = True) -> list[ValidationIssue]:
    """Check that ``shares`` can be combined with each other."""

    issues: list[ValidationIssue] = []
    if not shares:
        return issues

    seen: set[int] = set()
    for share in shares:
        if share.x in seen:
            issues.append(ValidationIssue("x", f"duplicate share id {share.x:02X}"))
        seen.add(share.x)

    lengths = {len(share) for share in shares}
    if len(lengths) > 1:
        issues.append(
            ValidationIssue("values", f"shares have different lengths: {sorted(lengths)}")
        )

    if strict:
        thresholds = {share.threshold for share in shares}
        if len(thresholds) > 1:
            issues.append(
                ValidationIssue("threshold", f"shares disagree on threshold: {sorted(thresholds)}")
            )
    return issues


def collect_issues(*sources: Iterable[ValidationIssue]) -> list[ValidationIssue]:
    aggregated: list[ValidationIssue] = []
    for source in sources:
        aggregated.extend(source)
    return aggregated


def describe(issues: Iterable[ValidationIssue]) -> str:
    return "; ".join(issue.message for issue in issues)


def distinct_points(points: Sequence[Tuple[int, int]]) -> list[ValidationIssue]:
    xs = [x for x, _ in points]
    if len(set(xs)) != len(xs):
        return [ValidationIssue("x", "x-coordinates must be pairwise distinct")]
    return []


__all__ = [
    "ValidationIssue",
    "coerce_count",
    "validate_parameters",
    "validate_share_set",
    "collect_issues",
    "describe",
    "distinct_points",
]

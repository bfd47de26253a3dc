"""Text encoding of shares.

A share line is ``IITTAA`` followed by one two-character unit per secret
byte: ``II`` is the share id and ``TT`` the threshold, both uppercase hex.
``AA`` is a fixed marker kept for compatibility with older share
calculators. A unit is either two hex digits or ``G0`` for the field value
256, which has no two-digit hex form.
"""
from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional

from .errors import EmptyInput, InvalidShareSet, MalformedShareLine
from .field import BYTE_SENTINEL_VALUE
from .models import Share
from .policy import policy
from .validation import describe, validate_share_set

_logger = logging.getLogger(__name__)

HEADER_WIDTH = 6
COMPAT_MARKER = "AA"
SENTINEL_TOKEN = "G0"
TRAILING_WHITESPACE = " \r\n\t"

_HEX_UNIT = re.compile(r"[0-9A-Fa-f]{2}")


def encode_value(value: int) -> str:
    if value == BYTE_SENTINEL_VALUE:
        return SENTINEL_TOKEN
    return f"{value:02X}"


def encode_share(share: Share) -> str:
    """Serialize ``share`` into a single line without a newline."""

    header = f"{share.x:02X}{share.threshold:02X}{COMPAT_MARKER}"
    return header + "".join(encode_value(value) for value in share.values)


def encode_share_set(shares: Iterable[Share]) -> str:
    """Serialize shares one per line, terminated by a final newline."""

    lines = [encode_share(share) for share in shares]
    if not lines:
        raise EmptyInput("no shares to encode")
    return "\n".join(lines) + "\n"


def _parse_hex(unit: str, what: str, line_number: Optional[int]) -> int:
    if not _HEX_UNIT.fullmatch(unit):
        raise MalformedShareLine(f"{what} {unit!r} is not two hex digits", line_number=line_number)
    return int(unit, 16)


def decode_value(unit: str, *, line_number: Optional[int] = None) -> int:
    if unit == SENTINEL_TOKEN:
        return BYTE_SENTINEL_VALUE
    return _parse_hex(unit, "body unit", line_number)


def decode_share_line(
    line: str,
    *,
    line_number: Optional[int] = None,
    strict: Optional[bool] = None,
) -> Share:
    """Parse one share line; trailing whitespace is ignored."""

    strict = policy.strict_header if strict is None else strict
    text = line.rstrip(TRAILING_WHITESPACE)
    if len(text) < HEADER_WIDTH:
        raise MalformedShareLine(
            f"share line is shorter than the {HEADER_WIDTH}-character header",
            line_number=line_number,
        )

    x = _parse_hex(text[0:2], "share id", line_number)
    if x == 0:
        raise MalformedShareLine("share id 00 is reserved", line_number=line_number)
    threshold = _parse_hex(text[2:4], "threshold", line_number)
    if threshold == 0:
        raise MalformedShareLine("threshold 00 is invalid", line_number=line_number)
    if strict and text[4:HEADER_WIDTH] != COMPAT_MARKER:
        raise MalformedShareLine(
            f"expected {COMPAT_MARKER!r} after the threshold, got {text[4:HEADER_WIDTH]!r}",
            line_number=line_number,
        )

    body = text[HEADER_WIDTH:]
    if len(body) % 2:
        raise MalformedShareLine("share body has an odd number of characters", line_number=line_number)
    values = tuple(
        decode_value(body[i : i + 2], line_number=line_number) for i in range(0, len(body), 2)
    )
    return Share(x=x, threshold=threshold, values=values)


def decode_share_set(blob: str, *, strict: Optional[bool] = None) -> List[Share]:
    """Parse a newline separated blob; blank lines are skipped."""

    strict = policy.strict_header if strict is None else strict
    shares: List[Share] = []
    for line_number, raw in enumerate(blob.split("\n"), start=1):
        if not raw.rstrip(TRAILING_WHITESPACE):
            continue
        shares.append(decode_share_line(raw, line_number=line_number, strict=strict))
    if not shares:
        raise EmptyInput("no share lines found")

    issues = validate_share_set(shares, strict=strict)
    if issues:
        raise InvalidShareSet(describe(issues))
    _logger.debug("decoded %d shares of %d bytes", len(shares), len(shares[0]))
    return shares


__all__ = [
    "HEADER_WIDTH",
    "COMPAT_MARKER",
    "SENTINEL_TOKEN",
    "encode_value",
    "encode_share",
    "encode_share_set",
    "decode_value",
    "decode_share_line",
    "decode_share_set",
]

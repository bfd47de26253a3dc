# SPDX-FileCopyrightText: 2025 sharesplit contributors
# SPDX-License-Identifier: MIT
"""Exception hierarchy shared by every sharesplit module."""
from __future__ import annotations


class ShareError(ValueError):
    """Base class for all secret-sharing failures."""


class InvalidParameters(ShareError):
    """Raised when ``n``/``t`` (or other numeric inputs) are out of contract."""


class InvalidShareSet(ShareError):
    """Raised when a collection of shares cannot be combined."""


class DivisionByZero(InvalidShareSet, ZeroDivisionError):
    """Raised when a field element without an inverse is inverted."""


class MalformedShareLine(ShareError):
    """Raised when a textual share line does not follow the wire format."""

    def __init__(self, message: str, *, line_number: int | None = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class EmptyInput(ShareError):
    """Raised when a join is attempted without any shares."""


__all__ = [
    "ShareError",
    "InvalidParameters",
    "InvalidShareSet",
    "DivisionByZero",
    "MalformedShareLine",
    "EmptyInput",
]

# SPDX-FileCopyrightText: 2025 sharesplit contributors
# SPDX-License-Identifier: MIT
"""Shamir's secret sharing over GF(257) with a plain-text share format."""

from __future__ import annotations

from .api import extract_secret_from_share_strings, generate_share_strings, recover_text
from .codec import decode_share_line, decode_share_set, encode_share, encode_share_set
from .combiner import join, join_secret, lagrange_weights
from .errors import (
    DivisionByZero,
    EmptyInput,
    InvalidParameters,
    InvalidShareSet,
    MalformedShareLine,
    ShareError,
)
from .field import PRIME, mod_inverse, mod_pow
from .models import Share
from .random_source import CoefficientSource, default_source
from .splitter import split_byte, split_secret

__version__ = "0.1.0"

__all__ = [
    "PRIME",
    "Share",
    "CoefficientSource",
    "default_source",
    "mod_pow",
    "mod_inverse",
    "split_byte",
    "split_secret",
    "join",
    "join_secret",
    "lagrange_weights",
    "encode_share",
    "encode_share_set",
    "decode_share_line",
    "decode_share_set",
    "generate_share_strings",
    "extract_secret_from_share_strings",
    "recover_text",
    "ShareError",
    "InvalidParameters",
    "InvalidShareSet",
    "DivisionByZero",
    "MalformedShareLine",
    "EmptyInput",
]

"""Centralised runtime configuration for share parsing and joining.

Values can be overridden by environment variables so deployments can relax
or tighten validation without code changes. The field modulus is not part
of the policy: it is a constant in :mod:`sharesplit.field`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _load_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


def _load_str(name: str, default: str) -> str:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    return value.strip()


@dataclass(frozen=True)
class SharingPolicy:
    """Holds validation switches and logging defaults."""

    strict_header: bool = True
    enforce_quorum: bool = True
    log_level: str = "WARNING"


def load_policy() -> SharingPolicy:
    """Load the policy considering environment overrides."""

    return SharingPolicy(
        strict_header=_load_bool("SHARESPLIT_STRICT_HEADER", True),
        enforce_quorum=_load_bool("SHARESPLIT_ENFORCE_QUORUM", True),
        log_level=_load_str("SHARESPLIT_LOG_LEVEL", "WARNING").upper(),
    )


policy = load_policy()


__all__ = ["SharingPolicy", "policy", "load_policy"]

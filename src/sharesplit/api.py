"""Blob-level operations: secret in, share text out, and back."""
from __future__ import annotations

import logging
from typing import Optional, Union

from .codec import decode_share_set, encode_share_set
from .combiner import join_secret
from .errors import InvalidShareSet
from .policy import policy
from .random_source import CoefficientSource
from .splitter import split_secret

_logger = logging.getLogger(__name__)


def generate_share_strings(
    secret: Union[str, bytes, bytearray],
    n: object,
    t: object,
    *,
    source: Optional[CoefficientSource] = None,
) -> str:
    """Split ``secret`` and return the newline separated share lines.

    Text secrets are encoded as UTF-8 first.
    """

    data = secret.encode("utf-8") if isinstance(secret, str) else bytes(secret)
    shares = split_secret(data, n, t, source=source)
    return encode_share_set(shares)


def extract_secret_from_share_strings(
    blob: str,
    *,
    strict: Optional[bool] = None,
    enforce_quorum: Optional[bool] = None,
) -> bytes:
    """Recover the secret from every share line present in ``blob``.

    When the quorum check is on, a blob with fewer lines than the threshold
    recorded in the share headers is rejected instead of producing garbage.
    """

    strict = policy.strict_header if strict is None else strict
    enforce_quorum = policy.enforce_quorum if enforce_quorum is None else enforce_quorum
    shares = decode_share_set(blob, strict=strict)
    threshold = max(share.threshold for share in shares)
    if len(shares) < threshold:
        if enforce_quorum:
            raise InvalidShareSet(f"{len(shares)} shares supplied but threshold is {threshold}")
        _logger.warning("joining %d shares below threshold %d", len(shares), threshold)
    return join_secret(shares, strict=strict)


def recover_text(blob: str, encoding: str = "utf-8") -> str:
    return extract_secret_from_share_strings(blob).decode(encoding)


__all__ = ["generate_share_strings", "extract_secret_from_share_strings", "recover_text"]

"""Fixed-width wire encoding for field elements.

Each element is its canonical value as a 4-byte little-endian unsigned
integer.  Sequences are plain concatenations.

Decoding always goes through the reducing constructor, so a decoded
element is canonical whatever the raw bytes held.  What happens to a raw
value >= MODULUS depends on the policy:

  reduce  – fold it into the field (default; see config.DECODE_POLICY)
  reject  – raise ``FieldEncodingError``
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from fftfield import config
from fftfield.config import BYTE_ORDER, DECODE_POLICIES, ENCODED_SIZE, MODULUS
from fftfield.crypto.field import Field, from_u32

logger = logging.getLogger(__name__)


class FieldEncodingError(ValueError):
    """Raised when bytes cannot be decoded into a field element."""


def _resolve_policy(policy: Optional[str]) -> str:
    if policy is None:
        policy = config.DECODE_POLICY
    if policy not in DECODE_POLICIES:
        raise ValueError(f"Unknown decode policy: {policy!r} (expected one of {DECODE_POLICIES})")
    return policy


def encode(a: Field) -> bytes:
    """Encode *a* as 4 little-endian bytes."""
    return a.value.to_bytes(ENCODED_SIZE, BYTE_ORDER)


def decode(data: bytes, policy: Optional[str] = None) -> Field:
    """Decode exactly 4 bytes into a field element."""
    if len(data) != ENCODED_SIZE:
        raise FieldEncodingError(
            f"Expected {ENCODED_SIZE} bytes, got {len(data)}"
        )
    policy = _resolve_policy(policy)
    raw = int.from_bytes(data, BYTE_ORDER)
    if raw >= MODULUS:
        if policy == "reject":
            raise FieldEncodingError(f"Encoded value {raw} is not below the modulus {MODULUS}")
        logger.debug("reducing out-of-range encoded value %d", raw)
    return from_u32(raw)


def encode_many(elements: Iterable[Field]) -> bytes:
    """Concatenate the encodings of *elements*."""
    return b"".join(encode(a) for a in elements)


def decode_many(data: bytes, policy: Optional[str] = None) -> List[Field]:
    """Split *data* into 4-byte chunks and decode each one."""
    if len(data) % ENCODED_SIZE:
        raise FieldEncodingError(
            f"Encoded length {len(data)} is not a multiple of {ENCODED_SIZE}"
        )
    policy = _resolve_policy(policy)
    return [
        decode(data[i:i + ENCODED_SIZE], policy)
        for i in range(0, len(data), ENCODED_SIZE)
    ]

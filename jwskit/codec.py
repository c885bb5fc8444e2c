"""Conversion between ECDSA ``(r, s)`` pairs and JWS signature bytes.

RFC 7515 Appendix A.3 serializes an ECDSA signature as the big-endian
octets of ``r`` followed by those of ``s``, each left-padded to the byte
width of the curve.  Two encodings are available:

``SignatureEncoding.FIXED``
    The RFC layout.  Both halves are exactly ``width`` bytes, so the
    signature is always ``2 * width`` bytes long.

``SignatureEncoding.LEGACY``
    Each integer is written at its minimal length and the halves are
    concatenated.  Decoding splits at ``len(data) // 2``, which only
    recovers the original pair when ``r`` and ``s`` have the same minimal
    length.  Kept for byte-for-byte compatibility with older signers.

    When the lengths differ, a signature of odd total length is rejected
    by :func:`decode_signature` with :class:`FormatFailure`, and one of
    even total length splits into the wrong pair and fails to verify.
    On P-256 and P-384 a component is one byte short about once in 256
    draws, so roughly 1 in 128 signatures is affected.  On P-521 the top
    byte holds a single bit, so each component is 65 or 66 bytes about
    equally often: about half of all ES512 signatures come out with odd
    length and cannot be verified, even by the signer that produced them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .errors import FormatFailure

logger = logging.getLogger(__name__)


class SignatureEncoding(str, Enum):
    FIXED = "fixed"
    LEGACY = "legacy"


def _minimal_bytes(value: int) -> bytes:
    return value.to_bytes((value.bit_length() + 7) // 8, "big")


def _check_components(r: int, s: int) -> None:
    for label, value in (("r", r), ("s", s)):
        if not isinstance(value, int) or isinstance(value, bool):
            raise FormatFailure(f"Signature component {label} must be an int")
        if value < 0:
            raise FormatFailure(f"Signature component {label} must be non-negative")


def _require_width(width: Optional[int]) -> int:
    if width is None or width <= 0:
        raise FormatFailure("Fixed-width encoding requires a positive field width")
    return width


def encode_signature(
    r: int,
    s: int,
    *,
    width: Optional[int] = None,
    encoding: SignatureEncoding = SignatureEncoding.FIXED,
) -> bytes:
    """Serialize ``(r, s)`` into JWS signature bytes.

    Args:
        r: First ECDSA signature component.
        s: Second ECDSA signature component.
        width: Curve field width in bytes, required for ``FIXED``.
        encoding: Layout to produce.

    Raises:
        FormatFailure: a component is negative, or does not fit ``width``.
    """
    encoding = SignatureEncoding(encoding)
    _check_components(r, s)

    if encoding is SignatureEncoding.LEGACY:
        r_bytes = _minimal_bytes(r)
        s_bytes = _minimal_bytes(s)
        if len(r_bytes) != len(s_bytes):
            logger.warning(
                f"Legacy signature encoding with unequal component lengths "
                f"(r={len(r_bytes)}, s={len(s_bytes)} bytes); the signature "
                f"will not decode to the same pair"
            )
        return r_bytes + s_bytes

    width = _require_width(width)
    try:
        return r.to_bytes(width, "big") + s.to_bytes(width, "big")
    except OverflowError as e:
        raise FormatFailure(
            f"Signature component does not fit in {width} bytes"
        ) from e


def decode_signature(
    data: bytes,
    *,
    width: Optional[int] = None,
    encoding: SignatureEncoding = SignatureEncoding.FIXED,
) -> Tuple[int, int]:
    """Split JWS signature bytes into the ``(r, s)`` pair.

    Raises:
        FormatFailure: ``data`` is not bytes-like, has odd length, is empty
            (``LEGACY``) or is not exactly ``2 * width`` bytes (``FIXED``).
    """
    encoding = SignatureEncoding(encoding)
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise FormatFailure(
            f"Signature must be bytes-like, not {type(data).__name__}"
        )
    data = bytes(data)

    if len(data) % 2:
        raise FormatFailure(f"Signature length {len(data)} is odd")

    if encoding is SignatureEncoding.LEGACY:
        if not data:
            raise FormatFailure("Signature is empty")
    else:
        width = _require_width(width)
        if len(data) != 2 * width:
            raise FormatFailure(
                f"Signature length {len(data)} does not match expected {2 * width}"
            )

    half = len(data) // 2
    return int.from_bytes(data[:half], "big"), int.from_bytes(data[half:], "big")


@dataclass(frozen=True)
class SignatureCodec:
    """Encoder/decoder bound to one encoding and curve width."""

    encoding: SignatureEncoding = SignatureEncoding.FIXED
    width: Optional[int] = None

    def encode(self, r: int, s: int) -> bytes:
        return encode_signature(r, s, width=self.width, encoding=self.encoding)

    def decode(self, data: bytes) -> Tuple[int, int]:
        return decode_signature(data, width=self.width, encoding=self.encoding)


__all__ = [
    "SignatureCodec",
    "SignatureEncoding",
    "decode_signature",
    "encode_signature",
]

"""Digest provider used by the signing algorithms."""

from __future__ import annotations

from enum import Enum
from typing import Union

from cryptography.exceptions import UnsupportedAlgorithm as CryptoUnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes

from .errors import DigestFailure

BytesLike = Union[bytes, bytearray, memoryview]


class HashAlgorithm(str, Enum):
    """Closed set of hash selectors available to JWS algorithms."""

    SHA256 = "SHA256"
    SHA384 = "SHA384"
    SHA512 = "SHA512"

    @property
    def digest_size(self) -> int:
        return self.hash_algorithm().digest_size

    def hash_algorithm(self) -> hashes.HashAlgorithm:
        """Return a fresh ``cryptography`` hash instance for this selector."""
        return _HASHES[self]()


_HASHES = {
    HashAlgorithm.SHA256: hashes.SHA256,
    HashAlgorithm.SHA384: hashes.SHA384,
    HashAlgorithm.SHA512: hashes.SHA512,
}


def digest(selector: HashAlgorithm, payload: BytesLike) -> bytes:
    """Hash ``payload`` with the algorithm chosen by ``selector``.

    Raises:
        DigestFailure: the selector is unknown, the payload is not
            bytes-like, or the hash backend refused the operation.
    """
    try:
        selector = HashAlgorithm(selector)
    except ValueError as e:
        raise DigestFailure(f"Unknown hash selector: {selector!r}") from e

    if not isinstance(payload, (bytes, bytearray, memoryview)):
        raise DigestFailure(
            f"Payload must be bytes-like, not {type(payload).__name__}"
        )

    try:
        ctx = hashes.Hash(selector.hash_algorithm())
        ctx.update(bytes(payload))
        return ctx.finalize()
    except (ValueError, CryptoUnsupportedAlgorithm) as e:
        raise DigestFailure(f"{selector.value} digest failed: {e}") from e


__all__ = ["BytesLike", "HashAlgorithm", "digest"]

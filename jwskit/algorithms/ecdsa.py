"""ECDSA signing algorithms (ES256, ES384, ES512)."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from ..codec import SignatureCodec, SignatureEncoding
from ..curves import Curve
from ..digest import BytesLike, HashAlgorithm, digest
from ..keys import ECDSAKey
from .base import AlgorithmFamily, JWTAlgorithm

logger = logging.getLogger(__name__)


class ECDSAAlgorithm(Enum):
    """JWS ``alg`` labels with their hash selector and conventional curve."""

    ES256 = ("ES256", HashAlgorithm.SHA256, Curve.P256)
    ES384 = ("ES384", HashAlgorithm.SHA384, Curve.P384)
    ES512 = ("ES512", HashAlgorithm.SHA512, Curve.P521)

    def __init__(self, label: str, hash_algorithm: HashAlgorithm, curve: Curve) -> None:
        self.label = label
        self.hash_algorithm = hash_algorithm
        self.curve = curve

    @classmethod
    def from_label(cls, label: str) -> Optional["ECDSAAlgorithm"]:
        return next((alg for alg in cls if alg.label == label), None)


class ECDSASigner(JWTAlgorithm):
    """Hash-then-sign ECDSA bound to one key and one hash selector.

    The hash selector and the key's curve are not checked against each
    other here; pairing them conventionally is up to the caller.
    """

    family = AlgorithmFamily.ECDSA

    def __init__(
        self,
        key: ECDSAKey,
        algorithm: HashAlgorithm,
        name: str,
        encoding: SignatureEncoding = SignatureEncoding.FIXED,
    ) -> None:
        self.key = key
        self.algorithm = HashAlgorithm(algorithm)
        self._name = name
        self.codec = SignatureCodec(SignatureEncoding(encoding), key.curve.byte_width)

    @property
    def name(self) -> str:
        return self._name

    def sign(self, plaintext: BytesLike) -> bytes:
        message_digest = digest(self.algorithm, plaintext)
        r, s = self.key.raw_sign(message_digest, self.algorithm)
        signature = self.codec.encode(r, s)
        logger.debug(f"{self._name} produced {len(signature)} byte signature")
        return signature

    def verify(self, signature: BytesLike, plaintext: BytesLike) -> bool:
        r, s = self.codec.decode(signature)
        message_digest = digest(self.algorithm, plaintext)
        return self.key.raw_verify(message_digest, r, s, self.algorithm)

    def __repr__(self) -> str:
        return (
            f"ECDSASigner(name={self._name!r}, curve={self.key.curve.value!r}, "
            f"encoding={self.codec.encoding.value!r})"
        )

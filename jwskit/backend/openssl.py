"""Native backend built on the ``cryptography`` package (OpenSSL)."""

from __future__ import annotations

import logging
from typing import Optional, Tuple, Union

from cryptography.exceptions import InvalidSignature
from cryptography.exceptions import UnsupportedAlgorithm as CryptoUnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import (
    Prehashed,
    decode_dss_signature,
    encode_dss_signature,
)

from ..curves import Curve
from ..digest import HashAlgorithm
from ..errors import KeyFailure, SigningFailure, UnsupportedAlgorithm
from .base import NativeBackend

logger = logging.getLogger(__name__)

ECKey = Union[ec.EllipticCurvePrivateKey, ec.EllipticCurvePublicKey]

_CURVES = {
    Curve.P256: ec.SECP256R1,
    Curve.P384: ec.SECP384R1,
    Curve.P521: ec.SECP521R1,
}


class OpenSSLBackend(NativeBackend[ECKey]):
    """Backend whose handles are ``cryptography`` EC key objects.

    OpenSSL EC keys are immutable once created and ``cryptography`` allows
    concurrent sign and verify calls on a shared key object.
    """

    name = "cryptography"
    thread_safe = True

    def generate(self, curve: Curve) -> ECKey:
        curve = Curve.from_name(curve)
        try:
            return ec.generate_private_key(_CURVES[curve]())
        except (ValueError, CryptoUnsupportedAlgorithm) as e:
            raise KeyFailure(f"Failed to generate {curve.value} key: {e}") from e

    def load_public_pem(self, data: bytes) -> ECKey:
        try:
            key = serialization.load_pem_public_key(_as_bytes(data))
        except (ValueError, TypeError, CryptoUnsupportedAlgorithm) as e:
            raise KeyFailure(f"Failed to load public key: {e}") from e
        if not isinstance(key, ec.EllipticCurvePublicKey):
            raise KeyFailure("PEM does not contain an EC public key")
        self.curve_of(key)
        return key

    def load_private_pem(self, data: bytes, password: Optional[bytes] = None) -> ECKey:
        if isinstance(password, str):
            password = password.encode("utf-8")
        try:
            key = serialization.load_pem_private_key(_as_bytes(data), password=password)
        except (ValueError, TypeError, CryptoUnsupportedAlgorithm) as e:
            raise KeyFailure(f"Failed to load private key: {e}") from e
        if not isinstance(key, ec.EllipticCurvePrivateKey):
            raise KeyFailure("PEM does not contain an EC private key")
        self.curve_of(key)
        return key

    def curve_of(self, handle: ECKey) -> Curve:
        try:
            return Curve.from_name(handle.curve.name)
        except UnsupportedAlgorithm as e:
            raise KeyFailure(str(e)) from e

    def has_private(self, handle: ECKey) -> bool:
        return isinstance(handle, ec.EllipticCurvePrivateKey)

    def public_handle(self, handle: ECKey) -> ECKey:
        if isinstance(handle, ec.EllipticCurvePrivateKey):
            return handle.public_key()
        # Re-load so the new handle has its own lifetime.
        return self.load_public_pem(self.public_pem(handle))

    def public_pem(self, handle: ECKey) -> bytes:
        if isinstance(handle, ec.EllipticCurvePrivateKey):
            handle = handle.public_key()
        return handle.public_bytes(
            serialization.Encoding.PEM,
            serialization.PublicFormat.SubjectPublicKeyInfo,
        )

    def private_pem(self, handle: ECKey) -> bytes:
        if not isinstance(handle, ec.EllipticCurvePrivateKey):
            raise KeyFailure("Public keys have no private PEM encoding")
        return handle.private_bytes(
            serialization.Encoding.PEM,
            serialization.PrivateFormat.PKCS8,
            serialization.NoEncryption(),
        )

    def raw_sign(
        self, digest: bytes, handle: ECKey, selector: HashAlgorithm
    ) -> Tuple[int, int]:
        if not isinstance(handle, ec.EllipticCurvePrivateKey):
            raise SigningFailure("Public keys cannot sign")
        try:
            der = handle.sign(digest, ec.ECDSA(Prehashed(selector.hash_algorithm())))
        except (ValueError, TypeError, CryptoUnsupportedAlgorithm) as e:
            raise SigningFailure(f"ECDSA signing failed: {e}") from e
        return decode_dss_signature(der)

    def raw_verify(
        self, digest: bytes, r: int, s: int, handle: ECKey, selector: HashAlgorithm
    ) -> bool:
        public_key = (
            handle.public_key()
            if isinstance(handle, ec.EllipticCurvePrivateKey)
            else handle
        )
        try:
            der = encode_dss_signature(r, s)
            public_key.verify(der, digest, ec.ECDSA(Prehashed(selector.hash_algorithm())))
        except InvalidSignature:
            return False
        except (ValueError, TypeError, OverflowError) as e:
            logger.debug(f"Native verify rejected signature: {e}")
            return False
        return True


def _as_bytes(data: Union[str, bytes]) -> bytes:
    return data.encode("ascii") if isinstance(data, str) else bytes(data)

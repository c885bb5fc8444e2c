"""Signer facade and the ``alg`` label registry."""

from __future__ import annotations

import logging
from typing import Optional, Union

from .algorithms import ECDSAAlgorithm, ECDSASigner, JWTAlgorithm
from .codec import SignatureEncoding
from .config import JwsKitConfig, load_config
from .digest import BytesLike
from .errors import UnsupportedAlgorithm
from .keys import ECDSAKey

logger = logging.getLogger(__name__)

EncodingLike = Union[SignatureEncoding, str]


class JWTSigner:
    """Signs and verifies JWS signing inputs with one configured algorithm.

    The token layer only needs :attr:`name` for the ``alg`` header and the
    :meth:`sign` / :meth:`verify` pair; which family backs the signer is an
    implementation detail of the wrapped :class:`JWTAlgorithm`.
    """

    def __init__(self, algorithm: JWTAlgorithm) -> None:
        self.algorithm = algorithm

    @property
    def name(self) -> str:
        return self.algorithm.name

    def sign(self, plaintext: BytesLike) -> bytes:
        return self.algorithm.sign(plaintext)

    def verify(self, signature: BytesLike, plaintext: BytesLike) -> bool:
        return self.algorithm.verify(signature, plaintext)

    @classmethod
    def ecdsa(
        cls,
        algorithm: ECDSAAlgorithm,
        key: ECDSAKey,
        encoding: Optional[EncodingLike] = None,
        config: Optional[JwsKitConfig] = None,
    ) -> "JWTSigner":
        """Bind ``key`` to the hash selector and label of ``algorithm``.

        ``encoding`` and curve pairing rules fall back to ``config`` (or the
        loaded configuration) when not given.
        """
        config = config or load_config()
        if encoding is None:
            encoding = config.signature_encoding
        try:
            encoding = SignatureEncoding(encoding)
        except ValueError as e:
            raise UnsupportedAlgorithm(f"Unsupported signature encoding: {encoding!r}") from e

        if key.curve is not algorithm.curve:
            message = (
                f"{algorithm.label} is conventionally used with "
                f"{algorithm.curve.value}, got a {key.curve.value} key"
            )
            if config.strict_curve_pairing:
                raise UnsupportedAlgorithm(message)
            logger.warning(message)

        return cls(
            ECDSASigner(
                key=key,
                algorithm=algorithm.hash_algorithm,
                name=algorithm.label,
                encoding=encoding,
            )
        )

    @classmethod
    def es256(cls, key: ECDSAKey, **kwargs) -> "JWTSigner":
        return cls.ecdsa(ECDSAAlgorithm.ES256, key, **kwargs)

    @classmethod
    def es384(cls, key: ECDSAKey, **kwargs) -> "JWTSigner":
        return cls.ecdsa(ECDSAAlgorithm.ES384, key, **kwargs)

    @classmethod
    def es512(cls, key: ECDSAKey, **kwargs) -> "JWTSigner":
        return cls.ecdsa(ECDSAAlgorithm.ES512, key, **kwargs)

    def __repr__(self) -> str:
        return f"JWTSigner({self.algorithm!r})"


def lookup_algorithm(label: str) -> Optional[ECDSAAlgorithm]:
    """Return the algorithm registered for ``label`` or ``None``."""
    return ECDSAAlgorithm.from_label(label)


def get_signer(
    label: str,
    key: ECDSAKey,
    encoding: Optional[EncodingLike] = None,
    config: Optional[JwsKitConfig] = None,
) -> JWTSigner:
    """Return a signer for the ``alg`` header value ``label``.

    Raises:
        UnsupportedAlgorithm: ``label`` is not a registered algorithm, or
            strict curve pairing rejects ``key``.
    """
    algorithm = lookup_algorithm(label)
    if algorithm is None:
        raise UnsupportedAlgorithm(f"Unsupported signing algorithm: {label}")
    return JWTSigner.ecdsa(algorithm, key, encoding=encoding, config=config)


__all__ = ["JWTSigner", "get_signer", "lookup_algorithm"]

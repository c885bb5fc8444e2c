"""Base interface for JWS signing algorithms."""

from __future__ import annotations

import abc
from enum import Enum

from ..digest import BytesLike


class AlgorithmFamily(str, Enum):
    """Signature families that can back a :class:`JWTAlgorithm`."""

    ECDSA = "ECDSA"


class JWTAlgorithm(metaclass=abc.ABCMeta):
    """Uniform sign/verify contract shared by every algorithm family."""

    family: AlgorithmFamily

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Label placed in the ``alg`` header, e.g. ``"ES256"``."""
        raise NotImplementedError

    @abc.abstractmethod
    def sign(self, plaintext: BytesLike) -> bytes:
        """Return the JWS signature bytes for ``plaintext``."""
        raise NotImplementedError

    @abc.abstractmethod
    def verify(self, signature: BytesLike, plaintext: BytesLike) -> bool:
        """Return whether ``signature`` matches ``plaintext``.

        A well-formed signature that does not match yields ``False``;
        malformed signature bytes raise :class:`~jwskit.errors.FormatFailure`.
        """
        raise NotImplementedError

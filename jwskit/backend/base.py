"""Base interface for native ECDSA backends."""

from __future__ import annotations

import abc
from typing import Generic, Optional, Tuple, TypeVar

from ..curves import Curve
from ..digest import HashAlgorithm

HandleT = TypeVar("HandleT")


class NativeBackend(Generic[HandleT], metaclass=abc.ABCMeta):
    """Abstract provider of key handles and raw ECDSA primitives.

    Handles are opaque to callers.  Every handle returned by ``generate`` or
    one of the ``load_*`` methods is owned by exactly one
    :class:`~jwskit.keys.ECDSAKey` which passes it back to ``release`` once.
    """

    name: str = "base"

    #: Whether one handle may be used by several threads at once.  When
    #: ``False`` the owning key serializes raw sign/verify calls.
    thread_safe: bool = False

    @abc.abstractmethod
    def generate(self, curve: Curve) -> HandleT:
        """Generate a fresh private key on ``curve``."""
        raise NotImplementedError

    @abc.abstractmethod
    def load_public_pem(self, data: bytes) -> HandleT:
        """Load a PEM encoded SubjectPublicKeyInfo EC key."""
        raise NotImplementedError

    @abc.abstractmethod
    def load_private_pem(self, data: bytes, password: Optional[bytes] = None) -> HandleT:
        """Load a PEM encoded EC private key (SEC1 or PKCS#8)."""
        raise NotImplementedError

    def release(self, handle: HandleT) -> None:
        """Free ``handle`` (no-op by default)."""
        pass

    @abc.abstractmethod
    def curve_of(self, handle: HandleT) -> Curve:
        raise NotImplementedError

    @abc.abstractmethod
    def has_private(self, handle: HandleT) -> bool:
        raise NotImplementedError

    @abc.abstractmethod
    def public_handle(self, handle: HandleT) -> HandleT:
        """Return a new public-only handle for the key behind ``handle``."""
        raise NotImplementedError

    @abc.abstractmethod
    def public_pem(self, handle: HandleT) -> bytes:
        raise NotImplementedError

    @abc.abstractmethod
    def private_pem(self, handle: HandleT) -> bytes:
        raise NotImplementedError

    @abc.abstractmethod
    def raw_sign(
        self, digest: bytes, handle: HandleT, selector: HashAlgorithm
    ) -> Tuple[int, int]:
        """Sign a precomputed ``digest`` and return the ``(r, s)`` pair.

        Raises:
            SigningFailure: the native primitive produced no signature.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def raw_verify(
        self, digest: bytes, r: int, s: int, handle: HandleT, selector: HashAlgorithm
    ) -> bool:
        """Return ``True`` only for an exact match; never raise on mismatch."""
        raise NotImplementedError

"""ECDSA key ownership."""

from __future__ import annotations

import contextlib
import logging
import threading
import weakref
from typing import Any, Iterator, Optional, Tuple, Union

from .backend import NativeBackend, get_backend
from .config import load_config
from .curves import Curve
from .digest import HashAlgorithm
from .errors import KeyFailure

logger = logging.getLogger(__name__)

PemData = Union[str, bytes]


def _release(backend: NativeBackend, handle: Any, curve: Curve) -> None:
    backend.release(handle)
    logger.debug(f"Released {curve.value} key handle")


class ECDSAKey:
    """Owns a single native EC key handle.

    Keys are created with :meth:`generate`, :meth:`public` or
    :meth:`private`.  The handle is released exactly once: on :meth:`close`,
    when leaving a ``with`` block, or when the key is garbage collected,
    whichever comes first.  Signers hold a reference to the key and never
    see the handle outside of :meth:`raw_sign` and :meth:`raw_verify`.
    """

    def __init__(self, handle: Any, backend: NativeBackend) -> None:
        try:
            curve = backend.curve_of(handle)
        except Exception:
            backend.release(handle)
            raise
        self._handle = handle
        self._backend = backend
        self.curve = curve
        self._lock = threading.Lock() if not backend.thread_safe else None
        self._finalizer = weakref.finalize(self, _release, backend, handle, curve)

    @classmethod
    def generate(
        cls,
        curve: Optional[Union[str, Curve]] = None,
        backend: Optional[NativeBackend] = None,
    ) -> "ECDSAKey":
        """Generate a fresh private key on ``curve`` (configured default if omitted)."""
        backend = backend or get_backend()
        curve = Curve.from_name(curve or load_config().default_curve)
        key = cls(backend.generate(curve), backend)
        logger.debug(f"Generated {curve.value} key")
        return key

    @classmethod
    def public(cls, pem: PemData, backend: Optional[NativeBackend] = None) -> "ECDSAKey":
        """Load a verify-only key from a PEM ``PUBLIC KEY`` block."""
        backend = backend or get_backend()
        return cls(backend.load_public_pem(pem), backend)

    @classmethod
    def private(
        cls,
        pem: PemData,
        password: Optional[bytes] = None,
        backend: Optional[NativeBackend] = None,
    ) -> "ECDSAKey":
        """Load a signing key from a PEM private key block."""
        backend = backend or get_backend()
        return cls(backend.load_private_pem(pem, password), backend)

    @property
    def closed(self) -> bool:
        return not self._finalizer.alive

    @property
    def is_private(self) -> bool:
        with self._native() as handle:
            return self._backend.has_private(handle)

    def public_key(self) -> "ECDSAKey":
        """Return a new verify-only key for the same public point."""
        with self._native() as handle:
            public_handle = self._backend.public_handle(handle)
        return ECDSAKey(public_handle, self._backend)

    def public_pem(self) -> bytes:
        with self._native() as handle:
            return self._backend.public_pem(handle)

    def private_pem(self) -> bytes:
        with self._native() as handle:
            return self._backend.private_pem(handle)

    def raw_sign(self, digest: bytes, selector: HashAlgorithm) -> Tuple[int, int]:
        """Sign a precomputed digest, holding the key lock if the backend needs it."""
        with self._native(exclusive=True) as handle:
            return self._backend.raw_sign(digest, handle, selector)

    def raw_verify(self, digest: bytes, r: int, s: int, selector: HashAlgorithm) -> bool:
        with self._native(exclusive=True) as handle:
            return self._backend.raw_verify(digest, r, s, handle, selector)

    def close(self) -> None:
        """Release the native handle; further calls are no-ops."""
        self._finalizer()

    def __enter__(self) -> "ECDSAKey":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else ("private" if self.is_private else "public")
        return f"ECDSAKey(curve={self.curve.value!r}, {state})"

    @contextlib.contextmanager
    def _native(self, exclusive: bool = False) -> Iterator[Any]:
        if self.closed:
            raise KeyFailure("Key has been released")
        if exclusive and self._lock is not None:
            with self._lock:
                yield self._handle
        else:
            yield self._handle


__all__ = ["ECDSAKey", "PemData"]

"""Native backend factory and initialization."""

from __future__ import annotations

from typing import Optional

from ..config import JwsKitConfig, load_config
from ..errors import UnsupportedAlgorithm
from .base import NativeBackend
from .openssl import OpenSSLBackend


def get_backend(
    name: Optional[str] = None, config: Optional[JwsKitConfig] = None
) -> NativeBackend:
    """Factory function to get the configured native backend."""

    config = config or load_config()
    name = (name or config.backend).lower()

    if name in ("cryptography", "openssl"):
        return OpenSSLBackend()
    raise UnsupportedAlgorithm(f"Unsupported native backend: {name}")


__all__ = ["NativeBackend", "OpenSSLBackend", "get_backend"]

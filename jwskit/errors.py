"""Exception types raised by jwskit."""

from __future__ import annotations


class JwsKitError(Exception):
    """Base class for all jwskit failures."""


class KeyFailure(JwsKitError):
    """Key generation, PEM loading or export failed, or the key was released."""


class DigestFailure(JwsKitError):
    """Digest computation failed for the given payload and hash selector."""


class SigningFailure(JwsKitError):
    """The native raw sign primitive produced no signature."""


class FormatFailure(JwsKitError):
    """Signature bytes are malformed for the active encoding."""


class UnsupportedAlgorithm(JwsKitError):
    """Requested algorithm, curve or backend is not supported."""


__all__ = [
    "JwsKitError",
    "KeyFailure",
    "DigestFailure",
    "SigningFailure",
    "FormatFailure",
    "UnsupportedAlgorithm",
]

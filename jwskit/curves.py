"""Elliptic curves supported by the ECDSA signers."""

from __future__ import annotations

from enum import Enum

from .errors import UnsupportedAlgorithm


class Curve(str, Enum):
    """NIST prime curves used by the ``ES*`` JWS algorithms."""

    P256 = "P-256"
    P384 = "P-384"
    P521 = "P-521"

    @property
    def key_size(self) -> int:
        return _KEY_SIZES[self]

    @property
    def byte_width(self) -> int:
        """Size in bytes of each of ``r`` and ``s`` in a fixed-width signature."""
        return (self.key_size + 7) // 8

    @classmethod
    def from_name(cls, name: str | Curve) -> Curve:
        """Resolve a JOSE, SEC or OpenSSL curve name.

        ``"P-256"``, ``"secp256r1"`` and ``"prime256v1"`` all resolve to
        :attr:`Curve.P256`.
        """
        if isinstance(name, Curve):
            return name
        curve = _ALIASES.get(str(name).strip().lower())
        if curve is None:
            raise UnsupportedAlgorithm(
                f"Unsupported curve {name!r}; supported curves: "
                + ", ".join(c.value for c in cls)
            )
        return curve


_KEY_SIZES = {Curve.P256: 256, Curve.P384: 384, Curve.P521: 521}

_ALIASES = {
    "p-256": Curve.P256,
    "secp256r1": Curve.P256,
    "prime256v1": Curve.P256,
    "p-384": Curve.P384,
    "secp384r1": Curve.P384,
    "p-521": Curve.P521,
    "secp521r1": Curve.P521,
}


__all__ = ["Curve"]

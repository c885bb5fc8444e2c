"""JWS signing algorithm families."""

from __future__ import annotations

from .base import AlgorithmFamily, JWTAlgorithm
from .ecdsa import ECDSAAlgorithm, ECDSASigner

__all__ = ["AlgorithmFamily", "ECDSAAlgorithm", "ECDSASigner", "JWTAlgorithm"]

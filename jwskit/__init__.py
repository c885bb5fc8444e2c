"""jwskit: ECDSA signing algorithms for JSON Web Signatures."""

from .algorithms import AlgorithmFamily, ECDSAAlgorithm, ECDSASigner, JWTAlgorithm
from .backend import NativeBackend, get_backend
from .codec import SignatureCodec, SignatureEncoding, decode_signature, encode_signature
from .config import JwsKitConfig, load_config
from .curves import Curve
from .digest import HashAlgorithm, digest
from .errors import (
    DigestFailure,
    FormatFailure,
    JwsKitError,
    KeyFailure,
    SigningFailure,
    UnsupportedAlgorithm,
)
from .keys import ECDSAKey
from .signer import JWTSigner, get_signer, lookup_algorithm

__version__ = "0.1.0"
__all__ = [
    "AlgorithmFamily",
    "Curve",
    "DigestFailure",
    "ECDSAAlgorithm",
    "ECDSAKey",
    "ECDSASigner",
    "FormatFailure",
    "HashAlgorithm",
    "JWTAlgorithm",
    "JWTSigner",
    "JwsKitConfig",
    "JwsKitError",
    "KeyFailure",
    "NativeBackend",
    "SignatureCodec",
    "SignatureEncoding",
    "SigningFailure",
    "UnsupportedAlgorithm",
    "decode_signature",
    "digest",
    "encode_signature",
    "get_backend",
    "get_signer",
    "load_config",
    "lookup_algorithm",
]

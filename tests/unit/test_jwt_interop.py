"""Interoperability of fixed-width signatures with PyJWT."""

import base64
import json

import jwt
import pytest

from jwskit import ECDSAAlgorithm, ECDSAKey, get_signer


def _b64url(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def _b64url_dec(value: str) -> bytes:
    return base64.urlsafe_b64decode(value + "=" * (-len(value) % 4))


@pytest.mark.parametrize("algorithm", list(ECDSAAlgorithm))
def test_pyjwt_accepts_our_signatures(algorithm):
    with ECDSAKey.generate(algorithm.curve) as key:
        signer = get_signer(algorithm.label, key)
        header = _b64url(json.dumps({"alg": signer.name, "typ": "JWT"}).encode())
        claims = _b64url(json.dumps({"sub": "alice"}).encode())
        signing_input = f"{header}.{claims}"
        token = f"{signing_input}.{_b64url(signer.sign(signing_input.encode()))}"

        decoded = jwt.decode(token, key.public_pem(), algorithms=[algorithm.label])
    assert decoded == {"sub": "alice"}


@pytest.mark.parametrize("algorithm", list(ECDSAAlgorithm))
def test_we_accept_pyjwt_signatures(algorithm):
    with ECDSAKey.generate(algorithm.curve) as key:
        token = jwt.encode({"sub": "bob"}, key.private_pem(), algorithm=algorithm.label)
        signing_input, _, signature = token.rpartition(".")

        with key.public_key() as public:
            verifier = get_signer(algorithm.label, public)
            assert verifier.verify(_b64url_dec(signature), signing_input.encode())
            assert not verifier.verify(_b64url_dec(signature), b"x" + signing_input.encode())

"""Simple example showing ES256 signing and verification of a JWS signing input."""

import base64
import json

from jwskit import ECDSAKey, FormatFailure, get_signer


def b64url(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def main():
    """Sign a compact JWS and check it with the public key only."""
    # Generate a signing key and derive a verify-only copy
    with ECDSAKey.generate("P-256") as private_key, private_key.public_key() as public_key:
        signer = get_signer("ES256", private_key)
        verifier = get_signer("ES256", public_key)

        # Build the signing input the token layer would produce
        header = b64url(json.dumps({"alg": signer.name, "typ": "JWT"}).encode())
        claims = b64url(json.dumps({"sub": "alice"}).encode())
        signing_input = f"{header}.{claims}".encode()

        signature = signer.sign(signing_input)
        print(f"✅ Token: {signing_input.decode()}.{b64url(signature)}")
        print(f"🔑 Signature length: {len(signature)} bytes")
        print(f"🔍 Valid: {verifier.verify(signature, signing_input)}")
        print(f"🔍 Valid after tampering: {verifier.verify(signature, signing_input + b'x')}")

        try:
            verifier.verify(signature[:-1], signing_input)
        except FormatFailure as e:
            print(f"⚠️ Truncated signature rejected: {e}")


if __name__ == "__main__":
    main()

"""Command line interface for generating keys and signing payloads."""

from __future__ import annotations

import base64
import binascii
import logging
import os
import re
from pathlib import Path
from typing import NoReturn, Optional

import typer

from jwskit import ECDSAKey, JwsKitError, KeyFailure, get_signer
from jwskit.errors import FormatFailure

app = typer.Typer(help="CLI for jwskit ECDSA JWS signatures")

# Command groups
key_app = typer.Typer(help="Commands for managing ECDSA keys")

app.add_typer(key_app, name="key")


def _b64url(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


_B64URL_RE = re.compile(r"^[A-Za-z0-9_-]*\Z")


def _b64url_dec(value: str) -> bytes:
    if not _B64URL_RE.match(value):
        raise ValueError("Characters outside the base64url alphabet")
    pad = "=" * ((4 - len(value) % 4) % 4)
    return base64.b64decode((value + pad).encode("ascii"), altchars=b"-_", validate=True)


def _fail(message: str, code: int = 2) -> NoReturn:
    typer.secho(message, fg=typer.colors.RED, err=True)
    raise typer.Exit(code=code)


def _load_key(path: Path) -> ECDSAKey:
    data = path.read_bytes()
    if b"PRIVATE KEY" in data:
        return ECDSAKey.private(data)
    return ECDSAKey.public(data)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """jwskit CLI entry point."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@key_app.command("generate")
def key_generate(
    curve: Optional[str] = typer.Option(
        None, help="Curve name (P-256, P-384, P-521); defaults to config"
    ),
    out: Optional[Path] = typer.Option(None, help="Write the private key PEM here"),
    public_out: Optional[Path] = typer.Option(
        None, help="Write the public key PEM here"
    ),
) -> None:
    """
    Generate a new ECDSA key pair.

    Without --out the private key PEM is printed to stdout.

    Example:
        jwskit key generate --curve P-384 --out es384.pem --public-out es384.pub
    """
    try:
        key = ECDSAKey.generate(curve)
    except JwsKitError as e:
        _fail(str(e))

    with key:
        private_pem = key.private_pem()
        if out is None:
            typer.echo(private_pem.decode("ascii"), nl=False)
        else:
            fd = os.open(out, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
            with os.fdopen(fd, "wb") as f:
                f.write(private_pem)
            typer.echo(f"Private key written to {out}")
        if public_out is not None:
            public_out.write_bytes(key.public_pem())
            typer.echo(f"Public key written to {public_out}")


@app.command("sign")
def sign(
    alg: str,
    key_path: Path,
    payload_path: Path,
    encoding: Optional[str] = typer.Option(
        None, help="Signature encoding: fixed or legacy; defaults to config"
    ),
) -> None:
    """
    Sign the contents of PAYLOAD_PATH and print the base64url signature.

    Example:
        jwskit sign ES256 es256.pem signing_input.txt
    """
    try:
        with _load_key(key_path) as key:
            signer = get_signer(alg, key, encoding=encoding)
            signature = signer.sign(payload_path.read_bytes())
    except (JwsKitError, OSError, ValueError) as e:
        _fail(str(e))
    typer.echo(_b64url(signature))


@app.command("verify")
def verify(
    alg: str,
    key_path: Path,
    payload_path: Path,
    signature: str,
    encoding: Optional[str] = typer.Option(
        None, help="Signature encoding: fixed or legacy; defaults to config"
    ),
) -> None:
    """
    Verify a base64url SIGNATURE over the contents of PAYLOAD_PATH.

    Exits with 0 when valid, 1 when the signature does not match and 2 when
    the signature or key cannot be used.
    """
    try:
        raw_signature = _b64url_dec(signature)
    except (binascii.Error, ValueError):
        _fail("Signature is not valid base64url")

    try:
        with _load_key(key_path) as key:
            signer = get_signer(alg, key, encoding=encoding)
            valid = signer.verify(raw_signature, payload_path.read_bytes())
    except FormatFailure as e:
        _fail(f"Malformed signature: {e}")
    except KeyFailure as e:
        _fail(f"Unusable key: {e}")
    except (JwsKitError, OSError, ValueError) as e:
        _fail(str(e))

    if not valid:
        typer.secho("invalid", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    typer.secho("valid", fg=typer.colors.GREEN)


if __name__ == "__main__":  # pragma: no cover
    app()

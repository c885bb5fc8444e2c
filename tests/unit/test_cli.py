"""CLI tests for key generation, signing and verification."""

import base64
import os
import stat

from typer.testing import CliRunner

from jwskit import ECDSAKey
from jwskit.cli import app

runner = CliRunner()


def _generate(tmp_path, curve="P-256"):
    private_path = tmp_path / "key.pem"
    public_path = tmp_path / "key.pub"
    result = runner.invoke(
        app,
        [
            "key",
            "generate",
            "--curve",
            curve,
            "--out",
            str(private_path),
            "--public-out",
            str(public_path),
        ],
    )
    assert result.exit_code == 0, result.output
    return private_path, public_path


def test_key_generate_writes_pem_files(tmp_path):
    private_path, public_path = _generate(tmp_path, "P-384")
    key = ECDSAKey.private(private_path.read_bytes())
    assert key.curve.value == "P-384"
    assert ECDSAKey.public(public_path.read_bytes()).public_pem() == key.public_pem()


def test_key_generate_prints_private_key():
    result = runner.invoke(app, ["key", "generate"])
    assert result.exit_code == 0
    assert "BEGIN PRIVATE KEY" in result.stdout


def test_key_generate_rejects_unknown_curve():
    result = runner.invoke(app, ["key", "generate", "--curve", "P-192"])
    assert result.exit_code == 2


def test_sign_and_verify_round_trip(tmp_path):
    private_path, public_path = _generate(tmp_path)
    payload_path = tmp_path / "input.txt"
    payload_path.write_bytes(b"eyJhbGciOiJFUzI1NiJ9.eyJzdWIiOiJhbGljZSJ9")

    result = runner.invoke(app, ["sign", "ES256", str(private_path), str(payload_path)])
    assert result.exit_code == 0, result.output
    signature = result.stdout.strip()
    assert "=" not in signature

    result = runner.invoke(
        app, ["verify", "ES256", str(public_path), str(payload_path), signature]
    )
    assert result.exit_code == 0, result.output
    assert "valid" in result.stdout

    payload_path.write_bytes(b"tampered")
    result = runner.invoke(
        app, ["verify", "ES256", str(public_path), str(payload_path), signature]
    )
    assert result.exit_code == 1
    assert "invalid" in result.stdout


def test_verify_malformed_signature_exits_with_two(tmp_path):
    _, public_path = _generate(tmp_path)
    payload_path = tmp_path / "input.txt"
    payload_path.write_bytes(b"payload")
    odd = base64.urlsafe_b64encode(b"\x01" * 63).rstrip(b"=").decode()

    result = runner.invoke(
        app, ["verify", "ES256", str(public_path), str(payload_path), odd]
    )
    assert result.exit_code == 2


def test_sign_with_public_key_fails(tmp_path):
    _, public_path = _generate(tmp_path)
    payload_path = tmp_path / "input.txt"
    payload_path.write_bytes(b"payload")

    result = runner.invoke(app, ["sign", "ES256", str(public_path), str(payload_path)])
    assert result.exit_code == 2


def test_unknown_algorithm(tmp_path):
    private_path, _ = _generate(tmp_path)
    payload_path = tmp_path / "input.txt"
    payload_path.write_bytes(b"payload")

    result = runner.invoke(app, ["sign", "RS256", str(private_path), str(payload_path)])
    assert result.exit_code == 2


def test_key_generate_private_key_is_owner_only(tmp_path):
    private_path, public_path = _generate(tmp_path)
    if os.name == "posix":
        assert stat.S_IMODE(private_path.stat().st_mode) == 0o600
    assert b"PRIVATE KEY" in private_path.read_bytes()


def test_verify_rejects_characters_outside_base64url(tmp_path):
    private_path, public_path = _generate(tmp_path)
    payload_path = tmp_path / "input.txt"
    payload_path.write_bytes(b"payload")
    result = runner.invoke(app, ["sign", "ES256", str(private_path), str(payload_path)])
    signature = result.stdout.strip()

    for tampered in (signature[:10] + "!!**" + signature[10:], signature + "!", "+/" + signature):
        result = runner.invoke(
            app, ["verify", "ES256", str(public_path), str(payload_path), tampered]
        )
        assert result.exit_code == 2, result.output

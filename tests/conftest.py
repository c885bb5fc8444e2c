"""Shared fixtures and native backend test doubles."""

from __future__ import annotations

import pytest

from jwskit.backend.openssl import OpenSSLBackend
from jwskit.errors import SigningFailure


class CountingBackend(OpenSSLBackend):
    """OpenSSL backend that tracks handles which have not been released."""

    name = "counting"

    def __init__(self) -> None:
        self.live: set[int] = set()
        self.created = 0
        self.released = 0
        self.double_releases = 0

    def _track(self, handle):
        if id(handle) not in self.live:
            self.live.add(id(handle))
            self.created += 1
        return handle

    def generate(self, curve):
        return self._track(super().generate(curve))

    def load_public_pem(self, data):
        return self._track(super().load_public_pem(data))

    def load_private_pem(self, data, password=None):
        return self._track(super().load_private_pem(data, password))

    def public_handle(self, handle):
        return self._track(super().public_handle(handle))

    def release(self, handle) -> None:
        if id(handle) not in self.live:
            self.double_releases += 1
            return
        self.live.remove(id(handle))
        self.released += 1


class SerializedBackend(CountingBackend):
    """Backend that declares its handles unsafe for concurrent use."""

    thread_safe = False

    def __init__(self) -> None:
        super().__init__()
        self.active_calls = 0
        self.max_active_calls = 0

    def _enter(self) -> None:
        self.active_calls += 1
        self.max_active_calls = max(self.max_active_calls, self.active_calls)

    def raw_sign(self, digest, handle, selector):
        self._enter()
        try:
            return super().raw_sign(digest, handle, selector)
        finally:
            self.active_calls -= 1

    def raw_verify(self, digest, r, s, handle, selector):
        self._enter()
        try:
            return super().raw_verify(digest, r, s, handle, selector)
        finally:
            self.active_calls -= 1


class BrokenSignBackend(CountingBackend):
    """Backend whose raw sign primitive always fails."""

    def raw_sign(self, digest, handle, selector):
        raise SigningFailure("native sign returned no signature")


class RecordingBackend(CountingBackend):
    """Real backend that remembers the last (r, s) pair it produced."""

    def __init__(self) -> None:
        super().__init__()
        self.last_components = None

    def raw_sign(self, digest, handle, selector):
        self.last_components = super().raw_sign(digest, handle, selector)
        return self.last_components


class PresetSignatureBackend(CountingBackend):
    """Backend that signs with a fixed (r, s) and accepts only that pair."""

    def __init__(self, components) -> None:
        super().__init__()
        self.components = components
        self.verified = []

    def raw_sign(self, digest, handle, selector):
        return self.components

    def raw_verify(self, digest, r, s, handle, selector):
        self.verified.append((r, s))
        return (r, s) == self.components


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests independent from any jwskit.yaml or JWSKIT_* variables."""
    monkeypatch.setenv("JWSKIT_CONFIG", str(tmp_path / "missing.yaml"))
    monkeypatch.delenv("JWSKIT_SIGNATURE_ENCODING", raising=False)
    monkeypatch.delenv("JWSKIT_BACKEND", raising=False)


@pytest.fixture
def counting_backend() -> CountingBackend:
    return CountingBackend()


@pytest.fixture
def serialized_backend() -> SerializedBackend:
    return SerializedBackend()


@pytest.fixture
def broken_sign_backend() -> BrokenSignBackend:
    return BrokenSignBackend()


@pytest.fixture
def recording_backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def preset_signature_backend() -> PresetSignatureBackend:
    return PresetSignatureBackend(components=(1, 1))

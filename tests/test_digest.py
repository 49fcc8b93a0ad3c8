from __future__ import annotations

from typing import Iterator, List

import pytest
from inline_snapshot import snapshot

import notmodified._digest
from notmodified import (
    CryptographyDigestProvider,
    DigestError,
    DigestProvider,
    DigestUnavailableError,
    HashlibDigestProvider,
    aget_digest_provider,
    ahexdigest,
    detect_digest_provider,
    get_digest_provider,
    hexdigest,
)
from notmodified._utils import make_async_iterator

EMPTY_SHA256 = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
ABC_SHA256 = "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"


class UnavailableDigestProvider(DigestProvider):
    name = "unavailable"

    @classmethod
    def is_available(cls) -> bool:
        return False

    def new(self):  # type: ignore[no-untyped-def]
        raise AssertionError("unavailable providers are never instantiated")


class FailingHash:
    def update(self, data: bytes, /) -> None:
        raise ValueError("update failed")

    def hexdigest(self) -> str:
        return ""


class FailingDigestProvider(DigestProvider):
    name = "failing"

    @classmethod
    def is_available(cls) -> bool:
        return True

    def new(self) -> FailingHash:
        return FailingHash()


def test_hexdigest_known_vectors():
    assert hexdigest(b"") == EMPTY_SHA256
    assert hexdigest(b"abc") == ABC_SHA256


def test_hexdigest_format():
    digest = hexdigest(b"Hello, World!")

    assert len(digest) == 64
    assert digest == digest.lower()
    assert all(char in "0123456789abcdef" for char in digest)


@pytest.mark.parametrize(
    "data",
    [
        pytest.param(bytearray(b"abc"), id="bytearray"),
        pytest.param(memoryview(b"abc"), id="memoryview"),
        pytest.param([b"a", b"b", b"c"], id="chunks"),
        pytest.param(iter([b"ab", b"", b"c"]), id="iterator"),
    ],
)
def test_hexdigest_accepts_buffers_and_chunks(data):
    assert hexdigest(data) == ABC_SHA256


def test_hexdigest_does_not_wrap_stream_errors():
    def stream() -> Iterator[bytes]:
        yield b"a"
        raise ConnectionResetError("client went away")

    with pytest.raises(ConnectionResetError):
        hexdigest(stream())


def test_hexdigest_wraps_backend_errors():
    with pytest.raises(DigestError, match="The failing digest provider failed: update failed") as exc_info:
        hexdigest(b"abc", FailingDigestProvider())

    assert isinstance(exc_info.value.__cause__, ValueError)


@pytest.mark.anyio
async def test_ahexdigest_bytes():
    assert await ahexdigest(b"abc") == ABC_SHA256


@pytest.mark.anyio
async def test_ahexdigest_stream():
    assert await ahexdigest(make_async_iterator([b"a", b"bc"])) == ABC_SHA256


@pytest.mark.anyio
async def test_ahexdigest_wraps_backend_errors():
    with pytest.raises(DigestError):
        await ahexdigest(make_async_iterator([b"abc"]), FailingDigestProvider())


def test_provider_hexdigest():
    assert HashlibDigestProvider().hexdigest(b"abc") == ABC_SHA256


def test_detect_digest_provider():
    assert isinstance(detect_digest_provider(), HashlibDigestProvider)


def test_detect_digest_provider_skips_unavailable():
    provider = detect_digest_provider([UnavailableDigestProvider, HashlibDigestProvider])

    assert isinstance(provider, HashlibDigestProvider)


def test_detect_digest_provider_without_backends():
    with pytest.raises(DigestUnavailableError) as exc_info:
        detect_digest_provider([UnavailableDigestProvider])

    assert str(exc_info.value) == snapshot("No SHA-256 digest backend is available (tried: unavailable).")


def test_get_digest_provider_is_cached(monkeypatch: pytest.MonkeyPatch):
    calls: List[DigestProvider] = []

    def detect() -> DigestProvider:
        provider = HashlibDigestProvider()
        calls.append(provider)
        return provider

    monkeypatch.setattr(notmodified._digest, "detect_digest_provider", detect)

    first = get_digest_provider()
    second = get_digest_provider()

    assert first is second
    assert calls == [first]


@pytest.mark.anyio
async def test_aget_digest_provider_is_cached(monkeypatch: pytest.MonkeyPatch):
    calls: List[DigestProvider] = []

    def detect() -> DigestProvider:
        provider = HashlibDigestProvider()
        calls.append(provider)
        return provider

    monkeypatch.setattr(notmodified._digest, "detect_digest_provider", detect)

    first = await aget_digest_provider()

    assert await aget_digest_provider() is first
    assert get_digest_provider() is first
    assert calls == [first]


def test_unavailable_backend_is_not_cached(monkeypatch: pytest.MonkeyPatch):
    detect_real = notmodified._digest.detect_digest_provider

    def detect() -> DigestProvider:
        raise DigestUnavailableError("No SHA-256 digest backend is available")

    monkeypatch.setattr(notmodified._digest, "detect_digest_provider", detect)

    with pytest.raises(DigestUnavailableError):
        hexdigest(b"abc")

    monkeypatch.setattr(notmodified._digest, "detect_digest_provider", detect_real)
    assert hexdigest(b"abc") == ABC_SHA256


def test_cryptography_provider():
    pytest.importorskip("cryptography")

    provider = CryptographyDigestProvider()

    assert CryptographyDigestProvider.is_available()
    assert provider.hexdigest(b"abc") == ABC_SHA256
    assert hexdigest([b"a", b"bc"], provider) == ABC_SHA256


def test_cryptography_provider_without_library(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(notmodified._digest, "hashes", None)

    assert not CryptographyDigestProvider.is_available()
    with pytest.raises(DigestUnavailableError):
        CryptographyDigestProvider().new()
    assert isinstance(detect_digest_provider([CryptographyDigestProvider, HashlibDigestProvider]), HashlibDigestProvider)

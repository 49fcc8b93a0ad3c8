"""
SHA-256 digests of response bodies.

Hashing is delegated to a backend library. The backend is picked once per
process by `detect_digest_provider` and cached; callers that want a specific
backend can pass a `DigestProvider` explicitly instead.
"""

from __future__ import annotations

import hashlib
import logging
import typing as tp
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import AsyncIterable, Iterable, Iterator, Optional, Union

from anyio import to_thread

from notmodified._exceptions import DigestError, DigestUnavailableError

try:
    from cryptography.hazmat.primitives import hashes
except ImportError:
    hashes = None  # type: ignore[assignment]

logger = logging.getLogger("notmodified.digest")

__all__ = (
    "DigestProvider",
    "HashlibDigestProvider",
    "CryptographyDigestProvider",
    "DIGEST_PROVIDERS",
    "detect_digest_provider",
    "get_digest_provider",
    "aget_digest_provider",
    "hexdigest",
    "ahexdigest",
)

BytesLike = Union[bytes, bytearray, memoryview]


class HashObject(tp.Protocol):
    def update(self, data: bytes, /) -> None: ...

    def hexdigest(self) -> str: ...


class DigestProvider(ABC):
    """
    A source of SHA-256 hash objects.

    Subclasses report whether their backend can be used in the running
    interpreter through `is_available`, which is what `detect_digest_provider`
    relies on.
    """

    name: tp.ClassVar[str]

    @classmethod
    @abstractmethod
    def is_available(cls) -> bool: ...

    @abstractmethod
    def new(self) -> HashObject: ...

    def hexdigest(self, data: bytes) -> str:
        hasher = self.new()
        hasher.update(data)
        return hasher.hexdigest()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


class HashlibDigestProvider(DigestProvider):
    name = "hashlib"

    @classmethod
    def is_available(cls) -> bool:
        return "sha256" in hashlib.algorithms_available

    def new(self) -> HashObject:
        return hashlib.sha256()


class _CryptographyHash:
    def __init__(self) -> None:
        self._hash = hashes.Hash(hashes.SHA256())

    def update(self, data: bytes, /) -> None:
        self._hash.update(data)

    def hexdigest(self) -> str:
        return self._hash.finalize().hex()


class CryptographyDigestProvider(DigestProvider):
    """SHA-256 through the `cryptography` package (OpenSSL bindings)."""

    name = "cryptography"

    @classmethod
    def is_available(cls) -> bool:
        return hashes is not None

    def new(self) -> HashObject:
        if hashes is None:
            raise DigestUnavailableError("CryptographyDigestProvider requires 'cryptography' to be installed.")
        return _CryptographyHash()


DIGEST_PROVIDERS: tp.Tuple[tp.Type[DigestProvider], ...] = (
    HashlibDigestProvider,
    CryptographyDigestProvider,
)

_provider: Optional[DigestProvider] = None


def detect_digest_provider(
    candidates: tp.Sequence[tp.Type[DigestProvider]] = DIGEST_PROVIDERS,
) -> DigestProvider:
    """
    Return an instance of the first available provider in `candidates`.

    Raises:
        DigestUnavailableError: If none of the candidates can be used.
    """
    for candidate in candidates:
        if candidate.is_available():
            logger.debug("Using %s digest provider", candidate.name)
            return candidate()
    tried = ", ".join(candidate.name for candidate in candidates)
    raise DigestUnavailableError(f"No SHA-256 digest backend is available (tried: {tried}).")


def get_digest_provider() -> DigestProvider:
    """Return the process-wide provider, detecting it on first use."""
    global _provider
    if _provider is None:
        _provider = detect_digest_provider()
    return _provider


async def aget_digest_provider() -> DigestProvider:
    """
    Async variant of `get_digest_provider`.

    Detection runs in a worker thread since it may import a backend library.
    Concurrent first calls may each detect; they resolve to the same backend.
    """
    global _provider
    if _provider is None:
        _provider = await to_thread.run_sync(detect_digest_provider)
    return _provider


@contextmanager
def _backend_errors(provider: DigestProvider) -> Iterator[None]:
    try:
        yield
    except DigestError:
        raise
    except Exception as exc:
        raise DigestError(f"The {provider.name} digest provider failed: {exc}") from exc


def hexdigest(data: Union[BytesLike, Iterable[bytes]], provider: Optional[DigestProvider] = None) -> str:
    """
    Compute the lowercase hex SHA-256 digest of `data`.

    `data` may be a bytes buffer or an iterable of chunks, which is consumed once.

    Raises:
        DigestUnavailableError: If no provider was given and none is available.
        DigestError: If the provider fails while hashing.
    """
    provider = provider if provider is not None else get_digest_provider()
    chunks: Iterable[BytesLike] = [data] if isinstance(data, (bytes, bytearray, memoryview)) else data

    with _backend_errors(provider):
        hasher = provider.new()
    for chunk in chunks:
        with _backend_errors(provider):
            hasher.update(bytes(chunk))
    with _backend_errors(provider):
        return hasher.hexdigest()


async def ahexdigest(
    data: Union[BytesLike, AsyncIterable[bytes]],
    provider: Optional[DigestProvider] = None,
) -> str:
    """
    Async variant of `hexdigest`.

    Whole buffers are hashed in a worker thread; async streams are hashed
    chunk by chunk as they arrive.
    """
    provider = provider if provider is not None else await aget_digest_provider()

    if isinstance(data, (bytes, bytearray, memoryview)):
        return await to_thread.run_sync(hexdigest, bytes(data), provider)

    with _backend_errors(provider):
        hasher = provider.new()
    async for chunk in data:
        with _backend_errors(provider):
            hasher.update(chunk)
    with _backend_errors(provider):
        return hasher.hexdigest()

from __future__ import annotations

from dataclasses import dataclass, field
from typing import (
    AsyncIterator,
    Iterator,
    Optional,
    Union,
    cast,
)

from notmodified._core._headers import Headers
from notmodified._utils import make_async_iterator, make_sync_iterator

Stream = Union[Iterator[bytes], AsyncIterator[bytes]]


@dataclass
class Request:
    method: str
    headers: Headers = field(default_factory=lambda: Headers({}))


@dataclass
class Response:
    status_code: int
    headers: Headers = field(default_factory=lambda: Headers({}))
    stream: Optional[Stream] = None
    """The response body, or None when the response has no body."""
    status_text: str = ""

    def _iter_stream(self) -> Iterator[bytes]:
        if hasattr(self, "collected_body"):
            yield getattr(self, "collected_body")
            return
        if self.stream is None:
            return
        if isinstance(self.stream, Iterator):
            yield from self.stream
            return
        raise TypeError("Response stream is not an Iterator")

    def _source_stream(self) -> Iterator[bytes]:
        """
        Return the body iterator as it is right now.

        Unlike `_iter_stream`, the stream is looked up immediately, so the
        caller may replace `self.stream` afterwards.
        """
        if hasattr(self, "collected_body"):
            return make_sync_iterator([getattr(self, "collected_body")])
        if self.stream is None:
            return make_sync_iterator([])
        if isinstance(self.stream, Iterator):
            return self.stream
        raise TypeError("Response stream is not an Iterator")

    def _asource_stream(self) -> AsyncIterator[bytes]:
        """Async variant of `_source_stream`."""
        if hasattr(self, "collected_body"):
            return make_async_iterator([getattr(self, "collected_body")])
        if self.stream is None:
            return make_async_iterator([])
        if isinstance(self.stream, AsyncIterator):
            return self.stream
        raise TypeError("Response stream is not an AsyncIterator")

    async def _aiter_stream(self) -> AsyncIterator[bytes]:
        if hasattr(self, "collected_body"):
            yield getattr(self, "collected_body")
            return
        if self.stream is None:
            return
        if isinstance(self.stream, AsyncIterator):
            async for chunk in self.stream:
                yield chunk
        else:
            raise TypeError("Response stream is not an AsyncIterator")

    def read(self) -> bytes:
        """
        Synchronously reads the entire response body without consuming the stream.
        """
        if self.stream is None:
            return b""

        if hasattr(self, "collected_body"):
            return cast(bytes, getattr(self, "collected_body"))

        if not isinstance(self.stream, Iterator):
            raise TypeError("Response stream is not an Iterator")

        collected = b"".join([chunk for chunk in self.stream])
        setattr(self, "collected_body", collected)
        self.stream = make_sync_iterator([collected])
        return collected

    async def aread(self) -> bytes:
        """
        Asynchronously reads the entire response body without consuming the stream.
        """
        if self.stream is None:
            return b""

        if hasattr(self, "collected_body"):
            return cast(bytes, getattr(self, "collected_body"))

        if not isinstance(self.stream, AsyncIterator):
            raise TypeError("Response stream is not an AsyncIterator")

        collected = b"".join([chunk async for chunk in self.stream])
        setattr(self, "collected_body", collected)
        self.stream = make_async_iterator([collected])
        return collected

from __future__ import annotations

import calendar
import typing as tp
from collections import deque
from email.utils import parsedate_tz
from typing import AsyncGenerator, AsyncIterable, AsyncIterator, Generator, Iterable, Iterator

T = tp.TypeVar("T")


def parse_date(date: str) -> tp.Optional[int]:
    """
    Parse an HTTP date into a unix timestamp.

    Returns None when the value can not be parsed, so callers can treat
    malformed validators as absent instead of handling exceptions.

    Example:
        >>> parse_date("Mon, 25 Aug 2015 12:00:00 GMT")
        1440504000
        >>> parse_date("Mon, 25 Aug 2015 14:00:00 +0200")
        1440504000
        >>> parse_date("yesterday") is None
        True
    """
    try:
        parsed = parsedate_tz(date)
        if parsed is None:
            return None
        timestamp = calendar.timegm(parsed[:6])
    except (ValueError, IndexError, OverflowError):
        return None
    return timestamp - (parsed[9] or 0)


async def make_async_iterator(
    iterable: Iterable[bytes],
) -> AsyncIterator[bytes]:
    for item in iterable:
        yield item


def make_sync_iterator(iterable: Iterable[bytes]) -> Iterator[bytes]:
    for item in iterable:
        yield item


def filter_mapping(mapping: tp.Mapping[str, T], keys_to_exclude: tp.Iterable[str]) -> tp.Dict[str, T]:
    """
        Filter out specified keys from a string-keyed mapping using case-insensitive comparison.

        Args:
            mapping: The input mapping with string keys to filter.
            keys_to_exclude: An iterable of string keys to exclude (case-insensitive).

        Returns:
            A new dictionary with the specified keys excluded.

        Example:
    ```python
            original = {'Content-Type': 'text/plain', 'ETag': 'W/"abc"'}
            filtered = filter_mapping(original, ['content-type'])
            # filtered will be {'ETag': 'W/"abc"'}
    ```
    """
    exclude_set = {k.lower() for k in keys_to_exclude}
    return {k: v for k, v in mapping.items() if k.lower() not in exclude_set}


def tee(iterable: Iterable[bytes]) -> tp.Tuple[Generator[bytes, None, None], Generator[bytes, None, None]]:
    """
    Split a byte stream into two independently consumable iterators.

    The source is read at most once; chunks read by one copy are buffered
    until the other copy consumes them. Closing one copy leaves the other
    untouched.
    """
    iterator = iter(iterable)
    buffers: tp.Tuple[tp.Deque[bytes], tp.Deque[bytes]] = (deque(), deque())

    def copy(own: tp.Deque[bytes], other: tp.Deque[bytes]) -> Generator[bytes, None, None]:
        while True:
            if own:
                yield own.popleft()
                continue
            try:
                chunk = next(iterator)
            except StopIteration:
                return
            other.append(chunk)
            yield chunk

    return copy(buffers[0], buffers[1]), copy(buffers[1], buffers[0])


def atee(iterable: AsyncIterable[bytes]) -> tp.Tuple[AsyncGenerator[bytes, None], AsyncGenerator[bytes, None]]:
    """
    Split an async byte stream into two independently consumable iterators.

    Async counterpart of `tee`. The copies must not be iterated concurrently.
    """
    iterator = iterable.__aiter__()
    buffers: tp.Tuple[tp.Deque[bytes], tp.Deque[bytes]] = (deque(), deque())

    async def copy(own: tp.Deque[bytes], other: tp.Deque[bytes]) -> AsyncGenerator[bytes, None]:
        while True:
            if own:
                yield own.popleft()
                continue
            try:
                chunk = await iterator.__anext__()
            except StopAsyncIteration:
                return
            other.append(chunk)
            yield chunk

    return copy(buffers[0], buffers[1]), copy(buffers[1], buffers[0])

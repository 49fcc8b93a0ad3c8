from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from notmodified._core.models import Response

DEFAULT_CACHE_CONTROL = "max-age=0, private, must-revalidate"

__all__ = (
    "DEFAULT_CACHE_CONTROL",
    "EtagOptions",
    "format_etag",
    "needs_etag",
    "skip_caching",
)


@dataclass
class EtagOptions:
    """
    Configuration for ETag annotation.

    The defaults produce ``W/"`` followed by the first 27 hex characters of
    the SHA-256 body digest, and a Cache-Control that makes clients always
    revalidate while still allowing private caching.

    Examples:
    --------
    >>> # Default behaviour
    >>> options = EtagOptions()

    >>> # Keep Cache-Control untouched
    >>> options = EtagOptions(cache_control=None)
    """

    etag_length: int = 27
    """Number of hex characters of the digest kept in the ETag."""

    weak: bool = True
    """When True, the ETag is prefixed with ``W/``."""

    cache_control: Optional[str] = DEFAULT_CACHE_CONTROL
    """Cache-Control set on annotated responses that have none. None disables it."""


def skip_caching(headers: Mapping[str, str]) -> bool:
    # Validators supplied by the application always win.
    return "ETag" in headers or "Last-Modified" in headers


def needs_etag(response: Response) -> bool:
    return response.status_code == 200 and response.stream is not None and not skip_caching(response.headers)


def format_etag(digest: str, options: EtagOptions) -> str:
    """
    Build the ETag header value from a hex digest.

    The value has no closing quote. Clients echo it back
    verbatim in If-None-Match, which is compared byte for byte.

    Examples:
        >>> format_etag("ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad", EtagOptions())
        'W/"ba7816bf8f01cfea414140de5da'
    """
    prefix = "W/" if options.weak else ""
    return f'{prefix}"{digest[: options.etag_length]}'

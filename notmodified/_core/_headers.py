from __future__ import annotations

from typing import (
    Any,
    Iterator,
    List,
    Mapping,
    MutableMapping,
    Union,
)

__all__ = ("Headers",)


class Headers(MutableMapping[str, str]):
    """
    Case-insensitive header mapping holding a single value per name.

    Setting a name replaces its value. Multiple values passed to the
    constructor for the same name are combined into one comma-separated
    value, as allowed by RFC 7230 Section 3.2.2.

    Examples:
        >>> headers = Headers({"ETag": 'W/"abc"'})
        >>> headers["etag"]
        'W/"abc"'
        >>> headers["Cache-Control"] = "no-cache"
        >>> "cache-control" in headers
        True
    """

    def __init__(self, headers: Mapping[str, Union[str, List[str]]]) -> None:
        self._headers = {k.lower(): (v if isinstance(v, str) else ", ".join(v)) for k, v in headers.items()}

    def __getitem__(self, key: str) -> str:
        return self._headers[key.lower()]

    def __setitem__(self, key: str, value: str) -> None:
        self._headers[key.lower()] = value

    def __delitem__(self, key: str) -> None:
        del self._headers[key.lower()]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._headers

    def __iter__(self) -> Iterator[str]:
        return iter(self._headers)

    def __len__(self) -> int:
        return len(self._headers)

    def __repr__(self) -> str:
        return repr(self._headers)

    def __str__(self) -> str:
        return str(self._headers)

    def __eq__(self, other_headers: Any) -> bool:
        return isinstance(other_headers, Headers) and self._headers == other_headers._headers

    def copy(self) -> "Headers":
        return Headers(self._headers)

from notmodified._core._etag import (
    DEFAULT_CACHE_CONTROL as DEFAULT_CACHE_CONTROL,
    EtagOptions as EtagOptions,
    format_etag as format_etag,
)
from notmodified._core._freshness import (
    etag_matches as etag_matches,
    fresh as fresh,
    modified_since as modified_since,
    return_304_if_fresh as return_304_if_fresh,
)
from notmodified._core._headers import Headers as Headers
from notmodified._core.models import (
    Request as Request,
    Response as Response,
)

__all__ = (
    ## Models
    "Request",
    "Response",
    ## Headers
    "Headers",
    ## Etags
    "DEFAULT_CACHE_CONTROL",
    "EtagOptions",
    "format_etag",
    ## Freshness
    "etag_matches",
    "fresh",
    "modified_since",
    "return_304_if_fresh",
)

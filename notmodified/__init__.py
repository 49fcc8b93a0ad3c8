from notmodified.__version__ import __version__ as __version__
from notmodified._core._etag import DEFAULT_CACHE_CONTROL as DEFAULT_CACHE_CONTROL, EtagOptions as EtagOptions
from notmodified._core._freshness import (
    etag_matches as etag_matches,
    fresh as fresh,
    modified_since as modified_since,
    return_304_if_fresh as return_304_if_fresh,
)
from notmodified._core._headers import Headers as Headers
from notmodified._core.models import Request as Request, Response as Response
from notmodified._digest import (
    CryptographyDigestProvider as CryptographyDigestProvider,
    DigestProvider as DigestProvider,
    HashlibDigestProvider as HashlibDigestProvider,
    aget_digest_provider as aget_digest_provider,
    ahexdigest as ahexdigest,
    detect_digest_provider as detect_digest_provider,
    get_digest_provider as get_digest_provider,
    hexdigest as hexdigest,
)
from notmodified._exceptions import DigestError as DigestError, DigestUnavailableError as DigestUnavailableError
from notmodified._async._etags import AsyncEtagger as AsyncEtagger
from notmodified._sync._etags import SyncEtagger as SyncEtagger

__all__ = (
    "__version__",
    ## Models
    "Request",
    "Response",
    ## Headers
    "Headers",
    ## Etags
    "AsyncEtagger",
    "SyncEtagger",
    "EtagOptions",
    "DEFAULT_CACHE_CONTROL",
    ## Freshness
    "return_304_if_fresh",
    "fresh",
    "etag_matches",
    "modified_since",
    ## Digests
    "DigestProvider",
    "HashlibDigestProvider",
    "CryptographyDigestProvider",
    "detect_digest_provider",
    "get_digest_provider",
    "aget_digest_provider",
    "hexdigest",
    "ahexdigest",
    ## Exceptions
    "DigestError",
    "DigestUnavailableError",
)

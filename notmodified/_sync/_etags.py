from __future__ import annotations

import logging
from typing import Optional

from notmodified._core._etag import EtagOptions, format_etag, needs_etag
from notmodified._core._freshness import return_304_if_fresh
from notmodified._core.models import Request, Response
from notmodified._digest import DigestProvider, hexdigest
from notmodified._exceptions import DigestError
from notmodified._utils import tee

logger = logging.getLogger("notmodified.etags")

__all__ = ("SyncEtagger",)


class SyncEtagger:
    """
    Adds weak ETags to outgoing responses and answers conditional GETs.

    Responses are post-processed in two steps: `add_etag` computes a validator
    from the body, then `return_304_if_fresh` compares it with the request's
    validators. `handle` runs both in that order.

    Args:
        options: ETag formatting and default Cache-Control. Defaults to EtagOptions().
        digest_provider: Backend used to hash bodies. When omitted, the process-wide
            provider is detected on first use.

    Example:
        ```python
        from notmodified import SyncEtagger, Headers, Request, Response

        etagger = SyncEtagger()
        response = etagger.handle(
            Request(method="GET", headers=Headers({"If-None-Match": 'W/"..."'})),
            response,
        )
        ```
    """

    def __init__(
        self,
        options: Optional[EtagOptions] = None,
        digest_provider: Optional[DigestProvider] = None,
    ) -> None:
        self.options = options if options is not None else EtagOptions()
        self.digest_provider = digest_provider

    def add_etag(self, response: Response) -> Response:
        """
        Set a weak ETag computed from the body on a 200 response.

        Responses with no body, a status other than 200, or an existing
        ETag or Last-Modified header are returned untouched. The body stays
        readable after hashing. If the digest can not be computed the
        response is returned without an ETag.
        """
        if not needs_etag(response):
            logger.debug("Skipping ETag for response: status=%d", response.status_code)
            return response

        digest_stream, response.stream = tee(response._source_stream())
        try:
            digest = hexdigest(digest_stream, self.digest_provider)
        except DigestError as exc:
            logger.warning("Sending response without ETag, digest failed: %s", exc)
            return response
        finally:
            digest_stream.close()

        if digest:
            response.headers["ETag"] = format_etag(digest, self.options)
            if self.options.cache_control and not response.headers.get("Cache-Control"):
                response.headers["Cache-Control"] = self.options.cache_control
            logger.debug("Added ETag to response: etag=%s", response.headers["ETag"])
        return response

    def handle(self, request: Request, response: Response) -> Response:
        response = self.add_etag(response)
        return return_304_if_fresh(request, response)

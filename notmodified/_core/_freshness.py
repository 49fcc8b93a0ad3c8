"""
Conditional GET support for outgoing responses.

Implements the If-None-Match / If-Modified-Since evaluation from
RFC 7232 Section 6: when the client's cached representation is still
valid, the response is replaced with a bodiless 304 Not Modified.
"""

from __future__ import annotations

import logging
from typing import Mapping

from notmodified._core._headers import Headers
from notmodified._core.models import Request, Response
from notmodified._utils import filter_mapping, parse_date

logger = logging.getLogger("notmodified.freshness")

CONDITIONAL_METHODS = ("GET", "HEAD")

__all__ = (
    "CONDITIONAL_METHODS",
    "etag_matches",
    "fresh",
    "modified_since",
    "return_304_if_fresh",
)


def return_304_if_fresh(request: Request, response: Response) -> Response:
    """
    Replace the response with a 304 Not Modified when the client copy is fresh.

    Only GET and HEAD requests answered with exactly 200 are considered.
    The 304 carries the original headers minus Content-Type and no body.
    The original response is never mutated.

    Args:
        request: The incoming request carrying the validators.
        response: The outgoing response, usually already annotated with an ETag.

    Returns:
        A new 304 response if the client copy is fresh, otherwise ``response``.
    """
    if request.method not in CONDITIONAL_METHODS or response.status_code != 200:
        return response

    if not fresh(request.headers, response.headers):
        return response

    logger.debug("Client copy is fresh, replacing response with 304 Not Modified")
    return Response(
        status_code=304,
        headers=Headers(filter_mapping(response.headers, ["Content-Type"])),
        stream=None,
        status_text="Not Modified",
    )


def fresh(request_headers: Mapping[str, str], response_headers: Mapping[str, str]) -> bool:
    """
    Whether the response has not been modified since the client's copy.

    If-None-Match has priority over If-Modified-Since per RFC 7232; when it is
    present, a failed match is final.
    """
    none_match = request_headers.get("If-None-Match")
    if none_match:
        return etag_matches(none_match, response_headers)

    if_modified_since = request_headers.get("If-Modified-Since")
    if if_modified_since:
        return modified_since(if_modified_since, response_headers)

    return False


def etag_matches(none_match: str, headers: Mapping[str, str]) -> bool:
    """Whether the If-None-Match value is exactly the response's ETag."""
    if not none_match:
        return False
    return none_match == headers.get("ETag")


def modified_since(if_modified_since: str, headers: Mapping[str, str]) -> bool:
    """
    Whether Last-Modified is older than or equal to If-Modified-Since.

    Missing or unparseable dates on either side mean "not fresh", and so
    does a date at the unix epoch.
    """
    since_timestamp = parse_date(if_modified_since)
    if not since_timestamp:
        logger.debug("Ignoring unusable If-Modified-Since: %r", if_modified_since)
        return False

    last_modified = headers.get("Last-Modified")
    if not last_modified:
        return False

    last_modified_timestamp = parse_date(last_modified)
    if not last_modified_timestamp:
        logger.debug("Ignoring unusable Last-Modified: %r", last_modified)
        return False

    return since_timestamp >= last_modified_timestamp

"""
Request-signing plugin for the bbuddy API client.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

import httpx

from bbuddy.endpoints import Api
from bbuddy.structures import AuthorizedToken

logger = logging.getLogger(__name__)

TokenSupplier = Callable[[], Optional[AuthorizedToken]]


def _mask_value(val: Optional[str]) -> str:
    """Mask sensitive value for logging, showing first 4 chars."""
    if not val:
        return "<empty>"
    if len(val) <= 4:
        return "*" * len(val)
    return val[:4] + "*" * (len(val) - 4)


def copy_request(request: httpx.Request) -> httpx.Request:
    """Copy of a built request with its own headers; the immutable body stream is reused."""
    copied = httpx.Request(
        request.method,
        request.url,
        headers=request.headers.copy(),
        stream=request.stream,
        extensions=dict(request.extensions),
    )
    copied.read()
    return copied


class Plugin(Protocol):
    def prepare(self, request: httpx.Request, target: Api) -> httpx.Request:
        ...


@dataclass(frozen=True)
class AuthPlugin:
    """Adds the devise token headers to requests whose endpoint needs them."""

    token_supplier: TokenSupplier

    def prepare(self, request: httpx.Request, target: Api) -> httpx.Request:
        token = self.token_supplier()
        if token is None:
            logger.debug("no token available, %s sent unsigned", type(target).__name__)
            return request
        if not target.should_authorize:
            return request

        signed = copy_request(request)
        signed.headers["token-type"] = token.type
        signed.headers["uid"] = token.uid
        signed.headers["client"] = token.client
        signed.headers["access-token"] = token.access_token
        logger.debug(
            "signed %s for uid=%s access-token=%s",
            type(target).__name__, token.uid, _mask_value(token.access_token),
        )
        return signed

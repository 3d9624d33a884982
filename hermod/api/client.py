from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import httpx

from hermod.schemas.errors import BodyReadError, RequestBuildError, TransportError

logger = logging.getLogger(__name__)


@contextmanager
def client_scope(
    client: httpx.Client | None = None, timeout: float | None = None
) -> Iterator[httpx.Client]:
    """Yield ``client`` untouched, or a fresh client that is closed on exit."""
    if client is not None:
        yield client
        return

    with httpx.Client(timeout=timeout) as owned:
        yield owned


def endpoint(api_base: str, path: str) -> str:
    return api_base.rstrip("/") + "/" + path.lstrip("/")


def bearer_headers(api_key: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {api_key}"}


def build_request(client: httpx.Client, method: str, url: str, **kwargs) -> httpx.Request:
    try:
        return client.build_request(method, url, **kwargs)
    except (httpx.InvalidURL, ValueError, TypeError) as exc:
        raise RequestBuildError(exc) from exc


def send(client: httpx.Client, request: httpx.Request) -> httpx.Response:
    """Send ``request`` without reading the body. The caller must close the response."""
    logger.debug("%s %s", request.method, request.url)
    try:
        response = client.send(request, stream=True)
    except httpx.TransportError as exc:
        raise TransportError(exc) from exc

    logger.debug("%s %s -> %d", request.method, request.url, response.status_code)
    return response


def read_body(response: httpx.Response) -> bytes:
    try:
        return response.read()
    except (httpx.HTTPError, httpx.StreamError) as exc:
        raise BodyReadError(exc) from exc

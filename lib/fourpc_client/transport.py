from __future__ import annotations

import logging

import httpx

from .config_types import ClientConfig, effective_user_agent
from .endpoints import redact_token
from .errors import ApiError, AuthError, FourPcClientError, NetworkError

log = logging.getLogger(__name__)

DETAILS_LIMIT = 1000


class Transport:
    def __init__(self, cfg: ClientConfig, *, transport: httpx.BaseTransport | None = None):
        self._cfg = cfg
        headers = {"User-Agent": effective_user_agent(cfg)}

        self._client = httpx.Client(
            timeout=cfg.timeout_s,
            headers=headers,
            follow_redirects=True,
            transport=transport,
        )
        # The stream stays open indefinitely; only connecting is bounded.
        self._stream_timeout = httpx.Timeout(cfg.timeout_s, read=None)

    @property
    def user_agent(self) -> str:
        return self._client.headers["User-Agent"]

    def close(self) -> None:
        self._client.close()

    def get(self, url: str) -> httpx.Response:
        log.debug("GET %s", redact_token(url))
        try:
            r = self._client.get(url)
        except httpx.InvalidURL as e:
            raise FourPcClientError(f"Invalid request URL: {_describe(e)}") from e
        except httpx.RequestError as e:
            raise NetworkError(_describe(e)) from e
        _raise_for_status(r)
        return r

    def open_stream(self, url: str) -> httpx.Response:
        log.debug("GET %s (stream)", redact_token(url))
        try:
            request = self._client.build_request("GET", url, timeout=self._stream_timeout)
            r = self._client.send(request, stream=True)
        except httpx.InvalidURL as e:
            raise FourPcClientError(f"Invalid request URL: {_describe(e)}") from e
        except httpx.RequestError as e:
            raise NetworkError(_describe(e)) from e
        if not r.is_success:
            try:
                try:
                    r.read()
                except httpx.TransportError:
                    # Error body cut off; report the status without details.
                    _raise_for_status(r, with_details=False)
                _raise_for_status(r)
            finally:
                r.close()
        return r


def _describe(exc: Exception) -> str:
    return redact_token(str(exc) or exc.__class__.__name__)


def _raise_for_status(r: httpx.Response, *, with_details: bool = True) -> None:
    if r.is_success:
        return
    msg = f"GET {redact_token(str(r.request.url))} failed with {r.status_code}"
    details = r.text[:DETAILS_LIMIT] if with_details and r.text else None
    if r.status_code in (401, 403):
        raise AuthError(r.status_code, msg, details)
    raise ApiError(r.status_code, msg, details)

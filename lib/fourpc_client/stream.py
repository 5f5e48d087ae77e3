from __future__ import annotations

import logging
from typing import Iterator

import httpx

from .errors import NetworkError

log = logging.getLogger(__name__)

# Raised by httpx when the peer (or our own close()) ends the body early.
_CONNECTION_ENDED = (httpx.RemoteProtocolError, httpx.ReadError, httpx.StreamClosed)


class LineStream:
    """Lazy, unbounded sequence of text lines read from the bot stream.

    ``next()`` blocks until a complete line arrives. Iteration ends when the
    server closes the connection or after :meth:`close` is called.
    """

    def __init__(self, response: httpx.Response) -> None:
        self._response = response
        self._closed = False
        self._lines = self._iter_lines()

    @property
    def closed(self) -> bool:
        return self._closed

    def __iter__(self) -> "LineStream":
        return self

    def __next__(self) -> str:
        if self._closed:
            raise StopIteration
        return next(self._lines)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._response.close()
        log.debug("stream closed")

    def __enter__(self) -> "LineStream":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _iter_lines(self) -> Iterator[str]:
        pending = ""
        try:
            try:
                for chunk in self._response.iter_text():
                    pending += chunk
                    while "\n" in pending:
                        line, pending = pending.split("\n", 1)
                        yield line.rstrip("\r\n")
            except _CONNECTION_ENDED as e:
                if self._closed:
                    return
                log.debug("stream ended by remote: %s", e.__class__.__name__)
            except httpx.TransportError as e:
                if self._closed:
                    return
                raise NetworkError(str(e) or e.__class__.__name__) from e
            # Unterminated trailing fragment.
            if pending and not self._closed:
                yield pending.rstrip("\r\n")
        finally:
            self.close()

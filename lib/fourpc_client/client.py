from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any

import httpx

from .config_types import ClientConfig, normalize_access
from .endpoints import DEFAULT_PROMOTION, Endpoints, build_endpoints, redact_token
from .errors import ApiError, FourPcClientError
from .stream import LineStream
from .transport import Transport

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActionResult:
    action: str
    url: str
    ok: bool
    status_code: int | None = None
    body: str = ""
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class FourPlayerChessClient:
    """Bot client for the four-player chess API.

    Action methods return ``True`` when the server answered with a 2xx status
    and a non-empty body, ``False`` otherwise; they never raise for HTTP or
    network failures. Use :meth:`send` for the full :class:`ActionResult`.
    """

    def __init__(self, cfg: ClientConfig, *, transport: httpx.BaseTransport | None = None):
        access = normalize_access(cfg.access)
        self.endpoints: Endpoints = build_endpoints(cfg.token, access)
        self.access = access
        self._t = Transport(cfg, transport=transport)

    @property
    def user_agent(self) -> str:
        return self._t.user_agent

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> "FourPlayerChessClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def send(self, url: str, *, action: str = "request") -> ActionResult:
        safe_url = redact_token(url)
        try:
            r = self._t.get(url)
        except ApiError as e:
            log.warning("%s failed: %s", action, e)
            return ActionResult(action=action, url=safe_url, ok=False, status_code=e.status_code,
                                body=e.details or "", error=str(e))
        except FourPcClientError as e:
            log.warning("%s failed: %s", action, e)
            return ActionResult(action=action, url=safe_url, ok=False, error=str(e))

        body = r.text
        if not body:
            log.warning("%s failed: empty response body (%s)", action, r.status_code)
            return ActionResult(action=action, url=safe_url, ok=False, status_code=r.status_code,
                                error="empty response body")
        return ActionResult(action=action, url=safe_url, ok=True, status_code=r.status_code, body=body)

    # --- bot actions ---
    def arrow(self, from_square: str, to_square: str, opacity: str | int | None = None) -> bool:
        return self.send(self.endpoints.arrow_url(from_square, to_square, opacity), action="arrow").ok

    def circle(self, square: str) -> bool:
        return self.send(self.endpoints.circle_url(square), action="circle").ok

    def chat(self, message: str) -> bool:
        return self.send(self.endpoints.chat_url(message), action="chat").ok

    def clear(self) -> bool:
        return self.send(self.endpoints.clear, action="clear").ok

    def play(self, from_square: str, to_square: str, promotion: str = DEFAULT_PROMOTION) -> bool:
        return self.send(self.endpoints.play_url(from_square, to_square, promotion), action="play").ok

    def resign(self) -> bool:
        return self.send(self.endpoints.resign, action="resign").ok

    def stream(self) -> LineStream:
        """Open the live stream. Raises NetworkError or ApiError if it cannot be opened."""
        return LineStream(self._t.open_stream(self.endpoints.stream))

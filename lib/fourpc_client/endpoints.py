from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from urllib.parse import quote_plus

from .config_types import resolve_host

ENDPOINT_TEMPLATES = MappingProxyType(
    {
        "arrow": "{url}/bot?token={token}&arrows=",
        "chat": "{url}/bot?token={token}&chat=",
        "clear": "{url}/bot?token={token}&arrows=clear",
        "play": "{url}/bot?token={token}&play=",
        "resign": "{url}/bot?token={token}&play=R",
        "stream": "{url}/bot?token={token}&stream=1",
    }
)

DEFAULT_PROMOTION = "Q"

_TOKEN_PARAM_RE = re.compile(r"([?&]token=)[^&]*")


@dataclass(frozen=True)
class Endpoints:
    """Fully substituted bot URLs for one token and host."""

    arrow: str
    chat: str
    clear: str
    play: str
    resign: str
    stream: str

    def arrow_url(self, from_square: str, to_square: str, opacity: str | int | None = None) -> str:
        url = f"{self.arrow}{from_square}{to_square}"
        if opacity is None or opacity == "":
            return url
        return f"{url}-{opacity}"

    def circle_url(self, square: str) -> str:
        return f"{self.arrow}{square}{square}"

    def chat_url(self, message: str) -> str:
        return f"{self.chat}{quote_plus(message, safe='')}"

    def play_url(self, from_square: str, to_square: str, promotion: str = DEFAULT_PROMOTION) -> str:
        return f"{self.play}{from_square}{to_square}{promotion}"


def render_template(template: str, *, url: str, token: str) -> str:
    # Plain textual substitution; the token goes into the query string as-is.
    return template.replace("{token}", token).replace("{url}", url)


def build_endpoints(token: str, access: str | None = None) -> Endpoints:
    token = (token or "").strip()
    if not token:
        raise ValueError("Bot token cannot be empty.")
    host = resolve_host(access)
    rendered = {
        name: render_template(template, url=host, token=token)
        for name, template in ENDPOINT_TEMPLATES.items()
    }
    return Endpoints(**rendered)


def redact_token(url: str) -> str:
    return _TOKEN_PARAM_RE.sub(r"\1***", url)

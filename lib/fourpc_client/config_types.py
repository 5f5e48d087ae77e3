from __future__ import annotations
from dataclasses import dataclass

CLIENT_VERSION = "0.1.0"
DEFAULT_USER_AGENT = f"fourpc-client/{CLIENT_VERSION}"
DEFAULT_ACCESS = "beta"

ACCESS_HOSTS = {
    "beta": "https://4player-beta.chess.com",
    "main": "https://4player.chess.com",
}


@dataclass(frozen=True)
class ClientConfig:
    token: str
    user_agent: str = ""
    access: str = DEFAULT_ACCESS
    timeout_s: float = 15.0


def normalize_access(raw: str | None) -> str:
    value = (raw or "").strip().lower()
    if not value:
        return DEFAULT_ACCESS
    if value not in ACCESS_HOSTS:
        allowed = ", ".join(sorted(ACCESS_HOSTS))
        raise ValueError(f"Unknown access tier {raw!r} (expected one of: {allowed})")
    return value


def resolve_host(access: str | None) -> str:
    return ACCESS_HOSTS[normalize_access(access)]


def effective_user_agent(cfg: ClientConfig) -> str:
    value = cfg.user_agent.strip() or DEFAULT_USER_AGENT
    # Header values go out as ASCII.
    if not (value.isascii() and value.isprintable()):
        raise ValueError(f"User agent must be printable ASCII: {value!r}")
    return value

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from typing import Any

import tomli_w
from platformdirs import user_config_dir

from fourpc_client.config_types import DEFAULT_ACCESS, normalize_access

APP_NAME = "fourpc"
CONFIG_FILENAME = "config.toml"
ENV_TOKEN = "FOURPC_TOKEN"
ENV_ACCESS = "FOURPC_ACCESS"
DEFAULT_TIMEOUT_S = 15.0


@dataclass
class ProfileConfig:
    token: str = ""
    access: str | None = None
    user_agent: str | None = None


@dataclass
class AppConfig:
    token: str = ""
    access: str = DEFAULT_ACCESS
    user_agent: str = ""
    timeout_s: float = DEFAULT_TIMEOUT_S
    profiles: dict[str, ProfileConfig] = field(default_factory=dict)


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig()


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def _access_or_default(raw: Any, default: str | None = DEFAULT_ACCESS) -> str | None:
    if not raw:
        return default
    try:
        return normalize_access(str(raw))
    except ValueError:
        return default


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return _prune_none(
        {
            "token": cfg.token,
            "access": cfg.access,
            "user_agent": cfg.user_agent,
            "timeout_s": cfg.timeout_s,
            "profiles": {
                name: {
                    "token": p.token,
                    "access": p.access,
                    "user_agent": p.user_agent,
                }
                for name, p in cfg.profiles.items()
            },
        }
    )


def _prune_none(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _prune_none(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [_prune_none(item) for item in value if item is not None]
    return value


def from_toml(data: dict[str, Any]) -> AppConfig:
    timeout_raw = data.get("timeout_s")
    try:
        timeout_s = float(timeout_raw) if timeout_raw is not None else DEFAULT_TIMEOUT_S
    except (TypeError, ValueError):
        timeout_s = DEFAULT_TIMEOUT_S
    if timeout_s <= 0:
        timeout_s = DEFAULT_TIMEOUT_S

    profiles: dict[str, ProfileConfig] = {}
    profiles_raw = data.get("profiles") or {}
    if isinstance(profiles_raw, dict):
        for name, v in profiles_raw.items():
            if not isinstance(v, dict):
                continue
            user_agent = v.get("user_agent")
            profiles[str(name)] = ProfileConfig(
                token=str(v.get("token") or "").strip(),
                access=_access_or_default(v.get("access"), default=None),
                user_agent=user_agent if isinstance(user_agent, str) else None,
            )

    return AppConfig(
        token=str(data.get("token") or "").strip(),
        access=_access_or_default(data.get("access")),
        user_agent=str(data.get("user_agent") or ""),
        timeout_s=timeout_s,
        profiles=profiles,
    )


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return from_toml(data)
    except FileNotFoundError:
        return default_config()


def apply_profile(cfg: AppConfig, profile: str | None) -> AppConfig:
    if not profile:
        return cfg
    prof = cfg.profiles.get(profile)
    if prof is None:
        raise KeyError(profile)
    return AppConfig(
        token=prof.token or cfg.token,
        access=prof.access or cfg.access,
        user_agent=prof.user_agent if prof.user_agent is not None else cfg.user_agent,
        timeout_s=cfg.timeout_s,
        profiles=cfg.profiles,
    )


def apply_env(cfg: AppConfig) -> AppConfig:
    token = os.getenv(ENV_TOKEN, "").strip()
    access = os.getenv(ENV_ACCESS, "").strip()
    return AppConfig(
        token=token or cfg.token,
        access=normalize_access(access) if access else cfg.access,
        user_agent=cfg.user_agent,
        timeout_s=cfg.timeout_s,
        profiles=cfg.profiles,
    )


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path

from __future__ import annotations

from fourpc_client import FourPlayerChessClient
from fourpc_client.config_types import ClientConfig

from .config import AppConfig, apply_env, apply_profile


def make_client(
    cfg: AppConfig,
    *,
    profile: str | None = None,
    token_override: str | None = None,
    access_override: str | None = None,
    user_agent_override: str | None = None,
) -> FourPlayerChessClient:
    effective_cfg = apply_env(apply_profile(cfg, profile))
    token = (token_override or effective_cfg.token).strip()
    if not token:
        raise ValueError("No bot token configured. Run `fourpc settings set --token ...` or pass --token.")
    return FourPlayerChessClient(
        ClientConfig(
            token=token,
            user_agent=user_agent_override if user_agent_override is not None else effective_cfg.user_agent,
            access=access_override or effective_cfg.access,
            timeout_s=effective_cfg.timeout_s,
        )
    )

from __future__ import annotations

import os

import typer

from fourpc_client.config_types import normalize_access
from .. import console
from ..config import config_path, default_config, load_config, save_config

app = typer.Typer(help="Manage local settings (config.toml in the user config dir).")


def _access_or_exit(raw: str) -> str:
    try:
        return normalize_access(raw)
    except ValueError as e:
        console.err(str(e))
        raise typer.Exit(code=2)


@app.command("init")
def init_settings(
        force: bool = typer.Option(False, "--force", help="Overwrite existing config."),
        token: str = typer.Option(..., "--token", prompt="Bot token", hide_input=True, help="Bot API token."),
        access: str = typer.Option("beta", "--access", help="Access tier: beta or main."),
):
    path = config_path()
    if os.path.exists(path) and not force:
        console.info(f"Config already exists: {path}")
        console.info("Use --force to overwrite.")
        return

    cfg = default_config()
    cfg.token = token.strip()
    if not cfg.token:
        console.err("Token cannot be empty.")
        raise typer.Exit(code=2)
    cfg.access = _access_or_exit(access)
    saved = save_config(cfg)
    console.ok(f"Config written: {saved}")


@app.command("show")
def show_settings():
    cfg = load_config()
    token_state = "(set)" if cfg.token else "(empty)"
    profiles = ",".join(sorted(cfg.profiles)) or "-"
    console.console.print(
        f"access={cfg.access} token={token_state} user_agent={cfg.user_agent or '(default)'} "
        f"timeout_s={cfg.timeout_s} profiles={profiles}",
        markup=False,
    )


@app.command("get")
def get_setting(
        key: str = typer.Argument(..., help="Setting key (access, user_agent, timeout_s)."),
):
    cfg = load_config()
    k = key.strip().lower()
    if k == "token":
        console.err("Refusing to print the token; use `settings show` to check it is set.")
        raise typer.Exit(code=2)
    if k == "access":
        console.console.print(cfg.access, markup=False)
        return
    if k == "user_agent":
        console.console.print(cfg.user_agent, markup=False)
        return
    if k == "timeout_s":
        console.console.print(str(cfg.timeout_s), markup=False)
        return
    console.err(f"Unknown setting: {key}")
    raise typer.Exit(code=2)


@app.command("set")
def set_setting(
        token: str | None = typer.Option(None, "--token", help="Set bot API token."),
        access: str | None = typer.Option(None, "--access", help="Set access tier (beta or main)."),
        user_agent: str | None = typer.Option(None, "--user-agent", help="Set User-Agent header (empty for default)."),
        timeout_s: float | None = typer.Option(None, "--timeout", min=0.1, help="Set request timeout in seconds."),
):
    cfg = load_config()
    if token is not None:
        cfg.token = token.strip()
    if access is not None:
        cfg.access = _access_or_exit(access)
    if user_agent is not None:
        cfg.user_agent = user_agent.strip()
    if timeout_s is not None:
        cfg.timeout_s = float(timeout_s)
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")

from __future__ import annotations

from dataclasses import dataclass

import typer

from fourpc_client import ActionResult, FourPlayerChessClient
from .. import console
from ..config import load_config
from ..http import make_client


@dataclass
class ConnectionOptions:
    profile: str | None = None
    token: str | None = None
    access: str | None = None
    user_agent: str | None = None


def connection_options(ctx: typer.Context) -> ConnectionOptions:
    obj = ctx.find_root().obj
    if isinstance(obj, ConnectionOptions):
        return obj
    return ConnectionOptions()


def open_client(ctx: typer.Context) -> FourPlayerChessClient:
    opts = connection_options(ctx)
    try:
        return make_client(
            load_config(),
            profile=opts.profile,
            token_override=opts.token,
            access_override=opts.access,
            user_agent_override=opts.user_agent,
        )
    except KeyError as e:
        console.err(f"Unknown profile: {e.args[0]}")
        raise typer.Exit(code=2)
    except ValueError as e:
        console.err(str(e))
        raise typer.Exit(code=2)


def report(result: ActionResult, *, json_out: bool) -> None:
    if json_out:
        console.print_json(result.to_dict())
    elif result.ok:
        console.ok(f"{result.action} sent.")
    else:
        console.err(f"{result.action} failed: {result.error}")
    if not result.ok:
        raise typer.Exit(code=2)

from __future__ import annotations

import typer

from .commands import actions_cmd, settings_cmd, stream_cmd
from .commands.common import ConnectionOptions
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="fourpc",
        help="Four-player chess bot console",
        no_args_is_help=True,
    )

    app.add_typer(settings_cmd.app, name="settings")
    app.command("arrow")(actions_cmd.arrow)
    app.command("circle")(actions_cmd.circle)
    app.command("chat")(actions_cmd.chat)
    app.command("clear")(actions_cmd.clear)
    app.command("play")(actions_cmd.play)
    app.command("resign")(actions_cmd.resign)
    app.command("stream")(stream_cmd.stream)

    @app.callback()
    def _main(
            ctx: typer.Context,
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
            profile: str | None = typer.Option(None, "--profile", help="Use a named profile from the config."),
            token: str | None = typer.Option(None, "--token", help="Override bot token."),
            access: str | None = typer.Option(None, "--access", help="Override access tier (beta or main)."),
            user_agent: str | None = typer.Option(None, "--user-agent", help="Override User-Agent header."),
    ):
        setup_logging(verbose)
        ctx.obj = ConnectionOptions(profile=profile, token=token, access=access, user_agent=user_agent)

    return app


app = _build_app()

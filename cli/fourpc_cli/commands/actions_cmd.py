from __future__ import annotations

import typer

from fourpc_client.endpoints import DEFAULT_PROMOTION
from .. import console
from .common import open_client, report

JSON_HELP = "Print the raw result as JSON."


def arrow(
        ctx: typer.Context,
        from_square: str = typer.Argument(..., metavar="FROM", help="Start square, e.g. d2."),
        to_square: str = typer.Argument(..., metavar="TO", help="End square, e.g. d4."),
        opacity: str | None = typer.Option(None, "--opacity", help="Arrow opacity suffix, e.g. 80."),
        json_out: bool = typer.Option(False, "--json", help=JSON_HELP),
):
    """Draw an arrow on the bot's board overlay."""
    with open_client(ctx) as client:
        result = client.send(client.endpoints.arrow_url(from_square, to_square, opacity), action="arrow")
    report(result, json_out=json_out)


def circle(
        ctx: typer.Context,
        square: str = typer.Argument(..., help="Square to circle, e.g. e4."),
        json_out: bool = typer.Option(False, "--json", help=JSON_HELP),
):
    """Circle a square."""
    with open_client(ctx) as client:
        result = client.send(client.endpoints.circle_url(square), action="circle")
    report(result, json_out=json_out)


def chat(
        ctx: typer.Context,
        message: str = typer.Argument(..., help="Chat message."),
        json_out: bool = typer.Option(False, "--json", help=JSON_HELP),
):
    """Send a chat message."""
    if not message.strip():
        console.err("Message cannot be empty.")
        raise typer.Exit(code=2)
    with open_client(ctx) as client:
        result = client.send(client.endpoints.chat_url(message), action="chat")
    report(result, json_out=json_out)


def clear(
        ctx: typer.Context,
        json_out: bool = typer.Option(False, "--json", help=JSON_HELP),
):
    """Remove all arrows and circles."""
    with open_client(ctx) as client:
        result = client.send(client.endpoints.clear, action="clear")
    report(result, json_out=json_out)


def play(
        ctx: typer.Context,
        from_square: str = typer.Argument(..., metavar="FROM", help="From square."),
        to_square: str = typer.Argument(..., metavar="TO", help="To square."),
        promotion: str = typer.Option(DEFAULT_PROMOTION, "--promotion", "-p", help="Promotion piece code."),
        json_out: bool = typer.Option(False, "--json", help=JSON_HELP),
):
    """Play a move."""
    with open_client(ctx) as client:
        result = client.send(client.endpoints.play_url(from_square, to_square, promotion), action="play")
    report(result, json_out=json_out)


def resign(
        ctx: typer.Context,
        yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
        json_out: bool = typer.Option(False, "--json", help=JSON_HELP),
):
    """Resign the current game."""
    if not yes:
        if not typer.confirm("Resign the current game?", default=False):
            console.info("Aborted.")
            raise typer.Exit(code=0)
    with open_client(ctx) as client:
        result = client.send(client.endpoints.resign, action="resign")
    report(result, json_out=json_out)

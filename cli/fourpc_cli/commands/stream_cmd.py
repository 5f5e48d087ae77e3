from __future__ import annotations

import typer

from fourpc_client import ApiError, FourPcClientError, NetworkError
from .. import console
from .common import open_client


def stream(
        ctx: typer.Context,
        limit: int | None = typer.Option(None, "--limit", "-n", min=1, help="Stop after N lines."),
):
    """Follow the live bot stream, one line per event."""
    client = open_client(ctx)
    try:
        lines = client.stream()
    except ApiError as e:
        client.close()
        console.err(f"Stream rejected ({e.status_code}): {e}")
        raise typer.Exit(code=2)
    except NetworkError as e:
        client.close()
        console.err(f"Stream connection failed: {e}")
        raise typer.Exit(code=2)
    except FourPcClientError as e:
        client.close()
        console.err(f"Stream could not be opened: {e}")
        raise typer.Exit(code=2)

    count = 0
    try:
        with lines:
            for line in lines:
                print(line, flush=True)
                count += 1
                if limit is not None and count >= limit:
                    break
    except KeyboardInterrupt:
        pass
    except NetworkError as e:
        console.err(f"Stream interrupted: {e}")
        raise typer.Exit(code=2)
    finally:
        client.close()

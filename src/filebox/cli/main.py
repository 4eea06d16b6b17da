"""CLI main entry point using Typer."""

from pathlib import Path

import typer
import uvicorn
from rich.console import Console

from filebox.config.models import VALID_LOG_LEVELS, ServerConfig
from filebox.config.settings import (
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    IDLE_TIMEOUT_SECONDS,
    default_port,
    default_trusted_root,
)
from filebox.errors import ConfigurationError

app = typer.Typer(
    name="filebox",
    help="Minimal HTTP file server: GET reads, PUT creates",
    add_completion=False,
)

console = Console()


@app.callback()
def callback() -> None:
    """Minimal HTTP file server: GET reads, PUT creates."""


@app.command()
def serve(
    root: Path | None = typer.Option(
        None,
        "--root",
        "-r",
        help="Trusted root directory (default: ./files)",
        file_okay=False,
    ),
    port: int | None = typer.Option(
        None,
        "--port",
        "-p",
        help="Port to bind server (default: $PORT or 8383)",
        min=1,
        max=65535,
    ),
    host: str = typer.Option(
        DEFAULT_HOST,
        "--host",
        "-h",
        help="Host to bind server",
    ),
    log_level: str = typer.Option(
        DEFAULT_LOG_LEVEL,
        "--log-level",
        "-l",
        help=f"Logging level ({'/'.join(VALID_LOG_LEVELS)})",
    ),
    log_file: Path | None = typer.Option(
        None,
        "--log-file",
        help="Write log lines to this file instead of stdout",
        dir_okay=False,
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Discard request log output",
    ),
) -> None:
    """Start the file server."""
    try:
        try:
            trusted_root = root.absolute() if root else default_trusted_root()
            port = port if port is not None else default_port()
        except ConfigurationError as e:
            console.print(f"[red]✗[/red] Configuration error: {e}", style="bold")
            raise typer.Exit(code=2)

        config = ServerConfig(
            host=host,
            port=port,
            trusted_root=trusted_root,
            log_level=log_level.upper(),
            log_file=log_file,
            quiet=quiet,
            idle_timeout=IDLE_TIMEOUT_SECONDS,
        )

        try:
            config.validate()
        except ValueError as e:
            console.print(f"[red]✗[/red] Configuration error: {e}", style="bold")
            raise typer.Exit(code=2)

        from filebox.config.logging import configure_logging

        configure_logging(config.log_level, log_file=config.log_file, quiet=config.quiet)

        from filebox.server.banner import print_banner

        print_banner(host=host, port=port, trusted_root=config.trusted_root)

        from filebox.server.app import create_app

        server_app = create_app(config)

        uvicorn.run(
            server_app,
            host=host,
            port=port,
            log_level=config.log_level.lower(),
            timeout_keep_alive=config.idle_timeout,
            log_config=None,
            access_log=not config.quiet,
        )

    except KeyboardInterrupt:
        console.print("\n[yellow]Server stopped[/yellow]")
        raise typer.Exit(code=0)
    except typer.Exit:
        raise
    except OSError as e:
        if "address already in use" in str(e).lower():
            console.print(f"[red]✗[/red] Port {port} is already in use", style="bold")
            raise typer.Exit(code=5)
        console.print(f"[red]✗[/red] Error: {e}", style="bold")
        raise typer.Exit(code=1)
    except Exception as e:
        console.print(f"[red]✗[/red] Error: {e}", style="bold")
        raise typer.Exit(code=1)


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()

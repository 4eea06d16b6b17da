"""Startup banner."""

from pathlib import Path

from rich.console import Console
from rich.panel import Panel

console = Console()


def print_banner(host: str, port: int, trusted_root: Path) -> None:
    """Print the listen address and served directory."""
    lines = [
        f"[bold]Listening on[/bold] http://{host}:{port}",
        f"[bold]Serving[/bold]      {trusted_root}",
        "[bold]Methods[/bold]      GET (read), PUT (create only)",
    ]
    console.print(Panel("\n".join(lines), title="filebox", expand=False))

    if not trusted_root.is_dir():
        console.print(
            f"[yellow]![/yellow] Trusted root does not exist yet: {trusted_root}",
            style="bold",
        )

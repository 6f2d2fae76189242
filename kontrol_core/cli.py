"""Command line interface for the kontrol registry."""

from __future__ import annotations

from typing import Optional

import typer

from kontrol_core.errors import KontrolError
from kontrol_core.register import Register

app = typer.Typer(help="kontrol credential registry")


@app.callback()
def main() -> None:
    """kontrol CLI entry point."""
    pass


@app.command("register")
def register(
    to: Optional[str] = typer.Option(None, "--to", help="target registration server"),
) -> None:
    """Register this host to a kite authority."""
    try:
        Register(to).execute()
    except KontrolError as e:
        typer.echo(f"Registration failed: {e}")
        raise typer.Exit(code=1)
    typer.echo("Registered successfully")


if __name__ == "__main__":
    app()

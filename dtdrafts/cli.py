"""
Command-line interface for dtdrafts.

Uses Typer to expose a single command. Settings come from an optional YAML
file; the API key is stored separately with --set-api-key.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import default_settings_path, get_storage_dir, load_config
from .errors import DraftsError
from .logging_utils import setup_logging
from .runner import CommandOptions, run_command

app = typer.Typer(add_completion=False, help="Search your dev.to draft articles.")
console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"dtdrafts {__version__}")
        raise typer.Exit()


@app.command()
def main(
    query: str | None = typer.Option(None, "--query", "-q", help="Search query."),
    set_api_key: str | None = typer.Option(None, "--set-api-key", help="Set dev.to API key."),
    refresh: bool = typer.Option(False, "--refresh", "-r", help="Force refresh cached articles."),
    show_all: bool = typer.Option(
        False, "--all", "-a", help="Show all drafts without filtering."
    ),
    settings: Path | None = typer.Option(
        None,
        "--settings",
        exists=True,
        dir_okay=False,
        readable=True,
        help="YAML settings file (default: settings.yaml in the data directory).",
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
):
    """Search your dev.to draft articles.

    Fetches unpublished articles once, caches them locally, and searches
    titles, bodies and tags offline.
    """
    try:
        cfg = load_config(settings or default_settings_path())
        if log_level:
            cfg.logging.level = log_level
        setup_logging(cfg.logging, get_storage_dir(cfg.storage))

        options = CommandOptions(
            query=query,
            set_api_key=set_api_key,
            refresh=refresh,
            show_all=show_all,
        )
        run_command(options, cfg, console=console)
    except DraftsError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            err_console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()

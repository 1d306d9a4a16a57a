from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from .types import Article


USAGE_LINES = [
    ("dtdrafts -q <query>", "Search draft articles"),
    ("dtdrafts --all", "Show all draft articles"),
    ("dtdrafts --refresh", "Refresh article cache"),
    ("dtdrafts --set-api-key <key>", "Set dev.to API key"),
]

EXAMPLES = ["dtdrafts -q aws", "dtdrafts -q rust", "dtdrafts --all"]


def edit_url(article: Article, site_url: str) -> str:
    return f"{site_url.rstrip('/')}/{article.user.username}/{article.slug}/edit"


def render_articles(articles: list[Article], console: Console, site_url: str) -> None:
    if not articles:
        console.print("[yellow]No draft articles found.[/yellow]")
        return

    console.print(f"[bold green]{len(articles)}[/bold green] draft article(s) found:")
    console.print()
    for index, article in enumerate(articles, start=1):
        console.print(f"{index}. [bold cyan]{escape(article.title)}[/bold cyan]")
        console.print(f"[underline blue]{escape(edit_url(article, site_url))}[/underline blue]")
        console.print()


def render_usage(console: Console) -> None:
    console.print("[bold yellow]Usage:[/bold yellow]")
    width = max(len(command) for command, _ in USAGE_LINES)
    for command, description in USAGE_LINES:
        console.print(f"  {escape(command.ljust(width))}  {description}")
    console.print()
    console.print("[bold yellow]Examples:[/bold yellow]")
    for example in EXAMPLES:
        console.print(f"  {escape(example)}")

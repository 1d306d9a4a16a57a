"""
Command orchestration for dtdrafts.

One invocation runs at most these steps, in order:
1. Save a new API key and stop, if one was given
2. Load the API key
3. Refresh the article cache when forced or when it is empty
4. Select drafts (all, or matching a query)
5. Render the selection

Errors from any step propagate unchanged to the caller.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable

from rich.console import Console

from .client import DevToClient
from .config import AppConfig, get_cache_file, get_config_file
from .filters import drafts, search
from .renderer import render_articles, render_usage
from .store import ArticleCacheStore, ConfigStore
from .types import ApiKeyConfig, Article

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str, AppConfig], DevToClient]


@dataclass
class CommandOptions:
    """Flags of a single invocation.

    Attributes:
        query: Search text, or None
        set_api_key: New API key to store, or None
        refresh: Force a full fetch even when the cache has articles
        show_all: List every draft; takes precedence over query
    """
    query: str | None = None
    set_api_key: str | None = None
    refresh: bool = False
    show_all: bool = False


def _default_client(api_key: str, cfg: AppConfig) -> DevToClient:
    return DevToClient(api_key, cfg.api)


def run_command(
    options: CommandOptions,
    cfg: AppConfig,
    console: Console | None = None,
    client_factory: ClientFactory = _default_client,
) -> None:
    """Run one invocation of the tool.

    Args:
        options: Parsed command-line flags
        cfg: Application configuration
        console: Rich console for output (creates default if None)
        client_factory: Builds the API client from the key and config

    Raises:
        DraftsError: Any failure while loading, fetching or saving
    """
    console = console or Console()
    config_store = ConfigStore(get_config_file(cfg.storage))
    cache_store = ArticleCacheStore(get_cache_file(cfg.storage))

    if options.set_api_key is not None:
        config_store.save(ApiKeyConfig(api_key=options.set_api_key))
        console.print("[green]API key saved successfully![/green]")
        return

    key_config = config_store.load()

    if options.refresh:
        _print_refresh_estimate(cache_store.count(), cfg, console)
        articles = _refresh_cache(key_config.api_key, cfg, cache_store, console, client_factory)
    else:
        articles = cache_store.load()
        if not articles:
            logger.info("Article cache is empty; fetching")
            articles = _refresh_cache(
                key_config.api_key, cfg, cache_store, console, client_factory
            )

    if options.show_all:
        selected = drafts(articles)
    elif options.query is not None:
        selected = search(articles, options.query)
    else:
        render_usage(console)
        return

    render_articles(selected, console, cfg.api.site_url)


def _refresh_cache(
    api_key: str,
    cfg: AppConfig,
    cache_store: ArticleCacheStore,
    console: Console,
    client_factory: ClientFactory,
) -> list[Article]:
    console.print("[blue]Fetching articles from dev.to...[/blue]")
    with client_factory(api_key, cfg) as client:
        articles = client.get_unpublished_articles()
    cache_store.save(articles)
    logger.info(
        "cache_refreshed",
        extra={"article_count": len(articles), "cache_path": str(cache_store.path)},
    )
    console.print("[green]Articles cached successfully![/green]")
    return articles


def _print_refresh_estimate(cached_count: int, cfg: AppConfig, console: Console) -> None:
    if cached_count <= 0:
        return
    pages = math.ceil(cached_count / cfg.api.per_page)
    seconds = math.ceil(pages * cfg.api.page_delay_seconds)
    console.print(
        f"Current cache: {cached_count} articles. "
        f"Estimated time to refresh: about {seconds} seconds ({pages} pages)."
    )

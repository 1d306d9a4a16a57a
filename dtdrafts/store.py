"""
Local persistence for the API key and the article cache.

Both stores keep a single JSON file in the data directory:
- ConfigStore: {"api_key": "..."} in config.json
- ArticleCacheStore: the full article list in articles_cache.json

The cache is one unit: it is replaced in full after a successful fetch and
read in full before filtering. There are no per-article entries and no
expiry.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from .errors import CacheError, ConfigError, MissingApiKeyError, StorageWriteError
from .types import ApiKeyConfig, Article, parse_articles

logger = logging.getLogger(__name__)


class ConfigStore:
    """Reads and writes the API key file."""

    def __init__(self, path: Path):
        self.path = path

    def save(self, config: ApiKeyConfig) -> None:
        """Write the key as pretty JSON, replacing any previous content.

        Raises:
            StorageWriteError: If the directory or file cannot be written
        """
        _write_json(self.path, config.to_dict())
        logger.debug("Saved API key to %s", self.path)

    def load(self) -> ApiKeyConfig:
        """Read the stored key.

        Raises:
            MissingApiKeyError: If no key has been saved yet
            ConfigError: If the file cannot be read or is malformed
        """
        if not self.path.exists():
            raise MissingApiKeyError()
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return ApiKeyConfig.from_dict(data)
        except OSError as exc:
            raise ConfigError(f"Failed to read configuration {self.path}: {exc}") from exc
        except ValueError as exc:
            raise ConfigError(f"Malformed configuration {self.path}: {exc}") from exc


class ArticleCacheStore:
    """Reads and writes the cached article list.

    Attributes:
        path: Location of the cache file
    """

    def __init__(self, path: Path):
        self.path = path

    def save(self, articles: list[Article]) -> None:
        """Replace the cache with the given articles.

        The list is written to a sibling temp file first and moved into
        place, so readers see either the old cache or the new one.

        Raises:
            StorageWriteError: If the directory or file cannot be written
        """
        _write_json(self.path, [article.to_dict() for article in articles])
        logger.debug("Cached %d articles in %s", len(articles), self.path)

    def load(self) -> list[Article]:
        """Read the cached articles in stored order.

        Returns:
            The cached articles, or an empty list if no cache exists yet

        Raises:
            CacheError: If the file cannot be read or is malformed
        """
        if not self.path.exists():
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return parse_articles(data)
        except OSError as exc:
            raise CacheError(f"Failed to read articles cache {self.path}: {exc}") from exc
        except ValueError as exc:
            raise CacheError(f"Malformed articles cache {self.path}: {exc}") from exc

    def count(self) -> int:
        """Number of cached articles, 0 if the cache is missing or unreadable."""
        try:
            return len(self.load())
        except CacheError as exc:
            logger.debug("Ignoring unreadable cache while counting: %s", exc)
            return 0


def _write_json(path: Path, payload: Any) -> None:
    tmp_path = path.with_name(path.name + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
        os.replace(tmp_path, path)
    except (OSError, ValueError) as exc:
        tmp_path.unlink(missing_ok=True)
        raise StorageWriteError(f"Failed to write {path}: {exc}") from exc

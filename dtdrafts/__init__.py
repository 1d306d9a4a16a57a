"""
dtdrafts - search your dev.to draft articles from the terminal.

This package fetches every unpublished article of the authenticated dev.to
user, caches the list locally, and searches or lists drafts offline.

Main entry point is the CLI via the `dtdrafts` command.

Example:
    $ dtdrafts --set-api-key YOUR_API_KEY
    $ dtdrafts -q rust
"""

__all__ = ["__version__", "Article", "ArticleUser", "drafts", "search"]
__version__ = "0.1.0"

from .filters import drafts, search
from .types import Article, ArticleUser

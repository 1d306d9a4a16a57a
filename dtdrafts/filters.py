"""
In-memory selection over the cached article list.

Both functions are pure: they never fail, never mutate their input, and
keep the input order.
"""

from __future__ import annotations

from .types import Article


def drafts(articles: list[Article]) -> list[Article]:
    """Return the unpublished articles."""
    return [article for article in articles if not article.published]


def search(articles: list[Article], query: str) -> list[Article]:
    """Case-insensitive substring search over drafts.

    An unpublished article matches when the query occurs in its title, its
    markdown body, or any of its tags. Missing bodies and tags simply do not
    match. Published articles are never returned.

    Args:
        articles: Articles to search, usually the whole cache
        query: Text to look for; compared lowercased

    Returns:
        Matching drafts in input order
    """
    needle = query.lower()
    return [
        article
        for article in articles
        if not article.published and _matches(article, needle)
    ]


def _matches(article: Article, needle: str) -> bool:
    if needle in article.title.lower():
        return True
    if article.body_markdown is not None and needle in article.body_markdown.lower():
        return True
    return any(needle in tag.lower() for tag in article.tags or [])

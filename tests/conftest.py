from __future__ import annotations

from typing import Any

import pytest

from dtdrafts.types import Article, ArticleUser


def make_article(
    *,
    id: int = 1,
    title: str = "Untitled",
    published: bool = False,
    body_markdown: str | None = None,
    tags: list[str] | None = None,
    slug: str | None = None,
    username: str = "user",
) -> Article:
    slug = slug or title.lower().replace(" ", "-")
    return Article(
        id=id,
        title=title,
        description=None,
        body_markdown=body_markdown,
        url=f"https://dev.to/{username}/{slug}",
        canonical_url=None,
        url_with_preview=None,
        published=published,
        created_at=None,
        updated_at=None,
        tags=tags,
        slug=slug,
        user=ArticleUser(username=username),
    )


def article_payload(id: int, title: str, **overrides: Any) -> dict[str, Any]:
    """JSON object shaped like an /articles/me/unpublished item."""
    slug = title.lower().replace(" ", "-")
    payload: dict[str, Any] = {
        "type_of": "article",
        "id": id,
        "title": title,
        "description": "",
        "body_markdown": None,
        "url": f"https://dev.to/user/{slug}",
        "canonical_url": f"https://dev.to/user/{slug}",
        "url_with_preview": None,
        "published": False,
        "created_at": "2024-05-01T10:00:00Z",
        "updated_at": None,
        "tags": [],
        "slug": slug,
        "user": {"name": "User", "username": "user"},
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def sample_articles() -> list[Article]:
    return [
        make_article(
            id=1,
            title="Rust Tips",
            body_markdown="Rust is great for CLI tools.",
            tags=["rust", "cli"],
        ),
        make_article(
            id=2,
            title="Kotlin Guide",
            published=True,
            body_markdown="Kotlin is a modern language.",
            tags=["kotlin", "android"],
        ),
        make_article(
            id=3,
            title="CLI Tricks",
            body_markdown="Use Rust or Python for CLI.",
            tags=["cli", "tools"],
        ),
    ]


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point the data directory at a temp folder."""
    path = tmp_path / "dtdrafts-home"
    monkeypatch.setenv("DTDRAFTS_HOME", str(path))
    return path

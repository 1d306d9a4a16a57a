"""
Core data types for dtdrafts.

This module defines the records mirrored from the dev.to API:
- ArticleUser: The author embedded in every article
- Article: An article as returned by /articles/me/unpublished
- ApiKeyConfig: The persisted API key

Articles are read-only copies of remote state. Parsing is strict about the
fields the tool relies on and ignores any extra keys the API adds.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class ArticleUser:
    """Author of an article.

    Attributes:
        username: dev.to username, used to build the edit URL
    """
    username: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ArticleUser":
        if not isinstance(data, dict):
            raise ValueError("'user' must be an object")
        return cls(username=_require(data, "username", str))


@dataclass
class Article:
    """An article owned by the authenticated user.

    Attributes:
        id: Numeric identifier assigned by dev.to
        title: The article headline
        description: Optional short description
        body_markdown: Optional markdown source of the article
        url: Public URL of the article
        canonical_url: Optional canonical URL
        url_with_preview: Optional preview URL (drafts only)
        published: Whether the article is published
        created_at: Optional creation timestamp, kept as text
        updated_at: Optional update timestamp, kept as text
        tags: Optional ordered list of tags
        slug: URL slug assigned by dev.to
        user: The embedded author
    """
    id: int
    title: str
    description: str | None
    body_markdown: str | None
    url: str
    canonical_url: str | None
    url_with_preview: str | None
    published: bool
    created_at: str | None
    updated_at: str | None
    tags: list[str] | None
    slug: str
    user: ArticleUser

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Article":
        """Build an Article from a decoded JSON object.

        Raises:
            ValueError: If a required field is missing or a field has the wrong type
        """
        if not isinstance(data, dict):
            raise ValueError("article must be an object")
        if "user" not in data:
            raise ValueError("missing required field 'user'")
        article_id = _require(data, "id", int)
        if isinstance(article_id, bool):
            raise ValueError("field 'id' must be int")
        return cls(
            id=article_id,
            title=_require(data, "title", str),
            description=_optional(data, "description", str),
            body_markdown=_optional(data, "body_markdown", str),
            url=_require(data, "url", str),
            canonical_url=_optional(data, "canonical_url", str),
            url_with_preview=_optional(data, "url_with_preview", str),
            published=_require(data, "published", bool),
            created_at=_optional(data, "created_at", str),
            updated_at=_optional(data, "updated_at", str),
            tags=_optional_tags(data),
            slug=_require(data, "slug", str),
            user=ArticleUser.from_dict(data["user"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class ApiKeyConfig:
    """The persisted dev.to API key."""
    api_key: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ApiKeyConfig":
        if not isinstance(data, dict):
            raise ValueError("config must be an object")
        return cls(api_key=_require(data, "api_key", str))

    def to_dict(self) -> dict[str, Any]:
        return {"api_key": self.api_key}


def parse_articles(data: Any) -> list[Article]:
    """Parse a decoded JSON array into Articles, preserving order.

    Raises:
        ValueError: If the payload is not an array or any element is invalid
    """
    if not isinstance(data, list):
        raise ValueError(f"expected a JSON array of articles, got {type(data).__name__}")
    return [Article.from_dict(item) for item in data]


def _require(data: dict[str, Any], key: str, kind: type) -> Any:
    if key not in data or data[key] is None:
        raise ValueError(f"missing required field '{key}'")
    value = data[key]
    if not isinstance(value, kind):
        raise ValueError(f"field '{key}' must be {kind.__name__}")
    return value


def _optional(data: dict[str, Any], key: str, kind: type) -> Any:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, kind):
        raise ValueError(f"field '{key}' must be {kind.__name__} or null")
    return value


def _optional_tags(data: dict[str, Any]) -> list[str] | None:
    tags = data.get("tags")
    if tags is None:
        return None
    if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
        raise ValueError("field 'tags' must be a list of strings or null")
    return list(tags)

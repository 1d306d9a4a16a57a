"""Tests for parsing API payloads into Articles."""

import pytest

from dtdrafts.types import ApiKeyConfig, Article, parse_articles

from conftest import article_payload


def test_article_from_api_payload_ignores_extra_keys():
    article = Article.from_dict(
        article_payload(7, "Rust Tips", tags=["rust"], body_markdown="# Hi")
    )
    assert article.id == 7
    assert article.slug == "rust-tips"
    assert article.tags == ["rust"]
    assert article.body_markdown == "# Hi"
    assert article.user.username == "user"
    assert "type_of" not in article.to_dict()


def test_article_to_dict_keeps_field_order_and_nulls():
    article = Article.from_dict(article_payload(1, "Draft", tags=None))
    data = article.to_dict()
    assert list(data) == [
        "id",
        "title",
        "description",
        "body_markdown",
        "url",
        "canonical_url",
        "url_with_preview",
        "published",
        "created_at",
        "updated_at",
        "tags",
        "slug",
        "user",
    ]
    assert data["tags"] is None
    assert data["user"] == {"username": "user"}


@pytest.mark.parametrize(
    "field",
    ["id", "title", "url", "published", "slug", "user"],
)
def test_article_requires_field(field):
    payload = article_payload(1, "Draft")
    del payload[field]
    with pytest.raises(ValueError, match=field):
        Article.from_dict(payload)


def test_article_rejects_wrong_types():
    with pytest.raises(ValueError, match="published"):
        Article.from_dict(article_payload(1, "Draft", published="no"))
    with pytest.raises(ValueError, match="tags"):
        Article.from_dict(article_payload(1, "Draft", tags="rust, cli"))
    with pytest.raises(ValueError, match="id"):
        Article.from_dict(article_payload(True, "Draft"))


def test_parse_articles_requires_array():
    with pytest.raises(ValueError, match="array"):
        parse_articles({"error": "unauthorized"})
    assert parse_articles([]) == []


def test_api_key_config_round_trip():
    config = ApiKeyConfig.from_dict({"api_key": "secret"})
    assert config.to_dict() == {"api_key": "secret"}
    with pytest.raises(ValueError):
        ApiKeyConfig.from_dict({"key": "secret"})

"""Tests for draft selection and search."""

from dtdrafts.filters import drafts, search

from conftest import make_article


def _titles(articles):
    return [article.title for article in articles]


def test_search_by_title(sample_articles):
    found = search(sample_articles, "rust")
    assert _titles(found) == ["Rust Tips", "CLI Tricks"]


def test_search_skips_published_body_match(sample_articles):
    # Only the published article mentions this phrase
    assert search(sample_articles, "modern language") == []
    assert _titles(search(sample_articles, "python")) == ["CLI Tricks"]


def test_search_by_tag(sample_articles):
    assert _titles(search(sample_articles, "cli")) == ["Rust Tips", "CLI Tricks"]
    assert _titles(search(sample_articles, "tools")) == ["Rust Tips", "CLI Tricks"]


def test_search_is_case_insensitive(sample_articles):
    assert search(sample_articles, "RUST") == search(sample_articles, "rust")
    assert _titles(search(sample_articles, "cLi TrIcKs")) == ["CLI Tricks"]


def test_search_never_returns_published(sample_articles):
    assert search(sample_articles, "kotlin") == []
    assert search(sample_articles, "") == drafts(sample_articles)


def test_search_tolerates_missing_body_and_tags():
    articles = [
        make_article(id=1, title="Bare Draft"),
        make_article(id=2, title="Other", tags=["bare"]),
        make_article(id=3, title="Third", body_markdown="nothing here"),
    ]
    assert _titles(search(articles, "bare")) == ["Bare Draft", "Other"]
    assert search(articles, "missing") == []


def test_get_draft_articles(sample_articles):
    found = drafts(sample_articles)
    assert _titles(found) == ["Rust Tips", "CLI Tricks"]
    published = [article for article in sample_articles if article.published]
    assert len(found) + len(published) == len(sample_articles)


def test_filters_do_not_mutate_input(sample_articles):
    before = list(sample_articles)
    drafts(sample_articles)
    search(sample_articles, "rust")
    assert sample_articles == before


def test_filters_on_empty_list():
    assert drafts([]) == []
    assert search([], "anything") == []

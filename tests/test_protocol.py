"""Tests for protocol compliance."""

from blog_reader.data import Article, ArticleDraft
from blog_reader.store import ArticleStore, HttpArticleStore, InMemoryArticleStore


def _accepts_store(store: ArticleStore) -> ArticleStore:
    return store


def test_http_store_matches_protocol() -> None:
    store = _accepts_store(HttpArticleStore("http://api.test"))
    for name in ("list_articles", "get_article", "create_article"):
        assert callable(getattr(store, name))


def test_memory_store_matches_protocol() -> None:
    store = _accepts_store(InMemoryArticleStore())
    for name in ("list_articles", "get_article", "create_article"):
        assert callable(getattr(store, name))


class MockArticleStore:
    """A minimal implementation to verify protocol requirements."""

    async def list_articles(self) -> list[Article]:
        return []

    async def get_article(self, article_id: int) -> Article:
        return Article(id=article_id, title="mock")

    async def create_article(self, draft: ArticleDraft) -> Article:
        return draft.to_article(1, "2024-01-01")


async def test_mock_store_satisfies_protocol() -> None:
    """Any class with the right method signatures satisfies the protocol."""
    store = _accepts_store(MockArticleStore())
    assert await store.list_articles() == []
    assert (await store.get_article(3)).id == 3

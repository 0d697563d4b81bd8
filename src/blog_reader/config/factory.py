"""Factory functions to create components from configuration."""

from pathlib import Path

from blog_reader.browser import ArticleBrowser
from blog_reader.config.models import (
    BlogReaderConfig,
    FileStoreConfig,
    HttpStoreConfig,
    StoreConfig,
)
from blog_reader.store.base import ArticleStore
from blog_reader.store.http import HttpArticleStore
from blog_reader.store.memory import InMemoryArticleStore


def create_store(config: StoreConfig) -> ArticleStore:
    """Create an article store from config.

    Uses explicit type matching rather than getattr.
    """
    if isinstance(config, HttpStoreConfig):
        return HttpArticleStore(
            config.base_url,
            resource=config.resource,
            timeout=config.timeout,
        )
    if isinstance(config, FileStoreConfig):
        return InMemoryArticleStore.from_json_file(Path(config.path))
    msg = f"Unknown store config type: {type(config)}"
    raise ValueError(msg)


def create_from_config(config: BlogReaderConfig) -> tuple[ArticleStore, ArticleBrowser]:
    """Create a store and a browser over it from root config.

    Returns:
        Tuple of (store, browser).
    """
    store = create_store(config.store)
    browser = ArticleBrowser(
        store,
        debounce_ms=config.query.debounce_ms,
        sort_by=config.query.default_sort,
        words_per_minute=config.display.words_per_minute,
    )
    return (store, browser)

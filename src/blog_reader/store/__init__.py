"""Article store backends."""

from blog_reader.store.base import ArticleStore
from blog_reader.store.http import HttpArticleStore
from blog_reader.store.memory import InMemoryArticleStore

__all__ = [
    "ArticleStore",
    "HttpArticleStore",
    "InMemoryArticleStore",
]

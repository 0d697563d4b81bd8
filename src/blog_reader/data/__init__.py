"""Data models for Blog Reader."""

from blog_reader.data.models import Article, ArticleDraft, QueryResult, SortOrder

__all__ = [
    "Article",
    "ArticleDraft",
    "QueryResult",
    "SortOrder",
]

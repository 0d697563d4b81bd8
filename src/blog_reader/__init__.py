"""Blog Reader: client-side search, filtering and sorting of blog articles."""

from blog_reader.browser import ArticleBrowser
from blog_reader.config import BlogReaderConfig, create_from_config, load_config
from blog_reader.data import Article, ArticleDraft, QueryResult, SortOrder
from blog_reader.debounce import Debouncer
from blog_reader.display import (
    ArticleView,
    format_long_date,
    format_relative_date,
    paragraphs,
    read_time_minutes,
)
from blog_reader.errors import BlogReaderError, FetchError, NotFoundError, ValidationError
from blog_reader.query import (
    QueryPipeline,
    QueryState,
    ResultReporter,
    category_index,
    parse_date,
    run_query,
)
from blog_reader.store import ArticleStore, HttpArticleStore, InMemoryArticleStore

__all__ = [
    # Models
    "Article",
    "ArticleDraft",
    "ArticleView",
    "QueryResult",
    "SortOrder",
    # Errors
    "BlogReaderError",
    "FetchError",
    "NotFoundError",
    "ValidationError",
    # Protocols
    "ArticleStore",
    # Stores
    "HttpArticleStore",
    "InMemoryArticleStore",
    # Query pipeline
    "QueryPipeline",
    "QueryState",
    "ResultReporter",
    "category_index",
    "parse_date",
    "run_query",
    # Functions
    "format_long_date",
    "format_relative_date",
    "paragraphs",
    "read_time_minutes",
    # Session
    "ArticleBrowser",
    "Debouncer",
    # Config
    "BlogReaderConfig",
    "create_from_config",
    "load_config",
]

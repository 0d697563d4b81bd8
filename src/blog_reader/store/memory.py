"""In-process article store, optionally seeded from a JSON file."""

import json
import logging
from collections.abc import Iterable
from datetime import UTC, datetime
from pathlib import Path

from blog_reader.data import Article, ArticleDraft
from blog_reader.errors import FetchError, NotFoundError

logger = logging.getLogger(__name__)


class InMemoryArticleStore:
    """Keep articles in a dict keyed by id.

    New ids are one past the largest existing id, and new articles are
    dated with the current UTC instant.
    """

    def __init__(self, articles: Iterable[Article] = ()) -> None:
        self._articles: dict[int, Article] = {}
        for article in articles:
            if article.id in self._articles:
                raise ValueError(f"Duplicate article id: {article.id}")
            self._articles[article.id] = article

    @classmethod
    def from_json_file(cls, path: Path | str) -> "InMemoryArticleStore":
        """Load a store from a JSON file.

        The file holds either a list of articles or an object with a
        ``blogs`` list (the json-server ``db.json`` layout).

        Raises:
            FetchError: If the file cannot be read or is malformed.
        """
        path = Path(path)
        try:
            with path.open() as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            raise FetchError(f"Could not read articles from {path}: {e}") from e

        items = raw.get("blogs", []) if isinstance(raw, dict) else raw
        if not isinstance(items, list):
            raise FetchError(f"Expected a list of articles in {path}")
        articles = [Article.from_dict(item) for item in items]
        logger.info("Loaded %d articles from %s", len(articles), path)
        try:
            return cls(articles)
        except ValueError as e:
            raise FetchError(str(e)) from e

    async def list_articles(self) -> list[Article]:
        return list(self._articles.values())

    async def get_article(self, article_id: int) -> Article:
        try:
            return self._articles[article_id]
        except KeyError:
            raise NotFoundError(article_id) from None

    async def create_article(self, draft: ArticleDraft) -> Article:
        draft.validate()
        article_id = max(self._articles, default=0) + 1
        article = draft.to_article(article_id, datetime.now(tz=UTC).isoformat())
        self._articles[article_id] = article
        return article

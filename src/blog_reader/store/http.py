"""Article store backed by a REST API."""

import logging
from datetime import UTC, datetime
from typing import Any

import httpx

from blog_reader.data import Article, ArticleDraft
from blog_reader.errors import FetchError, NotFoundError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3000"


class HttpArticleStore:
    """Read and create articles through a JSON REST endpoint.

    Articles live under ``{base_url}/{resource}``: the collection is listed
    with ``GET``, a single article is fetched from ``GET .../{id}`` and new
    articles are created with ``POST``.

    Args:
        base_url: API root (default ``http://localhost:3000``).
        resource: Collection path segment (default ``blogs``).
        timeout: Request timeout in seconds.
        transport: Optional httpx transport, e.g. for tests.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        resource: str = "blogs",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._collection_url = f"{base_url.rstrip('/')}/{resource.strip('/')}"
        self._timeout = timeout
        self._transport = transport

    @property
    def collection_url(self) -> str:
        return self._collection_url

    async def list_articles(self) -> list[Article]:
        data = await self._request("GET", self._collection_url)
        if not isinstance(data, list):
            raise FetchError(f"Expected a list of articles from {self._collection_url}")
        return [Article.from_dict(item) for item in data]

    async def get_article(self, article_id: int) -> Article:
        url = f"{self._collection_url}/{article_id}"
        data = await self._request("GET", url, article_id=article_id)
        return Article.from_dict(data)

    async def create_article(self, draft: ArticleDraft) -> Article:
        draft.validate()
        body = draft.to_dict(date=datetime.now(tz=UTC).isoformat())
        data = await self._request("POST", self._collection_url, json=body)
        article = Article.from_dict(data)
        logger.info(f"Created article {article.id}: {article.title}")
        return article

    async def _request(
        self,
        method: str,
        url: str,
        *,
        article_id: int | None = None,
        **kwargs: Any,
    ) -> Any:
        """Send a request and decode its JSON body.

        A 404 for a single-article request (``article_id`` given) raises
        ``NotFoundError``; every other failure becomes ``FetchError``.
        """
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.request(method, url, **kwargs)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status == 404 and article_id is not None:
                raise NotFoundError(article_id) from e
            logger.warning("%s %s failed with status %d", method, url, status)
            raise FetchError(f"{method} {url} failed: HTTP {status}") from e
        except httpx.HTTPError as e:
            logger.warning("%s %s failed. Error: %s", method, url, e)
            raise FetchError(f"{method} {url} failed: {e}") from e
        except ValueError as e:
            logger.warning("%s %s returned malformed JSON", method, url)
            raise FetchError(f"Malformed response from {url}") from e

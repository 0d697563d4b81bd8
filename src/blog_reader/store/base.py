"""Protocol for article storage backends."""

from typing import Protocol

from blog_reader.data import Article, ArticleDraft


class ArticleStore(Protocol):
    """Interface for reading and creating blog articles."""

    async def list_articles(self) -> list[Article]:
        """Return every article in the store, in no particular order.

        Raises:
            FetchError: If the backing source is unreachable or returns
                malformed data.
        """
        ...

    async def get_article(self, article_id: int) -> Article:
        """Return the article with the given id.

        Raises:
            NotFoundError: If no article has that id.
            FetchError: If the backing source is unreachable.
        """
        ...

    async def create_article(self, draft: ArticleDraft) -> Article:
        """Persist ``draft``, assigning its id and creation date.

        Raises:
            ValidationError: If a required field of the draft is empty.
            FetchError: If the backing source rejects the request.
        """
        ...

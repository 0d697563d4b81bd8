"""Article browsing session: query state, debounced search and results."""

import asyncio
import logging
from collections.abc import Callable, Iterable
from types import TracebackType

from blog_reader.data import Article, ArticleDraft, QueryResult, SortOrder
from blog_reader.debounce import DEFAULT_DEBOUNCE_MS, Debouncer
from blog_reader.display import DEFAULT_WORDS_PER_MINUTE, ArticleView
from blog_reader.query.categories import category_index
from blog_reader.query.pipeline import QueryPipeline
from blog_reader.query.reporter import ResultListener, ResultReporter
from blog_reader.query.state import QueryState
from blog_reader.store.base import ArticleStore

logger = logging.getLogger(__name__)


class ArticleBrowser:
    """Drives the article query pipeline from user input.

    Flow:
    1. Keystrokes update the raw term and go through a debouncer
    2. Once typing pauses, the debounced term is applied
    3. Any change to articles, debounced term, categories or sort order
       re-runs the pipeline
    4. Each fresh result is reported to subscribed listeners

    The pipeline never reads the raw term. Everything runs on one event loop,
    so the pipeline always sees a consistent snapshot of the query state.

    Args:
        store: Article store to load from.
        debounce_ms: Quiet period before a typed search term is applied.
        sort_by: Initial sort order.
        words_per_minute: Reading speed used for article read times.
        loop: Event loop for the debounce timer (defaults to the running loop).
    """

    def __init__(
        self,
        store: ArticleStore,
        *,
        debounce_ms: float = DEFAULT_DEBOUNCE_MS,
        sort_by: SortOrder = SortOrder.NEWEST,
        words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self._store = store
        self._words_per_minute = words_per_minute
        self._articles: tuple[Article, ...] = ()
        self._categories: list[str] | None = None
        self._state = QueryState(sort_by=sort_by)
        self._pipeline = QueryPipeline()
        self._reporter = ResultReporter()
        self._search_debouncer: Debouncer[str] = Debouncer(
            self.apply_search_term, debounce_ms, loop=loop
        )

    # -- read access --

    @property
    def state(self) -> QueryState:
        """Current query state. Mutate it through the browser's methods."""
        return self._state

    @property
    def articles(self) -> tuple[Article, ...]:
        """The unfiltered article snapshot."""
        return self._articles

    @property
    def total(self) -> int:
        return len(self._articles)

    @property
    def categories(self) -> list[str]:
        """Sorted distinct category labels across all articles."""
        if self._categories is None:
            self._categories = category_index(self._articles)
        return list(self._categories)

    @property
    def result(self) -> QueryResult:
        """Ordered matches for the current query."""
        return self._update()

    @property
    def search_pending(self) -> bool:
        """Whether a typed search term is still waiting to be applied."""
        return self._search_debouncer.pending

    def subscribe(self, listener: ResultListener) -> Callable[[], None]:
        """Receive every fresh result; returns an unsubscribe callable."""
        return self._reporter.subscribe(listener)

    # -- article collection --

    def set_articles(self, articles: Iterable[Article] | None) -> QueryResult:
        """Replace the article snapshot. ``None`` is treated as empty."""
        self._articles = tuple(articles or ())
        self._categories = None
        return self._update()

    async def refresh(self) -> QueryResult:
        """Reload the snapshot from the store.

        Raises:
            FetchError: If the store cannot be read; the previous snapshot is
                kept.
        """
        articles = await self._store.list_articles()
        result = self.set_articles(articles)
        logger.info("Loaded %d articles", self.total)
        return result

    async def open_article(self, article_id: int) -> ArticleView:
        """Fetch one article with its display metadata.

        Raises:
            NotFoundError: If the store has no article with that id.
        """
        article = await self._store.get_article(article_id)
        return ArticleView.build(article, words_per_minute=self._words_per_minute)

    async def create_article(self, draft: ArticleDraft) -> Article:
        """Create an article in the store and reload the snapshot."""
        article = await self._store.create_article(draft)
        await self.refresh()
        return article

    # -- query input --

    def set_search_term(self, term: str) -> None:
        """Record a keystroke; the term is applied after the debounce window."""
        self._state.set_raw_term(term)
        self._search_debouncer(term)

    def apply_search_term(self, term: str) -> QueryResult:
        """Apply ``term`` to filtering immediately."""
        self._state.set_debounced_term(term)
        return self._update()

    def flush_search(self) -> bool:
        """Apply a pending search term now. Returns False if none was pending."""
        return self._search_debouncer.flush()

    def toggle_category(self, category: str) -> bool:
        """Toggle a category filter. Returns True if it is now selected."""
        selected = self._state.toggle_category(category)
        self._update()
        return selected

    def set_sort(self, sort_by: SortOrder | str) -> QueryResult:
        self._state.set_sort(sort_by)
        return self._update()

    def clear_filters(self) -> QueryResult:
        """Clear the search term and categories, keeping the sort order."""
        self._search_debouncer.cancel()
        self._state.clear_filters()
        return self._update()

    # -- lifecycle --

    def close(self) -> None:
        """Cancel any pending debounced search."""
        if self._search_debouncer.cancel():
            logger.debug("Cancelled pending search on close")

    def __enter__(self) -> "ArticleBrowser":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _update(self) -> QueryResult:
        executions = self._pipeline.executions
        result = self._pipeline.run(
            self._articles,
            term=self._state.debounced_term,
            categories=self._state.selected_categories,
            sort_by=self._state.sort_by,
        )
        if self._pipeline.executions > executions:
            self._reporter.report(result, generation=self._pipeline.executions)
        return result

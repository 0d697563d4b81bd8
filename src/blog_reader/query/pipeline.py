"""Filter-then-sort query pipeline over an article collection.

The pipeline is pure: it never mutates the articles it is given, never
performs I/O and never raises for empty collections, unmatched queries or
unparsable dates.

Search matching is a case-insensitive substring test against ``title`` and
``description`` only; the article body is not searched. The term is used
verbatim, so a whitespace-only term is a literal needle rather than "no
search".
"""

import logging
from collections.abc import Collection, Iterable, Sequence
from datetime import UTC, date, datetime

from blog_reader.data import Article, QueryResult, SortOrder

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def parse_date(value: str | datetime | date | None) -> datetime:
    """Parse an article timestamp into a timezone-aware instant.

    Accepts ISO-8601 strings (including a trailing ``Z``), date-only strings
    and ``datetime``/``date`` objects. Naive values are taken as UTC. Anything
    unparsable maps to the Unix epoch so it sorts consistently.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            logger.debug("Unparsable article date %r, using epoch", value)
            return EPOCH
    else:
        return EPOCH

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def matches_search(article: Article, term: str) -> bool:
    """True if ``term`` is empty or occurs in the title or description."""
    if term == "":
        return True
    needle = term.lower()
    title = (article.title or "").lower()
    description = (article.description or "").lower()
    return needle in title or needle in description


def matches_categories(article: Article, selected: Collection[str]) -> bool:
    """True if no categories are selected or the article carries one of them."""
    if not selected:
        return True
    return any(label in selected for label in article.category)


def filter_articles(
    articles: Iterable[Article],
    term: str,
    categories: Collection[str],
) -> list[Article]:
    return [a for a in articles if matches_search(a, term) and matches_categories(a, categories)]


def sort_articles(articles: Iterable[Article], sort_by: SortOrder) -> list[Article]:
    """Sort by parsed date; equal timestamps keep their input order."""
    return sorted(
        articles,
        key=lambda a: parse_date(a.date),
        reverse=sort_by == SortOrder.NEWEST,
    )


def run_query(
    articles: Sequence[Article] | None,
    *,
    term: str = "",
    categories: Collection[str] = frozenset(),
    sort_by: SortOrder = SortOrder.NEWEST,
) -> QueryResult:
    """Filter then sort ``articles`` for the given query.

    Args:
        articles: The full collection. ``None`` is treated as empty.
        term: Debounced search term.
        categories: Selected category labels; empty means no category filter.
        sort_by: Date ordering of the result.

    Returns:
        QueryResult holding the ordered matches and the unfiltered total.
    """
    collection = articles or ()
    matched = filter_articles(collection, term, categories)
    return QueryResult(articles=tuple(sort_articles(matched, sort_by)), total=len(collection))


class QueryPipeline:
    """Memoized ``run_query``.

    Keeps the most recent result and recomputes only when the article
    collection (compared by identity), the term, the category set or the sort
    order differ from the previous call. A recomputation always runs the full
    filter and sort.
    """

    def __init__(self) -> None:
        self._articles: Sequence[Article] | None = None
        self._key: tuple[str, frozenset[str], SortOrder] | None = None
        self._result: QueryResult | None = None
        self._executions = 0

    @property
    def executions(self) -> int:
        """Number of times the filter and sort actually ran."""
        return self._executions

    def run(
        self,
        articles: Sequence[Article] | None,
        *,
        term: str,
        categories: Collection[str],
        sort_by: SortOrder,
    ) -> QueryResult:
        key = (term, frozenset(categories), sort_by)
        if self._result is not None and articles is self._articles and key == self._key:
            return self._result

        result = run_query(articles, term=term, categories=key[1], sort_by=sort_by)
        self._articles = articles
        self._key = key
        self._result = result
        self._executions += 1
        logger.debug(
            "Query executed: term=%r categories=%s sort=%s -> %d of %d",
            term,
            sorted(key[1]),
            sort_by.value,
            result.count,
            result.total,
        )
        return result

    def invalidate(self) -> None:
        """Forget the memoized result so the next ``run`` recomputes."""
        self._articles = None
        self._key = None
        self._result = None

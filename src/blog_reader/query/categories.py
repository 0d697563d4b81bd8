"""Category index derived from an article collection."""

from collections.abc import Iterable

from blog_reader.data import Article


def category_index(articles: Iterable[Article] | None) -> list[str]:
    """Return every distinct category label, sorted ascending.

    Labels are compared case-sensitively as stored. An absent collection
    yields an empty index.
    """
    if not articles:
        return []
    labels: set[str] = set()
    for article in articles:
        labels.update(article.category)
    return sorted(labels)

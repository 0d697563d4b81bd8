"""Derived article metadata for display: read time, dates and paragraphs."""

import math
from dataclasses import dataclass
from datetime import UTC, datetime

from blog_reader.data import Article
from blog_reader.query.pipeline import parse_date

DEFAULT_WORDS_PER_MINUTE = 200


def read_time_minutes(content: str, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE) -> int:
    """Estimated reading time in whole minutes, never less than one."""
    words = len(content.split())
    return max(1, math.ceil(words / words_per_minute))


def format_long_date(value: str | datetime) -> str:
    """Format as e.g. ``"January 5, 2024"``."""
    dt = parse_date(value)
    return f"{dt:%B} {dt.day}, {dt.year}"


def format_short_date(value: str | datetime) -> str:
    """Format as e.g. ``"Jan 5, 2024"``."""
    dt = parse_date(value)
    return f"{dt:%b} {dt.day}, {dt.year}"


def format_relative_date(value: str | datetime, now: datetime | None = None) -> str:
    """Describe the age of a timestamp relative to ``now``.

    Within a month the age is given in days or weeks ("Today", "3 days ago",
    "2 weeks ago"); older timestamps fall back to the short date.
    """
    dt = parse_date(value)
    now = parse_date(now) if now is not None else datetime.now(tz=UTC)
    days = int(abs((now - dt).total_seconds()) // 86400)

    if days == 0:
        return "Today"
    if days == 1:
        return "1 day ago"
    if days < 7:
        return f"{days} days ago"
    if days < 30:
        weeks = days // 7
        return "1 week ago" if weeks == 1 else f"{weeks} weeks ago"
    return format_short_date(dt)


def paragraphs(content: str) -> list[str]:
    """Split article content on blank lines, dropping empty chunks."""
    return [chunk.strip() for chunk in content.split("\n\n") if chunk.strip()]


@dataclass(frozen=True)
class ArticleView:
    """An article together with the metadata shown on its detail page."""

    article: Article
    read_time_minutes: int
    published: str
    age: str
    paragraphs: tuple[str, ...]

    @classmethod
    def build(
        cls,
        article: Article,
        *,
        now: datetime | None = None,
        words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
    ) -> "ArticleView":
        return cls(
            article=article,
            read_time_minutes=read_time_minutes(article.content, words_per_minute),
            published=format_long_date(article.date),
            age=format_relative_date(article.date, now=now),
            paragraphs=tuple(paragraphs(article.content)),
        )

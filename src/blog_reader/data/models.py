"""Core data models for Blog Reader."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from blog_reader.errors import FetchError, ValidationError

REQUIRED_DRAFT_FIELDS = ("title", "category", "description", "cover_image", "content")


class SortOrder(StrEnum):
    """Ordering applied to the filtered article list."""

    NEWEST = "newest"
    OLDEST = "oldest"


@dataclass(frozen=True)
class Article:
    """A single blog post as served by the article store."""

    id: int
    title: str
    description: str = ""
    content: str = ""
    category: tuple[str, ...] = ()
    date: str = ""
    cover_image: str = ""

    @classmethod
    def from_dict(cls, payload: Any) -> "Article":
        """Build an article from the REST JSON shape.

        Expected keys: ``id``, ``title``, ``category``, ``description``,
        ``coverImage``, ``content`` and ``date``.

        Raises:
            FetchError: If the payload is not an object, lacks ``id`` or
                ``title``, or carries values of the wrong type.
        """
        if not isinstance(payload, dict):
            kind = type(payload).__name__
            raise FetchError(f"Malformed article payload: expected object, got {kind}")
        try:
            raw_id = payload["id"]
            title = payload["title"]
        except KeyError as exc:
            raise FetchError(f"Malformed article payload: missing {exc.args[0]!r}") from exc

        # json-server style backends hand out string ids
        try:
            article_id = int(raw_id)
        except (TypeError, ValueError) as exc:
            raise FetchError(f"Malformed article id: {raw_id!r}") from exc

        category = payload.get("category") or []
        if isinstance(category, str):
            category = [category]
        if not isinstance(category, list) or not all(isinstance(c, str) for c in category):
            raise FetchError(f"Malformed category list for article {article_id}")

        return cls(
            id=article_id,
            title=str(title or ""),
            description=str(payload.get("description") or ""),
            content=str(payload.get("content") or ""),
            category=tuple(category),
            date=str(payload.get("date") or ""),
            cover_image=str(payload.get("coverImage") or ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "category": list(self.category),
            "description": self.description,
            "coverImage": self.cover_image,
            "content": self.content,
            "date": self.date,
        }


def _is_filled(value: str | tuple[str, ...]) -> bool:
    if isinstance(value, str):
        return bool(value.strip())
    return bool(value)


@dataclass(frozen=True)
class ArticleDraft:
    """An article submitted for creation; the store assigns ``id`` and ``date``."""

    title: str
    category: tuple[str, ...]
    description: str
    cover_image: str
    content: str

    @classmethod
    def from_form(
        cls,
        *,
        title: str,
        category: str,
        description: str,
        cover_image: str,
        content: str,
    ) -> "ArticleDraft":
        """Build a draft from free-text form fields.

        ``category`` is a comma-separated string: each label is trimmed and
        upper-cased, and empty labels are dropped (``"tech, finance"`` becomes
        ``("TECH", "FINANCE")``).
        """
        labels = tuple(label.strip().upper() for label in category.split(","))
        return cls(
            title=title,
            category=tuple(label for label in labels if label),
            description=description,
            cover_image=cover_image,
            content=content,
        )

    def validate(self) -> None:
        """Raise ``ValidationError`` if any required field is empty."""
        missing = tuple(
            name for name in REQUIRED_DRAFT_FIELDS if not _is_filled(getattr(self, name))
        )
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}", fields=missing)

    def to_article(self, article_id: int, date: str) -> Article:
        return Article(
            id=article_id,
            title=self.title,
            description=self.description,
            content=self.content,
            category=self.category,
            date=date,
            cover_image=self.cover_image,
        )

    def to_dict(self, date: str) -> dict[str, Any]:
        """Request body for creation, stamped with ``date``."""
        return {
            "title": self.title,
            "category": list(self.category),
            "description": self.description,
            "coverImage": self.cover_image,
            "content": self.content,
            "date": date,
        }


@dataclass(frozen=True)
class QueryResult:
    """Ordered view of the articles matching the current query."""

    articles: tuple[Article, ...] = ()
    total: int = 0

    @property
    def count(self) -> int:
        return len(self.articles)

    @property
    def summary(self) -> str:
        """Human-readable count, e.g. ``"3 of 12 articles"``."""
        if self.count == self.total:
            noun = "article" if self.total == 1 else "articles"
            return f"{self.total} {noun} available"
        return f"{self.count} of {self.total} articles"

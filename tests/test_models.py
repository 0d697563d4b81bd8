"""Tests for data models."""

import pytest

from blog_reader.data import Article, ArticleDraft, SortOrder
from blog_reader.errors import FetchError, ValidationError
from blog_reader.query.pipeline import run_query

PAYLOAD = {
    "id": 1,
    "title": "Future of Fintech",
    "category": ["FINANCE", "TECH"],
    "description": "Exploring AI in finance",
    "coverImage": "https://example.com/cover.jpg",
    "content": "Para one.\n\nPara two.",
    "date": "2026-01-11T09:12:45.678Z",
}


def test_sort_order_values() -> None:
    assert SortOrder("newest") is SortOrder.NEWEST
    assert SortOrder.OLDEST == "oldest"


# -- Article tests --


def test_article_from_dict() -> None:
    article = Article.from_dict(PAYLOAD)
    assert article.id == 1
    assert article.title == "Future of Fintech"
    assert article.category == ("FINANCE", "TECH")
    assert article.cover_image == "https://example.com/cover.jpg"
    assert article.date == "2026-01-11T09:12:45.678Z"


def test_article_round_trips_json_shape() -> None:
    assert Article.from_dict(PAYLOAD).to_dict() == PAYLOAD


def test_article_from_dict_string_id() -> None:
    assert Article.from_dict({**PAYLOAD, "id": "42"}).id == 42


def test_article_from_dict_optional_fields_default() -> None:
    article = Article.from_dict({"id": 3, "title": "Bare"})
    assert article.category == ()
    assert article.description == ""
    assert article.date == ""


@pytest.mark.parametrize(
    "payload",
    [
        [],
        "not an object",
        {"title": "No id"},
        {"id": 1},
        {"id": "abc", "title": "Bad id"},
        {"id": 1, "title": "Bad categories", "category": [1, 2]},
    ],
)
def test_article_from_dict_malformed(payload: object) -> None:
    with pytest.raises(FetchError):
        Article.from_dict(payload)


def test_article_is_immutable() -> None:
    article = Article.from_dict(PAYLOAD)
    with pytest.raises(AttributeError):
        article.title = "Changed"  # type: ignore[misc]


# -- ArticleDraft tests --


def test_draft_from_form_normalizes_categories() -> None:
    draft = ArticleDraft.from_form(
        title="T",
        category=" tech, finance ,,career ",
        description="D",
        cover_image="https://example.com/c.jpg",
        content="C",
    )
    assert draft.category == ("TECH", "FINANCE", "CAREER")
    draft.validate()


def test_draft_validate_lists_missing_fields() -> None:
    draft = ArticleDraft.from_form(
        title="  ",
        category=" , ",
        description="D",
        cover_image="",
        content="C",
    )
    with pytest.raises(ValidationError, match="title, category, cover_image") as exc_info:
        draft.validate()
    assert exc_info.value.fields == ("title", "category", "cover_image")


def test_validation_error_is_value_error() -> None:
    assert issubclass(ValidationError, ValueError)


def test_draft_to_article_and_body() -> None:
    draft = ArticleDraft(
        title="T",
        category=("TECH",),
        description="D",
        cover_image="img",
        content="C",
    )
    article = draft.to_article(9, "2026-02-01T00:00:00+00:00")
    assert article.id == 9
    assert article.category == ("TECH",)
    assert draft.to_dict("2026-02-01") == {
        "title": "T",
        "category": ["TECH"],
        "description": "D",
        "coverImage": "img",
        "content": "C",
        "date": "2026-02-01",
    }


def test_article_from_dict_null_title_is_empty() -> None:
    article = Article.from_dict({"id": 1, "title": None})
    assert article.title == ""
    assert run_query([article], term="none").count == 0

"""Shared fixtures for Blog Reader tests."""

from __future__ import annotations

import pytest

from blog_reader.data import Article
from tests.fakes import FakeLoop


@pytest.fixture
def fake_loop() -> FakeLoop:
    return FakeLoop()


@pytest.fixture
def two_articles() -> list[Article]:
    return [
        Article(id=1, title="Tax Tips", category=("FINANCE",), date="2024-01-01"),
        Article(id=2, title="React Basics", category=("TECH",), date="2024-02-01"),
    ]


@pytest.fixture
def blog_articles() -> list[Article]:
    """A small mixed collection, deliberately not in date order."""
    return [
        Article(
            id=1,
            title="Future of Fintech",
            description="How AI and blockchain reshape financial services",
            content="Fintech is changing money.\n\nSoftware sits at the centre of finance.",
            category=("FINANCE", "TECH", "CAREER"),
            date="2024-03-10T09:00:00Z",
        ),
        Article(
            id=2,
            title="How to Ace CA Exams",
            description="A study plan balancing theory and practice",
            content="Start with the syllabus.",
            category=("EDUCATION", "CAREER"),
            date="2024-01-15T12:00:00Z",
        ),
        Article(
            id=3,
            title="GST Filing Checklist",
            description="Prepare before the quarterly tax deadline",
            content="Reconcile invoices first.",
            category=("REGULATIONS", "FINANCE"),
            date="2024-05-01T08:30:00Z",
        ),
        Article(
            id=4,
            title="Remote Work Habits",
            description="Routines that keep distributed teams productive",
            content="Block focus time.",
            category=("LIFESTYLE",),
            date="2024-02-20T18:45:00+05:30",
        ),
    ]

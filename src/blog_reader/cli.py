"""CLI for browsing blog articles."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pydantic import BaseModel, field_validator

from blog_reader.config import create_from_config, get_default_config_path, load_config
from blog_reader.data import QueryResult, SortOrder
from blog_reader.display import ArticleView, format_relative_date
from blog_reader.errors import BlogReaderError

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    config: Path
    search: str = ""
    categories: list[str] = []
    sort: SortOrder | None = None
    article: int | None = None

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


def print_result(result: QueryResult) -> None:
    print(f"\n{result.summary}\n")
    for article in result.articles:
        labels = ", ".join(article.category)
        age = format_relative_date(article.date)
        print(f"[{article.id}] {age:>12}  {article.title}  ({labels})")


def print_article(view: ArticleView) -> None:
    article = view.article
    print(f"\n{article.title}")
    print(f"{view.published} · {view.read_time_minutes} min read · {', '.join(article.category)}")
    if article.description:
        print(f"\n{article.description}")
    for paragraph in view.paragraphs:
        print(f"\n{paragraph}")


async def run(args: CLIArgs) -> None:
    """List or show articles with the given configuration.

    Args:
        args: Validated CLI arguments.
    """
    config = load_config(args.config)
    logging.getLogger().setLevel(config.logging.level)
    _store, browser = create_from_config(config)

    with browser:
        if args.article is not None:
            print_article(await browser.open_article(args.article))
            return

        await browser.refresh()
        if args.sort is not None:
            browser.set_sort(args.sort)
        for category in dict.fromkeys(args.categories):
            browser.toggle_category(category)
        if args.search:
            browser.set_search_term(args.search)
            # Nothing else is typing, so apply the term without waiting
            browser.flush_search()

        print_result(browser.result)


def main(argv: list[str] | None = None) -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Search, filter and read blog articles.")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--search",
        "-s",
        default="",
        help="Case-insensitive text to find in titles and descriptions",
    )
    parser.add_argument(
        "--category",
        action="append",
        default=[],
        help="Only show articles in this category (repeatable)",
    )
    parser.add_argument(
        "--sort",
        choices=[s.value for s in SortOrder],
        default=None,
        help="Date order of the list (default: from config)",
    )
    parser.add_argument(
        "--article",
        type=int,
        default=None,
        help="Show the full article with this id instead of the list",
    )

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args(argv)
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            config=config_path,
            search=ns.search,
            categories=ns.category,
            sort=ns.sort,
            article=ns.article,
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        asyncio.run(run(args))
    except BlogReaderError as e:
        logger.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)

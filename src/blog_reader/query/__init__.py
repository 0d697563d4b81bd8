"""Client-side article query pipeline."""

from blog_reader.query.categories import category_index
from blog_reader.query.pipeline import QueryPipeline, parse_date, run_query
from blog_reader.query.reporter import ResultReporter
from blog_reader.query.state import QueryState

__all__ = [
    "QueryPipeline",
    "QueryState",
    "ResultReporter",
    "category_index",
    "parse_date",
    "run_query",
]

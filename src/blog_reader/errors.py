"""Exception hierarchy for Blog Reader."""


class BlogReaderError(Exception):
    """Base class for all Blog Reader errors."""


class FetchError(BlogReaderError):
    """The article store is unreachable or returned malformed data."""


class NotFoundError(FetchError):
    """The requested article does not exist."""

    def __init__(self, article_id: int) -> None:
        super().__init__(f"Article not found: {article_id}")
        self.article_id = article_id


class ValidationError(BlogReaderError, ValueError):
    """A draft or query input is missing required values."""

    def __init__(self, message: str, fields: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.fields = fields

"""Pydantic configuration models for Blog Reader components."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from blog_reader.data import SortOrder

# ============================================================
# Store Configs
# ============================================================


class HttpStoreConfig(BaseModel):
    """Configuration for HttpArticleStore."""

    type: Literal["http"] = "http"
    base_url: str = "http://localhost:3000"
    resource: str = "blogs"
    timeout: float = Field(default=30.0, gt=0)

    model_config = {"frozen": True}


class FileStoreConfig(BaseModel):
    """Configuration for an in-memory store seeded from a JSON file."""

    type: Literal["file"] = "file"
    path: str

    model_config = {"frozen": True}


StoreConfig = Annotated[
    HttpStoreConfig | FileStoreConfig,
    Field(discriminator="type"),
]


# ============================================================
# Query and Display Configs
# ============================================================


class QueryConfig(BaseModel):
    """Configuration for the article query pipeline."""

    debounce_ms: int = Field(default=300, ge=0)
    default_sort: SortOrder = SortOrder.NEWEST

    model_config = {"frozen": True}


class DisplayConfig(BaseModel):
    """Configuration for derived article metadata."""

    words_per_minute: int = Field(default=200, gt=0)

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for application logging."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class BlogReaderConfig(BaseModel):
    """Root configuration for Blog Reader."""

    store: StoreConfig = Field(default_factory=HttpStoreConfig)
    query: QueryConfig = Field(default_factory=QueryConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}

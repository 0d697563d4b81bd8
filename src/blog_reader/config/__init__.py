"""Configuration module for Blog Reader."""

from blog_reader.config.factory import create_from_config, create_store
from blog_reader.config.loader import get_default_config_path, load_config
from blog_reader.config.models import (
    BlogReaderConfig,
    DisplayConfig,
    FileStoreConfig,
    HttpStoreConfig,
    LoggingConfig,
    QueryConfig,
    StoreConfig,
)

__all__ = [
    "BlogReaderConfig",
    "DisplayConfig",
    "FileStoreConfig",
    "HttpStoreConfig",
    "LoggingConfig",
    "QueryConfig",
    "StoreConfig",
    "create_from_config",
    "create_store",
    "get_default_config_path",
    "load_config",
]

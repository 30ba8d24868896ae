"""Utility modules for the atomic CSS compiler."""

from .errors import (
    AtomicCSSError,
    ValidationError,
    ConfigurationError,
    InvalidValueError,
    IncludeError,
    ShorthandError,
    ManifestConflictError,
    UnknownPropertyError,
)
from .logging_config import setup_logging, get_logger
from .cache import LRUCache, cache_manager

__all__ = [
    "AtomicCSSError",
    "ValidationError",
    "ConfigurationError",
    "InvalidValueError",
    "IncludeError",
    "ShorthandError",
    "ManifestConflictError",
    "UnknownPropertyError",
    "setup_logging",
    "get_logger",
    "LRUCache",
    "cache_manager",
]

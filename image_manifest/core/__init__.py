"""Core business logic - scanning, titles, and manifest output."""

from .errors import (
    ConfigError,
    ManifestError,
    MissingInputDirectory,
    TraversalFailure,
    WriteFailure,
)
from .models import ImageRecord
from .scanner import ImageScanner
from .titles import prettify_title

__all__ = [
    "ConfigError",
    "ImageRecord",
    "ImageScanner",
    "ManifestError",
    "MissingInputDirectory",
    "TraversalFailure",
    "WriteFailure",
    "prettify_title",
]

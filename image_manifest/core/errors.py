"""Errors raised while building a manifest.

Every error is fatal for the run: the CLI reports it and exits non-zero.
"""

from pathlib import Path


class ManifestError(Exception):
    """Base class for manifest build failures."""

    def __init__(self, message: str, path: str | Path | None = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class MissingInputDirectory(ManifestError):
    """Raised when the image directory does not exist."""

    def __init__(self, path: str | Path):
        super().__init__(f"Image directory not found: {path}", path)


class TraversalFailure(ManifestError):
    """Raised when a directory under the image root cannot be listed."""

    def __init__(self, path: str | Path, reason: str):
        super().__init__(f"Could not read directory {path}: {reason}", path)


class WriteFailure(ManifestError):
    """Raised when the manifest cannot be serialized or written."""

    def __init__(self, path: str | Path, reason: str):
        super().__init__(f"Could not write manifest {path}: {reason}", path)


class ConfigError(ManifestError):
    """Raised for unusable configuration."""
    pass

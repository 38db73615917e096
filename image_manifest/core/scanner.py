"""Image discovery under a directory tree."""

import os
from pathlib import Path

from .errors import TraversalFailure


class ImageScanner:
    """Scans directories for image files."""

    IMAGE_EXTENSIONS = {".webp", ".avif", ".png", ".jpg", ".jpeg", ".gif", ".svg"}

    @classmethod
    def is_image(cls, filepath: str | Path) -> bool:
        """Check if a file is an image based on extension."""
        return Path(filepath).suffix.lower() in cls.IMAGE_EXTENSIONS

    @classmethod
    def walk(cls, path: str | Path) -> list[Path]:
        """
        Recursively list image files under a directory.

        Subdirectories are visited depth-first. Symlinked directories are
        not descended into. The order of the result is whatever the
        filesystem returns; callers sort it.

        Args:
            path: Directory to scan

        Returns:
            Absolute paths of every image file found

        Raises:
            TraversalFailure: if any directory in the tree cannot be listed
        """
        path = Path(path).absolute()
        try:
            with os.scandir(path) as it:
                entries = list(it)
        except OSError as e:
            raise TraversalFailure(path, e.strerror or str(e)) from e

        files: list[Path] = []
        for entry in entries:
            entry_path = path / entry.name
            if entry.is_dir(follow_symlinks=False):
                files.extend(cls.walk(entry_path))
            elif cls.is_image(entry.name):
                files.append(entry_path)
        return files

"""Manifest building: web paths, ordering, and the images.json file."""

import json
import os
from pathlib import Path

from ..config import ManifestConfig
from .errors import MissingInputDirectory, WriteFailure
from .models import ImageRecord
from .scanner import ImageScanner
from .titles import prettify_title


def clean_name(name: str) -> str:
    """Replace undecodable filename bytes with U+FFFD."""
    return os.fsencode(name).decode("utf-8", "replace")


def to_web_path(filepath: str | Path, root: str | Path) -> str:
    """Convert an absolute file path into a root-relative, forward-slash path."""
    relative = Path(filepath).relative_to(Path(root))
    return clean_name(relative.as_posix()).replace("\\", "/")


def collect_records(images_dir: str | Path, root: str | Path) -> list[ImageRecord]:
    """
    Scan the image directory and build records sorted by web path.

    Args:
        images_dir: Directory holding the images
        root: Directory the web paths are relative to

    Returns:
        One record per image, ordered by ``src``

    Raises:
        MissingInputDirectory: if images_dir does not exist
        TraversalFailure: if part of the tree cannot be read
    """
    images_dir = Path(images_dir).absolute()
    root = Path(root).absolute()
    if not images_dir.exists():
        raise MissingInputDirectory(images_dir)

    files = ImageScanner.walk(images_dir)

    # Sort by web path for stable output
    entries = sorted((to_web_path(p, root), p) for p in files)

    return [ImageRecord(src=web_path, title=prettify_title(clean_name(p.name))) for web_path, p in entries]


def render_manifest(records: list[ImageRecord]) -> str:
    """Serialize records as a 2-space indented JSON array."""
    return json.dumps([r.to_dict() for r in records], indent=2, ensure_ascii=False)


def write_manifest(records: list[ImageRecord], output: str | Path) -> None:
    """Write the manifest to output, replacing anything already there."""
    output = Path(output)
    try:
        # Encode before opening so a failure leaves the old file intact
        data = render_manifest(records).encode("utf-8")
        output.write_bytes(data)
    except (OSError, TypeError, ValueError) as e:
        raise WriteFailure(output, str(e)) from e


def load_manifest(manifest_path: str | Path) -> list[ImageRecord]:
    """Load a previously written manifest."""
    with open(manifest_path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return [ImageRecord.from_dict(item) for item in data]


def build_manifest(config: ManifestConfig) -> list[ImageRecord]:
    """
    Run the whole pipeline for a configuration and write the output file.

    Nothing is written unless the scan completes.

    Returns:
        The records written
    """
    config.validate()
    records = collect_records(config.images_dir, config.root)
    write_manifest(records, config.output)
    return records

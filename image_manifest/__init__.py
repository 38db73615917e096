"""Image Manifest - index an images/ folder as images.json.

Package structure:
    image_manifest/
    ├── cli.py              # Command-line interface
    ├── config.py           # Root/output settings (flags, YAML, env)
    └── core/               # Core business logic
        ├── models.py       # Data models (ImageRecord)
        ├── errors.py       # Fatal build errors
        ├── scanner.py      # Recursive image discovery
        ├── titles.py       # Filename -> title
        └── manifest.py     # Web paths, ordering, JSON output
"""

from .core.models import ImageRecord
from .core.scanner import ImageScanner
from .core.titles import prettify_title
from .core.errors import (
    ConfigError,
    ManifestError,
    MissingInputDirectory,
    TraversalFailure,
    WriteFailure,
)
from .core.manifest import (
    build_manifest,
    collect_records,
    load_manifest,
    render_manifest,
    to_web_path,
    write_manifest,
)
from .config import ManifestConfig, load_config, resolve_config

__all__ = [
    # Core
    "ImageRecord",
    "ImageScanner",
    "prettify_title",
    # Errors
    "ConfigError",
    "ManifestError",
    "MissingInputDirectory",
    "TraversalFailure",
    "WriteFailure",
    # Manifest
    "build_manifest",
    "collect_records",
    "load_manifest",
    "render_manifest",
    "to_web_path",
    "write_manifest",
    # Config
    "ManifestConfig",
    "load_config",
    "resolve_config",
]

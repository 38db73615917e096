"""Configuration for a manifest build.

Environment variables:
    IMAGE_MANIFEST_ROOT: Project root to use when --root is not given
        (default: current working directory)
"""

import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from .core.errors import ConfigError

IMAGES_DIRNAME = "images"
OUTPUT_FILENAME = "images.json"
ROOT_ENV_VAR = "IMAGE_MANIFEST_ROOT"

CONFIG_KEYS = {"root", "images_dir", "output"}


@dataclass
class ManifestConfig:
    """Where to read images from and where to write the manifest."""

    root: Path
    images_dir: Path
    output: Path

    @classmethod
    def from_root(cls, root: str | Path | None = None) -> "ManifestConfig":
        """Default layout: <root>/images scanned into <root>/images.json."""
        root = Path(root if root is not None else Path.cwd()).absolute()
        return cls(
            root=root,
            images_dir=root / IMAGES_DIRNAME,
            output=root / OUTPUT_FILENAME,
        )

    def validate(self) -> None:
        """Check that web paths can be computed for the image directory."""
        try:
            self.images_dir.absolute().relative_to(self.root.absolute())
        except ValueError:
            raise ConfigError(
                f"Image directory {self.images_dir} is not inside root {self.root}"
            )


def load_config(config_path: str | Path, root: str | Path | None = None) -> ManifestConfig:
    """
    Load configuration from a YAML file.

    Recognized keys are ``root``, ``images_dir`` and ``output``. Relative
    ``images_dir`` and ``output`` values are resolved against the root.
    A root passed in explicitly wins over the one in the file.
    """
    path = Path(config_path)
    try:
        with open(path) as f:
            config = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Could not read config file {path}: {e.strerror or e}", path) from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {path}: {e}", path) from e

    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}", path)

    unknown = set(config) - CONFIG_KEYS
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {', '.join(sorted(str(k) for k in unknown))}", path)

    if root is None:
        root = config.get("root") or os.environ.get(ROOT_ENV_VAR) or None
        if root is not None:
            root = str(root)
    result = ManifestConfig.from_root(root)

    if config.get("images_dir"):
        result.images_dir = result.root / str(config["images_dir"])
    if config.get("output"):
        result.output = result.root / str(config["output"])

    return result


def resolve_config(
    root: str | Path | None = None,
    config_path: str | Path | None = None,
) -> ManifestConfig:
    """
    Build the configuration for a run.

    Precedence for the root: explicit argument, then the config file,
    then IMAGE_MANIFEST_ROOT, then the working directory.
    """
    if config_path is not None:
        return load_config(config_path, root=root)
    if root is None:
        root = os.environ.get(ROOT_ENV_VAR) or None
    return ManifestConfig.from_root(root)

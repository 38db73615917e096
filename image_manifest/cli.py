"""Command-line interface for building images.json.

Environment variables:
    IMAGE_MANIFEST_ROOT: Project root to scan (default: current directory)
"""

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from .config import resolve_config
from .core.errors import ManifestError, MissingInputDirectory
from .core.manifest import build_manifest


def build(args) -> int:
    """Scan the image directory and write the manifest."""
    try:
        config = resolve_config(root=args.root, config_path=args.config)
        records = build_manifest(config)
    except MissingInputDirectory as e:
        print(
            f"No {e.path.name}/ folder found. Create {e.path.name}/ and put your icons there.",
            file=sys.stderr,
        )
        return 1
    except ManifestError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Wrote {len(records)} items to {config.output.name}.")
    return 0


def main(argv: list[str] | None = None) -> int:
    load_dotenv(Path.cwd() / ".env")
    parser = argparse.ArgumentParser(
        description="Scan images/ recursively and write images.json for web front-ends",
        epilog="Environment variables: IMAGE_MANIFEST_ROOT",
    )
    parser.add_argument(
        "--root", "-r",
        default=None,
        help="Project root containing images/ (default: current directory)"
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="YAML file with root, images_dir and output settings"
    )

    args = parser.parse_args(argv)
    return build(args)


if __name__ == "__main__":
    sys.exit(main())

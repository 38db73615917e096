"""Shared fixtures for manifest tests."""

import os
import sys
from pathlib import Path

import pytest

from image_manifest.config import ROOT_ENV_VAR


def touch(path: Path, content: bytes = b"") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
    return path


@pytest.fixture
def site(tmp_path):
    """A project root with a small images/ tree."""
    images = tmp_path / "images"
    touch(images / "my_icon-file.png")
    touch(images / "ICON.PNG")
    touch(images / "notes.txt")
    touch(images / "sub" / "dir" / "x.webp")
    touch(images / "sub" / "a.b.c.jpg")
    touch(images / "zeta.svg")
    return tmp_path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a root from the developer's shell out of the tests.

    Setting before deleting makes monkeypatch undo anything a .env file
    loads during the test.
    """
    monkeypatch.setenv(ROOT_ENV_VAR, "")
    monkeypatch.delenv(ROOT_ENV_VAR)


@pytest.fixture
def undecodable_name():
    """A filename holding a byte that is not valid UTF-8."""
    if os.name != "posix" or sys.platform == "darwin":
        pytest.skip("filesystem requires valid unicode filenames")
    return os.fsdecode(b"caf\xe9.png")

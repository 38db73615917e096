"""Filename to display-title conversion."""

import re

_EXTENSION = re.compile(r"\.[^.]+$")
_SEPARATORS = re.compile(r"[_-]+")
_WHITESPACE = re.compile(r"\s+")
# A word starts at a letter not preceded by a word character or a dot.
_WORD_START = re.compile(r"(?<![\w.])([^\W\d_])")


def strip_extension(filename: str) -> str:
    """Remove the final extension, if any (``a.b.c.jpg`` -> ``a.b.c``)."""
    return _EXTENSION.sub("", filename)


def prettify_title(filename: str) -> str:
    """
    Turn an image filename into a human-readable title.

    Underscores and dashes become spaces, whitespace is collapsed and
    trimmed, and the first letter of every word is uppercased. Letters
    that are already uppercase are left alone.

    Examples:
        >>> prettify_title("my_icon-file.png")
        'My Icon File'
        >>> prettify_title("a.b.c.jpg")
        'A.b.c'
        >>> prettify_title("___.gif")
        ''
    """
    base = strip_extension(filename)
    base = _SEPARATORS.sub(" ", base)
    base = _WHITESPACE.sub(" ", base).strip()
    return _WORD_START.sub(lambda m: m.group(1).upper(), base)

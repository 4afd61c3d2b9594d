"""Front-matter splitting for EIP markdown files.

An EIP starts with a header block fenced by ``---`` lines::

    ---
    eip: 1234
    title: Example
    author: Alice (@alice), Bob <bob@example.com>
    status: Draft
    ---

The block is YAML, but it is loaded with ``yaml.BaseLoader`` so that every
scalar stays the exact string written in the file: ``eip: 0001`` must not
become the integer 1 and ``status: Yes`` must not become ``True``.
"""

from __future__ import annotations

import re

import yaml

from eipdiff_core.errors import HeaderParseError
from eipdiff_core.models import FrontMatter

# Opening fence on the first line (optionally after a BOM); closing fence is
# either "---" or YAML's document-end marker "...".
_FRONT_MATTER_RE = re.compile(
    r"\A\ufeff?---[ \t]*\r?\n(?P<header>.*?)^(?:---|\.\.\.)[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)


def parse_front_matter(text: str, filename: str = "") -> FrontMatter:
    """Split ``text`` into its header attributes and body.

    Text without a header yields empty attributes and the whole text as body.
    """
    match = _FRONT_MATTER_RE.match(text)
    if not match:
        return FrontMatter(attributes={}, body=text)

    try:
        attributes = yaml.load(match.group("header"), Loader=yaml.BaseLoader) or {}
    except yaml.YAMLError as e:
        raise HeaderParseError(filename, str(e)) from e

    if not isinstance(attributes, dict):
        raise HeaderParseError(filename, f"expected a mapping, got {type(attributes).__name__}")

    return FrontMatter(attributes=attributes, body=text[match.end() :])

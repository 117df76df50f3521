"""Block extraction and header field lookups for Group-structured text."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator

from m2json.formats.schemas import Category

# "Group <name>" on its own line, then a line holding only "{", then
# everything up to the first "}". Bodies cannot nest braces.
_BLOCK_RE = re.compile(
    r"^[ \t]*Group[ \t]+(?P<name>[^\n]*)\n[ \t]*\{[ \t]*\n(?P<body>[^}]*)\}",
    re.IGNORECASE | re.MULTILINE,
)

_IDENTIFIER_RE = re.compile(r"^[ \t]*Vnum\t+([A-Za-z0-9]+)", re.IGNORECASE | re.MULTILINE)
_LEADER_RE = re.compile(r"^[ \t]*Leader\t+[^\n]*?\t+([0-9]+)[ \t]*$", re.IGNORECASE | re.MULTILINE)
_CATEGORY_RE = re.compile(r"^[ \t]*Type\t+([A-Za-z]+)", re.IGNORECASE | re.MULTILINE)
_EFFECT_RE = re.compile(r'^[ \t]*Effect\t+"([^"\n]*)"', re.IGNORECASE | re.MULTILINE)

CATEGORY_TAGS: dict[str, Category] = {
    "pct": Category.PERCENTAGE,
    "special": Category.SPECIAL,
    "attr": Category.ATTRIBUTE,
    "quest": Category.QUEST,
}


@dataclass(frozen=True)
class Block:
    """A named, brace-delimited section of the input."""

    name: str
    body: str


def extract_blocks(raw_text: str) -> Iterator[Block]:
    """Yield every Group block of the input in order.

    Args:
        raw_text: Full contents of a Group-structured text file.

    Yields:
        Blocks with trimmed names. Headers whose name is blank are skipped.
    """
    text = raw_text.replace("\r\n", "\n")
    for match in _BLOCK_RE.finditer(text):
        name = match.group("name").strip()
        if not name:
            continue
        yield Block(name=name, body=match.group("body"))


def find_identifier(body: str) -> str | None:
    """Return the raw Vnum value, still as text."""
    match = _IDENTIFIER_RE.search(body)
    return match.group(1) if match else None


def find_leader(body: str) -> int | None:
    """Return the leader vnum from a ``Leader "name" <vnum>`` line."""
    match = _LEADER_RE.search(body)
    return int(match.group(1)) if match else None


def find_category(body: str) -> Category:
    """Return the block category from its Type tag, defaulting to normal."""
    match = _CATEGORY_RE.search(body)
    if not match:
        return Category.NORMAL
    return CATEGORY_TAGS.get(match.group(1).lower(), Category.NORMAL)


def find_effect(body: str) -> str | None:
    """Return the quoted Effect path, or None when absent or empty."""
    match = _EFFECT_RE.search(body)
    if not match or not match.group(1):
        return None
    return match.group(1)


def coerce_identifier(value: str | None) -> int | None:
    """Convert a raw Vnum to an integer, treating non-numeric text as absent."""
    if value is None or not value.isdigit():
        return None
    return int(value)

"""Row tokenizers for the tab-separated tuple lines inside a block body.

Each tokenizer matches one fixed line shape. A row starts at the beginning
of a line or right after a tab, so leading label text such as ``Item<TAB>`` is
skipped rather than parsed. Matches never cross a line break.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, NamedTuple

from m2json.formats.schemas import SymbolicReference

_ROW_START = r"(?:^|(?<=\t))[ ]*"
_ROW_END = r"(?=[ \t]|$)"
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class LineTokenizer:
    """A named line-shape grammar over a block body."""

    name: str
    pattern: re.Pattern[str]

    def scan(self, body: str) -> Iterator[re.Match[str]]:
        """Return a lazy, single-pass iterator over matching lines."""
        return self.pattern.finditer(body)


GROUP_ENTRY = LineTokenizer(
    "group-entry",
    re.compile(_ROW_START + r"([0-9]+)\t[^\n]*\t([0-9]+)[ \t]*$", re.MULTILINE),
)
GROUP_GRAPH = LineTokenizer(
    "group-graph",
    re.compile(_ROW_START + r"([0-9]+)\t([0-9]+)\t([0-9]+)" + _ROW_END, re.MULTILINE),
)
COMMON_ROW = LineTokenizer(
    "common-row",
    re.compile(
        _ROW_START
        + r"([0-9]+)\t([^\t\n]+)\t([0-9]+)(?:\t([0-9]+))?(?:\t([0-9]+))?"
        + _ROW_END,
        re.MULTILINE,
    ),
)
ATTRIBUTE_ROW = LineTokenizer(
    "attribute-row",
    re.compile(_ROW_START + r"([0-9]+)\t([0-9]+)(?:\t([0-9]+))?" + _ROW_END, re.MULTILINE),
)


class CommonRowMatch(NamedTuple):
    raw_id: int
    reference_token: str
    count: int
    probability: int
    rare_percentage: int


class AttributeRowMatch(NamedTuple):
    row_index: int
    apply_type: int
    apply_value: int | None


class InvalidReferenceError(ValueError):
    """Raised when a reference column is neither a vnum nor a known keyword."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid reference {token!r}")
        self.token = token


# Korean labels come from the stock server data files.
REFERENCE_ALIASES: dict[str, SymbolicReference] = {
    "경험치": "exp",
    "exp": "exp",
    "돈꾸러미": "gold",
    "gold": "gold",
    "group": "group",
    "poison": "poison",
    "mob": "mob",
    "slow": "slow",
    "drain_hp": "drain_hp",
}


def iter_group_entries(body: str) -> Iterator[tuple[int, int]]:
    """Yield ``(order, member_vnum)`` pairs from group member lines."""
    for match in GROUP_ENTRY.scan(body):
        yield int(match.group(1)), int(match.group(2))


def iter_group_graph_entries(body: str) -> Iterator[tuple[int, int, int]]:
    """Yield three-integer rows used by group_group.txt style blocks."""
    for match in GROUP_GRAPH.scan(body):
        yield int(match.group(1)), int(match.group(2)), int(match.group(3))


def iter_common_rows(body: str) -> Iterator[CommonRowMatch]:
    """Yield drop entry rows. Missing probability columns default to 0."""
    for match in COMMON_ROW.scan(body):
        yield CommonRowMatch(
            raw_id=int(match.group(1)),
            reference_token=match.group(2).strip(),
            count=int(match.group(3)),
            probability=int(match.group(4) or 0),
            rare_percentage=int(match.group(5) or 0),
        )


def iter_attribute_rows(body: str) -> Iterator[AttributeRowMatch]:
    """Yield apply rows; ``apply_value`` is None when the line has two columns."""
    for match in ATTRIBUTE_ROW.scan(body):
        value = match.group(3)
        yield AttributeRowMatch(
            row_index=int(match.group(1)),
            apply_type=int(match.group(2)),
            apply_value=int(value) if value is not None else None,
        )


def coerce_reference(token: str) -> int | SymbolicReference:
    """Classify the reference column of a drop entry.

    Args:
        token: Raw text of the second column.

    Returns:
        An item/mob vnum, or one of the symbolic keywords.

    Raises:
        InvalidReferenceError: If the token is not a keyword and does not
            coerce to a non-zero integer.
    """
    token = token.strip()
    if token in REFERENCE_ALIASES:
        return REFERENCE_ALIASES[token]
    # Plain ASCII digits only: no digit separators, no other scripts.
    if not _INTEGER_RE.fullmatch(token):
        raise InvalidReferenceError(token)

    reference = int(token)
    if not reference:
        raise InvalidReferenceError(token)
    return reference

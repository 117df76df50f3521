"""Apply type name resolution from pasted server source fragments.

Two inputs are scanned independently:

- an enumerator listing such as the ``EApplyTypes`` enum, where each
  ``APPLY_X,`` line takes the next index and ``APPLY_X = 59,`` or
  ``APPLY_X, // 59`` resets the running index. A non-numeric initializer
  such as ``APPLY_X = APPLY_Y,`` leaves the index running;
- a name table of ``{"Display Name", APPLY_X},`` lines.

Composing both turns a numeric apply code into its display name.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

_ENUMERATOR_RE = re.compile(
    r"^[ \t]*(?P<name>[A-Z_][A-Z0-9_]*)[ \t]*"
    r"(?:=[ \t]*(?:(?P<value>[0-9]+)|[^,/\n]+?)[ \t]*)?,?[ \t]*"
    r"(?://[ \t]*(?P<comment>[0-9]+)?[^\n]*)?$",
    re.MULTILINE,
)
_DISPLAY_NAME_RE = re.compile(
    r'^[ \t]*\{?[ \t]*"(?P<display>[^"\n]*)"[ \t]*,[ \t]*(?P<name>[A-Za-z_][A-Za-z0-9_]*)',
    re.MULTILINE,
)


@dataclass
class ApplyTypeMap:
    """Two-stage lookup from apply code to display name."""

    index_to_name: dict[int, str] = field(default_factory=dict)
    name_to_display: dict[str, str] = field(default_factory=dict)

    def resolve(self, code: int) -> str | None:
        """Return the display name for an apply code, or None if any link is missing."""
        name = self.index_to_name.get(code)
        if name is None:
            return None
        return self.name_to_display.get(name)

    def entries(self) -> list[tuple[int, str, str | None]]:
        """List ``(index, constant, display name)`` triples in index order."""
        return [
            (index, name, self.name_to_display.get(name))
            for index, name in sorted(self.index_to_name.items())
        ]


def parse_apply_indices(applies: str) -> dict[int, str]:
    """Number the enumerators of an apply type listing."""
    mapping: dict[int, str] = {}
    index = 0
    for match in _ENUMERATOR_RE.finditer(applies.replace("\r", "")):
        explicit = match.group("value") or match.group("comment")
        if explicit is not None:
            index = int(explicit)
        mapping[index] = match.group("name")
        index += 1
    return mapping


def parse_apply_display_names(apply_type_names: str) -> dict[str, str]:
    """Map apply constants to the display names of a name table."""
    return {
        match.group("name"): match.group("display")
        for match in _DISPLAY_NAME_RE.finditer(apply_type_names.replace("\r", ""))
    }


def build_apply_maps(applies: str, apply_type_names: str) -> ApplyTypeMap:
    """Build the apply code lookup from both pasted fragments.

    Args:
        applies: Enumerator listing of apply constants.
        apply_type_names: ``{"Display", CONSTANT}`` name table.

    Returns:
        ApplyTypeMap composing index -> constant -> display name.
    """
    apply_map = ApplyTypeMap(
        index_to_name=parse_apply_indices(applies),
        name_to_display=parse_apply_display_names(apply_type_names),
    )
    logger.debug(
        "Built apply map with %d indices and %d display names",
        len(apply_map.index_to_name),
        len(apply_map.name_to_display),
    )
    return apply_map

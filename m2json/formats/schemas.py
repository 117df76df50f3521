"""Output document data structures for the supported file formats."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal, Union

GROUP_SCHEMA_URL = (
    "https://raw.githubusercontent.com/WildEgo/m2-json-schemas/refs/heads/main/group.json"
)
SPECIAL_ITEM_GROUP_SCHEMA_URL = (
    "https://raw.githubusercontent.com/WildEgo/m2-json-schemas/refs/heads/main/special_item_group.json"
)

SymbolicReference = Literal["exp", "gold", "mob", "slow", "drain_hp", "poison", "group"]


class Category(Enum):
    """Row variant selected by a block's Type tag."""

    NORMAL = "normal"
    PERCENTAGE = "percentage"
    QUEST = "quest"
    SPECIAL = "special"
    ATTRIBUTE = "attribute"


@dataclass
class GroupRow:
    """A monster group from group.txt."""

    identifier: int
    name: str
    leader_identifier: int
    member_identifiers: list[int] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the group.json row shape."""
        return {
            "vnum": self.identifier,
            "name": self.name,
            "leader": self.leader_identifier,
            "mobs": list(self.member_identifiers),
        }


@dataclass
class GroupDocument:
    """Document written as group.json."""

    rows: list[GroupRow] = field(default_factory=list)
    schema: str = GROUP_SCHEMA_URL

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "$schema": self.schema,
            "rows": [row.to_dict() for row in self.rows],
        }


@dataclass
class CommonRowItem:
    """A drop entry of a normal, percentage, quest or special block."""

    reference: int | SymbolicReference
    count: int
    probability: int = 0
    rare_percentage: int = 0
    sockets: list[int] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the special_item_group.json item shape."""
        data: dict[str, Any] = {
            "vnum": self.reference,
            "count": self.count,
            "probability": self.probability,
            "rare_percentage": self.rare_percentage,
        }
        if self.sockets is not None:
            data["sockets"] = list(self.sockets)
        return data


@dataclass
class AttributeRowItem:
    """An apply entry of an attribute block."""

    apply_type: int | str
    apply_value: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to the special_item_group.json attribute shape."""
        return {
            "apply_type": self.apply_type,
            "apply_value": self.apply_value,
        }


@dataclass
class CommonItemGroupRow:
    """Special item group block holding drop entries."""

    name: str
    identifier: int
    category: Literal[Category.NORMAL, Category.PERCENTAGE, Category.QUEST, Category.SPECIAL]
    rows: list[CommonRowItem] = field(default_factory=list)
    effect: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the special_item_group.json row shape."""
        return {
            "name": self.name,
            "type": self.category.value,
            "vnum": self.identifier,
            "effect": self.effect,
            "rows": [item.to_dict() for item in self.rows],
        }


@dataclass
class AttributeItemGroupRow:
    """Special item group block holding apply entries."""

    name: str
    identifier: int
    rows: list[AttributeRowItem] = field(default_factory=list)
    effect: str | None = None
    category: Literal[Category.ATTRIBUTE] = Category.ATTRIBUTE

    def to_dict(self) -> dict[str, Any]:
        """Convert to the special_item_group.json row shape."""
        return {
            "name": self.name,
            "type": self.category.value,
            "vnum": self.identifier,
            "effect": self.effect,
            "rows": [item.to_dict() for item in self.rows],
        }


SpecialItemGroupRow = Union[CommonItemGroupRow, AttributeItemGroupRow]


@dataclass
class SpecialItemGroupDocument:
    """Document written as special_item_group.json."""

    rows: list[SpecialItemGroupRow] = field(default_factory=list)
    schema: str = SPECIAL_ITEM_GROUP_SCHEMA_URL

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "$schema": self.schema,
            "rows": [row.to_dict() for row in self.rows],
        }


@dataclass
class ParseIssue:
    """A non-fatal problem found while converting one block."""

    block: str
    reason: str | None = None

    def __str__(self) -> str:
        if self.reason:
            return f"{self.block} - {self.reason}"
        return self.block

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"block": self.block, "reason": self.reason, "message": str(self)}


Document = Union[GroupDocument, SpecialItemGroupDocument]


@dataclass
class ParseResult:
    """Document produced by a parser together with the issues it recorded."""

    document: Document
    issues: list[ParseIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[str]:
        """Issues rendered as "<block name> - <reason>" strings."""
        return [str(issue) for issue in self.issues]

    @property
    def passed(self) -> bool:
        """Check if every block converted cleanly."""
        return not self.issues

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "document": self.document.to_dict(),
            "passed": self.passed,
            "errors": self.errors,
        }

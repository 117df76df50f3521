"""Parsers turning group.txt and special_item_group.txt text into documents."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import assert_never

from m2json.formats.applies import ApplyTypeMap, build_apply_maps
from m2json.formats.blocks import (
    Block,
    coerce_identifier,
    extract_blocks,
    find_category,
    find_effect,
    find_identifier,
    find_leader,
)
from m2json.formats.schemas import (
    AttributeItemGroupRow,
    AttributeRowItem,
    Category,
    CommonItemGroupRow,
    CommonRowItem,
    GroupDocument,
    GroupRow,
    ParseIssue,
    ParseResult,
    SpecialItemGroupDocument,
    SpecialItemGroupRow,
)
from m2json.formats.tokenizers import (
    InvalidReferenceError,
    coerce_reference,
    iter_attribute_rows,
    iter_common_rows,
    iter_group_entries,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ApplyResolution:
    """Pasted source fragments used to name apply types."""

    applies: str
    apply_type_names: str


class GroupParser:
    """Parser for monster group files (group.txt)."""

    def parse(self, raw_text: str) -> ParseResult:
        """Parse every Group block of a group.txt file.

        Args:
            raw_text: File contents.

        Returns:
            ParseResult with a GroupDocument. Blocks missing their Vnum or
            Leader are reported and left out of the document.
        """
        document = GroupDocument()
        issues: list[ParseIssue] = []

        for block in extract_blocks(raw_text):
            row = self._parse_block(block, issues)
            if row is not None:
                document.rows.append(row)

        logger.debug("Parsed %d group rows with %d issues", len(document.rows), len(issues))
        return ParseResult(document=document, issues=issues)

    def _parse_block(self, block: Block, issues: list[ParseIssue]) -> GroupRow | None:
        identifier = coerce_identifier(find_identifier(block.body))
        if identifier is None:
            issues.append(ParseIssue(block.name, "Missing vnum"))
            return None

        leader = find_leader(block.body)
        if leader is None:
            issues.append(ParseIssue(block.name, "Missing leader"))
            return None

        return GroupRow(
            identifier=identifier,
            name=block.name,
            leader_identifier=leader,
            member_identifiers=[member for _, member in iter_group_entries(block.body)],
        )


class SpecialItemGroupParser:
    """Parser for special item group files (special_item_group.txt).

    Drop entry blocks (normal, percentage, quest, special) stop at the first
    invalid reference and are emitted without any rows. Attribute blocks skip
    only the offending row and keep the rest.
    """

    def __init__(self, apply_map: ApplyTypeMap | None = None) -> None:
        """Initialize parser.

        Args:
            apply_map: When given, attribute apply codes are replaced by their
                display names and unknown codes are reported.
        """
        self.apply_map = apply_map

    def parse(self, raw_text: str) -> ParseResult:
        """Parse every Group block of a special_item_group.txt file."""
        document = SpecialItemGroupDocument()
        issues: list[ParseIssue] = []

        for block in extract_blocks(raw_text):
            row = self._parse_block(block, issues)
            if row is not None:
                document.rows.append(row)

        logger.debug(
            "Parsed %d special item group rows with %d issues", len(document.rows), len(issues)
        )
        return ParseResult(document=document, issues=issues)

    def _parse_block(self, block: Block, issues: list[ParseIssue]) -> SpecialItemGroupRow | None:
        raw_identifier = find_identifier(block.body)
        identifier = coerce_identifier(raw_identifier)
        if identifier is None:
            reason = f"Invalid vnum {raw_identifier}" if raw_identifier else "Missing vnum"
            issues.append(ParseIssue(block.name, reason))
            return None

        category = find_category(block.body)
        effect = find_effect(block.body)

        if category is Category.ATTRIBUTE:
            return AttributeItemGroupRow(
                name=block.name,
                identifier=identifier,
                rows=self._parse_attribute_rows(block, issues),
                effect=effect,
            )
        elif (
            category is Category.NORMAL
            or category is Category.PERCENTAGE
            or category is Category.QUEST
            or category is Category.SPECIAL
        ):
            return CommonItemGroupRow(
                name=block.name,
                identifier=identifier,
                category=category,
                rows=self._parse_common_rows(block, issues),
                effect=effect,
            )
        else:
            assert_never(category)

    def _parse_common_rows(
        self, block: Block, issues: list[ParseIssue]
    ) -> list[CommonRowItem]:
        items: list[CommonRowItem] = []
        for row in iter_common_rows(block.body):
            try:
                reference = coerce_reference(row.reference_token)
            except InvalidReferenceError as e:
                issues.append(ParseIssue(block.name, f"{e} on row {row.raw_id}"))
                logger.debug("Discarding rows of block '%s' at row %d", block.name, row.raw_id)
                return []

            items.append(
                CommonRowItem(
                    reference=reference,
                    count=row.count,
                    probability=row.probability,
                    rare_percentage=row.rare_percentage,
                )
            )
        return items

    def _parse_attribute_rows(
        self, block: Block, issues: list[ParseIssue]
    ) -> list[AttributeRowItem]:
        items: list[AttributeRowItem] = []
        for row in iter_attribute_rows(block.body):
            if row.apply_value is None:
                issues.append(ParseIssue(block.name, f"Broken attribute on row {row.row_index}"))
                continue

            apply_type: int | str = row.apply_type
            if self.apply_map is not None:
                apply_name = self.apply_map.resolve(row.apply_type)
                if apply_name is None:
                    issues.append(
                        ParseIssue(
                            block.name,
                            f"Unknown apply type {row.apply_type} on row {row.row_index}",
                        )
                    )
                    continue
                apply_type = apply_name

            items.append(AttributeRowItem(apply_type=apply_type, apply_value=row.apply_value))
        return items


def parse_groups(raw_text: str) -> tuple[GroupDocument, list[str]]:
    """Convert group.txt text into a group.json document and error list."""
    result = GroupParser().parse(raw_text)
    return result.document, result.errors


def parse_special_item_groups(
    raw_text: str, apply_resolution: ApplyResolution | None = None
) -> tuple[SpecialItemGroupDocument, list[str]]:
    """Convert special_item_group.txt text into a document and error list.

    Args:
        raw_text: File contents.
        apply_resolution: Optional apply enum listing and name table; when
            given, attribute apply codes are emitted as display names.

    Returns:
        Tuple of (document, errors).
    """
    apply_map = None
    if apply_resolution is not None:
        apply_map = build_apply_maps(
            apply_resolution.applies, apply_resolution.apply_type_names
        )
    result = SpecialItemGroupParser(apply_map).parse(raw_text)
    return result.document, result.errors

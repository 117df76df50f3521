"""Text format parsing and output document structures."""

from m2json.formats.schemas import (
    GROUP_SCHEMA_URL,
    SPECIAL_ITEM_GROUP_SCHEMA_URL,
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
from m2json.formats.blocks import Block, extract_blocks
from m2json.formats.applies import ApplyTypeMap, build_apply_maps
from m2json.formats.parser import (
    ApplyResolution,
    GroupParser,
    SpecialItemGroupParser,
    parse_groups,
    parse_special_item_groups,
)

__all__ = [
    "GROUP_SCHEMA_URL",
    "SPECIAL_ITEM_GROUP_SCHEMA_URL",
    "ApplyResolution",
    "ApplyTypeMap",
    "AttributeItemGroupRow",
    "AttributeRowItem",
    "Block",
    "Category",
    "CommonItemGroupRow",
    "CommonRowItem",
    "GroupDocument",
    "GroupParser",
    "GroupRow",
    "ParseIssue",
    "ParseResult",
    "SpecialItemGroupDocument",
    "SpecialItemGroupParser",
    "SpecialItemGroupRow",
    "build_apply_maps",
    "extract_blocks",
    "parse_groups",
    "parse_special_item_groups",
]

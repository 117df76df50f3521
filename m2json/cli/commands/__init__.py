"""CLI commands for m2json."""

from m2json.cli.commands.applies import applies
from m2json.cli.commands.group import group
from m2json.cli.commands.init import init
from m2json.cli.commands.special_item_group import special_item_group

__all__ = [
    "applies",
    "group",
    "init",
    "special_item_group",
]

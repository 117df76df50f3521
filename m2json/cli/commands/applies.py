"""Applies command for inspecting apply type name resolution."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from m2json.cli.output import console, dump_document, read_text
from m2json.formats.applies import build_apply_maps

# The listing is the command's result, so it goes to stdout like --json.
listing = Console()


@click.command("applies")
@click.argument("applies_file", metavar="APPLIES")
@click.argument("names_file", metavar="APPLY_NAMES")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def applies(applies_file: str, names_file: str, output_json: bool) -> None:
    """Show how apply codes resolve to display names.

    APPLIES is the apply type enum listing, APPLY_NAMES the display name table.
    """
    apply_map = build_apply_maps(read_text(applies_file, "utf-8"), read_text(names_file, "utf-8"))
    entries = apply_map.entries()

    if output_json:
        click.echo(
            dump_document(
                [{"index": i, "constant": c, "name": n} for i, c, n in entries],
                indent=2,
            )
        )
        return

    table = Table(title="Apply Types", show_header=True)
    table.add_column("Index", justify="right", style="cyan")
    table.add_column("Constant")
    table.add_column("Name")

    for index, constant, name in entries:
        table.add_row(
            str(index),
            constant,
            Text(name) if name is not None else Text("unresolved", style="red"),
        )

    listing.print(table)

    unresolved = sum(1 for _, _, name in entries if name is None)
    if unresolved:
        console.print(f"[yellow]{unresolved} apply type(s) have no display name[/yellow]")

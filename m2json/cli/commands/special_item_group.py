"""Special item group command for converting special_item_group.txt."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click
from rich.table import Table
from rich.text import Text

from m2json.cli.output import console, finish, print_errors, read_text, write_document
from m2json.config import load_settings
from m2json.formats.applies import build_apply_maps
from m2json.formats.parser import SpecialItemGroupParser


@click.command("special-item-group")
@click.argument("input_file", metavar="INPUT")
@click.option("-o", "--output", default=None, help="Output file (default: stdout)")
@click.option("--applies", "applies_path", default=None, help="Apply type enum listing")
@click.option("--apply-names", "apply_names_path", default=None, help="Apply display name table")
@click.option(
    "--resolve/--no-resolve",
    default=None,
    help="Emit apply names instead of codes (default: when both apply files are known)",
)
@click.option("--config", "config_path", default=None, help="Configuration file")
@click.option("--encoding", default="utf-8", show_default=True, help="Input file encoding")
@click.option("--indent", type=int, default=None, help="JSON indentation")
@click.option("--table", "show_table", is_flag=True, help="Show converted rows as a table")
@click.option("--strict", is_flag=True, help="Exit with status 1 if any block failed")
def special_item_group(
    input_file: str,
    output: Optional[str],
    applies_path: Optional[str],
    apply_names_path: Optional[str],
    resolve: Optional[bool],
    config_path: Optional[str],
    encoding: str,
    indent: Optional[int],
    show_table: bool,
    strict: bool,
) -> None:
    """Convert a special_item_group.txt file to special_item_group.json.

    INPUT is the path to special_item_group.txt, or - to read stdin.
    """
    settings = load_settings(config_path)

    applies_file = Path(applies_path) if applies_path else settings.applies
    names_file = Path(apply_names_path) if apply_names_path else settings.apply_names
    if resolve is None:
        resolve = applies_file is not None and names_file is not None

    apply_map = None
    if resolve:
        if applies_file is None or names_file is None:
            console.print("[red]Error:[/red] --resolve needs both --applies and --apply-names")
            raise SystemExit(1)
        apply_map = build_apply_maps(
            read_text(str(applies_file), "utf-8"),
            read_text(str(names_file), "utf-8"),
        )

    result = SpecialItemGroupParser(apply_map).parse(read_text(input_file, encoding))
    document = result.document

    write_document(
        document.to_dict(),
        output,
        settings.output_dir,
        "special_item_group.json",
        indent if indent is not None else settings.indent,
    )

    if show_table:
        table = Table(title="Special Item Groups", show_header=True)
        table.add_column("Vnum", justify="right")
        table.add_column("Name")
        table.add_column("Type")
        table.add_column("Rows", justify="right")
        table.add_column("Effect")

        for row in document.rows:
            table.add_row(
                str(row.identifier),
                Text(row.name),
                row.category.value,
                str(len(row.rows)),
                Text(row.effect or "-"),
            )

        console.print(table)

    console.print(f"Converted [bold]{len(document.rows)}[/bold] special item group(s)")
    print_errors(result.errors)
    finish(result.errors, strict)

"""Group command for converting group.txt."""

from __future__ import annotations

from typing import Optional

import click
from rich.table import Table
from rich.text import Text

from m2json.cli.output import console, finish, print_errors, read_text, write_document
from m2json.config import load_settings
from m2json.formats.parser import GroupParser


@click.command("group")
@click.argument("input_file", metavar="INPUT")
@click.option("-o", "--output", default=None, help="Output file (default: stdout)")
@click.option("--config", "config_path", default=None, help="Configuration file")
@click.option("--encoding", default="utf-8", show_default=True, help="Input file encoding")
@click.option("--indent", type=int, default=None, help="JSON indentation")
@click.option("--table", "show_table", is_flag=True, help="Show converted rows as a table")
@click.option("--strict", is_flag=True, help="Exit with status 1 if any block failed")
def group(
    input_file: str,
    output: Optional[str],
    config_path: Optional[str],
    encoding: str,
    indent: Optional[int],
    show_table: bool,
    strict: bool,
) -> None:
    """Convert a group.txt file to group.json.

    INPUT is the path to group.txt, or - to read stdin.
    """
    settings = load_settings(config_path)
    result = GroupParser().parse(read_text(input_file, encoding))
    document = result.document

    write_document(
        document.to_dict(),
        output,
        settings.output_dir,
        "group.json",
        indent if indent is not None else settings.indent,
    )

    if show_table:
        table = Table(title="Groups", show_header=True)
        table.add_column("Vnum", justify="right")
        table.add_column("Name")
        table.add_column("Leader", justify="right")
        table.add_column("Mobs", justify="right")

        for row in document.rows:
            table.add_row(
                str(row.identifier),
                Text(row.name),
                str(row.leader_identifier),
                str(len(row.member_identifiers)),
            )

        console.print(table)

    console.print(f"Converted [bold]{len(document.rows)}[/bold] group(s)")
    print_errors(result.errors)
    finish(result.errors, strict)

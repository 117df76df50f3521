"""Shared input and output helpers for the conversion commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import click
from rich.console import Console

# Status output goes to stderr so JSON written to stdout stays clean.
console = Console(stderr=True)


def read_text(source: str, encoding: str) -> str:
    """Read a file, or stdin when ``source`` is ``-``."""
    if source == "-":
        return click.get_text_stream("stdin", encoding=encoding).read()

    path = Path(source)
    if not path.is_file():
        console.print(f"[red]Error:[/red] File not found: {source}")
        raise SystemExit(1)

    try:
        return path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error:[/red] Could not read {source}: {e}")
        raise SystemExit(1)


def dump_document(document: Any, indent: int) -> str:
    """Serialize a document, keeping non-ASCII names readable."""
    return json.dumps(document, indent=indent or None, ensure_ascii=False)


def write_document(
    document: dict[str, Any],
    output: str | None,
    output_dir: Path | None,
    default_name: str,
    indent: int,
) -> Path | None:
    """Write a document to a file, or to stdout when no destination is set.

    Returns:
        The written path, or None when printed to stdout.
    """
    text = dump_document(document, indent)

    if output:
        path = Path(output)
    elif output_dir:
        path = output_dir / default_name
    else:
        click.echo(text)
        return None

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text + "\n", encoding="utf-8")
    console.print(f"[green]Wrote[/green] {path}")
    return path


def print_errors(errors: list[str]) -> None:
    """Print recorded parse errors, if any."""
    if not errors:
        return

    console.print(f"\n[yellow]{len(errors)} problem(s) found:[/yellow]")
    for error in errors:
        console.print(f"  - {error}", markup=False, highlight=False)


def finish(errors: list[str], strict: bool) -> None:
    """Exit with status 1 in strict mode when errors were recorded."""
    if strict and errors:
        raise SystemExit(1)

"""Init command for creating a project configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from m2json.cli.output import console
from m2json.config import Settings, default_config_path, save_settings


@click.command()
@click.option("--project-dir", default=".", help="Project root directory")
@click.option("--applies", default=None, help="Apply type enum listing")
@click.option("--apply-names", default=None, help="Apply display name table")
@click.option("--output-dir", default=None, help="Directory for generated JSON files")
@click.option("--indent", type=int, default=2, show_default=True, help="JSON indentation")
@click.option("--force", is_flag=True, help="Overwrite an existing configuration")
def init(
    project_dir: str,
    applies: Optional[str],
    apply_names: Optional[str],
    output_dir: Optional[str],
    indent: int,
    force: bool,
) -> None:
    """Create .m2json/config.yaml in the project directory."""
    root = Path(project_dir)
    config_path = default_config_path(root)

    if config_path.exists() and not force:
        console.print(f"[red]Error:[/red] Configuration already exists at {config_path}")
        raise SystemExit(1)

    # Stored relative to the project root, as typed.
    settings = Settings(
        indent=indent,
        applies=Path(applies) if applies else None,
        apply_names=Path(apply_names) if apply_names else None,
        output_dir=Path(output_dir) if output_dir else None,
    )
    path = save_settings(settings, config_path)
    console.print(f"[green]Created configuration:[/green] {path}")

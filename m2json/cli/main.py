"""Main CLI entry point for m2json."""

import logging

import click

from m2json import __version__
from m2json.cli.commands.applies import applies
from m2json.cli.commands.group import group
from m2json.cli.commands.init import init
from m2json.cli.commands.special_item_group import special_item_group


def configure_logging(verbosity: int) -> None:
    level = logging.DEBUG if verbosity > 0 else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", count=True, help="Enable debug logging")
def cli(verbose: int) -> None:
    """m2json - Metin2 server text to JSON converter.

    Converts group.txt and special_item_group.txt into documents matching
    the m2-json-schemas contracts.

    \b
    CONVERSION:
      m2json group group.txt -o group.json
      m2json special-item-group special_item_group.txt -o out.json
      m2json special-item-group sig.txt --applies applies.txt --apply-names names.txt

    \b
    TOOLS:
      m2json applies applies.txt names.txt   Show apply code resolution
      m2json init --output-dir out           Create .m2json/config.yaml
    """
    configure_logging(verbose)


cli.add_command(init)
cli.add_command(group)
cli.add_command(special_item_group)
cli.add_command(applies)


if __name__ == "__main__":
    cli()

# ABOUTME: Command-line interface for squash archive compression and extraction
# ABOUTME: Renders any classified failure as a single report on stderr and exits with status 1
"""squash command-line interface"""

import logging
import sys

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from squash import __version__
from squash.accessibility import is_accessible, set_accessible
from squash.archive import compress as compress_archive
from squash.archive import decompress as decompress_archive
from squash.archive import extract_member, list_archive
from squash.classify import CLASSIFIABLE_ERRORS, classify
from squash.colors import color_enabled, disable_colors
from squash.config import Config
from squash.exceptions import render
from squash.logging_config import setup_logging

logger = logging.getLogger(__name__)


class ReportingGroup(click.Group):
    """Group that turns any classifiable failure into the final error report"""

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except CLASSIFIABLE_ERRORS as e:
            logger.debug("Command failed", exc_info=True)
            click.echo(render(classify(e), color=color_enabled(sys.stderr)), err=True)
            ctx.exit(1)


@click.group(cls=ReportingGroup)
@click.version_option(__version__, prog_name="squash")
@click.option(
    "-A", "--accessible", is_flag=True, help="Screen-reader friendly output (or ACCESSIBLE=1)"
)
@click.option("--no-color", is_flag=True, help="Disable coloured output (or NO_COLOR=1)")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--log-file", default=None, help="Also log to this file in the state directory")
@click.pass_context
def cli(ctx, accessible, no_color, debug, log_file):
    """squash - Zip and LZ4 archiving with friendly error reports"""
    # Load environment from .env if present (ACCESSIBLE, NO_COLOR, SQUASH_LOG_LEVEL)
    load_dotenv()
    config = Config()

    ctx.ensure_object(dict)
    ctx.obj["config"] = config

    set_accessible(accessible or config.accessible)
    if no_color or not config.color:
        disable_colors()

    setup_logging(config, debug=debug, log_file=log_file)


@cli.command()
@click.argument("inputs", nargs=-1, required=True, type=click.Path(path_type=str))
@click.option("-o", "--output", required=True, help="Archive to create (.zip or .lz4)")
def compress(inputs, output):
    """Compress INPUTS into a new archive

    Example:
        squash compress notes/ todo.txt -o backup.zip
    """
    path = compress_archive(inputs, output)
    click.echo(f"Created {path}")


@cli.command()
@click.argument("archive")
@click.option("-d", "--dir", "output_dir", default=".", help="Directory to extract into")
def decompress(archive, output_dir):
    """Decompress a .zip or .lz4 ARCHIVE"""
    written = decompress_archive(archive, output_dir)
    click.echo(f"Extracted {len(written)} file(s) into {output_dir}")


@cli.command(name="list")
@click.argument("archive")
def list_command(archive):
    """List the contents of a zip ARCHIVE"""
    entries = list_archive(archive)

    # Tables are hard to follow with a screen reader
    if is_accessible():
        for entry in entries:
            click.echo(f"{entry.name}, {entry.size} bytes, {entry.compressed_size} compressed")
        click.echo(f"{len(entries)} entries")
        return

    table = Table(title=archive)
    table.add_column("Name")
    table.add_column("Size", justify="right")
    table.add_column("Compressed", justify="right")
    for entry in entries:
        table.add_row(entry.name, str(entry.size), str(entry.compressed_size))

    Console(no_color=not color_enabled(sys.stdout)).print(table)


@cli.command()
@click.argument("archive")
@click.argument("member")
@click.option("-d", "--dir", "output_dir", default=".", help="Directory to extract into")
def extract(archive, member, output_dir):
    """Extract a single MEMBER from a zip ARCHIVE"""
    path = extract_member(archive, member, output_dir)
    click.echo(f"Extracted {path}")


def main():
    cli()

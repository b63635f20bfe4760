"""
Renders EasyMark documents in the terminal.
Also dumps the token stream of a document for inspecting how it is parsed.
"""

from __future__ import annotations

import logging

import click
from .config import ConfigError, build_config
from .exceptions import DocumentError
from .filesystem import get_max_file_size, normalize_filepath, read_document
from .render import render as render_document
from .tokenizer import tokenize

__all__ = ["cli"]


def _load(filepath: str, **overrides: object):
    """Resolve `filepath`, build its configuration, and read it."""
    try:
        path = normalize_filepath(filepath)
    except ValueError as error:
        raise click.BadParameter(str(error)) from error

    try:
        config = build_config(path.parent, **overrides)
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        max_file_size = get_max_file_size(default=config.max_file_size)
        text = read_document(path, max_file_size)
    except (DocumentError, ValueError) as error:
        raise click.ClickException(str(error)) from error

    return text, config


@click.group()
@click.version_option()
@click.option("-v", "--verbose", is_flag=True, help="Log tokenizer diagnostics to stderr")
def cli(verbose: bool = False):
    """
    Render and inspect EasyMark markup files.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@click.option("--bullet", help="Marker shown for bullet points")
@click.option("--separator-width", type=int, help="Width of horizontal rules")
@click.option("--no-urls", is_flag=True, help="Hide URLs after link titles")
@click.option("--color/--no-color", default=None, help="Force or disable ANSI styling")
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False))
def render(
    filepath: str,
    bullet: str | None = None,
    separator_width: int | None = None,
    no_urls: bool = False,
    color: bool | None = None,
):
    """
    Print a rendered EasyMark document.

    Args:
        filepath: Path to the document.
        bullet: Override for the bullet marker.
        separator_width: Override for the width of `---` rules.
        no_urls: Hide link URLs when set.
        color: Force (True) or strip (False) ANSI styling; auto-detected when None.

    Raises:
        click.BadParameter: If the path or configuration overrides are invalid.
        click.ClickException: If the document cannot be read.

    Examples:
        easymark render notes.em --bullet "*" --no-color
    """
    text, config = _load(
        filepath,
        bullet=bullet,
        separator_width=separator_width,
        show_urls=False if no_urls else None,
    )
    click.echo(render_document(text, config), color=color)


@cli.command()
@click.option("--offsets", is_flag=True, help="Prefix each item with its source range")
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False))
def tokens(filepath: str, offsets: bool = False):
    """
    Print the items the tokenizer produces, one per line.

    Examples:
        easymark tokens notes.em --offsets
    """
    text, _ = _load(filepath)
    for item in tokenize(text):
        if offsets:
            click.echo(f"{item.start}:{item.end} {item!r}")
        else:
            click.echo(repr(item))


if __name__ == "__main__":
    cli()

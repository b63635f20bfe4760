"""Render EasyMark documents as styled terminal text."""

from __future__ import annotations

from collections.abc import Iterable

import click

from .config import EasyMarkConfig
from .lines import Line, Rule, group_lines
from .models import BulletPoint, CodeBlock, Hyperlink, NumberedPoint, Style, Text
from .tokenizer import tokenize


def style_attributes(style: Style, config: EasyMarkConfig | None = None) -> dict[str, object]:
    """Map a `Style` to keyword arguments for `click.style`.

    Headings win over small text and strong text hides the quote dimming.
    Terminals have no raised baseline, so raised text is drawn small with an
    overline to keep it apart from plain small text.

    Args:
        style: Inline style of an item.
        config: Supplies the code color. Defaults to a new `EasyMarkConfig`.

    Returns:
        dict[str, object]: Arguments accepted by `click.style`.

    Examples:
        style_attributes(Style(strong=True))  # {"bold": True}
    """
    config = config or EasyMarkConfig()
    small = style.small or style.raised
    attributes: dict[str, object] = {}

    if style.heading and not small:
        attributes["bold"] = True
        attributes["underline"] = True
    if small and not style.heading:
        attributes["dim"] = True
    if style.code:
        attributes["fg"] = config.code_color
    if style.strong:
        attributes["bold"] = True
    elif style.quoted:
        attributes["dim"] = True
    if style.underline:
        attributes["underline"] = True
    if style.strikethrough:
        attributes["strikethrough"] = True
    if style.italics:
        attributes["italic"] = True
    if style.raised:
        attributes["overline"] = True

    return attributes


def _marker_label(marker: BulletPoint | NumberedPoint, config: EasyMarkConfig) -> str:
    if isinstance(marker, NumberedPoint):
        return f"{marker.number}."
    return config.bullet


def _render_code_block(block: CodeBlock, config: EasyMarkConfig) -> list[str]:
    indent = " " * config.code_indent
    return [
        indent + click.style(code_line, fg=config.code_color)
        for code_line in block.code.split("\n")
    ]


def render_line(line: Line, config: EasyMarkConfig | None = None) -> list[str]:
    """Render one `Line` into terminal rows.

    A line normally yields a single row. Code blocks are placed on rows of
    their own, so a line holding one yields several.

    Args:
        line: Line produced by `group_lines`.
        config: Rendering configuration. Defaults to a new `EasyMarkConfig`.

    Returns:
        list[str]: Rows without trailing newlines, possibly containing ANSI codes.
    """
    config = config or EasyMarkConfig()
    prefix = f"{config.quote_bar} " * line.quote_level + " " * line.indentation
    if line.marker is not None:
        prefix += click.style(_marker_label(line.marker, config), bold=True) + " "

    rows: list[str] = []
    current = prefix
    pending = line.marker is not None or line.quote_level > 0

    for item in line.items:
        if isinstance(item, Text):
            current += click.style(item.text, **style_attributes(item.style, config))
            pending = True
        elif isinstance(item, Hyperlink):
            attributes = style_attributes(item.style, config)
            attributes["underline"] = True
            current += click.style(item.title, **attributes)
            if config.show_urls and item.url != item.title:
                current += click.style(f" <{item.url}>", dim=True)
            pending = True
        elif isinstance(item, CodeBlock):
            if pending:
                rows.append(current)
            rows.extend(_render_code_block(item, config))
            current = prefix
            pending = False

    if pending or not rows:
        rows.append(current)
    return rows


def render_lines(records: Iterable[Line | Rule], config: EasyMarkConfig | None = None) -> list[str]:
    """Render `Line` and `Rule` records into terminal rows."""
    config = config or EasyMarkConfig()
    rows: list[str] = []
    for record in records:
        if isinstance(record, Rule):
            rows.append(config.separator_char * config.separator_width)
        else:
            rows.extend(render_line(record, config))
    return rows


def render(text: str, config: EasyMarkConfig | None = None) -> str:
    """Tokenize, group, and render a whole document.

    Args:
        text: The markup document.
        config: Rendering configuration. Defaults to a new `EasyMarkConfig`.

    Returns:
        str: Rendered document with one row per output line and ANSI styling;
            pass it through `click.echo(..., color=False)` or `click.unstyle`
            for plain text.

    Examples:
        click.unstyle(render("# Title\\n- item\\n"))  # "Title\\n• item"
    """
    return "\n".join(render_lines(group_lines(tokenize(text)), config))

import click
import pytest

from easymark.config import EasyMarkConfig
from easymark.lines import Line, Rule
from easymark.models import BulletPoint, CodeBlock, Hyperlink, NumberedPoint, Style, Text
from easymark.render import render, render_line, render_lines, style_attributes


def _plain(text: str, config: EasyMarkConfig | None = None) -> str:
    return click.unstyle(render(text, config))


@pytest.mark.parametrize(
    "style, expected",
    [
        (Style(), {}),
        (Style(heading=True), {"bold": True, "underline": True}),
        (Style(small=True), {"dim": True}),
        (Style(raised=True), {"dim": True, "overline": True}),
        (Style(heading=True, small=True), {}),
        (Style(code=True), {"fg": "cyan"}),
        (Style(quoted=True), {"dim": True}),
        (Style(quoted=True, strong=True), {"bold": True}),
        (Style(underline=True), {"underline": True}),
        (Style(strikethrough=True), {"strikethrough": True}),
        (Style(italics=True), {"italic": True}),
    ],
)
def test_style_attributes(style: Style, expected: dict):
    assert style_attributes(style) == expected


def test_raised_text_is_set_apart_from_small_text():
    assert style_attributes(Style(raised=True)) != style_attributes(Style(small=True))
    assert render("^x^") == click.style("x", dim=True, overline=True)


def test_code_color_comes_from_config():
    config = EasyMarkConfig(code_color="green")

    assert style_attributes(Style(code=True), config) == {"fg": "green"}


def test_render_styles_text():
    assert render("*bold*") == click.style("bold", bold=True)


def test_render_document_rows():
    text = "# Title\n- one\n  2. two\n> > quoted\n---\nend"

    assert _plain(text) == "\n".join(
        [
            "Title",
            "• one",
            "  2. two",
            "│ │ quoted",
            "─" * 40,
            "end",
        ]
    )


def test_render_keeps_blank_lines():
    assert _plain("a\n\nb") == "a\n\nb"


def test_render_link_with_url():
    assert _plain("see [docs](https://example.com)") == "see docs <https://example.com>"


def test_render_bare_link_shows_url_once():
    assert _plain("<https://example.com>") == "https://example.com"


def test_render_can_hide_urls():
    config = EasyMarkConfig(show_urls=False)

    assert _plain("[docs](https://example.com)", config) == "docs"


def test_link_is_always_underlined():
    rows = render_line(Line([Hyperlink(Style(), "t", "t")]))

    assert rows == [click.style("t", underline=True)]


def test_render_code_block_rows():
    assert _plain("```py\nx = 1\ny = 2\n```") == "    x = 1\n    y = 2"


def test_code_block_breaks_out_of_line():
    line = Line(
        [Text(Style(), "before"), CodeBlock("", "code"), Text(Style(), "after")],
        quote_level=1,
    )

    rows = [click.unstyle(row) for row in render_line(line)]

    assert rows == ["│ before", "    code", "│ after"]


def test_custom_markers():
    config = EasyMarkConfig(bullet="*", quote_bar="|", separator_char="=", separator_width=3)

    assert _plain("- a\n> b\n---", config) == "* a\n| b\n==="


def test_numbered_marker_label():
    rows = render_line(Line([Text(Style(), "x")], marker=NumberedPoint("10")))

    assert click.unstyle(rows[0]) == "10. x"


def test_marker_only_line():
    assert [click.unstyle(row) for row in render_line(Line(marker=BulletPoint()))] == ["• "]


def test_render_empty_document():
    assert render("") == ""


def test_render_lines_accepts_any_iterable():
    config = EasyMarkConfig(separator_char="=", separator_width=3)
    records = (record for record in [Line(items=[Text(Style(), "a")]), Rule()])

    assert [click.unstyle(row) for row in render_lines(records, config)] == ["a", "==="]

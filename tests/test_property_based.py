from __future__ import annotations

from dataclasses import fields

from hypothesis import given
from hypothesis import strategies as st
from easymark.constants import STYLE_TOGGLES
from easymark.lines import Line, group_lines
from easymark.models import INLINE_ITEMS, Style, Text
from easymark.tokenizer import Tokenizer, tokenize

markup_text = st.text(alphabet=list("ab1 .-#>*_~/$^`\\<>[]()\n\t"), max_size=200)
any_text = st.one_of(markup_text, st.text(max_size=200))
toggle_chars = st.sampled_from(sorted(STYLE_TOGGLES))
flag_names = st.sampled_from([f.name for f in fields(Style)])

# Characters that can be consumed without producing an item.
SILENT_DELIMITERS = set(STYLE_TOGGLES) | {"#", " ", "\t", "\\", "\n"}


@given(any_text)
def test_items_cover_input_in_order(text: str):
    tokenizer = Tokenizer(text)
    items = list(tokenizer)
    assert tokenizer.position == len(text)

    cursor = 0
    for item in items:
        assert item.start >= cursor
        assert item.end > item.start
        gap = text[cursor : item.start]
        assert set(gap) <= SILENT_DELIMITERS, (gap, item)
        cursor = item.end

    assert set(text[cursor:]) <= SILENT_DELIMITERS


@given(any_text)
def test_item_count_is_bounded_by_input_length(text: str):
    assert len(list(tokenize(text))) <= len(text)


@given(any_text)
def test_tokenizing_is_deterministic(text: str):
    first = [(item, item.start, item.end) for item in tokenize(text)]
    second = [(item, item.start, item.end) for item in tokenize(text)]

    assert first == second


@given(st.lists(toggle_chars, max_size=8), toggle_chars)
def test_double_toggle_restores_style(prefix: list[str], char: str):
    expected = Style()
    for toggle in prefix:
        expected = expected.toggled(STYLE_TOGGLES[toggle])

    items = list(tokenize("".join(prefix) + char + char + "x"))

    assert items == [Text(expected, "x")]


@given(st.builds(Style, **{f.name: st.booleans() for f in fields(Style)}), flag_names)
def test_toggling_flag_leaves_others_unchanged(style: Style, flag: str):
    toggled = style.toggled(flag)

    for other in fields(Style):
        if other.name == flag:
            assert getattr(toggled, flag) is not getattr(style, flag)
        else:
            assert getattr(toggled, other.name) == getattr(style, other.name)
    assert toggled.toggled(flag) == style


@given(st.lists(toggle_chars, max_size=8), st.characters(exclude_characters="\n"))
def test_escape_yields_the_character(prefix: list[str], char: str):
    expected = Style()
    for toggle in prefix:
        expected = expected.toggled(STYLE_TOGGLES[toggle])

    items = list(tokenize("".join(prefix) + "\\" + char))

    assert items == [Text(expected, char)]


@given(st.text(alphabet="abc `", max_size=40))
def test_unterminated_code_span_covers_rest_of_line(body: str):
    text = "`" + body.replace("`", "")

    assert list(tokenize(text)) == [Text(Style(code=True), text[1:])]


@given(any_text)
def test_grouping_keeps_every_inline_item(text: str):
    inline = [item for item in tokenize(text) if isinstance(item, INLINE_ITEMS)]
    grouped = [
        item
        for record in group_lines(tokenize(text))
        if isinstance(record, Line)
        for item in record.items
    ]

    assert grouped == inline

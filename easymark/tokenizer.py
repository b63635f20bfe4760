"""Single-pass tokenizer for EasyMark markup.

The tokenizer walks the input once with a forward-only cursor. Inline styles
are a flat set of toggles carried between items; block constructs are only
recognised at the start of a line. Closing delimiters are searched for within
the current line only, and any construct that does not close degrades to
plain text, so tokenizing never fails.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from .constants import (
    BULLET_MARKER,
    CODE_FENCE,
    CODE_FENCE_CLOSE,
    HEADING_PATTERN,
    LEADING_SPACES_PATTERN,
    NUMBERED_POINT_PATTERN,
    QUOTE_MARKER,
    SEPARATOR_PATTERN,
    SPECIAL_PATTERN,
    STYLE_TOGGLES,
)
from .models import (
    DEFAULT_STYLE,
    BulletPoint,
    CodeBlock,
    Hyperlink,
    Indentation,
    Item,
    Newline,
    NumberedPoint,
    QuoteIndent,
    Separator,
    Text,
)

logger = logging.getLogger(__name__)


def _trim_newlines(code: str) -> str:
    if code.startswith("\n"):
        code = code[1:]
    if code.endswith("\n"):
        code = code[:-1]
    return code


class Tokenizer:
    """Lazy iterator over the items of an EasyMark document.

    Each call to `next()` advances the cursor by at least one character, so
    the item sequence is finite for any input. A tokenizer cannot be rewound;
    construct a new one to parse the same text again.

    Args:
        text: The complete markup document.

    Examples:
        list(Tokenizer("*bold*"))  # [Text(Style(strong=True), "bold")]
    """

    def __init__(self, text: str):
        self._text = text
        self._pos = 0
        self._start_of_line = True
        self._style = DEFAULT_STYLE

    @property
    def position(self) -> int:
        """Offset of the first unconsumed character."""
        return self._pos

    def __iter__(self) -> Tokenizer:
        return self

    def __next__(self) -> Item:
        text = self._text
        while True:
            pos = self._pos
            if pos >= len(text):
                raise StopIteration

            char = text[pos]

            if char == "\n":
                self._pos = pos + 1
                self._start_of_line = True
                self._style = DEFAULT_STYLE
                return Newline(start=pos, end=pos + 1)

            if char == "\\" and pos + 1 < len(text):
                self._pos = pos + 2
                # An escaped line break joins the next line onto this one
                if text[pos + 1] == "\n":
                    continue
                self._start_of_line = False
                return Text(self._style, text[pos + 1], start=pos, end=pos + 2)

            if self._start_of_line:
                if char == " ":
                    return self._indentation()

                heading = HEADING_PATTERN.match(text, pos)
                if heading:
                    self._pos = heading.end()
                    self._start_of_line = False
                    self._style = replace(self._style, heading=True)
                    continue

                item = (
                    self._quote_indent()
                    or self._bullet_point()
                    or self._numbered_point()
                    or self._separator()
                    or self._code_block()
                )
                if item is not None:
                    return item

            if char == "`":
                return self._inline_code()

            flag = STYLE_TOGGLES.get(char)
            if flag is not None:
                self._pos = pos + 1
                self._start_of_line = False
                self._style = self._style.toggled(flag)
                continue

            link = self._hyperlink()
            if link is not None:
                return link

            return self._plain_text()

    def _line_end(self, pos: int) -> int:
        end = self._text.find("\n", pos)
        return len(self._text) if end == -1 else end

    def _indentation(self) -> Indentation:
        start = self._pos
        end = LEADING_SPACES_PATTERN.match(self._text, start).end()
        self._pos = end
        return Indentation(end - start, start=start, end=end)

    def _quote_indent(self) -> QuoteIndent | None:
        start = self._pos
        if not self._text.startswith(QUOTE_MARKER, start):
            return None
        self._pos = start + len(QUOTE_MARKER)
        self._style = replace(self._style, quoted=True)
        # Further `> ` markers may follow, so the line has not started yet
        return QuoteIndent(start=start, end=self._pos)

    def _bullet_point(self) -> BulletPoint | None:
        start = self._pos
        if not self._text.startswith(BULLET_MARKER, start):
            return None
        self._pos = start + len(BULLET_MARKER)
        self._start_of_line = False
        return BulletPoint(start=start, end=self._pos)

    def _numbered_point(self) -> NumberedPoint | None:
        start = self._pos
        match = NUMBERED_POINT_PATTERN.match(self._text, start)
        if not match:
            return None
        self._pos = match.end()
        self._start_of_line = False
        return NumberedPoint(match.group(1), start=start, end=self._pos)

    def _separator(self) -> Separator | None:
        start = self._pos
        match = SEPARATOR_PATTERN.match(self._text, start)
        if not match:
            return None
        self._pos = match.end()
        self._start_of_line = False
        return Separator(start=start, end=self._pos)

    def _code_block(self) -> CodeBlock | None:
        """Match ```` ```language\\ncode\\n``` ````."""
        text = self._text
        start = self._pos
        if not text.startswith(CODE_FENCE, start):
            return None

        language_start = start + len(CODE_FENCE)
        newline = text.find("\n", language_start)
        if newline == -1:
            return None

        language = text[language_start:newline]
        code_start = newline + 1
        # Searched from the fence line's own newline so "```\n```" closes as an empty block
        close = text.find(CODE_FENCE_CLOSE, newline)
        if close == -1:
            logger.debug("Unterminated code fence at offset %d runs to end of input", start)
            code = text[code_start:]
            end = len(text)
        else:
            code = text[code_start:close]
            end = close + len(CODE_FENCE_CLOSE)

        self._pos = end
        self._start_of_line = False
        return CodeBlock(language, _trim_newlines(code), start=start, end=end)

    def _inline_code(self) -> Text:
        text = self._text
        start = self._pos
        code_start = start + 1
        line_end = self._line_end(code_start)
        close = text.find("`", code_start, line_end)
        if close == -1:
            logger.debug("Unterminated code span at offset %d runs to end of line", start)
            code_end = end = line_end
        else:
            code_end, end = close, close + 1

        self._pos = end
        self._start_of_line = False
        return Text(replace(self._style, code=True), text[code_start:code_end], start=start, end=end)

    def _hyperlink(self) -> Hyperlink | None:
        """Match ``<url>`` or ``[title](url)`` closing on the current line."""
        text = self._text
        start = self._pos
        opener = text[start]
        if opener not in "<[":
            return None

        line_end = self._line_end(start)
        if opener == "<":
            close = text.find(">", start + 1, line_end)
            if close != -1:
                url = text[start + 1 : close]
                return self._emit_link(url, url, close + 1)
        else:
            bracket = text.find("]", start + 1, line_end)
            if bracket != -1 and text.startswith("(", bracket + 1, line_end):
                paren = text.find(")", bracket + 2, line_end)
                if paren != -1:
                    title = text[start + 1 : bracket]
                    url = text[bracket + 2 : paren]
                    return self._emit_link(title, url, paren + 1)

        logger.debug("Unmatched %r at offset %d treated as text", opener, start)
        return None

    def _emit_link(self, title: str, url: str, end: int) -> Hyperlink:
        start = self._pos
        self._pos = end
        self._start_of_line = False
        return Hyperlink(self._style, title, url, start=start, end=end)

    def _plain_text(self) -> Text:
        text = self._text
        start = self._pos
        match = SPECIAL_PATTERN.search(text, start)
        end = len(text) if match is None else match.start()
        if end == start:
            # A delimiter no rule accepted (lone `<`, `[` or trailing `\`)
            end = start + 1

        self._pos = end
        self._start_of_line = False
        return Text(self._style, text[start:end], start=start, end=end)


def tokenize(text: str) -> Tokenizer:
    """Return a fresh tokenizer over `text`.

    Args:
        text: The markup document.

    Returns:
        Tokenizer: Iterator yielding the document's items in order.

    Examples:
        list(tokenize("- item\\n"))  # [BulletPoint(), Text(Style(), "item"), Newline()]
    """
    return Tokenizer(text)

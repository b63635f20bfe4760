"""Data models for easymark."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace


@dataclass(frozen=True)
class Style:
    """Inline formatting flags attached to text and hyperlinks.

    Flags are independent of each other; any combination may be active.

    Attributes:
        heading: ``# heading`` (large text).
        quoted: ``> quoted`` (dimmer text).
        code: ```code``` (monospace).
        strong: ``*strong*``.
        underline: ``_underline_``.
        strikethrough: ``~strikethrough~``.
        italics: ``/italics/``.
        small: ``$small$``.
        raised: ``^raised^``.

    Examples:
        Style(strong=True).toggled("strong")  # Style()
    """

    heading: bool = False
    quoted: bool = False
    code: bool = False
    strong: bool = False
    underline: bool = False
    strikethrough: bool = False
    italics: bool = False
    small: bool = False
    raised: bool = False

    def toggled(self, flag: str) -> Style:
        """Return a copy with `flag` inverted."""
        return replace(self, **{flag: not getattr(self, flag)})

    def active(self) -> tuple[str, ...]:
        """Return the names of the flags that are set."""
        return tuple(f.name for f in fields(self) if getattr(self, f.name))


DEFAULT_STYLE = Style()


@dataclass(frozen=True)
class Token:
    """Base class of tokenizer items.

    Attributes:
        start: Offset of the first input character this item was produced from.
        end: Offset just past the last input character this item consumed.
    """

    start: int = field(default=0, compare=False, repr=False, kw_only=True)
    end: int = field(default=0, compare=False, repr=False, kw_only=True)


@dataclass(frozen=True)
class Newline(Token):
    """End of a logical line."""


@dataclass(frozen=True)
class Text(Token):
    """A run of literal content under a style."""

    style: Style
    text: str


@dataclass(frozen=True)
class Hyperlink(Token):
    """``<url>`` or ``[title](url)``; title and url are equal for the bare form."""

    style: Style
    title: str
    url: str


@dataclass(frozen=True)
class Indentation(Token):
    """Leading spaces at the start of a line."""

    count: int


@dataclass(frozen=True)
class QuoteIndent(Token):
    """One ``> `` quote level."""


@dataclass(frozen=True)
class BulletPoint(Token):
    """``- `` unordered list marker."""


@dataclass(frozen=True)
class NumberedPoint(Token):
    """``1. `` ordered list marker; `number` keeps the digits verbatim."""

    number: str


@dataclass(frozen=True)
class Separator(Token):
    """``---`` horizontal rule."""


@dataclass(frozen=True)
class CodeBlock(Token):
    """Fenced code block."""

    language: str
    code: str


Item = (
    Newline
    | Text
    | Hyperlink
    | Indentation
    | QuoteIndent
    | BulletPoint
    | NumberedPoint
    | Separator
    | CodeBlock
)

# Items that carry visible content within a line.
INLINE_ITEMS = (Text, Hyperlink, CodeBlock)

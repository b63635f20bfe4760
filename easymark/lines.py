"""Group tokenizer items into display lines."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from .models import (
    INLINE_ITEMS,
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


@dataclass
class Line:
    """One logical line ready for display.

    Attributes:
        items: Content items of the line, in order.
        indentation: Leading space count of the line.
        quote_level: Number of ``> `` markers preceding the content.
        marker: List marker opening the line, if any.
    """

    items: list[Text | Hyperlink | CodeBlock] = field(default_factory=list)
    indentation: int = 0
    quote_level: int = 0
    marker: BulletPoint | NumberedPoint | None = None

    def has_content(self) -> bool:
        """Whether the line would show anything besides its indentation."""
        return bool(self.items) or self.marker is not None or self.quote_level > 0


@dataclass(frozen=True)
class Rule:
    """A horizontal rule between lines."""


def group_lines(items: Iterable[Item]) -> Iterator[Line | Rule]:
    """Accumulate items into `Line` and `Rule` records.

    A `Newline` always closes the current line, so blank lines are kept. A
    `Separator` closes the current line only when it has content, then yields
    a `Rule`. Quote depth is the count of `QuoteIndent` items seen since the
    last reset.

    Args:
        items: Items as produced by `easymark.tokenizer.tokenize`.

    Yields:
        Line | Rule: Display records in document order.

    Examples:
        list(group_lines(tokenize("> > deep\\n")))  # [Line([...], quote_level=2)]
    """
    line = Line()

    for item in items:
        if isinstance(item, Indentation):
            line.indentation = item.count
        elif isinstance(item, QuoteIndent):
            line.quote_level += 1
        elif isinstance(item, (BulletPoint, NumberedPoint)):
            line.marker = item
        elif isinstance(item, Newline):
            yield line
            line = Line()
        elif isinstance(item, Separator):
            if line.has_content():
                yield line
            yield Rule()
            line = Line()
        elif isinstance(item, INLINE_ITEMS):
            line.items.append(item)

    if line.has_content():
        yield line

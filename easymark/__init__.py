"""
easymark: tokenizer and terminal renderer for the EasyMark markup language.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    easymark render notes.em
    easymark tokens notes.em

Library Usage:
    from easymark import tokenize, group_lines

    for item in tokenize("# Title\\n- *bold* point\\n"):
        print(item)

    lines = list(group_lines(tokenize(text)))
"""

from .config import ConfigError, EasyMarkConfig
from .exceptions import DocumentError, DocumentTooLargeError
from .lines import Line, Rule, group_lines
from .models import (
    BulletPoint,
    CodeBlock,
    Hyperlink,
    Indentation,
    Item,
    Newline,
    NumberedPoint,
    QuoteIndent,
    Separator,
    Style,
    Text,
)
from .render import render, render_line
from .tokenizer import Tokenizer, tokenize

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "tokenize",
    "Tokenizer",
    "group_lines",
    "render",
    "render_line",
    # Data models
    "Style",
    "Item",
    "Newline",
    "Text",
    "Hyperlink",
    "Indentation",
    "QuoteIndent",
    "BulletPoint",
    "NumberedPoint",
    "Separator",
    "CodeBlock",
    "Line",
    "Rule",
    # Configuration
    "EasyMarkConfig",
    "ConfigError",
    # Exceptions
    "DocumentError",
    "DocumentTooLargeError",
    # Version
    "__version__",
]

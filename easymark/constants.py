"""Constants used across the easymark package."""

from __future__ import annotations

import re

from .config import EasyMarkConfig

DEFAULT_CONFIG = EasyMarkConfig()

# Inline toggle characters and the `Style` flag each one flips.
STYLE_TOGGLES = {
    "*": "strong",
    "_": "underline",
    "~": "strikethrough",
    "/": "italics",
    "$": "small",
    "^": "raised",
}

# Plain text runs stop at any of these characters.
SPECIAL_PATTERN = re.compile(r"[*`~_/$^\\<\[\n]")

# Line-start constructs, matched at the cursor with `pattern.match(text, pos)`.
LEADING_SPACES_PATTERN = re.compile(r" +")
HEADING_PATTERN = re.compile(r"#[ \t]+")
NUMBERED_POINT_PATTERN = re.compile(r"([0-9]+)\. ")
SEPARATOR_PATTERN = re.compile(r"-{3,}\n?")
QUOTE_MARKER = "> "
BULLET_MARKER = "- "

CODE_FENCE = "```"
CODE_FENCE_CLOSE = "\n```"

MARKUP_EXTENSIONS = (".em", ".easymark", ".md", ".markdown", ".txt")
DEFAULT_MAX_FILE_SIZE = DEFAULT_CONFIG.max_file_size

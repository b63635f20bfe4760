from __future__ import annotations

import os

import pytest
from easymark.lines import group_lines
from easymark.render import render
from easymark.tokenizer import Tokenizer, tokenize

atheris = pytest.importorskip("atheris")


def test_tokenizer_consumes_fuzzed_input():
    data = os.urandom(4096)
    provider = atheris.FuzzedDataProvider(data)
    parsed = 0

    for _ in range(128):
        if provider.remaining_bytes() == 0:
            break
        text = provider.ConsumeUnicodeNoSurrogates(64)
        tokenizer = Tokenizer(text)
        items = list(tokenizer)
        assert tokenizer.position == len(text)
        assert len(items) <= len(text)
        parsed += 1

    assert parsed  # ensure we exercised the loop


def test_render_accepts_fuzzed_markup():
    data = os.urandom(4096)
    provider = atheris.FuzzedDataProvider(data)
    alphabet = "ab #>-1.*_~/$^`\\<>[]()\n"
    chunks: list[str] = []

    while provider.remaining_bytes() > 0 and len(chunks) < 256:
        chunks.append(alphabet[provider.ConsumeIntInRange(0, len(alphabet) - 1)])

    text = "".join(chunks)
    list(group_lines(tokenize(text)))
    assert isinstance(render(text), str)

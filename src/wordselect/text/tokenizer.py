"""Positional tokenizer for word-select passages.

A "word" is whatever sits between two whitespace characters once markup has
been pushed apart from its neighbours, so ``<b>cat</b>`` becomes the three
words ``<b>``, ``cat`` and ``</b>``. Correct-place indices are stored at
authoring time and looked up again at grading time, so the split must not
change: it uses ASCII whitespace only and keeps the empty strings produced
by consecutive separators.
"""
from __future__ import annotations

import re
from typing import Iterator

# Single separator characters, not runs: "a  b" yields ["a", "", "b"]
WORD_SEPARATOR = re.compile(r"\s", re.ASCII)


def expand_markup(text: str) -> str:
    """Put a space before every ``<`` and after every ``>``."""
    text = text.replace(">", "> ")
    return text.replace("<", " <")


def split_words(expanded: str) -> list[str]:
    """Split already-expanded text on single whitespace characters."""
    return WORD_SEPARATOR.split(expanded)


def tokenize(text: str) -> list[str]:
    """Raw words of a passage, delimiters intact, in position order."""
    return split_words(expand_markup(text))


def word_spans(expanded: str) -> Iterator[tuple[int, int]]:
    """Yield ``(start, end)`` offsets of each word in expanded text.

    Yields exactly one span per element of ``split_words(expanded)``.
    """
    start = 0
    for sep in WORD_SEPARATOR.finditer(expanded):
        yield start, sep.start()
        start = sep.end()
    yield start, len(expanded)

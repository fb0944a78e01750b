"""Learner-facing view of a passage.

The display view hides which words are answers (delimiters removed) and
drops markup. It is never used for grading; correctness always comes from
the raw split in ``wordselect.text.correctness``.
"""
from __future__ import annotations

import re

import structlog
from bs4 import BeautifulSoup

from wordselect.models.passage import DelimiterPair
from wordselect.models.response import field_name
from wordselect.text.tokenizer import expand_markup, word_spans

logger = structlog.get_logger(__name__)

# Hyperlinks and their content, e.g. media players rendered by filters
ANCHOR_PATTERN = re.compile(r"<a\b.*?</a>", re.IGNORECASE)
TAG_PATTERN = re.compile(r"<[^>]*>")


def _strip_delimiters(text: str, delimiters: DelimiterPair) -> str:
    return text.replace(delimiters.left, "").replace(delimiters.right, "")


def _hidden_offsets(expanded: str, delimiters: DelimiterPair) -> set[int]:
    """Offsets of characters that never show in a selectable word."""
    hidden = {
        i for i, ch in enumerate(expanded)
        if ch == delimiters.left or ch == delimiters.right
    }
    for pattern in (ANCHOR_PATTERN, TAG_PATTERN):
        for match in pattern.finditer(expanded):
            hidden.update(range(match.start(), match.end()))
    return hidden


def selectable_words(text: str, delimiters: DelimiterPair) -> list[str]:
    """Display text for every place, in the same position space as ``tokenize``.

    Words that were pure markup, or sat inside a hyperlink, come back as
    empty strings so that position ``i`` here is position ``i`` in the raw
    split.
    """
    expanded = expand_markup(text)
    hidden = _hidden_offsets(expanded, delimiters)
    words = [
        "".join(expanded[i] for i in range(start, end) if i not in hidden)
        for start, end in word_spans(expanded)
    ]
    logger.debug("selectable_words_built", word_count=len(words))
    return words


def selectable_text(text: str, delimiters: DelimiterPair) -> str:
    """Flat passage text as the learner reads it, whitespace collapsed."""
    stripped = _strip_delimiters(expand_markup(text), delimiters)
    without_links = ANCHOR_PATTERN.sub("", stripped)
    if not without_links.strip():
        return ""
    soup = BeautifulSoup(without_links, "lxml")
    return " ".join(soup.get_text(" ").split())


def expected_fields(text: str, delimiters: DelimiterPair) -> list[str]:
    """Response keys the host form may submit, one per place."""
    return [field_name(place) for place in range(len(selectable_words(text, delimiters)))]

"""Correct-place index: which word positions are delimiter-wrapped answers."""
from __future__ import annotations

import re
from functools import lru_cache

import structlog

from wordselect.models.passage import DelimiterPair, Token
from wordselect.text.tokenizer import tokenize

logger = structlog.get_logger(__name__)


@lru_cache(maxsize=32)
def correct_pattern(delimiters: DelimiterPair) -> re.Pattern[str]:
    """Pattern matching a word that contains left ... right, e.g. ``[cat],``."""
    return re.compile(re.escape(delimiters.left) + ".*" + re.escape(delimiters.right))


def is_correct_word(word: str, delimiters: DelimiterPair) -> bool:
    return correct_pattern(delimiters).search(word) is not None


def correct_places(text: str, delimiters: DelimiterPair) -> list[int]:
    """Indices of correct words in discovery order.

    Computed over the raw split from ``tokenize``; every caller that needs
    correctness (grading, correct response, token records) goes through
    here so the indices agree.
    """
    places = [
        index
        for index, word in enumerate(tokenize(text))
        if is_correct_word(word, delimiters)
    ]
    logger.debug(
        "correct_places_computed",
        delimiters=delimiters.to_string(),
        correct_count=len(places),
    )
    return places


def build_tokens(text: str, delimiters: DelimiterPair) -> list[Token]:
    """Token records for every raw word, flagged with correctness."""
    return [
        Token(index=index, text=word, is_correct=is_correct_word(word, delimiters))
        for index, word in enumerate(tokenize(text))
    ]

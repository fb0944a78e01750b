"""Tokenization, correctness index and display view of passages."""
from wordselect.text.tokenizer import expand_markup, split_words, tokenize, word_spans
from wordselect.text.correctness import build_tokens, correct_places, is_correct_word
from wordselect.text.display import expected_fields, selectable_text, selectable_words

__all__ = [
    "expand_markup",
    "split_words",
    "tokenize",
    "word_spans",
    "build_tokens",
    "correct_places",
    "is_correct_word",
    "expected_fields",
    "selectable_text",
    "selectable_words",
]

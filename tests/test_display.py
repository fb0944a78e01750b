"""Tests for the learner-facing display view."""
from __future__ import annotations

import pytest

from wordselect.text.display import expected_fields, selectable_text, selectable_words
from wordselect.text.tokenizer import tokenize

LINK_PASSAGE = 'Listen <a href="x.mp3">clip</a> [now]'


class TestSelectableWords:
    """Tests for selectable_words."""

    def test_delimiters_removed(self, cow_passage, brackets):
        """Learners cannot see which words are answers."""
        assert selectable_words(cow_passage, brackets) == [
            "The", "cow", "jumped", "over", "the", "moon",
        ]

    def test_markup_positions_are_blank(self, brackets):
        """Tag words keep their position but show nothing."""
        assert selectable_words("<b>The</b> [cow]", brackets) == ["", "", "The", "", "", "cow"]

    def test_hyperlink_content_removed(self, brackets):
        """Anchors and the text inside them are not selectable."""
        words = selectable_words(LINK_PASSAGE, brackets)
        assert words[0] == "Listen"
        assert words[-1] == "now"
        assert "clip" not in words

    def test_only_configured_delimiters_stripped(self, brackets):
        """Other bracket characters are kept."""
        assert selectable_words("{x} [y]", brackets) == ["{x}", "y"]

    @pytest.mark.parametrize(
        "text",
        [
            "The cow [jumped] over [the] moon",
            "<p>[one]</p>\n\n[two]  three [four]",
            LINK_PASSAGE,
            '<table><tr><td class="c">[a]</td><td>b</td></tr></table>',
            "",
        ],
    )
    def test_same_positions_as_raw_split(self, text, brackets):
        """One display word per raw token, same order."""
        assert len(selectable_words(text, brackets)) == len(tokenize(text))


class TestSelectableText:
    """Tests for selectable_text."""

    def test_plain_passage(self, cow_passage, brackets):
        assert selectable_text(cow_passage, brackets) == "The cow jumped over the moon"

    def test_links_and_tags_removed(self, brackets):
        """Link content goes, text inside other tags stays."""
        assert selectable_text(LINK_PASSAGE, brackets) == "Listen now"
        assert selectable_text("<p>The <b>[cow]</b></p>", brackets) == "The cow"

    def test_entities_decoded(self, brackets):
        assert selectable_text("Fish &amp; [chips]", brackets) == "Fish & chips"

    def test_empty_passage(self, brackets):
        assert selectable_text("", brackets) == ""


class TestExpectedFields:
    """Tests for expected_fields."""

    def test_one_field_per_place(self, cow_passage, brackets):
        assert expected_fields(cow_passage, brackets) == ["p0", "p1", "p2", "p3", "p4", "p5"]

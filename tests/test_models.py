"""Tests for passage, response and result models."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from wordselect.exceptions import MalformedInputError
from wordselect.models.passage import DelimiterPair, Token
from wordselect.models.response import (
    SelectionState,
    field_name,
    place_from_field,
    selection_state,
)
from wordselect.models.results import (
    FinalGradeResult,
    GradedState,
    GradeResult,
    graded_state_for_fraction,
)


class TestDelimiterPair:
    """Tests for DelimiterPair."""

    def test_defaults(self):
        pair = DelimiterPair()
        assert (pair.left, pair.right) == ("[", "]")

    def test_from_string_round_trip(self):
        pair = DelimiterPair.from_string("{}")
        assert pair.left == "{"
        assert pair.to_string() == "{}"

    def test_default_from_config(self):
        assert DelimiterPair.default() == DelimiterPair(left="[", right="]")

    @pytest.mark.parametrize("left,right", [("", "]"), ("[[", "]"), ("[", "")])
    def test_single_characters_required(self, left, right):
        with pytest.raises(MalformedInputError):
            DelimiterPair(left=left, right=right)

    def test_distinct_characters_required(self):
        with pytest.raises(MalformedInputError) as exc_info:
            DelimiterPair(left="*", right="*")
        assert exc_info.value.error_type == "MALFORMED_INPUT"

    @pytest.mark.parametrize("value", ["[", "[]]", ""])
    def test_from_string_length(self, value):
        with pytest.raises(MalformedInputError):
            DelimiterPair.from_string(value)

    def test_hashable(self):
        """Equal pairs hash equally so they can key caches."""
        assert hash(DelimiterPair.from_string("[]")) == hash(DelimiterPair())


class TestToken:
    """Tests for Token."""

    def test_immutable(self):
        token = Token(index=0, text="[cow]", is_correct=True)
        with pytest.raises(ValidationError):
            token.text = "dog"

    def test_index_non_negative(self):
        with pytest.raises(ValidationError):
            Token(index=-1, text="x")


class TestResponseKeys:
    """Tests for field_name, place_from_field and selection_state."""

    def test_field_name(self):
        assert field_name(7) == "p7"

    @pytest.mark.parametrize(
        "key,place",
        [
            ("p0", 0), ("p12", 12), ("x1", None), ("p", None), ("p-1", None), ("answer", None),
            ("p2\n", None), ("p\u0662", None), ("p02", None), ("P2", None),
        ],
    )
    def test_place_from_field(self, key, place):
        assert place_from_field(key) == place

    def test_selection_states(self):
        response = {"p0": "on", "p1": "true", "p2": ""}
        assert selection_state(0, response) is SelectionState.SELECTED
        assert selection_state(1, response) is SelectionState.SELECTED
        assert selection_state(2, response) is SelectionState.UNSELECTED
        assert selection_state(3, response) is SelectionState.ABSENT


class TestGradedState:
    """Tests for graded_state_for_fraction and result models."""

    @pytest.mark.parametrize(
        "fraction,state",
        [
            (0.0, GradedState.GRADED_WRONG),
            (0.00000001, GradedState.GRADED_WRONG),
            (0.0000005, GradedState.GRADED_WRONG),
            (0.000002, GradedState.GRADED_PARTIAL),
            (0.9999995, GradedState.GRADED_RIGHT),
            (0.5, GradedState.GRADED_PARTIAL),
            (0.99999999, GradedState.GRADED_RIGHT),
            (1.0, GradedState.GRADED_RIGHT),
        ],
    )
    def test_state_for_fraction(self, fraction, state):
        assert graded_state_for_fraction(fraction) == state

    def test_fraction_bounds_enforced(self):
        with pytest.raises(ValidationError):
            GradeResult(fraction=1.5, right_count=1, wrong_count=0)
        with pytest.raises(ValidationError):
            FinalGradeResult(fraction=-0.1)

    def test_to_dict(self):
        result = GradeResult(fraction=0.5, right_count=1, wrong_count=0)
        assert result.to_dict() == {
            "fraction": 0.5,
            "right_count": 1,
            "wrong_count": 0,
            "state": "gradedpartial",
        }
        assert FinalGradeResult(fraction=1.0).to_dict()["state"] == "gradedright"

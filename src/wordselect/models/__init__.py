"""Data models for passages, responses and grades."""
from wordselect.models.passage import DelimiterPair, Token
from wordselect.models.response import (
    AttemptSequence,
    Response,
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

__all__ = [
    "DelimiterPair",
    "Token",
    "AttemptSequence",
    "Response",
    "SelectionState",
    "field_name",
    "place_from_field",
    "selection_state",
    "FinalGradeResult",
    "GradedState",
    "GradeResult",
    "graded_state_for_fraction",
]

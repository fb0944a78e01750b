"""Word-select grading core.

Tokenizes a passage whose correct words are wrapped in delimiters
(``The cow [jumped]``), scores a learner's selection with partial credit,
and aggregates successive attempts into a final grade.

Usage:
    from wordselect import DelimiterPair, correct_places, evaluate

    places = correct_places("The cow [jumped] over [the] moon", DelimiterPair())
    evaluate(places, {"p2": "on"}).fraction  # 0.5
"""
from wordselect.exceptions import ConfigurationError, MalformedInputError, WordSelectError
from wordselect.models import (
    DelimiterPair,
    FinalGradeResult,
    GradedState,
    GradeResult,
    SelectionState,
    Token,
    field_name,
    graded_state_for_fraction,
    place_from_field,
    selection_state,
)
from wordselect.text import (
    build_tokens,
    correct_places,
    expand_markup,
    expected_fields,
    selectable_text,
    selectable_words,
    tokenize,
)
from wordselect.scoring import (
    correct_response,
    evaluate,
    final_grade,
    grade_response,
    is_complete_response,
    is_same_response,
    is_selected,
    summarise,
    validation_error,
    wrong_response_count,
)
from wordselect.question import WordSelectQuestion

__all__ = [
    # Errors
    "ConfigurationError",
    "MalformedInputError",
    "WordSelectError",
    # Models
    "DelimiterPair",
    "FinalGradeResult",
    "GradedState",
    "GradeResult",
    "SelectionState",
    "Token",
    "field_name",
    "graded_state_for_fraction",
    "place_from_field",
    "selection_state",
    # Text
    "build_tokens",
    "correct_places",
    "expand_markup",
    "expected_fields",
    "selectable_text",
    "selectable_words",
    "tokenize",
    # Scoring
    "correct_response",
    "evaluate",
    "final_grade",
    "grade_response",
    "is_complete_response",
    "is_same_response",
    "is_selected",
    "summarise",
    "validation_error",
    "wrong_response_count",
    # Facade
    "WordSelectQuestion",
]

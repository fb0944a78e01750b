"""Scoring modules for word-select questions.

This package contains:
- evaluator.py: Single-response grading and response helpers
- aggregator.py: Final grade across attempts with per-attempt penalty
"""
from wordselect.scoring.evaluator import (
    correct_response,
    evaluate,
    grade_response,
    is_complete_response,
    is_same_response,
    is_selected,
    summarise,
    validation_error,
    wrong_response_count,
)
from wordselect.scoring.aggregator import final_grade, place_credit

__all__ = [
    # Single response
    "correct_response",
    "evaluate",
    "grade_response",
    "is_complete_response",
    "is_same_response",
    "is_selected",
    "summarise",
    "validation_error",
    "wrong_response_count",
    # Attempts
    "final_grade",
    "place_credit",
]

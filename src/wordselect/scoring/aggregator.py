"""Final grade over a sequence of attempts at one question.

For each correct place the attempts are scanned in order:
- ``last_wrong_index``: index of the latest attempt where the place was absent
- ``finally_right``: whether the place is present in the last attempt

A place that ends up right earns ``max(0, 1 - (last_wrong_index + 1) * penalty)``.
Wrong selections on the first attempt are then subtracted once, as a
fraction of the number of correct places.
"""
from __future__ import annotations

from typing import Collection

import structlog

from wordselect.exceptions import MalformedInputError
from wordselect.models.response import AttemptSequence, field_name
from wordselect.models.results import FinalGradeResult
from wordselect.scoring.evaluator import require_correct_places, wrong_response_count

logger = structlog.get_logger(__name__)


def validate_penalty(penalty: float) -> float:
    if not 0.0 <= penalty <= 1.0:
        raise MalformedInputError(f"Penalty per attempt must be between 0 and 1, got {penalty!r}")
    return float(penalty)


def place_credit(place: int, attempts: AttemptSequence, penalty: float) -> float:
    """Credit for one correct place after every attempt has been seen."""
    key = field_name(place)
    last_wrong_index = -1
    finally_right = False
    for i, response in enumerate(attempts):
        if key not in response:
            last_wrong_index = i
            finally_right = False
        else:
            finally_right = True

    if not finally_right:
        return 0.0
    return max(0.0, 1 - (last_wrong_index + 1) * penalty)


def final_grade(
    attempts: AttemptSequence,
    correct_places: Collection[int],
    penalty: float,
) -> FinalGradeResult:
    """Aggregate the attempts into one fraction.

    Args:
        attempts: Responses in submission order, index 0 first
        correct_places: Output of ``correct_places`` for the passage
        penalty: Credit removed per attempt a place spent unselected

    Raises:
        ConfigurationError: no correct places
        MalformedInputError: penalty outside [0, 1]
    """
    penalty = validate_penalty(penalty)
    total = require_correct_places(correct_places)

    total_score = sum(place_credit(place, attempts, penalty) for place in correct_places)
    wrong = wrong_response_count(correct_places, attempts[0]) if attempts else 0

    fraction = max(0.0, total_score / total - wrong / total)
    result = FinalGradeResult(fraction=min(1.0, fraction))

    logger.debug(
        "final_grade_computed",
        attempt_count=len(attempts),
        correct_count=total,
        first_attempt_wrong=wrong,
        penalty=penalty,
        fraction=round(result.fraction, 3),
    )
    return result

"""Single-response grading for word-select questions.

Scoring:
- right: correct places selected (value "on" or "true")
- wrong: other places submitted as "on"
- fraction = max(0, right / n - wrong / n), n = number of correct places
"""
from __future__ import annotations

from typing import Collection, Sequence

import structlog

from wordselect.config.loader import get_message
from wordselect.exceptions import ConfigurationError
from wordselect.models.passage import DelimiterPair
from wordselect.models.response import (
    WRONG_SELECTION_VALUE,
    Response,
    SelectionState,
    field_name,
    place_from_field,
    selection_state,
)
from wordselect.models.results import GradedState, GradeResult
from wordselect.text.correctness import correct_places as find_correct_places

logger = structlog.get_logger(__name__)


def require_correct_places(correct_places: Collection[int]) -> int:
    """Return the number of correct places, refusing an empty set."""
    if not correct_places:
        logger.warning("no_correct_places")
        raise ConfigurationError()
    return len(correct_places)


def is_selected(place: int, response: Response) -> bool:
    return selection_state(place, response) is SelectionState.SELECTED


def is_complete_response(response: Response) -> bool:
    """Has at least one word been selected?"""
    return any(value == "on" for value in response.values())


def validation_error(response: Response) -> str:
    """Message to show the learner, or "" when the response is acceptable."""
    if not is_complete_response(response):
        return get_message("please_select_an_answer", "Please select an answer.")
    return ""


def is_same_response(prev_response: Response, new_response: Response) -> bool:
    """True when nothing changed, so the host can skip re-grading."""
    return dict(prev_response) == dict(new_response)


def wrong_response_count(correct_places: Collection[int], response: Response) -> int:
    """Count places submitted as "on" that are not correct places.

    Keys that do not name a place (``p<digits>``) can never be correct.
    """
    correct = set(correct_places)
    wrong = 0
    for key, value in response.items():
        if value != WRONG_SELECTION_VALUE:
            continue
        if place_from_field(key) not in correct:
            wrong += 1
    return wrong


def evaluate(correct_places: Collection[int], response: Response) -> GradeResult:
    """Score one response against the correct places.

    Raises:
        ConfigurationError: no correct places, so the ratio is undefined.
    """
    total = require_correct_places(correct_places)
    wrong = wrong_response_count(correct_places, response)
    right = sum(1 for place in correct_places if is_selected(place, response))

    fraction = max(0.0, right / total - wrong / total)
    result = GradeResult(fraction=min(1.0, fraction), right_count=right, wrong_count=wrong)

    logger.debug(
        "response_graded",
        right_count=right,
        wrong_count=wrong,
        correct_count=total,
        fraction=round(result.fraction, 3),
    )
    return result


def grade_response(correct_places: Collection[int], response: Response) -> tuple[float, GradedState]:
    """Fraction and graded state, the pair the attempt engine records."""
    result = evaluate(correct_places, response)
    return result.fraction, result.state


def correct_response(text: str, delimiters: DelimiterPair) -> dict[str, str]:
    """The response that earns full marks: every correct place "on"."""
    return {field_name(place): "on" for place in find_correct_places(text, delimiters)}


def summarise(response: Response, words: Sequence[str]) -> str:
    """Words for each place in the response, in the response's own order."""
    summary: list[str] = []
    for key in response:
        place = place_from_field(key)
        if place is None or place >= len(words):
            logger.debug("summary_key_skipped", key=key)
            continue
        summary.append(words[place])
    return " ".join(summary)

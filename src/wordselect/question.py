"""Word-select question facade.

Holds one question's text, delimiters and penalty and hands them to the
pure functions in ``wordselect.text`` and ``wordselect.scoring``. Nothing is
accumulated between calls; each grading call returns its own result.
"""
from __future__ import annotations

from typing import Optional, Union

import structlog

from wordselect.config.loader import get_default_penalty
from wordselect.models.passage import DelimiterPair, Token
from wordselect.models.response import AttemptSequence, Response, field_name
from wordselect.models.results import FinalGradeResult, GradedState, GradeResult
from wordselect.scoring import aggregator, evaluator
from wordselect.text import correctness, display

logger = structlog.get_logger(__name__)


class WordSelectQuestion:
    """One word-select question: passage, delimiters and per-attempt penalty."""

    def __init__(
        self,
        questiontext: str,
        delimiters: Union[DelimiterPair, str, None] = None,
        penalty: Optional[float] = None,
    ) -> None:
        if delimiters is None:
            delimiters = DelimiterPair.default()
        elif isinstance(delimiters, str):
            delimiters = DelimiterPair.from_string(delimiters)
        self.questiontext = questiontext
        self.delimiters = delimiters
        self.penalty = aggregator.validate_penalty(
            get_default_penalty() if penalty is None else penalty
        )
        self._correct_places = tuple(correctness.correct_places(questiontext, delimiters))
        if not self._correct_places:
            logger.warning("question_has_no_correct_places", delimiters=delimiters.to_string())

    @property
    def correct_places(self) -> tuple[int, ...]:
        """Correct places, computed once when the question is set up."""
        return self._correct_places

    def field(self, place: int) -> str:
        return field_name(place)

    def tokens(self) -> list[Token]:
        """Raw token records with correctness flags."""
        return correctness.build_tokens(self.questiontext, self.delimiters)

    def get_words(self) -> list[str]:
        """Display word for every place, delimiters and markup hidden."""
        return display.selectable_words(self.questiontext, self.delimiters)

    def get_selectable_text(self) -> str:
        return display.selectable_text(self.questiontext, self.delimiters)

    def get_expected_data(self) -> list[str]:
        """Response keys the host form may submit."""
        return display.expected_fields(self.questiontext, self.delimiters)

    def is_correct_place(self, place: int) -> bool:
        return place in self._correct_places

    def is_word_selected(self, place: int, response: Response) -> bool:
        return evaluator.is_selected(place, response)

    def is_complete_response(self, response: Response) -> bool:
        return evaluator.is_complete_response(response)

    def get_validation_error(self, response: Response) -> str:
        return evaluator.validation_error(response)

    def is_same_response(self, prev_response: Response, new_response: Response) -> bool:
        return evaluator.is_same_response(prev_response, new_response)

    def get_correct_response(self) -> dict[str, str]:
        """Response that earns full marks."""
        return evaluator.correct_response(self.questiontext, self.delimiters)

    def summarise_response(self, response: Response) -> str:
        """Display words of the submitted places, for response reports."""
        return evaluator.summarise(response, self.get_words())

    def evaluate(self, response: Response) -> GradeResult:
        """Score one response; raises ConfigurationError if nothing is marked correct."""
        return evaluator.evaluate(self._correct_places, response)

    def grade_response(self, response: Response) -> tuple[float, GradedState]:
        """Fraction and graded state for one response."""
        return evaluator.grade_response(self._correct_places, response)

    def compute_final_grade(self, responses: AttemptSequence) -> FinalGradeResult:
        """Aggregate grade for deferred-feedback attempts using this question's penalty."""
        return aggregator.final_grade(responses, self._correct_places, self.penalty)

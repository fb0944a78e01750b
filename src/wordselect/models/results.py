"""Grading result models."""
from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from wordselect.config.loader import get_state_tolerance


class GradedState(str, Enum):
    """Terminal state label reported to the host with the fraction."""
    GRADED_RIGHT = "gradedright"
    GRADED_PARTIAL = "gradedpartial"
    GRADED_WRONG = "gradedwrong"


def graded_state_for_fraction(fraction: float, tolerance: Optional[float] = None) -> GradedState:
    """Map a fraction to right / partial / wrong.

    Fractions within ``tolerance`` of 0 are wrong and within ``tolerance``
    of 1 are right.
    """
    if tolerance is None:
        tolerance = get_state_tolerance()
    if fraction < tolerance:
        return GradedState.GRADED_WRONG
    if fraction > 1 - tolerance:
        return GradedState.GRADED_RIGHT
    return GradedState.GRADED_PARTIAL


class GradeResult(BaseModel):
    """Score for a single response."""
    model_config = ConfigDict(frozen=True)

    fraction: float = Field(ge=0.0, le=1.0)
    right_count: int = Field(ge=0, description="Correct places that were selected")
    wrong_count: int = Field(ge=0, description="Selected places that are not correct")

    @property
    def state(self) -> GradedState:
        return graded_state_for_fraction(self.fraction)

    def to_dict(self) -> dict[str, Any]:
        return {
            "fraction": round(self.fraction, 7),
            "right_count": self.right_count,
            "wrong_count": self.wrong_count,
            "state": self.state.value,
        }


class FinalGradeResult(BaseModel):
    """Aggregate score over every attempt at one question."""
    model_config = ConfigDict(frozen=True)

    fraction: float = Field(ge=0.0, le=1.0)

    @property
    def state(self) -> GradedState:
        return graded_state_for_fraction(self.fraction)

    def to_dict(self) -> dict[str, Any]:
        return {
            "fraction": round(self.fraction, 7),
            "state": self.state.value,
        }

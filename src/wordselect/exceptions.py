"""Typed errors raised by the word-select grading core."""
from __future__ import annotations


class WordSelectError(Exception):
    """Base class for grading errors with user-friendly messaging."""

    def __init__(self, error_type: str, message: str, details: str = ""):
        self.error_type = error_type
        self.message = message
        self.details = details
        super().__init__(self.message)

    def get_user_message(self) -> str:
        """Return a user-friendly error message."""
        msg = self.message
        if self.details:
            msg += f"\n   Details: {self.details}"
        return msg


class ConfigurationError(WordSelectError):
    """The passage has no correct places, so no fraction can be computed."""

    def __init__(self, details: str = ""):
        super().__init__(
            error_type="NO_CORRECT_PLACES",
            message="Question has no correct words marked with the configured delimiters",
            details=details or "Check that the question text wraps answers in the delimiter characters",
        )


class MalformedInputError(WordSelectError):
    """Delimiter or penalty configuration is invalid."""

    def __init__(self, details: str):
        super().__init__(
            error_type="MALFORMED_INPUT",
            message="Invalid word-select configuration",
            details=details,
        )

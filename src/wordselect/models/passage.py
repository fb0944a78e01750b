"""Passage-side models: delimiter configuration and positional tokens."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from wordselect.config.loader import get_default_delimiters
from wordselect.exceptions import MalformedInputError


class DelimiterPair(BaseModel):
    """The two characters that wrap a correct word, e.g. ``[cat]``.

    Validation errors are raised as ``MalformedInputError`` so that a bad
    configuration is reported when the question is set up, not while grading.
    """
    model_config = ConfigDict(frozen=True)

    left: str = Field(default="[", description="Opening delimiter character")
    right: str = Field(default="]", description="Closing delimiter character")

    @field_validator("left", "right", mode="before")
    @classmethod
    def require_single_character(cls, v: object) -> str:
        if not isinstance(v, str) or len(v) != 1:
            raise MalformedInputError(
                f"Delimiters must be exactly one character each, got {v!r}"
            )
        return v

    @model_validator(mode="after")
    def require_distinct(self) -> DelimiterPair:
        if self.left == self.right:
            raise MalformedInputError(
                f"Left and right delimiters must differ, both are {self.left!r}"
            )
        return self

    @classmethod
    def from_string(cls, delimitchars: str) -> DelimiterPair:
        """Build from the two-character storage form, e.g. ``"[]"`` or ``"{}"``."""
        if not isinstance(delimitchars, str) or len(delimitchars) != 2:
            raise MalformedInputError(
                f"Delimiter string must be exactly two characters, got {delimitchars!r}"
            )
        return cls(left=delimitchars[0], right=delimitchars[1])

    @classmethod
    def default(cls) -> DelimiterPair:
        """Delimiters from the grading configuration."""
        return cls.from_string(get_default_delimiters())

    def to_string(self) -> str:
        return self.left + self.right


class Token(BaseModel):
    """One whitespace-delimited span of the markup-expanded passage."""
    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0, description="0-based position in the raw split")
    text: str = Field(description="Raw token text, delimiters intact")
    is_correct: bool = False

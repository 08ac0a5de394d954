"""Repetition generation data models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

NEWLINE = "\n"
SPACE = " "


class GenerationOptions(BaseModel):
    """Formatting options for one generation call.

    Any combination is accepted. When both enumerators are set, numbering
    takes precedence over percentages.
    """

    model_config = ConfigDict(frozen=True)

    add_period: bool = False
    add_new_line: bool = False
    add_space: bool = False
    add_numbers: bool = False
    add_percentages: bool = False

    @property
    def separator(self) -> str:
        """Joiner between occurrences: newline first, then space."""
        separator = ""
        if self.add_new_line:
            separator += NEWLINE
        if self.add_space:
            separator += SPACE
        return separator

    @property
    def has_enumerator(self) -> bool:
        return self.add_numbers or self.add_percentages


class GenerationRequest(BaseModel):
    """Input for a single generation."""

    base_text: str
    repetitions: int
    options: GenerationOptions = Field(default_factory=GenerationOptions)

    @field_validator("repetitions", mode="before")
    @classmethod
    def _require_integer(cls, value: Any) -> Any:
        # Reject bools, floats (even integral ones or NaN) and numeric strings
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(
                f"repetitions must be an integer, got {type(value).__name__}"
            )
        return value


class GenerationResult(BaseModel):
    """Fully materialized output of a generation."""

    repeated_text: str = ""
    repetitions: int = 0
    separator: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.repeated_text


class TextStats(BaseModel):
    """Size of a piece of text as shown to the user."""

    characters: int = 0
    words: int = 0


class DisplayText(BaseModel):
    """Text prepared for display, possibly truncated in the middle."""

    text: str
    truncated: bool = False
    total_characters: int = 0

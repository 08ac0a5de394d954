"""Custom exceptions for the text repeater."""

from typing import Any


class RepeaterError(Exception):
    """Base exception for the text repeater."""

    status_code: int = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(RepeaterError):
    """Validation error."""

    status_code = 422


class RepetitionLimitError(ValidationError):
    """Repetition count above the configured ceiling."""

    def __init__(self, repetitions: int, limit: int):
        super().__init__(
            f"Repetition count {repetitions} exceeds the limit of {limit}",
            {"repetitions": repetitions, "limit": limit},
        )


class LargeRepetitionError(RepeaterError):
    """Large generation requested without confirmation."""

    status_code = 409

    def __init__(self, repetitions: int, threshold: int):
        super().__init__(
            f"Generating {repetitions} repetitions might take a moment; "
            "resubmit with confirm_large to continue",
            {"repetitions": repetitions, "threshold": threshold},
        )


class StyleNotFoundError(RepeaterError):
    """Style not found in the catalog."""

    status_code = 404

    def __init__(self, style_name: str):
        super().__init__(
            f"Style not found: {style_name}",
            {"style": style_name},
        )


class CatalogError(RepeaterError):
    """The style catalog violates one of its invariants."""

    def __init__(self, message: str, names: list[str] | None = None):
        details = {}
        if names:
            details["names"] = names
        super().__init__(f"Invalid style catalog: {message}", details)


class GenerationCancelledError(RepeaterError):
    """Generation was cancelled between batches."""

    def __init__(self, produced: int, repetitions: int):
        super().__init__(
            f"Generation cancelled after {produced} of {repetitions} repetitions",
            {"produced": produced, "repetitions": repetitions},
        )
        self.produced = produced
        self.repetitions = repetitions

"""Data models for the text repeater."""

from repeater.models.generation import (
    DisplayText,
    GenerationOptions,
    GenerationRequest,
    GenerationResult,
    TextStats,
)
from repeater.models.style import (
    PLACEHOLDER,
    Directive,
    FormatKind,
    LiteralTemplate,
    StyleCategoryInfo,
    StyleInfo,
    StyleTemplate,
    TimeDirectiveTemplate,
)

__all__ = [
    # Generation models
    "GenerationOptions",
    "GenerationRequest",
    "GenerationResult",
    "TextStats",
    "DisplayText",
    # Style models
    "PLACEHOLDER",
    "FormatKind",
    "Directive",
    "LiteralTemplate",
    "TimeDirectiveTemplate",
    "StyleTemplate",
    "StyleInfo",
    "StyleCategoryInfo",
]

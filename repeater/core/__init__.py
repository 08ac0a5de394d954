"""Core functionality for the text repeater."""

from repeater.core.exceptions import (
    CatalogError,
    GenerationCancelledError,
    LargeRepetitionError,
    RepeaterError,
    RepetitionLimitError,
    StyleNotFoundError,
    ValidationError,
)
from repeater.core.generator import RepetitionGenerator, generate, get_generator
from repeater.core.options import ensure_exclusive_enumerators, toggle_option
from repeater.core.stats import display_text, text_stats
from repeater.core.styles import NORMAL_STYLE, StyleRegistry, get_style_registry
from repeater.core.styling import (
    StyleApplicator,
    apply_style,
    apply_style_for_options,
    preview_style,
)

__all__ = [
    "RepeaterError",
    "ValidationError",
    "RepetitionLimitError",
    "LargeRepetitionError",
    "StyleNotFoundError",
    "CatalogError",
    "GenerationCancelledError",
    "RepetitionGenerator",
    "generate",
    "get_generator",
    "toggle_option",
    "ensure_exclusive_enumerators",
    "text_stats",
    "display_text",
    "NORMAL_STYLE",
    "StyleRegistry",
    "get_style_registry",
    "StyleApplicator",
    "apply_style",
    "apply_style_for_options",
    "preview_style",
]

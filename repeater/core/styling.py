"""Apply style templates to generated text."""

from datetime import datetime

from repeater.core.styles import NORMAL_STYLE, StyleRegistry, get_style_registry
from repeater.models.generation import GenerationOptions
from repeater.models.style import substitute
from repeater.utils.logging import get_logger

logger = get_logger(__name__)

WORD_SEPARATOR = " "


class StyleApplicator:
    """Wraps text with catalog templates.

    Unknown style names and ``Normal`` are identity transforms, never errors.
    """

    def __init__(self, registry: StyleRegistry | None = None):
        self.registry = registry or get_style_registry()

    def resolve(self, style_name: str, now: datetime | None = None) -> str | None:
        """Concrete pattern for a style at ``now``, or None for a no-op style."""
        if style_name == NORMAL_STYLE:
            return None
        template = self.registry.get(style_name)
        if template is None:
            return None
        return template.resolve(now)

    def apply(
        self,
        text: str,
        style_name: str,
        separator: str = "",
        now: datetime | None = None,
    ) -> str:
        """Style text produced with ``separator`` between occurrences.

        Without a separator the occurrences cannot be told apart, so the
        whole text is wrapped once. With one, every non-blank part is wrapped
        and the parts are joined back with the same separator.
        """
        if not text:
            return text

        pattern = self.resolve(style_name, now)
        if pattern is None:
            return text

        if not separator:
            styled = substitute(pattern, text)
        else:
            styled = separator.join(
                substitute(pattern, part) if part.strip() else part
                for part in text.split(separator)
            )

        logger.debug(
            "style.applied",
            style=style_name,
            separator=repr(separator),
            length=len(styled),
        )
        return styled

    def preview(
        self,
        sample_text: str,
        style_name: str,
        now: datetime | None = None,
    ) -> str:
        """Preview a style on sample text, one wrap per space-delimited word."""
        pattern = self.resolve(style_name, now)
        if pattern is None:
            return sample_text

        words = sample_text.split(WORD_SEPARATOR)
        if len(words) > 1:
            return WORD_SEPARATOR.join(substitute(pattern, word) for word in words)
        return substitute(pattern, sample_text)


def get_style_applicator() -> StyleApplicator:
    return StyleApplicator()


def apply_style(
    text: str,
    style_name: str,
    separator: str = "",
    now: datetime | None = None,
) -> str:
    """Style text using the shared catalog."""
    return get_style_applicator().apply(text, style_name, separator, now)


def apply_style_for_options(
    text: str,
    style_name: str,
    options: GenerationOptions,
    now: datetime | None = None,
) -> str:
    """Style text using the separator the given options generate with."""
    return apply_style(text, style_name, options.separator, now)


def preview_style(sample_text: str, style_name: str, now: datetime | None = None) -> str:
    """Preview a style using the shared catalog."""
    return get_style_applicator().preview(sample_text, style_name, now)

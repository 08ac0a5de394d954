"""Output statistics and display helpers."""

from repeater.models.generation import DisplayText, TextStats

TRUNCATION_MARKER = "\n\n... (text truncated for display) ...\n\n"


def count_words(text: str) -> int:
    """Number of non-empty whitespace-separated tokens."""
    return len(text.split())


def text_stats(text: str) -> TextStats:
    return TextStats(characters=len(text), words=count_words(text))


def display_text(text: str, threshold: int = 100_000, edge: int = 5000) -> DisplayText:
    """Keep only the head and tail of text longer than ``threshold``."""
    total = len(text)
    if total <= threshold:
        return DisplayText(text=text, truncated=False, total_characters=total)

    return DisplayText(
        text=text[:edge] + TRUNCATION_MARKER + text[total - edge :],
        truncated=True,
        total_characters=total,
    )

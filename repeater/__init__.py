"""Text Repeater: repetition generation and decorative styling engine."""

__version__ = "0.1.0"

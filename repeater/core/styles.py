"""Static catalog of decorative style templates."""

from functools import lru_cache
from typing import Iterable, Mapping

from repeater.core.exceptions import CatalogError
from repeater.models.style import (
    PLACEHOLDER,
    Directive,
    FormatKind,
    LiteralTemplate,
    StyleTemplate,
    TimeDirectiveTemplate,
)
from repeater.utils.logging import get_logger

logger = get_logger(__name__)

NORMAL_STYLE = "Normal"

_TIME = Directive(FormatKind.SHORT_TIME)
_TIME_12H = Directive(FormatKind.SHORT_TIME_MERIDIEM)
_HMS = Directive(FormatKind.PADDED_HMS)
_DATE = Directive(FormatKind.SHORT_DATE)


def _literal(patterns: dict[str, str]) -> dict[str, StyleTemplate]:
    return {name: LiteralTemplate(pattern) for name, pattern in patterns.items()}


STYLE_TEMPLATES: dict[str, StyleTemplate] = {
    # Basic
    NORMAL_STYLE: LiteralTemplate(PLACEHOLDER),
    # Hearts & Love
    **_literal(
        {
            "Hearts": "♥♥♥ $TEXT$ ♥♥♥",
            "Love": "💖 $TEXT$ 💖",
            "Forever": "$TEXT$ Forever ❤️",
            "Heart Arrow": "💘 $TEXT$ 💘",
            "Double Hearts": "💕 $TEXT$ 💕",
            "Sparkling Heart": "💖✨ $TEXT$ ✨💖",
            "Heart Eyes": "😍 $TEXT$ 😍",
            "Kiss Heart": "😘 $TEXT$ 😘",
            "Cupid Love": "💘💕 $TEXT$ 💕💘",
            "Romantic": "💝 $TEXT$ 💝",
        }
    ),
    # Stars & Sparkles
    **_literal(
        {
            "Stars": "★·.·´¯`·.·★ $TEXT$ ★·.·´¯`·.·★",
            "Sparkles": "✨💫 $TEXT$ 💫✨",
            "Star Eyes": "🤩 $TEXT$ 🤩",
            "Shooting Star": "🌟 $TEXT$ 🌟",
            "Twinkling": "✨⭐ $TEXT$ ⭐✨",
            "Glitter": "✨🌟✨ $TEXT$ ✨🌟✨",
            "Starry Night": "🌙⭐ $TEXT$ ⭐🌙",
            "Magical": "🪄✨ $TEXT$ ✨🪄",
        }
    ),
    # Flowers & Nature
    **_literal(
        {
            "Roses": "🌹 $TEXT$ 🌹",
            "Cherry Blossom": "🌸 $TEXT$ 🌸",
            "Sunflower": "🌻 $TEXT$ 🌻",
            "Tulip": "🌷 $TEXT$ 🌷",
            "Hibiscus": "🌺 $TEXT$ 🌺",
            "Bouquet": "💐 $TEXT$ 💐",
            "Garden": "🌸🌺 $TEXT$ 🌺🌸",
            "Spring": "🌷🌸 $TEXT$ 🌸🌷",
        }
    ),
    # Decorative borders
    **_literal(
        {
            "Fancy": "•°¯`•• $TEXT$ ••´¯°•",
            "Waves": "≈≈≈≈ $TEXT$ ≈≈≈≈",
            "Ornate": "◆◇◆ $TEXT$ ◆◇◆",
            "Elegant": "═══ $TEXT$ ═══",
            "Royal": "♔ $TEXT$ ♔",
            "Crown": "👑 $TEXT$ 👑",
            "Diamond": "💎 $TEXT$ 💎",
            "Gem": "💎✨ $TEXT$ ✨💎",
        }
    ),
    # Arrows & Symbols
    **_literal(
        {
            "Arrow Left": "← $TEXT$ →",
            "Arrow Right": "→ $TEXT$ ←",
            "Double Arrow": "⇆ $TEXT$ ⇆",
            "Pointing": "👉 $TEXT$ 👈",
            "Up Arrow": "↑ $TEXT$ ↑",
            "Circle Arrow": "↻ $TEXT$ ↺",
        }
    ),
    # Brackets & Frames
    **_literal(
        {
            "Square Brackets": "[ $TEXT$ ]",
            "Curly Brackets": "{ $TEXT$ }",
            "Angle Brackets": "⟨ $TEXT$ ⟩",
            "Double Brackets": "⟦ $TEXT$ ⟧",
            "Corner Brackets": "「 $TEXT$ 」",
            "Rounded": "( $TEXT$ )",
            "Heavy Brackets": "【 $TEXT$ 】",
        }
    ),
    # Fire & Energy
    **_literal(
        {
            "Fire": "🔥 $TEXT$ 🔥",
            "Lightning": "⚡ $TEXT$ ⚡",
            "Energy": "⚡🔥 $TEXT$ 🔥⚡",
            "Explosion": "💥 $TEXT$ 💥",
            "Spark": "✨⚡ $TEXT$ ⚡✨",
        }
    ),
    # Music & Party
    **_literal(
        {
            "Music": "🎵 $TEXT$ 🎵",
            "Party": "🎉 $TEXT$ 🎉",
            "Celebration": "🎊 $TEXT$ 🎊",
            "Dance": "💃 $TEXT$ 🕺",
            "Disco": "🪩 $TEXT$ 🪩",
        }
    ),
    # Animals & Cute
    **_literal(
        {
            "Cat": "🐱 $TEXT$ 🐱",
            "Dog": "🐶 $TEXT$ 🐶",
            "Bear": "🐻 $TEXT$ 🐻",
            "Panda": "🐼 $TEXT$ 🐼",
            "Unicorn": "🦄 $TEXT$ 🦄",
            "Butterfly": "🦋 $TEXT$ 🦋",
        }
    ),
    # Food & Treats
    **_literal(
        {
            "Cake": "🎂 $TEXT$ 🎂",
            "Ice Cream": "🍦 $TEXT$ 🍦",
            "Candy": "🍭 $TEXT$ 🍭",
            "Cookie": "🍪 $TEXT$ 🍪",
            "Donut": "🍩 $TEXT$ 🍩",
        }
    ),
    # Celestial
    **_literal(
        {
            "Moon": "🌙 $TEXT$ 🌙",
            "Sun": "☀️ $TEXT$ ☀️",
            "Rainbow": "🌈 $TEXT$ 🌈",
            "Cloud": "☁️ $TEXT$ ☁️",
            "Thunder": "⛈️ $TEXT$ ⛈️",
        }
    ),
    # Emojis & Faces
    **_literal(
        {
            "Happy": "😊 $TEXT$ 😊",
            "Excited": "🤗 $TEXT$ 🤗",
            "Cool": "😎 $TEXT$ 😎",
            "Wink": "😉 $TEXT$ 😉",
            "Tongue": "😝 $TEXT$ 😝",
        }
    ),
    # Special characters
    **_literal(
        {
            "Infinity": "∞ $TEXT$ ∞",
            "Peace": "☮️ $TEXT$ ☮️",
            "Yin Yang": "☯️ $TEXT$ ☯️",
            "Anchor": "⚓ $TEXT$ ⚓",
            "Key": "🗝️ $TEXT$ 🗝️",
        }
    ),
    # Geometric
    **_literal(
        {
            "Triangle": "▲ $TEXT$ ▲",
            "Circle": "● $TEXT$ ●",
            "Square": "■ $TEXT$ ■",
            "Hexagon": "⬡ $TEXT$ ⬡",
            "Star Shape": "⭐ $TEXT$ ⭐",
        }
    ),
    # Time & Date: resolved against the current instant on every use
    "With Time": TimeDirectiveTemplate(prefix=("🕒 ",), suffix=(" [", _TIME, "]")),
    "Time Prefix": TimeDirectiveTemplate(prefix=(_TIME, " | ")),
    "Time Suffix": TimeDirectiveTemplate(suffix=(" | ", _TIME)),
    "Digital Time": TimeDirectiveTemplate(prefix=("⏰ ",), suffix=(" (", _TIME, ")")),
    "Date & Time": TimeDirectiveTemplate(
        prefix=("📅 ",), suffix=(" - ", _DATE, " ", _TIME)
    ),
    "Timed Message": TimeDirectiveTemplate(prefix=("[",), suffix=(" @ ", _TIME_12H, "]")),
    "Seconds Counter": TimeDirectiveTemplate(suffix=(" ⏱️ ", _HMS)),
}

STYLE_CATEGORIES: dict[str, tuple[str, ...]] = {
    "Hearts & Love": (
        "Hearts",
        "Love",
        "Forever",
        "Heart Arrow",
        "Double Hearts",
        "Sparkling Heart",
        "Heart Eyes",
        "Kiss Heart",
        "Cupid Love",
        "Romantic",
    ),
    "Stars & Sparkles": (
        "Stars",
        "Sparkles",
        "Star Eyes",
        "Shooting Star",
        "Twinkling",
        "Glitter",
        "Starry Night",
        "Magical",
    ),
    "Flowers & Nature": (
        "Roses",
        "Cherry Blossom",
        "Sunflower",
        "Tulip",
        "Hibiscus",
        "Bouquet",
        "Garden",
        "Spring",
    ),
    "Decorative": ("Fancy", "Waves", "Ornate", "Elegant", "Royal", "Crown", "Diamond", "Gem"),
    "Arrows & Symbols": (
        "Arrow Left",
        "Arrow Right",
        "Double Arrow",
        "Pointing",
        "Up Arrow",
        "Circle Arrow",
    ),
    "Brackets & Frames": (
        "Square Brackets",
        "Curly Brackets",
        "Angle Brackets",
        "Double Brackets",
        "Corner Brackets",
        "Rounded",
        "Heavy Brackets",
    ),
    "Fire & Energy": ("Fire", "Lightning", "Energy", "Explosion", "Spark"),
    "Music & Party": ("Music", "Party", "Celebration", "Dance", "Disco"),
    "Animals & Cute": ("Cat", "Dog", "Bear", "Panda", "Unicorn", "Butterfly"),
    "Food & Treats": ("Cake", "Ice Cream", "Candy", "Cookie", "Donut"),
    "Time & Date": (
        "With Time",
        "Time Prefix",
        "Time Suffix",
        "Digital Time",
        "Date & Time",
        "Timed Message",
        "Seconds Counter",
    ),
    "Celestial": ("Moon", "Sun", "Rainbow", "Cloud", "Thunder"),
    "Emojis & Faces": ("Happy", "Excited", "Cool", "Wink", "Tongue"),
    "Special": ("Infinity", "Peace", "Yin Yang", "Anchor", "Key"),
    "Geometric": ("Triangle", "Circle", "Square", "Hexagon", "Star Shape"),
    "Basic": (NORMAL_STYLE,),
}


class StyleRegistry:
    """Read-only lookup over the style catalog."""

    def __init__(
        self,
        templates: Mapping[str, StyleTemplate] | None = None,
        categories: Mapping[str, Iterable[str]] | None = None,
    ):
        self._templates: dict[str, StyleTemplate] = dict(
            STYLE_TEMPLATES if templates is None else templates
        )
        self._categories: dict[str, tuple[str, ...]] = {
            category: tuple(names)
            for category, names in (
                STYLE_CATEGORIES if categories is None else categories
            ).items()
        }
        self._category_of: dict[str, str] = {}
        for category, names in self._categories.items():
            for name in names:
                self._category_of.setdefault(name, category)

        self._validate()

    def _validate(self) -> None:
        """Check the catalog invariants."""
        missing = [
            name
            for names in self._categories.values()
            for name in names
            if name not in self._templates
        ]
        if missing:
            raise CatalogError("categories reference unknown styles", missing)

        if NORMAL_STYLE not in self._templates:
            raise CatalogError(f"'{NORMAL_STYLE}' style is required")

        bad_patterns = [
            name
            for name, template in self._templates.items()
            if template.describe().count(PLACEHOLDER) != 1
        ]
        if bad_patterns:
            raise CatalogError(
                f"templates must contain exactly one {PLACEHOLDER}", bad_patterns
            )

    def get(self, name: str) -> StyleTemplate | None:
        """Fetch a template by name."""
        return self._templates.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def __len__(self) -> int:
        return len(self._templates)

    def list_styles(self) -> list[tuple[str, StyleTemplate]]:
        """All styles in catalog order."""
        return list(self._templates.items())

    def list_categories(self) -> dict[str, tuple[str, ...]]:
        """Category name to ordered style names, in display order."""
        return dict(self._categories)

    def category_of(self, name: str) -> str | None:
        return self._category_of.get(name)


# Singleton instance
_registry: StyleRegistry | None = None


@lru_cache
def get_style_registry() -> StyleRegistry:
    """Get the style registry singleton."""
    global _registry
    if _registry is None:
        _registry = StyleRegistry()
        logger.info(
            "registry.loaded",
            styles=len(_registry),
            categories=len(_registry.list_categories()),
        )
    return _registry

"""Style template data models.

A template is either a literal pattern with one ``$TEXT$`` placeholder or a
time directive template whose prefix and suffix embed live time/date values.
Directive templates are resolved to a literal pattern on every use.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Union

from pydantic import BaseModel, Field

PLACEHOLDER = "$TEXT$"


class FormatKind(str, Enum):
    """Live value rendered into a directive template."""

    SHORT_TIME = "short_time"
    SHORT_TIME_MERIDIEM = "short_time_meridiem"
    PADDED_HMS = "padded_hms"
    SHORT_DATE = "short_date"


def render_format(kind: FormatKind, now: datetime) -> str:
    """Render a live value for the given instant."""
    if kind is FormatKind.SHORT_TIME:
        return f"{now.hour}:{now.minute:02d}:{now.second:02d}"
    if kind is FormatKind.SHORT_TIME_MERIDIEM:
        hour = now.hour % 12 or 12
        meridiem = "AM" if now.hour < 12 else "PM"
        return f"{hour}:{now.minute:02d}:{now.second:02d} {meridiem}"
    if kind is FormatKind.PADDED_HMS:
        return now.strftime("%H:%M:%S")
    if kind is FormatKind.SHORT_DATE:
        return f"{now.month}/{now.day}/{now.year}"
    raise ValueError(f"Unknown format kind: {kind}")


@dataclass(frozen=True)
class Directive:
    """Marker for a live value inside a directive template."""

    kind: FormatKind

    def render(self, now: datetime) -> str:
        return render_format(self.kind, now)

    def describe(self) -> str:
        return "{" + self.kind.value + "}"


Segment = Union[str, Directive]


def _render_segments(segments: tuple[Segment, ...], now: datetime) -> str:
    return "".join(
        segment.render(now) if isinstance(segment, Directive) else segment
        for segment in segments
    )


def _describe_segments(segments: tuple[Segment, ...]) -> str:
    return "".join(
        segment.describe() if isinstance(segment, Directive) else segment
        for segment in segments
    )


@dataclass(frozen=True)
class LiteralTemplate:
    """Fixed decorative wrapper."""

    pattern: str

    is_live = False

    def resolve(self, now: datetime | None = None) -> str:
        return self.pattern

    def describe(self) -> str:
        return self.pattern


@dataclass(frozen=True)
class TimeDirectiveTemplate:
    """Wrapper whose prefix and suffix carry live time/date values."""

    prefix: tuple[Segment, ...] = ()
    suffix: tuple[Segment, ...] = ()

    is_live = True

    def resolve(self, now: datetime | None = None) -> str:
        """Render every directive against ``now`` (defaults to the current local time)."""
        now = now or datetime.now()
        return (
            _render_segments(self.prefix, now)
            + PLACEHOLDER
            + _render_segments(self.suffix, now)
        )

    def describe(self) -> str:
        return _describe_segments(self.prefix) + PLACEHOLDER + _describe_segments(self.suffix)


StyleTemplate = Union[LiteralTemplate, TimeDirectiveTemplate]


def substitute(pattern: str, text: str) -> str:
    """Insert text at the placeholder of a resolved pattern."""
    return pattern.replace(PLACEHOLDER, text, 1)


class StyleInfo(BaseModel):
    """A catalog entry as exposed to callers."""

    name: str
    category: str | None = None
    template: str
    is_live: bool = False
    preview: str | None = None


class StyleCategoryInfo(BaseModel):
    """A category and its ordered style names."""

    name: str
    styles: list[str] = Field(default_factory=list)

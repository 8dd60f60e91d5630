"""Text layout and styling options with a fluent builder API."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, IntEnum

from zentype.color import Color

GENERIC_FAMILIES = frozenset({"sans-serif", "serif", "monospace"})


class FontWeight(IntEnum):
    """Font weights, valued by their numeric OpenType weight."""

    THIN = 100
    EXTRA_LIGHT = 200
    LIGHT = 300
    REGULAR = 400
    MEDIUM = 500
    SEMI_BOLD = 600
    BOLD = 700
    EXTRA_BOLD = 800
    BLACK = 900


class FontStyle(Enum):
    """Font slant styles."""

    NORMAL = "normal"
    ITALIC = "italic"
    OBLIQUE = "oblique"


class TextWrap(Enum):
    """How text wraps when it exceeds the maximum width."""

    WORD = "word"
    CHARACTER = "character"
    NONE = "none"


class HorizontalAlignment(Enum):
    """Horizontal text alignment."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFIED = "justified"


class VerticalAlignment(Enum):
    """Vertical alignment within the available space."""

    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class Padding:
    """Padding around text, in pixels."""

    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0

    @classmethod
    def all(cls, value: float) -> Padding:
        """The same padding on all four sides."""
        return cls(top=value, right=value, bottom=value, left=value)


@dataclass(frozen=True)
class Attrs:
    """Shaping attributes derived from a set of text options."""

    color: Color | None = None
    weight: int = int(FontWeight.REGULAR)
    style: FontStyle = FontStyle.NORMAL
    family: str = "sans-serif"

    @property
    def is_generic_family(self) -> bool:
        """Whether the family is a generic one rather than a named font."""
        return self.family in GENERIC_FAMILIES


@dataclass(frozen=True)
class TextOptions:
    """Options for rendering a piece of text.

    Each ``with_*`` and padding method returns a new, modified copy.
    """

    x: float = 0.0
    y: float = 0.0
    font_size: float = 16.0
    color: Color = Color.WHITE
    font_family: str | None = None
    font_weight: FontWeight = FontWeight.REGULAR
    font_style: FontStyle = FontStyle.NORMAL
    bg_color: Color | None = None
    padding: Padding = field(default_factory=Padding)
    full_width_bg: bool = False
    max_width: float | None = None
    max_height: float | None = None
    line_height: float = 1.5
    wrap: TextWrap = TextWrap.WORD
    align: HorizontalAlignment | None = None
    valign: VerticalAlignment | None = None

    def at(self, x: float, y: float) -> TextOptions:
        return replace(self, x=x, y=y)

    def with_font_size(self, size: float) -> TextOptions:
        return replace(self, font_size=size)

    def with_color(self, color: Color) -> TextOptions:
        return replace(self, color=color)

    def with_font_family(self, family: str) -> TextOptions:
        return replace(self, font_family=str(family))

    def with_font_weight(self, weight: FontWeight) -> TextOptions:
        return replace(self, font_weight=weight)

    def with_font_style(self, style: FontStyle) -> TextOptions:
        return replace(self, font_style=style)

    def with_bg(self, color: Color) -> TextOptions:
        return replace(self, bg_color=color)

    def with_padding(self, padding: Padding | float) -> TextOptions:
        """Set the padding; a plain number pads all sides equally."""
        if not isinstance(padding, Padding):
            padding = Padding.all(float(padding))
        return replace(self, padding=padding)

    def padding_all(self, value: float) -> TextOptions:
        return replace(self, padding=Padding.all(value))

    def padding_horizontal(self, value: float) -> TextOptions:
        return replace(self, padding=replace(self.padding, left=value, right=value))

    def padding_vertical(self, value: float) -> TextOptions:
        return replace(self, padding=replace(self.padding, top=value, bottom=value))

    def padding_left(self, value: float) -> TextOptions:
        return replace(self, padding=replace(self.padding, left=value))

    def padding_right(self, value: float) -> TextOptions:
        return replace(self, padding=replace(self.padding, right=value))

    def padding_top(self, value: float) -> TextOptions:
        return replace(self, padding=replace(self.padding, top=value))

    def padding_bottom(self, value: float) -> TextOptions:
        return replace(self, padding=replace(self.padding, bottom=value))

    def full_width(self, enabled: bool) -> TextOptions:
        return replace(self, full_width_bg=enabled)

    def with_max_width(self, width: float) -> TextOptions:
        return replace(self, max_width=width)

    def with_max_height(self, height: float) -> TextOptions:
        """Set the maximum height used for vertical alignment."""
        return replace(self, max_height=height)

    def with_line_height(self, height: float) -> TextOptions:
        return replace(self, line_height=height)

    def with_wrap(self, strategy: TextWrap) -> TextOptions:
        return replace(self, wrap=strategy)

    def with_align(self, alignment: HorizontalAlignment) -> TextOptions:
        return replace(self, align=alignment)

    def with_valign(self, alignment: VerticalAlignment) -> TextOptions:
        return replace(self, valign=alignment)

    def as_attrs(self) -> Attrs:
        """Shaping attributes for these options."""
        family = "sans-serif"
        if self.font_family is not None:
            lowered = self.font_family.lower()
            family = lowered if lowered in GENERIC_FAMILIES else self.font_family
        return Attrs(
            color=self.color,
            weight=int(self.font_weight),
            style=self.font_style,
            family=family,
        )
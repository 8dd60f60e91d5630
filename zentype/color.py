"""RGBA colours with 8-bit channels."""

from __future__ import annotations

import string
from dataclasses import dataclass, replace
from typing import ClassVar

_HEX_DIGITS = frozenset(string.hexdigits)


def _parse_channel(text: str, default: int) -> int:
    """Parse one hexadecimal channel; fall back to ``default`` when it is malformed."""
    digits = text[1:] if text.startswith("+") and len(text) > 1 else text
    if not digits or not all(ch in _HEX_DIGITS for ch in digits):
        return default
    value = int(digits, 16)
    return value if value <= 255 else default


@dataclass(frozen=True)
class Color:
    """A colour in RGBA form, each channel in the range 0..255."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    WHITE: ClassVar[Color]
    BLACK: ClassVar[Color]
    TRANSPARENT: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    BLUE: ClassVar[Color]
    YELLOW: ClassVar[Color]
    ORANGE: ClassVar[Color]
    PURPLE: ClassVar[Color]
    PINK: ClassVar[Color]
    GRAY: ClassVar[Color]
    LIGHT_GRAY: ClassVar[Color]
    DARK_GRAY: ClassVar[Color]
    TEAL: ClassVar[Color]
    INDIGO: ClassVar[Color]
    CYAN: ClassVar[Color]
    MAGENTA: ClassVar[Color]
    SKY_BLUE: ClassVar[Color]
    MINT: ClassVar[Color]
    EMERALD: ClassVar[Color]
    AMBER: ClassVar[Color]
    LAVENDER: ClassVar[Color]
    CRIMSON: ClassVar[Color]

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"channel {name} must be an int, got {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"channel {name} out of range 0..255: {value}")

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> Color:
        """Create an opaque colour."""
        return cls(r, g, b, 255)

    @classmethod
    def rgba(cls, r: int, g: int, b: int, a: int) -> Color:
        """Create a colour with an explicit alpha."""
        return cls(r, g, b, a)

    @classmethod
    def hex(cls, hex_str: str) -> Color:
        """Parse ``#RGB``, ``#RGBA``, ``#RRGGBB`` or ``#RRGGBBAA``.

        Malformed channels become 0 (alpha becomes 255); an unsupported
        length yields black.
        """
        h = hex_str.lstrip("#")
        if len(h) in (3, 4):
            parts = [ch * 2 for ch in h]
        elif len(h) in (6, 8):
            parts = [h[i : i + 2] for i in range(0, len(h), 2)]
        else:
            return cls.BLACK
        r, g, b = (_parse_channel(p, 0) for p in parts[:3])
        if len(parts) == 4:
            return cls.rgba(r, g, b, _parse_channel(parts[3], 255))
        return cls.rgb(r, g, b)

    def with_alpha(self, a: int) -> Color:
        """Return a copy with alpha replaced."""
        return replace(self, a=a)

    def to_f32_array(self) -> tuple[float, float, float, float]:
        """Channels normalised to the 0.0..1.0 range."""
        return (self.r / 255.0, self.g / 255.0, self.b / 255.0, self.a / 255.0)

    def to_u32(self) -> int:
        """Pack the colour as ``0xRRGGBBAA``."""
        return (self.r << 24) | (self.g << 16) | (self.b << 8) | self.a


Color.WHITE = Color.rgb(255, 255, 255)
Color.BLACK = Color.rgb(0, 0, 0)
Color.TRANSPARENT = Color.rgba(0, 0, 0, 0)
Color.RED = Color.rgb(255, 59, 48)
Color.GREEN = Color.rgb(52, 199, 89)
Color.BLUE = Color.rgb(0, 122, 255)
Color.YELLOW = Color.rgb(255, 204, 0)
Color.ORANGE = Color.rgb(255, 149, 0)
Color.PURPLE = Color.rgb(175, 82, 222)
Color.PINK = Color.rgb(255, 45, 85)
Color.GRAY = Color.rgb(142, 142, 147)
Color.LIGHT_GRAY = Color.rgb(209, 209, 214)
Color.DARK_GRAY = Color.rgb(28, 28, 30)
Color.TEAL = Color.rgb(48, 176, 199)
Color.INDIGO = Color.rgb(88, 86, 214)
Color.CYAN = Color.rgb(50, 173, 230)
Color.MAGENTA = Color.rgb(255, 0, 255)
Color.SKY_BLUE = Color.rgb(135, 206, 235)
Color.MINT = Color.rgb(0, 199, 190)
Color.EMERALD = Color.rgb(52, 199, 89)
Color.AMBER = Color.rgb(255, 191, 0)
Color.LAVENDER = Color.rgb(175, 82, 222)
Color.CRIMSON = Color.rgb(220, 20, 60)
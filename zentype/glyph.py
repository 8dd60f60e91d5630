"""Glyph identities, atlas entries, rasterized bitmaps and GPU instances."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar

Vec2 = tuple[float, float]
Vec4 = tuple[float, float, float, float]


@dataclass(frozen=True)
class GlyphKey:
    """Identifies one glyph of one font at a given size, subpixel bin and weight."""

    font_id: int
    glyph_id: int
    font_size: float
    x_bin: int = 0
    y_bin: int = 0
    weight: int = 400
    flags: int = 0


@dataclass(frozen=True)
class AtlasEntry:
    """Where a glyph lives in the atlas and how to place it."""

    uv_pos: Vec2
    uv_size: Vec2
    pixel_size: Vec2
    pixel_offset: Vec2

    @classmethod
    def empty(cls) -> AtlasEntry:
        """An entry with no area, used for blank glyphs."""
        zero = (0.0, 0.0)
        return cls(zero, zero, zero, zero)


@dataclass(frozen=True)
class RasterizedGlyph:
    """Bitmap pixels and placement of a rasterized glyph."""

    width: int
    height: int
    left: int
    top: int
    data: bytes

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"negative glyph size: {self.width}x{self.height}")
        object.__setattr__(self, "data", bytes(self.data))


_INSTANCE_FORMAT = struct.Struct("<16f")


@dataclass(frozen=True)
class GlyphInstance:
    """One instanced quad: a glyph or a background rectangle."""

    pos: Vec2
    size: Vec2
    uv_pos: Vec2
    uv_size: Vec2
    color: Vec4
    bg_color: Vec4

    SIZE: ClassVar[int] = _INSTANCE_FORMAT.size
    # (byte offset, component count) per shader location.
    ATTRIBUTES: ClassVar[tuple[tuple[int, int], ...]] = (
        (0, 2),
        (8, 2),
        (16, 2),
        (24, 2),
        (32, 4),
        (48, 4),
    )

    def to_bytes(self) -> bytes:
        """Little-endian 32-bit float layout as read by the vertex stage."""
        return _INSTANCE_FORMAT.pack(
            *self.pos, *self.size, *self.uv_pos, *self.uv_size, *self.color, *self.bg_color
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> GlyphInstance:
        """Decode one instance from its packed form."""
        if len(data) != cls.SIZE:
            raise ValueError(f"expected {cls.SIZE} bytes, got {len(data)}")
        v = _INSTANCE_FORMAT.unpack(data)
        return cls(
            pos=(v[0], v[1]),
            size=(v[2], v[3]),
            uv_pos=(v[4], v[5]),
            uv_size=(v[6], v[7]),
            color=(v[8], v[9], v[10], v[11]),
            bg_color=(v[12], v[13], v[14], v[15]),
        )


@dataclass(frozen=True)
class LineInfo:
    """Geometry of one laid-out line: x offset, baseline y and visual width."""

    x: float
    y: float
    width: float


@dataclass(frozen=True)
class ShapedGlyph:
    """A shaped glyph positioned in layout space.

    ``cluster`` is the byte index of the source character in the input text.
    """

    key: GlyphKey
    cluster: int
    x: float
    y: float
    width: float
    height: float
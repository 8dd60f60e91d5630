"""Turns shaped text into instanced quads for the glyph shader."""

from __future__ import annotations

import struct
from collections.abc import Iterator

from zentype.atlas import GlyphAtlas
from zentype.glyph import GlyphInstance, Vec2
from zentype.options import TextOptions
from zentype.shaped_buffer import ShapedBuffer

# vec2<f32> screen size followed by 8 bytes of alignment padding.
_UNIFORM = struct.Struct("<4f")
_CLEAR: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
_NO_UV: Vec2 = (0.0, 0.0)

# A standard font box sits roughly 0.8 above the baseline and 0.2 below.
_ASCENT_RATIO = 0.8


def _backgrounds(
    buffer: ShapedBuffer, pos: Vec2, options: TextOptions
) -> Iterator[GlyphInstance]:
    bg_color = options.bg_color
    if bg_color is None or bg_color.a == 0:
        return

    padding = options.padding
    horizontal = padding.left + padding.right
    font_size = options.font_size
    lh = options.line_height
    # Full line height keeps consecutive line backgrounds touching.
    box_height = font_size * lh
    # Extra line-height space is split evenly above and below the glyphs.
    visual_ascent = font_size * (_ASCENT_RATIO + (lh - 1.0) / 2.0)
    fill = bg_color.to_f32_array()

    for line in buffer.lines:
        if options.full_width_bg:
            base = options.max_width if options.max_width is not None else line.width
            width = base + horizontal
            line_x = pos[0]
        else:
            width = line.width + horizontal
            line_x = pos[0] + line.x

        baseline = pos[1] + line.y
        yield GlyphInstance(
            pos=(line_x, baseline - visual_ascent),
            size=(width, box_height + padding.top + padding.bottom),
            uv_pos=_NO_UV,
            uv_size=_NO_UV,
            color=_CLEAR,
            bg_color=fill,
        )


def _glyphs(
    buffer: ShapedBuffer, atlas: GlyphAtlas, pos: Vec2, options: TextOptions
) -> Iterator[GlyphInstance]:
    color = options.color.to_f32_array()
    padding = options.padding
    for glyph in buffer.glyphs:
        entry = atlas.get(glyph.key)
        if entry is None:
            continue
        # The raster top offset points up from the baseline, so it is subtracted.
        yield GlyphInstance(
            pos=(
                pos[0] + glyph.x + entry.pixel_offset[0] + padding.left,
                pos[1] + glyph.y - entry.pixel_offset[1] + padding.top,
            ),
            size=entry.pixel_size,
            uv_pos=entry.uv_pos,
            uv_size=entry.uv_size,
            color=color,
            bg_color=_CLEAR,
        )


def generate_instances(
    buffer: ShapedBuffer, atlas: GlyphAtlas, pos: Vec2, options: TextOptions
) -> list[GlyphInstance]:
    """Background quads (one per line, when a visible background is set) followed by glyph quads.

    Glyphs missing from the atlas are skipped.
    """
    instances = list(_backgrounds(buffer, pos, options))
    instances.extend(_glyphs(buffer, atlas, pos, options))
    return instances


class TextPipeline:
    """Holds the screen-size uniform and builds instance data for drawing."""

    UNIFORM_SIZE = _UNIFORM.size

    def __init__(self, width: float = 0.0, height: float = 0.0) -> None:
        self.screen_size: Vec2 = (float(width), float(height))

    def update_screen_size(self, width: float, height: float) -> None:
        self.screen_size = (float(width), float(height))

    def uniform_bytes(self) -> bytes:
        """The 16-byte uniform block: screen width, height and padding."""
        return _UNIFORM.pack(self.screen_size[0], self.screen_size[1], 0.0, 0.0)

    def generate_instances(
        self, buffer: ShapedBuffer, atlas: GlyphAtlas, pos: Vec2, options: TextOptions
    ) -> list[GlyphInstance]:
        """Instance data for ``buffer`` placed at ``pos``."""
        return generate_instances(buffer, atlas, pos, options)
"""A managed text renderer: shaping, atlas filling and instance batching."""

from __future__ import annotations

from dataclasses import replace

from zentype.atlas import GlyphAtlas
from zentype.glyph import GlyphInstance, Vec2
from zentype.options import TextOptions, VerticalAlignment
from zentype.pipeline import TextPipeline
from zentype.providers import FontProvider, Rasterizer
from zentype.shaped_buffer import ShapedBuffer

_DEFAULT_ATLAS_SIZE = 2048


class TextRenderer:
    """Shapes text, keeps glyphs in an atlas and batches quads per frame.

    ``font_provider`` and ``rasterizer`` may be replaced at any time.
    """

    def __init__(
        self,
        font_provider: FontProvider,
        rasterizer: Rasterizer,
        width: float,
        height: float,
        atlas: GlyphAtlas | None = None,
    ) -> None:
        self.font_provider = font_provider
        self.rasterizer = rasterizer
        self.atlas = atlas if atlas is not None else GlyphAtlas(_DEFAULT_ATLAS_SIZE)
        self.pipeline = TextPipeline(width, height)
        self._instances: list[GlyphInstance] = []

    @property
    def screen_size(self) -> Vec2:
        return self.pipeline.screen_size

    @property
    def pending(self) -> tuple[GlyphInstance, ...]:
        """Instances queued for the next :meth:`render`."""
        return tuple(self._instances)

    def draw(self, text: str, pos: Vec2, options: TextOptions) -> ShapedBuffer:
        """Shape ``text``, make sure its glyphs are in the atlas and queue its quads.

        Returns the shaped buffer for hit-testing.
        """
        screen_w, screen_h = self.screen_size
        padding = options.padding
        available_w = options.max_width if options.max_width is not None else screen_w - pos[0]
        layout_width = available_w - padding.left - padding.right
        layout_height = screen_h - pos[1] - padding.top - padding.bottom
        self.font_provider.set_layout_size(layout_width, layout_height)

        final_options = options
        if final_options.max_width is None:
            final_options = replace(final_options, max_width=layout_width)

        buffer = self.font_provider.shape(text, final_options)

        for glyph in buffer.glyphs:
            if self.atlas.get(glyph.key) is None:
                rasterized = self.rasterizer.rasterize(glyph)
                if rasterized is not None:
                    self.atlas.insert(glyph.key, rasterized)

        y_offset = self._valign_offset(buffer, pos, final_options)
        render_pos = (pos[0], pos[1] + y_offset)
        self._instances.extend(
            self.pipeline.generate_instances(buffer, self.atlas, render_pos, final_options)
        )
        return buffer

    def _valign_offset(self, buffer: ShapedBuffer, pos: Vec2, options: TextOptions) -> float:
        if options.valign is None:
            return 0.0
        _, content_height = buffer.content_size()
        available = (
            options.max_height
            if options.max_height is not None
            else self.screen_size[1] - pos[1]
        )
        if options.valign is VerticalAlignment.CENTER:
            return (available - content_height) / 2.0
        if options.valign is VerticalAlignment.BOTTOM:
            return available - content_height
        return 0.0

    def hit_test(
        self, buffer: ShapedBuffer, pos: Vec2, options: TextOptions, mouse_pos: Vec2
    ) -> int:
        """Character index under a screen-space point, accounting for position, padding and alignment."""
        padding = options.padding
        y_offset = self._valign_offset(buffer, pos, options)
        x = mouse_pos[0] - pos[0] - padding.left
        y = mouse_pos[1] - pos[1] - padding.top - y_offset
        return buffer.index_at(x, y)

    def position_at(
        self, buffer: ShapedBuffer, pos: Vec2, options: TextOptions, index: int
    ) -> Vec2 | None:
        """Screen-space position of the character at ``index``, or ``None``."""
        local = buffer.position_at(index)
        if local is None:
            return None
        padding = options.padding
        y_offset = self._valign_offset(buffer, pos, options)
        return (
            local[0] + pos[0] + padding.left,
            local[1] + pos[1] + padding.top + y_offset,
        )

    def render(self) -> list[GlyphInstance]:
        """Hand over every queued instance and start a new frame."""
        frame, self._instances = self._instances, []
        return frame

    def resize(self, width: float, height: float) -> None:
        """Match the projection to a new surface size."""
        self.pipeline.update_screen_size(width, height)
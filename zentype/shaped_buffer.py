"""Shaped text: positioned glyphs plus line geometry, with hit-testing."""

from __future__ import annotations

from dataclasses import dataclass, field

from zentype.glyph import LineInfo, ShapedGlyph
from zentype.options import Padding

# Glyphs whose y lies within this distance of a line's baseline belong to it.
_LINE_TOLERANCE = 1.0


@dataclass(frozen=True)
class ShapedBuffer:
    """The result of shaping a piece of text.

    ``width`` and ``height`` are the logical size of the content itself,
    without padding.
    """

    glyphs: tuple[ShapedGlyph, ...] = field(default_factory=tuple)
    lines: tuple[LineInfo, ...] = field(default_factory=tuple)
    width: float = 0.0
    height: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "glyphs", tuple(self.glyphs))
        object.__setattr__(self, "lines", tuple(self.lines))

    def __len__(self) -> int:
        return len(self.glyphs)

    def content_size(self) -> tuple[float, float]:
        """Logical (width, height) of the text content."""
        return (self.width, self.height)

    def outer_size(self, padding: Padding) -> tuple[float, float]:
        """Visual (width, height) including the given padding."""
        return (
            self.width + padding.left + padding.right,
            self.height + padding.top + padding.bottom,
        )

    def size(self) -> tuple[float, float]:
        """Same as :meth:`content_size`."""
        return self.content_size()

    def index_at(self, x: float, y: float) -> int:
        """Byte index of the character closest to the layout point (x, y).

        The nearest line is chosen by baseline distance, then the glyph on
        that line whose centre is horizontally nearest. If the line holds no
        glyphs, the first glyph's cluster is returned; an empty buffer gives 0.
        """
        if not self.lines or not self.glyphs:
            return 0

        best_line = min(self.lines, key=lambda line: abs(y - line.y))
        on_line = [
            glyph
            for glyph in self.glyphs
            if abs(glyph.y - best_line.y) < _LINE_TOLERANCE
        ]
        if not on_line:
            return self.glyphs[0].cluster

        closest = min(on_line, key=lambda glyph: abs(x - (glyph.x + glyph.width / 2.0)))
        return closest.cluster

    def position_at(self, index: int) -> tuple[float, float] | None:
        """Layout (x, y) of the first glyph for the character at ``index``."""
        return next(
            ((glyph.x, glyph.y) for glyph in self.glyphs if glyph.cluster == index),
            None,
        )
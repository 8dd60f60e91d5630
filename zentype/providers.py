"""Interfaces for font shaping, glyph rasterization and glyph atlases."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass

from zentype.glyph import AtlasEntry, GlyphKey, RasterizedGlyph, ShapedGlyph
from zentype.options import TextOptions
from zentype.shaped_buffer import ShapedBuffer


@dataclass(frozen=True)
class FontMetrics:
    """Vertical metrics of a font at one size; descent is negative below the baseline."""

    ascent: float
    descent: float
    line_gap: float

    def line_height(self) -> float:
        return self.ascent - self.descent + self.line_gap


class FontProvider(ABC):
    """Loads fonts and shapes text into positioned glyphs."""

    @abstractmethod
    def shape(self, text: str, options: TextOptions) -> ShapedBuffer:
        """Shape ``text``, handling layout, wrapping and alignment."""

    @abstractmethod
    def load_font(self, data: bytes) -> None:
        """Load a font from raw bytes."""

    @abstractmethod
    def load_font_path(self, path: str | os.PathLike[str]) -> None:
        """Load a font from a file; raises ``OSError`` if it cannot be read."""

    @abstractmethod
    def metrics(self, options: TextOptions) -> FontMetrics:
        """Vertical metrics for the given options."""

    @abstractmethod
    def set_layout_size(self, width: float, height: float) -> None:
        """Set the space available for layout (used for wrapping and alignment)."""


class Rasterizer(ABC):
    """Renders shaped glyphs into bitmaps."""

    @abstractmethod
    def rasterize(self, glyph: ShapedGlyph) -> RasterizedGlyph | None:
        """Bitmap for ``glyph``, or ``None`` if it cannot be rasterized."""


class Atlas(ABC):
    """A texture atlas that stores rasterized glyphs."""

    @abstractmethod
    def get_or_insert(self, key: GlyphKey, glyph: RasterizedGlyph) -> AtlasEntry:
        """Entry for ``key``, inserting ``glyph`` if it is not yet stored."""

    @abstractmethod
    def flush(self) -> int:
        """Write pending pixel data into the texture; return how many writes were done."""

    @abstractmethod
    def clear(self) -> None:
        """Forget every stored glyph."""
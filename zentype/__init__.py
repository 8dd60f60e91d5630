"""Text rendering core: colors, options, shaped buffers, glyph atlases and instance batching."""

__version__ = "0.1.0a1"

__all__ = [
    "color",
    "options",
    "glyph",
    "shaped_buffer",
    "providers",
    "atlas",
    "pipeline",
    "renderer",
]
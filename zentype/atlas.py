"""Glyph atlases backed by an in-memory single-channel texture."""

from __future__ import annotations

from dataclasses import dataclass

from zentype.glyph import AtlasEntry, GlyphKey, RasterizedGlyph
from zentype.providers import Atlas

_GLYPH_PADDING = 1


class AtlasFullError(RuntimeError):
    """Raised when a glyph does not fit in the atlas."""


@dataclass
class _Shelf:
    y: int
    height: int
    cursor: int = 0


class AtlasAllocator:
    """Shelf-based rectangle packer for a fixed-size texture."""

    def __init__(self, width: int, height: int | None = None) -> None:
        if height is None:
            height = width
        if width <= 0 or height <= 0:
            raise ValueError(f"atlas size must be positive: {width}x{height}")
        self.width = width
        self.height = height
        self._shelves: list[_Shelf] = []
        self._next_y = 0

    def allocate(self, width: int, height: int) -> tuple[int, int] | None:
        """Reserve a ``width`` x ``height`` rectangle; return its top-left corner.

        Returns ``None`` when the size is empty or no room is left.
        """
        if width <= 0 or height <= 0 or width > self.width or height > self.height:
            return None

        fitting = (
            shelf
            for shelf in self._shelves
            if shelf.height >= height and self.width - shelf.cursor >= width
        )
        shelf = min(fitting, key=lambda s: s.height, default=None)
        if shelf is None:
            if self._next_y + height > self.height:
                return None
            shelf = _Shelf(y=self._next_y, height=height)
            self._shelves.append(shelf)
            self._next_y += height

        origin = (shelf.cursor, shelf.y)
        shelf.cursor += width
        return origin

    def clear(self) -> None:
        """Release every allocation."""
        self._shelves.clear()
        self._next_y = 0


def _blit(texture: bytearray, size: int, x: int, y: int, width: int, height: int, data: bytes) -> None:
    needed = width * height
    if len(data) < needed:
        raise ValueError(f"glyph data has {len(data)} bytes, {needed} needed")
    for row in range(height):
        start = (y + row) * size + x
        texture[start : start + width] = data[row * width : (row + 1) * width]


class _TextureOwner:
    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"atlas size must be positive: {size}")
        self.size = size
        self._texture = bytearray(size * size)
        self._allocator = AtlasAllocator(size)
        self._cached: dict[GlyphKey, AtlasEntry] = {}

    @property
    def texture(self) -> memoryview:
        """Read-only view of the R8 texture, row-major, ``size`` bytes per row."""
        return memoryview(self._texture).toreadonly()

    def __len__(self) -> int:
        return len(self._cached)

    def __contains__(self, key: object) -> bool:
        return key in self._cached

    def _entry(self, x: int, y: int, glyph: RasterizedGlyph) -> AtlasEntry:
        size = float(self.size)
        return AtlasEntry(
            uv_pos=(x / size, y / size),
            uv_size=(glyph.width / size, glyph.height / size),
            pixel_size=(float(glyph.width), float(glyph.height)),
            pixel_offset=(float(glyph.left), float(glyph.top)),
        )


class GlyphAtlas(_TextureOwner):
    """Atlas that writes glyph pixels immediately, with a 1px gutter per glyph."""

    def __init__(self, size: int = 2048) -> None:
        super().__init__(size)

    def get(self, key: GlyphKey) -> AtlasEntry | None:
        return self._cached.get(key)

    def insert(self, key: GlyphKey, glyph: RasterizedGlyph) -> AtlasEntry:
        """Store ``glyph`` under ``key`` and return its entry.

        Blank glyphs get an empty entry and are not stored. Raises
        :class:`AtlasFullError` when there is no room.
        """
        if glyph.width == 0 or glyph.height == 0:
            return AtlasEntry.empty()

        origin = self._allocator.allocate(
            glyph.width + 2 * _GLYPH_PADDING, glyph.height + 2 * _GLYPH_PADDING
        )
        if origin is None:
            raise AtlasFullError("Atlas out of space")

        x = origin[0] + _GLYPH_PADDING
        y = origin[1] + _GLYPH_PADDING
        _blit(self._texture, self.size, x, y, glyph.width, glyph.height, glyph.data)

        entry = self._entry(x, y, glyph)
        self._cached[key] = entry
        return entry

    def clear(self) -> None:
        """Forget all glyphs and reset the allocator."""
        self._allocator.clear()
        self._cached.clear()


@dataclass(frozen=True)
class _PendingWrite:
    x: int
    y: int
    width: int
    height: int
    data: bytes


class ZentypeAtlas(_TextureOwner, Atlas):
    """Atlas that queues pixel writes until :meth:`flush`, evicting everything when full."""

    def __init__(self, size: int = 2048) -> None:
        super().__init__(size)
        self._pending: list[_PendingWrite] = []

    @property
    def pending_writes(self) -> int:
        return len(self._pending)

    def get_or_insert(self, key: GlyphKey, glyph: RasterizedGlyph) -> AtlasEntry:
        cached = self._cached.get(key)
        if cached is not None:
            return cached

        origin = self._allocator.allocate(glyph.width, glyph.height)
        if origin is None:
            self.clear()
            origin = self._allocator.allocate(glyph.width, glyph.height)
        if origin is None:
            return AtlasEntry(
                uv_pos=(0.0, 0.0),
                uv_size=(0.0, 0.0),
                pixel_size=(float(glyph.width), float(glyph.height)),
                pixel_offset=(float(glyph.left), float(glyph.top)),
            )

        x, y = origin
        entry = self._entry(x, y, glyph)
        self._pending.append(_PendingWrite(x, y, glyph.width, glyph.height, glyph.data))
        self._cached[key] = entry
        return entry

    def flush(self) -> int:
        writes, self._pending = self._pending, []
        for write in writes:
            _blit(self._texture, self.size, write.x, write.y, write.width, write.height, write.data)
        return len(writes)

    def clear(self) -> None:
        self._allocator.clear()
        self._cached.clear()
        self._pending.clear()
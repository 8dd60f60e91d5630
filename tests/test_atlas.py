from itertools import combinations

import pytest

from zentype.atlas import AtlasAllocator, AtlasFullError, GlyphAtlas, ZentypeAtlas
from zentype.glyph import AtlasEntry, GlyphKey, RasterizedGlyph
from zentype.providers import Atlas


def key(glyph_id):
    return GlyphKey(font_id=1, glyph_id=glyph_id, font_size=16.0)


def bitmap(width, height, left=0, top=0, fill=None):
    data = bytes(((fill if fill is not None else i) % 256) for i in range(1, width * height + 1))
    return RasterizedGlyph(width=width, height=height, left=left, top=top, data=data)


def region(atlas, x, y, width, height):
    tex = atlas.texture
    return b"".join(bytes(tex[(y + r) * atlas.size + x : (y + r) * atlas.size + x + width]) for r in range(height))


def texel_origin(atlas, entry):
    return round(entry.uv_pos[0] * atlas.size), round(entry.uv_pos[1] * atlas.size)


def overlaps(a, b):
    (ax, ay, aw, ah), (bx, by, bw, bh) = a, b
    return ax < bx + bw and bx < ax + aw and ay < by + bh and by < ay + ah


def in_bounds(rect, size):
    x, y, w, h = rect
    return 0 <= x and x + w <= size and 0 <= y and y + h <= size


def test_allocations_are_in_bounds_and_disjoint():
    allocator = AtlasAllocator(64)
    sizes = [(10, 8), (20, 8), (5, 12), (30, 3), (16, 16), (40, 6)]
    origins = [allocator.allocate(w, h) for w, h in sizes]
    assert None not in origins
    rects = [(o[0], o[1], w, h) for o, (w, h) in zip(origins, sizes)]
    assert all(in_bounds(r, 64) for r in rects)
    assert not any(overlaps(a, b) for a, b in combinations(rects, 2))


@pytest.mark.parametrize("size", [(0, 5), (5, 0), (-1, 3), (65, 1), (1, 65)])
def test_unusable_sizes_are_refused(size):
    assert AtlasAllocator(64).allocate(*size) is None


def test_clear_makes_room_again():
    allocator = AtlasAllocator(8)
    assert allocator.allocate(8, 8) == (0, 0)
    assert allocator.allocate(1, 1) is None
    allocator.clear()
    assert allocator.allocate(8, 8) == (0, 0)


def test_allocator_rejects_bad_dimensions():
    with pytest.raises(ValueError):
        AtlasAllocator(0)


def test_glyph_atlas_writes_pixels_inside_gutter():
    atlas = GlyphAtlas(32)
    glyph = bitmap(3, 2, left=2, top=7)
    entry = atlas.insert(key(1), glyph)
    x, y = texel_origin(atlas, entry)
    assert x >= 1 and y >= 1
    assert region(atlas, x, y, 3, 2) == glyph.data
    assert entry.pixel_size == (3.0, 2.0)
    assert entry.pixel_offset == (2.0, 7.0)
    assert entry.uv_size == (3 / 32, 2 / 32)


def test_glyph_atlas_get_returns_inserted_entry():
    atlas = GlyphAtlas(32)
    entry = atlas.insert(key(1), bitmap(2, 2))
    assert atlas.get(key(1)) == entry
    assert atlas.get(key(2)) is None
    assert key(1) in atlas


def test_glyph_atlas_blank_glyph_not_stored():
    atlas = GlyphAtlas(32)
    entry = atlas.insert(key(1), RasterizedGlyph(0, 5, 3, 4, b""))
    assert entry == AtlasEntry.empty()
    assert atlas.get(key(1)) is None


def test_glyph_atlas_raises_when_full():
    atlas = GlyphAtlas(8)
    with pytest.raises(AtlasFullError):
        atlas.insert(key(1), bitmap(8, 8))


def test_glyph_atlas_rejects_short_data():
    atlas = GlyphAtlas(16)
    with pytest.raises(ValueError):
        atlas.insert(key(1), RasterizedGlyph(4, 4, 0, 0, b"\x01\x02"))


def test_glyph_atlas_clear():
    atlas = GlyphAtlas(16)
    atlas.insert(key(1), bitmap(14, 14))
    atlas.clear()
    assert len(atlas) == 0
    entry = atlas.insert(key(2), bitmap(14, 14))
    assert texel_origin(atlas, entry) == (1, 1)


def test_zentype_atlas_is_an_atlas_and_caches():
    atlas = ZentypeAtlas(32)
    assert isinstance(atlas, Atlas)
    first = atlas.get_or_insert(key(1), bitmap(4, 4))
    second = atlas.get_or_insert(key(1), bitmap(4, 4, fill=9))
    assert first == second
    assert atlas.pending_writes == 1


def test_zentype_atlas_defers_writes_until_flush():
    atlas = ZentypeAtlas(32)
    glyph = bitmap(4, 3)
    entry = atlas.get_or_insert(key(1), glyph)
    x, y = texel_origin(atlas, entry)
    assert region(atlas, x, y, 4, 3) == bytes(12)
    assert atlas.flush() == 1
    assert atlas.pending_writes == 0
    assert region(atlas, x, y, 4, 3) == glyph.data
    assert atlas.flush() == 0


def test_zentype_atlas_evicts_everything_when_full():
    atlas = ZentypeAtlas(4)
    atlas.get_or_insert(key(1), bitmap(4, 4))
    entry = atlas.get_or_insert(key(2), bitmap(4, 4))
    assert key(1) not in atlas
    assert key(2) in atlas
    assert len(atlas) == 1
    assert entry.uv_pos == (0.0, 0.0)
    assert atlas.pending_writes == 1


def test_zentype_atlas_oversized_glyph_gets_placement_only():
    atlas = ZentypeAtlas(4)
    entry = atlas.get_or_insert(key(1), bitmap(5, 2, left=-1, top=3))
    assert entry.uv_pos == (0.0, 0.0)
    assert entry.uv_size == (0.0, 0.0)
    assert entry.pixel_size == (5.0, 2.0)
    assert entry.pixel_offset == (-1.0, 3.0)
    assert key(1) not in atlas


def test_zentype_atlas_clear_drops_pending():
    atlas = ZentypeAtlas(16)
    atlas.get_or_insert(key(1), bitmap(2, 2))
    atlas.clear()
    assert atlas.pending_writes == 0
    assert len(atlas) == 0
    assert atlas.flush() == 0
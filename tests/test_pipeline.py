import struct

import pytest

from zentype.atlas import GlyphAtlas
from zentype.color import Color
from zentype.glyph import GlyphKey, LineInfo, RasterizedGlyph, ShapedGlyph
from zentype.options import Padding, TextOptions
from zentype.pipeline import TextPipeline, generate_instances
from zentype.shaped_buffer import ShapedBuffer

KEY_A = GlyphKey(font_id=0, glyph_id=1, font_size=10.0)
KEY_MISSING = GlyphKey(font_id=0, glyph_id=2, font_size=10.0)
POS = (100.0, 200.0)
CLEAR = (0.0, 0.0, 0.0, 0.0)


def make_atlas():
    atlas = GlyphAtlas(64)
    atlas.insert(KEY_A, RasterizedGlyph(width=2, height=3, left=1, top=4, data=bytes(6)))
    return atlas


def make_buffer(lines=(LineInfo(3.0, 0.0, 10.0),)):
    glyphs = (
        ShapedGlyph(KEY_A, 0, 0.0, 0.0, 5.0, 0.0),
        ShapedGlyph(KEY_MISSING, 1, 5.0, 0.0, 5.0, 0.0),
    )
    return ShapedBuffer(glyphs=glyphs, lines=lines, width=10.0, height=15.0)


def test_without_background_only_atlas_glyphs_are_emitted():
    instances = generate_instances(make_buffer(), make_atlas(), POS, TextOptions())
    assert len(instances) == 1
    assert instances[0].bg_color == CLEAR


def test_transparent_background_is_skipped():
    options = TextOptions(bg_color=Color.TRANSPARENT)
    instances = generate_instances(make_buffer(), make_atlas(), POS, options)
    assert len(instances) == 1
    assert instances[0].bg_color == CLEAR


def test_glyph_instance_geometry_follows_atlas_entry():
    atlas = make_atlas()
    entry = atlas.get(KEY_A)
    padding = Padding(top=1.0, right=2.0, bottom=3.0, left=4.0)
    options = TextOptions(padding=padding, color=Color.AMBER)
    (inst,) = generate_instances(make_buffer(), atlas, POS, options)
    assert inst.pos == pytest.approx(
        (POS[0] + entry.pixel_offset[0] + padding.left, POS[1] - entry.pixel_offset[1] + padding.top)
    )
    assert inst.size == entry.pixel_size
    assert inst.uv_pos == entry.uv_pos
    assert inst.uv_size == entry.uv_size
    assert inst.color == Color.AMBER.to_f32_array()


def test_background_geometry():
    padding = Padding(top=1.0, right=2.0, bottom=3.0, left=4.0)
    options = TextOptions(font_size=10.0, line_height=1.0, bg_color=Color.RED, padding=padding)
    instances = generate_instances(make_buffer(), make_atlas(), POS, options)
    assert len(instances) == 2
    bg = instances[0]
    assert bg.pos == pytest.approx((POS[0] + 3.0, 192.0))
    assert bg.size == pytest.approx((10.0 + 4.0 + 2.0, 10.0 + 1.0 + 3.0))
    assert bg.color == CLEAR
    assert bg.bg_color == Color.RED.to_f32_array()
    assert bg.uv_size == (0.0, 0.0)


def test_backgrounds_come_before_glyphs():
    lines = (LineInfo(0.0, 0.0, 10.0), LineInfo(0.0, 15.0, 8.0))
    options = TextOptions(bg_color=Color.BLUE)
    instances = generate_instances(make_buffer(lines), make_atlas(), POS, options)
    assert [i.bg_color != CLEAR for i in instances] == [True, True, False]


def test_consecutive_line_backgrounds_touch():
    lines = (LineInfo(0.0, 0.0, 10.0), LineInfo(0.0, 15.0, 10.0))
    options = TextOptions(font_size=10.0, line_height=1.5, bg_color=Color.GREEN)
    first, second = generate_instances(make_buffer(lines), make_atlas(), POS, options)[:2]
    assert first.pos[1] + first.size[1] == pytest.approx(second.pos[1])


def test_full_width_background_uses_max_width():
    padding = Padding.all(5.0)
    options = TextOptions(bg_color=Color.RED, padding=padding, full_width_bg=True, max_width=300.0)
    bg = generate_instances(make_buffer(), make_atlas(), POS, options)[0]
    assert bg.pos[0] == POS[0]
    assert bg.size[0] == pytest.approx(300.0 + 5.0 + 5.0)


def test_full_width_background_without_max_width_uses_line_width():
    options = TextOptions(bg_color=Color.RED, full_width_bg=True)
    bg = generate_instances(make_buffer(), make_atlas(), POS, options)[0]
    assert bg.pos[0] == POS[0]
    assert bg.size[0] == pytest.approx(10.0)


def test_uniform_bytes_hold_screen_size():
    pipeline = TextPipeline(800, 600)
    pipeline.update_screen_size(1024, 768)
    data = pipeline.uniform_bytes()
    assert len(data) == 16
    assert struct.unpack("<4f", data) == (1024.0, 768.0, 0.0, 0.0)


def test_method_matches_module_function():
    pipeline = TextPipeline(800, 600)
    options = TextOptions(bg_color=Color.CRIMSON)
    atlas = make_atlas()
    assert pipeline.generate_instances(make_buffer(), atlas, POS, options) == generate_instances(
        make_buffer(), atlas, POS, options
    )


def test_instances_survive_byte_round_trip():
    options = TextOptions(bg_color=Color.WHITE)
    for inst in generate_instances(make_buffer(), make_atlas(), POS, options):
        decoded = type(inst).from_bytes(inst.to_bytes())
        assert decoded.pos == pytest.approx(inst.pos)
        assert decoded.bg_color == pytest.approx(inst.bg_color)
# zentype

The core of a text renderer, written in pure Python with no dependencies. It
covers text styling, hit-testing, glyph atlases, background boxes and
alignment. It produces the per-glyph instance data that a GPU draw call would
consume. You supply the font shaping and the rasterization by implementing two
small interfaces.

## Install

```
pip install zentype
```

To run the test suite:

```
pip install "zentype[test]"
pytest
```

## Modules

- `zentype.color`: `Color`, an immutable RGBA color with 0..255 channels.
  - Build one with `Color.rgb(...)`, `Color.rgba(...)` or
    `Color.hex("#FF5733")`, which accepts `#RGB`, `#RGBA`, `#RRGGBB` and
    `#RRGGBBAA`, with or without the `#`.
  - In `Color.hex`, a malformed channel becomes 0 and a malformed alpha becomes
    255. Any other length gives `Color.BLACK`.
  - `with_alpha(a)` returns a copy with a new alpha.
  - `to_u32()` packs the color as `0xRRGGBBAA`.
  - `to_f32_array()` returns the channels scaled to 0.0..1.0.
  - Named constants include `Color.WHITE`, `Color.BLACK`,
    `Color.TRANSPARENT`, `Color.RED`, `Color.AMBER`, `Color.DARK_GRAY` and
    `Color.CRIMSON`.
- `zentype.options`: the layout and style settings.
  - `TextOptions` is an immutable set of options.
  - Its `with_*` methods, `at`, `full_width` and the `padding_*` methods each
    return a modified copy.
  - `with_padding` takes either a `Padding` or a single number.
  - `as_attrs()` returns an `Attrs` holding the color, numeric weight, style
    and family. The family defaults to `"sans-serif"`, and `sans-serif`,
    `serif` and `monospace` are recognised case-insensitively.
  - The enums are `FontWeight` (an `IntEnum`, 100..900), `FontStyle`,
    `TextWrap`, `HorizontalAlignment` and `VerticalAlignment`.
- `zentype.glyph`: the value types passed between the stages.
  - `GlyphKey`, `ShapedGlyph`, `LineInfo`, `RasterizedGlyph` and `AtlasEntry`.
  - `GlyphInstance` is one 64-byte quad. It converts to and from bytes with
    `to_bytes()` and `GlyphInstance.from_bytes(...)`, using little-endian
    32-bit floats.
- `zentype.shaped_buffer`: `ShapedBuffer`, the result of shaping.
  - `index_at(x, y)` returns the byte index of the closest character: first
    the nearest line, then the nearest glyph centre on that line.
  - `position_at(index)` returns the layout position of a character, or `None`.
  - `content_size()` and `size()` return the content's width and height.
    `outer_size(padding)` adds the padding.
- `zentype.providers`: the abstract interfaces `FontProvider`, `Rasterizer`
  and `Atlas`, and the `FontMetrics` value type.
- `zentype.atlas`: atlases that store glyph pixels in an in-memory,
  single-channel texture. Both are built on a shelf-packing `AtlasAllocator`.
  - `GlyphAtlas` writes pixels at once, with a 1-pixel gutter around each
    glyph. It raises `AtlasFullError` when a glyph does not fit.
  - `ZentypeAtlas` implements `Atlas`. It queues writes until `flush()`, and
    clears itself and retries once when it is full.
- `zentype.pipeline`: `generate_instances(...)` and `TextPipeline`.
  - They emit one background quad per line when a visible `bg_color` is set.
  - They then emit one quad for each glyph found in the atlas.
  - `TextPipeline.uniform_bytes()` gives the 16-byte screen-size uniform.
- `zentype.renderer`: `TextRenderer` ties it all together.
  - `draw(...)` shapes the text and rasterizes glyphs that are missing from the
    atlas. It queues their instances and returns the `ShapedBuffer`.
  - `hit_test(...)` and `position_at(...)` convert between screen space and
    text positions, taking position, padding and vertical alignment into
    account.
  - `render()` returns the queued instances and starts a new frame.
  - `resize(...)` updates the screen size.

## Example

Building options:

```python
from zentype.color import Color
from zentype.options import HorizontalAlignment, TextOptions

options = (
    TextOptions()
    .with_font_size(32.0)
    .with_color(Color.AMBER)
    .with_bg(Color.DARK_GRAY)
    .padding_all(10.0)
    .with_align(HorizontalAlignment.CENTER)
)
```

Hit-testing a shaped buffer:

```python
from zentype.glyph import GlyphKey, LineInfo, ShapedGlyph
from zentype.shaped_buffer import ShapedBuffer

key = GlyphKey(font_id=0, glyph_id=0, font_size=16.0)
buffer = ShapedBuffer(
    [ShapedGlyph(key, i, 10.0 * i, 0.0, 10.0, 20.0) for i in range(3)],
    [LineInfo(x=0.0, y=0.0, width=30.0)],
    100.0,
    100.0,
)
buffer.index_at(12.0, 5.0)   # 1
buffer.position_at(1)        # (10.0, 0.0)
```

Driving a `TextRenderer` with your own shaping and rasterization:

```python
from zentype.glyph import GlyphKey, LineInfo, RasterizedGlyph, ShapedGlyph
from zentype.options import TextOptions
from zentype.providers import FontMetrics, FontProvider, Rasterizer
from zentype.renderer import TextRenderer
from zentype.shaped_buffer import ShapedBuffer


class MonospaceProvider(FontProvider):
    def shape(self, text, options):
        glyphs = [
            ShapedGlyph(GlyphKey(0, ord(ch), options.font_size), i, 10.0 * i, 0.0, 10.0, 0.0)
            for i, ch in enumerate(text)
        ]
        width = 10.0 * len(text)
        return ShapedBuffer(glyphs, [LineInfo(0.0, 0.0, width)], width, options.font_size)

    def load_font(self, data):
        pass

    def load_font_path(self, path):
        pass

    def metrics(self, options):
        return FontMetrics(options.font_size, 0.0, 0.0)

    def set_layout_size(self, width, height):
        pass


class BoxRasterizer(Rasterizer):
    def rasterize(self, glyph):
        return RasterizedGlyph(8, 8, 0, 8, bytes([255]) * 64)


renderer = TextRenderer(MonospaceProvider(), BoxRasterizer(), 800, 600)
renderer.draw("hi", (10.0, 20.0), TextOptions())
instances = renderer.render()   # two GlyphInstance quads
```

## What zentype does not do

- It contains no font shaping, font loading or glyph rasterization. These come
  only from the `FontProvider` and `Rasterizer` implementations you supply.
- It opens no window and talks to no GPU. The atlases keep their texture in
  memory, readable through the `texture` property.
- `TextRenderer.render()` returns `GlyphInstance` values, and
  `TextPipeline.uniform_bytes()` returns the uniform block. Uploading and
  drawing them is left to your graphics code.
# pdfink

Building blocks for producing PDF documents in pure Python, with no
third-party dependencies. The package supplies the parts that make up a page:
unit conversion, content-stream operators, text placement arithmetic, and the
dictionaries for common PDF objects. You assemble them into a file yourself.

## Modules

- **`pdfink.units`**: the `Unit` enumeration (`UNSET`, `PT`, `MM`, `CM`,
  `IN`), plus `units_to_points` and `points_to_units`. An unset or unknown
  unit leaves a value unchanged. `Box` holds four edges and has a
  `unit_override`. `Box.units_to_points(unit)` returns a copy in points.
- **`pdfink.binwrite`**: `write_uint32`, `write_uint16`, `write_tag` (UTF-8)
  and `write_bytes` write to any binary stream. `write_bytes` raises
  `ValueError` when the requested slice is out of range. `Buff` is a growable
  byte buffer with a movable `position`. Writing past its end pads the buffer
  with zero bytes.
- **`pdfink.options`**:
  - `BreakMode` and `BreakOption` describe how text may be broken:
    `DEFAULT_BREAK_OPTION` and `BreakOption.has_separator()`.
  - `Align` holds the flags for cell alignment and borders.
  - `CellOption` holds the cell settings.
  - `FontStyle` and `convert_font_style` turn a string such as `"BU"` into
    style flags.
- **`pdfink.drawing`**: classes whose `render()` returns content-stream
  operator text. They cover:
  - colours: `ColorRGB`, `ColorCMYK`, `TextColorRGB`, `TextColorCMYK`
  - gray levels: `GrayLevel`
  - line settings: `LineWidth`, and `LineType` (`"dashed"`, `"dotted"`, or
    solid)
  - shapes: `Line`, `Oval`, `Curve`, `Polygon`, and `Rectangle` with
    `PaintStyle`
  - rotation: `Rotate` and `RotateReset`
  - images: `ImageDraw`, which can crop, flip and rotate with `CropOptions`
  - templates: `ImportedTemplate`

  `rotation_matrix` returns the rotation operators on their own.
- **`pdfink.metrics`**:
  - `format_float_trim` formats to three decimals and drops trailing zeros.
  - `convert_typo_unit` and `ttf_to_pdf_units` convert font units.
  - `cal_text_height` and `cal_text_height_precise` estimate text height.
  - `fix_range` clamps a value to 0–1.
  - `cell_text_x` and `cell_text_y` place text inside a cell.
  - `draw_border` returns the stroke operators for cell borders.
- **`pdfink.content`**: `ContentStream` collects drawing operations for one
  page. It has an `add_*`, `set_*` or `rotate` method for each kind of
  operation, and `append` takes any object that has `render()`. `render()`
  returns the operator text. `to_object()` returns the stream object bytes:
  these are Flate-compressed unless `compress_level` is 0.
- **`pdfink.objects`**: `CatalogObj`, `EncryptionObj` and `DeviceRGBObj`,
  plus `ExtGStateOptions`, `ExtGState` and `ExtGStatesMap`. `ExtGStatesMap`
  is a thread-safe cache of graphics states, keyed by
  `ExtGStateOptions.key()`.
- **`pdfink.fonts`**: `FontObj`, `EncodingObj`, `FontDescriptorObj` and
  `EmbedFontObj`. `EmbedFontObj` reads a compressed font file when it is
  written. `font_widths_to_str` renders the widths of character codes 32 to
  255.

Each object class has a `write()` method that returns its dictionary or
stream body.

## Example

```python
from pdfink.content import ContentStream

page = ContentStream(page_height=841.89)
page.set_line_width(1)
page.set_stroke_color(240, 98, 146)
page.add_line(10, 10, 200, 10)
page.add_oval(50, 50, 150, 120)

print(page.render())
body = page.to_object()   # compressed stream object
```

Coordinates are measured from the top of the page, in points. Each operation
turns them into PDF's bottom-up coordinates using the page height.

```python
from pdfink.units import Unit, units_to_points

units_to_points(Unit.MM, 210)   # A4 width in points
```

## What it does not do

- It does not assemble a complete PDF file. There are no pages tree, no
  cross-reference table and no trailer.
- It does not parse TrueType fonts, subset fonts, measure glyphs or apply
  kerning. Nothing renders text glyphs into a content stream.
- `BreakOption` only describes how text may be broken. Nothing here splits
  text into lines.
- It does not encrypt anything itself. `DeviceRGBObj` and `EmbedFontObj`
  take an `encryptor` callable if you supply one.
- It does not decode or embed images. `ImageDraw` only places an image
  XObject that is already defined elsewhere.

## Running the tests

```
pip install -e .[test]
pytest
```
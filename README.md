# yftfont

`yftfont` reads small bitmap fonts described in plain text (`.yft` files) and
draws strings with them into in-memory pixel images.

## The font format

A font file is a sequence of brace-delimited records. Blank characters are
ignored everywhere, and both `// line` and `/* block */` comments are
stripped before parsing.

The first record describes the font and its colour table:

```
/* header: name, glyph size, spacing, colour count, colour pairs */
{font="MyCoolFont", width=9, height=5, space=3, colors=2, ".cVoid", "#cFill"}
```

- `width` and `height` give the size of every glyph cell, in pixels.
- `space` (optional, default 0) is the gap between two consecutive glyphs.
- `colors` is the number of colour pairs; at most 16 are accepted.
- Each colour pair is `"<pointer>c<colour>"`: a one-character pointer followed
  by `Void` (transparent), `Fill` (white, `0xffffff`), a lowercase hexadecimal
  value such as `0xff0000`, or a decimal integer. The first pair's colour also
  fills the gap between glyphs unless it is `Void`.

Each following record defines one glyph by its ASCII code (0 to 127), one
quoted string per row:

```
{ascii=66, {
    "#######..",
    "#......#.",
    "#######..",
    "#......#.",
    "#######..",
}}
```

Characters that are not in the colour table, or that map to `Void`, leave the
image untouched. A glyph may hold at most 256 coloured pixels.

## Usage

```python
from yftfont.font import FontRegistry
from yftfont.render import string_to_image

registry = FontRegistry()
registry.load("fonts/my_cool_font.yft")

image = string_to_image(registry, "MyCoolFont", "AB", 2)
for row in image.rows():
    print("".join("#" if pixel else "." for pixel in row))
```

### `yftfont.font`

- `load_font(path)` reads one file, strips comments and blanks, and returns a
  `Font`. It raises `FontError` when the file is empty or malformed; errors
  opening the file (`OSError`) propagate unchanged.
- The steps are also available alone: `read_font_file`, `strip_comments`,
  `monoline`, `parse_font` and `parse_glyph`.
- A `Font` has `name`, `width`, `height`, `space`, `colors`, a `table` of
  `ColorPair`s and a `glyphs` dict of `Glyph`s keyed by character code.
  `Font.color_of(pointer)` returns the colour for a pointer character, or
  `VOID` when it has none.
- A `FontRegistry` holds up to ten fonts by default (set `capacity` to change
  it). `load(path)` raises `FontError` when no slot is free; look fonts up
  with `get(index)`, `by_name(name)` or `first()`.

### `yftfont.render`

- `string_to_image(registry, font_name, text, scale)` creates a new `Image`
  just large enough for the text; it raises `FontError` for an unknown font.
- `string_put(registry, image, x, y, text, scale=2)` draws into an existing
  `Image` with the first loaded font, clipping anything outside it; it raises
  `FontError` when no font is loaded.
- `draw_glyph` and `fill_spacing` are the building blocks both use.

### `yftfont.image`

`Image(width, height)` is a grid of 32-bit colours, all zero at first. Use
`put_pixel(x, y, color)`, `get_pixel(x, y)` (both raise `IndexError` outside
the image), `contains(x, y)` and `rows()`. Colours are `0xRRGGBB` integers.

## Helpers

`yftfont.numparse` provides lenient number parsing (`atoi`, `atohexi`,
`atof`) used by the font reader. `yftfont.cformat` offers a small
printf-style formatter, `cformat(fmt, *args)` and
`cprintf(fmt, *args, file=None)`, supporting `%c %s %p %d %i %u %x %X %f %z %%`
and raising `FormatError` on a trailing lone `%` or a missing argument.

## What it does not do

`yftfont` only renders into in-memory `Image` objects. It does not open
windows, display images, or write them to image files, and it has no
command-line tool; hand the pixel data to whatever graphics library you use.
# wireframe

Building blocks for drawing a height map as a 3D wireframe: a reader for
height-map files, a reader for XPM images, the X11 colour-name table, and
rotations of points about the coordinate axes. It has no dependencies beyond
the standard library.

## Installing

```
pip install .
```

## Height maps

A map is plain text with one row of the grid per line and cells separated by
spaces. Each cell is an integer height, clamped to the range -500 to 500. A
cell may also name its colour, written as `height,0xRRGGBB`:

```
0 0 0 0
0 10 10,0xFF0000 0
0 0 0 0
```

```python
from wireframe.heightmap import HeightMap, MapError, color_for_height

heightmap = HeightMap.from_file("map.fdf")      # or HeightMap.from_lines([...])
print(heightmap.width, heightmap.height)
point = heightmap.point(1, 2)                   # row 1, column 2
print(point.x, point.y, point.z, hex(point.color))
```

Cells without a colour are coloured by height through `color_for_height`,
from deep blue below -80 through green around zero to orange above 80.
`HeightMap.from_lines` raises `MapError` when rows differ in length
(`Every line must contains the same amount of elements`, `code` 3) or the
map is smaller than two by two (`The map is too small`, `code` 4).
`parse_cell` reads a single cell into a `Point`, `count_columns` counts the
cells of a line, and `iter_lines` yields the lines of an open file without
their newlines.

## XPM images

```python
from wireframe.xpm import parse_xpm_file, parse_xpm_text, TRANSPARENT

image = parse_xpm_text('''
/* XPM */
static char *dot[] = {
"2 1 2 1",
"a c red",
"b c None",
"ab"
};
''')
assert image.pixel(0, 0) == 0xFF0000
assert image.pixel(1, 0) == TRANSPARENT
```

`parse_xpm_lines` decodes the quoted strings directly, `strip_comments`
blanks C-style comments outside quotes, and malformed images raise
`XpmError`. Colours are given by `#rrggbb` values or by name.

## Colour names

```python
from wireframe.colornames import lookup_color

lookup_color("#ff8800")            # 0xff8800
lookup_color("Light", "goldenrod") # 0xfafad2, name matched without regard to case
lookup_color("none")               # -1
lookup_color("no such colour")     # 0
```

## Geometry

```python
from wireframe.geometry import Vec3, rotate_x, rotate_y, rotate_z

v = rotate_z(Vec3(1.0, 0.0, 0.0, color=0xFFFFFF), 90)   # angles in degrees
print(round(v.x, 6), round(v.y, 6))                     # 0.0 1.0
print(v.scaled(2.0))
```

## Smaller helpers

- `wireframe.numbers`: `parse_int` and `parse_prefixed_int` read leading
  integers with 32-bit wrap-around; `abs_int`, `format_int`, `write_int`.
- `wireframe.textops`: splitting (`split_words`, `word_table`), trimming,
  searching (`find`, `find_within`, `find_index`, `find_outside_quotes`) and
  comparing (`compare`, `compare_prefix`, `equal`, `equal_prefix`) text.
- `wireframe.chars`: ASCII classification (`is_alpha`, `is_digit`,
  `is_space`, ...) and `to_lower` / `to_upper`, for characters or codes.

## What it does not do

The package only reads and transforms data. It opens no window, projects no
points onto a screen, draws no lines and handles no keyboard input, and it
installs no command to run.

## Tests

```
pip install ".[test]"
pytest
```
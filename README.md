# rasterlab

Small, self-contained computer-graphics building blocks. Each module holds the
state and arithmetic behind a classic graphics exercise, as plain Python data
you can inspect and test.

- `rasterlab.netpbm`: procedural images (`checkerboard`, `xor_pattern`,
  `gradient`) and their plain-text encodings `format_pbm` (P1), `format_pgm`
  (P2) and `format_ppm` (P3). `pack_rgba` and `unpack_rgba` convert between
  four 8-bit components and one 32-bit integer.
- `rasterlab.geometry`: `EquilateralTriangle` (edge, radii of the inscribed and
  circumscribed circles, altitude, perimeter, area, vertices), fitted to a
  viewport with `EquilateralTriangle.from_viewport`. Also
  `regular_polygon_vertices`, `polygon_for_key` (digit keys to side counts 3 to
  12 and their names), `oscillate` and `Oscillator`.
- `rasterlab.raster`: `FatPixelGrid`, a grid of enlarged pixels that lights
  lines with `raster_line_dda` or `raster_line_bresenham`. It reacts to
  `press`, `release` and `key_released` (1: DDA, 2: Bresenham, r: reset).
- `rasterlab.shapes`: `ShapeBuffer`, a fixed-size ring of `VectorPrimitive`
  records (pixel, point, line, rectangle, ellipse) with random stroke and fill
  colours. When the ring is full, the oldest primitive is overwritten. Helpers
  `pixel_cell` and `ellipse_bounds`.
- `rasterlab.background`: `Background`, which picks a clear colour by
  `ClearMode` (none, black, white, gray, colour, random).
- `rasterlab.locators`: `LocatorScene`, random `Locator` transforms scattered
  in a cube. Translation, rotation and proportion can each be switched on or
  off. Ready-made scenes come from `locator_scene` and `teapot_scene`.
- `rasterlab.soup`: `TriangleSoup`, small random `Triangle`s spread over a
  sphere or its lower half.
- `rasterlab.motion`: `Navigator` (offsets moved at constant speed while arrow
  keys are held) and `FrameClock` (elapsed time, frame rate, a frame-based gray
  level).
- `rasterlab.pointer`: `Pointer`, `clamp_zone` and `cursor_segments` for a
  selection rectangle and a cross-hair cursor.
- `rasterlab.palette`: `ColorScheme` (a random background with its inverse as
  tint), `inverse_color` and `normalized`.
- `rasterlab.imaging` (uses Pillow): `export_name` / `export_image` for
  time-stamped file names, `invert`, `tint`, `crop_triptych`,
  `triptych_window_size` and `compose_triptych`.
- `rasterlab.vertex`: a 36-byte interleaved `Vertex` (`pack` / `unpack`), its
  `attribute_layout`, indexed `Mesh`, `VertexBuffer` (static or dynamic) and
  `BufferSwap` for alternating two buffers between update and draw.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
rasterlab-netpbm pbm
rasterlab-netpbm pgm 128
rasterlab-netpbm ppm 320 200
```

The first argument chooses the image:

| Format | Pattern |
| --- | --- |
| `pbm` | checkerboard |
| `pgm` | xor of the coordinates |
| `ppm` | red/green gradient |

The optional width and height follow. Width defaults to 8 for `pbm` and 256
otherwise, and height defaults to the width. The file is written to the current
directory as `image<width>x<height>.<format>`, for example `image8x8.pbm`. For
`pbm`, the pixels are also printed to the terminal.

## Library examples

```python
from rasterlab.netpbm import checkerboard, format_pbm, output_name, pack_rgba, unpack_rgba

pixels = checkerboard(8, 8)
with open(output_name(8, 8, "pbm"), "w") as handle:
    handle.write(format_pbm(pixels))

assert unpack_rgba(pack_rgba(255, 128, 0, 255)) == (255, 128, 0, 255)
```

```python
from rasterlab.geometry import EquilateralTriangle, oscillate, regular_polygon_vertices

triangle = EquilateralTriangle.from_viewport(512, 512)
hexagon = regular_polygon_vertices(6, 256.0, 256.0, 170.0)
offset = oscillate(1.5, 127.0, 3.0)
```

```python
from rasterlab.raster import FatPixelGrid

grid = FatPixelGrid()                         # 512 x 512 framebuffer, 16 x 16 cells
lit = grid.raster_line_bresenham(0, 0, 5, 3)  # indices of the cells turned on
```

## What it does not do

rasterlab opens no window and draws nothing on screen. It has no GPU, shader or
3D-model loading. The classes hold the state an interactive program would keep,
such as pointer positions, key toggles, buffers and colours, and compute what
such a program would draw. Pixel output is limited to the Netpbm text encodings
and the Pillow images produced by `rasterlab.imaging`.
"""Procedural images written in the plain Netpbm formats (PBM, PGM, PPM)."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from pathlib import Path

COLOR_SPACE_MAX = 255

# In the binary colour space, white is 0 and black is 1.
_WHITE = False
_BLACK = True


def checkerboard(width: int, height: int) -> list[list[bool]]:
    """Rows of a binary checkerboard; the top-left pixel is white (False)."""
    return [
        [_WHITE if (x + y) % 2 == 0 else _BLACK for x in range(width)]
        for y in range(height)
    ]


def xor_pattern(width: int, height: int) -> list[list[int]]:
    """Rows of 8-bit gray levels given by the xor of the pixel coordinates."""
    return [[(x ^ y) & COLOR_SPACE_MAX for x in range(width)] for y in range(height)]


def pack_rgba(r: int, g: int, b: int, a: int) -> int:
    """Pack four 8-bit components into one 32-bit RGBA integer."""
    return (
        (r & COLOR_SPACE_MAX) << 24
        | (g & COLOR_SPACE_MAX) << 16
        | (b & COLOR_SPACE_MAX) << 8
        | (a & COLOR_SPACE_MAX)
    )


def unpack_rgba(color: int) -> tuple[int, int, int, int]:
    """Split a 32-bit RGBA integer into its four 8-bit components."""
    return (
        (color >> 24) & COLOR_SPACE_MAX,
        (color >> 16) & COLOR_SPACE_MAX,
        (color >> 8) & COLOR_SPACE_MAX,
        color & COLOR_SPACE_MAX,
    )


def gradient(width: int, height: int) -> list[list[int]]:
    """Rows of packed RGBA colours: red grows along x, green along y."""
    step_x = COLOR_SPACE_MAX / width if width else 0.0
    step_y = COLOR_SPACE_MAX / height if height else 0.0
    return [
        [
            pack_rgba(int(x * step_x), int(y * step_y), 0, COLOR_SPACE_MAX)
            for x in range(width)
        ]
        for y in range(height)
    ]


def _rows(pixels: Iterable[Sequence]) -> tuple[list[list], int]:
    rows = [list(row) for row in pixels]
    width = len(rows[0]) if rows else 0
    if any(len(row) != width for row in rows):
        raise ValueError("all rows of an image must have the same length")
    return rows, width


def _document(magic: str, rows: list[list[str]], width: int, max_value: bool) -> str:
    lines = [magic, f"{width} {len(rows)}"]
    if max_value:
        lines.append(str(COLOR_SPACE_MAX))
    header = "\n".join(lines) + "\n"
    body = "".join("".join(f"{cell} " for cell in row) + "\n" for row in rows)
    return header + body


def format_pbm(pixels: Iterable[Sequence]) -> str:
    """Plain portable bitmap (P1) text for rows of truthy/falsy pixels."""
    rows, width = _rows(pixels)
    cells = [[str(int(bool(value))) for value in row] for row in rows]
    return _document("P1", cells, width, max_value=False)


def format_pgm(pixels: Iterable[Sequence[int]]) -> str:
    """Plain portable graymap (P2) text for rows of 8-bit gray levels."""
    rows, width = _rows(pixels)
    for row in rows:
        for value in row:
            if not 0 <= value <= COLOR_SPACE_MAX:
                raise ValueError(f"gray level out of range: {value}")
    cells = [[str(int(value)) for value in row] for row in rows]
    return _document("P2", cells, width, max_value=True)


def format_ppm(pixels: Iterable[Sequence[int]]) -> str:
    """Plain portable pixmap (P3) text for rows of packed RGBA colours."""
    rows, width = _rows(pixels)
    cells = [
        [" ".join(str(c) for c in unpack_rgba(color)[:3]) for color in row]
        for row in rows
    ]
    return _document("P3", cells, width, max_value=True)


def output_name(width: int, height: int, extension: str) -> str:
    """File name used for a generated image of the given size."""
    return f"image{width}x{height}.{extension}"


_DEFAULT_SIZE = {"pbm": 8, "pgm": 256, "ppm": 256}

_GENERATORS = {
    "pbm": (checkerboard, format_pbm),
    "pgm": (xor_pattern, format_pgm),
    "ppm": (gradient, format_ppm),
}


def _dimension(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"dimension must not be negative: {text}")
    return value


def main(argv: Sequence[str] | None = None) -> int:
    """Generate a procedural image and save it in the current directory."""
    parser = argparse.ArgumentParser(
        prog="rasterlab-netpbm",
        description="Generate a procedural Netpbm image.",
    )
    parser.add_argument("format", choices=sorted(_GENERATORS))
    parser.add_argument("width", nargs="?", type=_dimension)
    parser.add_argument("height", nargs="?", type=_dimension)
    args = parser.parse_args(argv)

    width = _DEFAULT_SIZE[args.format] if args.width is None else args.width
    height = width if args.height is None else args.height

    generate, render = _GENERATORS[args.format]
    pixels = generate(width, height)

    if args.format == "pbm":
        for row in pixels:
            print("".join(f"{int(value)} " for value in row))

    path = Path(output_name(width, height, args.format))
    with path.open("w", encoding="ascii", newline="\n") as handle:
        handle.write(render(pixels))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Image export, colour filters and a tinted three-panel triptych."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from PIL import Image, ImageChops

BACKGROUND_GRAY = 31

TRIPTYCH_TINTS: tuple[tuple[float, float, float, float], ...] = (
    (1.0, 0.0, 0.0, 1.0),
    (0.0, 1.0, 0.0, 1.0),
    (0.0, 0.0, 1.0, 1.0),
)


def export_name(name: str, extension: str, now: datetime | None = None) -> str:
    """Unique, ordered file name: name-YYMMDD-HHMMSS-mmm.extension."""
    now = now if now is not None else datetime.now()
    stamp = now.strftime("-%y%m%d-%H%M%S-") + f"{now.microsecond // 1000:03d}"
    return f"{name}{stamp}.{extension}"


def export_image(
    image: Image.Image, name: str, extension: str, now: datetime | None = None
) -> Path:
    """Save an image under a time-stamped name and return its path."""
    path = Path(export_name(name, extension, now))
    image.save(path)
    return path


def invert(image: Image.Image) -> Image.Image:
    """Complement of every colour component; alpha is kept as it is."""
    if image.mode in ("RGB", "L"):
        return ImageChops.invert(image)
    if image.mode == "RGBA":
        r, g, b, a = image.split()
        rgb = ImageChops.invert(Image.merge("RGB", (r, g, b)))
        return Image.merge("RGBA", (*rgb.split(), a))
    return invert(image.convert("RGB"))


def tint(image: Image.Image, color: Sequence[float]) -> Image.Image:
    """Multiply each component by a normalized RGBA tint."""
    if len(color) != 4:
        raise ValueError("a tint needs four components (r, g, b, a)")
    for component in color:
        if not 0.0 <= component <= 1.0:
            raise ValueError(f"tint component out of range: {component}")
    bands = image.convert("RGBA").split()
    scaled = [
        band.point(lambda value, factor=factor: round(value * factor))
        for band, factor in zip(bands, color)
    ]
    result = Image.merge("RGBA", scaled)
    return result.convert("RGB") if image.mode == "RGB" else result


def crop_triptych(
    image: Image.Image, width: int, height: int
) -> tuple[Image.Image, Image.Image, Image.Image]:
    """Left, centre and right panels cut side by side from the top of an image."""
    if width <= 0 or height <= 0:
        raise ValueError("panel dimensions must be positive")
    if image.width < 3 * width or image.height < height:
        raise ValueError("source image too small for three panels")
    left, center, right = (
        image.crop((k * width, 0, (k + 1) * width, height)) for k in range(3)
    )
    return left, center, right


def triptych_window_size(
    source_width: int, source_height: int, offset_horizontal: int, offset_vertical: int
) -> tuple[int, int]:
    """Window size fitting the source image plus the spacing around the panels."""
    return (
        source_width + offset_horizontal * 4,
        source_height + offset_vertical * 2,
    )


def compose_triptych(
    image: Image.Image,
    width: int = 256,
    height: int = 256,
    offset_horizontal: int = 32,
    offset_vertical: int = 32,
) -> Image.Image:
    """Three panels tinted red, green and blue, spaced on a dark background."""
    panels = crop_triptych(image, width, height)
    size = triptych_window_size(
        image.width, image.height, offset_horizontal, offset_vertical
    )
    canvas = Image.new("RGB", size, (BACKGROUND_GRAY,) * 3)
    for k, (panel, color) in enumerate(zip(panels, TRIPTYCH_TINTS)):
        x = width * k + offset_horizontal * (k + 1)
        canvas.paste(tint(panel.convert("RGB"), color), (x, offset_vertical))
    return canvas
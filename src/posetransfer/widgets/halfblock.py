"""Render Pillow images into terminal cells with upper-half-block glyphs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PIL import Image
from rich.color import Color
from rich.style import Style
from rich.text import Text

if TYPE_CHECKING:
    from collections.abc import Iterator

UPPER_HALF = "▀"

# Backdrop behind the transparent parts of an editor surface.
BACKDROP = (15, 11, 30)


def flatten(image: Image.Image, background: tuple[int, int, int] = BACKDROP) -> Image.Image:
    """Composite an RGBA image over a solid colour and return it as RGB."""
    base = Image.new("RGBA", image.size, (*background, 255))
    base.alpha_composite(image.convert("RGBA"))
    return base.convert("RGB")


def _cell_pairs(img: Image.Image) -> Iterator[list[tuple[tuple[int, int, int], tuple[int, int, int]]]]:
    width, height = img.size
    px = img.load()
    for y in range(0, height, 2):
        row = []
        for x in range(width):
            top = px[x, y]
            bottom = px[x, y + 1] if y + 1 < height else top
            row.append((top, bottom))
        yield row


def image_to_text(image: Image.Image, background: tuple[int, int, int] = BACKDROP) -> Text:
    """Turn an image into rich ``Text``; each cell shows two stacked pixels."""
    img = flatten(image, background)
    text = Text(no_wrap=True, overflow="crop")
    styles: dict[tuple[tuple[int, int, int], tuple[int, int, int]], Style] = {}
    first = True
    for row in _cell_pairs(img):
        if not first:
            text.append("\n")
        first = False
        for pair in row:
            style = styles.get(pair)
            if style is None:
                style = Style(color=Color.from_rgb(*pair[0]), bgcolor=Color.from_rgb(*pair[1]))
                styles[pair] = style
            text.append(UPPER_HALF, style=style)
    return text

"""Convert an image to ASCII art sized for a terminal."""

from __future__ import annotations

import sys

from PIL import Image

ASCII_CHARS = "@#S%?*+;:,."
TERM_ASPECT_RATIO = 2.0
MAX_WIDTH = 150
MAX_HEIGHT = 40


def scaled_dimensions(
    width: int,
    height: int,
    max_width: int = MAX_WIDTH,
    max_height: int = MAX_HEIGHT,
    aspect: float = TERM_ASPECT_RATIO,
) -> tuple[int, int]:
    """Return the character grid size for an image, correcting for tall terminal cells."""
    if width <= 0 or height <= 0:
        raise ValueError("image dimensions must be positive")
    image_aspect = width / height
    if max_width / max_height > image_aspect * aspect:
        return int(max_height * image_aspect * aspect), max_height
    return max_width, int(max_width / image_aspect / aspect)


def intensity_char(r: int, g: int, b: int) -> str:
    """Map an RGB colour to a character; bright colours map to dense characters."""
    intensity = min(255, max(0, int(0.299 * r + 0.587 * g + 0.114 * b)))
    index = int((len(ASCII_CHARS) - 1) * (1.0 - intensity / 255.0))
    return ASCII_CHARS[index]


def image_to_ascii(
    image: Image.Image,
    max_width: int = MAX_WIDTH,
    max_height: int = MAX_HEIGHT,
) -> list[str]:
    """Return the rows of ASCII art for ``image``."""
    rgb = image.convert("RGB")
    width, height = rgb.size
    cols, rows = scaled_dimensions(width, height, max_width, max_height)
    pixels = rgb.load()
    return [
        "".join(
            intensity_char(
                *pixels[
                    min(int(x * width / cols), width - 1),
                    min(int(y * height / rows), height - 1),
                ]
            )
            for x in range(cols)
        )
        for y in range(rows)
    ]


def main(argv: list[str] | None = None) -> int:
    """Print an image file given on the command line as ASCII art."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("Usage: imgascii <path-to-image>", file=sys.stderr)
        return 1
    with Image.open(args[0]) as image:
        rgb = image.convert("RGB")
    print(f"Hex representation (first 100 chars): {rgb.tobytes().hex()[:100]}")
    cols, rows = scaled_dimensions(*rgb.size)
    print(f"ASCII art dimensions: {cols}x{rows}")
    for row in image_to_ascii(rgb):
        print(row)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
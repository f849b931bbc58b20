import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

import numpy as np
from PIL import Image, UnidentifiedImageError

from termpic.errors import DecodeError, FileReadError, PathError

logger = logging.getLogger(__name__)

_WIDE_GREY_MODES = {"I", "I;16", "I;16B", "I;16L"}


@dataclass(frozen=True)
class SourceImage:
    """Read-only RGB pixels of shape (height, width, 3), addressed by (x, y).

    ``origin`` is the top-left corner of the bounding rectangle the pixels came
    from. Decoded files always start at (0, 0).
    """

    pixels: np.ndarray
    origin: tuple[int, int] = (0, 0)

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    def at(self, x: int, y: int) -> tuple[int, int, int]:
        r, g, b = self.pixels[y, x]
        return (int(r), int(g), int(b))

    @classmethod
    def from_pil(cls, image: Image.Image) -> "SourceImage":
        if image.mode in _WIDE_GREY_MODES:
            # 16-bit samples keep their high byte; convert("RGB") would clip them to white
            grey = (np.asarray(image).astype(np.int64) >> 8).clip(0, 255).astype(np.uint8)
            arr = np.repeat(grey[:, :, np.newaxis], 3, axis=2)
        else:
            # Palette and alpha images are flattened; alpha is dropped
            arr = np.array(image.convert("RGB"), dtype=np.uint8)
        arr.flags.writeable = False
        return cls(pixels=arr)


def open_image(fp: BinaryIO) -> SourceImage:
    """Decode the first frame of an image from a binary stream."""
    try:
        image = Image.open(fp)
        image.load()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError) as e:
        # Pillow reports truncated or corrupt data as OSError/SyntaxError, oversized images as a bomb
        raise DecodeError(f"the file isn't a valid image: {e}") from e
    source = SourceImage.from_pil(image)
    logger.debug("decoded %s image, %dx%d", image.format, source.width, source.height)
    return source


def load_image(path: str | Path) -> SourceImage:
    path = Path(path)
    if not path.exists():
        raise PathError(f"file does not exist: {path}")
    try:
        f = path.open("rb")
    except OSError as e:
        raise FileReadError(f"failed to open file: {e}") from e
    with f:
        return open_image(f)

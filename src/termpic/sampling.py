import math
from typing import NamedTuple

import numpy as np

from termpic.geometry import FittedGrid
from termpic.image import SourceImage

Colour = tuple[int, int, int]


class SampledFrame(NamedTuple):
    top: np.ndarray  # (cells_tall, cells_wide, 3) uint8
    bottom: np.ndarray | None  # same shape, half-block only
    valid: np.ndarray  # (cells_tall, cells_wide) bool, False where the cell is skipped


def scale_factors(image: SourceImage, grid: FittedGrid) -> tuple[float, float]:
    return image.width / grid.cells_wide, image.height / grid.cells_tall


def source_coords(
    image: SourceImage, grid: FittedGrid, cell_x: int, cell_y: int, half_block: bool = False
) -> tuple[int, int, int] | None:
    """Map a cell to its nearest source pixel as (x, y, bottom_y).

    ``bottom_y`` is the second row sampled in half-block mode and equals ``y``
    otherwise. Returns None when any of the coordinates fall outside the image.
    """
    scale_x, scale_y = scale_factors(image, grid)
    src_x = math.floor(cell_x * scale_x)
    src_y = math.floor(cell_y * scale_y)
    src_y_bottom = src_y + math.floor(scale_y / 2) if half_block else src_y
    if src_x >= image.width or src_y >= image.height or src_y_bottom >= image.height:
        return None
    return src_x, src_y, src_y_bottom


def sample(
    image: SourceImage, grid: FittedGrid, cell_x: int, cell_y: int, half_block: bool = False
) -> tuple[Colour, Colour] | Colour | None:
    """Nearest-neighbour colour(s) for one cell: (top, bottom) in half-block mode, else one colour."""
    coords = source_coords(image, grid, cell_x, cell_y, half_block)
    if coords is None:
        return None
    x, y, y_bottom = coords
    if half_block:
        return image.at(x, y), image.at(x, y_bottom)
    return image.at(x, y)


def sample_grid(image: SourceImage, grid: FittedGrid, half_block: bool = False) -> SampledFrame:
    """Sample every cell at once. Same coordinates as :func:`sample`, vectorised."""
    scale_x, scale_y = scale_factors(image, grid)
    xs = np.floor(np.arange(grid.cells_wide) * scale_x).astype(np.intp)
    ys = np.floor(np.arange(grid.cells_tall) * scale_y).astype(np.intp)
    ys_bottom = ys + math.floor(scale_y / 2) if half_block else ys

    col_ok = xs < image.width
    row_ok = (ys < image.height) & (ys_bottom < image.height)
    valid = row_ok[:, None] & col_ok[None, :]

    # Clip only for indexing; clipped cells are masked out by ``valid``
    xs_c = np.minimum(xs, image.width - 1)
    ys_c = np.minimum(ys, image.height - 1)
    top = image.pixels[ys_c[:, None], xs_c[None, :]]
    bottom = None
    if half_block:
        yb_c = np.minimum(ys_bottom, image.height - 1)
        bottom = image.pixels[yb_c[:, None], xs_c[None, :]]
    return SampledFrame(top=top, bottom=bottom, valid=valid)

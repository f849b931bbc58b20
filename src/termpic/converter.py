import logging
from collections.abc import Iterator
from typing import TextIO

from PIL import Image

from termpic.colour import RESET, Colouriser, RenderMode, colouriser_for
from termpic.geometry import FittedGrid, fit, reserve_prompt_line
from termpic.image import SourceImage
from termpic.sampling import sample_grid

logger = logging.getLogger(__name__)


def _as_colouriser(mode: RenderMode | Colouriser) -> Colouriser:
    if isinstance(mode, RenderMode):
        return colouriser_for(mode)
    return mode


def render_lines(image: SourceImage, grid: FittedGrid, mode: RenderMode | Colouriser) -> Iterator[str]:
    """Yield one output row at a time, top to bottom.

    Cells are emitted left to right. Cells whose source pixel lies outside the
    image are skipped without output. Every row ends with a reset and a newline
    so colour never bleeds into the next row.
    """
    colouriser = _as_colouriser(mode)
    frame = sample_grid(image, grid, half_block=colouriser.half_block)
    skipped = 0
    for y in range(grid.cells_tall):
        parts = []
        for x in range(grid.cells_wide):
            if not frame.valid[y, x]:
                skipped += 1
                continue
            top = tuple(int(v) for v in frame.top[y, x])
            bottom = tuple(int(v) for v in frame.bottom[y, x]) if frame.bottom is not None else None
            parts.append(colouriser.encode(top, bottom))
        parts.append(RESET)
        parts.append("\n")
        yield "".join(parts)
    if skipped:
        logger.debug("skipped %d cells outside the image", skipped)


def render(image: SourceImage, grid: FittedGrid, mode: RenderMode | Colouriser, stream: TextIO) -> int:
    """Write the picture to ``stream`` row by row and return the number of rows written."""
    rows = 0
    for line in render_lines(image, grid, mode):
        stream.write(line)
        rows += 1
    stream.flush()
    return rows


def image_to_ansi(
    image: SourceImage | Image.Image,
    columns: int,
    rows: int,
    mode: RenderMode = RenderMode.HALF_BLOCK,
    ramp: str | None = None,
) -> str:
    """Fit ``image`` to a ``columns`` x ``rows`` terminal and render the whole frame to a string."""
    if isinstance(image, Image.Image):
        image = SourceImage.from_pil(image)
    colouriser = colouriser_for(mode, ramp)
    grid = fit(image.width, image.height, columns, reserve_prompt_line(rows), half_block=colouriser.half_block)
    return "".join(render_lines(image, grid, colouriser))

import logging
from dataclasses import dataclass

from termpic.errors import GeometryError

logger = logging.getLogger(__name__)

# Rows kept free at the bottom so the shell prompt does not scroll the picture away
PROMPT_RESERVE = 1


@dataclass(frozen=True)
class FittedGrid:
    cells_wide: int
    cells_tall: int


def reserve_prompt_line(rows: int) -> int:
    return rows - PROMPT_RESERVE


def fit(img_w: float, img_h: float, term_cols: float, term_rows: float, half_block: bool = False) -> FittedGrid:
    """Choose the largest grid of cells that fits the terminal and keeps the image's proportions.

    In half-block mode every row holds two stacked pixel rows, so the fitted width
    is doubled as the final step. The fit is made against half the column budget
    so that the doubled width still fits.
    """
    img_w, img_h = float(img_w), float(img_h)
    term_cols, term_rows = float(term_cols), float(term_rows)
    if img_w <= 0 or img_h <= 0:
        raise GeometryError(f"image has no area: {img_w:g}x{img_h:g}")
    if term_cols <= 0 or term_rows <= 0:
        raise GeometryError(f"terminal has no room to draw in: {term_cols:g}x{term_rows:g}")

    width_factor = 2.0 if half_block else 1.0
    budget_cols = term_cols / width_factor

    pixel_aspect = img_w / img_h
    terminal_aspect = term_rows / budget_cols

    if terminal_aspect * pixel_aspect <= 1.0:
        # Image is taller than the terminal in cell units: height is the limit
        cells_tall = term_rows
        cells_wide = cells_tall * pixel_aspect
        branch = "height"
    else:
        cells_wide = budget_cols
        cells_tall = cells_wide / pixel_aspect
        branch = "width"

    grid = FittedGrid(
        cells_wide=max(1, int(cells_wide * width_factor)),
        cells_tall=max(1, int(cells_tall)),
    )
    logger.debug(
        "fit %gx%g image into %gx%g terminal by %s: %dx%d cells",
        img_w,
        img_h,
        term_cols,
        term_rows,
        branch,
        grid.cells_wide,
        grid.cells_tall,
    )
    return grid

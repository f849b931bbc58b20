import itertools

import pytest

from termpic.errors import GeometryError
from termpic.geometry import PROMPT_RESERVE, FittedGrid, fit, reserve_prompt_line

IMAGE_SIZES = [(1, 1), (1, 1000), (1000, 1), (1600, 900), (900, 1600), (37, 91), (640, 480)]
TERMINAL_SIZES = [(1, 1), (7, 3), (80, 23), (200, 60), (300, 10)]


@pytest.mark.parametrize("half_block", [False, True])
def test_fit_never_exceeds_terminal(half_block):
    for (w, h), (cols, rows) in itertools.product(IMAGE_SIZES, TERMINAL_SIZES):
        grid = fit(w, h, cols, rows, half_block=half_block)
        assert 1 <= grid.cells_wide <= cols <= 2 * cols
        assert 1 <= grid.cells_tall <= rows


@pytest.mark.parametrize("half_block", [False, True])
@pytest.mark.parametrize("size", [(1600, 900), (900, 1600), (640, 480), (100, 100), (300, 200)])
def test_fit_preserves_aspect(size, half_block):
    w, h = size
    grid = fit(w, h, 200, 60, half_block=half_block)
    width = grid.cells_wide / 2 if half_block else grid.cells_wide
    assert width / grid.cells_tall == pytest.approx(w / h, rel=0.05)


def test_sixteen_by_nine_on_80x24_fits_by_width():
    grid = fit(1600, 900, 80, reserve_prompt_line(24), half_block=True)
    assert grid == FittedGrid(cells_wide=80, cells_tall=22)
    assert grid.cells_tall <= 23


def test_tall_image_fits_by_height():
    grid = fit(900, 1600, 80, 23, half_block=True)
    assert grid.cells_tall == 23
    assert grid.cells_wide == int(23 * 900 / 1600 * 2)


def test_flat_mode_does_not_double_width():
    assert fit(100, 100, 80, 20) == FittedGrid(cells_wide=20, cells_tall=20)
    assert fit(100, 100, 80, 20, half_block=True) == FittedGrid(cells_wide=40, cells_tall=20)


def test_tiny_terminal_gives_single_cell():
    assert fit(2, 2, 1, reserve_prompt_line(2), half_block=True) == FittedGrid(1, 1)


def test_accepts_float_dimensions():
    assert fit(100.0, 50.0, 40.0, 40.0) == fit(100, 50, 40, 40)


def test_reserve_prompt_line():
    assert reserve_prompt_line(24) == 24 - PROMPT_RESERVE


@pytest.mark.parametrize(
    "args",
    [(0, 10, 80, 24), (10, 0, 80, 24), (10, 10, 0, 24), (10, 10, 80, 0), (10, 10, 80, -1)],
)
def test_degenerate_input_raises(args):
    with pytest.raises(GeometryError):
        fit(*args)


def test_geometry_error_is_value_error():
    with pytest.raises(ValueError):
        fit(10, 10, 80, reserve_prompt_line(1))

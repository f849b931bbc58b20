import pytest
from PIL import Image

from termpic.image import SourceImage

RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
YELLOW = (255, 255, 0)


def make_image(rows):
    """Build a SourceImage from a list of rows of RGB tuples."""
    img = Image.new("RGB", (len(rows[0]), len(rows)))
    for y, row in enumerate(rows):
        for x, colour in enumerate(row):
            img.putpixel((x, y), colour)
    return SourceImage.from_pil(img)


@pytest.fixture
def quad_image():
    """2x2 image: red, green over blue, yellow."""
    return make_image([[RED, GREEN], [BLUE, YELLOW]])


@pytest.fixture
def png_path(tmp_path):
    path = tmp_path / "picture.png"
    Image.new("RGB", (32, 16), (10, 20, 30)).save(path)
    return path

import pytest

from cubscene.config import MapConfig
from cubscene.image import Image
from cubscene.textures import Texture, load_texture, load_textures
from cubscene.xpm import XpmError

XPM_TEXT = """/* XPM */
static char *tex[] = {
"2 2 2 1",
"a c #FF0000",
"b c #0000FF",
"ab",
"ba"
};
"""


@pytest.fixture
def xpm_path(tmp_path):
    path = tmp_path / "tex.xpm"
    path.write_text(XPM_TEXT)
    return path


def test_get_pixel_color_indexes_row_major():
    texture = Texture(2, 2, (1, 2, 3, 4))
    assert texture.get_pixel_color(1, 0) == 2
    assert texture.get_pixel_color(0, 1) == 3
    assert texture.get_pixel_color(1, 1) == 4


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (2, 0), (0, 2)])
def test_get_pixel_color_outside_is_zero(x, y):
    texture = Texture(2, 2, (7, 7, 7, 7))
    assert texture.get_pixel_color(x, y) == 0


def test_load_texture_reads_size_and_pixels(xpm_path):
    texture = load_texture(xpm_path)
    assert (texture.width, texture.height) == (2, 2)
    assert texture.get_pixel_color(0, 0) == 0xFF0000
    assert texture.get_pixel_color(1, 0) == 0x0000FF
    assert texture.get_pixel_color(0, 1) == 0x0000FF
    assert texture.get_pixel_color(1, 1) == 0xFF0000


def test_load_texture_matches_image_pixels(xpm_path):
    from cubscene.xpm import load_xpm

    image: Image = load_xpm(xpm_path)
    texture = load_texture(xpm_path)
    for y in range(image.height):
        for x in range(image.width):
            assert texture.get_pixel_color(x, y) == image.get_pixel(x, y)


def test_load_texture_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_texture(tmp_path / "missing.xpm")


def test_load_textures_all_directions(xpm_path):
    config = MapConfig(
        north_texture_path=str(xpm_path),
        south_texture_path=str(xpm_path),
        west_texture_path=str(xpm_path),
        east_texture_path=str(xpm_path),
    )
    textures = load_textures(config)
    assert set(textures) == {"north", "south", "west", "east"}
    assert textures["east"].get_pixel_color(0, 0) == 0xFF0000


def test_load_textures_missing_path(xpm_path):
    config = MapConfig(
        north_texture_path=str(xpm_path),
        south_texture_path=str(xpm_path),
        west_texture_path=str(xpm_path),
    )
    with pytest.raises(XpmError):
        load_textures(config)


def test_load_textures_bad_file(xpm_path, tmp_path):
    config = MapConfig(
        north_texture_path=str(xpm_path),
        south_texture_path=str(tmp_path / "nope.xpm"),
        west_texture_path=str(xpm_path),
        east_texture_path=str(xpm_path),
    )
    with pytest.raises(XpmError):
        load_textures(config)